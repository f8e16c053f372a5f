from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from didyoumean.suggest.engine import SuggestionList
from didyoumean.suggest.wordlists import DEFAULT_LANG


def _read_stdin_word() -> str:
    if sys.stdin is None or sys.stdin.isatty():
        raise typer.BadParameter(
            "The WORD argument was not provided. Either provide it as an argument or pass it in from standard input.",
            param_hint="WORD",
        )
    return sys.stdin.readline()


def format_suggestions(result: SuggestionList, verbose: bool = False, clean_output: bool = False) -> list[str]:
    lines: list[str] = []
    if not clean_output:
        lines.append(typer.style("Did you mean?", fg=typer.colors.BLUE, bold=True))
    indent = len(str(len(result)))
    for i, cand in enumerate(result, start=1):
        line = cand.word
        if not clean_output:
            line = typer.style(f"{i:>{indent}}.", fg=typer.colors.MAGENTA) + " " + line
        if verbose:
            line += f" (edit distance: {cand.distance})"
        lines.append(line)
    return lines


def suggest_word(
    word: str = typer.Argument(None, help="Word to correct. Read from standard input when omitted."),
    number: int = typer.Option(None, "--number", "-n", min=1, help="Maximum number of suggestions [default: 5]."),
    max_distance: int = typer.Option(None, "--max-distance", "-d", min=0, help="Largest edit distance to accept [default: 2]."),
    lang: str = typer.Option(DEFAULT_LANG, "--lang", "-l", help="Locale code of the installed word list."),
    dictionary: Path = typer.Option(None, exists=True, dir_okay=False, help="Word list file (overrides --lang)."),
    case_sensitive: Optional[bool] = typer.Option(None, "--case-sensitive/--ignore-case"),
    workers: int = typer.Option(None, min=1, help="Scan length buckets in N worker processes."),
    config: Path = typer.Option(None, exists=True, dir_okay=False, help="YAML file with a 'suggest' section."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the edit distance of each suggestion."),
    clean_output: bool = typer.Option(False, "--clean-output", "-c", help="Print bare words, one per line."),
    progress: bool = typer.Option(False, help="Show a progress bar while scanning."),
    log_level: str = typer.Option("WARNING", help="DEBUG, INFO, WARNING, ERROR or CRITICAL."),
):
    """Suggest dictionary words close to WORD."""
    from didyoumean.suggest.engine import SuggestionEngine
    from didyoumean.suggest.errors import EmptyDictionary, InvalidConfiguration, WordListNotFound
    from didyoumean.suggest.wordlists import load_dictionary
    from didyoumean.utils.config import load_suggest_config
    from didyoumean.utils.log import set_log_level

    set_log_level(log_level)
    if word is None:
        word = _read_stdin_word()

    try:
        cfg = load_suggest_config(
            config,
            max_distance=max_distance,
            max_results=number,
            case_sensitive=case_sensitive,
            workers=workers,
        ).validate()
    except InvalidConfiguration as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        words = load_dictionary(lang=lang, path=dictionary, case_sensitive=cfg.case_sensitive)
        result = SuggestionEngine(words, cfg, show_progress=progress).suggest(word)
    except (WordListNotFound, EmptyDictionary) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if result.exact_match:
        if not clean_output:
            typer.echo(f'"{result.query}" is spelled correctly.')
        return
    if not result:
        if not clean_output:
            typer.echo(f"No suggestions within edit distance {cfg.max_distance}.")
        return
    for line in format_suggestions(result, verbose=verbose, clean_output=clean_output):
        typer.echo(line)
