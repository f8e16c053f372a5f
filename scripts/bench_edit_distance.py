"""
Time the edit distance function and a full dictionary scan.

Example:
  python scripts/bench_edit_distance.py distance --repeat 20000
  python scripts/bench_edit_distance.py scan --word-list ~/.config/didyoumean/en --query recieve
"""

from __future__ import annotations

import sys
import timeit
from pathlib import Path

import typer

# Allow running directly from the repo without requiring `pip install -e .`
_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path and _SRC.exists():
    sys.path.insert(0, str(_SRC))

from didyoumean.suggest.dictionary import Dictionary
from didyoumean.suggest.engine import SuggestionEngine
from didyoumean.utils.config import SuggestConfig
from didyoumean.utils.distance import distance


app = typer.Typer(add_completion=False, no_args_is_help=True)

PAIRS = [
    ("sitting", "kitten"),
    ("geek", "gesek"),
    ("sunday", "saturday"),
    ("tset", "test"),
    ("abcdefghijklmnop", "ponmlkjihgfedcba"),
]


@app.command("distance")
def bench_distance(
    repeat: int = typer.Option(10000, min=1),
    bound: int = typer.Option(None, min=0),
):
    """Time distance() over a fixed set of word pairs."""
    for a, b in PAIRS:
        secs = timeit.timeit(lambda: distance(a, b, bound=bound), number=repeat)
        typer.echo(f"{a:>18} {b:>18}  {secs / repeat * 1e6:8.2f} us/call")


@app.command("scan")
def bench_scan(
    word_list: Path = typer.Option(..., exists=True, dir_okay=False),
    query: str = typer.Option(...),
    max_distance: int = typer.Option(2, min=0),
    workers: int = typer.Option(1, min=1),
    repeat: int = typer.Option(5, min=1),
):
    """Time a full suggestion request against a word list."""
    dictionary = Dictionary.from_file(word_list)
    engine = SuggestionEngine(dictionary, SuggestConfig(max_distance=max_distance, workers=workers))
    secs = timeit.timeit(lambda: engine.suggest(query), number=repeat)
    typer.echo(f"{len(dictionary)} words, {secs / repeat * 1e3:.1f} ms/query")


def main():
    app()


if __name__ == "__main__":
    main()
