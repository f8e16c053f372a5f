from __future__ import annotations

import typer


def list_langs():
    """List the word lists installed in the data directory."""
    from didyoumean.suggest.wordlists import data_dir, installed_langs

    langs = installed_langs()
    if not langs:
        typer.echo(f"No word lists installed in {data_dir()}")
        return
    typer.echo("Installed languages:")
    for lang in langs:
        typer.echo(f" - {lang}")
