from __future__ import annotations

import typer

from didyoumean.cli import distance as distance_cmd
from didyoumean.cli import langs as langs_cmd
from didyoumean.cli import suggest as suggest_cmd

app = typer.Typer(help="didyoumean: suggest corrections for misspelled words.", no_args_is_help=True)

app.command("suggest")(suggest_cmd.suggest_word)
app.command("distance")(distance_cmd.edit_distance)
app.command("langs")(langs_cmd.list_langs)


def main():
    app()


if __name__ == "__main__":
    main()
