from __future__ import annotations

import typer


def edit_distance(
    first: str = typer.Argument(...),
    second: str = typer.Argument(...),
    bound: int = typer.Option(None, min=0, help="Stop once the distance is known to exceed N."),
    case_sensitive: bool = typer.Option(True, "--case-sensitive/--ignore-case"),
):
    """Print the edit distance between two words."""
    from didyoumean.utils.distance import distance

    d = distance(first, second, bound=bound, case_sensitive=case_sensitive)
    typer.echo(f"exceeds bound {bound}" if d is None else str(d))
