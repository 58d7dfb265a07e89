"""
lgsolver — Entry point.

Solve a linear equation system from the command line and optionally write
the HTML and LaTeX derivations to files.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from lgsolver import InputError, solve_system
from lgsolver.config import DEFAULT_SETTINGS, SettingsError
from lgsolver.parsing import split_rows

app = typer.Typer(add_completion=False)


@app.callback()
def cli() -> None:
    """Gauss-Jordan solver for linear equation systems."""


@app.command()
def solve(
    matrix: str = typer.Argument(..., help='Matrix rows separated by ";", e.g. "1 2; 3 4".'),
    vector: str = typer.Argument(..., help='Right-hand side, e.g. "5 6".'),
    precision: str = typer.Option(
        str(DEFAULT_SETTINGS["precision"]), "--precision", "-p",
        help='Digits after the decimal separator (1-13), or "exact".',
    ),
    theme: str = typer.Option(DEFAULT_SETTINGS["theme"], "--theme"),
    html: Optional[Path] = typer.Option(None, "--html", help="Write the HTML derivation here."),
    latex: Optional[Path] = typer.Option(None, "--latex", help="Write the LaTeX derivation here."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Solve Mx = b and print the solution."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")

    try:
        result = solve_system(split_rows(matrix), vector.split(), precision, theme=theme)
    except (InputError, SettingsError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    if html is not None:
        html.write_text(result["markup"], encoding="utf-8")
        typer.echo(f"Wrote HTML derivation: {html}")
    if latex is not None:
        latex.write_text(result["latex"], encoding="utf-8")
        typer.echo(f"Wrote LaTeX derivation: {latex}")

    typer.echo(result["final_answer"])
    summary = result["summary"]
    typer.echo(
        f"[{summary['arithmetic']}, rank {summary['rank']}, "
        f"{summary['total_steps']} steps, verification {summary['validation_status']}]"
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
