"""CLI principal (Typer).

Sin subcomando ejecuta el pipeline una vez: fetch -> parse -> score. Todo
error del pipeline se reporta en stderr y termina con exit status 1.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli import doctor
from cli.ui_components import build_summary_table, print_error
from core.config import AppSettings
from core.domain.errors import SimilarityError
from core.services.similarity_pipeline import run_similarity

app = typer.Typer(
    help="Fetch the Advent of Code 2024 day 1 input and print its similarity score.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    details: bool = typer.Option(False, "--details", help="Show a summary table after the score."),
) -> None:
    configure_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    try:
        result = run_similarity(AppSettings.load())
    except SimilarityError as exc:
        print_error(_err_console, str(exc))
        raise typer.Exit(code=1) from exc

    _console.print(f"Similarity score: {result.score}", highlight=False, soft_wrap=True)
    if details:
        _console.print(build_summary_table(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
