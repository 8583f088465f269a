# Copyright (c) Syntropy Systems
"""Main CLI entry point for slmbench."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from slmbench.cli.doctor import doctor
from slmbench.cli.list_cmd import list_catalogs
from slmbench.cli.run import run

app = typer.Typer(
    name="slmbench",
    help=(
        "Benchmark small language models on a local inference server "
        "across prompts and sampling configurations."
    ),
    no_args_is_help=True,
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Benchmark small language models."""
    configure_logging(verbose)


# Register commands
_ = app.command()(run)
_ = app.command(name="list")(list_catalogs)
_ = app.command()(doctor)


if __name__ == "__main__":
    app()
