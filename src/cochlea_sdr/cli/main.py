from __future__ import annotations

import typer

from .base import configure_logging
from .commands.neurogram import app as neurogram_app
from .commands.sdr import app as sdr_app

configure_logging()
app = typer.Typer(
    help="Encode audio into sparse distributed representations",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(sdr_app, name="sdr")
app.add_typer(neurogram_app, name="neurogram")


def main() -> None:
    """Main entry point for package CLI.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
