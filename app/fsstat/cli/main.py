"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from fsstat import __version__
from fsstat.cli.commands import config, show

# Create main Typer app
app = typer.Typer(
    name="fsstat",
    help="Inspect filesystem metadata in the stat convention's shape.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fsstat version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """fsstat - inspect filesystem metadata.

    Reports stat/lstat results with the fields the host platform
    provides; absent fields are shown as null.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register commands
app.command("show")(show.show)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
