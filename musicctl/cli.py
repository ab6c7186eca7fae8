from __future__ import annotations

import asyncio

import typer

from musicctl.app import Command, run
from musicctl.config import load_config
from musicctl.errors import MusicCtlError
from musicctl.logging_setup import setup_logging


app = typer.Typer(add_completion=False)


@app.command()
def musicctl(
    command: Command = typer.Argument(Command.INFO, case_sensitive=False, help="What to do"),
    instance: str | None = typer.Option(
        None, "--instance", "-i", help="Player display name, e.g. 'vlc (MPRIS)' or RadioTrayNG"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging and output"),
):
    """
    Looks for a running music player and issues the command to it.
    """
    cfg = load_config()
    if instance is not None:
        cfg = cfg.__class__(**{**cfg.__dict__, "instance": instance})

    setup_logging(debug)
    try:
        asyncio.run(run(cfg, command, debug=debug))
    except MusicCtlError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
