"""CLI entrypoint that wires the mirror command into a Typer app."""

import typer

from ..commands.mirror.cli import mirror

app = typer.Typer(add_completion=False, help="Clone/fetch every repository of a GitLab group.")

app.command()(mirror)


def main() -> None:
    app()
