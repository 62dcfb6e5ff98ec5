"""CLI for mirroring every project of a GitLab group."""

from __future__ import annotations

import logging

import typer

from ...config.settings import get_settings
from ...core.constants import APP_NAME, APP_VERSION
from ...core.logging_config import setup_logging
from .service import mirror_group


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


def mirror(
    group: str = typer.Option(..., "--group", "-g", help="GitLab group name"),
    host: str | None = typer.Option(None, "--host", "-H", help="GitLab host name [default: gitlab.com]"),
    access_token: str | None = typer.Option(None, "--access-token", "-t", help="GitLab access token"),
    target_directory: str | None = typer.Option(
        None, "--target-directory", "-d", help="Target directory [default: .]"
    ),
    first_page: int | None = typer.Option(None, "--first-page", help="Page index to start listing from [default: 0]"),
    strict: bool = typer.Option(False, "--strict", help="Exit with status 1 if anything failed"),
    debug: bool = typer.Option(False, "--debug", help="Set log level as DEBUG"),
    version: bool = typer.Option(  # noqa: ARG001
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Clone every project of a GitLab group, or fetch the ones already cloned."""
    setup_logging(logging.DEBUG if debug else logging.INFO)

    s = get_settings()
    _token = access_token if access_token is not None else s.gitlab_token
    if not _token:
        raise typer.BadParameter("an access token is required (or set GITLAB_TOKEN)", param_hint="'--access-token'")

    ok = mirror_group(
        host=host or s.gitlab_host,
        group=group,
        token=_token,
        target_directory=target_directory or s.gitlab_target_directory,
        first_page=first_page if first_page is not None else s.gitlab_first_page,
    )
    if strict and not ok:
        raise typer.Exit(code=1)
