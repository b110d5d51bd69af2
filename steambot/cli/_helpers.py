"""Shared CLI helpers: error handling, config loading, and client management."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from steambot.client import SteamClient
    from steambot.loader import Credentials
    from steambot.schema import BotConfig

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to config.yaml (default: ~/.steambot/config.yaml)"),
]


def load_config_or_exit(config_path: Path | None) -> BotConfig:
    from steambot.loader import ConfigLoadError, load_config

    try:
        return load_config(config_path)
    except ConfigLoadError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None


def load_credentials_or_exit(*, need_api_key: bool = True) -> Credentials:
    from steambot.loader import ConfigLoadError, load_credentials

    creds = load_credentials()
    if need_api_key:
        try:
            creds.require_api_key()
        except ConfigLoadError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from None
    return creds


@contextmanager
def open_client(
    config_path: Path | None,
    *,
    login: bool = False,
    need_session: bool = False,
    need_api_key: bool = True,
) -> Iterator[SteamClient]:
    """Yield a configured client; Steam and Guard errors become a clean exit.

    With *need_session*, logs in first unless ``STEAM_SESSION_ID`` is set.
    """
    from steambot.client import SteamApiError
    from steambot.guard import GuardDecodeError
    from steambot.loader import build_client

    config = load_config_or_exit(config_path)
    creds = load_credentials_or_exit(need_api_key=need_api_key)
    if need_session and not creds.session_id:
        login = True

    with build_client(config, creds) as client:
        try:
            if login:
                if not creds.can_login:
                    console.print(
                        "[red]Error:[/red] STEAM_USERNAME and STEAM_PASSWORD are required."
                    )
                    raise typer.Exit(1)
                client.login(creds.username, creds.password)
            yield client
        except (SteamApiError, GuardDecodeError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from None
