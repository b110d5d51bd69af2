"""Steam Guard commands: code, confirm-key."""

from __future__ import annotations

import time
from typing import Annotated

import typer

from steambot.cli._helpers import console, load_credentials_or_exit


def code() -> None:
    """Print the current Steam Guard login code."""
    from steambot.guard import TIME_STEP, GuardDecodeError, generate_login_code

    creds = load_credentials_or_exit(need_api_key=False)
    if not creds.shared_secret:
        console.print("[red]Error:[/red] STEAM_SHARED_SECRET is not set.")
        raise typer.Exit(1)

    now = time.time()
    try:
        login_code = generate_login_code(creds.shared_secret, clock=lambda: now)
    except GuardDecodeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    remaining = TIME_STEP - int(now) % TIME_STEP
    console.print(f"[bold]{login_code}[/bold] [dim](valid for {remaining}s)[/dim]")


def confirm_key(
    tag: Annotated[
        str, typer.Option("--tag", help="Confirmation tag (conf, details, allow, cancel)")
    ] = "conf",
    timestamp: Annotated[
        int | None, typer.Option("--time", help="Unix time to sign (default: now)")
    ] = None,
) -> None:
    """Print a mobile confirmation key for TAG."""
    from steambot.guard import GuardDecodeError, generate_confirmation_key

    creds = load_credentials_or_exit(need_api_key=False)
    if not creds.identity_secret:
        console.print("[red]Error:[/red] STEAM_IDENTITY_SECRET is not set.")
        raise typer.Exit(1)

    when = int(time.time()) if timestamp is None else timestamp
    try:
        key = generate_confirmation_key(creds.identity_secret, tag, when)
    except GuardDecodeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    console.print(key, soft_wrap=True)
