"""Friend commands: add, remove, accept."""

from __future__ import annotations

from typing import Annotated

import typer

from steambot.cli._helpers import ConfigOption, console, open_client

app = typer.Typer(help="Manage the bot's friend list.")

SteamIdArg = Annotated[str, typer.Argument(help="SteamID64 of the other user")]


@app.command("add")
def friend_add(steam_id: SteamIdArg, config: ConfigOption = None) -> None:
    """Send a friend request."""
    with open_client(config, need_session=True, need_api_key=False) as client:
        client.add_friend(steam_id)
    console.print(f"[green]Friend request sent[/green] to {steam_id}.")


@app.command("remove")
def friend_remove(steam_id: SteamIdArg, config: ConfigOption = None) -> None:
    """Remove a friend."""
    with open_client(config, need_session=True, need_api_key=False) as client:
        client.remove_friend(steam_id)
    console.print(f"[green]Removed[/green] {steam_id}.")


@app.command("accept")
def friend_accept(steam_id: SteamIdArg, config: ConfigOption = None) -> None:
    """Accept a pending friend request."""
    with open_client(config, need_session=True, need_api_key=False) as client:
        client.accept_friend_request(steam_id)
    console.print(f"[green]Accepted[/green] friend request from {steam_id}.")
