"""Mobile confirmation commands: list, accept, cancel."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from steambot.cli._helpers import ConfigOption, console, open_client

app = typer.Typer(help="List and answer pending mobile confirmations.")

SteamIdArg = Annotated[str, typer.Argument(help="SteamID64 of the bot account")]


@app.command("list")
def confirmations_list(steam_id: SteamIdArg, config: ConfigOption = None) -> None:
    """List pending confirmations."""
    with open_client(config, need_session=True, need_api_key=False) as client:
        pending = client.get_confirmations(steam_id)

    if not pending:
        console.print("No pending confirmations.")
        return

    table = Table(title=f"Pending Confirmations ({len(pending)})")
    table.add_column("ID", style="cyan")
    table.add_column("Type", justify="right")
    table.add_column("Headline")
    for conf in pending:
        table.add_row(conf.id, str(conf.type), conf.headline)
    console.print(table)


def _respond(steam_id: str, conf_ids: list[str], accept: bool, config: Path | None) -> None:
    verb = "Accepted" if accept else "Cancelled"
    with open_client(config, need_session=True, need_api_key=False) as client:
        pending = client.get_confirmations(steam_id)
        selected = [c for c in pending if not conf_ids or c.id in conf_ids]
        missing = set(conf_ids) - {c.id for c in selected}
        for conf in selected:
            client.respond_to_confirmation(steam_id, conf, accept=accept)
            console.print(f"[green]{verb}[/green] {conf.id} {conf.headline}")

    if missing:
        console.print(f"[yellow]Not found:[/yellow] {', '.join(sorted(missing))}")
        raise typer.Exit(1)
    if not selected:
        console.print("No pending confirmations.")


@app.command("accept")
def confirmations_accept(
    steam_id: SteamIdArg,
    conf_ids: Annotated[
        list[str] | None, typer.Argument(help="Confirmation ids (default: all pending)")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Accept pending confirmations."""
    _respond(steam_id, conf_ids or [], True, config)


@app.command("cancel")
def confirmations_cancel(
    steam_id: SteamIdArg,
    conf_ids: Annotated[
        list[str] | None, typer.Argument(help="Confirmation ids (default: all pending)")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Cancel pending confirmations."""
    _respond(steam_id, conf_ids or [], False, config)
