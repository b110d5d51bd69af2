"""Read-only commands: validate, profile, inventory, games, stats."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from steambot.cli._helpers import ConfigOption, console, open_client

SteamIdArg = Annotated[str, typer.Argument(help="SteamID64 of the player")]


def validate(
    config_file: Annotated[Path, typer.Argument(help="Path to config.yaml")],
) -> None:
    """Validate a config file and show the effective settings."""
    from steambot.loader import ConfigLoadError, load_config

    try:
        config = load_config(config_file)
    except ConfigLoadError as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1) from None

    table = Table(title=f"Config: {config_file}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Requests/Second", str(config.rate_limit.requests_per_second))
    table.add_row("Burst", str(config.rate_limit.burst))
    table.add_row("HTTP Timeout", f"{config.http.timeout:g}s")
    console.print(table)
    console.print("[green]Valid[/green]")


def profile(steam_id: SteamIdArg, config: ConfigOption = None) -> None:
    """Show a player's profile summary."""
    with open_client(config) as client:
        result = client.get_player_summaries(steam_id)

    if not result.players:
        console.print(f"No profile found for {steam_id}.")
        raise typer.Exit(1)

    table = Table(title="Player Summary")
    table.add_column("SteamID", style="cyan")
    table.add_column("Name")
    table.add_column("Profile URL")
    for player in result.players:
        table.add_row(player.steam_id, player.persona_name, player.profile_url)
    console.print(table)


def inventory(
    steam_id: SteamIdArg,
    app_id: Annotated[int, typer.Option("--app", help="App id (730 = CS2)")] = 730,
    context_id: Annotated[int, typer.Option("--context", help="Inventory context id")] = 2,
    config: ConfigOption = None,
) -> None:
    """List the items in a player's inventory."""
    with open_client(config, need_api_key=False) as client:
        result = client.get_player_inventory(steam_id, app_id, context_id)

    table = Table(title=f"Inventory {app_id}/{context_id} ({len(result.assets)} items)")
    table.add_column("Asset ID", style="cyan")
    table.add_column("Name")
    table.add_column("Amount", justify="right")
    for asset in result.assets:
        desc = result.describe(asset)
        name = (desc.market_hash_name or desc.name) if desc else "(unknown)"
        table.add_row(asset.asset_id, name, asset.amount)
    console.print(table)


def games(
    steam_id: SteamIdArg,
    recent: Annotated[bool, typer.Option("--recent", help="Only recently played games")] = False,
    config: ConfigOption = None,
) -> None:
    """List owned (or recently played) games."""
    with open_client(config) as client:
        if recent:
            result = client.get_recently_played_games(steam_id)
            game_list = result.response.games
            title = f"Recently Played ({result.response.total_count})"
        else:
            owned = client.get_owned_games(steam_id)
            game_list = owned.response.games
            title = f"Owned Games ({owned.response.game_count})"

    table = Table(title=title)
    table.add_column("App ID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Playtime (h)", justify="right")
    for game in game_list:
        table.add_row(str(game.app_id), game.name, f"{game.playtime_forever / 60:.1f}")
    console.print(table)


def stats(
    steam_id: SteamIdArg,
    app_id: Annotated[int, typer.Option("--app", help="App id")] = 730,
    config: ConfigOption = None,
) -> None:
    """Show a player's stats for one game."""
    with open_client(config) as client:
        result = client.get_user_stats_for_game(steam_id, app_id)

    player_stats = result.player_stats
    table = Table(title=f"{player_stats.game_name or app_id}: stats")
    table.add_column("Stat", style="cyan")
    table.add_column("Value", justify="right")
    for stat in player_stats.stats:
        table.add_row(stat.name, f"{stat.value:g}")
    console.print(table)
    achieved = sum(1 for a in player_stats.achievements if a.achieved)
    console.print(f"Achievements: {achieved}/{len(player_stats.achievements)}")
