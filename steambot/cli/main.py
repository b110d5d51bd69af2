"""Typer CLI for steambot — wiring hub for command modules."""

from __future__ import annotations

from typing import Annotated

import typer

from steambot.cli._helpers import console
from steambot.cli.confirm_cmd import app as confirm_app
from steambot.cli.friend_cmd import app as friend_app

app = typer.Typer(
    name="steambot",
    help="A rate-limited Steam bot client.",
    no_args_is_help=True,
)

# Sub-app registrations
app.add_typer(confirm_app, name="confirmations")
app.add_typer(friend_app, name="friend")


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def version_callback(value: bool) -> None:
    if value:
        from steambot import __version__

        console.print(f"steambot {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """steambot — a rate-limited Steam bot client."""
    from steambot._log import setup_logging

    setup_logging(verbose=verbose)


# ---------------------------------------------------------------------------
# Command registrations — plain functions from *_cmd modules
# ---------------------------------------------------------------------------

from steambot.cli.guard_cmd import code, confirm_key  # noqa: E402
from steambot.cli.query_cmd import games, inventory, profile, stats, validate  # noqa: E402

app.command()(code)
app.command("confirm-key")(confirm_key)
app.command()(validate)
app.command()(profile)
app.command()(inventory)
app.command()(games)
app.command()(stats)
