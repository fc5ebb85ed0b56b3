"""dotctl media — recency-based play/pause and ledger inspection."""

import sys
from typing import Annotated

import typer
from rich.table import Table

from dotctl.cli._helpers import (
    console,
    err_console,
    fail,
    load_config_safe,
    setup_logging,
)
from dotctl.config import ConfigError, load_config
from dotctl.media import (
    PlayerctlNotFoundError,
    build_arbiter,
    take_snapshot,
)

app = typer.Typer(name="media", help="Media player play/pause arbitration.")


@app.command("play-pause")
def play_pause(
    dry_run: Annotated[
        bool, typer.Option("--dry-run", "-n", help="Decide and record state, but send nothing")
    ] = False,
) -> None:
    """Pause the most recently started player, or resume the most recent paused one."""
    arbiter = build_arbiter(load_config_safe())
    try:
        decision = arbiter.run(dry_run=dry_run)
    except PlayerctlNotFoundError as e:
        fail(str(e))
    if dry_run:
        console.print(f"[DRY-RUN] {decision.describe()}")


@app.command()
def status() -> None:
    """Show players, their status and when they last started."""
    arbiter = build_arbiter(load_config_safe())
    try:
        snapshot = take_snapshot(arbiter.control)
    except PlayerctlNotFoundError as e:
        fail(str(e))
    arbiter.ledger.store.load()
    started = dict(arbiter.ledger.entries())

    if not snapshot:
        console.print("[yellow]No playing or paused players.[/yellow]")
        return
    table = Table(title="Media players")
    table.add_column("Player")
    table.add_column("Status")
    table.add_column("Last started")
    for player, state in snapshot.items():
        table.add_row(player, state.value, str(started.get(player, "-")))
    console.print(table)


@app.command()
def order() -> None:
    """Print the play-order ledger, oldest first."""
    arbiter = build_arbiter(load_config_safe())
    arbiter.ledger.store.load()
    entries = arbiter.ledger.entries()
    if not entries:
        console.print("No order file yet")
        return
    for player, timestamp in entries:
        console.print(f"{player}:{timestamp}", highlight=False)


@app.command()
def reset() -> None:
    """Forget the play order and the previous snapshot."""
    arbiter = build_arbiter(load_config_safe())
    removed = [
        store.path.name
        for store in (arbiter.ledger.store, arbiter.previous)
        if store.remove()
    ]
    if removed:
        console.print(f"Removed: {', '.join(removed)}")
    else:
        console.print("Nothing to remove.")


def smart_play_pause() -> None:
    """Entry point for hotkeys: no arguments, exit 0 unless playerctl is missing."""
    setup_logging()
    try:
        build_arbiter(load_config()).run()
    except (ConfigError, PlayerctlNotFoundError) as e:
        err_console.print(f"Error: {e}")
        sys.exit(1)
