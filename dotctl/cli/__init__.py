"""dotctl CLI — Hyprland/Arch dotfiles management."""

from pathlib import Path
from typing import Annotated

import typer

from dotctl import __version__
from dotctl.cli._helpers import console, set_config_path, setup_logging
from dotctl.cli._install import run_install
from dotctl.cli.media import app as media_app
from dotctl.cli.monitor import app as monitor_app
from dotctl.cli.packages import app as packages_app
from dotctl.cli.theme import app as theme_app
from dotctl.installer import BACKUP, DELETE, SKIP

app = typer.Typer(
    name="dotctl",
    help="Hyprland/Arch dotfiles: installer, package lists, media and monitor helpers.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"dotctl {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V",
            help="Show version",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging on stderr")] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Config file (default ~/.config/dotctl/config.yml)")
    ] = None,
) -> None:
    """dotctl — dotfiles for a Hyprland desktop on Arch."""
    setup_logging(verbose)
    set_config_path(config)


# ── Top-level commands ─────────────────────────────────────


@app.command()
def install(
    backup: Annotated[bool, typer.Option("--backup", "-b", help="Back up conflicting configs")] = False,
    delete: Annotated[bool, typer.Option("--delete", "-d", help="Delete conflicting configs")] = False,
    skip: Annotated[bool, typer.Option("--skip", "-s", help="Skip conflicting configs")] = False,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Don't ask; back up conflicts")] = False,
    preview: Annotated[bool, typer.Option("--preview", "-p", help="Only show what would change")] = False,
) -> None:
    """Symlink dotfiles/config/* into ~/.config."""
    chosen = [m for m, flag in ((BACKUP, backup), (DELETE, delete), (SKIP, skip)) if flag]
    if len(chosen) > 1:
        console.print("[red]Error:[/red] --backup, --delete and --skip are exclusive")
        raise typer.Exit(1)
    run_install(mode=chosen[0] if chosen else None, yes=yes, preview=preview)


# ── Register command groups ────────────────────────────────

app.add_typer(media_app)
app.add_typer(monitor_app)
app.add_typer(theme_app)
app.add_typer(packages_app)
