"""Install command implementation — symlink dotfiles/config into ~/.config."""

from pathlib import Path

import typer

from dotctl import installer
from dotctl.cli._helpers import console, dotfiles_dir, fail, load_config_safe

_STATUS_STYLE = {
    installer.NEW: "green",
    installer.CONFLICT: "yellow",
    installer.SYMLINK_REPLACE: "blue",
}

_CHOICES = {"0": installer.BACKUP, "1": installer.DELETE, "2": installer.SKIP}


def _ask_mode(item: installer.PlanItem) -> str:
    console.print(f"[yellow]Conflict found: {item.name} already exists[/yellow]")
    console.print("What would you like to do?")
    console.print("  \\[0] Backup existing file (default)")
    console.print("  \\[1] Delete existing file")
    console.print("  \\[2] Skip this file")
    answer = typer.prompt("Choice", default="0", show_default=True)
    return _CHOICES.get(answer.strip(), installer.BACKUP)


def show_preview(items) -> None:
    console.print("[blue]Preview of changes:[/blue]\n")
    for item in items:
        style = _STATUS_STYLE[item.status]
        console.print(f"[{style}]\\[{item.status}][/{style}] {item.name}")
    console.print()


def run_install(
    mode: str | None = None,
    yes: bool = False,
    preview: bool = False,
    config_dir: Path | None = None,
) -> None:
    """Symlink every dotfiles/config entry into config_dir (~/.config)."""
    root = dotfiles_dir(load_config_safe())
    config_dir = config_dir or Path.home() / ".config"
    try:
        items = installer.plan(root, config_dir)
    except installer.InstallError as e:
        fail(str(e))

    console.print("[blue]Dotfiles Installer[/blue]")
    console.print("==================\n")

    # A mode flag means unattended, as does --yes
    silent = mode is not None or yes
    if preview or not silent:
        show_preview(items)
    if preview:
        return
    if not silent:
        console.print(f"[yellow]This will create symlinks from {root / 'config'} to {config_dir}[/yellow]")
        if not typer.confirm("Continue?", default=False):
            console.print("Installation cancelled.")
            return

    effective = mode or installer.BACKUP
    choose = (lambda _item: effective) if silent else _ask_mode
    for item, message in installer.install(items, choose):
        console.print(message)

    console.print("[green]Installation complete![/green]")
    if effective == installer.BACKUP:
        console.print("[blue]Backed up files are saved with .bak.\\[timestamp] extensions[/blue]")
