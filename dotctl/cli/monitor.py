"""dotctl monitor — cycle Hyprland monitor profiles."""

import subprocess
from typing import Annotated

import typer

from dotctl.cli._helpers import console, fail, load_config_safe
from dotctl.monitors import MonitorSwitcher, ProfileError, reload_hyprland

app = typer.Typer(name="monitor", help="Hyprland monitor profiles.")


def _switcher() -> MonitorSwitcher:
    return MonitorSwitcher.from_config(load_config_safe())


@app.command()
def switch(
    no_reload: Annotated[
        bool, typer.Option("--no-reload", help="Don't reload Hyprland after switching")
    ] = False,
) -> None:
    """Switch to the next monitor profile."""
    switcher = _switcher()
    try:
        name, index, count = switcher.switch()
    except ProfileError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("[yellow]Create some .conf files in that directory first[/yellow]")
        raise typer.Exit(1) from None

    console.print(f"[green]Switched to monitor profile: {name}[/green]")
    console.print(f"[blue]Profile {index + 1} of {count}[/blue]")

    if no_reload:
        return
    console.print("[blue]Reloading Hyprland configuration...[/blue]")
    try:
        if reload_hyprland():
            console.print("[green]Hyprland configuration reloaded[/green]")
        else:
            console.print("[yellow]hyprctl not found - please reload Hyprland manually[/yellow]")
    except subprocess.CalledProcessError as e:
        fail(f"hyprctl reload exited {e.returncode}")


@app.command("list")
def list_() -> None:
    """List available monitor profiles."""
    switcher = _switcher()
    try:
        profiles = switcher.profiles()
    except ProfileError as e:
        fail(str(e))
    if not profiles:
        console.print(f"[yellow]No monitor profiles found in {switcher.profiles_dir}[/yellow]")
        raise typer.Exit(1)
    active = switcher.current()
    console.print("[blue]Available monitor profiles:[/blue]")
    for i, name in enumerate(profiles, start=1):
        marker = " [green]*[/green]" if name == active else ""
        console.print(f"  {i}. {name}{marker}")


@app.command()
def current() -> None:
    """Show the active monitor profile."""
    active = _switcher().current()
    if active is None:
        console.print("[yellow]No active monitor profile[/yellow]")
    else:
        console.print(f"[green]Current active profile: {active}[/green]")
