"""dotctl packages — sync installed packages to the dotfiles lists."""

from typing import Annotated

import typer

from dotctl import pkgsync
from dotctl.cli._helpers import console, dotfiles_dir, fail, load_config_safe

app = typer.Typer(name="packages", help="Package list synchronisation (pacman/AUR).")


@app.command()
def sync(
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing package lists")] = False,
    preview: Annotated[
        bool, typer.Option("--preview", "-p", help="Show what would be synced without writing files")
    ] = False,
) -> None:
    """Write pacman-packages.txt and aur-packages.txt from installed packages."""
    root = dotfiles_dir(load_config_safe())
    if not root.is_dir():
        fail(f"Dotfiles directory not found: {root}")

    for path in pkgsync.ensure_ignore_files(root):
        console.print(f"[blue]Creating {path.name} with default ignore patterns[/blue]")

    console.print("[blue]Syncing package lists...[/blue]")
    try:
        lists = pkgsync.apply_ignores(root, pkgsync.query_packages())
    except pkgsync.PackageSyncError as e:
        fail(str(e))

    if preview:
        console.print("[yellow]PREVIEW MODE - No files will be written[/yellow]\n")
        for label, packages in (("Pacman", lists.native), ("AUR", lists.aur)):
            console.print(f"[blue]{label} packages that would be synced:[/blue]")
            for line in pkgsync.preview_lines(packages):
                console.print(line, highlight=False)
            console.print()
        return

    if pkgsync.existing_lists(root) and not force:
        if not typer.confirm("Package list files already exist. Overwrite?", default=False):
            console.print("Sync cancelled.")
            return

    for path in pkgsync.write_lists(root, lists):
        console.print(f"[blue]Wrote {path}[/blue]")
    console.print("[green]Package sync complete![/green]")
    console.print(f"[blue]Pacman packages: {len(lists.native)}[/blue]")
    console.print(f"[blue]AUR packages: {len(lists.aur)}[/blue]")
