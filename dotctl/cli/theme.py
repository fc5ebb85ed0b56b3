"""dotctl theme — GTK theme and color scheme."""

from typing import Annotated

import typer

from dotctl.cli._helpers import console, fail, load_config_safe
from dotctl.theme import ThemeError, apply_theme

app = typer.Typer(name="theme", help="Desktop theming (gsettings).")


@app.command()
def apply(
    gtk_theme: Annotated[str | None, typer.Option("--gtk-theme", "-t", help="GTK theme name")] = None,
    color_scheme: Annotated[
        str | None, typer.Option("--color-scheme", "-s", help="prefer-dark, prefer-light or default")
    ] = None,
) -> None:
    """Apply the GTK theme and color scheme."""
    theme = load_config_safe()["theme"]
    gtk_theme = gtk_theme or theme["gtk_theme"]
    color_scheme = color_scheme or theme["color_scheme"]
    try:
        apply_theme(gtk_theme, color_scheme)
    except ThemeError as e:
        fail(str(e))
    console.print(f"Theme set: [bold]{gtk_theme}[/bold] ({color_scheme})")
