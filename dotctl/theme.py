"""Apply the GTK theme and color scheme through gsettings."""

from __future__ import annotations

import logging
import subprocess

log = logging.getLogger(__name__)

INTERFACE_SCHEMA = "org.gnome.desktop.interface"
ACTIVATION_VARS = ["DISPLAY", "WAYLAND_DISPLAY", "XDG_CURRENT_DESKTOP"]


class ThemeError(Exception):
    """Raised when gsettings is unavailable or rejects a key."""


def theme_commands(gtk_theme: str, color_scheme: str) -> list[list[str]]:
    return [
        ["dbus-update-activation-environment", "--systemd", *ACTIVATION_VARS],
        ["gsettings", "set", INTERFACE_SCHEMA, "gtk-theme", gtk_theme],
        ["gsettings", "set", INTERFACE_SCHEMA, "color-scheme", color_scheme],
    ]


def apply_theme(gtk_theme: str, color_scheme: str) -> None:
    """Export the session environment to systemd/dbus, then set the theme.

    The activation-environment step is best effort; gsettings failures raise
    ThemeError.
    """
    activation, *settings = theme_commands(gtk_theme, color_scheme)
    try:
        result = subprocess.run(activation, capture_output=True, text=True, check=False)
        if result.returncode != 0:
            log.warning("%s exited %d", activation[0], result.returncode)
    except FileNotFoundError:
        log.warning("%s not found, skipping environment update", activation[0])

    for cmd in settings:
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except FileNotFoundError:
            msg = "gsettings not found"
            raise ThemeError(msg) from None
        if result.returncode != 0:
            msg = f"{' '.join(cmd)} failed: {result.stderr.strip()}"
            raise ThemeError(msg)
        log.debug("Set %s = %s", cmd[3], cmd[4])
