"""Hyprland monitor profile switcher.

Profiles are ``*.conf`` files in a profiles directory; the active one is
symlinked to ``monitor.conf`` which hyprland.conf sources. The index of the
active profile is kept in a cache file so repeated switches cycle.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from dotctl.config import cache_path, expand

log = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when no usable monitor profile exists."""


class MonitorSwitcher:
    """Cycle the monitor.conf symlink through the available profiles."""

    def __init__(self, profiles_dir: Path, symlink: Path, state_file: Path) -> None:
        self.profiles_dir = Path(profiles_dir)
        self.symlink = Path(symlink)
        self.state_file = Path(state_file)

    @classmethod
    def from_config(cls, config) -> MonitorSwitcher:
        mon = config["monitors"]
        return cls(
            expand(mon["profiles_dir"]),
            expand(mon["symlink"]),
            cache_path(config, mon["state_file"]),
        )

    def profiles(self) -> list[str]:
        """Profile file names, sorted."""
        if not self.profiles_dir.is_dir():
            msg = f"Profiles directory does not exist: {self.profiles_dir}"
            raise ProfileError(msg)
        return sorted(p.name for p in self.profiles_dir.glob("*.conf") if p.is_file())

    def current(self) -> str | None:
        """Name of the profile monitor.conf points to, or None."""
        if not self.symlink.is_symlink():
            return None
        return Path(self.symlink.readlink()).name

    def current_index(self) -> int:
        """Last selected index; -1 when unknown so the next switch picks 0."""
        try:
            return int(self.state_file.read_text().strip())
        except (FileNotFoundError, ValueError):
            return -1

    def switch(self) -> tuple[str, int, int]:
        """Activate the next profile. Returns (name, index, count)."""
        self.profiles_dir.mkdir(parents=True, exist_ok=True)
        self.symlink.parent.mkdir(parents=True, exist_ok=True)
        self.state_file.parent.mkdir(parents=True, exist_ok=True)

        profiles = self.profiles()
        if not profiles:
            msg = f"No monitor profiles found in {self.profiles_dir}"
            raise ProfileError(msg)

        index = (self.current_index() + 1) % len(profiles)
        name = profiles[index]

        if self.symlink.is_symlink() or self.symlink.exists():
            self.symlink.unlink()
        self.symlink.symlink_to(self.profiles_dir / name)
        self.state_file.write_text(f"{index}\n")
        log.debug("Linked %s -> %s", self.symlink, name)
        return name, index, len(profiles)


def reload_hyprland() -> bool:
    """Run ``hyprctl reload``. Returns False if hyprctl is not installed."""
    if shutil.which("hyprctl") is None:
        log.warning("hyprctl not found - please reload Hyprland manually")
        return False
    subprocess.run(["hyprctl", "reload"], check=True, capture_output=True, text=True)
    return True
