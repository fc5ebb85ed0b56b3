"""Sync installed pacman/AUR packages into the dotfiles package lists.

Explicitly installed native packages go to pacman-packages.txt, foreign
(AUR) packages to aur-packages.txt. Names matching .pacmanignore /
.aurignore globs are left out.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from dotctl.patterns import filter_names, parse_patterns

log = logging.getLogger(__name__)

PACMAN_LIST = "pacman-packages.txt"
AUR_LIST = "aur-packages.txt"
PACMAN_IGNORE = ".pacmanignore"
AUR_IGNORE = ".aurignore"

PREVIEW_LIMIT = 20

DEFAULT_PACMAN_IGNORE = """\
# Hardware specific packages
nvidia*
amd-ucode
intel-ucode
mesa*
vulkan*
xf86-video*

# ASUS specific
asusctl
supergfxctl
rog-control-center

# System/distro specific
endeavouros-*
eos-*
archlinux-keyring
archlinux-wallpaper*

# Kernel packages (user should choose)
linux*

# Drivers that may be hardware specific
broadcom-wl*
rtl*
r8168*

# Microcode (CPU specific)
*-ucode

# Font packages (too many variants)
ttf-*
noto-fonts*
adobe-source*

# Language packs
hunspell-*
libreoffice-*-help
"""

DEFAULT_AUR_IGNORE = """\
# Hardware/brand specific
asusctl-git
supergfxctl-git
rog-control-center-git
g14-*
g15-*

# Distro specific
endeavouros-*
eos-*
garuda-*
manjaro-*

# Development versions that change frequently
*-git
*-bin
*-dev
*-nightly

# NVIDIA proprietary (hardware specific)
nvidia-*
optimus-*

# Personal/local packages
makepkg-*
aur-auto-vote*

# Font variants
ttf-*
otf-*
nerd-fonts*

# Theme variants (too subjective)
*-theme*
*-icons*
plymouth-*
"""

_HEADERS = {
    PACMAN_LIST: (
        "# Official Arch packages - generated on {date}\n"
        "# Run 'sudo pacman -S --needed $(cat pacman-packages.txt)' to install\n"
    ),
    AUR_LIST: (
        "# AUR packages - generated on {date}\n"
        "# Run 'yay -S --needed $(cat aur-packages.txt)' to install\n"
    ),
}


class PackageSyncError(Exception):
    """Raised when package queries cannot run."""


@dataclass
class PackageLists:
    native: list[str]
    aur: list[str]


def _pacman(*args: str) -> list[str]:
    try:
        result = subprocess.run(
            ["pacman", *args], capture_output=True, text=True, check=False,
        )
    except FileNotFoundError:
        msg = "This command only supports Arch Linux (pacman not found)"
        raise PackageSyncError(msg) from None
    # pacman -Qmq exits 1 when there are no foreign packages
    if result.returncode != 0 and result.stderr.strip():
        msg = f"pacman {' '.join(args)} failed: {result.stderr.strip()}"
        raise PackageSyncError(msg)
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def query_packages() -> PackageLists:
    """Return explicitly installed native packages and foreign packages, sorted."""
    explicit = _pacman("-Qeq")
    foreign = set(_pacman("-Qmq"))
    native = sorted(p for p in explicit if p not in foreign)
    log.debug("%d explicit packages, %d foreign", len(explicit), len(foreign))
    return PackageLists(native=native, aur=sorted(foreign))


def ensure_ignore_files(root: Path) -> list[Path]:
    """Create .pacmanignore / .aurignore with defaults if missing."""
    created = []
    for name, default in ((PACMAN_IGNORE, DEFAULT_PACMAN_IGNORE), (AUR_IGNORE, DEFAULT_AUR_IGNORE)):
        path = Path(root) / name
        if not path.exists():
            path.write_text(default)
            created.append(path)
    return created


def load_ignore(path: Path) -> list[str]:
    """Read ignore patterns from path; missing file means no patterns."""
    try:
        return parse_patterns(Path(path).read_text())
    except FileNotFoundError:
        return []


def apply_ignores(root: Path, lists: PackageLists) -> PackageLists:
    root = Path(root)
    return PackageLists(
        native=filter_names(lists.native, load_ignore(root / PACMAN_IGNORE)),
        aur=filter_names(lists.aur, load_ignore(root / AUR_IGNORE)),
    )


def render_list(name: str, packages: list[str], now: datetime | None = None) -> str:
    """Render a package list file with its generated header."""
    now = now or datetime.now()
    header = _HEADERS[name].format(date=now.strftime("%a %b %d %H:%M:%S %Y"))
    body = "".join(f"{p}\n" for p in packages)
    return f"{header}\n{body}"


def existing_lists(root: Path) -> list[Path]:
    root = Path(root)
    return [p for p in (root / PACMAN_LIST, root / AUR_LIST) if p.exists()]


def write_lists(root: Path, lists: PackageLists, now: datetime | None = None) -> list[Path]:
    """Write both package list files; returns the written paths."""
    root = Path(root)
    written = []
    for name, packages in ((PACMAN_LIST, lists.native), (AUR_LIST, lists.aur)):
        path = root / name
        path.write_text(render_list(name, packages, now))
        written.append(path)
    return written


def preview_lines(packages: list[str], limit: int = PREVIEW_LIMIT) -> list[str]:
    """First `limit` packages plus an '... and N more' line."""
    lines = list(packages[:limit])
    if len(packages) > limit:
        lines.append(f"... and {len(packages) - limit} more")
    return lines
