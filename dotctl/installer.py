"""Symlink dotfiles/config/* into ~/.config."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from dotctl.patterns import matches

log = logging.getLogger(__name__)

BACKUP = "backup"
DELETE = "delete"
SKIP = "skip"
MODES = (BACKUP, DELETE, SKIP)

NEW = "NEW"
CONFLICT = "CONFLICT"
SYMLINK_REPLACE = "SYMLINK REPLACE"

SKIP_PATTERNS = [
    "README.md",
    "install.sh",
    "safe-dotfiles-install.sh",
    "aur-packages.txt",
    "pacman-packages.txt",
    "*.txt",
    ".*",
]


class InstallError(Exception):
    """Raised when the dotfiles tree is unusable."""


@dataclass
class PlanItem:
    name: str
    source: Path
    target: Path
    status: str


def should_process(name: str) -> bool:
    return not matches(name, SKIP_PATTERNS)


def plan(dotfiles_dir: Path, config_dir: Path) -> list[PlanItem]:
    """List what installing would do for every entry of dotfiles_dir/config."""
    source_dir = Path(dotfiles_dir) / "config"
    if not source_dir.is_dir():
        msg = f"config directory not found: {source_dir}"
        raise InstallError(msg)

    items = []
    for source in sorted(source_dir.iterdir()):
        if not should_process(source.name):
            continue
        target = Path(config_dir) / source.name
        if target.is_symlink():
            status = SYMLINK_REPLACE
        elif target.exists():
            status = CONFLICT
        else:
            status = NEW
        items.append(PlanItem(source.name, source, target, status))
    return items


def backup_name(name: str, now: datetime) -> str:
    return f"{name}.bak.{now:%Y%m%d-%H%M%S}"


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def resolve_conflict(item: PlanItem, mode: str, now: datetime) -> str | None:
    """Clear the way for item's symlink.

    Returns a description of what was done, or None when the item is skipped.
    """
    if mode not in MODES:
        msg = f"Unknown conflict mode: {mode}"
        raise ValueError(msg)
    if mode == SKIP:
        return None
    if mode == DELETE:
        _remove(item.target)
        return f"Deleted existing: {item.name}"
    backup = item.target.with_name(backup_name(item.name, now))
    item.target.rename(backup)
    return f"Backed up: {item.name} -> {backup.name}"


def link(item: PlanItem) -> None:
    item.target.parent.mkdir(parents=True, exist_ok=True)
    item.target.symlink_to(item.source)


def install(
    items: list[PlanItem],
    choose_mode: Callable[[PlanItem], str],
    now: datetime | None = None,
) -> list[tuple[PlanItem, str]]:
    """Install every planned item.

    choose_mode is asked once per CONFLICT item. Returns (item, message)
    pairs in plan order, possibly several per item.
    """
    now = now or datetime.now()
    results = []
    for item in items:
        if item.status == CONFLICT:
            done = resolve_conflict(item, choose_mode(item), now)
            if done is None:
                results.append((item, f"Skipping: {item.name}"))
                continue
            log.info(done)
            results.append((item, done))
        elif item.status == SYMLINK_REPLACE:
            item.target.unlink()
        link(item)
        results.append((item, f"Creating symlink: {item.name}"))
    return results
