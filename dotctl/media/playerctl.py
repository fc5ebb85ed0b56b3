"""Thin wrapper around the playerctl CLI."""

from __future__ import annotations

import logging
import subprocess

log = logging.getLogger(__name__)


class PlayerctlNotFoundError(Exception):
    """Raised when the playerctl binary is not on PATH."""


class Playerctl:
    """Media control boundary: list players, query status, send commands."""

    def __init__(self, binary: str = "playerctl", timeout: float = 5.0) -> None:
        self.binary = binary
        self.timeout = timeout

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        cmd = [self.binary, *args]
        log.debug("Running: %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd, capture_output=True, text=True,
                check=False, timeout=self.timeout,
            )
        except FileNotFoundError:
            msg = f"{self.binary} not found in PATH"
            raise PlayerctlNotFoundError(msg) from None

    def list_players(self) -> list[str]:
        """Return player ids in playerctl's enumeration order."""
        result = self._run(["-l"])
        if result.returncode != 0:
            # "No players found" exits 1
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def status(self, player: str) -> str | None:
        """Return the raw status token for player, or None if it cannot be read."""
        try:
            result = self._run(["-p", player, "status"])
        except subprocess.TimeoutExpired:
            log.debug("Status query for %s timed out", player)
            return None
        if result.returncode != 0:
            log.debug("Status query for %s failed: %s", player, result.stderr.strip())
            return None
        return result.stdout.strip()

    def _command(self, args: list[str]) -> int:
        result = self._run(args)
        if result.returncode != 0:
            log.warning(
                "playerctl %s exited %d: %s",
                " ".join(args), result.returncode, result.stderr.strip(),
            )
        return result.returncode

    def pause(self, player: str) -> int:
        return self._command(["-p", player, "pause"])

    def play(self, player: str) -> int:
        return self._command(["-p", player, "play"])

    def play_pause(self) -> int:
        """Toggle whichever player playerctl selects by default."""
        return self._command(["play-pause"])
