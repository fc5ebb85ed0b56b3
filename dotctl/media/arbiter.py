"""Recency-based play/pause arbiter.

One hotkey press acts on exactly one player: pause whatever started most
recently, otherwise resume the most recently started paused player,
otherwise fall back to playerctl's own play-pause.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from dotctl.config import cache_path
from dotctl.media.ledger import PlayOrderLedger
from dotctl.media.playerctl import Playerctl
from dotctl.media.snapshot import (
    Snapshot,
    load_snapshot,
    partition,
    save_snapshot,
    take_snapshot,
)
from dotctl.media.store import FileStore
from dotctl.media.transitions import newly_playing

log = logging.getLogger(__name__)

PAUSE = "pause"
PLAY = "play"
TOGGLE = "play-pause"


@dataclass(frozen=True)
class Decision:
    """What to send to the media control layer."""

    action: str  # PAUSE, PLAY or TOGGLE
    target: str | None = None

    def describe(self) -> str:
        if self.action == PAUSE:
            return f"Pausing most recent playing: {self.target}"
        if self.action == PLAY:
            return f"Resuming most recent paused: {self.target}"
        return "No paused players, using default playerctl behavior"


def decide(snapshot: Snapshot, ledger: PlayOrderLedger) -> Decision:
    """Pick the single action for this snapshot."""
    playing, paused = partition(snapshot)
    if playing:
        return Decision(PAUSE, ledger.most_recent(playing))
    if paused:
        return Decision(PLAY, ledger.most_recent(paused))
    return Decision(TOGGLE)


def execute(control, decision: Decision) -> int:
    """Send the decision through control; returns the command's exit code."""
    if decision.action == PAUSE:
        return control.pause(decision.target)
    if decision.action == PLAY:
        return control.play(decision.target)
    return control.play_pause()


class MediaArbiter:
    """Runs snapshot -> transition detection -> persistence -> decision."""

    def __init__(
        self,
        control,
        ledger: PlayOrderLedger,
        previous,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.control = control
        self.ledger = ledger
        self.previous = previous
        self.clock = clock

    def observe(self) -> Snapshot:
        """Snapshot players, record new starts and persist the snapshot."""
        snapshot = take_snapshot(self.control)
        playing, paused = partition(snapshot)
        log.debug("Playing: %s", " ".join(playing))
        log.debug("Paused: %s", " ".join(paused))

        self.ledger.store.load()
        self.previous.load()
        started = newly_playing(snapshot, load_snapshot(self.previous))
        if started:
            now = self.clock()
            for player in started:
                log.debug("%s just started playing", player)
                self.ledger.record_start(player, now)
            self.ledger.store.save()

        save_snapshot(self.previous, snapshot)
        return snapshot

    def run(self, dry_run: bool = False) -> Decision:
        snapshot = self.observe()
        decision = decide(snapshot, self.ledger)
        log.debug(decision.describe())
        if not dry_run:
            execute(self.control, decision)
        if log.isEnabledFor(logging.DEBUG):
            order = self.ledger.entries()
            log.debug("Current play order: %s", ", ".join(f"{p}:{t}" for p, t in order) or "empty")
        return decision


def build_arbiter(config, control=None) -> MediaArbiter:
    """Create an arbiter backed by the cache files named in config."""
    media = config["media"]
    if control is None:
        control = Playerctl(timeout=float(media.get("timeout", 5)))
    ledger = PlayOrderLedger(
        FileStore(cache_path(config, media["order_file"])),
        fallback=media.get("fallback", "last"),
    )
    previous = FileStore(cache_path(config, media["state_file"]))
    return MediaArbiter(control, ledger, previous)
