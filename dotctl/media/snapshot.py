"""Player state snapshots."""

from __future__ import annotations

from enum import Enum


class PlaybackStatus(Enum):
    PLAYING = "Playing"
    PAUSED = "Paused"
    OTHER = "Other"

    @classmethod
    def from_token(cls, token: str | None) -> PlaybackStatus:
        """Map a playerctl status token; anything unrecognised is OTHER."""
        token = (token or "").strip()
        for status in (cls.PLAYING, cls.PAUSED):
            if token == status.value:
                return status
        return cls.OTHER


# player id -> status, in enumeration order
Snapshot = dict[str, PlaybackStatus]


def take_snapshot(control) -> Snapshot:
    """Query every player and keep those that are Playing or Paused."""
    snapshot: Snapshot = {}
    for player in control.list_players():
        status = PlaybackStatus.from_token(control.status(player))
        if status is PlaybackStatus.OTHER:
            continue
        snapshot[player] = status
    return snapshot


def partition(snapshot: Snapshot) -> tuple[list[str], list[str]]:
    """Split a snapshot into (playing, paused) player lists."""
    playing = [p for p, s in snapshot.items() if s is PlaybackStatus.PLAYING]
    paused = [p for p, s in snapshot.items() if s is PlaybackStatus.PAUSED]
    return playing, paused


def load_snapshot(store) -> Snapshot:
    """Read a persisted snapshot; unknown tokens become OTHER."""
    return {player: PlaybackStatus.from_token(token) for player, token in store.scan()}


def save_snapshot(store, snapshot: Snapshot) -> None:
    """Overwrite the store with snapshot and persist it."""
    store.replace({player: status.value for player, status in snapshot.items()})
    store.save()
