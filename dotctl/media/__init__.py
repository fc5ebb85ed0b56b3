"""Media play/pause arbitration over playerctl.

Public API re-exported here.
"""

from dotctl.media.arbiter import (
    PAUSE,
    PLAY,
    TOGGLE,
    Decision,
    MediaArbiter,
    build_arbiter,
    decide,
    execute,
)
from dotctl.media.ledger import FALLBACKS, PlayOrderLedger
from dotctl.media.playerctl import Playerctl, PlayerctlNotFoundError
from dotctl.media.snapshot import (
    PlaybackStatus,
    Snapshot,
    load_snapshot,
    partition,
    save_snapshot,
    take_snapshot,
)
from dotctl.media.store import FileStore, MemoryStore
from dotctl.media.transitions import newly_playing

__all__ = [
    "FALLBACKS",
    "PAUSE",
    "PLAY",
    "TOGGLE",
    "Decision",
    "FileStore",
    "MediaArbiter",
    "MemoryStore",
    "PlayOrderLedger",
    "PlaybackStatus",
    "Playerctl",
    "PlayerctlNotFoundError",
    "Snapshot",
    "build_arbiter",
    "decide",
    "execute",
    "load_snapshot",
    "newly_playing",
    "partition",
    "save_snapshot",
    "take_snapshot",
]
