"""Play-order ledger: when each player last started playing."""

from __future__ import annotations

import logging
from collections.abc import Iterable

log = logging.getLogger(__name__)

FALLBACK_LAST = "last"
FALLBACK_SORTED = "sorted"
FALLBACKS = (FALLBACK_LAST, FALLBACK_SORTED)


class PlayOrderLedger:
    """Ordered player -> unix timestamp record, one entry per player.

    ``fallback`` decides the pick when no candidate has an entry:
    ``last`` takes the last candidate in the caller's order, ``sorted`` the
    lexicographically smallest id.
    """

    def __init__(self, store, fallback: str = FALLBACK_LAST) -> None:
        if fallback not in FALLBACKS:
            msg = f"Unknown fallback {fallback!r} (expected one of {', '.join(FALLBACKS)})"
            raise ValueError(msg)
        self.store = store
        self.fallback = fallback

    def record_start(self, player: str, now: float) -> None:
        """Replace any entry for player with (player, now) at the end."""
        timestamp = int(now)
        self.store.delete(player)
        self.store.put(player, timestamp)
        log.debug("Added %s to play order at %d", player, timestamp)

    def entries(self) -> list[tuple[str, int]]:
        """Return (player, timestamp) pairs in ledger order."""
        result = []
        for player, value in self.store.scan():
            try:
                result.append((player, int(value)))
            except ValueError:
                log.warning("Ignoring ledger entry %s with bad timestamp %r", player, value)
        return result

    def most_recent(self, candidates: Iterable[str]) -> str:
        """Return the candidate that started most recently.

        Equal timestamps go to the entry later in the ledger. Raises
        ValueError on an empty candidate list.
        """
        candidates = list(candidates)
        if not candidates:
            msg = "most_recent() needs at least one candidate"
            raise ValueError(msg)

        wanted = set(candidates)
        best = None
        latest = None
        for player, timestamp in self.entries():
            if player in wanted and (latest is None or timestamp >= latest):
                best, latest = player, timestamp

        if best is not None:
            return best
        if self.fallback == FALLBACK_SORTED:
            return min(candidates)
        return candidates[-1]
