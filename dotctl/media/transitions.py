"""Detect players that started playing since the previous run."""

from dotctl.media.snapshot import PlaybackStatus, Snapshot


def newly_playing(current: Snapshot, previous: Snapshot) -> list[str]:
    """Players Playing in current but not in previous (absent counts as not Playing)."""
    return [
        player for player, status in current.items()
        if status is PlaybackStatus.PLAYING
        and previous.get(player) is not PlaybackStatus.PLAYING
    ]
