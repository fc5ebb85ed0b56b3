"""Key-value stores behind the play-order ledger and the previous snapshot.

Values are strings. Iteration order is insertion order, so ``delete`` then
``put`` moves a key to the end (the ledger relies on this).
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

log = logging.getLogger(__name__)


class MemoryStore:
    """In-memory store. ``load``/``save`` are no-ops."""

    def __init__(self, data: Mapping[str, object] | None = None) -> None:
        self._data: dict[str, str] = {}
        for key, value in (data or {}).items():
            self.put(key, value)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._data.get(key, default)

    def put(self, key: str, value: object) -> None:
        self._data[key] = str(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def scan(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs in insertion order."""
        return list(self._data.items())

    def replace(self, data: Mapping[str, object]) -> None:
        """Drop every entry and store ``data`` instead."""
        self._data = {}
        for key, value in data.items():
            self.put(key, value)

    def load(self) -> None:
        pass

    def save(self) -> None:
        pass

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class FileStore(MemoryStore):
    """Store persisted as ``<key>:<value>`` lines in a plain text file.

    Lines are split on the last colon, since keys are player ids that may
    contain one. A missing file loads as empty. The file is created on the
    first ``save``.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)

    def load(self) -> None:
        self._data = {}
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            return
        for line in text.splitlines():
            if not line.strip():
                continue
            key, sep, value = line.rpartition(":")
            if not sep or not key:
                log.debug("Skipping malformed line in %s: %r", self.path, line)
                continue
            # later duplicates win and move to the end
            self.delete(key)
            self.put(key, value)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # unique temp name per save
        with tempfile.NamedTemporaryFile(
            "w", dir=self.path.parent, prefix=f".{self.path.name}.", delete=False
        ) as f:
            f.write("".join(f"{k}:{v}\n" for k, v in self._data.items()))
        try:
            os.replace(f.name, self.path)
        except OSError:
            Path(f.name).unlink(missing_ok=True)
            raise

    def remove(self) -> bool:
        """Delete the backing file. Returns True if it existed."""
        self._data = {}
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        return True
