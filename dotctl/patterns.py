"""Glob-style allow/deny matching for package and config names."""

from collections.abc import Iterable
from fnmatch import fnmatchcase


def parse_patterns(text: str) -> list[str]:
    """Parse an ignore file: one glob per line, blank lines and # comments skipped."""
    patterns = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def matches(name: str, patterns: Iterable[str]) -> bool:
    """Return True if name matches any shell glob in patterns."""
    return any(fnmatchcase(name, p) for p in patterns)


def filter_names(names: Iterable[str], deny: Iterable[str]) -> list[str]:
    """Return names not matched by any deny pattern, order preserved."""
    deny = list(deny)
    return [n for n in names if not matches(n, deny)]
