"""Shared fixtures and helpers: mock binaries on PATH, isolated config/cache."""

import os
import stat

import pytest
import yaml

# ---------------------------------------------------------------------------
# Shared helpers (importable by test files)
# ---------------------------------------------------------------------------


def read_log(log_file):
    """Return list of commands from a log file.

    Mock binaries append their argv to a log file; tests assert on it.
    """
    if log_file.exists():
        return [line.strip() for line in log_file.read_text().splitlines() if line.strip()]
    return []


def make_mock_script(path, content="#!/usr/bin/env bash\nexit 0\n"):
    """Write an executable shell script to path."""
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IEXEC)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_bin(tmp_path, monkeypatch):
    """Create a mock bin directory and prepend it to PATH."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}:{os.environ['PATH']}")
    return bin_dir


class FakePlayerctl:
    """Handle on a mock playerctl whose players live in a text file."""

    def __init__(self, players_file, log_file):
        self.players_file = players_file
        self.log_file = log_file

    def set_players(self, players):
        """players: mapping id -> status token, in playerctl -l order."""
        self.players_file.write_text("".join(f"{p}:{s}\n" for p, s in players.items()))

    def calls(self):
        return read_log(self.log_file)

    def commands(self):
        """Calls other than -l and status queries."""
        return [c for c in self.calls() if c != "-l" and not c.endswith(" status")]


@pytest.fixture()
def fake_playerctl(tmp_path, mock_bin):
    """Mock playerctl that lists players from a file and logs every call."""
    players_file = tmp_path / "players"
    players_file.write_text("")
    log_file = tmp_path / "playerctl.log"
    make_mock_script(mock_bin / "playerctl", f"""#!/usr/bin/env bash
echo "$@" >> "{log_file}"
STATE="{players_file}"
if [[ "$1" == "-l" ]]; then
    if [[ ! -s "$STATE" ]]; then
        echo "No players found" >&2
        exit 1
    fi
    sed 's/:[^:]*$//' "$STATE"
    exit 0
fi
if [[ "$1" == "-p" && "$3" == "status" ]]; then
    line=$(grep -F "$2:" "$STATE" | head -n1)
    if [[ -z "$line" ]]; then
        echo "No player could handle this command" >&2
        exit 1
    fi
    echo "${{line##*:}}"
    exit 0
fi
if [[ "$1" == "-p" || "$1" == "play-pause" ]]; then
    exit 0
fi
echo "mock: unhandled command: $*" >&2
exit 1
""")
    return FakePlayerctl(players_file, log_file)


@pytest.fixture()
def dotctl_env(tmp_path, monkeypatch):
    """Isolated HOME, cache dir and config file for dotctl.

    Returns a dict with the paths; the config file can be rewritten by
    tests through write_config().
    """
    home = tmp_path / "home"
    home.mkdir()
    cache = tmp_path / "cache"
    dotfiles = tmp_path / "dotfiles"
    dotfiles.mkdir()
    config_file = tmp_path / "config.yml"

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("DOTCTL_CACHE_DIR", str(cache))
    monkeypatch.setenv("DOTCTL_CONFIG", str(config_file))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("DOTCTL_DEBUG", raising=False)

    env = {
        "home": home,
        "cache": cache,
        "dotfiles": dotfiles,
        "config_file": config_file,
        "profiles": home / ".config" / "hypr" / "conf" / "monitors",
        "symlink": home / ".config" / "hypr" / "conf" / "monitor.conf",
    }
    write_config(env, {})
    return env


def write_config(env, extra):
    """Write config.yml for a dotctl_env, merging extra over the base."""
    data = {
        "dotfiles_dir": str(env["dotfiles"]),
        "monitors": {
            "profiles_dir": str(env["profiles"]),
            "symlink": str(env["symlink"]),
        },
    }
    data.update(extra)
    env["config_file"].write_text(yaml.safe_dump(data))
