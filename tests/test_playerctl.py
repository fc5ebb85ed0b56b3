"""Tests for dotctl.media.playerctl against a mock playerctl binary."""

import pytest
from conftest import make_mock_script

from dotctl.media.playerctl import Playerctl, PlayerctlNotFoundError
from dotctl.media.snapshot import PlaybackStatus, take_snapshot


class TestQueries:
    def test_list_players(self, fake_playerctl):
        fake_playerctl.set_players({"spotify": "Playing", "firefox.instance_1_7": "Paused"})
        assert Playerctl().list_players() == ["spotify", "firefox.instance_1_7"]

    def test_no_players(self, fake_playerctl):
        assert Playerctl().list_players() == []

    def test_status(self, fake_playerctl):
        fake_playerctl.set_players({"mpv": "Paused"})
        assert Playerctl().status("mpv") == "Paused"

    def test_status_vanished_player(self, fake_playerctl):
        fake_playerctl.set_players({"mpv": "Paused"})
        assert Playerctl().status("gone") is None

    def test_snapshot_drops_stopped(self, fake_playerctl):
        fake_playerctl.set_players({"a": "Playing", "b": "Stopped", "c": "Paused"})
        assert take_snapshot(Playerctl()) == {
            "a": PlaybackStatus.PLAYING,
            "c": PlaybackStatus.PAUSED,
        }


class TestCommands:
    def test_pause_play(self, fake_playerctl):
        ctl = Playerctl()
        assert ctl.pause("spotify") == 0
        assert ctl.play("mpv") == 0
        assert fake_playerctl.commands() == ["-p spotify pause", "-p mpv play"]

    def test_play_pause(self, fake_playerctl):
        Playerctl().play_pause()
        assert fake_playerctl.commands() == ["play-pause"]

    def test_failure_returns_code(self, mock_bin):
        make_mock_script(mock_bin / "playerctl", "#!/usr/bin/env bash\necho nope >&2\nexit 3\n")
        assert Playerctl().pause("x") == 3


class TestMissingBinary:
    def test_not_found(self, tmp_path):
        with pytest.raises(PlayerctlNotFoundError):
            Playerctl(binary=str(tmp_path / "no-such-playerctl")).list_players()


class TestTimeout:
    def test_status_timeout_drops_player(self, mock_bin):
        make_mock_script(mock_bin / "playerctl", """#!/usr/bin/env bash
if [[ "$1" == "-l" ]]; then echo slow; exit 0; fi
exec sleep 5
""")
        ctl = Playerctl(timeout=0.2)
        assert ctl.status("slow") is None
        assert take_snapshot(ctl) == {}
