"""Tests for letterplay.config – environment driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from letterplay.config import DEFAULT_PORT, Settings, default_public_root


class TestDefaults:
    def test_empty_environment(self):
        s = Settings.from_env({})
        assert s.public_root == default_public_root()
        assert s.audio_dir == default_public_root() / "audio"
        assert s.host == "127.0.0.1"
        assert s.port == DEFAULT_PORT == 3000
        assert s.log_level == "INFO"

    def test_packaged_root_exists(self):
        assert (default_public_root() / "index.html").exists()


class TestOverrides:
    def test_public_root_moves_audio_dir(self, tmp_path: Path):
        s = Settings.from_env({"LETTERPLAY_PUBLIC_ROOT": str(tmp_path)})
        assert s.public_root == tmp_path
        assert s.audio_dir == tmp_path / "audio"

    def test_explicit_audio_dir(self, tmp_path: Path):
        s = Settings.from_env({"LETTERPLAY_AUDIO_DIR": str(tmp_path / "sounds")})
        assert s.audio_dir == tmp_path / "sounds"

    def test_host_and_port(self):
        s = Settings.from_env({"LETTERPLAY_HOST": "0.0.0.0", "LETTERPLAY_PORT": "8080"})
        assert s.host == "0.0.0.0"
        assert s.port == 8080

    def test_log_level_is_uppercased(self):
        assert Settings.from_env({"LETTERPLAY_LOG_LEVEL": "debug"}).log_level == "DEBUG"

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("LETTERPLAY_PORT", "4000")
        assert Settings.from_env().port == 4000


class TestInvalid:
    def test_port_not_integer(self):
        with pytest.raises(ValueError, match="LETTERPLAY_PORT"):
            Settings.from_env({"LETTERPLAY_PORT": "abc"})

    @pytest.mark.parametrize("port", ["0", "70000", "-1"])
    def test_port_out_of_range(self, port: str):
        with pytest.raises(ValueError, match="LETTERPLAY_PORT"):
            Settings.from_env({"LETTERPLAY_PORT": port})

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="LETTERPLAY_LOG_LEVEL"):
            Settings.from_env({"LETTERPLAY_LOG_LEVEL": "loud"})
