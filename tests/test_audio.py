"""Tests for letterplay.core.audio – best-effort letter sample cache."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from letterplay.core.audio import LETTERS, AudioCache, PreloadResult, sample_path


# ---------------------------------------------------------------------------
# sample_path
# ---------------------------------------------------------------------------

class TestSamplePath:
    def test_lowercase_wav(self, tmp_path: Path):
        assert sample_path(tmp_path, "A") == tmp_path / "a.wav"

    def test_accepts_lowercase(self, tmp_path: Path):
        assert sample_path(tmp_path, "z") == tmp_path / "z.wav"


# ---------------------------------------------------------------------------
# preload
# ---------------------------------------------------------------------------

class TestPreload:
    def test_all_letters_loaded(self):
        cache = AudioCache()
        results = cache.preload(lambda letter: f"sample-{letter}")
        assert len(results) == 26
        assert all(r.loaded for r in results)
        assert cache.loaded_letters() == list(LETTERS)

    def test_failure_is_skipped_not_fatal(self, caplog: pytest.LogCaptureFixture):
        def loader(letter: str) -> str:
            if letter == "Q":
                raise FileNotFoundError("q.wav missing")
            return letter

        cache = AudioCache()
        with caplog.at_level(logging.WARNING):
            results = cache.preload(loader)

        q = next(r for r in results if r.letter == "Q")
        assert q == PreloadResult(letter="Q", loaded=False, error="q.wav missing")
        assert "Q" not in cache
        assert len(cache) == 25
        assert "Failed to preload audio for Q" in caplog.text

    def test_none_sample_is_skipped(self):
        cache = AudioCache()
        results = cache.preload(lambda letter: None, letters="AB")
        assert [r.loaded for r in results] == [False, False]
        assert len(cache) == 0

    def test_loader_called_once_per_letter(self):
        calls = []
        cache = AudioCache()
        cache.preload(lambda letter: calls.append(letter) or letter, letters="abc")
        assert calls == ["A", "B", "C"]

    def test_results_keep_letter_order(self):
        cache = AudioCache()
        results = cache.preload(lambda letter: letter, letters="CAB")
        assert [r.letter for r in results] == ["C", "A", "B"]

    def test_existing_files_only(self, tmp_path: Path):
        (tmp_path / "a.wav").write_bytes(b"RIFF")

        def loader(letter: str) -> bytes:
            return sample_path(tmp_path, letter).read_bytes()

        cache = AudioCache()
        results = cache.preload(loader, letters="AB")
        assert results[0].loaded is True
        assert results[1].loaded is False
        assert cache.get("a") == b"RIFF"


# ---------------------------------------------------------------------------
# play
# ---------------------------------------------------------------------------

class TestPlay:
    def test_plays_cached_sample(self):
        played = []
        cache = AudioCache(player=played.append)
        cache.preload(lambda letter: f"sample-{letter}", letters="A")
        assert cache.play("a") is True
        assert played == ["sample-A"]

    def test_missing_letter_is_silent(self):
        played = []
        cache = AudioCache(player=played.append)
        assert cache.play("A") is False
        assert played == []

    def test_failed_preload_is_silent(self):
        played = []

        def loader(letter: str) -> str:
            raise OSError("decode failed")

        cache = AudioCache(player=played.append)
        cache.preload(loader, letters="A")
        assert cache.play("A") is False
        assert played == []

    def test_no_player(self):
        cache = AudioCache()
        cache.preload(lambda letter: letter, letters="A")
        assert cache.play("A") is False

    def test_player_error_is_swallowed(self):
        def player(sample: object) -> None:
            raise RuntimeError("device busy")

        cache = AudioCache(player=player)
        cache.preload(lambda letter: letter, letters="A")
        assert cache.play("A") is False

    def test_digit_has_no_sound(self):
        played = []
        cache = AudioCache(player=played.append)
        cache.preload(lambda letter: letter)
        assert cache.play("7") is False
        assert played == []
