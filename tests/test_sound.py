"""Tests for letterplay.ui.sound – Qt letter sample loading."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtMultimedia")
pytest.importorskip("PySide6.QtTextToSpeech")

from PySide6.QtCore import QCoreApplication  # noqa: E402

from letterplay.core.audio import AudioCache  # noqa: E402
from letterplay.ui.sound import make_sample_loader  # noqa: E402


@pytest.fixture(scope="module")
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class TestSampleLoader:
    def test_missing_file(self, tmp_path: Path):
        loader = make_sample_loader(tmp_path)
        with pytest.raises(FileNotFoundError):
            loader("A")

    def test_garbage_wav_is_rejected(self, qt_app, tmp_path: Path):
        (tmp_path / "x.wav").write_bytes(b"this is not a wave file")
        loader = make_sample_loader(tmp_path, timeout_ms=500)
        with pytest.raises((ValueError, TimeoutError)):
            loader("X")

    def test_garbage_wav_is_skipped_by_cache(self, qt_app, tmp_path: Path):
        (tmp_path / "x.wav").write_bytes(b"\x00" * 64)
        cache = AudioCache(player=lambda effect: effect.play())
        results = cache.preload(make_sample_loader(tmp_path, timeout_ms=500), letters="X")
        assert results[0].loaded is False
        assert results[0].error
        assert "X" not in cache
        assert cache.play("X") is False
