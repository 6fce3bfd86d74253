"""Qt backed letter samples and word speech."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QEventLoop, QObject, QTimer, QUrl
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtTextToSpeech import QTextToSpeech

from letterplay.core.audio import sample_path

logger = logging.getLogger(__name__)


LOAD_TIMEOUT_MS = 3000

_PENDING = (QSoundEffect.Status.Null, QSoundEffect.Status.Loading)


def make_sample_loader(
    audio_dir: Path,
    parent: Optional[QObject] = None,
    timeout_ms: int = LOAD_TIMEOUT_MS,
) -> Callable[[str], QSoundEffect]:
    """Return a loader that builds one QSoundEffect per letter sample file.

    QSoundEffect decodes in the background, so each load waits on a local
    event loop until the effect is Ready, fails, or ``timeout_ms`` passes.
    Needs a running QCoreApplication.
    """

    def _load(letter: str) -> QSoundEffect:
        path = sample_path(audio_dir, letter)
        if not path.is_file():
            raise FileNotFoundError(f"Sample not found: {path}")
        effect = QSoundEffect(parent)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        _wait_while_loading(effect, timeout_ms)

        status = effect.status()
        if status == QSoundEffect.Status.Ready:
            return effect
        effect.deleteLater()
        if status == QSoundEffect.Status.Error:
            raise ValueError(f"Could not decode sample: {path}")
        raise TimeoutError(f"Timed out loading sample: {path}")

    return _load


def _wait_while_loading(effect: QSoundEffect, timeout_ms: int) -> None:
    if effect.status() not in _PENDING:
        return
    loop = QEventLoop()
    timer = QTimer()
    timer.setSingleShot(True)
    timer.timeout.connect(loop.quit)
    effect.statusChanged.connect(loop.quit)
    timer.start(timeout_ms)
    try:
        while effect.status() in _PENDING and timer.isActive():
            loop.exec()
    finally:
        timer.stop()
        effect.statusChanged.disconnect(loop.quit)


def play_sound_effect(effect: QSoundEffect) -> None:
    effect.play()


class WordSpeaker(QObject):
    """Speaks a whole word through the platform text-to-speech engine."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._tts = QTextToSpeech(self)
        if self._tts.state() == QTextToSpeech.State.Error:
            logger.warning("Text-to-speech unavailable: %s", self._tts.errorString())

    def speak(self, word: str, delay_ms: int = 0) -> None:
        """Speak ``word`` after ``delay_ms``."""
        QTimer.singleShot(delay_ms, lambda: self._say(word))

    def _say(self, word: str) -> None:
        if self._tts.state() == QTextToSpeech.State.Error:
            logger.debug("Skipping speech for %r, engine in error state", word)
            return
        logger.info("Speaking %r", word)
        self._tts.say(word)
