from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from letterplay.core.audio import AudioCache
from letterplay.core.drill import (
    DrillMachine,
    Effect,
    InputEvent,
    KeyPress,
    Mode,
    ModeChanged,
    PlayLetter,
    PulseKey,
    Render,
    Schedule,
    SetBackground,
    SetScoreVisible,
    ShowKey,
    ShowPrompt,
    SpeakWord,
    SwitchMode,
)
from letterplay.ui.colors import PlayColors
from letterplay.ui.sound import WordSpeaker
from letterplay.ui.widgets import ModeButton, PlayDisplay

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main window: mode toggles, one display region, and the score labels.

    Key presses and button clicks become drill events; the effects the
    machine returns are applied to the widgets here.
    """

    def __init__(
        self,
        machine: DrillMachine,
        audio: AudioCache,
        speaker: Optional[WordSpeaker] = None,
    ) -> None:
        super().__init__()
        self._machine = machine
        self._audio = audio
        self._speaker = speaker or WordSpeaker(self)

        self._central: Optional[QWidget] = None
        self._display: Optional[PlayDisplay] = None
        self._easy_button: Optional[ModeButton] = None
        self._hard_button: Optional[ModeButton] = None
        self._score_label: Optional[QLabel] = None
        self._high_score_label: Optional[QLabel] = None

        self.setWindowTitle("LetterPlay")
        self.setFocusPolicy(Qt.StrongFocus)
        self._build_ui()
        self._dispatch(SwitchMode(Mode.EASY))

    def _build_ui(self) -> None:
        central = QWidget(self)
        central.setObjectName("playRoot")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 24, 32, 32)
        layout.setSpacing(16)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        self._easy_button = ModeButton("Easy", central)
        self._hard_button = ModeButton("Hard", central)
        self._easy_button.clicked.connect(lambda: self._dispatch(SwitchMode(Mode.EASY)))
        self._hard_button.clicked.connect(lambda: self._dispatch(SwitchMode(Mode.HARD)))
        buttons.addWidget(self._easy_button)
        buttons.addWidget(self._hard_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)

        self._score_label = QLabel(central)
        self._high_score_label = QLabel(central)
        for label in (self._score_label, self._high_score_label):
            label.setStyleSheet(f"color: {PlayColors.TEXT_SECONDARY}; font-size: 22px; font-weight: 800;")
        scores = QHBoxLayout()
        scores.addWidget(self._score_label)
        scores.addStretch(1)
        scores.addWidget(self._high_score_label)
        layout.addLayout(scores)

        self._display = PlayDisplay(central)
        layout.addWidget(self._display, 1)

        self._central = central
        self.setCentralWidget(central)
        self.resize(900, 600)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Feed printable key text into the drill; everything else falls through."""
        text = event.text()
        if not text or event.isAutoRepeat():
            super().keyPressEvent(event)
            return
        self._dispatch(KeyPress(text))

    def _dispatch(self, event: InputEvent) -> None:
        self._apply(self._machine.handle(event))

    def _apply(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, ModeChanged):
                self._easy_button.setChecked(effect.mode is Mode.EASY)
                self._hard_button.setChecked(effect.mode is Mode.HARD)
            elif isinstance(effect, ShowPrompt):
                self._display.show_prompt(effect.text)
            elif isinstance(effect, ShowKey):
                self._display.show_key(effect.key)
            elif isinstance(effect, Render):
                self._render()
            elif isinstance(effect, SetScoreVisible):
                self._score_label.setVisible(effect.visible)
                self._high_score_label.setVisible(effect.visible)
            elif isinstance(effect, SetBackground):
                self._set_background(effect.color)
            elif isinstance(effect, PulseKey):
                self._display.pulse(effect.duration_ms)
            elif isinstance(effect, PlayLetter):
                self._audio.play(effect.letter)
            elif isinstance(effect, SpeakWord):
                self._speaker.speak(effect.word, effect.delay_ms)
            elif isinstance(effect, Schedule):
                self._schedule(effect.event, effect.delay_ms)
            else:
                logger.warning("Unhandled effect: %r", effect)

    def _schedule(self, event: InputEvent, delay_ms: int) -> None:
        QTimer.singleShot(delay_ms, lambda: self._dispatch(event))

    def _render(self) -> None:
        if self._machine.mode is not Mode.HARD:
            return
        self._display.show_letters(self._machine.tagged_letters())
        self._score_label.setText(self._machine.score_text())
        self._high_score_label.setText(self._machine.high_score_text())

    def _set_background(self, color: str) -> None:
        self._central.setStyleSheet(f"QWidget#playRoot {{ background-color: {color}; }}")
