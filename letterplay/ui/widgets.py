"""Display widgets: the big letter/word area and the mode toggle buttons."""

from __future__ import annotations

import html
from typing import Optional, Sequence, Tuple

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel, QPushButton, QWidget

from letterplay.core.drill import LetterTag
from letterplay.ui.colors import PlayColors

_TAG_STYLES = {
    LetterTag.CORRECT: f"color:{PlayColors.CORRECT};",
    LetterTag.CURRENT: (
        f"color:{PlayColors.CURRENT}; background:{PlayColors.CURRENT_BG};"
        " font-weight:900; text-decoration:underline;"
    ),
    LetterTag.REMAINING: f"color:{PlayColors.REMAINING};",
}


def letters_to_html(tagged: Sequence[Tuple[str, LetterTag]]) -> str:
    """Render tagged letters as rich text, one span per letter."""
    return "".join(
        f'<span style="{_TAG_STYLES[tag]}">{html.escape(letter)}</span>'
        for letter, tag in tagged
    )


class PlayDisplay(QLabel):
    """Single display region: a prompt, one big key, or the drill word."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setTextFormat(Qt.RichText)
        self.setMinimumSize(320, 200)
        self._font_px = 120
        self._apply_style()

    def show_prompt(self, text: str) -> None:
        self._font_px = 40
        self.setText(html.escape(text))
        self._apply_style()

    def show_key(self, key: str) -> None:
        self._font_px = 200
        self.setText(html.escape(key))
        self._apply_style()

    def show_letters(self, tagged: Sequence[Tuple[str, LetterTag]]) -> None:
        self._font_px = 120
        self.setText(letters_to_html(tagged))
        self._apply_style()

    def pulse(self, duration_ms: int) -> None:
        """Briefly tint the display to show a key press."""
        self._apply_style(highlight=True)
        QTimer.singleShot(duration_ms, self._apply_style)

    def _apply_style(self, highlight: bool = False) -> None:
        background = PlayColors.PRESSED_OVERLAY if highlight else "transparent"
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {background};
                color: {PlayColors.TEXT_PRIMARY};
                border-radius: 24px;
                font-size: {self._font_px}px;
                font-weight: 900;
            }}
            """
        )


class ModeButton(QPushButton):
    """Toggle button for a play mode. Never takes keyboard focus."""

    def __init__(self, text: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(text, parent)
        self.setCheckable(True)
        self.setFocusPolicy(Qt.NoFocus)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(
            f"""
            QPushButton {{
                background: {PlayColors.BUTTON_BG};
                color: {PlayColors.TEXT_SECONDARY};
                border: 2px solid {PlayColors.BUTTON_BORDER};
                border-radius: 16px;
                padding: 10px 28px;
                font-size: 18px;
                font-weight: 800;
            }}
            QPushButton:checked {{
                background: {PlayColors.PRIMARY};
                color: white;
                border-color: {PlayColors.PRIMARY_DARK};
            }}
            """
        )
