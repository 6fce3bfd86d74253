from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from letterplay.core.words import WordList

logger = logging.getLogger(__name__)

SUCCESS_ADVANCE_MS = 1500
MISTAKE_ADVANCE_MS = 1000
SPEAK_DELAY_MS = 500
PRESS_PULSE_MS = 200

EASY_PROMPT = "Press any key to start!"

BACKGROUND_COLORS: Tuple[str, ...] = (
    "#FF9AA2", "#FFB7B2", "#FFDAC1", "#E2F0CB",
    "#B5EAD7", "#C7CEEA", "#E8E8E4", "#F2D5F8",
)
ERROR_BACKGROUND = "#ffcdd2"
NEUTRAL_BACKGROUND = "#ffffff"

_EASY_KEYS = frozenset(string.ascii_uppercase + string.digits)


class Mode(Enum):
    EASY = "easy"
    HARD = "hard"


class LetterTag(Enum):
    CORRECT = "correct"
    CURRENT = "current"
    REMAINING = "remaining"


# ---------------------------------------------------------------------------
# Input events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SwitchMode:
    mode: Mode


@dataclass(frozen=True)
class KeyPress:
    """Printable text produced by a key press ("" for modifiers and arrows)."""

    text: str


@dataclass(frozen=True)
class AdvanceWord:
    """A scheduled new-word timer fired; only honored for the matching generation."""

    generation: int


InputEvent = Union[SwitchMode, KeyPress, AdvanceWord]


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ModeChanged:
    mode: Mode


@dataclass(frozen=True)
class Render:
    pass


@dataclass(frozen=True)
class ShowPrompt:
    text: str


@dataclass(frozen=True)
class ShowKey:
    key: str


@dataclass(frozen=True)
class SetScoreVisible:
    visible: bool


@dataclass(frozen=True)
class SetBackground:
    color: str


@dataclass(frozen=True)
class PulseKey:
    duration_ms: int


@dataclass(frozen=True)
class PlayLetter:
    letter: str


@dataclass(frozen=True)
class SpeakWord:
    word: str
    delay_ms: int


@dataclass(frozen=True)
class Schedule:
    event: InputEvent
    delay_ms: int


Effect = Union[
    ModeChanged, Render, ShowPrompt, ShowKey, SetScoreVisible,
    SetBackground, PulseKey, PlayLetter, SpeakWord, Schedule,
]


@dataclass
class DrillState:
    """Hard mode progress: the target word and how much of it is typed."""

    target: str = ""
    typed: str = ""
    score: int = 0
    high_score: int = 0
    pending: bool = False
    generation: int = 0

    def expected_letter(self) -> Optional[str]:
        if len(self.typed) >= len(self.target):
            return None
        return self.target[len(self.typed)]

    def is_complete(self) -> bool:
        return bool(self.target) and self.typed == self.target


class DrillMachine:
    """Keyboard driven state machine behind both play modes.

    The machine never touches a UI toolkit. Every call to :meth:`handle`
    returns the effects the front end should carry out, in order. Delayed
    transitions come back as :class:`Schedule` effects; the front end feeds
    the wrapped event back once the delay has passed.

    Each scheduled :class:`AdvanceWord` carries the generation that was
    current when it was scheduled. Switching modes or picking a new word
    bumps the generation, so a timer that fires after a mode switch is
    ignored instead of replacing the word under the child's fingers.
    """

    def __init__(
        self,
        words: WordList,
        rng: Optional[random.Random] = None,
        palette: Sequence[str] = BACKGROUND_COLORS,
    ) -> None:
        if not palette:
            raise ValueError("palette must contain at least one color")
        self._words = words
        self._rng = rng or random.Random()
        self._palette = tuple(palette)
        self._mode = Mode.EASY
        self._state = DrillState()

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def state(self) -> DrillState:
        return self._state

    def handle(self, event: InputEvent) -> List[Effect]:
        """Apply one input event and return the resulting effects."""
        if isinstance(event, SwitchMode):
            return self._switch_mode(event.mode)
        if isinstance(event, KeyPress):
            if self._mode is Mode.EASY:
                return self._easy_key(event.text)
            return self._drill_key(event.text)
        if isinstance(event, AdvanceWord):
            return self._advance(event.generation)
        raise TypeError(f"Unsupported event: {event!r}")

    def tagged_letters(self) -> List[Tuple[str, LetterTag]]:
        """Target word letters tagged by position relative to the typed prefix."""
        if self._mode is not Mode.HARD:
            return []
        typed_len = len(self._state.typed)
        tagged = []
        for index, letter in enumerate(self._state.target):
            if index < typed_len:
                tag = LetterTag.CORRECT
            elif index == typed_len:
                tag = LetterTag.CURRENT
            else:
                tag = LetterTag.REMAINING
            tagged.append((letter, tag))
        return tagged

    def score_text(self) -> str:
        return f"Score: {self._state.score}"

    def high_score_text(self) -> str:
        return f"High Score: {self._state.high_score}"

    def _switch_mode(self, mode: Mode) -> List[Effect]:
        logger.debug("Switching to %s mode", mode.value)
        self._mode = mode
        state = self._state
        if mode is Mode.EASY:
            self._state = DrillState(
                high_score=state.high_score,
                generation=state.generation + 1,
            )
            return [
                ModeChanged(mode),
                ShowPrompt(EASY_PROMPT),
                SetScoreVisible(False),
                SetBackground(NEUTRAL_BACKGROUND),
            ]

        state.score = 0
        effects: List[Effect] = [
            ModeChanged(mode),
            SetScoreVisible(True),
            SetBackground(NEUTRAL_BACKGROUND),
        ]
        return effects + self._new_word()

    def _new_word(self) -> List[Effect]:
        state = self._state
        state.target = self._words.choose(self._rng)
        state.typed = ""
        state.pending = False
        state.generation += 1
        return [Render()]

    def _easy_key(self, text: str) -> List[Effect]:
        key = text.upper()
        if len(key) != 1 or key not in _EASY_KEYS:
            return []
        return [
            ShowKey(key),
            SetBackground(self._random_color()),
            PulseKey(PRESS_PULSE_MS),
            PlayLetter(key),
        ]

    def _drill_key(self, text: str) -> List[Effect]:
        state = self._state
        if len(text) != 1 or not text.isprintable():
            return []
        # the word is about to change; keys typed in the gap don't count
        if state.pending:
            return []
        expected = state.expected_letter()
        if expected is None:
            return []

        key = text.lower()
        if key != expected:
            state.score = 0
            state.pending = True
            return [
                SetBackground(ERROR_BACKGROUND),
                Schedule(AdvanceWord(state.generation), MISTAKE_ADVANCE_MS),
                Render(),
            ]

        state.typed += key
        effects: List[Effect] = [PlayLetter(key.upper())]
        if state.is_complete():
            state.score += 1
            state.high_score = max(state.high_score, state.score)
            state.pending = True
            effects += [
                SetBackground(self._random_color()),
                SpeakWord(state.target, SPEAK_DELAY_MS),
                Schedule(AdvanceWord(state.generation), SUCCESS_ADVANCE_MS),
            ]
        effects.append(Render())
        return effects

    def _advance(self, generation: int) -> List[Effect]:
        if self._mode is not Mode.HARD or generation != self._state.generation:
            logger.debug("Ignoring stale word advance (generation %d)", generation)
            return []
        return self._new_word()

    def _random_color(self) -> str:
        return self._rng.choice(self._palette)
