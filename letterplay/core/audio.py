from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

LETTERS = string.ascii_uppercase
SAMPLE_EXTENSION = ".wav"


def sample_path(audio_dir: Path, letter: str) -> Path:
    """Location of a letter's sample: ``<audio_dir>/<lowercase letter>.wav``."""
    return Path(audio_dir) / f"{letter.lower()}{SAMPLE_EXTENSION}"


@dataclass(frozen=True)
class PreloadResult:
    """Outcome of preloading one letter sample."""

    letter: str
    loaded: bool
    error: Optional[str] = None


class AudioCache:
    """Letter sounds loaded once at startup and played on demand.

    Loading is best effort. A letter whose sample is missing or cannot be
    decoded is logged and skipped; playing it later is a silent no-op.
    """

    def __init__(self, player: Optional[Callable[[Any], None]] = None) -> None:
        self._samples: Dict[str, Any] = {}
        self._player = player

    def preload(
        self,
        loader: Callable[[str], Any],
        letters: Iterable[str] = LETTERS,
    ) -> List[PreloadResult]:
        """Load one sample per letter and report each letter's outcome."""
        results: List[PreloadResult] = []
        for letter in letters:
            letter = letter.upper()
            try:
                sample = loader(letter)
            except Exception as e:
                logger.warning("Failed to preload audio for %s: %s", letter, e)
                results.append(PreloadResult(letter=letter, loaded=False, error=str(e)))
                continue
            if sample is None:
                logger.warning("Failed to preload audio for %s: no sample", letter)
                results.append(PreloadResult(letter=letter, loaded=False, error="no sample"))
                continue
            self._samples[letter] = sample
            results.append(PreloadResult(letter=letter, loaded=True))

        loaded = sum(1 for r in results if r.loaded)
        logger.info("Preloaded %d/%d letter sounds", loaded, len(results))
        return results

    def get(self, letter: str) -> Optional[Any]:
        return self._samples.get(letter.upper())

    def loaded_letters(self) -> List[str]:
        return sorted(self._samples)

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and letter.upper() in self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def play(self, letter: str) -> bool:
        """Play a cached letter. Returns False when nothing was played."""
        sample = self.get(letter)
        if sample is None or self._player is None:
            return False
        try:
            self._player(sample)
        except Exception as e:
            logger.warning("Audio playback failed for %s: %s", letter, e)
            return False
        return True
