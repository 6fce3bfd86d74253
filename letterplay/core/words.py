from __future__ import annotations

import random
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml

_WORD_RE = re.compile(r"^[a-z]+$")


def default_words_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "words.yaml"


class WordList:
    """Read-only, ordered list of drill words grouped into categories.

    Words are stored lower-case. Duplicates across categories are kept, so a
    word listed twice is twice as likely to be picked.
    """

    def __init__(self, path: Optional[Path] = None, words: Optional[Sequence[str]] = None) -> None:
        """Load from ``path`` (the packaged list by default), or wrap ``words`` directly."""
        if words is not None:
            self._path = None
            cleaned = [_clean_word(w, "words") for w in words]
            if not cleaned:
                raise ValueError("word list is empty")
            self._categories = {"words": cleaned}
        else:
            self._path = path or default_words_path()
            self._categories = self._load_categories()
        self._words: Tuple[str, ...] = tuple(
            word for items in self._categories.values() for word in items
        )

    @classmethod
    def from_words(cls, words: Sequence[str]) -> "WordList":
        """Build a single-category list without touching the filesystem."""
        return cls(words=words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def categories(self) -> Dict[str, List[str]]:
        return {name: list(words) for name, words in self._categories.items()}

    def choose(self, rng: Optional[random.Random] = None) -> str:
        """Pick a word uniformly at random."""
        return (rng or random).choice(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self):
        return iter(self._words)

    def _load_categories(self) -> Dict[str, List[str]]:
        if not self._path.exists():
            raise FileNotFoundError(f"Word list not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{self._path.name}: expected YAML with 'categories'")
        categories = raw.get("categories")
        if not isinstance(categories, dict) or not categories:
            raise ValueError(f"{self._path.name}: missing or invalid 'categories'")

        loaded: Dict[str, List[str]] = {}
        for name, content in categories.items():
            if isinstance(content, list):
                items = [str(item).strip() for item in content if str(item).strip()]
            else:
                # allow a category as a whitespace separated string
                items = str(content or "").split()
            if not items:
                raise ValueError(f"{self._path.name}: category '{name}' has no words")
            loaded[str(name)] = [_clean_word(item, str(name)) for item in items]
        return loaded


def _clean_word(word: str, category: str) -> str:
    cleaned = str(word).strip().lower()
    if not _WORD_RE.match(cleaned):
        raise ValueError(f"category '{category}': invalid word {word!r}")
    return cleaned
