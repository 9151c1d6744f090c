"""Word catalog backing generated names.

Two fixed, ordered word lists: adjectives and nouns. Index-based lookup
must stay stable across releases since seeded output depends on it, so
new words may only ever be appended.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Tuple

logger = logging.getLogger("seednames.catalog")

_WORD_RE = re.compile(r"^[a-z]+$")

ADJECTIVES: Tuple[str, ...] = (
    "ancient", "autumn", "billowing", "bitter", "black", "blue", "bold",
    "broad", "broken", "calm", "cold", "cool", "crimson", "curly", "damp",
    "dark", "dawn", "delicate", "divine", "dry", "empty", "falling",
    "fancy", "flat", "floral", "fragrant", "frosty", "gentle", "green",
    "hidden", "holy", "icy", "jolly", "late", "lingering", "little",
    "lively", "long", "lucky", "misty", "morning", "muddy", "mute",
    "nameless", "noisy", "odd", "old", "orange", "patient", "plain",
    "polished", "proud", "purple", "quiet", "rapid", "red", "restless",
    "rough", "round", "royal", "shiny", "silent",
)

NOUNS: Tuple[str, ...] = (
    "bird", "breeze", "brook", "bush", "butterfly", "cherry", "cloud",
    "darkness", "dew", "dream", "dust", "feather", "field", "fire",
    "firefly", "flower", "fog", "forest", "frog", "frost", "glade",
    "glitter", "grass", "haze", "hill", "lake", "leaf", "meadow",
    "moon", "morning", "mountain", "night", "paper", "pine", "pond",
    "rain", "resonance", "river", "sea", "shadow", "shape", "silence",
    "sky", "smoke", "snow", "snowflake", "sound", "star", "sun",
    "sunset", "surf", "thunder", "tree", "violet", "voice", "water",
    "waterfall", "wave",
)


class CatalogError(ValueError):
    """Raised when a word catalog fails its integrity checks."""


def _check_words(kind: str, words: Tuple[str, ...]) -> None:
    if not words:
        raise CatalogError(f"{kind} list is empty")
    seen = set()
    for word in words:
        if not isinstance(word, str) or not _WORD_RE.match(word):
            raise CatalogError(f"{kind} list contains invalid word {word!r}")
        if word in seen:
            raise CatalogError(f"{kind} list contains duplicate word {word!r}")
        seen.add(word)


@dataclass(frozen=True)
class WordCatalog:
    """Immutable pair of word lists.

    Words must be distinct, non-empty runs of lowercase ASCII letters.
    Construction fails with :class:`CatalogError` otherwise; a catalog
    that exists is always safe to draw from.
    """

    adjectives: Tuple[str, ...]
    nouns: Tuple[str, ...]

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller handed in
        object.__setattr__(self, "adjectives", tuple(self.adjectives))
        object.__setattr__(self, "nouns", tuple(self.nouns))
        _check_words("adjective", self.adjectives)
        _check_words("noun", self.nouns)

    def adjective_count(self) -> int:
        return len(self.adjectives)

    def noun_count(self) -> int:
        return len(self.nouns)

    def combinations(self) -> int:
        """Number of distinct names this catalog can produce."""
        return len(self.adjectives) * len(self.nouns)

    def adjective_at(self, index: int) -> str:
        return _lookup("adjective", self.adjectives, index)

    def noun_at(self, index: int) -> str:
        return _lookup("noun", self.nouns, index)


def _lookup(kind: str, words: Tuple[str, ...], index: int) -> str:
    # Negative indexes would silently wrap on a tuple
    if not 0 <= index < len(words):
        raise IndexError(f"{kind} index {index} out of range [0, {len(words)})")
    return words[index]


DEFAULT_CATALOG = WordCatalog(adjectives=ADJECTIVES, nouns=NOUNS)
logger.debug(
    "Default catalog loaded: %d adjectives, %d nouns",
    DEFAULT_CATALOG.adjective_count(),
    DEFAULT_CATALOG.noun_count(),
)
