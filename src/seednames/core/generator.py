"""Seeded adjective-noun name generator.

Produces names like 'silent-moon', 'frosty-sound'. A generator seeded
with the same value always yields the same sequence, call for call.

Uniqueness is not guaranteed: the default catalog only holds 3,596
combinations, so repeats show up after a few dozen draws.

Generators are not thread-safe. Give each worker its own instance, or
wrap a shared one in :class:`LockedNameGenerator`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import operator
import random
import threading
import time
from typing import Iterator, Optional

from seednames.core.catalog import DEFAULT_CATALOG, WordCatalog
from seednames.core.config import Settings

logger = logging.getLogger("seednames.generator")

SEPARATOR = "-"

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
_UINT64_MASK = 2 ** 64 - 1


def normalize_seed(seed: int) -> int:
    """Map a signed 64-bit seed onto the unsigned value the PRNG is fed.

    Uses two's-complement reinterpretation so ``-1`` and ``1`` seed
    different sequences. Integers outside the 64-bit range are reduced
    modulo 2**64. Anything implementing ``__index__`` (numpy integers,
    bool) is accepted; floats, strings and None raise TypeError.
    """
    return operator.index(seed) & _UINT64_MASK


def entropy_seed() -> int:
    """Return a high-entropy seed in the signed 64-bit range."""
    value = time.time_ns() & _UINT64_MASK
    return value - 2 ** 64 if value > INT64_MAX else value


class NameGenerator(ABC):
    """Produces an endless stream of adjective-noun names."""

    @abstractmethod
    def generate(self) -> str:
        """Return the next name in the sequence."""

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.generate()

    def take(self, count: int) -> list[str]:
        if count < 0:
            raise ValueError("count must be >= 0")
        return [self.generate() for _ in range(count)]


class _RandomNameGenerator(NameGenerator):
    def __init__(self, rng: random.Random, catalog: WordCatalog) -> None:
        self._rng = rng
        self._catalog = catalog

    @property
    def catalog(self) -> WordCatalog:
        return self._catalog

    def generate(self) -> str:
        # randrange draws by rejection, never by modulo. Adjective first, then noun.
        adjective = self._catalog.adjective_at(self._rng.randrange(self._catalog.adjective_count()))
        noun = self._catalog.noun_at(self._rng.randrange(self._catalog.noun_count()))
        return f"{adjective}{SEPARATOR}{noun}"


class SeededNameGenerator(_RandomNameGenerator):
    """Deterministic generator: output is a function of (seed, call index)."""

    def __init__(self, seed: int, catalog: WordCatalog = DEFAULT_CATALOG) -> None:
        normalized = normalize_seed(seed)
        super().__init__(random.Random(normalized), catalog)
        self._seed = operator.index(seed)
        logger.debug("Seeded name generator: seed=%d", self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def __repr__(self) -> str:
        return f"SeededNameGenerator(seed={self._seed})"


class SystemNameGenerator(_RandomNameGenerator):
    """Non-reproducible generator drawing from the OS entropy source."""

    def __init__(self, catalog: WordCatalog = DEFAULT_CATALOG) -> None:
        super().__init__(random.SystemRandom(), catalog)


class LockedNameGenerator(NameGenerator):
    """Serializes access to a generator shared between threads.

    The wrapped sequence is unchanged; only the interleaving of callers
    decides who receives which name.
    """

    def __init__(self, inner: NameGenerator) -> None:
        self._inner = inner
        self._lock = threading.Lock()

    def generate(self) -> str:
        with self._lock:
            return self._inner.generate()


def new_generator(
    seed: Optional[int] = None,
    catalog: WordCatalog = DEFAULT_CATALOG,
) -> SeededNameGenerator:
    """Build a seeded generator.

    Falls back to ``SEEDNAMES_SEED`` from the environment, then to a
    time-derived seed, when no seed is passed.
    """
    if seed is None:
        seed = Settings.from_env().seed
    if seed is None:
        seed = entropy_seed()
        logger.info("No seed configured; using time-derived seed %d", seed)
    return SeededNameGenerator(seed, catalog=catalog)
