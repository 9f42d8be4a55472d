"""
passcraft.random_source
Randomness capability injected into every generator.

SystemRandomSource draws from the OS CSPRNG through the secrets module.
FixedRandomSource replays a known sequence so generation is reproducible in tests.
"""

import secrets
from itertools import cycle
from typing import Iterable, List, MutableSequence, Sequence, TypeVar

from .errors import EntropyUnavailable

T = TypeVar("T")


class RandomSource:
    """Interface: uniform integer in [0, n)."""

    def next_below(self, n: int) -> int:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    """
    Cryptographically secure source. Keeps no state between draws, so a
    single instance may be shared across threads.
    """

    def next_below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be > 0")
        try:
            return secrets.randbelow(n)
        except (OSError, NotImplementedError) as e:
            raise EntropyUnavailable("secure random source is not available") from e


class FixedRandomSource(RandomSource):
    """
    Deterministic source for tests: returns values[i] % n, cycling through
    the given sequence.
    """

    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("FixedRandomSource needs at least one value")
        if any(v < 0 for v in values):
            raise ValueError("FixedRandomSource values must be >= 0")
        self._values = cycle(values)

    def next_below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("n must be > 0")
        return next(self._values) % n


def choice(source: RandomSource, seq: Sequence[T]) -> T:
    if not seq:
        raise IndexError("cannot choose from an empty sequence")
    return seq[source.next_below(len(seq))]


def coin(source: RandomSource) -> bool:
    return source.next_below(2) == 0


def shuffle(source: RandomSource, items: MutableSequence[T]) -> None:
    """In-place Fisher-Yates shuffle."""
    for i in range(len(items) - 1, 0, -1):
        j = source.next_below(i + 1)
        items[i], items[j] = items[j], items[i]


def digits(source: RandomSource, width: int) -> str:
    """Zero-padded random number with exactly `width` digits."""
    return str(source.next_below(10 ** width)).zfill(width)


def sample_chars(source: RandomSource, alphabet: str, count: int) -> List[str]:
    return [choice(source, alphabet) for _ in range(count)]
