"""Deterministic pseudo-random stream shared by every generator."""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

Seed = Union[int, str]

_MODULUS_MASK = 0x7FFFFFFF
_MULTIPLIER = 1103515245
_INCREMENT = 12345
# Dividing by 2**31 keeps next() strictly below 1.0 for every 31-bit state.
_SCALE = float(_MODULUS_MASK + 1)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_seed(seed: str) -> int:
    """Fold a string into a non-negative integer seed (``h * 31 + code`` in int32).

    Codes are UTF-16 code units, so a character outside the BMP contributes
    its two surrogates.
    """

    data = seed.encode("utf-16-le", "surrogatepass")
    value = 0
    for offset in range(0, len(data), 2):
        code = data[offset] | (data[offset + 1] << 8)
        value = _to_int32((value << 5) - value + code)
    return abs(value)


def resolve_seed(seed: Seed) -> int:
    if isinstance(seed, str):
        return hash_seed(seed)
    return int(seed)


class SeededRandom:
    """Linear congruential generator over a 31-bit state.

    Every derived draw consumes exactly one ``next()``; ``choice`` on an empty
    sequence still consumes its draw and returns ``None``.
    """

    def __init__(self, seed: Seed = 0) -> None:
        self.initial_seed = resolve_seed(seed)
        self.state = self.initial_seed

    @classmethod
    def from_seed(cls, seed: Seed) -> "SeededRandom":
        return cls(seed)

    def next(self) -> float:
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & _MODULUS_MASK
        return self.state / _SCALE

    def range(self, minimum: float = 0.0, maximum: float = 1.0) -> float:
        return minimum + self.next() * (maximum - minimum)

    def int_range(self, minimum: int, maximum: int) -> int:
        """Uniform integer in ``[minimum, maximum]`` inclusive."""

        return int(math.floor(self.range(minimum, maximum + 1)))

    def choice(self, items: Sequence[T]) -> Optional[T]:
        roll = self.next()
        if not items:
            return None
        return items[int(math.floor(roll * len(items)))]

    def chance(self, probability: float) -> bool:
        return self.next() < probability

    def weighted(self, entries: Sequence[Tuple[T, float]], default: T) -> T:
        """Cumulative scan over ``(value, weight)`` pairs; ``default`` if rounding runs out."""

        total = sum(weight for _, weight in entries)
        remaining = self.next() * total
        for value, weight in entries:
            remaining -= weight
            if remaining <= 0:
                return value
        return default


__all__ = ["SeededRandom", "Seed", "hash_seed", "resolve_seed"]
