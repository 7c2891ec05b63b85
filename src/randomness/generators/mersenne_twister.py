"""Mersenne Twister pseudorandom generator.

See https://en.wikipedia.org/wiki/Mersenne_Twister#Pseudocode. All word
arithmetic is masked back into unsigned 32-bit range after every shift.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .base import resolve_seed

logger = logging.getLogger(__name__)

STATE_SIZE = 624
SHIFT_SIZE = 397
WORD_MASK = 0xFFFFFFFF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
MATRIX_A = 0x9908B0DF
INIT_MULTIPLIER = 0x6C078965


def initialize_words(seed: int) -> List[int]:
    """Fill a fresh 624 word buffer from a 32-bit seed."""
    words = [0] * STATE_SIZE
    last = words[0] = seed & WORD_MASK
    for i in range(1, STATE_SIZE):
        last = (INIT_MULTIPLIER * (last ^ (last >> 30)) + i) % WORD_MASK
        words[i] = last
    return words


def twist(words: List[int]) -> None:
    """Regenerate all buffer words in place."""
    for i in range(STATE_SIZE):
        y = (words[i] & UPPER_MASK) | (words[(i + 1) % STATE_SIZE] & LOWER_MASK)
        word = words[(i + SHIFT_SIZE) % STATE_SIZE] ^ (y >> 1)
        if y & 1:
            word ^= MATRIX_A
        words[i] = word & WORD_MASK


def temper(y: int) -> int:
    y ^= y >> 11
    y ^= (y << 7) & 0x9D2C5680
    y ^= (y << 15) & 0xEFC60000
    y ^= y >> 18
    return y & WORD_MASK


class MersenneTwister:
    """MT19937-style generator emitting ``tempered_word / 0xFFFFFFFF``.

    Holds a 624 word buffer and a read index. A full twist runs whenever the
    index wraps back to 0, before the next word is read.
    """

    def __init__(self, seed: Optional[Any] = None) -> None:
        self._seed = resolve_seed(seed) & WORD_MASK
        self._words = initialize_words(self._seed)
        self._index = 0
        logger.debug("Initialized MersenneTwister with seed=%d", self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def next_word(self) -> int:
        """Return the next tempered 32-bit word."""
        if self._index == 0:
            twist(self._words)
        y = temper(self._words[self._index])
        self._index = (self._index + 1) % STATE_SIZE
        return y

    def __call__(self) -> float:
        return self.next_word() / WORD_MASK

    def __repr__(self) -> str:
        return f"MersenneTwister(seed={self._seed})"


__all__ = ["MersenneTwister", "initialize_words", "twist", "temper", "STATE_SIZE"]
