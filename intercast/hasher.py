"""A small, fast hasher for fixed-size identity keys."""

from __future__ import annotations

import sys

_WORD = 8


class FastHasher:
    """Hasher that XOR-folds its input into a 64-bit state.

    Whole 8-byte words are read in native byte order while more than a word
    remains; the final (at most 8) bytes are folded in big-endian order.
    """

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = 0

    def write(self, data) -> None:
        """Fold a bytes-like object into the state."""
        raw = memoryview(data).tobytes()
        while len(raw) > _WORD:
            word, raw = raw[:_WORD], raw[_WORD:]
            self._state ^= int.from_bytes(word, sys.byteorder)
        # At most one word remains, so a big-endian read equals the byte fold.
        self._state ^= int.from_bytes(raw, "big")

    def finish(self) -> int:
        """Return the current 64-bit hash value without resetting."""
        return self._state


def fast_hash(data) -> int:
    """Hash a bytes-like object with a fresh FastHasher."""
    hasher = FastHasher()
    hasher.write(data)
    return hasher.finish()