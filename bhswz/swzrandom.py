"""Pseudo-random generator used to mask swz archive contents."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_STATE_SIZE = 16


class SwzRandom:
    """WELL512-style generator producing 32-bit unsigned integers."""

    __slots__ = ("_state", "_index")

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK]
        for i in range(1, _STATE_SIZE):
            prev = state[-1]
            state.append(((prev ^ (prev >> 30)) * 0x6C078965 + i) & _MASK)
        self._state = state
        self._index = 0

    def next(self) -> int:
        """Advance the generator and return the next 32-bit value."""
        state = self._state
        index = self._index
        new_index = (index + 15) % _STATE_SIZE
        self._index = new_index

        a1 = state[index]
        b1 = state[(index + 13) % _STATE_SIZE]
        c = (a1 ^ (a1 << 16) ^ b1 ^ (b1 << 15)) & _MASK
        b2 = state[(index + 9) % _STATE_SIZE]
        b3 = b2 ^ (b2 >> 11)
        a2 = b3 ^ c
        d = a2 ^ ((a2 << 5) & 0xDA442D24)
        a3 = state[new_index]
        result = (a3 ^ (a3 << 2) ^ (b3 << 28) ^ c ^ (c << 18) ^ d) & _MASK

        state[index] = a2
        state[new_index] = result
        return result

    def __iter__(self) -> SwzRandom:
        return self

    def __next__(self) -> int:
        return self.next()