"""Linear feedback shift register over a 32-bit state word."""

from __future__ import annotations

WORD_MASK = 0xFFFFFFFF
MAX_LENGTH = 32


class Lfsr:
    """A Fibonacci-style LFSR whose output is bit ``length - 1`` of the state.

    The state is kept as a 32-bit word: each clock shifts it left by one and
    feeds the parity of ``state & polynomial`` into bit 0.
    """

    def __init__(self, length: int, polynomial: int = 0, state: int = 0) -> None:
        if not 1 <= length <= MAX_LENGTH:
            raise ValueError("Invalid length")
        self.length = length
        self.polynomial = polynomial & WORD_MASK
        self.state = state

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = value & WORD_MASK

    def __repr__(self) -> str:
        return (
            f"Lfsr(length={self.length}, polynomial={self.polynomial:#010x}, "
            f"state={self._state:#010x})"
        )

    def clock(self) -> bool:
        """Advance one step using only the taps below ``length``."""
        low_bits = (1 << self.length) - 1
        feedback = (self._state & self.polynomial & low_bits).bit_count() & 1
        output = bool((self._state >> (self.length - 1)) & 1)
        self._state = ((self._state << 1) ^ feedback) & WORD_MASK
        return output

    def fast_clock(self) -> bool:
        """Advance one step using the parity of the whole masked word."""
        output = bool((self._state >> (self.length - 1)) & 1)
        feedback = (self._state & self.polynomial).bit_count() & 1
        self._state = ((self._state << 1) ^ feedback) & WORD_MASK
        return output

    def bits(self, count: int) -> list[int]:
        """Clock ``count`` times and return the output bits in order."""
        if count < 0:
            raise ValueError("Bit count must not be negative")
        return [int(self.fast_clock()) for _ in range(count)]