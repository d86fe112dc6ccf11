"""Geffe keystream generator built from three LFSRs."""

from __future__ import annotations

from geffe.lfsr import WORD_MASK, Lfsr

# (length, feedback polynomial) of the two data registers and the selector.
REGISTER_PARAMETERS = ((30, 0x32800000), (31, 0x48000000), (32, 0xF5000000))


def combine(x: bool, y: bool, s: bool) -> bool:
    """Geffe combining function: ``x`` when ``s`` is set, otherwise ``y``."""
    return bool((s and x) ^ ((not s) and y))


class GeffeGenerator:
    """Keystream generator selecting between two LFSRs with a third one."""

    def __init__(self) -> None:
        self._registers = tuple(
            Lfsr(length, polynomial) for length, polynomial in REGISTER_PARAMETERS
        )

    def set_register(self, value: int, index: int) -> None:
        """Load ``value`` into register ``index`` (0, 1 or 2)."""
        if index not in (0, 1, 2):
            raise ValueError("Invalid index")
        if not 0 <= value <= WORD_MASK:
            raise ValueError("Invalid register")
        register = self._registers[index]
        if value >> register.length:
            raise ValueError("Invalid register")
        register.state = value

    def clock(self) -> bool:
        """Produce one keystream bit."""
        x, y, s = (register.fast_clock() for register in self._registers)
        return combine(x, y, s)

    def generate_gamma(self, size: int) -> list[int]:
        """Produce ``size`` keystream bits."""
        if size < 0:
            raise ValueError("Gamma size must not be negative")
        return [int(self.clock()) for _ in range(size)]