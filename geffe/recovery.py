"""Correlation attack recovering the three registers of a Geffe generator."""

from __future__ import annotations

from collections.abc import Iterable
from math import sqrt

from geffe.generator import REGISTER_PARAMETERS
from geffe.lfsr import WORD_MASK, Lfsr

FULL_TEMPLATE_LIMIT = 2048
_SELECTOR_WIDTH = 32


def _parse_bits(sequence: str) -> list[int]:
    if any(c not in "01" for c in sequence):
        raise ValueError("Invalid template")
    return [int(c) for c in sequence]


def _pack(bits: Iterable[int]) -> int:
    """Pack bits so that the i-th bit of the iterable is bit i of the result."""
    value = 0
    for position, bit in enumerate(bits):
        if bit:
            value |= 1 << position
    return value


def _selector_matches(state: int, checks: list[tuple[int, int]], polynomial: int) -> bool:
    clock = 0
    for position, expected in checks:
        while clock < position:
            feedback = (state & polynomial).bit_count() & 1
            state = ((state << 1) ^ feedback) & WORD_MASK
            clock += 1
        if (state >> 31) & 1 != expected:
            return False
    return True


class RegisterRecovery:
    """Recovers register states from observed keystream by correlation."""

    def __init__(self, alpha: float = 0.0, beta: float = 0.0) -> None:
        self.alpha = alpha
        self.beta = beta
        self.population: int | None = None
        self.criterion: float | None = None
        self.l1_candidates: list[int] = []
        self.l2_candidates: list[int] = []
        self._template: int | None = None
        self._full_template: list[int] | None = None

    def set_quantiles(self, alpha: float, beta: float) -> None:
        """Change the quantiles; the critical set must be computed again."""
        self.alpha = alpha
        self.beta = beta
        self.population = None
        self.criterion = None

    def set_critical_set(self) -> None:
        """Compute the sample size and the rejection threshold."""
        root = (self.beta * sqrt(0.25) + self.alpha * sqrt(0.1875)) / 0.25
        self.population = int(root**2)
        self.criterion = self.population * 0.25 + self.alpha * sqrt(self.population * 0.25)

    def set_gamma_template(self, sequence: str) -> None:
        """Set the observed keystream prefix used for the correlation test."""
        if self.population is None:
            raise RuntimeError("Undefined population size")
        if len(sequence) != self.population:
            raise ValueError("Invalid template size")
        self._template = _pack(_parse_bits(sequence))

    def set_full_gamma_template(self, sequence: str) -> None:
        """Set the observed keystream used to confirm a full key."""
        bits = _parse_bits(sequence)
        if len(bits) > FULL_TEMPLATE_LIMIT:
            raise ValueError("Template is too long")
        self._full_template = bits

    def recognize(self, gamma: int) -> bool:
        """Whether ``gamma`` (bit i = i-th output) is close enough to the template."""
        if self._template is None or self.criterion is None:
            raise RuntimeError("Gamma template isn't set")
        return (gamma ^ self._template).bit_count() < self.criterion

    def _recover(self, index: int, start: int, stop: int | None) -> list[int]:
        length, polynomial = REGISTER_PARAMETERS[index]
        limit = 1 << length
        stop = limit if stop is None else stop
        if not 0 <= start <= stop <= limit:
            raise ValueError("Invalid search range")
        if self._template is None or self.population is None:
            raise RuntimeError("Gamma template isn't set")
        register = Lfsr(length, polynomial)
        found = []
        for candidate in range(start, stop):
            register.state = candidate
            if self.recognize(_pack(register.bits(self.population))):
                found.append(candidate)
        return found

    def recover_l1(self, start: int = 0, stop: int | None = None) -> list[int]:
        """Search 30-bit states in ``[start, stop)`` and record the matches."""
        found = self._recover(0, start, stop)
        self.l1_candidates.extend(found)
        return found

    def recover_l2(self, start: int = 0, stop: int | None = None) -> list[int]:
        """Search 31-bit states in ``[start, stop)`` and record the matches."""
        found = self._recover(1, start, stop)
        self.l2_candidates.extend(found)
        return found

    def recover_l3(self) -> list[tuple[int, int, int]]:
        """Find selector states completing each candidate pair.

        Returns one ``(l1, l2, l3)`` key per candidate pair that reproduces the
        full gamma template.
        """
        gamma = self._full_template
        if gamma is None:
            raise RuntimeError("Full gamma template isn't set")
        if len(gamma) < _SELECTOR_WIDTH:
            raise ValueError("Full gamma template is too short")
        size = len(gamma)
        (l1_length, l1_poly), (l2_length, l2_poly), (_, l3_poly) = REGISTER_PARAMETERS

        results = []
        for l2 in self.l2_candidates:
            y = Lfsr(l2_length, l2_poly, l2).bits(size)
            for l1 in self.l1_candidates:
                x = Lfsr(l1_length, l1_poly, l1).bits(size)
                if any(a == b != g for a, b, g in zip(x, y, gamma)):
                    continue
                base = 0
                free_bits = []
                for position in range(_SELECTOR_WIDTH):
                    bit = 31 - position
                    if x[position] == y[position]:
                        free_bits.append(bit)
                    elif gamma[position] == x[position]:
                        base |= 1 << bit
                checks = [
                    (p, int(gamma[p] == x[p]))
                    for p in range(_SELECTOR_WIDTH, size)
                    if x[p] != y[p]
                ]
                for iteration in range(1 << len(free_bits)):
                    candidate = base
                    for counter, bit in enumerate(free_bits):
                        if (iteration >> counter) & 1:
                            candidate |= 1 << bit
                    if _selector_matches(candidate, checks, l3_poly):
                        results.append((l1, l2, candidate))
                        break
        return results