"""A register of qubits whose state is given directly as amplitudes."""

from __future__ import annotations

import math
import random
from collections import Counter
from typing import Iterable

import numpy as np


class System:
    """A quantum register of ``size`` qubits, starting in the all-zero state.

    Qubit ``k`` corresponds to bit ``k`` of a basis-state index.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < 0:
            raise ValueError("number of qubits must not be negative")
        self.size = size
        self._state = np.zeros(1 << size, dtype=complex)
        self._state[0] = 1
        self._indices = np.arange(1 << size)
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_state(cls, state: Iterable[complex], rng: random.Random | None = None) -> "System":
        """Build a register from a vector of ``2 ** n`` amplitudes."""
        amplitudes = np.asarray(list(state), dtype=complex)
        length = amplitudes.shape[0]
        if length == 0 or length & (length - 1):
            raise ValueError("state length must be a power of two")
        system = cls(length.bit_length() - 1, rng)
        system._state = amplitudes
        return system

    @property
    def state(self) -> np.ndarray:
        """A copy of the current amplitudes."""
        return self._state.copy()

    def _probabilities(self) -> np.ndarray:
        return self._state.real ** 2 + self._state.imag ** 2

    def measure(self) -> int:
        """Sample a basis state without changing the register."""
        cumulative = np.cumsum(self._probabilities())
        r = self._rng.random()
        index = int(np.searchsorted(cumulative, r, side="right"))
        return min(index, len(self._state) - 1)

    def sample(self, shots: int) -> dict[int, int]:
        """Measure ``shots`` times and count how often each basis state came out."""
        counts = Counter(self.measure() for _ in range(shots))
        return dict(sorted(counts.items()))

    def measure_qubit(self, target: int) -> np.ndarray:
        """Measure one qubit, collapse the register and return the new state."""
        if not 0 <= target < self.size:
            raise IndexError("target qubit index is out of range")
        zero = (self._indices & (1 << target)) == 0
        amplitude0 = float(self._probabilities()[zero].sum())
        if self._rng.random() < amplitude0:
            self._state[~zero] = 0
        else:
            self._state[zero] = 0
        norm = math.sqrt(float(self._probabilities().sum()))
        self._state /= norm
        return self.state