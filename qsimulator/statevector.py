"""State-vector simulation of a register of qubits."""

from __future__ import annotations

import cmath
import math
import random
from typing import Sequence

import numpy as np

_INV_SQRT2 = 1.0 / math.sqrt(2)


def _fmt(value: float) -> str:
    return f"{value:.6f}"


class StateVector:
    """A register of ``size`` qubits, starting in the all-zero state.

    Qubit ``k`` corresponds to bit ``k`` of a basis-state index.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        if size < 0:
            raise ValueError("number of qubits must not be negative")
        self.size = size
        self._state = np.zeros(1 << size, dtype=complex)
        self._state[0] = 1
        self._indices = np.arange(1 << size)
        self._gates: list[str] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def state(self) -> np.ndarray:
        """A copy of the current amplitudes."""
        return self._state.copy()

    @property
    def gates(self) -> tuple[str, ...]:
        """Descriptions of the gates applied so far."""
        return tuple(self._gates)

    def print_gates(self) -> None:
        for gate in self._gates:
            print(gate)

    # helpers

    def _check_qubit(self, index: int, role: str) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"{role} qubit index is out of range")

    def _check_controlled(self, control: int, target: int) -> None:
        self._check_qubit(target, "target")
        self._check_qubit(control, "control")
        if target == control:
            raise ValueError("target qubit must be different from control qubit")

    def _check_doubly_controlled(self, control1: int, control2: int, target: int) -> None:
        self._check_qubit(target, "target")
        if not (0 <= control1 < self.size and 0 <= control2 < self.size):
            raise IndexError("control qubit index is out of range")
        if target in (control1, control2):
            raise ValueError("target qubit must be different from control qubit")
        if control1 == control2:
            raise ValueError("control qubits indexes should not match")

    def _pairs(self, target: int, controls: Sequence[int] = ()) -> tuple[np.ndarray, np.ndarray]:
        idx = self._indices
        mask = 1 << target
        selected = (idx & mask) == 0
        for control in controls:
            selected &= (idx & (1 << control)) != 0
        low = idx[selected]
        return low, low | mask

    def _phase(self, mask: int, phi: float) -> None:
        selected = (self._indices & mask) == mask
        self._state[selected] *= cmath.exp(1j * phi)

    def _probabilities(self) -> np.ndarray:
        return self._state.real ** 2 + self._state.imag ** 2

    # measurement

    def measure(self) -> int:
        """Sample a basis state without changing the register."""
        cumulative = np.cumsum(self._probabilities())
        r = self._rng.random()
        index = int(np.searchsorted(cumulative, r, side="right"))
        return min(index, len(self._state) - 1)

    def measure_qubit(self, target: int) -> np.ndarray:
        """Measure one qubit, collapse the register and return the new state."""
        self._check_qubit(target, "target")
        zero = (self._indices & (1 << target)) == 0
        amplitude0 = float(self._probabilities()[zero].sum())
        if self._rng.random() < amplitude0:
            self._state[~zero] = 0
        else:
            self._state[zero] = 0
        norm = math.sqrt(float(self._probabilities().sum()))
        self._state /= norm
        return self.state

    # single-qubit gates

    def i(self, target: int) -> None:
        self._check_qubit(target, "target")
        self._gates.append(f"I({target})")

    def x(self, target: int) -> None:
        self._check_qubit(target, "target")
        self._gates.append(f"X({target})")
        low, high = self._pairs(target)
        self._state[low], self._state[high] = self._state[high], self._state[low]

    def y(self, target: int) -> None:
        self._check_qubit(target, "target")
        self._gates.append(f"Y({target})")
        low, high = self._pairs(target)
        a, b = self._state[low], self._state[high]
        self._state[low] = -1j * b
        self._state[high] = 1j * a

    def z(self, target: int) -> None:
        self._check_qubit(target, "target")
        self._gates.append(f"Z({target})")
        _, high = self._pairs(target)
        self._state[high] *= -1

    def h(self, target: int) -> None:
        self._check_qubit(target, "target")
        self._gates.append(f"H({target})")
        low, high = self._pairs(target)
        a, b = self._state[low], self._state[high]
        self._state[low] = (a + b) * _INV_SQRT2
        self._state[high] = (a - b) * _INV_SQRT2

    def p(self, phase_shift: float, target: int) -> None:
        self._check_qubit(target, "target")
        self._gates.append(f"P({_fmt(phase_shift)}, {target})")
        self._phase(1 << target, phase_shift)

    def t(self, target: int) -> None:
        self.p(math.pi * 0.25, target)

    def it(self, target: int) -> None:
        self.p(-math.pi * 0.25, target)

    def ru(self, theta: float, phi: float, lam: float, target: int) -> None:
        """General single-qubit rotation U(theta, phi, lambda)."""
        self._check_qubit(target, "target")
        self._gates.append(f"u({_fmt(theta)}, {_fmt(phi)}, {_fmt(lam)}, {target})")
        low, high = self._pairs(target)
        a, b = self._state[low], self._state[high]
        cos, sin = math.cos(theta / 2), math.sin(theta / 2)
        self._state[low] = a * cos - b * cmath.exp(1j * lam) * sin
        self._state[high] = a * cmath.exp(1j * phi) * sin + b * cmath.exp(1j * (lam + phi)) * cos

    # multi-qubit gates

    def cnot(self, control: int, target: int) -> None:
        self._check_controlled(control, target)
        self._gates.append(f"CNOT({control}, {target})")
        low, high = self._pairs(target, (control,))
        self._state[low], self._state[high] = self._state[high], self._state[low]

    def ccnot(self, control1: int, control2: int, target: int) -> None:
        """Toffoli gate built from H, T and CNOT gates."""
        self._check_doubly_controlled(control1, control2, target)
        self.h(target)
        self.cnot(control2, target)
        self.it(target)
        self.cnot(control1, target)
        self.t(target)
        self.cnot(control2, target)
        self.it(target)
        self.cnot(control1, target)
        self.t(control2)
        self.t(target)
        self.cnot(control1, control2)
        self.h(target)
        self.t(control1)
        self.it(control2)
        self.cnot(control1, control2)

    def cp(self, phi: float, control: int, target: int) -> None:
        self._check_controlled(control, target)
        self._phase((1 << target) | (1 << control), phi)

    def cry(self, theta: float, control: int, target: int) -> None:
        self._check_controlled(control, target)
        self._gates.append(f"CRY({_fmt(theta)}, {control}, {target})")
        low, high = self._pairs(target, (control,))
        a, b = self._state[low], self._state[high]
        cos, sin = math.cos(theta / 2), math.sin(theta / 2)
        self._state[low] = a * cos - b * sin
        self._state[high] = a * sin + b * cos

    def ccp(self, phi: float, control1: int, control2: int, target: int) -> None:
        self._check_doubly_controlled(control1, control2, target)
        self._gates.append(f"CCP({_fmt(phi)}, {control1}, {control2}, {target})")
        self._phase((1 << target) | (1 << control1) | (1 << control2), phi)

    def cswap(self, control: int, target1: int, target2: int) -> None:
        self.cnot(target2, target1)
        self.ccnot(control, target1, target2)
        self.cnot(target2, target1)
        self._gates.append(f"CSWAP({control}, {target1}, {target2})")

    # composed circuits

    def add(self, bits: int) -> None:
        """Classical ripple-carry addition of two ``bits``-bit numbers."""
        if 3 * bits + 1 > self.size:
            raise IndexError("classical addition requires 3n + 1 qubits to add two n-bit numbers")
        for i in range(bits):
            base = 3 * i
            self.ccnot(base + 1, base + 2, base + 3)
            self.cnot(base + 1, base + 2)
            self.ccnot(base, base + 2, base + 3)
        self.cnot(3 * bits - 2, 3 * bits - 1)
        self.cnot(3 * bits - 2, 3 * bits - 1)
        self.cnot(3 * bits - 3, 3 * bits - 1)
        for i in range(1, bits):
            base = (bits - i - 1) * 3
            self.ccnot(base, base + 2, base + 3)
            self.cnot(base + 1, base + 2)
            self.ccnot(base + 1, base + 2, base + 3)
            self.cnot(base + 1, base + 2)
            self.cnot(base, base + 2)

    def _check_range(self, first: int, last: int, name: str) -> int:
        if last - 1 > self.size:
            raise IndexError(f"{name} out of range")
        if last < first:
            raise ValueError(f"{name} range is empty")
        return last - first

    def qft(self, first: int, last: int, approximate: bool = False) -> None:
        """Quantum Fourier transform on qubits ``first`` .. ``last - 1``."""
        width = self._check_range(first, last, "qft")
        threshold = int(math.log2(width + 1)) + 2
        for i in range(width):
            self.h(first + i)
            for k in range(2, width - i + 1):
                if approximate and k > threshold:
                    break
                self.cp(2 * math.pi / (1 << k), first + i, first + k + i - 1)

    def iqft(self, first: int, last: int, approximate: bool = False) -> None:
        """Inverse quantum Fourier transform on qubits ``first`` .. ``last - 1``."""
        width = self._check_range(first, last, "iqft")
        threshold = int(math.log2(width + 1)) + 2 if approximate else width
        for i in range(width - 1, -1, -1):
            for k in range(min(width - i, threshold), 1, -1):
                self.cp(-2 * math.pi / (1 << k), first + i, first + k + i - 1)
            self.h(first + i)

    # noise

    def amp_damp(self, gamma: float, target: int, ancillary: int) -> None:
        """Amplitude damping of ``target`` with probability ``gamma``."""
        theta = math.asin(math.sqrt(gamma)) * 2
        self.cry(theta, target, ancillary)
        self.cnot(ancillary, target)
        self.measure_qubit(ancillary)

    def amp_damp_all(self, gamma: float) -> None:
        """Damp the upper half of the qubits, using the lower half as ancillas."""
        half = self.size // 2
        for i in range(half):
            self.amp_damp(gamma, half + i, i)