"""Draper-style arithmetic circuits on a :class:`StateVector`.

Adders work on a register that is already in the Fourier basis (apply
``StateVector.qft`` first and ``StateVector.iqft`` afterwards). Qubit
``first_qubit`` holds the most significant bit of the register.
"""

from __future__ import annotations

import math
from typing import Iterator

from qsimulator.statevector import StateVector


def _threshold(bits: int) -> int:
    return int(math.log2(bits)) + 1 if bits > 0 else 0


def _rotations(bits: int, approximate: bool, inverse: bool) -> Iterator[tuple[int, int, float]]:
    """Yield ``(i, j, angle)`` for the rotations of an adder on ``bits`` qubits."""
    threshold = _threshold(bits)
    pairs = [
        (i, j)
        for i in range(bits)
        for j in range(bits - i)
        if not (approximate and j > threshold)
    ]
    if inverse:
        pairs.reverse()
    sign = -1 if inverse else 1
    for i, j in pairs:
        yield i, j, sign * 2 * math.pi / (1 << (j + 1))


def _constant_rotations(a: int, bits: int, approximate: bool, inverse: bool) -> Iterator[tuple[int, float]]:
    """Yield ``(i, angle)`` for the rotations that add the constant ``a``."""
    for i, j, angle in _rotations(bits, approximate, inverse):
        if a & (1 << (bits - j - i - 1)):
            yield i, angle


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise IndexError(message)


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` (``m > 1``) by the extended Euclid algorithm."""

    def tdivmod(x: int, y: int) -> tuple[int, int]:
        q = abs(x) // abs(y)
        if (x < 0) != (y < 0):
            q = -q
        return q, x - q * y

    b = m
    a1, a2 = 1, 0
    q, r = tdivmod(a, b)
    while r != 0:
        a, b = b, r
        _, r = tdivmod(a, b)
        a1, a2 = a2, a1 - a2 * q
        q, _ = tdivmod(a, b)
    if a2 < 0:
        a2 += m
    return a2


def qadd_registers(state: StateVector, first_qubit: int, bits: int, approximate: bool = False) -> None:
    """Add the register after ``first_qubit .. first_qubit + bits - 1`` into that register."""
    _require(2 * bits + first_qubit <= state.size,
             "quantum addition requires 2n qubits for two n-bit numbers")
    for i, j, angle in _rotations(bits, approximate, inverse=False):
        state.cp(angle, j + i + first_qubit, bits + i + first_qubit)


def iqadd_registers(state: StateVector, first_qubit: int, bits: int, approximate: bool = False) -> None:
    """Inverse of :func:`qadd_registers`."""
    _require(2 * bits + first_qubit <= state.size,
             "quantum addition requires 2n qubits for two n-bit numbers")
    for i, j, angle in _rotations(bits, approximate, inverse=True):
        state.cp(angle, j + i + first_qubit, bits + i + first_qubit)


def qadd(state: StateVector, a: int, first_qubit: int, bits: int, approximate: bool = False) -> None:
    """Add the constant ``a`` to a Fourier-basis register."""
    _require(bits + first_qubit <= state.size, "quantum addition out of range")
    for i, angle in _constant_rotations(a, bits, approximate, inverse=False):
        state.p(angle, i + first_qubit)


def iqadd(state: StateVector, a: int, first_qubit: int, bits: int, approximate: bool = False) -> None:
    """Subtract the constant ``a`` from a Fourier-basis register."""
    _require(bits + first_qubit <= state.size, "quantum subtraction out of range")
    for i, angle in _constant_rotations(a, bits, approximate, inverse=True):
        state.p(angle, i + first_qubit)


def qadd_1c(state: StateVector, a: int, control: int, first_qubit: int, bits: int,
            approximate: bool = False) -> None:
    """Add ``a`` when ``control`` is set."""
    _require(bits + first_qubit <= state.size, "qadd_1c out of range")
    for i, angle in _constant_rotations(a, bits, approximate, inverse=False):
        state.cp(angle, control, i + first_qubit)


def iqadd_1c(state: StateVector, a: int, control: int, first_qubit: int, bits: int,
             approximate: bool = False) -> None:
    """Subtract ``a`` when ``control`` is set."""
    _require(bits + first_qubit <= state.size, "iqadd_1c out of range")
    for i, angle in _constant_rotations(a, bits, approximate, inverse=True):
        state.cp(angle, control, i + first_qubit)


def qadd_2c(state: StateVector, a: int, control1: int, control2: int, first_qubit: int, bits: int,
            approximate: bool = False) -> None:
    """Add ``a`` when both control qubits are set."""
    _require(bits + first_qubit <= state.size, "qadd_2c out of range")
    for i, angle in _constant_rotations(a, bits, approximate, inverse=False):
        state.ccp(angle, control1, control2, i + first_qubit)


def iqadd_2c(state: StateVector, a: int, control1: int, control2: int, first_qubit: int, bits: int,
             approximate: bool = False) -> None:
    """Subtract ``a`` when both control qubits are set."""
    _require(bits + first_qubit <= state.size, "iqadd_2c out of range")
    for i, angle in _constant_rotations(a, bits, approximate, inverse=True):
        state.ccp(angle, control1, control2, i + first_qubit)


def qadd_mod_2c(state: StateVector, a: int, modulus: int, control1: int, control2: int,
                first_qubit: int, bits: int, approximate: bool = False) -> None:
    """Doubly controlled addition of ``a`` modulo ``modulus``.

    Uses ``bits + 1`` register qubits from ``first_qubit`` plus one ancilla after them.
    """
    a %= modulus
    bits += 1
    _require(bits + first_qubit + 1 <= state.size, "qadd_mod_2c out of range")
    top = first_qubit + bits

    qadd_2c(state, a, control1, control2, first_qubit, bits, approximate)
    iqadd(state, modulus, first_qubit, bits, approximate)
    state.iqft(first_qubit, top, approximate)
    state.cnot(first_qubit, top)
    state.qft(first_qubit, top, approximate)
    qadd_1c(state, modulus, top, first_qubit, bits, approximate)
    iqadd_2c(state, a, control1, control2, first_qubit, bits, approximate)
    state.iqft(first_qubit, top, approximate)
    state.x(first_qubit)
    state.cnot(first_qubit, top)
    state.x(first_qubit)
    state.qft(first_qubit, top, approximate)
    qadd_2c(state, a, control1, control2, first_qubit, bits, approximate)


def iqadd_mod_2c(state: StateVector, a: int, modulus: int, control1: int, control2: int,
                 first_qubit: int, bits: int, approximate: bool = False) -> None:
    """Inverse of :func:`qadd_mod_2c`."""
    a %= modulus
    bits += 1
    _require(bits + first_qubit + 1 <= state.size, "iqadd_mod_2c out of range")
    top = first_qubit + bits

    iqadd_2c(state, a, control1, control2, first_qubit, bits, approximate)
    state.iqft(first_qubit, top, approximate)
    state.x(first_qubit)
    state.cnot(first_qubit, top)
    state.x(first_qubit)
    state.qft(first_qubit, top, approximate)
    qadd_2c(state, a, control1, control2, first_qubit, bits, approximate)
    iqadd_1c(state, modulus, top, first_qubit, bits, approximate)
    state.iqft(first_qubit, top, approximate)
    state.cnot(first_qubit, top)
    state.qft(first_qubit, top, approximate)
    qadd(state, modulus, first_qubit, bits, approximate)
    iqadd_2c(state, a, control1, control2, first_qubit, bits, approximate)


def c_mult_mod(state: StateVector, a: int, modulus: int, control: int, first_qubit: int, bits: int,
               approximate: bool = False) -> None:
    """Controlled ``b += a * x mod modulus``; ``x`` and ``b`` follow ``first_qubit``."""
    _require(2 * bits + 2 + first_qubit <= state.size, "c_mult_mod out of range")
    start, stop = first_qubit + bits, first_qubit + 2 * bits + 1
    state.qft(start, stop, approximate)
    for i in range(bits):
        qadd_mod_2c(state, (1 << i) * a, modulus, control, first_qubit + bits - i - 1,
                    start, bits, approximate)
    state.iqft(start, stop, approximate)


def ic_mult_mod(state: StateVector, a: int, modulus: int, control: int, first_qubit: int, bits: int,
                approximate: bool = False) -> None:
    """Inverse of :func:`c_mult_mod`."""
    _require(2 * bits + 2 + first_qubit <= state.size, "ic_mult_mod out of range")
    start, stop = first_qubit + bits, first_qubit + 2 * bits + 1
    state.qft(start, stop, approximate)
    for i in range(bits):
        iqadd_mod_2c(state, (1 << i) * a, modulus, control, first_qubit + bits - i - 1,
                     start, bits, approximate)
    state.iqft(start, stop, approximate)


def controlled_u(state: StateVector, a: int, modulus: int, control: int, first_qubit: int, bits: int,
                 approximate: bool = False) -> None:
    """Controlled in-place ``x -> a * x mod modulus``."""
    _require(2 * bits + first_qubit + 2 <= state.size, "controlled-U(a) out of range")
    c_mult_mod(state, a, modulus, control, first_qubit, bits, approximate)
    for i in range(bits):
        state.cswap(control, first_qubit + i, first_qubit + bits + 1 + i)
    inverse = mod_inverse(a, modulus)
    ic_mult_mod(state, inverse, modulus, control, first_qubit, bits, approximate)