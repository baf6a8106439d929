"""Adding two numbers with classical and quantum circuits."""

from __future__ import annotations

from qsimulator.arithmetic import qadd
from qsimulator.statevector import StateVector


def classical_add(a: int, b: int, bits: int) -> int:
    """Add two ``bits``-bit numbers with a reversible ripple-carry circuit."""
    state = StateVector(3 * bits + 1)
    for i in range(bits):
        if (a >> i) & 1:
            state.x(3 * i + 1)
        if (b >> i) & 1:
            state.x(3 * i + 2)
    state.add(bits)
    result = state.measure()

    total = 0
    for i in range(bits):
        result >>= 2
        total += (result & 1) << i
        result >>= 1
    total += (result & 1) << bits
    return total


def quantum_add(a: int, b: int, bits: int, approximate: bool = False) -> int:
    """Add ``b`` to ``a`` modulo ``2 ** bits`` in the Fourier basis."""
    state = StateVector(bits)
    for i in range(bits):
        if (a >> i) & 1:
            state.x(bits - 1 - i)
    state.qft(0, bits, approximate)
    qadd(state, b, 0, bits, approximate)
    state.iqft(0, bits, approximate)
    result = state.measure()

    total = 0
    for _ in range(bits):
        total = (total << 1) | (result & 1)
        result >>= 1
    return total