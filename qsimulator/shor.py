"""Shor's factoring algorithm, classical and with quantum order finding."""

from __future__ import annotations

import math
import random
from functools import reduce

from qsimulator.arithmetic import controlled_u
from qsimulator.statevector import StateVector


def find_order(x: int, modulus: int) -> int:
    """Return the smallest ``r > 0`` with ``x ** r == 1 (mod modulus)``."""
    if modulus < 2 or math.gcd(x, modulus) != 1:
        raise ValueError("x must be coprime to a modulus greater than 1")
    r = 1
    value = x % modulus
    while value != 1:
        value = value * x % modulus
        r += 1
    return r


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|``."""
    return math.gcd(a, b)


def mod_pow(base: int, exp: int, m: int) -> int:
    """Return ``base ** exp mod m`` (and 1 when ``exp`` is 0)."""
    if exp == 0:
        return 1
    return pow(base, exp, m)


def perfect_power(n: int) -> int:
    """Return ``p`` where ``n == p ** q`` for some ``q >= 2``, or 0 if there is none."""
    q = 2
    while q < 32 and q < n:
        low, high = 2, n
        while low <= high:
            p = (low + high) // 2
            value = p ** q
            if value == n:
                return p
            if value < n:
                low = p + 1
            else:
                high = p - 1
        q += 1
    return 0


def quantum_order_finding(x: int, modulus: int, bits: int, approximate: bool = False,
                          rng: random.Random | None = None) -> int:
    """Run the quantum order-finding circuit once and return the measured phase register."""
    state = StateVector(4 * bits + 2, rng)
    for i in range(2 * bits):
        state.h(i)
    state.x(3 * bits - 1)
    for i in range(2 * bits):
        factor = mod_pow(x, 1 << i, modulus)
        controlled_u(state, factor, modulus, 2 * bits - 1 - i, 2 * bits, bits, approximate)
    state.qft(0, 2 * bits, approximate)
    mask = (1 << (2 * bits)) - 1
    return state.measure() & mask


def _split_with_order(n: int, x: int, r: int) -> int | None:
    half = mod_pow(x, r // 2, n)
    for candidate in (half + 1, half - 1):
        y = gcd(n, candidate)
        if y not in (0, 1, n) and n % y == 0:
            return y
    return None


def shor_classic(n: int, rng: random.Random | None = None) -> int:
    """Find a non-trivial factor of ``n`` using classical order finding."""
    rng = rng if rng is not None else random.Random()
    if n % 2 == 0:
        return 2
    root = perfect_power(n)
    if root:
        return root
    while True:
        x = rng.randrange(n - 1) + 1
        common = gcd(x, n)
        if common > 1:
            return common
        factor = _split_with_order(n, x, find_order(x, n))
        if factor is not None:
            return factor


def shor_quantum(n: int, bits: int, approximate: bool = False,
                 rng: random.Random | None = None) -> int:
    """Find a non-trivial factor of ``n`` using the simulated quantum order finding."""
    rng = rng if rng is not None else random.Random()
    if n % 2 == 0:
        return 2
    root = perfect_power(n)
    if root:
        return root
    while True:
        x = rng.randrange(n - 1) + 1
        common = gcd(x, n)
        if common > 1:
            return common
        samples = [quantum_order_finding(x, n, bits, approximate, rng) for _ in range(14)]
        g = reduce(gcd, samples)
        if g == 0:
            continue
        r = (1 << (2 * bits)) // g
        factor = _split_with_order(n, x, r)
        if factor is not None:
            return factor