# qsimulator

A small quantum circuit simulator built on a dense state vector, with
Fourier-basis arithmetic circuits and Shor's factoring algorithm.

## Contents

- `qsimulator.matrix.Matrix`: a square complex matrix. It supports item access
  by `(row, column)`, `==`, in-place `+=`, `m1 @ m2` for matrix products,
  `m @ vector` for matrix-vector products (returns a NumPy array), `kron` (replaces
  the matrix with its Kronecker product in place), `copy` and the `size` property.
  Mismatched sizes raise `ValueError`.
- `qsimulator.statevector.StateVector`: a register of qubits that gates act on
  in place: `i`, `x`, `y`, `z`, `h`, `p` (phase), `t`, `it` (inverse T), `ru`
  (general rotation U(theta, phi, lambda)), `cnot`, `ccnot` (Toffoli, built from
  H, T and CNOT), `cp` (controlled phase), `cry` (controlled Ry), `ccp`
  (doubly controlled phase) and `cswap`. It also has `add` (reversible
  ripple-carry adder), `qft` and `iqft`, `measure`, `measure_qubit`, and
  amplitude-damping noise through `amp_damp` and `amp_damp_all`. The `state`
  property returns a copy of the amplitudes; `gates` and `print_gates` show the
  gates that were recorded. Bad qubit indices raise `IndexError`; a control
  equal to its target raises `ValueError`.
- `qsimulator.arithmetic`: Fourier-basis adders for a `StateVector`:
  `qadd_registers` / `iqadd_registers` (register plus register), `qadd` /
  `iqadd` (add or subtract a constant), the controlled forms `qadd_1c`,
  `iqadd_1c`, `qadd_2c`, `iqadd_2c`, modular addition `qadd_mod_2c` /
  `iqadd_mod_2c`, controlled modular multiplication `c_mult_mod` /
  `ic_mult_mod`, the in-place controlled multiplication `controlled_u` that
  Shor's algorithm uses, and `mod_inverse`.
- `qsimulator.system.System`: a register whose amplitudes can be given directly
  (`System.from_state`), with `measure`, `sample` and `measure_qubit`.
- `qsimulator.addition`: `classical_add` and `quantum_add`, which add two
  integers by running the matching circuit and measuring the result.
- `qsimulator.shor`: `find_order`, `gcd`, `mod_pow`, `perfect_power`,
  `quantum_order_finding`, `shor_classic` and `shor_quantum`.

## Installation

```
pip install .
```

Run the test suite with:

```
pip install .[test]
pytest
```

## Usage

Build a Bell state and measure it:

```python
from qsimulator.statevector import StateVector

s = StateVector(2)
s.h(0)
s.cnot(0, 1)
print(s.state)      # amplitudes of |00>, |01>, |10>, |11>
print(s.measure())  # 0 or 3
```

Qubit `k` is bit `k` of the basis-state index, so `x(2)` on a fresh
three-qubit register gives index 4. `measure` does not change the register;
`measure_qubit` collapses it and returns the new state.

Apply the quantum Fourier transform and undo it:

```python
s = StateVector(3)
s.h(0)
s.x(1)
s.qft(0, 3)
s.iqft(0, 3)
```

Pass `approximate=True` to `qft` and `iqft` to drop the smallest controlled
rotations.

Add numbers with circuits:

```python
from qsimulator.addition import classical_add, quantum_add

classical_add(5, 6, 3)   # 11, uses 3*bits + 1 qubits
quantum_add(5, 6, 3)     # 3, the sum modulo 2**bits
```

Modular arithmetic on a register. The arithmetic functions take the
`StateVector` as their first argument; in a register the first qubit holds the
most significant bit:

```python
from qsimulator.statevector import StateVector
from qsimulator.arithmetic import controlled_u

s = StateVector(11)
s.x(0)               # control qubit
s.x(2)
s.x(4)               # the register on qubits 1..4 holds 5
controlled_u(s, 5, 13, 0, 1, 4, False)
s.measure()          # 7: control set, register now holds 12 = 5 * 5 mod 13
```

Factor a number:

```python
from qsimulator.shor import shor_classic, shor_quantum, perfect_power

perfect_power(19683)     # 27
shor_classic(1729)       # a nontrivial divisor of 1729
shor_quantum(10, 4)      # 2
```

Both factoring functions return 2 for even numbers and the root for perfect
powers before any order finding. For other numbers `shor_quantum` simulates
`4 * bits + 2` qubits per order-finding run, which grows costly quickly.

Noise:

```python
s = StateVector(6)
s.amp_damp_all(0.011)   # pairs each qubit in the upper half with an ancilla in the lower half
```

## Randomness

Measurement draws from a `random.Random` instance. `StateVector`, `System`,
`quantum_order_finding`, `shor_classic` and `shor_quantum` accept an `rng`
argument so runs can be repeated; `classical_add` and `quantum_add` use a
fresh generator each call.

## What the package does not do

There is no command-line program. Gates are applied directly to a
`StateVector`; there is no separate circuit object, no builders for the gate
matrices of a whole register, and `System` has no way to apply gates, only to
hold, measure and sample a given state.