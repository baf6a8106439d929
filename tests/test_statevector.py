import math
import random

import numpy as np
import pytest

from qsimulator.statevector import StateVector

R = 1.0 / math.sqrt(2)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _close(actual, expected, tol=1e-12):
    np.testing.assert_allclose(np.asarray(actual), np.asarray(expected, dtype=complex), atol=tol, rtol=0)


def _prepared(size):
    s = StateVector(size)
    s.h(0)
    s.x(1)
    s.y(2)
    s.h(2)
    s.z(2)
    return s


def test_correct_initial_state():
    _close(StateVector(3).state, [1, 0, 0, 0, 0, 0, 0, 0], 0)


def test_identity_keeps_state():
    s1, s2 = StateVector(3), StateVector(3)
    s1.i(0)
    _close(s1.state, s2.state, 0)


def test_state_is_a_copy():
    s = StateVector(2)
    st = s.state
    st[0] = 0
    assert s.state[0] == 1


def test_can_measure():
    s = StateVector(3)
    assert s.measure() == 0
    s.x(2)
    assert s.measure() == 4
    s.x(0)
    assert s.measure() == 5


@pytest.mark.parametrize("r, expected", [(0.25, 0), (0.75, 1)])
def test_measure_samples_by_probability(r, expected):
    s = StateVector(1, rng=_FixedRng(r))
    s.h(0)
    assert s.measure() == expected


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_can_measure_single_qubit(seed):
    s = StateVector(3, rng=random.Random(seed))
    s.h(0)
    s.h(1)
    s.p(-math.pi / 4, 1)
    s.p(-math.pi / 3, 0)
    s.measure_qubit(0)
    s.measure_qubit(1)
    returned = s.measure_qubit(2)
    state = s.state
    assert np.linalg.norm(state) == pytest.approx(1.0)
    assert np.count_nonzero(state) == 1
    _close(returned, state, 0)


def test_presentation1():
    s = StateVector(2)
    s.h(1)
    _close(s.state, [R, 0, R, 0])


def test_presentation2():
    s = StateVector(2)
    s.h(1)
    s.x(0)
    _close(s.state, [0, R, 0, R])


def test_presentation3():
    s = StateVector(2)
    s.h(0)
    s.cnot(0, 1)
    _close(s.state, [R, 0, 0, R])


def test_circuit_s1():
    s = StateVector(3)
    s.x(1)
    s.h(0)
    s.z(1)
    s.cnot(0, 1)
    s.x(0)
    s.cnot(2, 1)
    s.h(0)
    s.z(1)
    _close(s.state, [-0.5, -0.5, 0.5, -0.5, 0, 0, 0, 0], 1e-7)


def test_circuit_s2():
    s = StateVector(3)
    s.h(0)
    s.cnot(0, 1)
    _close(s.state, [R, 0, 0, R, 0, 0, 0, 0])


def test_circuit_s3():
    s = StateVector(3)
    s.h(0)
    s.x(1)
    s.cnot(1, 0)
    _close(s.state, [0, 0, R, R, 0, 0, 0, 0])


def test_circuit_s4():
    s = StateVector(3)
    s.h(0)
    s.x(1)
    s.cnot(1, 0)
    s.x(2)
    s.z(1)
    _close(s.state, [0, 0, 0, 0, 0, 0, -R, -R])


def test_circuit_s5():
    s = StateVector(3)
    s.h(0)
    s.cnot(0, 2)
    _close(s.state, [R, 0, 0, 0, 0, R, 0, 0])


def test_circuit_s6():
    s = StateVector(3)
    s.h(0)
    s.x(2)
    s.cnot(0, 2)
    _close(s.state, [0, R, 0, 0, R, 0, 0, 0])


def test_circuit_s7():
    s = StateVector(3)
    s.h(0)
    s.x(2)
    s.cnot(0, 2)
    s.p(math.pi / 2, 2)
    _close(s.state, [0, R, 0, 0, 1j * R, 0, 0, 0], 1e-7)


def test_circuit_s8():
    s = StateVector(3)
    s.p(-math.pi / 4, 1)
    s.cnot(0, 1)
    s.p(math.pi / 4, 1)
    s.cnot(0, 1)
    _close(s.state, [1, 0, 0, 0, 0, 0, 0, 0])


def test_circuit_s9():
    s = StateVector(3)
    s.x(0)
    s.h(1)
    s.p(-math.pi / 4, 1)
    s.cnot(0, 1)
    s.p(math.pi / 2, 1)
    s.cnot(0, 1)
    _close(s.state, [0, 1j * R, 0, 0.5 - 0.5j, 0, 0, 0, 0], 1e-7)


def test_cry_gate():
    s = StateVector(2)
    s.h(0)
    s.cry(0.1, 0, 1)
    _close(s.state, [R, R * math.cos(0.05), 0, R * math.sin(0.05)], 1e-7)


def test_cry_gate_1():
    s = StateVector(3)
    s.x(0)
    s.h(1)
    s.h(2)
    s.p(-math.pi / 4, 1)
    s.cnot(0, 1)
    s.p(math.pi / 2, 1)
    s.cnot(0, 1)
    s.cry(0.1, 0, 1)
    a = -0.0176703 + 0.51704543j
    b = 0.35311154 - 0.32812196j
    _close(s.state, [0, a, 0, b, 0, a, 0, b], 1e-7)


def test_u_gate_inverse():
    s = StateVector(3)
    expected = s.state
    s.ru(1.1, 2.2, 0.3, 0)
    s.ru(2.1, 2.9, 3.1, 1)
    s.ru(0.5789, 1.9, 2.3456, 2)
    s.ru(-1.1, -0.3, -2.2, 0)
    s.ru(-2.1, -3.1, -2.9, 1)
    s.ru(-0.5789, -2.3456, -1.9, 2)
    _close(s.state, expected, 1e-5)


def test_t_and_inverse_t():
    s = StateVector(1)
    s.x(0)
    s.t(0)
    _close(s.state, [0, complex(R, R)])
    s.it(0)
    _close(s.state, [0, 1])


@pytest.mark.parametrize("basis", range(8))
def test_ccnot_truth_table(basis):
    s = StateVector(3, rng=_FixedRng(0.5))
    for q in range(3):
        if basis >> q & 1:
            s.x(q)
    s.ccnot(0, 1, 2)
    expected = basis ^ 4 if basis & 3 == 3 else basis
    assert s.measure() == expected
    assert abs(s.state[expected]) == pytest.approx(1.0)


@pytest.mark.parametrize("basis, expected", [(3, 5), (5, 3), (2, 2), (7, 7)])
def test_cswap(basis, expected):
    s = StateVector(3, rng=_FixedRng(0.5))
    for q in range(3):
        if basis >> q & 1:
            s.x(q)
    s.cswap(0, 1, 2)
    assert s.measure() == expected


def test_ccp_applies_phase_only_when_all_set():
    s = StateVector(3)
    for q in range(3):
        s.h(q)
    s.ccp(math.pi, 0, 1, 2)
    amp = 1 / math.sqrt(8)
    _close(s.state, [amp] * 7 + [-amp])


def test_classic_add_circuit():
    s = StateVector(10)
    s.x(2)
    s.x(7)
    s.x(8)
    s.add(3)
    assert s.measure() == 644


def test_add_out_of_range():
    with pytest.raises(IndexError):
        StateVector(9).add(3)


def test_qft_of_zero_is_uniform():
    s = StateVector(3)
    s.qft(0, 3)
    _close(s.state, [1 / math.sqrt(8)] * 8)


@pytest.mark.parametrize("approximate", [False, True])
def test_qft_is_inverse_to_iqft(approximate):
    s1, s2 = _prepared(3), _prepared(3)
    s1.qft(0, 3, approximate)
    s1.iqft(0, 3, approximate)
    _close(s1.state, s2.state, 1e-7)


def test_qft_out_of_range():
    with pytest.raises(IndexError):
        StateVector(3).qft(0, 5)
    with pytest.raises(IndexError):
        StateVector(3).iqft(0, 5)


@pytest.mark.parametrize(
    "call, error",
    [
        (lambda s: s.x(3), IndexError),
        (lambda s: s.h(-1), IndexError),
        (lambda s: s.cnot(1, 1), ValueError),
        (lambda s: s.cnot(3, 1), IndexError),
        (lambda s: s.cp(0.5, 2, 2), ValueError),
        (lambda s: s.cry(0.5, 0, 4), IndexError),
        (lambda s: s.ccnot(0, 0, 1), ValueError),
        (lambda s: s.ccnot(0, 1, 1), ValueError),
        (lambda s: s.ccp(0.1, 0, 5, 1), IndexError),
        (lambda s: s.measure_qubit(3), IndexError),
    ],
)
def test_invalid_qubits(call, error):
    with pytest.raises(error):
        call(StateVector(3))


def test_gate_log(capsys):
    s = StateVector(2)
    s.x(1)
    s.p(0.3, 0)
    s.cnot(0, 1)
    assert s.gates == ("X(1)", "P(0.300000, 0)", "CNOT(0, 1)")
    s.print_gates()
    assert capsys.readouterr().out == "X(1)\nP(0.300000, 0)\nCNOT(0, 1)\n"


def test_full_damping_decays_target():
    s = StateVector(2, rng=_FixedRng(0.5))
    s.x(1)
    s.amp_damp(1.0, 1, 0)
    assert s.measure() == 1
    _close(s.state, [0, 1, 0, 0], 1e-12)


def test_zero_damping_keeps_state():
    s = StateVector(2, rng=_FixedRng(0.5))
    s.h(1)
    s.amp_damp_all(0.0)
    _close(s.state, [R, 0, R, 0])


def test_damping_all_qubits():
    s = StateVector(4, rng=_FixedRng(0.5))
    s.x(2)
    s.x(3)
    s.amp_damp_all(1.0)
    assert s.measure() == 3
    assert np.linalg.norm(s.state) == pytest.approx(1.0)