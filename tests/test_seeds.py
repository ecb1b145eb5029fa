# tests/test_seeds.py
"""Convenience drivers that seed the output and run one backward pass."""

import numpy as np
import pytest

from backprop import Node, grad, grads, grads_list, value


def test_grad_single_input():
    assert grad(lambda x: x * x, 3.0) == 6.0


def test_grad_of_tanh():
    g = grad(lambda x: x.tanh(), 0.2)
    assert g == pytest.approx(1 - np.tanh(0.2) ** 2)


def test_grad_keeps_requested_dtype():
    g = grad(lambda x: x * 2.0, 1.0, dtype=np.float32)
    assert g.dtype == np.float32
    assert g == 2.0


def test_grads_dict():
    out = grads(lambda v: v["a"] * v["b"] + v["a"], {"a": 2.0, "b": 5.0})
    assert list(out) == ["a", "b"]
    assert out == {"a": 6.0, "b": 2.0}


def test_grads_list():
    assert grads_list(lambda xs: xs[0] * xs[0] + 3 * xs[1], [2.0, 4.0]) == [4.0, 3.0]


def test_constant_function_has_zero_gradient():
    assert grad(lambda x: 5.0, 1.0) == 0.0


def test_drivers_leave_active_tape_untouched(tape):
    grad(lambda x: x * x, 3.0)
    assert len(tape) == 0


def test_value():
    assert value(Node(2.5)) == 2.5
    assert value(7) == 7
