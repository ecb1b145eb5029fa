# tests/test_gradcheck.py
"""Finite-difference cross-checks of the analytic gradients."""

import pytest

from backprop import (
    GradientCheckError, Multiply, Node,
    check_gradients, check_operation,
)


@pytest.mark.parametrize("build", [
    lambda a, b: a + b,
    lambda a, b: a * b,
    lambda a, b: a.tanh(),
    lambda a, b: b.exp(),
    lambda a, b: a * a,
], ids=["add", "mul", "tanh", "exp", "square"])
def test_every_primitive_matches_finite_difference(build):
    a, b = Node(0.3), Node(-1.2)
    out = build(a, b)
    for numeric, analytic in check_operation(out.producer):
        assert numeric == pytest.approx(analytic, abs=0.05)


def test_check_restores_values():
    a, b = Node(4.0), Node(5.5)
    c = a * b
    check_operation(c.producer)
    assert (a.value, b.value, c.value) == (4.0, 5.5, 22.0)


def test_whole_graph_with_reuse():
    t, t2, t4 = Node(4.0), Node(5.5), Node(-2.0)
    t7 = Node(3.0)
    t8 = t7 * (t * t2 + t2 * t4)
    pairs = check_gradients(t8, [t, t2, t4, t7])
    analytic = [a for _, a in pairs]
    assert analytic == [16.5, 6.0, 16.5, 11.0]
    assert t8.value == 33.0


def test_whole_graph_with_tanh():
    x, w = Node(0.5), Node(-0.8)
    y = (x * w + 0.1).tanh() * x
    check_gradients(y, [x, w])


class BrokenMultiply(Multiply):
    def backward(self):
        out = self.output_node()
        a, b = self.parent_nodes()
        a.gradient += out.gradient
        b.gradient += out.gradient


def test_wrong_derivative_is_reported():
    a, b = Node(4.0), Node(5.5)
    op = BrokenMultiply(a, b)
    product = Node(op.compute(a.value, b.value), producer=op)
    assert product.value == 22.0
    with pytest.raises(GradientCheckError):
        check_operation(op)


def test_derived_nodes_are_not_accepted_as_leaves():
    a, b = Node(4.0), Node(5.5)
    p = a * b
    out = p + a
    with pytest.raises(ValueError):
        check_gradients(out, [a, p])


def test_unrelated_graph_on_the_same_tape_is_left_alone():
    w = Node(1.0)
    other = w * 2.0
    w.set_value(5.0)  # `other` now holds a stale value

    x = Node(0.5)
    y = x * x
    check_gradients(y, [x])
    assert other.value == 2.0
    assert y.value == 0.25
