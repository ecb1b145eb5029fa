# tests/test_node.py
"""Tests for Node construction, accessors and stringification."""

import numpy as np
import pytest

from backprop import Add, Node, MalformedGraphError


def test_leaf_defaults():
    t = Node(4.0)
    assert t.value == 4.0
    assert t.get_value() == 4.0
    assert t.gradient == 0.0
    assert t.producer is None
    assert t.is_leaf
    assert t.shape == ()


def test_default_element_type_is_float64():
    assert Node(1.0).dtype == np.float64
    assert Node(3).dtype == np.float64


def test_element_type_from_numpy_scalar():
    t = Node(np.float32(5.5))
    assert t.dtype == np.float32
    assert t.value == 5.5


def test_explicit_dtype_casts_value():
    t = Node(0.1, dtype=np.float32)
    assert t.value.dtype == np.float32
    assert t.value == np.float32(0.1)


@pytest.mark.parametrize("bad", ["1.0", None, True, 1 + 2j, [1.0]])
def test_rejects_non_real_payloads(bad):
    with pytest.raises(TypeError):
        Node(bad)


def test_rejects_integer_element_type():
    with pytest.raises(TypeError):
        Node(1, dtype=np.int32)


def test_set_value_keeps_element_type():
    t = Node(1.0, dtype=np.float32)
    t.set_value(2.5)
    assert t.value == 2.5
    assert t.value.dtype == np.float32


def test_gradient_assignment_casts():
    t = Node(1.0, dtype=np.float32)
    t.gradient = 1
    assert t.gradient == 1.0
    assert t.gradient.dtype == np.float32


def test_handles_follow_creation_order(tape):
    a = Node(1.0)
    b = Node(2.0)
    assert (a.handle, b.handle) == (0, 1)
    assert tape.node(1) is b
    assert len(tape) == 2


def test_derived_node_attaches_itself_to_producer(tape):
    a, b = Node(4.0), Node(5.5)
    op = Add(a, b)
    assert op.output is None
    c = Node(op.compute(a.value, b.value), producer=op)
    assert op.output == c.handle
    assert op.output_node() is c
    assert c.producer is op
    assert not c.is_leaf
    assert tape.operations == [op]


def test_producer_output_attached_only_once(tape):
    a, b = Node(4.0), Node(5.5)
    op = Add(a, b)
    c = Node(9.5, producer=op)
    assert op.output == c.handle
    n_before = len(tape)
    with pytest.raises(MalformedGraphError):
        Node(9.5, producer=op)
    assert len(tape) == n_before


def test_str_rendering():
    assert str(Node(4.0, dtype=np.float32)) == "Node<float32>(){4.0}"


def test_repr_rendering():
    a = Node(4.0)
    s = a + Node(5.5)
    assert repr(a) == "Node<float64>(shape=(), value=4.0, grad=0.0)"
    assert "op=add" in repr(s)
    assert "value=9.5" in repr(s)
