# backprop/core/node.py
from __future__ import annotations
from typing import Any, Optional

from ..errors import MalformedGraphError
from .dtypes import as_scalar, resolve_dtype
from .tape import active_tape


class Node:
    """
    Scalar vertex of the computation graph.

    Attributes
    ----------
    value : numpy floating scalar
        Forward (primal) value, stored in the node's element type.
    gradient : numpy floating scalar
        Gradient accumulator, zero at construction. Operations add into it;
        it is never reset implicitly.
    producer : Optional[Operation]
        The operation that computed this node, or None for a leaf.
    tape : Tape
        Arena indexing this node.
    handle : int
        Index of this node on its tape.
    generation : int
        Tape generation the node was created in (see Tape.reset).
    dtype : numpy.dtype
        Element type. Nodes of different element types never combine.
    """

    def __init__(self, value: Any, producer=None, *,
                 dtype: Optional[Any] = None, tape=None):
        if producer is not None:
            if producer.output is not None:
                raise MalformedGraphError(
                    f"{producer.op_tag} already produced node {producer.output}"
                )
            # derived nodes inherit the operands' element type and tape
            dtype = producer.parent_nodes()[0].dtype
            tape = producer.tape
        elif tape is None:
            tape = active_tape()

        self.dtype = resolve_dtype(value, dtype)
        self._value = as_scalar(value, self.dtype)
        self._gradient = self.dtype.type(0)
        self.producer = producer
        self.tape = tape
        self.generation = tape.generation
        self.handle = tape.push_node(self)

        if producer is not None:
            producer.attach_output(self)
            tape.push_operation(producer)

    def __repr__(self):
        op = f", op={self.producer.op_tag}" if self.producer is not None else ""
        return (f"Node<{self.dtype.name}>(shape={self.shape}, value={self._value}, "
                f"grad={self._gradient}{op})")

    def __str__(self):
        return f"Node<{self.dtype.name}>(){{{self._value}}}"

    # ------------------------------------------------------------------ #
    @property
    def shape(self):
        return ()

    @property
    def is_leaf(self) -> bool:
        return self.producer is None

    def get_value(self):
        return self._value

    def set_value(self, value):
        self._value = as_scalar(value, self.dtype)

    value = property(get_value, set_value)

    def get_gradient(self):
        return self._gradient

    def set_gradient(self, gradient):
        self._gradient = as_scalar(gradient, self.dtype)

    gradient = property(get_gradient, set_gradient)

    def backward(self):
        """
        Propagate this node's gradient to every ancestor.

        The caller seeds `self.gradient` first (normally with 1); no implicit
        seeding happens here.
        """
        from .engine import backward
        backward(self)

    def zero_grad(self):
        """Zero the gradient of this node and of everything it depends on."""
        from .engine import zero_gradients
        zero_gradients(self)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)
