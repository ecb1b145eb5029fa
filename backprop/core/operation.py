# backprop/core/operation.py
from __future__ import annotations
from typing import List, Optional, Tuple

import numpy as np

from ..errors import ElementTypeMismatchError, MalformedGraphError


class Operation:
    """
    One differentiable primitive recorded on the tape.

    Attributes
    ----------
    op_tag : str
        Debug tag (e.g., "add", "mul").
    tape : Tape
        Arena holding the parent and output Nodes.
    parents : Tuple[int, ...]
        Handles of the operand Nodes, in operand order.
    output : Optional[int]
        Handle of the Node this operation produced. Attached exactly once,
        by the Node constructor. The output owns the operation, not the
        other way round.
    generation : int
        Tape generation the operation was recorded in.

    The operation keeps its operands alive (a Node consumed by several
    operations lives until the last of them is released). Subclasses
    implement `compute` (the forward formula on raw values) and `backward`
    (accumulate into the parents' gradients).
    """
    op_tag = "op"
    arity = 0

    def __init__(self, *parents):
        if self.arity < 1:
            raise TypeError(
                f"{type(self).__name__} is abstract; use Add, Multiply, Tanh or Exp"
            )
        if len(parents) != self.arity:
            raise TypeError(
                f"{type(self).__name__} takes {self.arity} operand(s), got {len(parents)}"
            )
        first = parents[0]
        for other in parents[1:]:
            if other.dtype != first.dtype:
                raise ElementTypeMismatchError(self.op_tag, first.dtype, other.dtype)
            if other.tape is not first.tape:
                raise MalformedGraphError(
                    f"cannot {self.op_tag} nodes recorded on different tapes"
                )
        self.tape = first.tape
        for p in parents:
            self.tape.check_generation(p.generation)
        self.generation = self.tape.generation
        self.parents: Tuple[int, ...] = tuple(p.handle for p in parents)
        self._operands = parents
        self.output: Optional[int] = None

    def __repr__(self):
        return f"{type(self).__name__}(parents={self.parents}, output={self.output})"

    def attach_output(self, node):
        if self.output is not None:
            raise MalformedGraphError(
                f"{self.op_tag} already produced node {self.output}"
            )
        if node.tape is not self.tape:
            raise MalformedGraphError("output node must live on the operation's tape")
        self.output = node.handle

    def parent_nodes(self) -> List:
        return [self.tape.node(h, self.generation) for h in self.parents]

    def output_node(self):
        if self.output is None:
            raise MalformedGraphError(
                f"{self.op_tag} operation has no output node attached"
            )
        return self.tape.node(self.output, self.generation)

    def compute(self, *values):
        raise NotImplementedError

    def forward(self):
        """Recompute the output value from the parents' current values."""
        out = self.output_node()
        out.set_value(self.compute(*(p.value for p in self.parent_nodes())))

    def backward(self):
        raise NotImplementedError


class Add(Operation):
    op_tag = "add"
    arity = 2

    def compute(self, a, b):
        return a + b

    def backward(self):
        out = self.output_node()
        a, b = self.parent_nodes()
        a.gradient += out.gradient
        b.gradient += out.gradient


class Multiply(Operation):
    op_tag = "mul"
    arity = 2

    def compute(self, a, b):
        return a * b

    def backward(self):
        out = self.output_node()
        a, b = self.parent_nodes()
        # product rule; read both values before writing (a and b may be the same node)
        da = out.gradient * b.value
        db = out.gradient * a.value
        a.gradient += da
        b.gradient += db


class Tanh(Operation):
    op_tag = "tanh"
    arity = 1

    def compute(self, a):
        return np.tanh(a)

    def backward(self):
        out = self.output_node()
        (a,) = self.parent_nodes()
        # d/dx tanh(x) = 1 - tanh(x)^2, reusing the stored forward value
        t = out.value
        a.gradient += out.gradient * (1 - t * t)


class Exp(Operation):
    op_tag = "exp"
    arity = 1

    def compute(self, a):
        return np.exp(a)

    def backward(self):
        out = self.output_node()
        (a,) = self.parent_nodes()
        a.gradient += out.gradient * out.value
