# backprop/ops/transcendental.py
from ..core.node import Node
from ..core.operation import Exp, Tanh


def _unary(cls, x):
    if not isinstance(x, Node):
        raise TypeError(f"{cls.op_tag} expects a Node, got {type(x)}")
    op = cls(x)
    return Node(op.compute(x.value), producer=op)


def tanh(x):
    """Hyperbolic tangent; backward reuses the stored output value."""
    return _unary(Tanh, x)


def exp(x):
    return _unary(Exp, x)
