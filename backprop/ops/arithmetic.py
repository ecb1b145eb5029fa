# backprop/ops/arithmetic.py
from ..core.node import Node
from ..core.operation import Add, Multiply


def _as_node(x, like: Node) -> Node:
    """Ensure x is a Node; otherwise fetch the cached constant Node for it."""
    return x if isinstance(x, Node) else like.tape.constant(x, like.dtype)


def _binary(cls, x, y):
    """
    Generic binary primitive:
      - resolves bare scalars through the tape's constant cache
      - records `cls` over (x, y), which rejects mixed element types
      - allocates the output Node holding the forward value
    """
    if not isinstance(x, Node) and not isinstance(y, Node):
        raise TypeError(f"{cls.op_tag} needs at least one Node operand, "
                        f"got {type(x)} and {type(y)}")
    x = _as_node(x, y)
    y = _as_node(y, x)
    op = cls(x, y)
    return Node(op.compute(x.value, y.value), producer=op)


def add(x, y): return _binary(Add, x, y)
def mul(x, y): return _binary(Multiply, x, y)


def neg(x):
    """Negation as x * -1."""
    return mul(x, -1)


def sub(x, y):
    """
    Subtraction as x + (y * -1); its gradients follow from Add and Multiply.
    """
    if not isinstance(y, Node):
        # fold the literal instead of recording a multiply by a constant
        return add(x, -y)
    return add(x, neg(y))
