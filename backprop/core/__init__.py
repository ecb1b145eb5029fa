# backprop/core/__init__.py

"""
Core public API for the backprop package.

Exports:
    Node              : Scalar value holder; vertex of the computation graph.
    Operation         : Base class of the differentiable primitives.
    Add, Multiply,
    Tanh, Exp         : The primitive Operation variants.
    Tape              : Arena owning the Nodes of a graph.
    global_tape       : The default tape new leaf Nodes are recorded on.
    use_tape          : Context manager to temporarily switch the active tape.
    ConstantCache     : Per-tape memo of literal operands.
    topological_order : Ancestors-first ordering of the Nodes a root depends on.
    backward          : Run a single reverse pass from a seeded root.
    forward           : Recompute the derived values a root depends on.
    zero_gradients    : Reset gradients (reachable from a root, or tape-wide).
    value, grad,
    grads, grads_list : Convenience drivers that seed and run a pass.
"""

from .node import Node
from .operation import Operation, Add, Multiply, Tanh, Exp
from .tape import Tape, global_tape, use_tape
from .constants import ConstantCache
from .engine import topological_order, backward, forward, zero_gradients
from .seeds import value, grad, grads, grads_list

__all__ = [
    "Node",
    "Operation",
    "Add",
    "Multiply",
    "Tanh",
    "Exp",
    "Tape",
    "global_tape",
    "use_tape",
    "ConstantCache",
    "topological_order",
    "backward",
    "forward",
    "zero_gradients",
    "value",
    "grad",
    "grads",
    "grads_list",
]
