# backprop/gradcheck.py
"""
Finite-difference validation of analytic gradients.

Each check perturbs one input by `epsilon`, recomputes the forward value and
compares the slope (perturbed - original) / epsilon with the gradient the
backward pass accumulated. Forward differences come from
`scipy.optimize.approx_fprime`.

Use float64 Nodes: with float32 the rounding of a 1e-5 step alone is larger
than the default tolerance.
"""
from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np
from scipy.optimize import approx_fprime

from .config import default_config
from .core.engine import backward, forward, zero_gradients
from .errors import GradientCheckError


def _numeric_partial(node, output, recompute: Callable[[], None], epsilon: float) -> float:
    """d(output)/d(node) by a forward difference; restores the node afterwards."""
    original = node.value

    def f(x):
        node.set_value(x[0])
        recompute()
        return float(output.value)

    try:
        return float(approx_fprime(np.array([float(original)]), f, epsilon)[0])
    finally:
        node.set_value(original)
        recompute()


def _unique(nodes: Iterable) -> List:
    seen, out = set(), []
    for node in nodes:
        if node.handle not in seen:
            seen.add(node.handle)
            out.append(node)
    return out


def _compare(pairs, tolerance: float, what: str):
    for node, (numeric, analytic) in pairs:
        if abs(numeric - analytic) > tolerance:
            raise GradientCheckError(
                f"{what}: gradient of node {node.handle} is {analytic:.6g}, "
                f"finite difference gives {numeric:.6g} (tolerance {tolerance:g})"
            )


def check_operation(op, epsilon: Optional[float] = None,
                    tolerance: Optional[float] = None) -> List[Tuple[float, float]]:
    """
    Check one primitive: seed its output with 1, run its backward step, then
    compare every (distinct) parent's gradient against a finite difference of
    `op.forward()`.

    Returns
    -------
    list of (numeric, analytic) pairs, one per distinct parent.
    """
    epsilon = default_config.fd_epsilon if epsilon is None else epsilon
    tolerance = default_config.fd_tolerance if tolerance is None else tolerance

    out = op.output_node()
    parents = _unique(op.parent_nodes())
    for p in parents:
        p.gradient = 0
    out.gradient = 1
    op.backward()

    pairs = [(p, (_numeric_partial(p, out, op.forward, epsilon), float(p.gradient)))
             for p in parents]
    _compare(pairs, tolerance, op.op_tag)
    return [pair for _, pair in pairs]


def check_gradients(root, leaves: Iterable, epsilon: Optional[float] = None,
                    tolerance: Optional[float] = None) -> List[Tuple[float, float]]:
    """
    Check a whole graph: one backward pass from `root` seeded with 1, then a
    finite difference per leaf, recomputing only the Nodes `root` depends on.

    Gradients reachable from `root` are zeroed first. Every entry of `leaves`
    must be a leaf Node; perturbing a derived Node would be undone by the
    recomputation.
    """
    epsilon = default_config.fd_epsilon if epsilon is None else epsilon
    tolerance = default_config.fd_tolerance if tolerance is None else tolerance

    leaves = _unique(leaves)
    for leaf in leaves:
        if not leaf.is_leaf:
            raise ValueError(
                f"check_gradients() needs leaf Nodes; node {leaf.handle} "
                f"is produced by {leaf.producer.op_tag}"
            )
    zero_gradients(root)
    for leaf in leaves:
        leaf.gradient = 0
    root.gradient = 1
    backward(root)

    def recompute():
        forward(root)

    pairs = [(leaf, (_numeric_partial(leaf, root, recompute, epsilon), float(leaf.gradient)))
             for leaf in leaves]
    _compare(pairs, tolerance, "graph")
    return [pair for _, pair in pairs]
