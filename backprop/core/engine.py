# backprop/core/engine.py
from __future__ import annotations
import logging
from typing import List

from . import tape as tape_mod

logger = logging.getLogger(__name__)


def topological_order(root) -> List:
    """
    Every Node `root` depends on, ancestors before dependents, `root` last.

    Depth-first over producer parents with an explicit stack, so very deep
    chains do not hit the interpreter recursion limit. Nodes are tracked by
    handle, which makes a Node reached along several paths appear once.
    """
    order = []
    visited = {root.handle}
    # (node, iterator over its parent nodes)
    stack = [(root, _parents(root))]
    while stack:
        node, pending = stack[-1]
        for parent in pending:
            if parent.handle not in visited:
                visited.add(parent.handle)
                stack.append((parent, _parents(parent)))
                break
        else:
            # all ancestors emitted
            stack.pop()
            order.append(node)
    return order


def _parents(node):
    # resolved through the producer so stale (pre-reset) graphs are rejected
    return iter(node.producer.parent_nodes() if node.producer is not None else ())


def backward(root):
    """
    Run one reverse pass from a seeded `root`.

    Nodes are processed root first, leaves last, so each node's gradient holds
    every consumer's contribution before its own producer propagates it.

    Notes:
        - Gradients accumulate (+=) across passes; call zero_gradients()
          between passes to start from zero.
        - An unseeded root (gradient 0) yields all-zero contributions.
    """
    if root.producer is not None and root.gradient == 0:
        logger.warning("backward() from %r with a zero gradient; "
                       "seed it (e.g. node.gradient = 1.0) first", root)

    order = topological_order(root)
    logger.debug("backward pass over %d nodes from handle %d", len(order), root.handle)
    for node in reversed(order):
        if node.producer is not None:
            node.producer.backward()


def zero_gradients(root=None):
    """
    Set gradients to zero.

    With a `root`, only the nodes it depends on (and the root itself) are
    cleared; otherwise every node on the active tape is.
    """
    if root is None:
        tape_mod.active_tape().zero_gradients()
        return
    for node in topological_order(root):
        node.gradient = 0


def forward(root):
    """
    Recompute the value of every derived Node `root` depends on, in forward
    order. Nodes outside this graph are left untouched.

    Used after perturbing leaf values with `Node.set_value`.
    """
    for node in topological_order(root):
        if node.producer is not None:
            node.producer.forward()
