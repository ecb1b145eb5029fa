# backprop/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Every driver runs on a fresh, isolated tape.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional

from .node import Node
from .tape import use_tape
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, dtype: Optional[Any] = None) -> Node:
    """Wrap a plain value as a leaf Node if needed; otherwise return the Node itself."""
    return v if isinstance(v, Node) else Node(v, dtype=dtype)


def _seed_and_run(y: Any):
    # a function that ignores its inputs returns a plain number: nothing to propagate
    if isinstance(y, Node):
        y.gradient = 1
        backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: Any, dtype: Optional[Any] = None):
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Runs one backward pass within a fresh, isolated tape.
    """
    with use_tape():
        x = _ensure_node(x0, dtype)
        _seed_and_run(f(x))
        return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, Any], dtype: Optional[Any] = None) -> Dict[str, Any]:
    """
    Partials of y=f(vars) w.r.t. ALL inputs (dict form), from ONE backward pass.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a scalar Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: number}  # gradients in the same key order as `inputs`
    """
    with use_tape():
        nodes = {k: _ensure_node(v, dtype) for k, v in inputs.items()}
        _seed_and_run(f(nodes))
        return {k: nodes[k].gradient for k in inputs}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[Any], dtype: Optional[Any] = None) -> List[Any]:
    """
    Same as grads(), with the inputs given as a list.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs = [_ensure_node(v, dtype) for v in x0_list]
        _seed_and_run(f(xs))
        return [x.gradient for x in xs]
