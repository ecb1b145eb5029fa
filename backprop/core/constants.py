# backprop/core/constants.py
from typing import Any, Optional
import weakref

from .dtypes import as_scalar, resolve_dtype


class ConstantCache:
    """
    Memoizes leaf Nodes for literal operands, e.g. the `2.0` in `x * 2.0`.

    Entries are keyed by (element type, value), so every element type has its
    own independent set of constants. The cache belongs to one Tape, is
    cleared together with it, and holds its Nodes weakly: a constant stays
    memoized while some graph still uses it and is released with the last one.

    Keys use value equality: 0.0 and -0.0 share an entry, NaN never matches.
    """

    def __init__(self, tape):
        self.tape = tape
        self._nodes = weakref.WeakValueDictionary()

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, key):
        return key in self._nodes

    def clear(self):
        self._nodes.clear()

    def get_or_create_constant(self, value, dtype: Optional[Any] = None):
        """Return the cached leaf Node for `value`, creating it on first use."""
        from .node import Node

        dtype = resolve_dtype(value, dtype)
        key = (dtype, as_scalar(value, dtype))
        node = self._nodes.get(key)
        if node is None:
            node = Node(key[1], dtype=dtype, tape=self.tape)
            self._nodes[key] = node
        return node
