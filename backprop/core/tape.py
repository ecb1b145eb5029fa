# backprop/core/tape.py
from __future__ import annotations
from typing import List, Optional
from contextlib import contextmanager
import weakref

from ..errors import MalformedGraphError
from .constants import ConstantCache


class Tape:
    """
    Arena that indexes every Node of a graph.

    Nodes are addressed by integer handles handed out in creation order;
    Operations refer to their parents and output by handle, so a Node never
    depends on where another Node object lives.

    The tape does not keep Nodes alive: a leaf lives as long as the caller or
    a consuming Operation holds it, a derived Node as long as the caller or a
    downstream Operation does. Released Nodes (and the Operations that only
    they owned) drop out of `nodes` / `operations` automatically.

    `reset()` starts a new generation. Handles are never reused, and Nodes or
    Operations from an earlier generation are rejected by `node()`.
    """
    def __init__(self):
        self.generation = 0
        self._next_handle = 0
        self._nodes = weakref.WeakValueDictionary()
        self._next_op = 0
        self._operations = weakref.WeakValueDictionary()
        self.constants = ConstantCache(self)

    def __len__(self):
        return len(self._nodes)

    @property
    def nodes(self) -> List:
        """Live Nodes in creation order."""
        return [self._nodes[h] for h in sorted(self._nodes.keys())]

    @property
    def operations(self) -> List:
        """Live Operations in creation (forward) order."""
        return [self._operations[k] for k in sorted(self._operations.keys())]

    def reset(self):
        """Forget every Node, Operation and cached constant; start a new generation."""
        self.generation += 1
        self._nodes.clear()
        self._operations.clear()
        self.constants.clear()

    def push_node(self, node) -> int:
        """Index `node` and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._nodes[handle] = node
        return handle

    def push_operation(self, op):
        self._operations[self._next_op] = op
        self._next_op += 1

    def check_generation(self, generation: int, what: str = "node"):
        if generation != self.generation:
            raise MalformedGraphError(
                f"{what} was recorded before the tape was reset "
                f"(generation {generation}, tape is at {self.generation})"
            )

    def node(self, handle: int, generation: Optional[int] = None):
        """Resolve a handle, failing loudly on one this tape does not hold."""
        if generation is not None:
            self.check_generation(generation)
        try:
            return self._nodes[handle]
        except KeyError:
            raise MalformedGraphError(
                f"handle {handle} is not on this tape; "
                f"was the node released or the tape reset?"
            ) from None

    def constant(self, value, dtype=None):
        """Memoized leaf Node for a literal value (see ConstantCache)."""
        return self.constants.get_or_create_constant(value, dtype)

    def zero_gradients(self):
        for node in self.nodes:
            node.gradient = 0


# Global default tape (one per process unless switched with use_tape)
global_tape = Tape()


def active_tape() -> Tape:
    from . import tape as _tape_mod  # read through the module so use_tape() is honoured
    return _tape_mod.global_tape


@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to temporarily use another (by default fresh) tape:
        with use_tape():
            ... build computation ...
            y.backward()
    """
    from . import tape as _tape_mod  # local import to rebind the module attribute
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev
