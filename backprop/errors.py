# backprop/errors.py
"""
Exception taxonomy for the backprop package.

Every failure here is a programming error (a malformed graph or a type
mismatch), so nothing is meant to be retried or recovered from.
"""


class BackpropError(Exception):
    """Base class for all errors raised by backprop."""


class ElementTypeMismatchError(BackpropError, TypeError):
    """Two Nodes with different element types were combined."""

    def __init__(self, op_tag: str, left, right):
        super().__init__(
            f"cannot {op_tag} nodes of different element types: "
            f"{left.name} and {right.name}"
        )
        self.op_tag = op_tag
        self.left = left
        self.right = right


class MalformedGraphError(BackpropError, AssertionError):
    """The graph is in a state that cannot be used safely."""


class GradientCheckError(BackpropError, AssertionError):
    """Analytic and finite-difference gradients disagree."""
