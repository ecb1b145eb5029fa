# backprop/ops/__init__.py

# Convenience re-exports so users can do: from backprop.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, neg
from .transcendental import tanh, exp

__all__ = [
    "add", "sub", "mul", "neg",
    "tanh", "exp",
]
