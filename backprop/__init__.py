# backprop/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import Node
from .core.operation import Operation, Add, Multiply, Tanh, Exp
from .core.tape import Tape, global_tape, use_tape
from .core.constants import ConstantCache
from .core.engine import (
    topological_order,
    backward,
    forward,
    zero_gradients,
)
from .core.seeds import value, grad, grads, grads_list
from .ops import add, sub, mul, neg, tanh, exp
from .config import BackpropConfig, default_config
from .errors import (
    BackpropError,
    ElementTypeMismatchError,
    MalformedGraphError,
    GradientCheckError,
)
from .gradcheck import check_operation, check_gradients

__all__ = [
    # Core
    'Node',
    'Operation',
    'Add',
    'Multiply',
    'Tanh',
    'Exp',
    'Tape',
    'global_tape',
    'use_tape',
    'ConstantCache',
    # Engine
    'topological_order',
    'backward',
    'forward',
    'zero_gradients',
    # Drivers
    'value',
    'grad',
    'grads',
    'grads_list',
    # Ops
    'add',
    'sub',
    'mul',
    'neg',
    'tanh',
    'exp',
    # Config / errors
    'BackpropConfig',
    'default_config',
    'BackpropError',
    'ElementTypeMismatchError',
    'MalformedGraphError',
    'GradientCheckError',
    # Checks
    'check_operation',
    'check_gradients',
]
