# backprop/core/dtypes.py
import numbers
from typing import Any, Optional

import numpy as np

from ..config import default_config


def resolve_dtype(value: Any, dtype: Optional[Any] = None) -> np.dtype:
    """
    Pick the element type of a scalar payload.

    Order: explicit `dtype`, then the dtype of a numpy floating scalar,
    then `default_config.dtype`. Only floating-point element types are valid.
    """
    if dtype is None:
        dtype = value.dtype if isinstance(value, np.floating) else default_config.dtype
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(f"Node element type must be floating point, got {dtype.name}")
    return dtype


def as_scalar(value: Any, dtype: np.dtype):
    """Validate a scalar payload and cast it to `dtype`."""
    # bool is an int subclass; a flag is never a meaningful graph value
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(
            f"Node only accepts real scalars (int, float, numpy floating), "
            f"but got {type(value)}"
        )
    return dtype.type(value)
