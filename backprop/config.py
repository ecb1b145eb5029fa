# backprop/config.py
"""
Package-wide defaults.

`default_config` is read at call time, so changing one of its fields affects
every Node or check created afterwards.
"""
from dataclasses import dataclass, field

import numpy as np


@dataclass
class BackpropConfig:
    """
    Attributes
    ----------
    dtype : numpy.dtype
        Element type used for Nodes built from plain Python numbers.
    fd_epsilon : float
        Perturbation used by the finite-difference checks.
    fd_tolerance : float
        Absolute tolerance between numeric and analytic gradients.
    """
    dtype: np.dtype = field(default_factory=lambda: np.dtype(np.float64))
    fd_epsilon: float = 1e-5
    fd_tolerance: float = 0.05


default_config = BackpropConfig()
