"""
Numerical precision constants and library-wide defaults.

Provides machine epsilon per floating dtype and the defaults used when a
caller does not pass an explicit dtype, tolerance or display precision.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# Element type used by builders when no dtype is given
DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)

# Number of decimals used when rendering floating matrices
DEFAULT_PRECISION: int = 2


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy floating dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)
