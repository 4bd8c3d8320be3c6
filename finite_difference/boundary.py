"""
fixed value (dirichlet) boundary conditions written into the ghost cells
"""

import numpy as np
from finite_difference.config import AdvectionConfig


def apply_dirichlet_x(u: np.ndarray, bval_left: float, bval_right: float):
    """
    overwrites:
        u[0, :], u[-1, :]
    """
    u[0, :] = bval_left
    u[-1, :] = bval_right


def apply_dirichlet_y(u: np.ndarray, bval_lower: float, bval_upper: float):
    """
    overwrites:
        u[:, 0], u[:, -1]
    """
    u[:, 0] = bval_lower
    u[:, -1] = bval_upper


def apply_boundaries(u: np.ndarray, config: AdvectionConfig):
    """
    x boundaries first, then y, so corner cells end up with the lower/upper
    values
    args:
        u:          (nx + 2, ny + 2)
        config:     provides bval_left, bval_right, bval_lower, bval_upper
    """
    apply_dirichlet_x(u, config.bval_left, config.bval_right)
    apply_dirichlet_y(u, config.bval_lower, config.bval_upper)
