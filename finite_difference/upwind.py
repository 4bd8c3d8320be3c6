import numpy as np


def backward_difference(
    u: np.ndarray,
    vx: np.ndarray,
    vy: float,
    dx: float,
    dy: float,
    out: np.ndarray = None,
) -> np.ndarray:
    """
    -(vx du/dx + vy du/dy) with first order backward differences in both
    directions, regardless of the sign of the velocity
    args:
        u:      state with ghost cells (nx + 2, ny + 2)
        vx:     x velocity for each interior column j (ny,), or a scalar
        vy:     constant y velocity
        dx:     cell size in x
        dy:     cell size in y
        out:    array (nx + 2, ny + 2) whose interior receives the result
    returns:
        out, or a new array with zero ghost cells
    """
    if out is None:
        out = np.zeros_like(u)
    center = u[1:-1, 1:-1]
    west = u[:-2, 1:-1]
    south = u[1:-1, :-2]
    # read only from u, write only to out
    out[1:-1, 1:-1] = -(vx * (center - west) / dx + vy * (center - south) / dy)
    return out
