"""
logarithmic boundary layer profile for the streamwise (x) velocity

u(y) = (u_star / kappa) * ln(y / y_ref)    for y > y_threshold
u(y) = 0                                   otherwise
"""

import numpy as np

U_STAR = 0.2  # friction velocity
KAPPA = 0.41  # von karman constant
Y_REF = 1.0  # reference length
Y_THRESHOLD = 1.0


def streamwise_velocity(y):
    """
    args:
        y:      float or np array of y coordinates
    returns:
        streamwise velocity, same shape as y
    """
    y = np.asarray(y, dtype="double")
    above = y > Y_THRESHOLD
    # keep log away from y <= 0
    safe_y = np.where(above, y, Y_REF)
    v = np.where(above, (U_STAR / KAPPA) * np.log(safe_y / Y_REF), 0.0)
    if v.ndim == 0:
        return float(v)
    return v


def proxy_velocity(ymax: float) -> float:
    """
    representative streamwise velocity used only for sizing the time step.
    evaluated at the upper domain bound without the y > 1 floor, so it is not
    guaranteed to be the maximum of streamwise_velocity over the grid
    """
    return (U_STAR / KAPPA) * np.log(ymax / Y_REF)
