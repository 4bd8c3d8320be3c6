import numpy as np
from finite_difference.field import ScalarField


def generate_ic(type: str, x: np.ndarray, y: np.ndarray, **kwargs) -> np.ndarray:
    """
    args:
        type    'gauss'
        x       1d np array (m,)
        y       1d np array (n,)
        kwargs  shape parameters of the initial condition
    returns:
        initial condition defined on xy mesh (m, n), x along axis 0
    """
    if type == "gauss":
        return gaussian(x, y, **kwargs)
    raise ValueError(f"Unknown initial condition '{type}'")


def gaussian(
    x: np.ndarray,
    y: np.ndarray,
    x0: float,
    y0: float,
    sigmax: float,
    sigmay: float,
) -> np.ndarray:
    xx, yy = np.meshgrid(x, y, indexing="ij")
    x2 = (xx - x0) ** 2
    y2 = (yy - y0) ** 2
    return np.exp(-1.0 * (x2 / (2.0 * sigmax**2) + y2 / (2.0 * sigmay**2)))


def initialize(
    field: ScalarField,
    x: np.ndarray,
    y: np.ndarray,
    x0: float,
    y0: float,
    sigmax: float,
    sigmay: float,
):
    """
    fill every point of field.u, ghost cells included, with a gaussian
    """
    field.u[...] = gaussian(x, y, x0=x0, y0=y0, sigmax=sigmax, sigmay=sigmay)
