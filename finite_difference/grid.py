"""
cell-centered grid with one ghost cell on either side of each axis
"""

import dataclasses
import numpy as np
from finite_difference.config import AdvectionConfig


def generate_axis(n: int, min: float, max: float) -> np.ndarray:
    """
    args:
        n:      number of interior cells
        min:    lower domain bound
        max:    upper domain bound
    returns:
        cell center coordinates (n + 2,), ghost cells at index 0 and n + 1
    """
    h = (max - min) / n
    # centers are measured from 0, not from min
    return (np.arange(n + 2) - 0.5) * h


@dataclasses.dataclass(frozen=True)
class GridDomain:
    x: np.ndarray
    y: np.ndarray
    dx: float
    dy: float

    @classmethod
    def from_config(cls, config: AdvectionConfig) -> "GridDomain":
        x = generate_axis(config.nx, config.xmin, config.xmax)
        y = generate_axis(config.ny, config.ymin, config.ymax)
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(x=x, y=y, dx=config.dx, dy=config.dy)

    @property
    def nx(self) -> int:
        return len(self.x) - 2

    @property
    def ny(self) -> int:
        return len(self.y) - 2

    @property
    def shape(self) -> tuple:
        return (len(self.x), len(self.y))
