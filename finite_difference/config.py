"""
defines the AdvectionConfig record and the named problem configurations
"""

import dataclasses


@dataclasses.dataclass(frozen=True)
class AdvectionConfig:
    """
    args:
        nx, ny:                     number of interior cells in x and y
        xmin, xmax:                 domain bounds in x
        ymin, ymax:                 domain bounds in y
        x0, y0:                     center of the gaussian initial condition
        sigmax, sigmay:             width of the gaussian initial condition
        bval_left, bval_right:      dirichlet values at x ghost cells
        bval_lower, bval_upper:     dirichlet values at y ghost cells
        cfl:                        courant number
        nsteps:                     number of time steps
        velx:                       nominal x velocity, only used in diagnostics
        vely:                       constant y velocity
    """

    nx: int = 1000
    ny: int = 1000
    xmin: float = 0.0
    xmax: float = 30.0
    ymin: float = 0.0
    ymax: float = 30.0
    x0: float = 3.0
    y0: float = 15.0
    sigmax: float = 1.0
    sigmay: float = 5.0
    bval_left: float = 0.0
    bval_right: float = 0.0
    bval_lower: float = 0.0
    bval_upper: float = 0.0
    cfl: float = 0.9
    nsteps: int = 800
    velx: float = 1.0
    vely: float = 0.0

    def __post_init__(self):
        if self.nx <= 0 or self.ny <= 0:
            raise ValueError(f"Invalid resolution ({self.nx}, {self.ny})")
        if self.xmax <= self.xmin or self.ymax <= self.ymin:
            raise ValueError("Domain bounds must satisfy min < max")
        if self.sigmax <= 0 or self.sigmay <= 0:
            raise ValueError("Gaussian widths must be positive")
        if self.cfl <= 0:
            raise ValueError(f"Invalid CFL number {self.cfl}")
        if self.nsteps < 0:
            raise ValueError("nsteps must be non-negative.")

    @property
    def dx(self) -> float:
        return (self.xmax - self.xmin) / self.nx

    @property
    def dy(self) -> float:
        return (self.ymax - self.ymin) / self.ny

    def replace(self, **changes) -> "AdvectionConfig":
        return dataclasses.replace(self, **changes)


problem_configs = {
    "log_profile": dict(),
    "uniform_drift": dict(
        nx=200,
        ny=200,
        xmin=0.0,
        xmax=1.0,
        ymin=0.0,
        ymax=1.0,
        x0=0.25,
        y0=0.5,
        sigmax=0.05,
        sigmay=0.05,
        nsteps=100,
        velx=0.0,
        vely=1.0,
    ),
    "small_log_profile": dict(nx=100, ny=100, nsteps=80),
}


def get_config(problem: str, **overrides) -> AdvectionConfig:
    """
    args:
        problem:    key of problem_configs
        overrides:  fields to replace in the named configuration
    returns:
        AdvectionConfig
    """
    if problem not in problem_configs:
        raise KeyError(f"Unknown problem '{problem}'")
    return AdvectionConfig(**{**problem_configs[problem], **overrides})
