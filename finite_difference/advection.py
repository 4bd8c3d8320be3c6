"""
defines the AdvectionSolver class, a forward-stepping finite difference solver
for
du/dt + vx(y) du/dx + vy du/dy = 0
where vx(y) is a logarithmic boundary layer profile and vy is constant
"""

import numpy as np
from finite_difference.boundary import apply_boundaries
from finite_difference.config import AdvectionConfig
from finite_difference.field import ScalarField
from finite_difference.grid import GridDomain
from finite_difference.initial_conditions import initialize
from finite_difference.integrate import Integrator
from finite_difference.upwind import backward_difference
from finite_difference.velocity import proxy_velocity, streamwise_velocity


def cfl_timestep(config: AdvectionConfig) -> float:
    """
    dt = C / (|vx_proxy| / dx + |vy| / dy)
    vx_proxy is the log profile evaluated at ymax, which is not necessarily the
    largest streamwise velocity used during stepping
    """
    vx_max, vy_max = abs(proxy_velocity(config.ymax)), abs(config.vely)
    v_over_h = vx_max / config.dx + vy_max / config.dy
    if v_over_h == 0:
        print("0 velocity case: setting v / h to 0.1")
        v_over_h = 0.1
    return config.cfl / v_over_h


class AdvectionSolver(Integrator):
    """
    args:
        config:         AdvectionConfig
        progress_bar:   whether to print a progress bar in the loop
        verbose:        whether to print a report of the discretization
    returns:
        self.snapshots: [{step: 0, t: 0, u: u0}, {step: nsteps, t: T, u: u}]
    """

    def __init__(
        self,
        config: AdvectionConfig = None,
        progress_bar: bool = False,
        verbose: bool = True,
    ):
        self.config = AdvectionConfig() if config is None else config
        self.verbose = verbose

        # spatial discretization
        self.grid = GridDomain.from_config(self.config)
        self.x, self.y = self.grid.x, self.grid.y
        self.hx, self.hy = self.grid.dx, self.grid.dy

        # streamwise velocity is evaluated at j * dy, not at the cell centers y[j]
        j = np.arange(1, self.config.ny + 1)
        self.a = streamwise_velocity(j * self.hy)
        self.b = self.config.vely

        # initial condition
        self.field = ScalarField(self.config.nx, self.config.ny)
        initialize(
            self.field,
            self.x,
            self.y,
            x0=self.config.x0,
            y0=self.config.y0,
            sigmax=self.config.sigmax,
            sigmay=self.config.sigmay,
        )

        # initialize timeseries lists
        u0 = self.field.u
        self.min_history = [np.min(u0)]
        self.max_history = [np.max(u0)]
        self.snapshots = [{"step": 0, "t": 0.0, "u": self.field.snapshot()}]

        # initialize integrator
        super().__init__(
            u0=u0,
            dt=cfl_timestep(self.config),
            nsteps=self.config.nsteps,
            progress_bar=progress_bar,
        )
        if self.verbose:
            self.report()

    def report(self):
        nsteps = self.config.nsteps
        print(f"Grid spacing dx     = {self.hx:g}")
        print(f"Grid spacing dy     = {self.hy:g}")
        print(f"CFL number          = {self.config.cfl:g}")
        print(f"Time step           = {self.dt:g}")
        print(f"No. of time steps   = {nsteps}")
        print(f"End time            = {self.end_time:g}")
        print(f"Distance advected x = {self.config.velx * self.dt * nsteps:g}")
        print(f"Distance advected y = {self.config.vely * self.dt * nsteps:g}")

    @property
    def end_time(self) -> float:
        return self.dt * self.config.nsteps

    def apply_bc(self, u: np.ndarray):
        apply_boundaries(u, self.config)

    def udot(self, u: np.ndarray, t: float = None, dt: float = None) -> np.ndarray:
        """
        args:
            u:      (nx + 2, ny + 2) with boundary values applied
            t:      time at which u is defined
            dt:     timestep size by which to step forward
        returns:
            dudt:   (nx + 2, ny + 2), zero in the ghost cells
        """
        return backward_difference(
            u, vx=self.a, vy=self.b, dx=self.hx, dy=self.hy, out=self.field.dudt
        )

    def advance(self, u: np.ndarray, dudt: np.ndarray, dt: float):
        u[1:-1, 1:-1] += dudt[1:-1, 1:-1] * dt

    def looks_good(self, u: np.ndarray) -> bool:
        return bool(np.all(np.isfinite(u)))

    def step_cleanup(self):
        self.min_history.append(np.min(self.u0))
        self.max_history.append(np.max(self.u0))

    def post_integrate(self):
        self.snapshots.append(
            {"step": self.step_count, "t": self.t0, "u": self.field.snapshot()}
        )
        self.field.freeze()
        self.u0 = self.field.u
        if self.verbose and self.solution_time is not None:
            print(f"Took {self.step_count} steps in {self.solution_time:.2f} s")
        if self.verbose and self.diverged_at is not None:
            print(f"WARNING: solution diverged at step {self.diverged_at}")

    @property
    def initial_field(self) -> np.ndarray:
        return self.snapshots[0]["u"]

    @property
    def final_field(self) -> np.ndarray:
        """
        state after all nsteps, only available once integration is done
        """
        if not self.done:
            raise RuntimeError("Integration has not finished.")
        return self.snapshots[-1]["u"]
