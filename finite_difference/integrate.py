import abc
import enum
import inspect
import time
import warnings
import numpy as np
from tqdm import tqdm


class StepperState(enum.Enum):
    IDLE = "idle"
    INITIALIZED = "initialized"
    STEPPING = "stepping"
    DONE = "done"


class Integrator:
    """
    for a system with a state array u and a state derivative udot = f(u),
    advance u in place by a fixed number of steps of constant size dt
    """

    def __init__(
        self,
        u0: np.ndarray,
        dt: float,
        nsteps: int,
        t0: float = 0.0,
        progress_bar: bool = False,
    ):
        """
        args:
            u0              np array, initial state, mutated in place
            dt              timestep
            nsteps          total number of steps
            t0              starting time
            progress_bar    whether to print a progress bar in the loop
        """
        self.state = StepperState.IDLE

        # check nsteps
        if nsteps < 0:
            raise ValueError("nsteps must be non-negative.")
        self.nsteps = nsteps

        # initialize
        self.u0 = u0
        self.t0 = t0
        self.dt = dt
        self.step_count = 0
        self.diverged_at = None
        self.solution_time = None

        # progress bar
        self.progress_bar = progress_bar
        if self.progress_bar:
            self.update_printout = self.update_progress_bar
        else:
            self.update_printout = lambda *args: None

        self.state = StepperState.INITIALIZED

    @abc.abstractmethod
    def udot(self, u: np.ndarray, t: float, dt: float) -> np.ndarray:
        """
        args:
            u   np array
            t   time at which u is defined
            dt  time to let u evolve
        returns:
            dudt evaluated at time t, computed entirely from the given u
        """
        pass

    def apply_bc(self, u: np.ndarray):
        """
        overwrite boundary values of u in place before udot is evaluated
        """
        pass

    def advance(self, u: np.ndarray, dudt: np.ndarray, dt: float):
        """
        overwrites:
            u with u + dt * dudt
        """
        u += dt * dudt

    def looks_good(self, u: np.ndarray) -> bool:
        """
        args:
            u   np array
        returns:
            bool    whether u is free of numerical trouble
        """
        return True

    def step_cleanup(self):
        """
        runs after each update of self.t0
        """
        pass

    def pre_integrate(self, method_name: str) -> bool:
        """
        any producedures that are to be executed before time integration
        args:
            method_name name of integration method
        returns:
            bool    whether or not to proceed
        """
        return True

    def post_integrate(self):
        """
        teardown procedures, runs once the final step has been taken
        """
        pass

    @property
    def done(self) -> bool:
        return self.state is StepperState.DONE

    def integrate(self, step, method_name: str, n: int = None):
        """
        args:
            step            function which advances u0 in place by dt
            method_name     name of integrating step
            n               number of steps to take, all remaining steps if None
        overwrites:
            t0, u0, step_count, state
        """
        if self.state is StepperState.DONE:
            raise RuntimeError("Integration is complete, the solution is read-only.")
        if self.state is StepperState.IDLE:
            raise RuntimeError("Integrator has not been initialized.")

        remaining = self.nsteps - self.step_count
        n = remaining if n is None else min(n, remaining)

        # check whether to procede to numerical integration
        if not self.pre_integrate(method_name=method_name):
            return

        # initialize progress bar
        progress_bar = None
        if self.progress_bar:
            bar_format = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}]"
            progress_bar = tqdm(total=self.nsteps, bar_format=bar_format)
            progress_bar.n = self.step_count

        # time loop, each step depends on the fully updated previous one
        starting_time = time.time()
        for _ in range(n):
            self.state = StepperState.STEPPING
            step(u0=self.u0, t0=self.t0, dt=self.dt)
            self.step_count += 1
            self.t0 += self.dt
            if not self.looks_good(self.u0) and self.diverged_at is None:
                self.diverged_at = self.step_count
                warnings.warn(
                    f"Non-finite values in solution after step {self.step_count}",
                    RuntimeWarning,
                )
            self.step_cleanup()
            self.update_printout(progress_bar)
        ellapsed_time = time.time() - starting_time
        if self.progress_bar:
            progress_bar.close()
        self.solution_time = (self.solution_time or 0.0) + ellapsed_time

        if self.step_count == self.nsteps:
            self.state = StepperState.DONE
            self.post_integrate()

    def update_progress_bar(self, progress_bar):
        progress_bar.n = self.step_count
        progress_bar.refresh()

    # integrators
    def euler(self, n: int = None):
        """
        1st order ODE integrator
        two phases per step: dudt is computed for every point from the
        unmodified u, only then is u advanced
        """

        def step(u0, t0, dt):
            self.apply_bc(u0)
            k1 = self.udot(u=u0, t=t0, dt=dt)
            self.advance(u0, k1, dt)

        self.integrate(
            step=step, method_name=inspect.currentframe().f_code.co_name, n=n
        )
