import pytest
import numpy as np
from finite_difference.boundary import (
    apply_boundaries,
    apply_dirichlet_x,
    apply_dirichlet_y,
)
from finite_difference.config import AdvectionConfig

config = AdvectionConfig(
    nx=5,
    ny=4,
    bval_left=1.0,
    bval_right=2.0,
    bval_lower=3.0,
    bval_upper=4.0,
    nsteps=0,
)


def test_apply_boundaries():
    u = np.random.rand(7, 6)
    interior = u[1:-1, 1:-1].copy()
    apply_boundaries(u, config)
    assert np.all(u[0, 1:-1] == 1.0)
    assert np.all(u[-1, 1:-1] == 2.0)
    assert np.all(u[:, 0] == 3.0)
    assert np.all(u[:, -1] == 4.0)
    assert np.array_equal(u[1:-1, 1:-1], interior)


def test_corners_take_lower_and_upper_values():
    u = np.zeros((7, 6))
    apply_boundaries(u, config)
    assert u[0, 0] == u[-1, 0] == 3.0
    assert u[0, -1] == u[-1, -1] == 4.0


def test_idempotent():
    u = np.random.rand(7, 6)
    apply_boundaries(u, config)
    once = u.copy()
    apply_boundaries(u, config)
    assert np.array_equal(u, once)


@pytest.mark.parametrize("apply", [apply_dirichlet_x, apply_dirichlet_y])
def test_single_axis(apply):
    u = np.ones((4, 4))
    apply(u, -1.0, -2.0)
    assert np.sum(u == -1.0) == 4
    assert np.sum(u == -2.0) == 4
