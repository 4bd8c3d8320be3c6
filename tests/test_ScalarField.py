import pytest
import numpy as np
from finite_difference.field import ScalarField
from finite_difference.initial_conditions import gaussian, generate_ic, initialize


def test_shape_and_flat_indexing():
    field = ScalarField(4, 3)
    assert field.shape == (6, 5)
    assert field.u.shape == field.dudt.shape == (6, 5)
    assert field.index(0, 0) == 0
    assert field.index(1, 0) == 5
    assert field.index(5, 4) == 29
    field[2, 3] = 7.0
    assert field.u[2, 3] == 7.0
    assert field[2, 3] == 7.0


@pytest.mark.parametrize("ij", [(-1, 0), (6, 0), (0, 5)])
def test_index_out_of_bounds(ij):
    with pytest.raises(IndexError):
        ScalarField(4, 3).index(*ij)


def test_views_share_buffer():
    field = ScalarField(4, 3)
    field.interior()[...] = 1.0
    assert np.sum(field.u) == 12
    assert field.u[0, 0] == 0.0


def test_freeze():
    field = ScalarField(2, 2)
    field.freeze()
    assert field.frozen
    with pytest.raises(ValueError):
        field.u[1, 1] = 1.0


@pytest.mark.parametrize("sigmas", [(1.0, 5.0), (0.3, 0.3)])
def test_gaussian_initial_condition(sigmas):
    x = np.linspace(-1, 4, 13)
    y = np.linspace(0, 2, 7)
    x0, y0 = 1.5, 0.7
    sigmax, sigmay = sigmas
    field = ScalarField(len(x) - 2, len(y) - 2)
    initialize(field, x, y, x0=x0, y0=y0, sigmax=sigmax, sigmay=sigmay)
    for i in range(len(x)):
        for j in range(len(y)):
            expected = np.exp(
                -(
                    (x[i] - x0) ** 2 / (2 * sigmax**2)
                    + (y[j] - y0) ** 2 / (2 * sigmay**2)
                )
            )
            assert field.u[i, j] == pytest.approx(expected)


def test_generate_ic():
    x, y = np.linspace(0, 1, 5), np.linspace(0, 1, 4)
    kwargs = dict(x0=0.5, y0=0.5, sigmax=0.1, sigmay=0.2)
    assert generate_ic("gauss", x, y, **kwargs) == pytest.approx(
        gaussian(x, y, **kwargs)
    )
    with pytest.raises(ValueError):
        generate_ic("square", x, y)
