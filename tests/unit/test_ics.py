"""
Unit tests for wavefield/ics.py initial conditions.
"""

import pytest

import numpy as np

from wavefield.config import InitialCondition
from wavefield.core.grid import Grid
from wavefield.ics import (
    INITIALIZERS,
    gaussian_pulse,
    gaussian_value,
    grid_normal_mode,
    impulse,
    initial_displacement,
    quiescent,
)

# =============================================================================
# Gaussian Pulse
# =============================================================================


def test_gaussian_mirror_symmetry():
    assert gaussian_value((-1.0, 0.0), 1.0, 4.0) == gaussian_value((1.0, 0.0), 1.0, 4.0)
    assert gaussian_value((-3.0, 2.0), 2.5, 5.0) == gaussian_value((3.0, 2.0), 2.5, 5.0)


@pytest.mark.parametrize("offset", [(0.0, 5.0), (-5.0, 0.0), (3.0, 4.0), (-4.0, -3.0)])
def test_gaussian_radial_symmetry(offset):
    assert gaussian_value(offset, 1.0, 4.0) == pytest.approx(gaussian_value((5.0, 0.0), 1.0, 4.0))


def test_gaussian_peak_value():
    sigma = 4.0
    expected = 25.0 / (sigma * np.sqrt(2.0 * np.pi))
    assert gaussian_value((0.0, 0.0), 25.0, sigma) == pytest.approx(expected)


def test_gaussian_decays_with_distance():
    values = [gaussian_value((d, 0.0), 1.0, 4.0) for d in range(10)]
    assert all(a > b for a, b in zip(values, values[1:]))


def test_gaussian_pulse_centered_on_grid():
    grid = Grid(11, 9, 1.0)
    u = gaussian_pulse(grid, 1.0, 2.0)

    assert u.shape == grid.shape
    assert np.unravel_index(np.argmax(u), u.shape) == grid.center
    np.testing.assert_array_equal(u, u[:, ::-1])
    np.testing.assert_array_equal(u, u[::-1, :])


def test_gaussian_pulse_custom_center():
    grid = Grid(10, 10, 1.0)
    u = gaussian_pulse(grid, 1.0, 1.5, center=(2, 7))

    assert np.unravel_index(np.argmax(u), u.shape) == (2, 7)


# =============================================================================
# Impulse and Quiescent
# =============================================================================


def test_impulse_half_amplitude_neighbors():
    grid = Grid(5, 5, 1.0)
    u = impulse(grid, 2.0)

    assert u[2, 2] == 2.0
    for row, col in [(2, 1), (2, 3), (1, 2), (3, 2)]:
        assert u[row, col] == 1.0
    assert np.count_nonzero(u) == 5


def test_impulse_full_amplitude_neighbors():
    grid = Grid(5, 5, 1.0)
    u = impulse(grid, 2.0, neighbor_ratio=1.0)

    assert np.sum(u) == 10.0
    assert np.count_nonzero(u) == 5


def test_impulse_on_single_cell_grid():
    u = impulse(Grid(1, 1, 1.0), 3.0)
    np.testing.assert_array_equal(u, [[3.0]])


def test_quiescent_is_zero():
    u = quiescent(Grid(6, 4, 1.0))
    assert u.shape == (4, 6)
    assert not np.any(u)


def test_initial_displacement_dispatches_on_selector(make_config):
    grid = Grid(21, 21, 1.0)

    assert set(INITIALIZERS) == set(InitialCondition)
    assert not np.any(initial_displacement(grid, make_config(initial_condition="quiescent")))
    np.testing.assert_array_equal(
        initial_displacement(grid, make_config(initial_condition="impulse", init_amplitude=3.0)),
        impulse(grid, 3.0, 0.5),
    )
    np.testing.assert_allclose(
        initial_displacement(grid, make_config(sigma=3.0)),
        gaussian_pulse(grid, 1.0, 3.0),
    )


# =============================================================================
# Normal Modes
# =============================================================================


@pytest.mark.parametrize("n, m", [(1, 1), (2, 3)])
def test_grid_normal_mode_is_laplacian_eigenvector(n, m):
    grid = Grid(12, 9, 0.5)
    mode = grid_normal_mode(grid, n, m)(*grid.grids)

    left, right, top, bottom = grid.neighbor_fields(mode)
    lap = (left - 2 * mode + right + top - 2 * mode + bottom) / grid.h**2

    kx = n * np.pi / ((grid.width + 1) * grid.h)
    ky = m * np.pi / ((grid.height + 1) * grid.h)
    eigenvalue = -4.0 / grid.h**2 * (np.sin(kx * grid.h / 2)**2 + np.sin(ky * grid.h / 2)**2)

    np.testing.assert_allclose(lap, eigenvalue * mode, atol=1e-10)
