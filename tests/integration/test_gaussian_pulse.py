"""
End-to-end runs of a Gaussian pulse through both integration schemes.
"""

import pytest

import numpy as np

from wavefield import create_simulation

# =============================================================================
# Helpers
# =============================================================================


def border(u):
    return np.concatenate([u[0, :], u[-1, :], u[:, 0], u[:, -1]])


def rms_radius(u, center):
    rows, cols = np.indices(u.shape)
    r_sq = (rows - center[0])**2 + (cols - center[1])**2
    weight = u**2
    return float(np.sqrt(np.sum(weight * r_sq) / np.sum(weight)))


# =============================================================================
# Reference Scenario
# =============================================================================


@pytest.mark.parametrize("scheme", ["velocity", "centralDifference"])
def test_gaussian_pulse_reference_scenario(scheme):
    sim = create_simulation({
        "width": 100,
        "height": 100,
        "waveSpeed": 0.01,
        "timestep": 1e-4,
        "initAmplitude": 25.0,
        "initialCondition": "gaussian",
        "scheme": scheme,
    })
    u0 = np.array(sim.field).reshape(100, 100)
    e0 = sim.energy()

    assert np.unravel_index(np.argmax(u0), u0.shape) == (50, 50)
    assert e0 > 0.0

    field = sim.multi_step(50)
    u = np.array(field).reshape(100, 100)
    e = sim.energy()

    assert sim.time() == pytest.approx(50 * 1e-4)
    assert np.all(np.isfinite(u))
    assert np.isfinite(e)
    assert 0.1 < e / e0 < 10.0

    # Activity stays around the center; the edges remain untouched
    change = np.abs(u - u0)
    assert change.max() > 0.0
    assert border(change).max() < 1e-12 * change.max()
    assert border(np.abs(u)).max() < 1e-12 * np.abs(u).max()


# =============================================================================
# Propagation
# =============================================================================


@pytest.mark.slow
@pytest.mark.parametrize("scheme", ["velocity", "central_difference"])
def test_pulse_spreads_outward_without_reaching_edges(scheme):
    sim = create_simulation({
        "width": 61,
        "height": 61,
        "cellSpacing": 1.0,
        "waveSpeed": 1.0,
        "timestep": 0.05,
        "initAmplitude": 25.0,
        "sigma": 2.0,
        "scheme": scheme,
    })
    center = sim.grid.center
    u0 = np.array(sim.field).reshape(61, 61)
    e0 = sim.energy()

    u = np.array(sim.multi_step(200)).reshape(61, 61)

    assert np.all(np.isfinite(u))
    assert rms_radius(u, center) > rms_radius(u0, center) + 3.0
    assert abs(u[center]) < abs(u0[center])
    assert border(np.abs(u)).max() < 1e-3 * np.abs(u).max()
    assert 0.5 < sim.energy() / e0 < 2.0
