"""
Pytest configuration and shared fixtures for the wavefield test suite.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from wavefield.config import Scheme, SimulationConfig

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Fixtures
# =============================================================================

BASE_CONFIG = {
    "width": 21,
    "height": 21,
    "cell_spacing": 1.0,
    "wave_speed": 1.0,
    "timestep": 0.5,
    "init_amplitude": 1.0,
    "initial_condition": "gaussian",
    "sigma": 2.0,
}


@pytest.fixture
def make_config():
    """Factory building a small, stable SimulationConfig with overrides."""

    def _make(**overrides) -> SimulationConfig:
        params = dict(BASE_CONFIG)
        params.update(overrides)
        return SimulationConfig(**params)

    return _make


@pytest.fixture(params=[Scheme.VELOCITY, Scheme.CENTRAL_DIFFERENCE], ids=["velocity", "central_difference"])
def scheme(request):
    """Both integration schemes."""
    return request.param
