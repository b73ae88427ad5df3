import os
import sys

import matplotlib

# Render off-screen; must happen before pyplot is imported
matplotlib.use("Agg")

# Ensure the package is importable without installing it
repo_root = os.path.dirname(os.path.dirname(__file__))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

import pytest

from jax_isopotential import GridSpec, SystemParams


@pytest.fixture
def params():
    """The 10:1 reference system."""
    return SystemParams(m1=10.0, m2=1.0, separation=2.0, r1=0.5, r2=0.1)


@pytest.fixture
def twin_params():
    """Two identical bodies."""
    return SystemParams(m1=1.0, m2=1.0, separation=2.0, r1=0.3, r2=0.3)


@pytest.fixture
def small_grid():
    return GridSpec(xmin=-4.0, xmax=4.0, ymin=-3.0, ymax=3.0, nx=40, ny=30)
