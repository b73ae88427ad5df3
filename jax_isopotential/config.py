"""Configuration constants for the isopotential plot."""
import logging

from .types import GridSpec, SystemParams

# Two-body system (arbitrary units, G = 1)
M1 = 10.0  # Primary mass
M2 = 1.0  # Secondary mass
SEPARATION = 2.0  # Distance between body centres
R1 = 0.5  # Primary radius
R2 = 0.1  # Secondary radius

DEFAULT_SYSTEM = SystemParams(m1=M1, m2=M2, separation=SEPARATION, r1=R1, r2=R2)

# Sampling grid, centred on the barycentre
DEFAULT_GRID = GridSpec(xmin=-4.0, xmax=4.0, ymin=-3.0, ymax=3.0, nx=200, ny=150)

# Plot
CONTOUR_LEVELS = 50
COLORMAP = "viridis"
OUTLINE_SAMPLES = 100  # Points around each body outline
OUTPUT_PATH = "two_body_isopotential.png"

LOG_LEVEL = logging.INFO
