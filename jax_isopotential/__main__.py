"""
Render the effective potential of the configured two-body system.

Usage:
    python -m jax_isopotential
"""
import logging
import sys

import matplotlib.pyplot as plt

from . import config
from .binary import mass_parameter, mass_ratio, omega_squared
from .exceptions import ConfigurationError
from .grid import evaluate_field, make_grid
from .logging_config import setup_logging
from .plotting import plot_field, save_figure, show_figure

logger = logging.getLogger("jax_isopotential")


def summarise(params):
    """Log the system parameters and derived quantities."""
    logger.info("Two-Body Effective Potential Analysis (Rotating Frame)")
    logger.info("Primary mass: %g, radius: %g", params.m1, params.r1)
    logger.info("Secondary mass: %g, radius: %g", params.m2, params.r2)
    logger.info("Mass ratio: %g:1", float(mass_ratio(params)))
    logger.info("Separation distance: %g", params.separation)
    logger.info("Mass parameter mu: %.3f", float(mass_parameter(params)))
    logger.info("Angular velocity squared omega^2: %.3f", float(omega_squared(params)))


def run(params=None, grid=None, levels=None, output_path=None):
    """
    Compute, plot and save the isopotential map.

    Arguments left as None are taken from `jax_isopotential.config`.

    Returns
    -------
    fig: `matplotlib.figure.Figure`
    """
    params = config.DEFAULT_SYSTEM if params is None else params
    grid = config.DEFAULT_GRID if grid is None else grid
    levels = config.CONTOUR_LEVELS if levels is None else levels
    output_path = config.OUTPUT_PATH if output_path is None else output_path

    # fail before any work is done
    params.validate()
    x, y = make_grid(grid)

    summarise(params)
    logger.info("Calculating effective potential field (gravitational + centrifugal)...")
    field = evaluate_field(params, x, y)

    logger.info("Creating contour plot...")
    fig = plot_field(
        params,
        x,
        y,
        field,
        levels=levels,
        cmap=config.COLORMAP,
        outline_samples=config.OUTLINE_SAMPLES,
    )
    path = save_figure(fig, output_path)
    logger.info("Plot saved as '%s'", path)
    return fig


def main():
    setup_logging(config.LOG_LEVEL)
    try:
        fig = run()
    except ConfigurationError as err:
        logger.error("Invalid configuration: %s", err)
        return 2
    show_figure(fig)
    plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
