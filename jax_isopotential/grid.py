"""
Sampling of the effective potential on a regular grid.
"""
import logging

from jax import numpy as jnp

from .potentials import effective_potential
from .types import GridSpec
from .vector import Vec2

logger = logging.getLogger(__name__)


def make_grid(grid: GridSpec):
    """
    Evenly spaced samples along each axis, end points included.

    Parameters
    ----------
    grid: `jax_isopotential.GridSpec`
        Bounds and resolution of the grid

    Returns
    -------
    x, y: `jax.Array`
        Arrays of length `grid.nx` and `grid.ny`

    Raises
    ------
    ConfigurationError
        If the grid settings are invalid
    """
    grid.validate()
    x = jnp.linspace(grid.xmin, grid.xmax, grid.nx)
    y = jnp.linspace(grid.ymin, grid.ymax, grid.ny)
    return x, y


def sample_potential(params, grid: GridSpec):
    """
    Evaluate the effective potential at every point of a grid.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    grid: `jax_isopotential.GridSpec`
        Bounds and resolution of the grid

    Returns
    -------
    x, y: `jax.Array`
        The grid samples along each axis

    field: `jax.Array`
        Potential values, shape (ny, nx); `field[i, j]` is the potential
        at (x[j], y[i])

    Raises
    ------
    ConfigurationError
        If the system parameters or grid settings are invalid
    """
    params.validate()
    x, y = make_grid(grid)
    return x, y, evaluate_field(params, x, y)


def evaluate_field(params, x, y):
    """
    Effective potential on the grid spanned by the axis samples `x` and `y`.

    No validation is done here; callers check `params` beforehand.

    Returns
    -------
    field: `jax.Array`
        Potential values, shape (len(y), len(x))
    """
    xx, yy = jnp.meshgrid(x, y)
    field = effective_potential(params, Vec2(xx, yy))
    logger.debug(
        "sampled potential on %dx%d grid, range [%.4g, %.4g]",
        field.shape[0],
        field.shape[1],
        float(field.min()),
        float(field.max()),
    )
    return field
