"""
Rendering of the effective potential as a filled contour map.
"""
import logging
from functools import partial
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from jax import jit
from jax import numpy as jnp

from .binary import body_position, body_properties, mass_ratio
from .grid import sample_potential
from .types import Star

logger = logging.getLogger(__name__)

BODY_COLOURS = {Star.PRIMARY: "red", Star.SECONDARY: "orange"}
BODY_NAMES = {Star.PRIMARY: "Primary", Star.SECONDARY: "Secondary"}

NON_INTERACTIVE_BACKENDS = ("agg", "cairo", "pdf", "pgf", "ps", "svg", "template")


@partial(jit, static_argnames=["star", "n"])
def body_outline(params, star, n=100):
    """
    Points on the surface of a body, in the orbital plane.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    star: `jax_isopotential.types.Star`
        Compute for primary or secondary star?

    n: int
        Number of points, equally spaced in angle over [0, 2 pi)

    Returns
    -------
    x, y: `jax.Array`
        Coordinates of the outline
    """
    centre = body_position(params, star)
    _, radius = body_properties(params, star)
    theta = 2.0 * jnp.pi * jnp.arange(n) / n
    return centre.x + radius * jnp.cos(theta), centre.y + radius * jnp.sin(theta)


def _draw_body(ax, params, star, n):
    mass, radius = body_properties(params, star)
    centre = body_position(params, star)
    colour = BODY_COLOURS[star]
    x, y = body_outline(params, star, n=n)
    # repeat the first point to close the curve
    x = np.append(np.asarray(x), x[0])
    y = np.append(np.asarray(y), y[0])
    label = f"{BODY_NAMES[star]} (M={float(mass):g}, R={float(radius):g})"
    ax.plot(x, y, color=colour, linewidth=2, label=label)
    ax.plot(
        float(centre.x),
        float(centre.y),
        marker="+",
        markersize=8 if star == Star.PRIMARY else 6,
        markeredgewidth=3,
        color=colour,
    )


def plot_field(params, x, y, field, levels=50, cmap="viridis", outline_samples=100):
    """
    Draw a sampled potential field with both bodies marked.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary the field was computed for

    x, y: array-like
        Grid samples along each axis

    field: array-like
        Potential values, shape (len(y), len(x))

    levels: int
        Number of contour levels

    cmap: str
        Name of a matplotlib colormap

    outline_samples: int
        Number of points used to draw each body outline

    Returns
    -------
    fig: `matplotlib.figure.Figure`
    """
    fig, ax = plt.subplots(figsize=(9, 6), constrained_layout=True)
    cs = ax.contourf(
        np.asarray(x), np.asarray(y), np.asarray(field), levels=levels, cmap=cmap
    )
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x (distance units)")
    ax.set_ylabel("y (distance units)")
    ratio = float(mass_ratio(params))
    ax.set_title(f"Effective Potential: Two-Body System (Mass Ratio {ratio:g}:1)")

    for star in Star:
        _draw_body(ax, params, star, outline_samples)
    ax.legend(loc="upper right", frameon=True)

    cbar = fig.colorbar(cs, ax=ax)
    cbar.set_label("Effective Potential")
    return fig


def plot_isopotential(params, grid, levels=50, cmap="viridis", outline_samples=100):
    """
    Sample the effective potential on a grid and plot it.

    Raises
    ------
    ConfigurationError
        If the system parameters or grid settings are invalid
    """
    x, y, field = sample_potential(params, grid)
    return plot_field(
        params, x, y, field, levels=levels, cmap=cmap, outline_samples=outline_samples
    )


def save_figure(fig, path):
    """
    Write a figure to disk, replacing any existing file.

    The figure is drawn before the file is opened, so a failure while
    rendering leaves no partial output behind. I/O errors propagate.
    """
    path = Path(path)
    fig.canvas.draw()
    fig.savefig(path)
    logger.debug("wrote %s", path)
    return path


def show_figure(fig):
    """
    Display a figure if an interactive backend is in use.

    This goes through `plt.show`, so any other open pyplot figures are shown
    too, and the call blocks until the windows are closed.

    Returns
    -------
    shown: bool
        False if the backend cannot display figures
    """
    backend = matplotlib.get_backend().lower()
    if backend in NON_INTERACTIVE_BACKENDS:
        logger.debug("backend %s is non-interactive, not showing figure", backend)
        return False
    plt.show()
    return True
