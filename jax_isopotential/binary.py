"""
Quantities derived from the system parameters.

The origin is the barycentre and the line of centres is the x-axis, with the
primary on the negative side.
"""
from jax import jit

from .types import Star
from .vector import Vec2


@jit
def mass_parameter(params):
    """
    Secondary mass fraction, mu = M2 / (M1 + M2)

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    Returns
    -------
    mu: `jax.Array`
        Mass parameter, 0 < mu < 1
    """
    return params.m2 / (params.m1 + params.m2)


@jit
def mass_ratio(params):
    """
    Mass ratio M1/M2
    """
    return params.m1 / params.m2


@jit
def omega_squared(params):
    """
    Squared angular velocity of the co-rotating frame.

    From Kepler's third law with G = 1, omega^2 = (M1 + M2) / R^3

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    Returns
    -------
    omega2: `jax.Array`
        Squared orbital angular velocity
    """
    return (params.m1 + params.m2) / params.separation ** 3


def body_position(params, star: Star):
    """
    Centre of the primary or secondary, relative to the barycentre.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    star: `jax_isopotential.types.Star`
        Compute for primary or secondary star?

    Returns
    -------
    centre: `jax_isopotential.Vec2`
        Position of the body centre. The two centres lie on the x-axis,
        exactly `params.separation` apart.
    """
    mu = mass_parameter(params)
    if star == Star.PRIMARY:
        return Vec2(-mu * params.separation, 0.0)
    if star == Star.SECONDARY:
        return Vec2((1 - mu) * params.separation, 0.0)
    raise ValueError(f"unknown star {star!r}")


def body_properties(params, star: Star):
    """
    Mass and radius of the primary or secondary
    """
    if star == Star.PRIMARY:
        return params.m1, params.r1
    if star == Star.SECONDARY:
        return params.m2, params.r2
    raise ValueError(f"unknown star {star!r}")
