from .binary import body_position, body_properties, omega_squared
from .types import Star
from .vector import Vec2
from jax import numpy as jnp
from jax import grad, jit


def _sphere_potential_sq(mass, radius, rsq):
    """
    Uniform sphere potential as a function of squared distance from its centre.
    """
    inside = rsq < radius * radius
    # the outer branch is evaluated everywhere, so keep its argument away
    # from zero inside the sphere; otherwise grad gives NaN at the centre
    rsq_out = jnp.where(inside, radius * radius, rsq)
    outer = -mass / jnp.sqrt(rsq_out)
    inner = -mass * (3 * radius ** 2 - rsq) / (2 * radius ** 3)
    return jnp.where(inside, inner, outer)


@jit
def sphere_potential(mass, radius, r):
    """
    Gravitational potential of a uniform-density sphere.

    Outside the sphere this is the point mass potential -M/r. Inside it is
    -M (3R^2 - r^2) / (2R^3), which joins the outer solution with continuous
    value and slope at r = R and is finite at the centre, where it equals
    -3M / (2R).

    Parameters
    ----------
    mass: float, `jax.Array`
        Mass of the sphere

    radius: float, `jax.Array`
        Radius of the sphere

    r: float, `jax.Array`
        Distance from the centre of the sphere

    Returns
    -------
    pot: `jax.Array`
        The potential at distance `r`
    """
    return _sphere_potential_sq(mass, radius, r * r)


def _body_potential(params, star, p):
    mass, radius = body_properties(params, star)
    d = p - body_position(params, star)
    return _sphere_potential_sq(mass, radius, d.dot(d))


@jit
def gravitational_potential(params, p: Vec2):
    """
    Combined gravitational potential of both bodies at a given point.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    p: `jax_isopotential.Vec2`
        The point in question, relative to the barycentre

    Returns
    -------
    pot: `jax.Array`
        Gravitational potential at `p`
    """
    return _body_potential(params, Star.PRIMARY, p) + _body_potential(
        params, Star.SECONDARY, p
    )


@jit
def centrifugal_potential(params, p: Vec2):
    """
    Centrifugal potential of the frame co-rotating with the binary.

    The rotation axis passes through the barycentre, perpendicular to the
    orbital plane.
    """
    return -0.5 * omega_squared(params) * p.dot(p)


@jit
def effective_potential(params, p: Vec2):
    """
    Computes the effective potential at a given point in the co-rotating frame.

    This is the sum of the gravitational potentials of both (finite-sized)
    bodies and the centrifugal potential. It is finite everywhere in the
    plane, including at the centres of the bodies.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    p: `jax_isopotential.Vec2`
        The point in question, relative to the barycentre. Components may
        be arrays, in which case the potential is computed element-wise.

    Returns
    -------
    pot: `jax.Array`
        The effective potential at `p`
    """
    return gravitational_potential(params, p) + centrifugal_potential(params, p)


@jit
def effective_potential_gradient(params, p: Vec2):
    """
    Gradient of the effective potential at a single point.

    The Lagrange points are the zeros of this field.

    Parameters
    ----------
    params: `jax_isopotential.SystemParams`
        The binary in question

    p: `jax_isopotential.Vec2`
        The point in question. Components must be scalars.

    Returns
    -------
    grad: `jax_isopotential.Vec2`
        (dV/dx, dV/dy) at `p`
    """
    return grad(effective_potential, argnums=1)(params, p)
