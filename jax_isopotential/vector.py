"""
A planar Cartesian vector class that JAX understands

Components may be scalars or arrays of a common shape, so a single `Vec2`
can stand for a whole grid of points in the orbital plane.
"""
import jax.numpy as jnp
from jax import tree_util
from jax import jit


@tree_util.register_pytree_node_class
class Vec2:
    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y

    def tree_flatten(self):
        """
        Specifies a flattening recipe.

        Returns
        -------
            a pair of an iterable with the children to be flattened recursively,
            and some opaque auxiliary data to pass back to the unflattening recipe.
        """
        children = (self.x, self.y)
        aux_data = None
        return (children, aux_data)

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)

    @jit
    def __mul__(self, other):
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    @jit
    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    @jit
    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    @jit
    def dot(self, other):
        """
        Returns the scalar or dot product of self with other, a 2-vector
        """
        return (self.x * other.x) + (self.y * other.y)

    def __abs__(self):
        return jnp.sqrt(self.dot(self))

    def __repr__(self):
        return f"Vec2({self.x}, {self.y})"

