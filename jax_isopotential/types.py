"""
Useful types
"""
from dataclasses import dataclass
from enum import Enum
from numbers import Integral

from jax import tree_util

from .exceptions import ConfigurationError


class Star(Enum):
    PRIMARY = 1
    SECONDARY = 2


# register as an official JAX type so a whole system can be
# handed to jitted functions as a single argument
@tree_util.register_pytree_node_class
@dataclass(frozen=True)
class SystemParams:
    """
    Physical description of a binary made of two uniform-density spheres.

    Units are arbitrary but must be consistent; G is taken to be 1.

    Parameters
    ----------
    m1: float
        Mass of the primary
    m2: float
        Mass of the secondary
    separation: float
        Distance between the centres of the two bodies
    r1: float
        Radius of the primary
    r2: float
        Radius of the secondary
    """

    m1: float
    m2: float
    separation: float
    r1: float
    r2: float

    def tree_flatten(self):
        children = (self.m1, self.m2, self.separation, self.r1, self.r2)
        aux_data = None
        return (children, aux_data)

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)

    def validate(self):
        """
        Check the system is physically sensible.

        Must be called on concrete values, not inside a jitted function.

        Raises
        ------
        ConfigurationError
            If a mass, radius or the separation is not positive, or if the
            two spheres overlap.
        """
        for name in ("m1", "m2", "separation", "r1", "r2"):
            value = getattr(self, name)
            if not value > 0:
                raise ConfigurationError(f"{name} must be positive, got {value!r}")
        if self.r1 + self.r2 >= self.separation:
            raise ConfigurationError(
                f"bodies overlap: r1 + r2 = {self.r1 + self.r2!r} "
                f"but separation = {self.separation!r}"
            )
        return self


@dataclass(frozen=True)
class GridSpec:
    """
    Bounds and resolution of the rectangular sampling grid.

    Both ranges include their end points.
    """

    xmin: float = -4.0
    xmax: float = 4.0
    ymin: float = -3.0
    ymax: float = 3.0
    nx: int = 200
    ny: int = 150

    @property
    def shape(self):
        """
        Shape of a field sampled on this grid, (ny, nx)
        """
        return (self.ny, self.nx)

    def validate(self):
        """
        Raises
        ------
        ConfigurationError
            If a sample count is not a positive integer or a range is inverted
            or empty.
        """
        for name in ("nx", "ny"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value!r}")
        if not self.xmax > self.xmin:
            raise ConfigurationError(
                f"x range is empty or inverted: [{self.xmin!r}, {self.xmax!r}]"
            )
        if not self.ymax > self.ymin:
            raise ConfigurationError(
                f"y range is empty or inverted: [{self.ymin!r}, {self.ymax!r}]"
            )
        return self
