from jax import config as _jax_config

_jax_config.update("jax_enable_x64", True)

from .potentials import (  # noqa: E402
    sphere_potential,
    gravitational_potential,
    centrifugal_potential,
    effective_potential,
    effective_potential_gradient,
)
from .binary import (  # noqa: E402
    mass_parameter,
    mass_ratio,
    omega_squared,
    body_position,
    body_properties,
)
from .vector import Vec2  # noqa: E402
from .types import Star, SystemParams, GridSpec  # noqa: E402
from .exceptions import ConfigurationError  # noqa: E402
from .grid import make_grid, sample_potential, evaluate_field  # noqa: E402
from .plotting import (  # noqa: E402
    body_outline,
    plot_field,
    plot_isopotential,
    save_figure,
    show_figure,
)
