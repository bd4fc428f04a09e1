"""Angle helpers.

These helpers implement the ``use_degrees`` convention used throughout
skyframes: every public function takes angles in radians unless
``use_degrees=True``, and reduces them to radians before any matrix
arithmetic. All helpers are JAX-traceable.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.constants import TWO_PI


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians, in the configured dtype.
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_two_pi(angle: ArrayLike) -> Array:
    """Wrap an angle in radians into ``[0, 2*pi)``."""
    return jnp.mod(angle, TWO_PI)
