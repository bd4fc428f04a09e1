"""Spherical direction representations.

Provides the mapping between a pair of angles ``(a, b)``, longitude-like
then latitude-like, and the direction-cosine column vector the frame
catalog's rotation matrices act on:

.. math::

    \\hat{u} = [\\cos b \\cos a, \\; \\cos b \\sin a, \\; \\sin b]^T

plus :class:`SphericalEquatorial`, a (latitude, longitude, distance) point
that can be combined with others through its Cartesian form.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.utils import from_radians, to_radians, wrap_to_two_pi


def column_vector(coordinate1: ArrayLike, coordinate2: ArrayLike, use_degrees: bool = False) -> Array:
    """Build the direction-cosine column for a two-angle direction.

    Args:
        coordinate1: Longitude-like angle (azimuth, hour angle, right
            ascension, ecliptic or galactic longitude).
        coordinate2: Latitude-like angle (altitude, declination, ecliptic or
            galactic latitude).
        use_degrees: Interpret both angles in degrees. Default: ``False``

    Returns:
        ``(3, 1)`` unit column vector.

    Examples:
        ```python
        from skyframes.coordinates import column_vector
        column_vector(90.0, 0.0, use_degrees=True)  # [[0], [1], [0]]
        ```
    """
    a = to_radians(coordinate1, use_degrees)
    b = to_radians(coordinate2, use_degrees)

    cb = jnp.cos(b)
    return jnp.array([[cb * jnp.cos(a)],
                      [cb * jnp.sin(a)],
                      [jnp.sin(b)]], dtype=get_dtype())


def spherical_from_column(column: ArrayLike, use_degrees: bool = False) -> Array:
    """Recover the two angles of a direction-cosine column.

    The column need not be unit length. Longitude is wrapped to
    ``[0, 2*pi)``; latitude lies in ``[-pi/2, pi/2]``.

    Args:
        column: ``(3,)`` or ``(3, 1)`` direction vector.
        use_degrees: Return angles in degrees. Default: ``False``

    Returns:
        ``[longitude, latitude]``.
    """
    x, y, z = jnp.ravel(jnp.asarray(column, dtype=get_dtype()))

    lon = wrap_to_two_pi(jnp.arctan2(y, x))
    lat = jnp.arctan2(z, jnp.sqrt(x * x + y * y))

    return jnp.array([from_radians(lon, use_degrees), from_radians(lat, use_degrees)])


class SphericalEquatorial(NamedTuple):
    """A point as latitude up from the equator, longitude and distance.

    Latitude runs from zero at the equator to ``pi/2`` at the pole, as in
    geographic coordinates (the opposite of polar spherical coordinates).

    Attributes:
        lat: Latitude. Units: *rad*
        lon: Longitude. Units: *rad*
        dist: Distance from the origin, any unit. Defaults to 1 for a bare
            direction.
    """

    lat: ArrayLike
    lon: ArrayLike
    dist: ArrayLike = 1.0

    @classmethod
    def from_degrees(cls, lat: ArrayLike, lon: ArrayLike, dist: ArrayLike = 1.0) -> SphericalEquatorial:
        """Construct from latitude and longitude in degrees."""
        return cls(to_radians(lat, True), to_radians(lon, True), dist)

    @classmethod
    def from_cartesian(cls, xyz: ArrayLike) -> SphericalEquatorial:
        """Construct from a Cartesian ``[x, y, z]`` vector.

        Args:
            xyz: ``(3,)`` or ``(3, 1)`` Cartesian vector.

        Returns:
            The equivalent point. Longitude is wrapped to ``[0, 2*pi)``.
        """
        xyz = jnp.ravel(jnp.asarray(xyz, dtype=get_dtype()))
        lon, lat = spherical_from_column(xyz)
        return cls(lat, lon, jnp.linalg.norm(xyz))

    def to_cartesian(self) -> Array:
        """Return the Cartesian ``[x, y, z]`` vector, shape ``(3,)``."""
        return jnp.ravel(column_vector(self.lon, self.lat)) * jnp.asarray(self.dist, dtype=get_dtype())

    def direction(self) -> Array:
        """Return the unit direction as a ``(3, 1)`` column, ignoring distance."""
        return column_vector(self.lon, self.lat)

    def __add__(self, other: SphericalEquatorial) -> SphericalEquatorial:
        # Sum in Cartesian space
        if not isinstance(other, SphericalEquatorial):
            return NotImplemented
        return SphericalEquatorial.from_cartesian(self.to_cartesian() + other.to_cartesian())
