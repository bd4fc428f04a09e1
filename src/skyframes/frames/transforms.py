"""Rotation matrices between directly related celestial frames.

Every function returns a 3x3 matrix that maps the direction-cosine column
``[cos b cos a, cos b sin a, sin b]`` of a direction in one frame to the
same direction in the other frame, where ``(a, b)`` are the frame's
longitude-like and latitude-like angles:

=====================  =====================  ============================
Frame                  ``a``                  ``b``
=====================  =====================  ============================
Horizon                azimuth (N through E)  altitude
Equatorial HA-Dec      hour angle             declination
Equatorial RA-Dec      right ascension        declination
Ecliptic               ecliptic longitude     ecliptic latitude
Galactic               galactic longitude     galactic latitude
=====================  =====================  ============================

The Horizon/HA-Dec and HA-Dec/RA-Dec matrices are reflections and therefore
their own inverses; both directions are still exposed as separate functions
so the catalog registers one matrix per direction.

References:

    1. P. Duffett-Smith, and J. Zwart, *Practical Astronomy with your
       Calculator or Spreadsheet (4th Ed.)*, 2011, sec. 24-32.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.constants import ICRS_TO_GALACTIC, PI
from skyframes.rotation_matrices import Rx, Ry, Rz
from skyframes.utils import to_radians


def rotation_ha_dec_to_horizon(latitude: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the rotation from Equatorial HA-Dec to Horizon.

    Equal to ``Ry(latitude - pi/2) @ diag(-1, -1, 1)``, i.e.

    .. code-block:: text

        [[-sin(lat), 0, cos(lat)],
         [        0,-1,        0],
         [ cos(lat), 0, sin(lat)]]

    Args:
        latitude: Geodetic latitude of the observer.
        use_degrees: Interpret ``latitude`` in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix (HA-Dec -> Horizon).
    """
    latitude = to_radians(latitude, use_degrees)
    flip = jnp.diag(jnp.array([-1.0, -1.0, 1.0], dtype=get_dtype()))
    return Ry(latitude - PI / 2.0) @ flip


def rotation_horizon_to_ha_dec(latitude: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the rotation from Horizon to Equatorial HA-Dec.

    The HA-Dec to Horizon matrix is symmetric and orthogonal, so it is its
    own inverse.

    Args:
        latitude: Geodetic latitude of the observer.
        use_degrees: Interpret ``latitude`` in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix (Horizon -> HA-Dec).
    """
    return rotation_ha_dec_to_horizon(latitude, use_degrees)


def rotation_ha_dec_to_ra_dec(sidereal_time: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the rotation from Equatorial HA-Dec to Equatorial RA-Dec.

    Implements ``ra = lst - ha`` on the direction cosines, which is
    ``diag(1, -1, 1) @ Rz(lst)``.

    Args:
        sidereal_time: Local sidereal time as an angle.
        use_degrees: Interpret ``sidereal_time`` in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix (HA-Dec -> RA-Dec).
    """
    flip = jnp.diag(jnp.array([1.0, -1.0, 1.0], dtype=get_dtype()))
    return flip @ Rz(sidereal_time, use_degrees)


def rotation_ra_dec_to_ha_dec(sidereal_time: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the rotation from Equatorial RA-Dec to Equatorial HA-Dec.

    ``ha = lst - ra`` has the same form as the forward relation, so the
    matrix is identical.

    Args:
        sidereal_time: Local sidereal time as an angle.
        use_degrees: Interpret ``sidereal_time`` in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix (RA-Dec -> HA-Dec).
    """
    return rotation_ha_dec_to_ra_dec(sidereal_time, use_degrees)


def rotation_ra_dec_to_ecliptic(obliquity: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the rotation from Equatorial RA-Dec to Ecliptic.

    Returns ``Rx(obliquity)``.

    Args:
        obliquity: Obliquity of the ecliptic.
        use_degrees: Interpret ``obliquity`` in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix (RA-Dec -> Ecliptic).
    """
    return Rx(obliquity, use_degrees)


def rotation_ecliptic_to_ra_dec(obliquity: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the rotation from Ecliptic to Equatorial RA-Dec.

    Returns ``Rx(-obliquity)``, the transpose of
    :func:`rotation_ra_dec_to_ecliptic`.

    Args:
        obliquity: Obliquity of the ecliptic.
        use_degrees: Interpret ``obliquity`` in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix (Ecliptic -> RA-Dec).
    """
    return Rx(-to_radians(obliquity, use_degrees))


def rotation_ra_dec_to_galactic() -> Array:
    """Compute the fixed rotation from Equatorial RA-Dec (ICRS) to Galactic.

    Returns:
        3x3 rotation matrix (RA-Dec -> Galactic).
    """
    return jnp.array(ICRS_TO_GALACTIC, dtype=get_dtype())


def rotation_galactic_to_ra_dec() -> Array:
    """Compute the fixed rotation from Galactic to Equatorial RA-Dec (ICRS).

    Returns:
        3x3 rotation matrix (Galactic -> RA-Dec).
    """
    return rotation_ra_dec_to_galactic().T
