"""Sidereal time and obliquity of the ecliptic.

Computes the time-dependent parameters of the frame catalog from a Julian
Date, so callers holding an observation time and site can build
:class:`~skyframes.frames.CatalogParams` without working out the angles
themselves.

Julian Dates are taken in two parts, ``jd`` and ``jd_frac``, which are
summed. The whole days of ``jd`` are split from its fraction before any
other arithmetic, so the large day count stays exact. In float32 a single
Julian Date near 2.46e6 only resolves to 0.25 day (6 hours of sidereal
rotation). Keep ``jd`` on a whole or half day and pass the time of day in
``jd_frac`` to get sidereal time to about a second in either dtype.

All functions use only ``jnp`` operations and are traceable under
``jax.jit``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.constants import (
    AS2RAD,
    DAYS_PER_JULIAN_CENTURY,
    DEG2RAD,
    JD2000,
    OBLIQUITY_J2000,
    SECONDS_PER_DAY,
    SIDEREAL_SECONDS_PER_DEGREE,
)
from skyframes.frames.catalog import CatalogParams
from skyframes.utils import from_radians, to_radians, wrap_to_two_pi

# GMST82 linear rate in excess of one turn per day: 8640184.812866 s per
# Julian century. Units: *s/day*
_GMST_EXCESS_RATE = 8640184.812866 / DAYS_PER_JULIAN_CENTURY


def _days_from_j2000(jd: ArrayLike, jd_frac: ArrayLike) -> tuple[Array, Array]:
    """Split the date ``jd + jd_frac`` into whole and fractional days since J2000.

    JD2000 is a whole Julian Date, so the whole-day difference is an exact
    integer in either dtype. The fractional part may fall outside ``[0, 1)``
    when ``jd_frac`` does.
    """
    dtype = get_dtype()
    jd = jnp.asarray(jd, dtype=dtype)
    jd_whole = jnp.floor(jd)

    whole_days = jd_whole - JD2000
    frac_days = (jd - jd_whole) + jnp.asarray(jd_frac, dtype=dtype)
    return whole_days, frac_days


def _julian_centuries(whole_days: Array, frac_days: Array) -> Array:
    return whole_days / DAYS_PER_JULIAN_CENTURY + frac_days / DAYS_PER_JULIAN_CENTURY


def gmst(jd_ut1: ArrayLike, use_degrees: bool = False, jd_frac: ArrayLike = 0.0) -> Array:
    """Compute Greenwich Mean Sidereal Time using the IAU 1982 model.

    The Vallado GMST82 polynomial is evaluated with the rotation split into
    whole days and day fraction. Whole days of 86400 s are full turns and are
    dropped, leaving only the slow excess rate to multiply the day count.

    Args:
        jd_ut1: Julian Date, UT1. UTC may be used at the cost of up to ~1 s
            of time error.
        use_degrees: Return the angle in degrees. Default: ``False``
        jd_frac: Fraction of a day added to ``jd_ut1``. Default: ``0.0``

    Returns:
        GMST as an angle in ``[0, 2*pi)``. Units: rad (or deg)

    References:

        1. D. Vallado, *Fundamentals of Astrodynamics and Applications
           (4th Ed.)*, 2010, eq. 3-47.
    """
    whole_days, frac_days = _days_from_j2000(jd_ut1, jd_frac)
    t_ut1 = _julian_centuries(whole_days, frac_days)

    gmst_sec = (67310.54841
                + SECONDS_PER_DAY * frac_days
                + _GMST_EXCESS_RATE * whole_days
                + _GMST_EXCESS_RATE * frac_days
                + 0.093104 * t_ut1 * t_ut1
                - 6.2e-6 * t_ut1 * t_ut1 * t_ut1)
    gmst_sec = jnp.mod(gmst_sec, SECONDS_PER_DAY)

    # 1 second of time = 1/240 degree
    gmst_rad = wrap_to_two_pi(gmst_sec / SIDEREAL_SECONDS_PER_DEGREE * DEG2RAD)
    return from_radians(gmst_rad, use_degrees)


def local_sidereal_time(
    jd_ut1: ArrayLike,
    longitude: ArrayLike,
    use_degrees: bool = False,
    jd_frac: ArrayLike = 0.0,
) -> Array:
    """Compute local mean sidereal time for an observer.

    Args:
        jd_ut1: Julian Date, UT1.
        longitude: Observer longitude, east positive.
        use_degrees: ``longitude`` and the result in degrees. Default: ``False``
        jd_frac: Fraction of a day added to ``jd_ut1``. Default: ``0.0``

    Returns:
        Local sidereal time as an angle in ``[0, 2*pi)``.
    """
    lst = wrap_to_two_pi(gmst(jd_ut1, jd_frac=jd_frac) + to_radians(longitude, use_degrees))
    return from_radians(lst, use_degrees)


def mean_obliquity(jd_tt: ArrayLike, use_degrees: bool = False, jd_frac: ArrayLike = 0.0) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        jd_tt: Julian Date, TT.
        use_degrees: Return the angle in degrees. Default: ``False``
        jd_frac: Fraction of a day added to ``jd_tt``. Default: ``0.0``

    Returns:
        Obliquity of the ecliptic.
    """
    t = _julian_centuries(*_days_from_j2000(jd_tt, jd_frac))
    eps0 = OBLIQUITY_J2000 + t * (
        -46.836769 + t * (-0.0001831 + t * (0.00200340 + t * (-0.000000576 + t * (-0.0000000434))))
    )
    return from_radians(eps0 * AS2RAD, use_degrees)


def catalog_params(
    jd: ArrayLike,
    latitude: ArrayLike,
    longitude: ArrayLike,
    use_degrees: bool = False,
    jd_frac: ArrayLike = 0.0,
) -> CatalogParams:
    """Build catalog parameters for an observer at a given time.

    The same Julian Date is used as UT1 for sidereal time and as TT for the
    obliquity; the ~1 minute difference between the scales changes the
    obliquity by far less than a milliarcsecond.

    Args:
        jd: Julian Date of the observation.
        latitude: Observer geodetic latitude.
        longitude: Observer longitude, east positive.
        use_degrees: ``latitude`` and ``longitude`` in degrees. Default: ``False``
        jd_frac: Fraction of a day added to ``jd``. Default: ``0.0``

    Returns:
        :class:`~skyframes.frames.CatalogParams` in radians.

    Examples:
        ```python
        from skyframes.sidereal import catalog_params
        # 2025-01-01 06:00 UT
        params = catalog_params(2460676.5, 51.48, -0.0015, use_degrees=True, jd_frac=0.25)
        ```
    """
    return CatalogParams(
        latitude=to_radians(latitude, use_degrees),
        sidereal_time=local_sidereal_time(jd, to_radians(longitude, use_degrees), jd_frac=jd_frac),
        obliquity=mean_obliquity(jd, jd_frac=jd_frac),
    )
