"""Direction representations.

Builds the column vectors consumed by the conversion engine from pairs of
angles, and reads them back:

- :func:`column_vector` -- two angles to a ``(3, 1)`` direction-cosine column
- :func:`spherical_from_column` -- a direction column back to two angles
- :class:`SphericalEquatorial` -- latitude, longitude and distance
"""

from .spherical import (
    SphericalEquatorial,
    column_vector,
    spherical_from_column,
)

__all__ = [
    "SphericalEquatorial",
    "column_vector",
    "spherical_from_column",
]
