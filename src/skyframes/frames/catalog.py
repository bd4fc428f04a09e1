"""The reference catalog of celestial frames.

Five frames joined by four bidirectional relationships::

    Horizon -- Equatorial_HA_Dec -- Equatorial_RA_Dec -- Ecliptic
                                            |
                                         Galactic

Horizon/HA-Dec depends on the observer latitude, HA-Dec/RA-Dec on the local
sidereal time, RA-Dec/Ecliptic on the obliquity of the ecliptic, and
RA-Dec/Galactic is fixed. Frames not adjacent above (for example Horizon and
Galactic) are only reachable through intermediate frames.

Because three of the four relationships depend on per-call parameters, the
catalog is rebuilt for each set of parameters rather than cached globally.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from jax.typing import ArrayLike

from skyframes.frames.graph import FrameGraph, build_graph
from skyframes.frames.transforms import (
    rotation_ecliptic_to_ra_dec,
    rotation_galactic_to_ra_dec,
    rotation_ha_dec_to_horizon,
    rotation_ha_dec_to_ra_dec,
    rotation_horizon_to_ha_dec,
    rotation_ra_dec_to_ecliptic,
    rotation_ra_dec_to_galactic,
    rotation_ra_dec_to_ha_dec,
)
from skyframes.utils import to_radians

logger = logging.getLogger(__name__)

HORIZON = "Horizon"
EQUATORIAL_HA_DEC = "Equatorial_HA_Dec"
EQUATORIAL_RA_DEC = "Equatorial_RA_Dec"
ECLIPTIC = "Ecliptic"
GALACTIC = "Galactic"

FRAME_NAMES = (HORIZON, EQUATORIAL_HA_DEC, EQUATORIAL_RA_DEC, ECLIPTIC, GALACTIC)


class CatalogParams(NamedTuple):
    """Scalar parameters the catalog's edge matrices depend on.

    Attributes:
        latitude: Observer geodetic latitude. Units: *rad*
        sidereal_time: Local sidereal time as an angle. Units: *rad*
        obliquity: Obliquity of the ecliptic. Units: *rad*
    """

    latitude: ArrayLike
    sidereal_time: ArrayLike
    obliquity: ArrayLike


def _label(source: str, target: str) -> str:
    return f"{source.replace('_', ' ')} to {target.replace('_', ' ')}"


def build_catalog(
    latitude: ArrayLike,
    sidereal_time: ArrayLike,
    obliquity: ArrayLike,
    use_degrees: bool = False,
) -> FrameGraph:
    """Build the reference frame graph for one set of parameters.

    Registers the five frames of :data:`FRAME_NAMES` and eight directed
    edges, two per relationship, in a fixed order so routing is
    deterministic.

    Args:
        latitude: Observer geodetic latitude.
        sidereal_time: Local sidereal time as an angle.
        obliquity: Obliquity of the ecliptic.
        use_degrees: Interpret all three angles in degrees. Default: ``False``

    Returns:
        The catalog graph.

    Examples:
        ```python
        from skyframes.frames import build_catalog
        g = build_catalog(51.5, 120.0, 23.44, use_degrees=True)
        g.names
        ```
    """
    latitude = to_radians(latitude, use_degrees)
    sidereal_time = to_radians(sidereal_time, use_degrees)
    obliquity = to_radians(obliquity, use_degrees)

    relationships = [
        (EQUATORIAL_HA_DEC, HORIZON, rotation_ha_dec_to_horizon(latitude)),
        (HORIZON, EQUATORIAL_HA_DEC, rotation_horizon_to_ha_dec(latitude)),
        (EQUATORIAL_HA_DEC, EQUATORIAL_RA_DEC, rotation_ha_dec_to_ra_dec(sidereal_time)),
        (EQUATORIAL_RA_DEC, EQUATORIAL_HA_DEC, rotation_ra_dec_to_ha_dec(sidereal_time)),
        (EQUATORIAL_RA_DEC, ECLIPTIC, rotation_ra_dec_to_ecliptic(obliquity)),
        (ECLIPTIC, EQUATORIAL_RA_DEC, rotation_ecliptic_to_ra_dec(obliquity)),
        (EQUATORIAL_RA_DEC, GALACTIC, rotation_ra_dec_to_galactic()),
        (GALACTIC, EQUATORIAL_RA_DEC, rotation_galactic_to_ra_dec()),
    ]
    graph = build_graph(
        FRAME_NAMES,
        [(src, dst, _label(src, dst), matrix) for src, dst, matrix in relationships],
    )
    logger.debug("Built frame catalog with %d frames and %d edges", len(graph.frames), len(graph.edges))
    return graph


def build_catalog_from_params(params: CatalogParams) -> FrameGraph:
    """Build the reference frame graph from a :class:`CatalogParams` (radians)."""
    return build_catalog(params.latitude, params.sidereal_time, params.obliquity)
