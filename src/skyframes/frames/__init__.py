"""Celestial frame graph and conversion engine.

This sub-module provides:

- **Edge transforms**: rotation matrices between directly related frames
  (Horizon, Equatorial HA-Dec, Equatorial RA-Dec, Ecliptic, Galactic).
- **Frame graph**: an immutable arena + index graph of frames and directed
  transform edges, and the reference catalog built from the transforms.
- **Conversion**: breadth-first routing between any two frames and ordered
  composition of the edge matrices along the route.
- **Diagnostics**: checks that registered forward/inverse pairs really are
  inverses.
"""

from .catalog import (
    ECLIPTIC,
    EQUATORIAL_HA_DEC,
    EQUATORIAL_RA_DEC,
    FRAME_NAMES,
    GALACTIC,
    HORIZON,
    CatalogParams,
    build_catalog,
    build_catalog_from_params,
)
from .conversion import (
    convert,
    convert_spherical,
    find_path,
    frame_path_names,
    transform_vector,
)
from .diagnostics import check_inverse_pairs, inverse_pair_errors
from .graph import Frame, FrameGraph, TransformEdge, build_graph
from .transforms import (
    rotation_ecliptic_to_ra_dec,
    rotation_galactic_to_ra_dec,
    rotation_ha_dec_to_horizon,
    rotation_ha_dec_to_ra_dec,
    rotation_horizon_to_ha_dec,
    rotation_ra_dec_to_ecliptic,
    rotation_ra_dec_to_galactic,
    rotation_ra_dec_to_ha_dec,
)

__all__ = [
    # Frame names
    "HORIZON",
    "EQUATORIAL_HA_DEC",
    "EQUATORIAL_RA_DEC",
    "ECLIPTIC",
    "GALACTIC",
    "FRAME_NAMES",
    # Graph
    "Frame",
    "TransformEdge",
    "FrameGraph",
    "build_graph",
    # Catalog
    "CatalogParams",
    "build_catalog",
    "build_catalog_from_params",
    # Conversion
    "find_path",
    "frame_path_names",
    "transform_vector",
    "convert",
    "convert_spherical",
    # Diagnostics
    "inverse_pair_errors",
    "check_inverse_pairs",
    # Edge transforms
    "rotation_ha_dec_to_horizon",
    "rotation_horizon_to_ha_dec",
    "rotation_ha_dec_to_ra_dec",
    "rotation_ra_dec_to_ha_dec",
    "rotation_ra_dec_to_ecliptic",
    "rotation_ecliptic_to_ra_dec",
    "rotation_ra_dec_to_galactic",
    "rotation_galactic_to_ra_dec",
]
