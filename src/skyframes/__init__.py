"""
skyframes converts celestial directions between reference frames by routing over a graph of rotation matrices, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    OBLIQUITY_J2000,
)

from .rotation_matrices import (
    Rx,
    Ry,
    Rz
)

from .config import set_dtype, get_dtype

from .exceptions import (
    FrameConversionError,
    FrameNotFoundError,
    FrameUnreachableError,
    CatalogInconsistencyError,
)

from .coordinates import (
    SphericalEquatorial,
    column_vector,
    spherical_from_column,
)

from .frames import (
    HORIZON,
    EQUATORIAL_HA_DEC,
    EQUATORIAL_RA_DEC,
    ECLIPTIC,
    GALACTIC,
    FRAME_NAMES,
    Frame,
    TransformEdge,
    FrameGraph,
    build_graph,
    CatalogParams,
    build_catalog,
    build_catalog_from_params,
    find_path,
    frame_path_names,
    transform_vector,
    convert,
    convert_spherical,
    check_inverse_pairs,
)

from .sidereal import (
    gmst,
    local_sidereal_time,
    mean_obliquity,
    catalog_params,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "OBLIQUITY_J2000",
    # Rotations
    "Rx",
    "Ry",
    "Rz",
    # Config
    "set_dtype",
    "get_dtype",
    # Exceptions
    "FrameConversionError",
    "FrameNotFoundError",
    "FrameUnreachableError",
    "CatalogInconsistencyError",
    # Coordinates
    "SphericalEquatorial",
    "column_vector",
    "spherical_from_column",
    # Frames
    "HORIZON",
    "EQUATORIAL_HA_DEC",
    "EQUATORIAL_RA_DEC",
    "ECLIPTIC",
    "GALACTIC",
    "FRAME_NAMES",
    "Frame",
    "TransformEdge",
    "FrameGraph",
    "build_graph",
    "CatalogParams",
    "build_catalog",
    "build_catalog_from_params",
    "find_path",
    "frame_path_names",
    "transform_vector",
    "convert",
    "convert_spherical",
    "check_inverse_pairs",
    # Sidereal time
    "gmst",
    "local_sidereal_time",
    "mean_obliquity",
    "catalog_params",
]
