# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "skyframes"]
#
# [tool.uv.sources]
# skyframes = { path = ".." }
# ///
"""Convert a direction between two celestial reference frames.

Builds the frame catalog for an observer and time, routes the conversion
through the frame graph and prints the route, the direction-cosine column
and the converted angles.

Requires skyframes to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/convert_coordinates.py SOURCE TARGET LON LAT [OPTIONS]

Examples:
    # Galactic centre (J2000 RA/Dec) in galactic coordinates
    uv run examples/convert_coordinates.py Equatorial_RA_Dec Galactic 266.405 -28.936

    # Zenith at Greenwich, 2025-01-01 00:00 UT, in ecliptic coordinates
    uv run examples/convert_coordinates.py Horizon Ecliptic 0 90 \\
        --jd 2460676.5 --latitude 51.4769 --longitude -0.0005
"""

import logging
import sys
from typing import Annotated

import jax.numpy as jnp
import typer

from skyframes import (
    FRAME_NAMES,
    FrameConversionError,
    build_catalog_from_params,
    catalog_params,
    column_vector,
    frame_path_names,
    set_dtype,
    spherical_from_column,
    transform_vector,
)

set_dtype(jnp.float64)


def main(
    source: Annotated[str, typer.Argument(help=f"Source frame, one of {', '.join(FRAME_NAMES)}")],
    target: Annotated[str, typer.Argument(help="Destination frame")],
    lon: Annotated[float, typer.Argument(help="Longitude-like angle in degrees")],
    lat: Annotated[float, typer.Argument(help="Latitude-like angle in degrees")],
    jd: Annotated[float, typer.Option(help="Julian Date (UT1) of the observation")] = 2451545.0,
    latitude: Annotated[float, typer.Option(help="Observer latitude in degrees")] = 0.0,
    longitude: Annotated[float, typer.Option(help="Observer longitude in degrees, east positive")] = 0.0,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log routing decisions")] = False,
) -> None:
    """Convert one direction between two named frames."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    jd_day, jd_frac = divmod(jd, 1.0)
    params = catalog_params(jd_day, latitude, longitude, use_degrees=True, jd_frac=jd_frac)
    graph = build_catalog_from_params(params)

    try:
        route = frame_path_names(graph, source, target)
        column = transform_vector(graph, source, target, column_vector(lon, lat, use_degrees=True))
    except FrameConversionError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    out_lon, out_lat = spherical_from_column(column, use_degrees=True)

    print(f"Route:  {' -> '.join(route)}")
    print(f"Column: {jnp.ravel(column)}")
    print(f"Result: lon={float(out_lon):.6f} deg, lat={float(out_lat):.6f} deg")


if __name__ == "__main__":
    typer.run(main)
