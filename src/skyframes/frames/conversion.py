"""Routing and composition of frame conversions.

Converting a direction between two frames is done in three steps:

1. **Resolve** both frame names to arena indices.
2. **Route**: breadth-first search from the source frame yields a
   minimum-hop path to the destination. Neighbours are visited in edge
   insertion order, so among equally short paths the result is fixed by the
   order edges were registered.
3. **Compose**: the column vector is left-multiplied by each edge matrix
   along the path, source first: ``v = M(a, b) @ v``.

No wrapping is applied to the output; angles recovered from it are the
caller's concern (see :func:`convert_spherical` for a ready-made helper).

All routing runs in plain Python on the static graph. Only the matrix
products touch JAX, so :func:`transform_vector` can be used inside
``jax.jit`` with the graph and frame names closed over.
"""

from __future__ import annotations

import logging
from collections import deque

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from skyframes.config import get_dtype
from skyframes.coordinates import column_vector, spherical_from_column
from skyframes.exceptions import CatalogInconsistencyError, FrameUnreachableError
from skyframes.frames.catalog import build_catalog
from skyframes.frames.graph import FrameGraph
from skyframes.utils import to_radians

logger = logging.getLogger(__name__)


def _bfs_predecessors(graph: FrameGraph, source: int) -> list[int]:
    """Breadth-first search returning the predecessor of every vertex.

    Vertices not reached keep themselves as predecessor.
    """
    predecessors = list(range(len(graph.frames)))
    visited = {source}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                predecessors[v] = u
                queue.append(v)

    return predecessors


def _reconstruct_path(
    graph: FrameGraph, predecessors: list[int], source: int, target: int
) -> tuple[int, ...]:
    """Walk predecessors back from ``target`` to ``source``.

    Raises:
        FrameUnreachableError: If the walk meets a vertex that is its own
            predecessor other than the source, or runs longer than the
            number of vertices.
    """
    path = [target]
    node = target
    for _ in range(len(graph.frames)):
        if node == source:
            break
        parent = predecessors[node]
        if parent == node:
            raise FrameUnreachableError(graph.frames[source].name, graph.frames[target].name)
        node = parent
        path.append(node)
    else:
        # More steps than vertices: the predecessor state has a cycle
        raise FrameUnreachableError(graph.frames[source].name, graph.frames[target].name)

    path.reverse()
    return tuple(path)


def find_path(graph: FrameGraph, source: str, target: str) -> tuple[int, ...]:
    """Find a minimum-hop chain of transforms between two frames.

    Args:
        graph: Frame graph to route over.
        source: Name of the frame the direction is given in.
        target: Name of the frame to convert to.

    Returns:
        Arena indices of the frames on the path, ``source`` first and
        ``target`` last. A single index when ``source == target``.

    Raises:
        FrameNotFoundError: If either name is not in the graph. The source
            is checked first.
        FrameUnreachableError: If no path exists.

    Examples:
        ```python
        from skyframes.frames import build_catalog, find_path
        g = build_catalog(0.9, 1.2, 0.409)
        [g.frames[i].name for i in find_path(g, "Horizon", "Ecliptic")]
        ```
    """
    src = graph.index_of(source)
    dst = graph.index_of(target)

    predecessors = _bfs_predecessors(graph, src)
    path = _reconstruct_path(graph, predecessors, src, dst)

    logger.debug("Route %s -> %s: %s", source, target, " -> ".join(graph.frames[i].name for i in path))
    return path


def frame_path_names(graph: FrameGraph, source: str, target: str) -> tuple[str, ...]:
    """Return the frame names on the route from ``source`` to ``target``."""
    return tuple(graph.frames[i].name for i in find_path(graph, source, target))


def transform_vector(graph: FrameGraph, source: str, target: str, vector: ArrayLike) -> Array:
    """Apply the chain of transform matrices from ``source`` to ``target``.

    Args:
        graph: Frame graph to route over.
        source: Name of the frame ``vector`` is expressed in.
        target: Name of the frame to express it in.
        vector: Column vector in the source basis. A 1-D input is treated as
            a column. Its length must match the edge matrices.

    Returns:
        ``(n, 1)`` column vector in the target basis. Equal to the input when
        ``source == target``.

    Raises:
        FrameNotFoundError: If either name is not in the graph.
        FrameUnreachableError: If no path exists.
        CatalogInconsistencyError: If a step on the path has no matrix.
    """
    path = find_path(graph, source, target)

    # Resolve every step before any multiplication
    matrices = []
    for a, b in zip(path, path[1:]):
        edge = graph.edge(a, b)
        if edge is None or edge.matrix is None:
            raise CatalogInconsistencyError(graph.frames[a].name, graph.frames[b].name)
        matrices.append(edge.matrix)

    result = jnp.asarray(vector, dtype=get_dtype()).reshape(-1, 1)
    for matrix in matrices:
        result = matrix @ result

    return result


def convert(
    source: str,
    target: str,
    coordinate: ArrayLike,
    latitude: ArrayLike,
    sidereal_time: ArrayLike,
    obliquity: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert a two-angle direction between named catalog frames.

    Builds the reference catalog for the given parameters, turns
    ``coordinate`` into a direction-cosine column and routes it through
    the catalog.

    Args:
        source: Catalog frame ``coordinate`` is given in, e.g. ``"Horizon"``.
        target: Catalog frame to convert to, e.g. ``"Ecliptic"``.
        coordinate: ``[coordinate1, coordinate2]``, longitude-like then
            latitude-like angle.
        latitude: Observer geodetic latitude.
        sidereal_time: Local sidereal time as an angle.
        obliquity: Obliquity of the ecliptic.
        use_degrees: Interpret all angles in degrees. Default: ``False``

    Returns:
        ``(3, 1)`` direction-cosine column in the target frame.

    Raises:
        ValueError: If ``coordinate`` does not have shape ``(2,)``.
        FrameNotFoundError: If either name is not a catalog frame.

    Examples:
        ```python
        from skyframes import convert
        convert("Equatorial_RA_Dec", "Galactic", [266.4, -28.94],
                latitude=0.0, sidereal_time=0.0, obliquity=23.44, use_degrees=True)
        ```
    """
    if jnp.shape(coordinate) != (2,):
        raise ValueError(f"coordinate must have shape (2,), got {jnp.shape(coordinate)}")

    graph = build_catalog(latitude, sidereal_time, obliquity, use_degrees)
    coordinate = to_radians(coordinate, use_degrees)
    vector = column_vector(coordinate[0], coordinate[1])
    return transform_vector(graph, source, target, vector)


def convert_spherical(
    source: str,
    target: str,
    coordinate: ArrayLike,
    latitude: ArrayLike,
    sidereal_time: ArrayLike,
    obliquity: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert a two-angle direction and return the result as two angles.

    Same as :func:`convert`, but the output column is read back with
    :func:`~skyframes.coordinates.spherical_from_column`, so the longitude is
    wrapped to ``[0, 2*pi)`` (or ``[0, 360)`` degrees).

    Returns:
        ``[coordinate1, coordinate2]`` in the target frame, in the same
        units as the input.
    """
    column = convert(source, target, coordinate, latitude, sidereal_time, obliquity, use_degrees)
    return spherical_from_column(column, use_degrees)
