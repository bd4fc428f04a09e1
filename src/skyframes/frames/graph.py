"""Directed graph of reference frames joined by rotation matrices.

Frames are stored in an arena and addressed by dense integer indices. Each
directed edge owns the matrix that maps a column vector from its source
frame's basis into its target frame's basis. A physically invertible
relationship is registered as two edges, one per direction, each with its own
matrix; nothing here ever inverts a matrix.

:class:`FrameGraph` is immutable once built. Lookup tables (name to index,
index pair to edge, adjacency) are derived at construction, so a graph can be
shared freely between threads and conversion calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import NamedTuple

from jax import Array

from skyframes.exceptions import FrameNotFoundError


class Frame(NamedTuple):
    """A named celestial reference frame (graph vertex).

    Attributes:
        name: Unique, case-sensitive frame name.
    """

    name: str


class TransformEdge(NamedTuple):
    """A directed transform between two frames (graph edge).

    Attributes:
        source: Arena index of the frame the transform leaves.
        target: Arena index of the frame the transform enters.
        label: Human readable description, e.g. ``"Ecliptic to Equatorial RA Dec"``.
        matrix: Square matrix applied as ``matrix @ vector``. ``None`` marks
            an edge whose matrix was never attached.
    """

    source: int
    target: int
    label: str
    matrix: Array | None


@dataclass(frozen=True, eq=False)
class FrameGraph:
    """Immutable arena + index graph of frames and transform edges.

    Use :func:`build_graph` to construct one from frame names.

    Attributes:
        frames: Vertices in insertion order; a frame's position is its index.
        edges: Edges in insertion order.
    """

    frames: tuple[Frame, ...]
    edges: tuple[TransformEdge, ...]
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)
    _edge_map: Mapping[tuple[int, int], TransformEdge] = field(init=False, repr=False, compare=False)
    _adjacency: tuple[tuple[int, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index = {frame.name: i for i, frame in enumerate(self.frames)}
        adjacency: list[list[int]] = [[] for _ in self.frames]
        edge_map = {}
        for edge in self.edges:
            edge_map[(edge.source, edge.target)] = edge
            adjacency[edge.source].append(edge.target)

        # Frozen dataclass; derived tables are set once here
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_edge_map", edge_map)
        object.__setattr__(self, "_adjacency", tuple(tuple(a) for a in adjacency))

    def __len__(self) -> int:
        return len(self.frames)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    @property
    def names(self) -> tuple[str, ...]:
        """Frame names in index order."""
        return tuple(frame.name for frame in self.frames)

    def index_of(self, name: str) -> int:
        """Resolve a frame name to its arena index.

        Args:
            name: Exact, case-sensitive frame name.

        Returns:
            Index of the frame.

        Raises:
            FrameNotFoundError: If no frame has this name.
        """
        try:
            return self._index[name]
        except KeyError:
            raise FrameNotFoundError(name) from None

    def neighbors(self, index: int) -> tuple[int, ...]:
        """Indices reachable from ``index`` over one edge, in edge insertion order."""
        return self._adjacency[index]

    def edge(self, source: int, target: int) -> TransformEdge | None:
        """Return the edge registered for ``source -> target``, or ``None``."""
        return self._edge_map.get((source, target))


def build_graph(
    frame_names: Iterable[str],
    edges: Iterable[tuple[str, str, str, Array | None]],
) -> FrameGraph:
    """Build a :class:`FrameGraph` from frame names and named edges.

    Args:
        frame_names: Unique frame names, in the order that fixes their indices.
        edges: ``(source_name, target_name, label, matrix)`` tuples, in the
            order neighbours should be visited during routing.

    Returns:
        The constructed graph.

    Raises:
        ValueError: If a frame name is repeated, an edge names an unknown
            frame, or two edges share the same source and target.

    Examples:
        ```python
        import jax.numpy as jnp
        from skyframes.frames import build_graph
        g = build_graph(["A", "B"], [("A", "B", "A to B", jnp.eye(2))])
        g.index_of("B")
        ```
    """
    frames = []
    index: dict[str, int] = {}
    for name in frame_names:
        if name in index:
            raise ValueError(f"Duplicate frame name {name!r}")
        index[name] = len(frames)
        frames.append(Frame(name))

    built = []
    seen: set[tuple[int, int]] = set()
    for source_name, target_name, label, matrix in edges:
        for name in (source_name, target_name):
            if name not in index:
                raise ValueError(f"Edge {label!r} refers to unknown frame {name!r}")
        key = (index[source_name], index[target_name])
        if key in seen:
            raise ValueError(
                f"Duplicate edge {source_name!r} -> {target_name!r} ({label!r})"
            )
        seen.add(key)
        built.append(TransformEdge(key[0], key[1], label, matrix))

    return FrameGraph(frames=tuple(frames), edges=tuple(built))
