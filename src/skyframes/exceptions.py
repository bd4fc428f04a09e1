"""
Exceptions raised by the frame conversion engine.

All of them derive from :class:`FrameConversionError`, itself a
``ValueError``, so callers can catch the whole family at once or pick out a
single failure and retry with a different frame pair.
"""

from __future__ import annotations


__all__ = [
    "CatalogInconsistencyError",
    "FrameConversionError",
    "FrameNotFoundError",
    "FrameUnreachableError",
]


class FrameConversionError(ValueError):
    """Base exception for all frame conversion failures."""


class FrameNotFoundError(FrameConversionError):
    """
    Raised when a frame name is not registered in the graph.

    Attributes:
        name: The frame name that could not be resolved.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Frame not found: {name!r}")


class FrameUnreachableError(FrameConversionError):
    """
    Raised when no chain of transforms connects two registered frames.

    Attributes:
        source: Name of the source frame.
        target: Name of the destination frame.
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No transform path from {source!r} to {target!r}")


class CatalogInconsistencyError(FrameConversionError):
    """
    Raised when a step on a discovered path has no usable matrix.

    This indicates a graph that was built wrong, not a caller error.

    Attributes:
        source: Name of the frame the step leaves.
        target: Name of the frame the step enters.
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No transform matrix registered for {source!r} -> {target!r}")
