"""Shared utility functions for skyframes.

Provides the angle conversion helpers behind the ``use_degrees`` convention.
"""

from skyframes.utils._angle import from_radians, to_radians, wrap_to_two_pi

__all__ = [
    "from_radians",
    "to_radians",
    "wrap_to_two_pi",
]
