"""Consistency checks for registered transform pairs.

The conversion engine uses whichever matrix was registered for each
direction and never assumes that ``M(b, a)`` is the inverse of ``M(a, b)``.
Round trips are exact only when whoever built the graph supplied true
inverses. These helpers measure that, so a caller can verify a graph before
relying on round trips.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp

from skyframes.config import get_matrix_tolerance
from skyframes.frames.graph import FrameGraph

logger = logging.getLogger(__name__)


def inverse_pair_errors(graph: FrameGraph) -> dict[tuple[str, str], float]:
    """Measure how far each bidirectional edge pair is from being inverse.

    For every pair of frames ``(a, b)`` with matrices registered in both
    directions, computes ``max |M(b, a) @ M(a, b) - I|``. Each pair is
    reported once, keyed by the direction registered first. Pairs where
    either matrix is missing are skipped.

    Args:
        graph: Frame graph to inspect.

    Returns:
        Mapping of ``(a_name, b_name)`` to the maximum absolute deviation.
    """
    errors: dict[tuple[str, str], float] = {}
    seen: set[frozenset[int]] = set()

    for edge in graph.edges:
        key = frozenset((edge.source, edge.target))
        if key in seen:
            continue
        reverse = graph.edge(edge.target, edge.source)
        if reverse is None or edge.matrix is None or reverse.matrix is None:
            continue
        seen.add(key)

        product = reverse.matrix @ edge.matrix
        deviation = jnp.max(jnp.abs(product - jnp.eye(product.shape[0], dtype=product.dtype)))
        names = (graph.frames[edge.source].name, graph.frames[edge.target].name)
        errors[names] = float(deviation)

    return errors


def check_inverse_pairs(graph: FrameGraph, atol: float | None = None) -> list[tuple[str, str]]:
    """Return the edge pairs whose matrices are not mutual inverses.

    Logs a warning for each failing pair.

    Args:
        graph: Frame graph to inspect.
        atol: Absolute tolerance. Defaults to
            :func:`skyframes.config.get_matrix_tolerance`.

    Returns:
        ``(a_name, b_name)`` pairs exceeding ``atol``, in edge order.
    """
    if atol is None:
        atol = get_matrix_tolerance()

    failing = []
    for (a, b), deviation in inverse_pair_errors(graph).items():
        if deviation > atol:
            logger.warning(
                "Transforms %s <-> %s are not mutual inverses (max deviation %.3e > %.3e)",
                a, b, deviation, atol,
            )
            failing.append((a, b))

    return failing
