"""
Cycle Edge Operators
====================

Pure functions on a vertex sequence - NO cycle state, NO caching.

DEFINITIONS:
    A cycle [v0, v1, ..., v_{n-1}] has n consecutive pairs
        (v0,v1), (v1,v2), ..., (v_{n-1},v0)
    including the wrap-around pair.

    Canonical edge set = {canonical_edge(a, b) for each pair}.
    For a simple cycle with n >= 3 this has exactly n elements.

    Lead filter: keep only edges whose endpoints satisfy a coordinate
    predicate. Default is the coordinate-sum window
        LEAD_SUM_MIN <= x_a + y_a + x_b + y_b < LEAD_SUM_MAX
    Filtered set ⊆ plain set, always.

ROTATION:
    rotated_to_edge(seq, left, right) reorders so that left is first and
    right is last (for an adjacent pair). The seam is the wrap-around
    pair (right → left). Cyclic adjacency and the vertex multiset are
    preserved; only start point and direction change.
"""

import numpy as np
from typing import Callable, Dict, Iterable, List, Sequence, Set

from ..spec.constants import LEAD_SUM_MIN, LEAD_SUM_MAX, SUM_AXES
from ..spec.errors import VertexNotFound, MissingEdgeAdjacencyEntry
from ..spec.structures import Edge, canonical_edge


def consecutive_pairs(seq: Sequence[int]) -> List[Edge]:
    """Directed consecutive pairs of a cyclic sequence, wrap-around last."""
    n = len(seq)
    return [(seq[k], seq[(k + 1) % n]) for k in range(n)]


def plain_edges(seq: Sequence[int]) -> Set[Edge]:
    """Canonical edge set of a cyclic sequence, unfiltered."""
    return {canonical_edge(a, b) for a, b in consecutive_pairs(seq)}


def coordinate_sum_window(lo: int = LEAD_SUM_MIN,
                          hi: int = LEAD_SUM_MAX,
                          axes=SUM_AXES) -> Callable[[np.ndarray, np.ndarray], np.ndarray]:
    """
    Build the coordinate-sum edge predicate.

    Args:
        lo: inclusive lower bound on the summed coordinates
        hi: exclusive upper bound
        axes: coordinate axes entering the sum (default x and y)

    Returns:
        predicate(verts, edges) → (k,) bool mask, where
            verts: (V, 3) coordinate array
            edges: (k, 2) array of vertex ids
    """
    if lo > hi:
        raise ValueError(f"Empty window: lo={lo} > hi={hi}")
    axes = list(axes)

    def predicate(verts: np.ndarray, edges: np.ndarray) -> np.ndarray:
        total = verts[edges][:, :, axes].sum(axis=(1, 2))
        return (lo <= total) & (total < hi)

    predicate.window = (lo, hi)
    return predicate


DEFAULT_LEAD_FILTER = coordinate_sum_window()


def filtered_edges(seq: Sequence[int],
                   verts: np.ndarray,
                   predicate=None) -> Set[Edge]:
    """
    Canonical edge set restricted by an edge predicate.

    Args:
        seq: cyclic vertex sequence
        verts: (V, 3) coordinate array indexed by vertex id
        predicate: (verts, edges) → bool mask; None → DEFAULT_LEAD_FILTER

    Returns:
        subset of plain_edges(seq)
    """
    if predicate is None:
        predicate = DEFAULT_LEAD_FILTER
    edges = sorted(plain_edges(seq))
    if not edges:
        return set()
    arr = np.asarray(edges, dtype=np.int64)
    mask = np.asarray(predicate(verts, arr), dtype=bool)
    return {e for e, keep in zip(edges, mask) if keep}


def edge_adjacency_closure(edges: Iterable[Edge],
                           edge_adj: Dict[Edge, Set[Edge]]) -> Set[Edge]:
    """
    Union of the adjacent-edge sets of every edge.

    FAIL-FAST:
        Raises MissingEdgeAdjacencyEntry if an edge has no entry.
    """
    out = set()
    for e in edges:
        try:
            out |= edge_adj[e]
        except KeyError:
            raise MissingEdgeAdjacencyEntry(e) from None
    return out


def rotated_to_edge(seq: Sequence[int], left: int, right: int) -> List[int]:
    """
    Reorientation of a cyclic sequence onto the seam (left, right).

    Cases:
        1. left first, right last  → unchanged (already on the seam)
        2. left last, right first  → reversed
        3. pos(left) > pos(right)  → rotate left by pos(left)
        4. otherwise               → rotate left by pos(right), then reverse

    Args:
        seq: cyclic vertex sequence (not modified)
        left, right: vertex ids, both must be in seq

    Returns:
        new list; for adjacent left/right, left is first and right last

    Raises:
        VertexNotFound before any reordering if either vertex is absent.
    """
    data = list(seq)
    if data and data[0] == left and data[-1] == right:
        return data
    if data and data[-1] == left and data[0] == right:
        data.reverse()
        return data

    try:
        i_left = data.index(left)
    except ValueError:
        raise VertexNotFound(left, data) from None
    try:
        i_right = data.index(right)
    except ValueError:
        raise VertexNotFound(right, data) from None

    if i_left > i_right:
        return data[i_left:] + data[:i_left]
    rotated = data[i_right:] + data[:i_right]
    rotated.reverse()
    return rotated
