"""Edge operators - consecutive pairs, canonical sets, lead filter, closure, rotation."""

from .edges import (
    consecutive_pairs,
    plain_edges,
    coordinate_sum_window,
    filtered_edges,
    edge_adjacency_closure,
    rotated_to_edge,
    DEFAULT_LEAD_FILTER,
)
