"""
CYCLE_MATH - Cycle representation and fusion on mesh graphs
===========================================================

NO graph construction. NO mesh loading. NO fusion-order policy.

Structure:
    spec/       - Constants, errors, canonical edge, shared graph context
    operators/  - Edge derivation (pairs, canonical form, lead filter, closure)
    structs/    - Cycle and CycleArena

Layering:
    structs → operators → spec

All cycles built on one mesh share ONE CycleContext:
    - adj:       vertex → set of neighbour vertices
    - edge_adj:  canonical edge → set of canonical edges
    - verts:     (V, 3) integer coordinates (read-only)
    - lead_filter: edge predicate for lead cycles
"""

from . import spec
from . import operators
from . import structs

from .spec import (
    CycleContext,
    canonical_edge,
    validate_context,
    CycleContextError,
    VertexNotFound,
    MissingAdjacencyEntry,
    MissingEdgeAdjacencyEntry,
)
from .structs import Cycle, CycleArena
