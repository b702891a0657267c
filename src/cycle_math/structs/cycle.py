"""
Cycle - Closed Walk on a Mesh Graph
===================================

State:
    data    : vertex ids in cyclic order (last is adjacent to first)
    joined  : True once another cycle has been fused in
    last    : terminal cycle, edge derivation always plain
    lead    : filtered edge derivation while not last

Derived (memoised on a snapshot of data):
    edges() : canonical edge set, plain or lead-filtered
    eadjs() : union of edge_adj over edges()

FUSION:
    A.join(edge, oedge, B) rotates A so edge is its seam (edge[0] first,
    edge[1] last), orients oedge so that oedge[0] neighbours edge[1],
    rotates B onto it and appends B to A:

        A: edge[0] ... edge[1] | B: oedge[0] ... oedge[1]

    The result is one closed walk if oedge[1] neighbours edge[0], which
    the caller guarantees by picking oedge from A.eadjs().
    B is consumed and must not be used afterwards.

Failures raise before either cycle is modified.
"""

import logging
import warnings
from typing import Iterable, List, Set, Tuple

from ..spec.constants import MIN_CYCLE_LEN
from ..spec.errors import MissingAdjacencyEntry
from ..spec.structures import CycleContext, Edge
from ..operators.edges import (
    plain_edges,
    filtered_edges,
    edge_adjacency_closure,
    rotated_to_edge,
)

logger = logging.getLogger(__name__)


class Cycle:
    """Ordered cyclic vertex sequence with cached edge sets."""

    def __init__(self, data: Iterable[int], context: CycleContext, lead: bool = False):
        self.data: List[int] = [int(v) for v in data]
        self.joined = False
        self.last = False
        self.lead = bool(lead)
        self.context = context

        self._prev: List[int] = []
        self._edges: Set[Edge] = set()
        self._eadjs_key = None
        self._eadjs: Set[Edge] = set()
        self._mode = None

        if len(self.data) < MIN_CYCLE_LEN:
            warnings.warn(
                f"Cycle of length {len(self.data)} is shorter than {MIN_CYCLE_LEN}; "
                f"edge counts will not match vertex counts.",
                UserWarning
            )
        elif len(set(self.data)) != len(self.data):
            warnings.warn(
                "Cycle has repeated vertices; rotation will use the first occurrence.",
                UserWarning
            )

    @classmethod
    def from_thread(cls, thread, context: CycleContext, lead: bool = False) -> "Cycle":
        """From any ordered sequence (list, tuple, deque, array)."""
        return cls(thread, context, lead)

    @classmethod
    def from_list(cls, path: List[int], context: CycleContext, lead: bool = False) -> "Cycle":
        """From an explicit list of vertex ids."""
        return cls(path, context, lead)

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(list(self.data))

    def __contains__(self, vertex):
        return vertex in self.data

    def __repr__(self):
        flags = [name for name in ('joined', 'last', 'lead') if getattr(self, name)]
        return f"Cycle(n={len(self.data)}, flags={flags}, data={self.data})"

    # ─────────────────────────────────────────────────────────────
    # Access and flags
    # ─────────────────────────────────────────────────────────────

    def retrieve(self) -> List[int]:
        return list(self.data)

    def set_last(self):
        self.last = True

    def set_lead(self):
        self.lead = True

    # ─────────────────────────────────────────────────────────────
    # Rotation and fusion
    # ─────────────────────────────────────────────────────────────

    def rotate_to_edge(self, left: int, right: int):
        """
        Reorient in place so left is first and right is last.

        Raises VertexNotFound (sequence untouched) if either is absent.
        See operators.edges.rotated_to_edge for the case analysis.
        """
        self.data = rotated_to_edge(self.data, left, right)

    def join(self, edge: Tuple[int, int], oedge: Tuple[int, int], other: "Cycle") -> "Cycle":
        """
        Fuse other into self at the boundary pair (edge, oedge).

        Args:
            edge: directed edge on self; becomes self's seam
            oedge: edge on other, either direction; reoriented so that
                   its first vertex neighbours edge[1]
            other: a distinct cycle, consumed by the fusion

        Returns:
            self

        Raises:
            ValueError: other is self
            VertexNotFound: an edge endpoint is not on its cycle
            MissingAdjacencyEntry: edge[1] has no adjacency entry
        """
        if other is self:
            raise ValueError("Cannot join a cycle with itself")

        new_self = rotated_to_edge(self.data, edge[0], edge[1])
        try:
            neighs = self.context.adj[edge[1]]
        except KeyError:
            raise MissingAdjacencyEntry(edge[1]) from None
        o_edge = (oedge[0], oedge[1])
        if oedge[0] not in neighs:
            o_edge = (oedge[1], oedge[0])
        new_other = rotated_to_edge(other.data, o_edge[0], o_edge[1])

        logger.debug("join %s (n=%d) + %s (n=%d)", edge, len(new_self), o_edge, len(new_other))

        other.data = new_other
        self.data = new_self + new_other
        self.joined = True
        return self

    # ─────────────────────────────────────────────────────────────
    # Edge derivation
    # ─────────────────────────────────────────────────────────────

    def make_edges(self) -> Set[Edge]:
        """Plain canonical edge set, ignoring flags and cache."""
        return plain_edges(self.data)

    def _filtered(self) -> bool:
        return self.lead and not self.last

    def edges(self) -> Set[Edge]:
        """
        Canonical edge set of the current sequence.

        Lead and not last → filtered by context.lead_filter.
        Otherwise         → plain.

        Recomputed only when data or the derivation mode changed since the
        previous call; returns a copy.
        """
        mode = self._filtered()
        if self._prev != self.data or self._mode != mode:
            if mode:
                self._edges = filtered_edges(
                    self.data, self.context.verts, self.context.lead_filter
                )
            else:
                self._edges = self.make_edges()
            self._prev = list(self.data)
            self._mode = mode
        return set(self._edges)

    def eadjs(self) -> Set[Edge]:
        """
        Edges adjacent to any edge of edges().

        Raises MissingEdgeAdjacencyEntry if a cycle edge is absent from
        context.edge_adj.
        """
        edges = self.edges()
        key = (self._prev, self._mode)
        if self._eadjs_key != key:
            self._eadjs = edge_adjacency_closure(edges, self.context.edge_adj)
            self._eadjs_key = (list(self._prev), self._mode)
        return set(self._eadjs)
