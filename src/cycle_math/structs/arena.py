"""
Cycle Arena - Driver-Owned Cycle Store
======================================

Holds every live Cycle of one fusion pass behind an integer handle.

    handle = arena.add(thread, lead=...)
    arena.join(h_keep, edge, oedge, h_absorbed)   # h_absorbed is removed

Handles are never reused, so a consumed handle stays invalid for the
rest of the pass. All cycles share the arena's CycleContext.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from ..spec.structures import CycleContext
from .cycle import Cycle

logger = logging.getLogger(__name__)


class CycleArena:
    """Integer-handle store for the cycles of one fusion pass."""

    def __init__(self, context: CycleContext):
        self.context = context
        self._cycles: Dict[int, Cycle] = {}
        self._next = 0

    def __len__(self):
        return len(self._cycles)

    def __contains__(self, handle):
        return handle in self._cycles

    def handles(self) -> List[int]:
        return list(self._cycles)

    def add(self, thread: Iterable[int], lead: bool = False) -> int:
        """Create a Cycle from a vertex thread; return its handle."""
        handle = self._next
        self._next += 1
        self._cycles[handle] = Cycle.from_thread(thread, self.context, lead)
        return handle

    def get(self, handle: int) -> Cycle:
        try:
            return self._cycles[handle]
        except KeyError:
            raise KeyError(f"No live cycle with handle {handle}") from None

    def set_last(self, handle: int):
        self.get(handle).set_last()

    def set_lead(self, handle: int):
        self.get(handle).set_lead()

    def join(self, handle: int, edge: Tuple[int, int], oedge: Tuple[int, int],
             other_handle: int) -> int:
        """
        Fuse cycle other_handle into cycle handle.

        The absorbed handle is removed only after the fusion succeeded;
        on error both cycles stay live and unchanged.

        Returns:
            handle of the fused cycle (unchanged)
        """
        if handle == other_handle:
            raise ValueError(f"Cannot join handle {handle} with itself")
        cycle = self.get(handle)
        other = self.get(other_handle)
        cycle.join(edge, oedge, other)
        del self._cycles[other_handle]
        logger.debug("arena: %d absorbed %d, %d live", handle, other_handle, len(self._cycles))
        return handle

    def retrieve_all(self) -> Dict[int, List[int]]:
        return {h: c.retrieve() for h, c in self._cycles.items()}
