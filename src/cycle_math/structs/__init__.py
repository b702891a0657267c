"""Stateful structures - Cycle and the driver-owned CycleArena."""

from .cycle import Cycle
from .arena import CycleArena
