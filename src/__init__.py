"""
cycle_math Source Code
======================

Modules:
    cycle_math - Cycle representation, rotation and fusion on mesh graphs
    tests      - Test suite

Requirements:
    Python >= 3.9
    numpy >= 1.20
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"cycle_math requires Python >= 3.9, got {sys.version}")

# numpy version check (fancy-indexed coordinate sums in the lead filter)
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"cycle_math requires numpy >= 1.20, got {np.__version__}")
