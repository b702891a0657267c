"""
Fixtures for cycle_math tests
=============================

Quad grid meshes built in-test (graph construction is the driver's job,
not the library's):

    vertex id  v = y * nx + x,   coordinates (x, y, 0)
    adjacency  4-neighbour grid
    faces      unit squares [v(x,y), v(x+1,y), v(x+1,y+1), v(x,y+1)]
    edge_adj   edges sharing a face (an edge is not adjacent to itself)

Strip 4×2 layout used by the fusion tests:

    4 ── 5 ── 6 ── 7
    │ A  │    │ B  │
    0 ── 1 ── 2 ── 3

    A = [0, 1, 5, 4], B = [2, 3, 7, 6]; (1,5) and (2,6) share the middle face.
"""

import sys
from collections import defaultdict
from pathlib import Path

import pytest

src_root = Path(__file__).parent.parent.parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from cycle_math.spec.structures import CycleContext, canonical_edge


def build_quad_grid(nx, ny):
    """
    Build grid tables for nx × ny vertices.

    Returns:
        dict with 'V', 'adj', 'edge_adj', 'faces', 'vid'
    """
    def vid(x, y):
        return y * nx + x

    V = [(x, y, 0) for y in range(ny) for x in range(nx)]

    adj = defaultdict(set)
    for y in range(ny):
        for x in range(nx):
            if x + 1 < nx:
                adj[vid(x, y)].add(vid(x + 1, y))
                adj[vid(x + 1, y)].add(vid(x, y))
            if y + 1 < ny:
                adj[vid(x, y)].add(vid(x, y + 1))
                adj[vid(x, y + 1)].add(vid(x, y))

    faces = [
        [vid(x, y), vid(x + 1, y), vid(x + 1, y + 1), vid(x, y + 1)]
        for y in range(ny - 1) for x in range(nx - 1)
    ]

    edge_adj = defaultdict(set)
    for face in faces:
        fe = [canonical_edge(face[k], face[(k + 1) % 4]) for k in range(4)]
        for e in fe:
            edge_adj[e].update(o for o in fe if o != e)

    return {
        'V': V,
        'adj': dict(adj),
        'edge_adj': dict(edge_adj),
        'faces': faces,
        'vid': vid,
    }


@pytest.fixture
def make_grid():
    return build_quad_grid


@pytest.fixture
def quad_context():
    """Single unit square 0-1-2-3 at (0,0,0),(1,0,0),(1,1,0),(0,1,0)."""
    g = build_quad_grid(2, 2)
    # grid order is 0,1,3,2 around the square; relabel so the walk is 0-1-2-3
    relabel = {0: 0, 1: 1, 3: 2, 2: 3}
    V = [None] * 4
    for old, new in relabel.items():
        V[new] = g['V'][old]
    adj = {relabel[v]: {relabel[n] for n in ns} for v, ns in g['adj'].items()}
    edge_adj = {
        canonical_edge(relabel[a], relabel[b]): {
            canonical_edge(relabel[c], relabel[d]) for c, d in others
        }
        for (a, b), others in g['edge_adj'].items()
    }
    return CycleContext.from_tables(adj, edge_adj, V)


@pytest.fixture
def strip_grid():
    return build_quad_grid(4, 2)


@pytest.fixture
def strip_context(strip_grid):
    g = strip_grid
    return CycleContext.from_tables(g['adj'], g['edge_adj'], g['V'])
