"""
Bounded enumeration of small rings.

Finds every simple cycle up to a maximum length. These are the
candidate rings the SSSR is selected from; in drug-like molecules
nearly every SSSR ring has at most six members.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cyclipy.types import Molecule

logger = logging.getLogger(__name__)

DEFAULT_MAX_RING_SIZE = 6


def find_small_rings(mol: "Molecule", max_size: int = DEFAULT_MAX_RING_SIZE) -> list[list[int]]:
    """Find all simple cycles with at most max_size atoms.

    Uses a depth-limited DFS from every atom that only walks through
    higher-indexed atoms, so each cycle is rooted at its lowest atom.
    Of the two walking directions only the one whose second atom is
    smaller than its last atom is kept.

    Args:
        mol: Molecule to analyze.
        max_size: Maximum ring size to report.

    Returns:
        Rings as atom index lists starting at their lowest atom, sorted
        by size, then lexicographically.

    Example:
        >>> mol = Molecule.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
        >>> find_small_rings(mol)
        [[0, 1, 2], [0, 2, 3], [0, 1, 2, 3]]
    """
    n = mol.num_atoms
    if n == 0 or max_size < 3:
        return []

    adj: list[list[int]] = [sorted(atom.neighbors(mol)) for atom in mol.atoms]
    rings: list[list[int]] = []

    def dfs_find_cycles(start: int, current: int, path: list[int], on_path: set[int]) -> None:
        for neighbor in adj[current]:
            if neighbor == start:
                if len(path) >= 3 and path[1] < path[-1]:
                    rings.append(list(path))
            elif neighbor > start and neighbor not in on_path and len(path) < max_size:
                on_path.add(neighbor)
                path.append(neighbor)
                dfs_find_cycles(start, neighbor, path, on_path)
                path.pop()
                on_path.remove(neighbor)

    for start in range(n):
        dfs_find_cycles(start, start, [start], {start})

    rings.sort(key=lambda ring: (len(ring), ring))
    logger.debug("Found %d rings of size <= %d", len(rings), max_size)
    return rings
