"""
Exact SSSR computation.

The Smallest Set of Smallest Rings is a minimum cycle basis of the
molecular graph. Candidate cycles are taken from Horton's construction
(the shortest paths from an atom to both ends of a bond, closed by that
bond), sorted by size and accepted greedily while they stay linearly
independent over GF(2).

Cycles are represented as bond bit sets stored in plain Python ints,
so addition in the cycle space is XOR.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from cyclipy.types import Molecule

logger = logging.getLogger(__name__)


def count_independent_rings(mol: "Molecule") -> int:
    """Cyclomatic number of a molecule: bonds - atoms + fragments.

    Example:
        >>> mol = Molecule.from_edges(3, [(0, 1), (1, 2), (2, 0)])
        >>> count_independent_rings(mol)
        1
    """
    return mol.num_bonds - mol.num_atoms + mol.fragment_count


def cycle_bond_mask(mol: "Molecule", ring: Sequence[int]) -> int:
    """Encode a ring as a bit set of its bond indices.

    Args:
        mol: Molecule the ring belongs to.
        ring: Atom indices in cyclic order.

    Returns:
        Int with bit ``bond.idx`` set for every ring bond.

    Raises:
        ValueError: If two consecutive ring atoms are not bonded.
    """
    mask = 0
    for i, atom_idx in enumerate(ring):
        next_idx = ring[(i + 1) % len(ring)]
        bond = mol.get_bond_between(atom_idx, next_idx)
        if bond is None:
            raise ValueError(f"Atoms {atom_idx} and {next_idx} are not bonded")
        mask |= 1 << bond.idx
    return mask


def _reduce(mask: int, basis: dict[int, int]) -> int:
    """Reduce a cycle vector against an echelon basis keyed by pivot bit."""
    while mask:
        pivot = mask.bit_length() - 1
        if pivot not in basis:
            return mask
        mask ^= basis[pivot]
    return 0


def _add_to_basis(mask: int, basis: dict[int, int]) -> bool:
    """Add a vector to the basis if it is independent of it."""
    reduced = _reduce(mask, basis)
    if not reduced:
        return False
    basis[reduced.bit_length() - 1] = reduced
    return True


def is_independent_set(mol: "Molecule", rings: Iterable[Sequence[int]]) -> bool:
    """Check whether rings are linearly independent in the cycle space.

    Args:
        mol: Molecule the rings belong to.
        rings: Rings as atom indices in cyclic order.

    Returns:
        True if no ring is the XOR sum of other rings in the set.
    """
    basis: dict[int, int] = {}
    return all(_add_to_basis(cycle_bond_mask(mol, ring), basis) for ring in rings)


def _shortest_path_tree(mol: "Molecule", root: int) -> tuple[list[int], list[int]]:
    """Breadth-first distances and parents from root (-1 if unreachable)."""
    dist = [-1] * mol.num_atoms
    parent = [-1] * mol.num_atoms
    dist[root] = 0
    queue: deque[int] = deque([root])
    while queue:
        atom_idx = queue.popleft()
        for neighbor in mol.atoms[atom_idx].neighbors(mol):
            if dist[neighbor] < 0:
                dist[neighbor] = dist[atom_idx] + 1
                parent[neighbor] = atom_idx
                queue.append(neighbor)
    return dist, parent


def _path_to_root(parent: list[int], atom_idx: int) -> list[int]:
    path = [atom_idx]
    while parent[path[-1]] >= 0:
        path.append(parent[path[-1]])
    return path


def horton_candidates(mol: "Molecule") -> list[tuple[int, list[int]]]:
    """Generate Horton candidate cycles.

    For every root atom and every bond (x, y) not in the root's
    shortest-path tree, the cycle root -> x, x - y, y -> root is a
    candidate when the two paths only meet at the root.

    Args:
        mol: Molecule to analyze.

    Returns:
        Unique candidates as (bond mask, atom ring) pairs, sorted by
        ring size.
    """
    seen: set[int] = set()
    candidates: list[tuple[int, list[int]]] = []

    for root in range(mol.num_atoms):
        dist, parent = _shortest_path_tree(mol, root)
        for bond in mol.bonds:
            x, y = bond.atom1_idx, bond.atom2_idx
            if dist[x] < 0 or parent[x] == y or parent[y] == x:
                continue

            path_x = _path_to_root(parent, x)
            path_y = _path_to_root(parent, y)
            if not set(path_x[:-1]).isdisjoint(path_y[:-1]):
                continue

            ring = path_x[::-1] + path_y[:-1]
            mask = cycle_bond_mask(mol, ring)
            if mask in seen:
                continue
            seen.add(mask)
            candidates.append((mask, ring))

    candidates.sort(key=lambda item: len(item[1]))
    return candidates


def find_exact_sssr(mol: "Molecule") -> list[list[int]]:
    """Find the Smallest Set of Smallest Rings for any ring size.

    Args:
        mol: Molecule to analyze.

    Returns:
        Exactly bonds - atoms + fragments rings, each as atom indices in
        cyclic order, sorted by ascending size.

    Example:
        >>> ring = [(i, (i + 1) % 12) for i in range(12)]
        >>> find_exact_sssr(Molecule.from_edges(12, ring))
        [[0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]]
    """
    nsssr = count_independent_rings(mol)
    if nsssr <= 0:
        return []

    candidates = horton_candidates(mol)
    logger.debug("Exact SSSR: %d Horton candidates for %d rings", len(candidates), nsssr)

    basis: dict[int, int] = {}
    sssr: list[list[int]] = []
    for mask, ring in candidates:
        if _add_to_basis(mask, basis):
            sssr.append(ring)
            if len(sssr) == nsssr:
                break

    return sssr
