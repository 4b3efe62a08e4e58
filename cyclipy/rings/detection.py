"""
Ring atom and ring bond detection.

Ring membership of atoms and bonds is computed in linear time from a
breadth-first spanning forest. Every bond that is not part of the
forest closes exactly one cycle with the forest paths above its two
ends; walking those paths upward marks all atoms and bonds on it.

The result is returned as a RingAnnotation side table. Atoms and bonds
of the molecule are never modified, so stale flags cannot leak from one
perception run into the next.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cyclipy.types import Molecule

logger = logging.getLogger(__name__)


@dataclass
class RingAnnotation:
    """Per-run ring membership annotations for one molecule.

    Attributes:
        depth: Breadth-first depth of each atom in its spanning tree.
        parent: Spanning tree parent of each atom (-1 for tree roots).
        parent_bond: Bond joining each atom to its parent (-1 for roots).
        ring_atoms: Indices of atoms lying on at least one cycle.
        ring_bonds: Indices of bonds lying on at least one cycle.
    """

    depth: list[int | None]
    parent: list[int]
    parent_bond: list[int]
    ring_atoms: set[int] = field(default_factory=set)
    ring_bonds: set[int] = field(default_factory=set)

    @classmethod
    def for_atoms(cls, num_atoms: int) -> "RingAnnotation":
        """Create an empty annotation for a molecule with num_atoms atoms."""
        return cls(
            depth=[None] * num_atoms,
            parent=[-1] * num_atoms,
            parent_bond=[-1] * num_atoms,
        )

    def is_in_cycle(self, atom_idx: int) -> bool:
        """Check whether an atom lies on some cycle."""
        return atom_idx in self.ring_atoms

    def is_ring_bond(self, bond_idx: int) -> bool:
        """Check whether a bond lies on some cycle."""
        return bond_idx in self.ring_bonds

    def _step_up(self, atom_idx: int) -> int:
        """Mark the tree bond above atom_idx and return its parent."""
        self.ring_bonds.add(self.parent_bond[atom_idx])
        parent = self.parent[atom_idx]
        self.ring_atoms.add(parent)
        return parent

    def mark_closure(self, atom1_idx: int, atom2_idx: int, bond_idx: int) -> None:
        """Mark the cycle closed by a non-tree bond.

        Args:
            atom1_idx: Atom the closure bond was reached from.
            atom2_idx: Already visited atom on the other end.
            bond_idx: The closure bond.
        """
        self.ring_atoms.add(atom1_idx)
        self.ring_atoms.add(atom2_idx)
        self.ring_bonds.add(bond_idx)

        a, b = atom1_idx, atom2_idx
        # Even cycle: the closure joins two adjacent levels, so the
        # deeper end is lifted first.
        while self.depth[a] > self.depth[b]:
            a = self._step_up(a)
        while self.depth[b] > self.depth[a]:
            b = self._step_up(b)

        # Odd cycle (or lifted even cycle): climb in lockstep
        while a != b:
            a = self._step_up(a)
            b = self._step_up(b)


def detect_ring_atoms(mol: "Molecule") -> RingAnnotation:
    """Detect which atoms and bonds lie on a cycle.

    Every connected component is spanned breadth-first from its lowest
    indexed atom. A bond leading to an already visited atom is a ring
    closure; the cycle it closes is marked by walking parent pointers up
    from both ends until they meet.

    Args:
        mol: Molecule to analyze.

    Returns:
        RingAnnotation holding depths, the spanning forest, and the ring
        atom and ring bond sets.

    Example:
        >>> mol = Molecule.from_edges(4, [(0, 1), (1, 2), (2, 0), (2, 3)])
        >>> sorted(detect_ring_atoms(mol).ring_atoms)
        [0, 1, 2]
    """
    annotation = RingAnnotation.for_atoms(mol.num_atoms)
    depth = annotation.depth
    visited_bonds = [False] * mol.num_bonds
    closures = 0

    for root in range(mol.num_atoms):
        if depth[root] is not None:
            continue
        depth[root] = 0
        queue: deque[int] = deque([root])

        while queue:
            atom_idx = queue.popleft()
            for bond_idx in mol.atoms[atom_idx].bond_indices:
                # skip the bond we came from
                if visited_bonds[bond_idx]:
                    continue
                visited_bonds[bond_idx] = True

                neighbor = mol.bonds[bond_idx].other_atom(atom_idx)
                if depth[neighbor] is None:
                    depth[neighbor] = depth[atom_idx] + 1
                    annotation.parent[neighbor] = atom_idx
                    annotation.parent_bond[neighbor] = bond_idx
                    queue.append(neighbor)
                else:
                    annotation.mark_closure(atom_idx, neighbor, bond_idx)
                    closures += 1

    logger.debug(
        "Ring detection: %d closures, %d ring atoms, %d ring bonds",
        closures, len(annotation.ring_atoms), len(annotation.ring_bonds),
    )
    return annotation


def get_ring_membership(mol: "Molecule") -> dict[int, int]:
    """Fast ring membership detection (is atom in any ring?).

    Note: This doesn't count HOW MANY rings an atom is in, just whether
    it's in at least one. For ring counts, use get_ring_info().

    Args:
        mol: Molecule to analyze.

    Returns:
        Dict mapping atom index to 1 (in ring) or 0 (not in ring).
    """
    ring_atoms = detect_ring_atoms(mol).ring_atoms
    return {i: (1 if i in ring_atoms else 0) for i in range(mol.num_atoms)}


def get_ring_bonds(mol: "Molecule") -> set[tuple[int, int]]:
    """Get all bonds that are part of a ring.

    Args:
        mol: Molecule to analyze.

    Returns:
        Set of (atom1_idx, atom2_idx) tuples for ring bonds,
        where atom1_idx < atom2_idx.

    Example:
        >>> mol = Molecule.from_edges(4, [(0, 1), (1, 2), (2, 0), (2, 3)])
        >>> sorted(get_ring_bonds(mol))
        [(0, 1), (0, 2), (1, 2)]
    """
    ring_bonds: set[tuple[int, int]] = set()
    for bond_idx in detect_ring_atoms(mol).ring_bonds:
        bond = mol.bonds[bond_idx]
        ring_bonds.add((min(bond.atom1_idx, bond.atom2_idx), max(bond.atom1_idx, bond.atom2_idx)))
    return ring_bonds
