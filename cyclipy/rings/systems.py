"""
Ring system extraction.

A ring system is a maximal connected set of ring atoms. Each one is
copied, with every bond between its atoms, into a small, densely
indexed molecule so that ring enumeration cost depends on the size of
the ring system rather than on the size of the whole molecule.

Rings linked by a single bond (biphenyl) form one ring system; the
link bond is copied along but lies on none of its rings.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from cyclipy.types import Molecule

if TYPE_CHECKING:
    from cyclipy.rings.detection import RingAnnotation

logger = logging.getLogger(__name__)


@dataclass
class RingSystem:
    """A ring system copied out of a larger molecule.

    Attributes:
        molecule: The ring system as its own molecule, indexed from 0.
        atom_map: Original atom index for each local atom index.
        bond_map: Original bond index for each local bond index.
        atom_lookup: Local atom index for each original atom index.
    """

    molecule: Molecule = field(default_factory=Molecule)
    atom_map: list[int] = field(default_factory=list)
    bond_map: list[int] = field(default_factory=list)
    atom_lookup: dict[int, int] = field(default_factory=dict)

    @property
    def nsssr(self) -> int:
        """Number of independent rings (a ring system is connected)."""
        return self.molecule.num_bonds - self.molecule.num_atoms + 1

    def add_atom(self, original: Molecule, atom_idx: int) -> int:
        """Copy an original atom into the ring system."""
        local_idx = self.molecule.add_atom(original.atoms[atom_idx].symbol)
        self.atom_map.append(atom_idx)
        self.atom_lookup[atom_idx] = local_idx
        return local_idx

    def add_bond(self, original: Molecule, bond_idx: int) -> int:
        """Copy an original bond whose atoms are already in the system."""
        bond = original.bonds[bond_idx]
        local_idx = self.molecule.add_bond(
            self.atom_lookup[bond.atom1_idx],
            self.atom_lookup[bond.atom2_idx],
            order=bond.order,
        )
        self.bond_map.append(bond_idx)
        return local_idx

    def to_original(self, ring: Sequence[int]) -> list[int]:
        """Translate a ring of local atom indices to original indices."""
        return [self.atom_map[atom_idx] for atom_idx in ring]


def extract_ring_systems(
    mol: Molecule,
    annotation: "RingAnnotation",
) -> list[RingSystem]:
    """Partition the ring atoms of a molecule into ring systems.

    Atoms are scanned in index order. Each ring atom not yet assigned
    seeds a breadth-first growth over bonds to other ring atoms. A newly
    reached atom is copied together with the bond it was reached
    through; a bond reaching an atom already copied is copied as a
    closure bond.

    Args:
        mol: Molecule to analyze.
        annotation: Ring membership from detect_ring_atoms().

    Returns:
        Ring systems in order of their lowest atom index. They are
        pairwise disjoint and together hold every ring atom.
    """
    systems: list[RingSystem] = []
    assigned = [False] * mol.num_atoms
    visited_bonds = [False] * mol.num_bonds

    for start in range(mol.num_atoms):
        if assigned[start] or not annotation.is_in_cycle(start):
            continue

        system = RingSystem()
        system.add_atom(mol, start)
        assigned[start] = True
        queue: deque[int] = deque([start])

        while queue:
            atom_idx = queue.popleft()
            for bond_idx in mol.atoms[atom_idx].bond_indices:
                if visited_bonds[bond_idx]:
                    continue
                neighbor = mol.bonds[bond_idx].other_atom(atom_idx)
                if not annotation.is_in_cycle(neighbor):
                    continue
                visited_bonds[bond_idx] = True

                if not assigned[neighbor]:
                    assigned[neighbor] = True
                    system.add_atom(mol, neighbor)
                    queue.append(neighbor)
                system.add_bond(mol, bond_idx)

        logger.debug(
            "Ring system %d: %d atoms, %d bonds, nsssr=%d",
            len(systems), system.molecule.num_atoms,
            system.molecule.num_bonds, system.nsssr,
        )
        systems.append(system)

    return systems
