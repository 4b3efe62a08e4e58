"""
Core molecular graph types.

This module defines the data structures ring perception works on:
Atom, Bond and Molecule for the graph itself, and Ring for the cycles
found in it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from typing import Self


@dataclass(slots=True)
class Bond:
    """Represents a bond between two atoms.

    Attributes:
        idx: Unique index of this bond in the molecule.
        atom1_idx: Index of the first atom.
        atom2_idx: Index of the second atom.
        order: Bond order (1=single, 2=double, 3=triple, 4=aromatic).
    """

    idx: int
    atom1_idx: int
    atom2_idx: int
    order: int = 1

    def other_atom(self, atom_idx: int) -> int:
        """Get the index of the atom on the other end of this bond.

        Args:
            atom_idx: Index of one atom in the bond.

        Returns:
            Index of the other atom.

        Raises:
            ValueError: If atom_idx is not part of this bond.
        """
        if atom_idx == self.atom1_idx:
            return self.atom2_idx
        if atom_idx == self.atom2_idx:
            return self.atom1_idx
        raise ValueError(f"Atom {atom_idx} not in bond {self.idx}")

    def __contains__(self, atom_idx: int) -> bool:
        """Check if atom is part of this bond."""
        return atom_idx in (self.atom1_idx, self.atom2_idx)


@dataclass(slots=True)
class Atom:
    """Represents an atom in a molecule.

    Attributes:
        idx: Unique index of this atom in the molecule.
        symbol: Element symbol (e.g., "C", "N"). Only used as a label.
        bond_indices: Indices of bonds connected to this atom.
    """

    idx: int
    symbol: str = "C"
    bond_indices: list[int] = field(default_factory=list)

    def degree(self, mol: "Molecule") -> int:
        """Get the number of bonds to this atom."""
        return len(self.bond_indices)

    def neighbors(self, mol: "Molecule") -> Iterator[int]:
        """Iterate over indices of neighboring atoms.

        Args:
            mol: Parent molecule.

        Yields:
            Indices of atoms bonded to this atom.
        """
        for bond_idx in self.bond_indices:
            bond = mol.bonds[bond_idx]
            yield bond.other_atom(self.idx)

    def get_bonds(self, mol: "Molecule") -> Iterator[Bond]:
        """Iterate over bonds connected to this atom."""
        for bond_idx in self.bond_indices:
            yield mol.bonds[bond_idx]


@dataclass
class Molecule:
    """Represents a molecular graph.

    A molecule consists of atoms connected by bonds. It may hold several
    disconnected fragments.

    Attributes:
        atoms: List of atoms in the molecule.
        bonds: List of bonds in the molecule.
        name: Optional molecule name/identifier.

    Example:
        >>> mol = Molecule()
        >>> c1 = mol.add_atom("C")
        >>> c2 = mol.add_atom("C")
        >>> mol.add_bond(c1, c2)
        0
        >>> len(mol)
        2
    """

    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    name: str | None = None

    def __len__(self) -> int:
        """Return number of atoms."""
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms."""
        return iter(self.atoms)

    def __getitem__(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]

    @classmethod
    def from_edges(
        cls,
        num_atoms: int,
        edges: Iterable[tuple[int, int]],
        name: str | None = None,
    ) -> "Self":
        """Build an all-carbon molecule from an edge list.

        Args:
            num_atoms: Number of atoms to create.
            edges: Pairs of atom indices to bond.
            name: Optional molecule name.

        Returns:
            New molecule.

        Example:
            >>> mol = Molecule.from_edges(3, [(0, 1), (1, 2), (2, 0)])
            >>> mol.num_bonds
            3
        """
        mol = cls(name=name)
        for _ in range(num_atoms):
            mol.add_atom("C")
        for atom1_idx, atom2_idx in edges:
            mol.add_bond(atom1_idx, atom2_idx)
        return mol

    def add_atom(self, symbol: str = "C") -> int:
        """Add an atom to the molecule.

        Args:
            symbol: Element symbol.

        Returns:
            Index of the newly added atom.
        """
        idx = len(self.atoms)
        self.atoms.append(Atom(idx=idx, symbol=symbol))
        return idx

    def add_bond(self, atom1_idx: int, atom2_idx: int, *, order: int = 1) -> int:
        """Add a bond between two atoms.

        Args:
            atom1_idx: Index of the first atom.
            atom2_idx: Index of the second atom.
            order: Bond order.

        Returns:
            Index of the newly added bond.

        Raises:
            IndexError: If atom indices are out of bounds.
            ValueError: If both indices name the same atom or the atoms
                are already bonded.
        """
        n = len(self.atoms)
        if not (0 <= atom1_idx < n and 0 <= atom2_idx < n):
            raise IndexError(f"Atom index out of bounds: {atom1_idx}, {atom2_idx}")
        if atom1_idx == atom2_idx:
            raise ValueError(f"Cannot bond atom {atom1_idx} to itself")
        if self.get_bond_between(atom1_idx, atom2_idx) is not None:
            raise ValueError(f"Atoms {atom1_idx} and {atom2_idx} are already bonded")

        idx = len(self.bonds)
        bond = Bond(idx=idx, atom1_idx=atom1_idx, atom2_idx=atom2_idx, order=order)
        self.bonds.append(bond)
        self.atoms[atom1_idx].bond_indices.append(idx)
        self.atoms[atom2_idx].bond_indices.append(idx)
        return idx

    def get_atom(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]

    def get_bond_between(self, atom1_idx: int, atom2_idx: int) -> Bond | None:
        """Find the bond between two atoms.

        Args:
            atom1_idx: Index of the first atom.
            atom2_idx: Index of the second atom.

        Returns:
            Bond object if found, None otherwise.
        """
        for bond_idx in self.atoms[atom1_idx].bond_indices:
            bond = self.bonds[bond_idx]
            if atom2_idx in bond:
                return bond
        return None

    def connected_components(self) -> list[list[int]]:
        """Find connected components in the molecule.

        Returns:
            List of components, each being a sorted list of atom indices.
        """
        visited: set[int] = set()
        components: list[list[int]] = []

        for start in range(len(self.atoms)):
            if start in visited:
                continue

            component: list[int] = []
            stack = [start]
            visited.add(start)

            while stack:
                atom_idx = stack.pop()
                component.append(atom_idx)

                for neighbor in self.atoms[atom_idx].neighbors(self):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)

            components.append(sorted(component))

        return components

    def copy(self) -> "Self":
        """Create a deep copy of the molecule.

        Returns:
            New Molecule instance with copied data.
        """
        mol = Molecule(name=self.name)
        for atom in self.atoms:
            mol.atoms.append(Atom(
                idx=atom.idx,
                symbol=atom.symbol,
                bond_indices=list(atom.bond_indices),
            ))
        for bond in self.bonds:
            mol.bonds.append(Bond(
                idx=bond.idx,
                atom1_idx=bond.atom1_idx,
                atom2_idx=bond.atom2_idx,
                order=bond.order,
            ))
        return mol

    @property
    def num_atoms(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        """Number of bonds in the molecule."""
        return len(self.bonds)

    @property
    def fragment_count(self) -> int:
        """Number of connected components (fragments)."""
        return len(self.connected_components())

    @property
    def is_connected(self) -> bool:
        """Check if molecule is a single connected component."""
        return self.fragment_count <= 1


@dataclass(frozen=True, slots=True)
class Ring:
    """A ring found in a molecule.

    The ring shares its atoms and bonds with the molecule it was found
    in. ``bonds[i]`` joins ``atoms[i]`` and ``atoms[i + 1]``; the last
    bond closes the ring from the last atom back to the first.

    Attributes:
        atoms: Ring atoms in cyclic order.
        bonds: Ring bonds in the same cyclic order.
    """

    atoms: tuple[Atom, ...]
    bonds: tuple[Bond, ...]

    def __post_init__(self) -> None:
        if len(self.atoms) != len(self.bonds):
            raise ValueError(
                f"Ring has {len(self.atoms)} atoms but {len(self.bonds)} bonds"
            )

    def __len__(self) -> int:
        return len(self.atoms)

    def __contains__(self, atom_idx: int) -> bool:
        """Check if an atom index is part of this ring."""
        return any(atom.idx == atom_idx for atom in self.atoms)

    @property
    def size(self) -> int:
        """Number of atoms in the ring."""
        return len(self.atoms)

    @property
    def atom_indices(self) -> list[int]:
        """Atom indices in ring order."""
        return [atom.idx for atom in self.atoms]

    @property
    def bond_indices(self) -> list[int]:
        """Bond indices in ring order."""
        return [bond.idx for bond in self.bonds]

    def shares_bond_with(self, other: "Ring") -> bool:
        """Check whether two rings have at least one bond in common."""
        return not set(self.bond_indices).isdisjoint(other.bond_indices)
