"""Test configuration and fixtures for cyclipy tests."""

import pytest

# RDKit is used to build test molecules from SMILES and as SSSR reference
from rdkit import Chem

from cyclipy import Molecule


def mol_from_smiles(smiles: str) -> Molecule:
    """Build a cyclipy molecule from SMILES through RDKit.

    Args:
        smiles: Input SMILES string.

    Returns:
        Molecule with the heavy atoms and bonds of the RDKit molecule,
        indexed the same way.
    """
    rdmol = Chem.MolFromSmiles(smiles)
    if rdmol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")

    mol = Molecule(name=smiles)
    for atom in rdmol.GetAtoms():
        mol.add_atom(atom.GetSymbol())
    for bond in rdmol.GetBonds():
        order = 4 if bond.GetIsAromatic() else int(bond.GetBondTypeAsDouble())
        mol.add_bond(bond.GetBeginAtomIdx(), bond.GetEndAtomIdx(), order=order)
    return mol


def rdkit_sssr_sizes(smiles: str) -> list[int]:
    """Get the sorted ring sizes of RDKit's SSSR for comparison."""
    rdmol = Chem.MolFromSmiles(smiles)
    return sorted(len(ring) for ring in Chem.GetSSSR(rdmol))


def rdkit_ring_atoms(smiles: str) -> set[int]:
    """Get the atoms RDKit considers to be in a ring."""
    rdmol = Chem.MolFromSmiles(smiles)
    return {atom.GetIdx() for atom in rdmol.GetAtoms() if atom.IsInRing()}


def brute_force_ring_atoms(mol: Molecule) -> set[int]:
    """Ground truth ring atoms: ends of bonds that are not bridges.

    A bond lies on a cycle exactly when its two atoms stay connected
    after the bond is removed.
    """
    ring_atoms: set[int] = set()
    for removed in mol.bonds:
        seen = {removed.atom1_idx}
        stack = [removed.atom1_idx]
        while stack:
            atom_idx = stack.pop()
            for bond_idx in mol.atoms[atom_idx].bond_indices:
                if bond_idx == removed.idx:
                    continue
                neighbor = mol.bonds[bond_idx].other_atom(atom_idx)
                if neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)
        if removed.atom2_idx in seen:
            ring_atoms.update((removed.atom1_idx, removed.atom2_idx))
    return ring_atoms


def assert_simple_cycle(ring, mol: Molecule) -> None:
    """Check that a Ring is a simple cycle of mol."""
    atoms = ring.atom_indices
    assert len(atoms) >= 3
    assert len(set(atoms)) == len(atoms)
    assert len(ring.atoms) == len(ring.bonds)
    for i, atom_idx in enumerate(atoms):
        next_idx = atoms[(i + 1) % len(atoms)]
        bond = ring.bonds[i]
        assert bond is mol.bonds[bond.idx]
        assert atom_idx in bond and next_idx in bond


def cycle_edges(size: int, offset: int = 0) -> list[tuple[int, int]]:
    """Edges of a ring of the given size starting at atom offset."""
    return [(offset + i, offset + (i + 1) % size) for i in range(size)]


@pytest.fixture
def chain() -> Molecule:
    """Linear chain of 5 atoms."""
    return Molecule.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])


@pytest.fixture
def benzene() -> Molecule:
    """Single 6-membered ring."""
    return Molecule.from_edges(6, cycle_edges(6))


@pytest.fixture
def naphthalene() -> Molecule:
    """Two 6-membered rings fused on the 4-9 bond."""
    edges = cycle_edges(10) + [(4, 9)]
    return Molecule.from_edges(10, edges)


@pytest.fixture
def spiro() -> Molecule:
    """Spiro[4.4]nonane skeleton: two 5-rings sharing atom 0."""
    edges = cycle_edges(5) + [(0, 5), (5, 6), (6, 7), (7, 8), (8, 0)]
    return Molecule.from_edges(9, edges)


@pytest.fixture
def cubane() -> Molecule:
    """Cubane skeleton: 8 atoms, 12 bonds, six 4-rings."""
    edges = [
        (0, 1), (0, 3), (0, 5), (1, 2), (1, 6), (2, 7),
        (2, 3), (3, 4), (4, 5), (4, 7), (5, 6), (6, 7),
    ]
    return Molecule.from_edges(8, edges)


@pytest.fixture
def disconnected() -> Molecule:
    """Acyclic 3-atom fragment plus a separate 5-ring."""
    edges = [(0, 1), (1, 2)] + cycle_edges(5, offset=3)
    return Molecule.from_edges(8, edges)


@pytest.fixture
def ring_smiles() -> list[str]:
    """SMILES covering common ring topologies."""
    return [
        "C1CC1",
        "C1CCC1",
        "C1CCCC1",
        "c1ccccc1",
        "c1ccc2ccccc2c1",
        "c1ccc2cc3ccccc3cc2c1",
        "c1ccc2c(c1)ccc1ccccc12",
        "C1CC2CCC1C2",
        "C1CC2(C1)CCC2",
        "c1ccc(-c2ccccc2)cc1",
        "c1ccc2[nH]ccc2c1",
        "Cn1cnc2c1c(=O)n(C)c(=O)n2C",
        "CC12CCC3C(CCC4CC(O)CCC34C)C1CCC2",
        "C1CCCCCCCCCCC1",
        "C1CCC2(CC1)CCCCC2",
        "c1ccccc1.C1CCOC1",
    ]
