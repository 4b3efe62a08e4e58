"""Tests for ring system extraction."""

from cyclipy import Molecule
from cyclipy.rings import detect_ring_atoms, extract_ring_systems, find_rings

from conftest import cycle_edges, mol_from_smiles


def _systems(mol):
    return extract_ring_systems(mol, detect_ring_atoms(mol))


class TestExtraction:
    """Test splitting molecules into ring systems."""

    def test_acyclic_has_no_systems(self, chain):
        """No ring atoms, no ring systems."""
        assert _systems(chain) == []

    def test_single_ring(self, benzene):
        """Benzene is one ring system with one ring."""
        systems = _systems(benzene)
        assert len(systems) == 1
        system = systems[0]
        assert system.molecule.num_atoms == 6
        assert system.molecule.num_bonds == 6
        assert system.nsssr == 1
        assert sorted(system.atom_map) == list(range(6))

    def test_substituents_are_dropped(self):
        """Ethylcyclopentane keeps only the ring atoms."""
        mol = mol_from_smiles("CCC1CCCC1")
        systems = _systems(mol)
        assert len(systems) == 1
        assert sorted(systems[0].atom_map) == [2, 3, 4, 5, 6]
        assert systems[0].molecule.num_bonds == 5

    def test_fused_rings_form_one_system(self, naphthalene):
        """Naphthalene: 10 atoms, 11 bonds, two independent rings."""
        systems = _systems(naphthalene)
        assert len(systems) == 1
        assert systems[0].molecule.num_bonds == 11
        assert systems[0].nsssr == 2

    def test_spiro_forms_one_system(self, spiro):
        """Spiro rings share an atom and therefore a ring system."""
        systems = _systems(spiro)
        assert len(systems) == 1
        assert systems[0].nsssr == 2

    def test_linked_rings_form_one_system(self):
        """Biphenyl: the link bond joins both rings into one system."""
        mol = mol_from_smiles("c1ccc(-c2ccccc2)cc1")
        systems = _systems(mol)
        assert len(systems) == 1
        assert systems[0].nsssr == 2
        assert systems[0].molecule.num_atoms == 12
        assert systems[0].molecule.num_bonds == 13
        link = mol.get_bond_between(3, 4)
        assert link.idx in systems[0].bond_map

    def test_linked_rings_keep_their_sizes(self):
        """The link bond lies on no ring of the combined system."""
        mol = mol_from_smiles("c1ccc(-c2ccccc2)cc1")
        rings = find_rings(mol)
        assert [ring.size for ring in rings] == [6, 6]
        link = mol.get_bond_between(3, 4)
        assert all(link.idx not in ring.bond_indices for ring in rings)

    def test_chain_linked_rings_stay_apart(self):
        """Rings joined through non-ring atoms are separate systems."""
        mol = mol_from_smiles("C1CCCC1CC1CCCC1")
        systems = _systems(mol)
        assert [s.nsssr for s in systems] == [1, 1]

    def test_disconnected_fragments(self):
        """Each ring fragment becomes its own system."""
        edges = cycle_edges(3) + [(2, 3)] + cycle_edges(4, offset=4)
        mol = Molecule.from_edges(8, edges)
        systems = _systems(mol)
        assert [sorted(s.atom_map) for s in systems] == [[0, 1, 2], [4, 5, 6, 7]]


class TestIndexing:
    """Test the local indices and maps back to the molecule."""

    def test_dense_local_indices(self):
        """Local atoms and bonds are indexed from zero."""
        mol = mol_from_smiles("CCC1CCC2CCCCC2C1")
        for system in _systems(mol):
            assert [a.idx for a in system.molecule.atoms] == list(range(system.molecule.num_atoms))
            assert [b.idx for b in system.molecule.bonds] == list(range(system.molecule.num_bonds))

    def test_maps_point_back_to_original(self):
        """Every local bond maps to the original bond between mapped atoms."""
        mol = mol_from_smiles("c1ccc2c(c1)CC1CCCCC1C2")
        for system in _systems(mol):
            for local_atom, original_atom in enumerate(system.atom_map):
                assert system.atom_lookup[original_atom] == local_atom
            for bond in system.molecule.bonds:
                original = mol.bonds[system.bond_map[bond.idx]]
                assert system.atom_map[bond.atom1_idx] in original
                assert system.atom_map[bond.atom2_idx] in original

    def test_to_original(self, disconnected):
        """Local rings translate back through the atom map."""
        system = _systems(disconnected)[0]
        assert system.atom_map[0] == 3
        assert system.to_original([0, 1, 2]) == [system.atom_map[i] for i in (0, 1, 2)]

    def test_original_molecule_untouched(self, naphthalene):
        """Extraction does not modify the input molecule."""
        before = [list(a.bond_indices) for a in naphthalene.atoms]
        _systems(naphthalene)
        assert [a.bond_indices for a in naphthalene.atoms] == before


class TestPartition:
    """Ring systems partition the ring atoms."""

    def test_disjoint_and_complete(self, ring_smiles):
        """Systems are pairwise disjoint and cover all ring atoms."""
        for smiles in ring_smiles:
            mol = mol_from_smiles(smiles)
            annotation = detect_ring_atoms(mol)
            systems = extract_ring_systems(mol, annotation)

            seen: set[int] = set()
            for system in systems:
                atoms = set(system.atom_map)
                assert not atoms & seen, smiles
                seen |= atoms
            assert seen == annotation.ring_atoms, smiles

    def test_system_order_follows_lowest_atom(self):
        """Systems are discovered in ascending lowest atom index."""
        mol = mol_from_smiles("C1CC1CCc1ccccc1CCC1CCCC1")
        systems = _systems(mol)
        lowest = [min(s.atom_map) for s in systems]
        assert lowest == sorted(lowest)
        assert len(systems) == 3

    def test_cyclomatic_numbers_add_up(self, ring_smiles):
        """Per-system ring counts sum to the molecule's ring count."""
        for smiles in ring_smiles:
            mol = mol_from_smiles(smiles)
            expected = mol.num_bonds - mol.num_atoms + mol.fragment_count
            assert sum(s.nsssr for s in _systems(mol)) == expected, smiles
