"""
Ring perception (SSSR).

The RingFinder computes the Smallest Set of Smallest Rings of a
molecule in four steps:

1. Count the independent rings (bonds - atoms + fragments). Acyclic
   molecules stop here.
2. Mark ring atoms and ring bonds in linear time.
3. Split the ring atoms into ring systems and copy each into its own
   small molecule.
4. Per ring system, enumerate all rings of up to six atoms and select
   the SSSR from them. Ring systems whose SSSR needs larger rings fall
   back to an exact minimum cycle basis search.

The rings are mapped back to the original molecule and returned as Ring
objects sharing the molecule's atoms and bonds.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from cyclipy.exceptions import RingPerceptionError
from cyclipy.rings.acceptor import verify_sssr
from cyclipy.rings.detection import RingAnnotation, detect_ring_atoms
from cyclipy.rings.small_rings import DEFAULT_MAX_RING_SIZE, find_small_rings
from cyclipy.rings.sssr import find_exact_sssr, is_independent_set
from cyclipy.rings.systems import RingSystem, extract_ring_systems
from cyclipy.types import Ring

if TYPE_CHECKING:
    from cyclipy.types import Molecule

logger = logging.getLogger(__name__)


def create_ring(atom_indices: Sequence[int], mol: "Molecule") -> Ring:
    """Build a Ring from atom indices in cyclic order.

    Args:
        atom_indices: Ring atoms in cyclic order.
        mol: Molecule the atoms belong to.

    Returns:
        Ring holding the molecule's own atoms and the bonds joining
        consecutive atoms, closing bond last.

    Raises:
        ValueError: If two consecutive atoms are not bonded.
    """
    atoms = tuple(mol.atoms[atom_idx] for atom_idx in atom_indices)
    bonds = []
    for i, atom in enumerate(atoms):
        # the last pair wraps around to close the ring
        next_atom = atoms[(i + 1) % len(atoms)]
        bond = mol.get_bond_between(atom.idx, next_atom.idx)
        if bond is None:
            raise ValueError(f"Atoms {atom.idx} and {next_atom.idx} are not bonded")
        bonds.append(bond)
    return Ring(atoms, tuple(bonds))


class RingFinder:
    """SSSR ring perception.

    Rings of every ring system are first selected from a bounded set of
    small candidate rings. Only when those do not contain a full set of
    independent rings is the exact (and slower) search used.
    """

    def __init__(
        self,
        max_ring_size: int = DEFAULT_MAX_RING_SIZE,
        positional_ring_count: bool = False,
    ) -> None:
        """Initialize finder.

        Args:
            max_ring_size: Largest candidate ring size for the fast path.
            positional_ring_count: Use the positional ring usage
                counting of older implementations when selecting
                candidates (see is_candidate_in_set()).
        """
        self._max_ring_size = max_ring_size
        self._positional = positional_ring_count

    @property
    def max_ring_size(self) -> int:
        """Largest ring size enumerated before falling back to exact search."""
        return self._max_ring_size

    def find_rings(self, mol: "Molecule") -> list[Ring]:
        """Find the SSSR of a molecule.

        Args:
            mol: Molecule to analyze. It is not modified.

        Returns:
            bonds - atoms + fragments rings. Rings are grouped by ring
            system, in order of each system's lowest atom index.
        """
        nsssr = mol.num_bonds - mol.num_atoms + mol.fragment_count
        if not nsssr:
            return []

        annotation = detect_ring_atoms(mol)
        rings = self.create_ring_systems(mol, annotation)
        logger.debug("Found %d rings (expected %d)", len(rings), nsssr)
        return rings

    def create_ring_systems(
        self,
        mol: "Molecule",
        annotation: RingAnnotation | None = None,
    ) -> list[Ring]:
        """Find the SSSR rings of every ring system of a molecule.

        Args:
            mol: Molecule to analyze.
            annotation: Ring membership from detect_ring_atoms(); computed
                if not given.

        Returns:
            Rings of all ring systems, mapped back to mol.

        Raises:
            RingPerceptionError: If a ring system yields fewer rings than
                its cyclomatic number, which a consistent graph never does.
        """
        if annotation is None:
            annotation = detect_ring_atoms(mol)

        rings: list[Ring] = []
        for system in extract_ring_systems(mol, annotation):
            for ring in self._find_system_rings(system):
                rings.append(create_ring(system.to_original(ring), mol))
        return rings

    def _find_system_rings(self, system: RingSystem) -> list[list[int]]:
        """Select the SSSR of one ring system, in local atom indices."""
        nsssr = system.nsssr
        ring_mol = system.molecule

        candidates = find_small_rings(ring_mol, self._max_ring_size)
        sssr: list[list[int]] = []
        if len(candidates) >= nsssr:
            sssr = verify_sssr(candidates, nsssr, ring_mol, self._positional)
            if len(sssr) == nsssr and not is_independent_set(ring_mol, sssr):
                logger.debug("Selected small rings are not independent")
                sssr = []

        if len(sssr) < nsssr:
            logger.debug(
                "Small rings cover %d of %d rings (%d candidates), using exact search",
                len(sssr), nsssr, len(candidates),
            )
            sssr = find_exact_sssr(ring_mol)

        if len(sssr) != nsssr:
            raise RingPerceptionError(
                "Inconsistent ring system", expected=nsssr, found=len(sssr)
            )
        return sssr


def find_rings(mol: "Molecule", finder: RingFinder | None = None) -> list[Ring]:
    """Find the Smallest Set of Smallest Rings (SSSR).

    The SSSR is a linearly independent basis of cycles where:
    - The number of rings equals the cyclomatic number (E - V + C)
    - Larger rings that can be expressed as combinations of smaller rings are excluded

    For example, naphthalene has cyclomatic number 2 (11 bonds - 10 atoms + 1),
    so its SSSR contains exactly 2 rings (the two 6-membered rings), not the
    10-membered envelope ring.

    Args:
        mol: Molecule to analyze.
        finder: RingFinder to use (default: RingFinder()).

    Returns:
        List of Ring objects.

    Example:
        >>> mol = Molecule.from_edges(6, [(i, (i + 1) % 6) for i in range(6)])
        >>> rings = find_rings(mol)
        >>> len(rings), rings[0].size
        (1, 6)
    """
    if finder is None:
        finder = RingFinder()
    return finder.find_rings(mol)


def create_ring_systems(
    mol: "Molecule",
    annotation: RingAnnotation | None = None,
) -> list[Ring]:
    """Find the SSSR rings ring system by ring system with default settings.

    Unlike find_rings() there is no acyclic shortcut; ring membership is
    taken from annotation when given.
    """
    return RingFinder().create_ring_systems(mol, annotation)


def find_sssr(mol: "Molecule") -> list[set[int]]:
    """Find the SSSR as plain atom index sets.

    Args:
        mol: Molecule to analyze.

    Returns:
        List of rings, each as a set of atom indices.
    """
    return [set(ring.atom_indices) for ring in find_rings(mol)]


def get_ring_info(mol: "Molecule") -> tuple[dict[int, int], dict[int, set[int]]]:
    """Get ring membership and sizes for each atom.

    This is useful for queries like "in ring", "in two rings" or "in a
    5-membered ring".

    Args:
        mol: Molecule to analyze.

    Returns:
        A tuple of (ring_count, ring_sizes) where:
        - ring_count: dict mapping atom index to number of SSSR rings it's in
        - ring_sizes: dict mapping atom index to set of ring sizes it's in
    """
    ring_count: dict[int, int] = {i: 0 for i in range(mol.num_atoms)}
    ring_sizes: dict[int, set[int]] = {i: set() for i in range(mol.num_atoms)}

    for ring in find_rings(mol):
        for atom_idx in ring.atom_indices:
            ring_count[atom_idx] += 1
            ring_sizes[atom_idx].add(ring.size)

    return ring_count, ring_sizes


def find_ring_families(rings: list[Ring]) -> list[list[Ring]]:
    """Group rings into fused families.

    Two rings are fused if they share at least one bond. Spiro rings
    (sharing a single atom) stay in separate families.

    Args:
        rings: Rings from find_rings().

    Returns:
        List of families, each a list of rings, in order of first ring.
    """
    if not rings:
        return []

    n = len(rings)
    parent = list(range(n))

    def find(x: int) -> int:
        if parent[x] != x:
            parent[x] = find(parent[x])
        return parent[x]

    def union(x: int, y: int) -> None:
        px, py = find(x), find(y)
        if px != py:
            parent[max(px, py)] = min(px, py)

    for i in range(n):
        for j in range(i + 1, n):
            if rings[i].shares_bond_with(rings[j]):
                union(i, j)

    families: dict[int, list[Ring]] = {}
    for i in range(n):
        families.setdefault(find(i), []).append(rings[i])

    return list(families.values())
