"""
Selection of an SSSR from candidate rings.

Candidates are accepted greedily, smallest first. A candidate is
rejected when it contains a ring that was already accepted, or when
none of its atoms has spare ring capacity left: an atom with d bonds
can be part of at most d - 1 rings of an independent ring set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from cyclipy.types import Molecule


def is_candidate_in_set(
    candidate: Sequence[int],
    accepted: Sequence[Sequence[int]],
    valences: Sequence[int],
    ring_count: list[int],
    positional: bool = False,
) -> bool:
    """Check whether a candidate ring is already covered by a ring set.

    ``ring_count`` is a running per-atom usage counter shared by all
    calls of one selection; it is updated in place.

    Args:
        candidate: Candidate ring as atom indices.
        accepted: Rings accepted so far.
        valences: Bond count of each atom.
        ring_count: Running ring usage of each atom.
        positional: Count shared atoms by their position in the
            candidate instead of by atom index. This reproduces the
            counting of older implementations of the algorithm.

    Returns:
        True if the candidate is redundant, False if it is a new ring
        (in which case its atoms have been counted).
    """
    candidate_atoms = set(candidate)

    for ring in accepted:
        if len(candidate) >= len(ring) and candidate_atoms.issuperset(ring):
            return True

        ring_atoms = set(ring)
        for position, atom_idx in enumerate(candidate):
            if atom_idx in ring_atoms:
                ring_count[position if positional else atom_idx] += 1

    is_new_ring = any(
        ring_count[atom_idx] < valences[atom_idx] - 1 for atom_idx in candidate
    )
    if not is_new_ring:
        return True

    for atom_idx in candidate:
        ring_count[atom_idx] += 1
    return False


def verify_sssr(
    candidates: Sequence[Sequence[int]],
    nsssr: int,
    mol: "Molecule",
    positional: bool = False,
) -> list[list[int]]:
    """Select up to nsssr independent rings from candidates.

    Candidates are tried in the given order, so they should be sorted by
    ascending size.

    Args:
        candidates: Candidate rings as atom indices into mol.
        nsssr: Number of rings to select.
        mol: Molecule the candidates belong to.
        positional: See is_candidate_in_set().

    Returns:
        The accepted rings. Fewer than nsssr when the candidates do not
        span the cycle space; callers must check.

    Example:
        >>> mol = Molecule.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 2)])
        >>> verify_sssr([[0, 1, 2], [0, 2, 3], [0, 1, 2, 3]], 2, mol)
        [[0, 1, 2], [0, 2, 3]]
    """
    accepted: list[list[int]] = []
    valences = [len(atom.bond_indices) for atom in mol.atoms]
    ring_count = [0] * mol.num_atoms

    for ring in candidates:
        if not is_candidate_in_set(ring, accepted, valences, ring_count, positional):
            accepted.append(list(ring))
            if len(accepted) == nsssr:
                break

    return accepted
