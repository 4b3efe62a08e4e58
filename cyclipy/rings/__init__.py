"""Ring detection and SSSR perception."""

from cyclipy.rings.detection import (
    RingAnnotation,
    detect_ring_atoms,
    get_ring_membership,
    get_ring_bonds,
)
from cyclipy.rings.systems import RingSystem, extract_ring_systems
from cyclipy.rings.acceptor import is_candidate_in_set, verify_sssr
from cyclipy.rings.small_rings import DEFAULT_MAX_RING_SIZE, find_small_rings
from cyclipy.rings.sssr import (
    count_independent_rings,
    cycle_bond_mask,
    find_exact_sssr,
    horton_candidates,
    is_independent_set,
)
from cyclipy.rings.finder import (
    RingFinder,
    create_ring,
    create_ring_systems,
    find_rings,
    find_sssr,
    find_ring_families,
    get_ring_info,
)

__all__ = [
    "RingAnnotation",
    "detect_ring_atoms",
    "get_ring_membership",
    "get_ring_bonds",
    "RingSystem",
    "extract_ring_systems",
    "is_candidate_in_set",
    "verify_sssr",
    "DEFAULT_MAX_RING_SIZE",
    "find_small_rings",
    "count_independent_rings",
    "cycle_bond_mask",
    "find_exact_sssr",
    "horton_candidates",
    "is_independent_set",
    "RingFinder",
    "create_ring",
    "create_ring_systems",
    "find_rings",
    "find_sssr",
    "find_ring_families",
    "get_ring_info",
]
