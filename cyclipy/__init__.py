"""
Cyclipy - Pure Python ring perception for molecular graphs.

A zero-dependency library for finding the Smallest Set of Smallest
Rings (SSSR) of a molecule.

    >>> from cyclipy import Molecule, find_rings
    >>> mol = Molecule.from_edges(6, [(i, (i + 1) % 6) for i in range(6)])
    >>> [ring.size for ring in find_rings(mol)]
    [6]

Submodules:
    cyclipy.rings - Ring atom detection, ring systems, SSSR
"""

__version__ = "0.1.0"

# Core types
from cyclipy.types import Atom, Bond, Molecule, Ring

# Exceptions
from cyclipy.exceptions import ChemError, RingPerceptionError

# Ring perception
from cyclipy.rings import RingFinder, find_rings, find_sssr, get_ring_info

# Submodules
from cyclipy import rings

__all__ = [
    # Types
    "Atom", "Bond", "Molecule", "Ring",
    # Exceptions
    "ChemError", "RingPerceptionError",
    # Ring perception
    "RingFinder", "find_rings", "find_sssr", "get_ring_info",
    # Submodules
    "rings",
]
