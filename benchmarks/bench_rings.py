#!/usr/bin/env python3
"""
Benchmark script comparing SSSR ring perception speed between RDKit and cyclipy.

Usage:
    python benchmarks/bench_rings.py [--extended]

Molecules are parsed with RDKit and converted to cyclipy molecules, so
RDKit must be installed.

Options:
    --extended    Run extended benchmark with multiple molecules and detailed metrics
"""

import sys
import os
import time
from dataclasses import dataclass
from typing import Optional

# Ensure local cyclipy is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Test molecules with varying ring topology
TEST_MOLECULES = {
    "acyclic": "CCCCCCCCCCCCCCCC(=O)O",
    "steroid": "CC12CCC3C(CCC4CC(O)CCC34C)C1CCC2",
    "drug_like": "Cc1ccc(cc1Nc2nccc(n2)c3cccnc3)NC(=O)c4ccc(cc4)CN5CCN(CC5)C",  # Imatinib
    "cage": "C12C3C4C1C5C2C3C45",  # Cubane
    "macrocycle": "O=C1CCCCCCCCCCCCCCCCCCCN1",
    "large_complex": "CCn1c2ccc3cc2c2cc(ccc21)C(=O)c1ccc(cc1)Cn1c[n+](c2ccccc21)Cc1ccc(cc1)C(=O)c1ccc2c(c1)c1cc(ccc1n2CC)C(=O)c1ccc(cc1)C[n+]1cn(c2ccccc21)Cc1ccc(cc1)C3=O",
}

# Default molecule for quick benchmark
LARGE_MOLECULE = TEST_MOLECULES["large_complex"]

ITERATIONS = 1000
EXTENDED_ITERATIONS = 500


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    smiles: str
    time_seconds: float
    iterations: int
    num_rings: int
    num_atoms: int
    num_bonds: int

    @property
    def time_per_call_ms(self) -> float:
        return (self.time_seconds / self.iterations) * 1000

    @property
    def time_per_atom_us(self) -> float:
        """Microseconds per atom per call."""
        return (self.time_seconds / self.iterations / self.num_atoms) * 1_000_000


def to_cyclipy(smiles: str):
    """Convert a SMILES string to a cyclipy molecule through RDKit."""
    from rdkit import Chem
    from cyclipy import Molecule

    rdmol = Chem.MolFromSmiles(smiles)
    if rdmol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")

    mol = Molecule(name=smiles)
    for atom in rdmol.GetAtoms():
        mol.add_atom(atom.GetSymbol())
    for bond in rdmol.GetBonds():
        mol.add_bond(bond.GetBeginAtomIdx(), bond.GetEndAtomIdx())
    return mol


def benchmark_rdkit(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark RDKit SSSR perception."""
    from rdkit import Chem

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")

    # Warmup
    _ = Chem.GetSSSR(mol)

    start = time.perf_counter()
    for _ in range(iterations):
        rings = Chem.GetSSSR(mol)
    end = time.perf_counter()

    return BenchmarkResult(
        smiles=smiles,
        time_seconds=end - start,
        iterations=iterations,
        num_rings=len(rings),
        num_atoms=mol.GetNumAtoms(),
        num_bonds=mol.GetNumBonds(),
    )


def benchmark_cyclipy(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark cyclipy SSSR perception."""
    from cyclipy import find_rings

    mol = to_cyclipy(smiles)

    # Warmup
    _ = find_rings(mol)

    start = time.perf_counter()
    for _ in range(iterations):
        rings = find_rings(mol)
    end = time.perf_counter()

    return BenchmarkResult(
        smiles=smiles,
        time_seconds=end - start,
        iterations=iterations,
        num_rings=len(rings),
        num_atoms=mol.num_atoms,
        num_bonds=mol.num_bonds,
    )


def run_single_benchmark():
    """Run basic single-molecule benchmark."""
    print("=" * 70)
    print("SSSR Benchmark: RDKit vs cyclipy")
    print("=" * 70)
    print(f"\nTest molecule ({len(LARGE_MOLECULE)} chars):")
    print(f"  {LARGE_MOLECULE[:60]}...")
    print(f"\nIterations: {ITERATIONS}")
    print("-" * 70)

    rdkit_result: Optional[BenchmarkResult] = None
    cyclipy_result: Optional[BenchmarkResult] = None

    print("\nRunning RDKit benchmark...", end=" ", flush=True)
    try:
        rdkit_result = benchmark_rdkit(LARGE_MOLECULE, ITERATIONS)
        print("done")
        print(f"  Time: {rdkit_result.time_seconds:.3f}s ({rdkit_result.time_per_call_ms:.3f}ms per call)")
        print(f"  Rings: {rdkit_result.num_rings}")
    except ImportError:
        print("SKIPPED (rdkit not installed)")
    except Exception as e:
        print(f"ERROR: {e}")

    print("\nRunning cyclipy benchmark...", end=" ", flush=True)
    try:
        cyclipy_result = benchmark_cyclipy(LARGE_MOLECULE, ITERATIONS)
        print("done")
        print(f"  Time: {cyclipy_result.time_seconds:.3f}s ({cyclipy_result.time_per_call_ms:.3f}ms per call)")
        print(f"  Rings: {cyclipy_result.num_rings}")
    except ImportError:
        print("SKIPPED (rdkit not installed)")
    except Exception as e:
        print(f"ERROR: {e}")

    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)

    if rdkit_result and cyclipy_result:
        ratio = cyclipy_result.time_seconds / rdkit_result.time_seconds
        if ratio < 1:
            print(f"cyclipy is {1/ratio:.2f}x FASTER than RDKit")
        else:
            print(f"cyclipy is {ratio:.2f}x SLOWER than RDKit")
    else:
        print("Could not compare (one or both libraries failed)")


def run_extended_benchmark():
    """Run extended benchmark with multiple molecules."""
    print("=" * 80)
    print("EXTENDED SSSR Benchmark: RDKit vs cyclipy")
    print("=" * 80)
    print(f"\nIterations per molecule: {EXTENDED_ITERATIONS}")

    header = f"{'Molecule':<16} {'Atoms':>6} {'Rings':>6} {'RDKit ms':>10} {'cyclipy ms':>11} {'Ratio':>8} {'µs/atom':>10}"
    print(header)
    print("-" * 80)

    ratios = []
    for name, smiles in TEST_MOLECULES.items():
        try:
            rdkit_res = benchmark_rdkit(smiles, EXTENDED_ITERATIONS)
            cyclipy_res = benchmark_cyclipy(smiles, EXTENDED_ITERATIONS)
        except ImportError:
            print(f"{name:<16} SKIPPED (rdkit not installed)")
            continue

        if rdkit_res.num_rings != cyclipy_res.num_rings:
            print(f"{name:<16} MISMATCH: RDKit {rdkit_res.num_rings} rings, "
                  f"cyclipy {cyclipy_res.num_rings} rings")
            continue

        ratio = cyclipy_res.time_seconds / rdkit_res.time_seconds
        ratios.append(ratio)
        print(f"{name:<16} "
              f"{cyclipy_res.num_atoms:>6} "
              f"{cyclipy_res.num_rings:>6} "
              f"{rdkit_res.time_per_call_ms:>10.4f} "
              f"{cyclipy_res.time_per_call_ms:>11.4f} "
              f"{ratio:>7.2f}x "
              f"{cyclipy_res.time_per_atom_us:>10.2f}")

    print("\n" + "=" * 80)
    if ratios:
        avg_ratio = sum(ratios) / len(ratios)
        print(f"Average slowdown: {avg_ratio:.2f}x")
        print(f"Best case:        {min(ratios):.2f}x")
        print(f"Worst case:       {max(ratios):.2f}x")
    else:
        print("Could not compute summary (missing data)")


def main():
    if "--extended" in sys.argv or "-e" in sys.argv:
        run_extended_benchmark()
    else:
        run_single_benchmark()
        print("\n" + "-" * 70)
        print("TIP: Run with --extended for detailed multi-molecule analysis")


if __name__ == "__main__":
    main()
