"""
Custom exceptions for cyclipy.

This module defines a hierarchy of exceptions for handling errors in
molecular graph handling and ring perception.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all cyclipy errors."""

    pass


class RingPerceptionError(ChemError):
    """Ring perception could not produce a full set of independent rings.

    A valid graph always has exactly ``bonds - atoms + fragments``
    independent rings, so this signals a corrupted graph (inconsistent
    bond table, miscounted fragments) rather than a hard molecule.

    Attributes:
        expected: Number of independent rings the graph must have.
        found: Number of rings actually produced.
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        found: int | None = None,
    ) -> None:
        self.message = message
        self.expected = expected
        self.found = found

        parts = [message]
        if expected is not None and found is not None:
            parts.append(f" (expected {expected} rings, found {found})")

        super().__init__("".join(parts))
