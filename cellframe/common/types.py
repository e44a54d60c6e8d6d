"""Common types and type definitions for cellframe.

This module contains shared type definitions used by the core value types
and the generators.
"""

from enum import StrEnum
from typing import Any, TypeVar

from .exceptions import EmptyDistributionError, InvalidWeightError

# Generic type variables
A = TypeVar('A')
B = TypeVar('B')
K = TypeVar('K')
V = TypeVar('V')

WeightPair = tuple[int, int]
WeightTriple = tuple[int, int, int]
Weight = WeightPair | WeightTriple


class DensityProfile(StrEnum):
    """How populated a generated column or series is."""
    DENSE = "dense"
    SPARSE = "sparse"
    DIRTY = "dirty"

    @property
    def weight(self) -> WeightTriple:
        """Value/NA/NM odds used for cells of this profile."""
        return PROFILE_WEIGHTS[self]


DENSE_WEIGHT: WeightTriple = (1, 0, 0)
SPARSE_WEIGHT: WeightTriple = (9, 1, 0)
DIRTY_WEIGHT: WeightTriple = (7, 2, 1)

PROFILE_WEIGHTS: dict[DensityProfile, WeightTriple] = {
    DensityProfile.DENSE: DENSE_WEIGHT,
    DensityProfile.SPARSE: SPARSE_WEIGHT,
    DensityProfile.DIRTY: DIRTY_WEIGHT,
}


def normalize_weight(weight: Any) -> WeightTriple:
    """
    Turn a 2- or 3-tuple of odds into a (value, na, nm) triple.

    A pair leaves out NM, so its NM weight is zero.

    Args:
        weight: ``(w_value, w_na)`` or ``(w_value, w_na, w_nm)``

    Returns:
        The weight as a triple

    Raises:
        InvalidWeightError: If the arity is wrong or an entry is not a
            non-negative integer
        EmptyDistributionError: If every entry is zero
    """
    try:
        entries = tuple(weight)
    except TypeError as e:
        raise InvalidWeightError(
            f"Weight must be a tuple of 2 or 3 integers, got {weight!r}", weight
        ) from e

    if len(entries) not in (2, 3):
        raise InvalidWeightError(
            f"Weight must have 2 or 3 entries, got {len(entries)}", weight
        )

    for entry in entries:
        # bool is an int subclass but never a meaningful weight
        if isinstance(entry, bool) or not isinstance(entry, int):
            raise InvalidWeightError(f"Weight entries must be integers, got {entry!r}", weight)
        if entry < 0:
            raise InvalidWeightError(f"Weight entries must be non-negative, got {entry}", weight)

    if len(entries) == 2:
        entries = (entries[0], entries[1], 0)

    if sum(entries) == 0:
        raise EmptyDistributionError(
            "Cannot choose a cell from an empty distribution: all weights are zero",
            entries,
        )

    return entries
