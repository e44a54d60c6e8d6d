"""Common utilities and shared components for cellframe.

This package contains shared types and exceptions used throughout cellframe.
"""

from .exceptions import (
    CellFrameError,
    ConfigurationError,
    DegenerateLengthError,
    EmptyDistributionError,
    GeneratorError,
    InvalidWeightError,
    KeyOrderError,
    SamplingError,
)
from .types import (
    DENSE_WEIGHT,
    DIRTY_WEIGHT,
    PROFILE_WEIGHTS,
    SPARSE_WEIGHT,
    DensityProfile,
    Weight,
    WeightPair,
    WeightTriple,
    normalize_weight,
)

__all__ = [
    # Exceptions
    "CellFrameError",
    "ConfigurationError",
    "DegenerateLengthError",
    "EmptyDistributionError",
    "GeneratorError",
    "InvalidWeightError",
    "KeyOrderError",
    "SamplingError",
    # Types
    "DensityProfile",
    "Weight",
    "WeightPair",
    "WeightTriple",
    "DENSE_WEIGHT",
    "SPARSE_WEIGHT",
    "DIRTY_WEIGHT",
    "PROFILE_WEIGHTS",
    "normalize_weight",
]
