"""
cellframe: property-based test generators for tabular cell types.

cellframe provides Hypothesis strategies that produce randomized, weighted
instances of a tabular library's core value types, for use in property
checks.

Core Components:
    - Cell: Value / NA / NM tri-state wrapper
    - Column: dense or sparse sequence of cells
    - Series: key-ordered mapping to cells
    - generators: weighted strategies for all three

Example Usage:
    ```python
    from hypothesis import given, strategies as st
    from cellframe import gen_dirty_column

    @given(gen_dirty_column(st.integers()))
    def test_column_is_never_empty(column):
        assert len(column) >= 1
    ```
"""

__version__ = "0.1.0"

from .common import (
    CellFrameError,
    ConfigurationError,
    DegenerateLengthError,
    DensityProfile,
    EmptyDistributionError,
    GeneratorError,
    InvalidWeightError,
    KeyOrderError,
    SamplingError,
)
from .core import NA, NM, Cell, CellKind, Column, Series, Value
from .generators import (
    gen_cell,
    gen_column,
    gen_dense_column,
    gen_dirty_column,
    gen_non_empty_arbitrary_dense_series,
    gen_non_empty_arbitrary_dirty_series,
    gen_non_empty_arbitrary_sparse_series,
    gen_non_empty_dense_series,
    gen_non_empty_dirty_series,
    gen_non_empty_sparse_series,
    gen_series,
    gen_sparse_column,
    gen_tuple2,
)
from .sampling import draw_samples

__all__ = [
    # Core types
    "Cell",
    "CellKind",
    "Value",
    "NA",
    "NM",
    "Column",
    "Series",
    "DensityProfile",
    # Generators
    "gen_cell",
    "gen_column",
    "gen_dense_column",
    "gen_sparse_column",
    "gen_dirty_column",
    "gen_tuple2",
    "gen_series",
    "gen_non_empty_dense_series",
    "gen_non_empty_sparse_series",
    "gen_non_empty_dirty_series",
    "gen_non_empty_arbitrary_dense_series",
    "gen_non_empty_arbitrary_sparse_series",
    "gen_non_empty_arbitrary_dirty_series",
    "draw_samples",
    # Errors
    "CellFrameError",
    "GeneratorError",
    "EmptyDistributionError",
    "InvalidWeightError",
    "DegenerateLengthError",
    "KeyOrderError",
    "SamplingError",
    "ConfigurationError",
]
