"""Hypothesis strategies for cells, columns and series.

Importing this package also registers the core types with
``hypothesis.strategies.from_type``.
"""

from cellframe.generators.cells import gen_arbitrary_cell, gen_cell, gen_profile_cell, weighted_bag
from cellframe.generators.columns import (
    gen_column,
    gen_dense_column,
    gen_dirty_column,
    gen_sparse_column,
)
from cellframe.generators.registry import register_type_strategies
from cellframe.generators.series import (
    gen_non_empty_arbitrary_dense_series,
    gen_non_empty_arbitrary_dirty_series,
    gen_non_empty_arbitrary_sparse_series,
    gen_non_empty_dense_series,
    gen_non_empty_dirty_series,
    gen_non_empty_sparse_series,
    gen_series,
    gen_tuple2,
    ordered_keys,
)

register_type_strategies()

__all__ = [
    # Cells
    "gen_cell",
    "gen_profile_cell",
    "gen_arbitrary_cell",
    "weighted_bag",
    # Columns
    "gen_column",
    "gen_dense_column",
    "gen_sparse_column",
    "gen_dirty_column",
    # Series
    "gen_tuple2",
    "gen_series",
    "gen_non_empty_dense_series",
    "gen_non_empty_sparse_series",
    "gen_non_empty_dirty_series",
    "gen_non_empty_arbitrary_dense_series",
    "gen_non_empty_arbitrary_sparse_series",
    "gen_non_empty_arbitrary_dirty_series",
    "ordered_keys",
    # Type resolution
    "register_type_strategies",
]
