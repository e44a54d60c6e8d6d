"""Hypothesis strategies for whole series.

Sparse and dirty series are built from one pair that is known to hold a
``Value`` plus a random list of weighted pairs, shuffled together. That
keeps at least one present value in every series while leaving its
position random.
"""

import logging
from typing import Any

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

from cellframe.common.types import DENSE_WEIGHT, DIRTY_WEIGHT, SPARSE_WEIGHT, DensityProfile, K, V, WeightTriple
from cellframe.core.cell import Cell, Value
from cellframe.core.series import Series
from cellframe.generators.cells import gen_cell
from cellframe.generators.columns import check_max_size

logger = logging.getLogger(__name__)


def gen_tuple2(first_gen: SearchStrategy[K], second_gen: SearchStrategy[V]) -> SearchStrategy[tuple[K, V]]:
    """
    Generate pairs whose elements come from the two given strategies.

    Args:
        first_gen: The strategy for the first element
        second_gen: The strategy for the second element

    Returns:
        A strategy producing 2-tuples
    """
    return st.tuples(first_gen, second_gen)


def gen_non_empty_dense_series(
    key_gen: SearchStrategy[K],
    val_gen: SearchStrategy[V],
    *,
    max_size: int | None = None,
) -> SearchStrategy[Series[K, V]]:
    """
    Generate a series that only contains ``Value`` cells.

    Args:
        key_gen: Strategy for the keys of the series index
        val_gen: Strategy for the values wrapped in ``Value`` cells
        max_size: Optional cap on the number of entries

    Returns:
        A strategy producing non-empty, dense series
    """
    check_max_size(max_size)
    logger.debug("Building dense series strategy (max_size=%s)", max_size)
    pairs = gen_tuple2(key_gen, gen_cell(val_gen, DENSE_WEIGHT))
    return st.lists(pairs, min_size=1, max_size=max_size).map(lambda t2s: Series.from_cells(*t2s))


def gen_non_empty_sparse_series(
    key_gen: SearchStrategy[K],
    val_gen: SearchStrategy[V],
    *,
    max_size: int | None = None,
) -> SearchStrategy[Series[K, V]]:
    """
    Generate a series that contains both ``Value`` and ``NA`` cells.

    At least one entry is always a ``Value``.
    """
    return _gen_guaranteed_series(key_gen, val_gen, SPARSE_WEIGHT, max_size)


def gen_non_empty_dirty_series(
    key_gen: SearchStrategy[K],
    val_gen: SearchStrategy[V],
    *,
    max_size: int | None = None,
) -> SearchStrategy[Series[K, V]]:
    """
    Generate a series that contains any cell variant: ``Value``, ``NA`` and ``NM``.

    At least one entry is always a ``Value``.
    """
    return _gen_guaranteed_series(key_gen, val_gen, DIRTY_WEIGHT, max_size)


def ordered_keys(key_type: type[Any]) -> SearchStrategy[Any]:
    """Keys resolved from ``key_type``, without values (like NaN) that break key ordering."""
    return st.from_type(key_type).filter(lambda key: key == key)


def gen_non_empty_arbitrary_dense_series(key_type: type[Any], value_type: type[Any]) -> SearchStrategy[Series[Any, Any]]:
    """Dense series with keys and values resolved from their types."""
    return gen_non_empty_dense_series(ordered_keys(key_type), st.from_type(value_type))


def gen_non_empty_arbitrary_sparse_series(key_type: type[Any], value_type: type[Any]) -> SearchStrategy[Series[Any, Any]]:
    """Sparse series with keys and values resolved from their types."""
    return gen_non_empty_sparse_series(ordered_keys(key_type), st.from_type(value_type))


def gen_non_empty_arbitrary_dirty_series(key_type: type[Any], value_type: type[Any]) -> SearchStrategy[Series[Any, Any]]:
    """Dirty series with keys and values resolved from their types."""
    return gen_non_empty_dirty_series(ordered_keys(key_type), st.from_type(value_type))


def gen_series(
    key_gen: SearchStrategy[K],
    val_gen: SearchStrategy[V],
    profile: DensityProfile | str,
    *,
    max_size: int | None = None,
) -> SearchStrategy[Series[K, V]]:
    """Generate series of the given density profile."""
    profile = DensityProfile(profile)
    if profile is DensityProfile.DENSE:
        return gen_non_empty_dense_series(key_gen, val_gen, max_size=max_size)
    if profile is DensityProfile.SPARSE:
        return gen_non_empty_sparse_series(key_gen, val_gen, max_size=max_size)
    return gen_non_empty_dirty_series(key_gen, val_gen, max_size=max_size)


def _gen_guaranteed_series(
    key_gen: SearchStrategy[K],
    val_gen: SearchStrategy[V],
    weight: WeightTriple,
    max_size: int | None,
) -> SearchStrategy[Series[K, V]]:
    check_max_size(max_size)
    logger.debug("Building series strategy with weights %s (max_size=%s)", weight, max_size)
    pairs = gen_tuple2(key_gen, gen_cell(val_gen, weight))
    others_max = None if max_size is None else max_size - 1

    @st.composite
    def guaranteed_series(draw) -> Series[K, V]:
        dense_pair: tuple[K, Cell[V]] = (draw(key_gen), Value(draw(val_gen)))
        others = draw(st.lists(pairs, max_size=others_max))
        shuffled = draw(st.permutations([dense_pair, *others]))
        return Series.from_cells(*shuffled)

    return guaranteed_series()
