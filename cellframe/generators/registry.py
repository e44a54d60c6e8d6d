"""Registration of cellframe strategies with Hypothesis' type resolution.

Once registered, ``st.from_type(Column[int])`` and friends resolve to the
generators in this package. Type arguments pick the inner strategies.
"""

import logging
from typing import Any, get_args

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

from cellframe.common.types import DIRTY_WEIGHT
from cellframe.core.cell import Cell
from cellframe.core.column import Column
from cellframe.core.series import Series
from cellframe.generators.cells import gen_cell
from cellframe.generators.columns import gen_dirty_column
from cellframe.generators.series import gen_non_empty_sparse_series, ordered_keys

logger = logging.getLogger(__name__)

# Used when a generic type is requested without arguments
DEFAULT_VALUE_STRATEGY: SearchStrategy[Any] = st.integers()
DEFAULT_KEY_STRATEGY: SearchStrategy[Any] = st.text()


def _type_args(thing: Any, count: int) -> list[SearchStrategy[Any] | None]:
    args = get_args(thing)
    if len(args) != count:
        return [None] * count
    return [st.from_type(arg) for arg in args]


def resolve_cell(thing: Any) -> SearchStrategy[Cell[Any]]:
    (values,) = _type_args(thing, 1)
    return gen_cell(values or DEFAULT_VALUE_STRATEGY, DIRTY_WEIGHT)


def resolve_column(thing: Any) -> SearchStrategy[Column[Any]]:
    (values,) = _type_args(thing, 1)
    return gen_dirty_column(values or DEFAULT_VALUE_STRATEGY)


def resolve_series(thing: Any) -> SearchStrategy[Series[Any, Any]]:
    args = get_args(thing)
    if len(args) != 2:
        return gen_non_empty_sparse_series(DEFAULT_KEY_STRATEGY, DEFAULT_VALUE_STRATEGY)
    key_type, value_type = args
    return gen_non_empty_sparse_series(ordered_keys(key_type), st.from_type(value_type))


def register_type_strategies() -> None:
    """Register Cell, Column and Series with ``st.from_type``. Safe to call again."""
    st.register_type_strategy(Cell, resolve_cell)
    st.register_type_strategy(Column, resolve_column)
    st.register_type_strategy(Series, resolve_series)
    logger.debug("Registered cellframe type strategies")
