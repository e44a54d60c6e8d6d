"""Hypothesis strategies for whole columns.

Every column strategy draws a non-empty list, so generated columns always
hold at least one cell.
"""

import logging

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

from cellframe.common.exceptions import DegenerateLengthError
from cellframe.common.types import A, DIRTY_WEIGHT, SPARSE_WEIGHT, DensityProfile
from cellframe.core.column import Column
from cellframe.generators.cells import gen_cell

logger = logging.getLogger(__name__)

MIN_COLUMN_SIZE = 1


def check_max_size(max_size: int | None, min_size: int = MIN_COLUMN_SIZE) -> None:
    """Reject size caps that leave no room for a non-empty draw."""
    if max_size is not None and max_size < min_size:
        raise DegenerateLengthError(
            f"max_size={max_size} is below the minimum size of {min_size}",
            min_size=min_size,
            max_size=max_size,
        )


def gen_dense_column(gen: SearchStrategy[A], *, max_size: int | None = None) -> SearchStrategy[Column[A]]:
    """
    Generate a dense column, containing only ``Value`` cells.

    Args:
        gen: The strategy for the cell values
        max_size: Optional cap on the column length

    Returns:
        A strategy producing array backed columns
    """
    check_max_size(max_size)
    logger.debug("Building dense column strategy (max_size=%s)", max_size)
    return st.lists(gen, min_size=MIN_COLUMN_SIZE, max_size=max_size).map(Column.from_array)


def gen_sparse_column(gen: SearchStrategy[A], *, max_size: int | None = None) -> SearchStrategy[Column[A]]:
    """
    Generate a sparse column, containing only ``Value`` and ``NA`` cells.

    Cells are nine times as likely to be values as ``NA``.
    """
    return _gen_cell_column(gen, SPARSE_WEIGHT, max_size)


def gen_dirty_column(gen: SearchStrategy[A], *, max_size: int | None = None) -> SearchStrategy[Column[A]]:
    """
    Generate a dirty column, containing any kind of cell.

    Cells are 70% values, 20% ``NA`` and 10% ``NM``.
    """
    return _gen_cell_column(gen, DIRTY_WEIGHT, max_size)


def gen_column(
    gen: SearchStrategy[A],
    profile: DensityProfile | str,
    *,
    max_size: int | None = None,
) -> SearchStrategy[Column[A]]:
    """Generate columns of the given density profile."""
    profile = DensityProfile(profile)
    if profile is DensityProfile.DENSE:
        return gen_dense_column(gen, max_size=max_size)
    if profile is DensityProfile.SPARSE:
        return gen_sparse_column(gen, max_size=max_size)
    return gen_dirty_column(gen, max_size=max_size)


def _gen_cell_column(gen, weight, max_size):
    check_max_size(max_size)
    logger.debug("Building cell column strategy with weights %s (max_size=%s)", weight, max_size)
    cells = gen_cell(gen, weight)
    return st.lists(cells, min_size=MIN_COLUMN_SIZE, max_size=max_size).map(Column.from_cells)
