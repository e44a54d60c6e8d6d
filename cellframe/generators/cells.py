"""Hypothesis strategies for single cells.

A cell strategy draws one inner value, builds a weighted bag of the three
cell variants around it, and picks one element of the bag.
"""

import logging
from typing import Any

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

from cellframe.common.types import A, DensityProfile, Weight, normalize_weight
from cellframe.core.cell import NA, NM, Cell, Value

logger = logging.getLogger(__name__)


def weighted_bag(value: A, weight: Weight) -> list[Cell[A]]:
    """
    Build the bag of cells a single draw chooses from.

    Args:
        value: Inner value for the ``Value`` copies
        weight: ``(w_value, w_na)`` or ``(w_value, w_na, w_nm)``

    Returns:
        ``w_value`` copies of ``Value(value)``, then ``w_na`` copies of ``NA``,
        then ``w_nm`` copies of ``NM``
    """
    value_weight, na_weight, nm_weight = normalize_weight(weight)
    return [Value(value)] * value_weight + [NA] * na_weight + [NM] * nm_weight


def gen_cell(gen: SearchStrategy[A], weight: Weight) -> SearchStrategy[Cell[A]]:
    """
    Generate cells following a weighted distribution of variants.

    Passing a pair leaves ``NM`` out. E.g. ``(1, 1, 1)`` gives each variant
    a one in three chance.

    Args:
        gen: Strategy for the values wrapped in ``Value`` cells
        weight: ``(w_value, w_na)`` or ``(w_value, w_na, w_nm)``

    Returns:
        A strategy producing the weighted distribution of cell variants

    Raises:
        EmptyDistributionError: If every weight is zero
        InvalidWeightError: If the weight is malformed
    """
    value_weight, na_weight, nm_weight = normalize_weight(weight)
    logger.debug("Building cell strategy with weights value=%d na=%d nm=%d", value_weight, na_weight, nm_weight)
    missing = [NA] * na_weight + [NM] * nm_weight
    return gen.flatmap(lambda value: st.sampled_from([Value(value)] * value_weight + missing))


def gen_profile_cell(gen: SearchStrategy[A], profile: DensityProfile | str) -> SearchStrategy[Cell[A]]:
    """Generate cells with the odds of a density profile."""
    return gen_cell(gen, DensityProfile(profile).weight)


def gen_arbitrary_cell(value_type: type[Any], weight: Weight = DensityProfile.DIRTY.weight) -> SearchStrategy[Cell[Any]]:
    """Generate cells whose values are resolved from ``value_type``."""
    return gen_cell(st.from_type(value_type), weight)
