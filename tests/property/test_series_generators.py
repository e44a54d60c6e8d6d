"""Property-based tests for series generators.

Key properties tested:
- Dense series hold only values
- Sparse and dirty series always hold at least one value
- Sparse series never hold NM
- The guaranteed value is not pinned to either end
- Arbitrary variants resolve keys and values from their types
"""

import pytest
from hypothesis import find, given, settings
from hypothesis import strategies as st

from cellframe.common.exceptions import DegenerateLengthError
from cellframe.common.types import DensityProfile
from cellframe.core.cell import CellKind
from cellframe.core.series import Series
from cellframe.generators import (
    gen_non_empty_arbitrary_dense_series,
    gen_non_empty_arbitrary_dirty_series,
    gen_non_empty_arbitrary_sparse_series,
    gen_non_empty_dense_series,
    gen_non_empty_dirty_series,
    gen_non_empty_sparse_series,
    gen_series,
    gen_tuple2,
)

pytestmark = pytest.mark.property

keys = st.text(alphabet="abcdef", max_size=3)
values = st.integers(min_value=-100, max_value=100)


class TestDenseSeries:
    """Property-based tests for gen_non_empty_dense_series."""

    @given(series=gen_non_empty_dense_series(keys, values))
    def test_dense_series_holds_only_values(self, series: Series[str, int]):
        assert len(series) >= 1
        assert all(cell.is_value for cell in series.cells)

    @given(series=gen_non_empty_dense_series(keys, values))
    def test_keys_are_sorted(self, series: Series[str, int]):
        assert series.keys == sorted(series.keys)

    @given(series=gen_non_empty_arbitrary_dense_series(int, int))
    def test_arbitrary_dense_series(self, series: Series[int, int]):
        assert all(isinstance(key, int) for key in series.keys)
        assert series.count(CellKind.VALUE) == len(series)

    @given(series=gen_non_empty_arbitrary_dense_series(float, int))
    def test_arbitrary_float_keys_are_sorted(self, series: Series[float, int]):
        assert all(key == key for key in series.keys)
        assert series.keys == sorted(series.keys)

    @given(series=st.from_type(Series[float, int]))
    def test_resolved_float_keys_are_sorted(self, series: Series[float, int]):
        assert series.keys == sorted(series.keys)


class TestGuaranteedValueSeries:
    """Property-based tests for sparse and dirty series."""

    @settings(max_examples=1000)
    @given(series=gen_non_empty_sparse_series(keys, values))
    def test_sparse_series_always_has_a_value(self, series: Series[str, int]):
        assert series.has_values
        assert series.count(CellKind.NM) == 0

    @settings(max_examples=1000)
    @given(series=gen_non_empty_dirty_series(keys, values))
    def test_dirty_series_always_has_a_value(self, series: Series[str, int]):
        assert series.has_values

    @given(series=gen_non_empty_sparse_series(st.just("k"), values, max_size=1))
    def test_single_entry_is_the_guaranteed_value(self, series: Series[str, int]):
        assert len(series) == 1
        assert series["k"].is_value

    @given(series=gen_non_empty_dirty_series(keys, values, max_size=4))
    def test_max_size_is_honoured(self, series: Series[str, int]):
        assert 1 <= len(series) <= 4

    @given(series=gen_non_empty_arbitrary_sparse_series(str, int))
    def test_arbitrary_sparse_series(self, series: Series[str, int]):
        assert series.has_values
        assert all(isinstance(key, str) for key in series.keys)

    @given(series=gen_non_empty_arbitrary_dirty_series(int, bool))
    def test_arbitrary_dirty_series(self, series: Series[int, bool]):
        assert series.has_values

    def test_dirty_series_can_contain_nm(self):
        series = find(
            gen_non_empty_dirty_series(keys, values),
            lambda s: s.count(CellKind.NM) > 0,
            settings=settings(max_examples=1000, database=None),
        )
        assert series.count(CellKind.NM) > 0

    @pytest.mark.parametrize("position", [0, -1])
    def test_guaranteed_value_is_not_pinned(self, position: int):
        # With a single key, sorting is a no-op and entries keep their shuffled order
        series = find(
            gen_non_empty_sparse_series(st.just("k"), values),
            lambda s: len(s) >= 2 and s.cells[position].is_na,
            settings=settings(max_examples=1000, database=None),
        )
        assert series.cells[position].is_na
        assert series.has_values


class TestSeriesHelpers:
    """Tests for gen_tuple2, gen_series and size errors."""

    @given(pair=gen_tuple2(st.integers(), st.text()))
    def test_gen_tuple2(self, pair):
        first, second = pair
        assert isinstance(first, int)
        assert isinstance(second, str)

    @given(data=st.data(), profile=st.sampled_from(list(DensityProfile)))
    def test_gen_series_dispatches_on_profile(self, data, profile: DensityProfile):
        series = data.draw(gen_series(keys, values, profile))

        assert series.has_values
        if profile is DensityProfile.DENSE:
            assert series.count(CellKind.VALUE) == len(series)
        if profile is not DensityProfile.DIRTY:
            assert series.count(CellKind.NM) == 0

    @pytest.mark.parametrize(
        "builder", [gen_non_empty_dense_series, gen_non_empty_sparse_series, gen_non_empty_dirty_series]
    )
    def test_degenerate_max_size(self, builder):
        with pytest.raises(DegenerateLengthError):
            builder(keys, values, max_size=0)
