"""Unit tests for cellframe.sampling."""

import hypothesis.strategies as st
import pytest

from cellframe.common.exceptions import SamplingError
from cellframe.core.cell import CellKind, Value
from cellframe.generators import gen_cell, gen_dense_column, gen_dirty_column, gen_non_empty_sparse_series
from cellframe.sampling import draw_samples


class TestDrawSamples:
    """Test suite for draw_samples."""

    def test_draws_requested_count(self):
        samples = draw_samples(st.integers(), 10, seed=1)
        assert len(samples) == 10

    def test_same_seed_gives_same_columns(self):
        strategy = gen_dirty_column(st.integers())

        first = draw_samples(strategy, 20, seed=1234)
        second = draw_samples(strategy, 20, seed=1234)

        assert first == second

    def test_same_seed_gives_same_series(self):
        strategy = gen_non_empty_sparse_series(st.text(max_size=3), st.integers())

        assert draw_samples(strategy, 15, seed=99) == draw_samples(strategy, 15, seed=99)

    def test_constant_dense_column_over_many_samples(self):
        samples = draw_samples(gen_dense_column(st.just(1)), 100, seed=0)

        assert samples
        for column in samples:
            assert len(column) >= 1
            assert all(cell == Value(1) for cell in column)

    def test_exhausted_strategy_returns_fewer_samples(self):
        samples = draw_samples(st.just(1), 10, seed=0)

        assert 1 <= len(samples) <= 10
        assert set(samples) == {1}

    def test_even_odds_produce_both_variants(self):
        samples = draw_samples(gen_cell(st.integers(), (1, 1)), 300, seed=7)
        share = sum(1 for cell in samples if cell.kind is CellKind.VALUE) / len(samples)

        assert 0.15 < share < 0.85

    @pytest.mark.parametrize(
        "weight, expected",
        [
            ((9, 1), {CellKind.VALUE: 0.9, CellKind.NA: 0.1, CellKind.NM: 0.0}),
            ((7, 2, 1), {CellKind.VALUE: 0.7, CellKind.NA: 0.2, CellKind.NM: 0.1}),
        ],
    )
    def test_variant_shares_follow_weights(self, weight, expected):
        samples = draw_samples(gen_cell(st.integers(), weight), 3000, seed=2024)

        for kind, share in expected.items():
            observed = sum(1 for cell in samples if cell.kind is kind) / len(samples)
            assert observed == pytest.approx(share, abs=0.03)

    @pytest.mark.parametrize("count", [0, -3])
    def test_invalid_count(self, count):
        with pytest.raises(SamplingError):
            draw_samples(st.integers(), count)

    def test_invalid_max_examples(self):
        with pytest.raises(SamplingError):
            draw_samples(st.integers(), 3, max_examples=0)

    def test_generation_errors_propagate(self):
        def explode(_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            draw_samples(st.integers().map(explode), 3, seed=0)
