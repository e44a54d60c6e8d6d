"""Unit tests for the cellframe.core.column module."""

import pytest

from cellframe.core.cell import NA, NM, CellKind, Value
from cellframe.core.column import Column


class TestColumnCreation:
    """Test suite for Column construction."""

    def test_from_array_is_dense(self):
        column = Column.from_array([1, 2, 3])

        assert column.is_dense
        assert len(column) == 3
        assert column.cells == (Value(1), Value(2), Value(3))

    def test_from_cells_keeps_order(self):
        column = Column.from_cells([Value(1), NA, NM, Value(4)])

        assert not column.is_dense
        assert len(column) == 4
        assert list(column) == [Value(1), NA, NM, Value(4)]

    def test_from_cells_rejects_raw_values(self):
        with pytest.raises(TypeError, match="Cell instances"):
            Column.from_cells([Value(1), 2])

    def test_constructor_requires_exactly_one_backing(self):
        with pytest.raises(ValueError):
            Column()
        with pytest.raises(ValueError):
            Column(values=(1,), cells=(Value(1),))

    def test_from_array_accepts_generators(self):
        column = Column.from_array(v for v in range(3))
        assert column.values() == [0, 1, 2]


class TestColumnAccess:
    """Test suite for Column lookups and summaries."""

    def test_getitem_inside_range(self):
        dense = Column.from_array(["a", "b"])
        sparse = Column.from_cells([NA, Value("b")])

        assert dense[1] == Value("b")
        assert sparse[0] is NA

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_getitem_outside_range_is_na(self, index):
        column = Column.from_array(["a", "b"])
        assert column[index] is NA

    @pytest.mark.parametrize("index", [slice(1, 3), "a", 1.0])
    def test_getitem_rejects_non_integer_index(self, index):
        column = Column.from_cells([Value(1), NA, NM])

        with pytest.raises(TypeError, match="Column indices must be integers"):
            column[index]

    def test_values_skips_non_values(self):
        column = Column.from_cells([Value(1), NA, Value(3), NM])
        assert column.values() == [1, 3]

    def test_count_by_kind(self):
        column = Column.from_cells([Value(1), NA, NA, NM])

        assert column.count(CellKind.VALUE) == 1
        assert column.count(CellKind.NA) == 2
        assert column.count(CellKind.NM) == 1

    def test_map_keeps_backing(self):
        dense = Column.from_array([1, 2]).map(str)
        sparse = Column.from_cells([Value(1), NA]).map(str)

        assert dense.is_dense
        assert dense.values() == ["1", "2"]
        assert list(sparse) == [Value("1"), NA]

    def test_dense_and_cell_columns_with_same_cells_are_equal(self):
        assert Column.from_array([1, 2]) == Column.from_cells([Value(1), Value(2)])
        assert hash(Column.from_array([1, 2])) == hash(Column.from_cells([Value(1), Value(2)]))
        assert Column.from_array([1]) != Column.from_cells([NA])
