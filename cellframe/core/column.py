"""Column: an ordered, positionally indexed sequence of cells."""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic

from cellframe.common.types import A, B
from cellframe.core.cell import NA, Cell, CellKind, Value


class Column(Generic[A]):
    """
    Immutable sequence of cells.

    A column is either backed by a dense array of values (every cell is a
    ``Value``) or by a list of arbitrary cells. Positions outside the packed
    range read as ``NA``, so lookups never raise.

    Use :meth:`from_array` or :meth:`from_cells` rather than the constructor.
    """

    def __init__(self, values: tuple[A, ...] | None = None, cells: tuple[Cell[A], ...] | None = None):
        if (values is None) == (cells is None):
            raise ValueError("Column needs exactly one of values or cells")
        self._values = values
        self._cells = cells

    @classmethod
    def from_array(cls, values: Iterable[A]) -> "Column[A]":
        """Build a dense column where every cell is a ``Value``."""
        return cls(values=tuple(values))

    @classmethod
    def from_cells(cls, cells: Iterable[Cell[A]]) -> "Column[A]":
        """Build a column from any mix of cells."""
        cells = tuple(cells)
        for cell in cells:
            if not isinstance(cell, Cell):
                raise TypeError(f"Column cells must be Cell instances, got {type(cell).__name__}")
        return cls(cells=cells)

    @property
    def is_dense(self) -> bool:
        """True when the column is array backed."""
        return self._values is not None

    @property
    def cells(self) -> tuple[Cell[A], ...]:
        if self._values is not None:
            return tuple(Value(v) for v in self._values)
        return self._cells

    def values(self) -> list[A]:
        """Present values in positional order."""
        if self._values is not None:
            return list(self._values)
        return [cell.get_or_else(None) for cell in self._cells if cell.is_value]

    def count(self, kind: CellKind) -> int:
        """Number of cells of the given kind."""
        return sum(1 for cell in self if cell.kind is kind)

    def map(self, fn: Callable[[A], B]) -> "Column[B]":
        if self._values is not None:
            return Column.from_array(fn(v) for v in self._values)
        return Column.from_cells(cell.map(fn) for cell in self._cells)

    def __len__(self) -> int:
        if self._values is not None:
            return len(self._values)
        return len(self._cells)

    def __getitem__(self, index: int) -> Cell[A]:
        if not isinstance(index, int):
            raise TypeError(f"Column indices must be integers, got {type(index).__name__}")
        if not 0 <= index < len(self):
            return NA
        if self._values is not None:
            return Value(self._values[index])
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell[A]]:
        return iter(self.cells)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)

    def __repr__(self) -> str:
        kind = "dense" if self.is_dense else "cells"
        return f"Column[{kind}]({', '.join(repr(c) for c in self)})"
