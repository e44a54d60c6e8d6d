"""Cell: a tri-state wrapper around a single value."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic

from cellframe.common.types import A, B


class CellKind(StrEnum):
    """The three variants a cell can take."""
    VALUE = "value"
    NA = "NA"
    NM = "NM"


class Cell(ABC, Generic[A]):
    """
    Abstract base for every cell.

    A cell is either a present ``Value``, explicitly missing (``NA``), or
    present but not meaningful (``NM``). Cells are immutable.
    """

    @property
    @abstractmethod
    def kind(self) -> CellKind:
        """Variant of this cell."""

    @property
    def is_value(self) -> bool:
        return self.kind is CellKind.VALUE

    @property
    def is_na(self) -> bool:
        return self.kind is CellKind.NA

    @property
    def is_nm(self) -> bool:
        return self.kind is CellKind.NM

    @abstractmethod
    def get_or_else(self, default: Any) -> Any:
        """Return the wrapped value, or ``default`` for non-values."""

    @abstractmethod
    def map(self, fn: Callable[[A], B]) -> "Cell[B]":
        """Apply ``fn`` to a present value. Non-values pass through."""


@dataclass(frozen=True)
class Value(Cell[A]):
    """A present value."""

    value: A

    @property
    def kind(self) -> CellKind:
        return CellKind.VALUE

    def get_or_else(self, default: Any) -> A:
        return self.value

    def map(self, fn: Callable[[A], B]) -> "Value[B]":
        return Value(fn(self.value))

    def __repr__(self) -> str:
        return f"Value({self.value!r})"


class NonValue(Cell[Any]):
    """Shared behaviour of the two singleton non-value cells."""

    _instance: "NonValue | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def get_or_else(self, default: Any) -> Any:
        return default

    def map(self, fn: Callable[[Any], Any]) -> "NonValue":
        return self

    def __reduce__(self):
        return (type(self), ())

    def __repr__(self) -> str:
        return self.kind.value


class NotAvailable(NonValue):
    """Explicitly missing value."""

    _instance = None

    @property
    def kind(self) -> CellKind:
        return CellKind.NA


class NotMeaningful(NonValue):
    """A value exists conceptually but is invalid or undefined."""

    _instance = None

    @property
    def kind(self) -> CellKind:
        return CellKind.NM


NA = NotAvailable()
NM = NotMeaningful()


def cell_to_json(cell: Cell[Any]) -> Any:
    """
    Convert a cell to a JSON-friendly structure.

    Values become ``{"value": v}``; non-values become their name.
    """
    if cell.is_value:
        return {"value": cell.get_or_else(None)}
    return cell.kind.value
