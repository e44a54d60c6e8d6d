"""Series: an ordered mapping from keys to cells."""

from collections.abc import Iterator
from typing import Any, Generic

from cellframe.common.exceptions import KeyOrderError
from cellframe.common.types import K, V
from cellframe.core.cell import NA, Cell, CellKind, Value


class Series(Generic[K, V]):
    """
    Immutable key to cell mapping ordered by key.

    Entries are sorted by key on construction. Sorting is stable, so entries
    sharing a key keep the order they were given in. Duplicate keys are kept
    as separate entries; keyed lookup returns the first one.
    """

    def __init__(self, entries: tuple[tuple[K, Cell[V]], ...] = ()):
        self._entries = entries

    @classmethod
    def from_cells(cls, *pairs: tuple[K, Cell[V]]) -> "Series[K, V]":
        """
        Build a series from ``(key, cell)`` pairs.

        Raises:
            KeyOrderError: If the keys cannot be compared with each other or a
                key (such as NaN) does not equal itself
        """
        for _, cell in pairs:
            if not isinstance(cell, Cell):
                raise TypeError(f"Series values must be Cell instances, got {type(cell).__name__}")
        # NaN-like keys compare unequal to themselves and leave sorted() silently unordered
        unordered = [key for key, _ in pairs if key != key]
        if unordered:
            keys = [key for key, _ in pairs]
            raise KeyOrderError(f"Series keys must equal themselves, got {unordered!r}", keys)
        try:
            entries = tuple(sorted(pairs, key=lambda pair: pair[0]))
        except TypeError as e:
            keys = [key for key, _ in pairs]
            raise KeyOrderError(f"Series keys are not mutually comparable: {e}", keys) from e
        return cls(entries)

    @classmethod
    def from_values(cls, *pairs: tuple[K, V]) -> "Series[K, V]":
        """Build a dense series from ``(key, value)`` pairs."""
        return cls.from_cells(*((key, Value(value)) for key, value in pairs))

    @property
    def keys(self) -> list[K]:
        return [key for key, _ in self._entries]

    @property
    def cells(self) -> list[Cell[V]]:
        return [cell for _, cell in self._entries]

    def items(self) -> list[tuple[K, Cell[V]]]:
        return list(self._entries)

    def count(self, kind: CellKind) -> int:
        """Number of entries whose cell is of the given kind."""
        return sum(1 for _, cell in self._entries if cell.kind is kind)

    @property
    def has_values(self) -> bool:
        return any(cell.is_value for _, cell in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return any(k == key for k, _ in self._entries)

    def __getitem__(self, key: K) -> Cell[V]:
        for k, cell in self._entries:
            if k == key:
                return cell
        return NA

    def __iter__(self) -> Iterator[tuple[K, Cell[V]]]:
        return iter(self._entries)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r} -> {cell!r}" for key, cell in self._entries)
        return f"Series({body})"
