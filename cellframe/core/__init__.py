"""
Core value types for cellframe.

- Cell: tri-state wrapper (Value / NA / NM)
- Column: positional sequence of cells
- Series: key-ordered mapping to cells
"""

from cellframe.core.cell import (
    NA,
    NM,
    Cell,
    CellKind,
    NonValue,
    NotAvailable,
    NotMeaningful,
    Value,
    cell_to_json,
)
from cellframe.core.column import Column
from cellframe.core.series import Series

__all__ = [
    "Cell",
    "CellKind",
    "Value",
    "NonValue",
    "NotAvailable",
    "NotMeaningful",
    "NA",
    "NM",
    "cell_to_json",
    "Column",
    "Series",
]
