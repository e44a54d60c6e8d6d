"""Common exceptions for cellframe.

This module defines all exception types used throughout cellframe to
provide consistent error handling and clear error semantics.
"""

from typing import Any


class CellFrameError(Exception):
    """Base exception for all cellframe-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class GeneratorError(CellFrameError):
    """Raised when a generator cannot be built from its arguments."""


class EmptyDistributionError(GeneratorError):
    """Raised when every weight of a cell distribution is zero."""

    def __init__(
        self,
        message: str,
        weight: tuple[int, ...] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize empty distribution error with the offending weight."""
        super().__init__(message, context)
        self.weight = weight


class InvalidWeightError(GeneratorError):
    """Raised when a weight tuple has the wrong arity or a negative entry."""

    def __init__(
        self,
        message: str,
        weight: Any | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize invalid weight error with the offending weight."""
        super().__init__(message, context)
        self.weight = weight


class DegenerateLengthError(GeneratorError):
    """Raised when a non-empty sequence is requested with room for no items."""

    def __init__(
        self,
        message: str,
        min_size: int = 1,
        max_size: int | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize degenerate length error with the size bounds."""
        super().__init__(message, context)
        self.min_size = min_size
        self.max_size = max_size


class KeyOrderError(CellFrameError):
    """Raised when series keys cannot be put in a total order."""

    def __init__(
        self,
        message: str,
        keys: list[Any] | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize key order error with the keys that failed to sort."""
        super().__init__(message, context)
        self.keys = keys or []


class SamplingError(CellFrameError):
    """Raised when a sampling request is invalid."""


class ConfigurationError(CellFrameError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_section: str | None = None,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_section = config_section
        self.config_key = config_key
