"""Error types for gridfield.

Cell-level operations never raise on malformed input; stale ids and
garbage strings are normalized instead.  The errors below exist for the
two places where failure is part of the contract: the uniform
decode-failure channel every type option declares, and the loading of
type-option configuration documents.
"""
from __future__ import annotations


class GridFieldError(Exception):
    """Base class for all gridfield errors."""


class CellDecodeError(GridFieldError):
    """Raised when a stored cell string cannot be decoded by a type option.

    Part of the signature shared by every type option so that the table
    engine can dispatch uniformly.  The selection-based types never raise
    it: they decode any string, dropping what they cannot use.

    Parameters
    ----------
    field_type:
        Tag value of the type option that failed.
    cell_str:
        The stored string that could not be decoded.
    reason:
        Human-readable description of the failure.
    """

    def __init__(self, field_type: str, cell_str: str, reason: str) -> None:
        self.field_type = field_type
        self.cell_str = cell_str
        self.reason = reason
        super().__init__(
            f"Cannot decode {cell_str!r} as a {field_type} cell: {reason}"
        )


class TypeOptionDecodeError(GridFieldError):
    """Raised when a type-option configuration document is malformed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.message = message
        self.source = source
        location = f" ({source})" if source else ""
        super().__init__(f"Invalid type option{location}: {message}")
