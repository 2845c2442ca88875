"""Core domain types.

Field-type tags and the error hierarchy shared by every type option.
Submodules in core/ should not import from type_options/, plugins/ or cli/.
"""
from __future__ import annotations

from gridfield.core.errors import CellDecodeError, GridFieldError, TypeOptionDecodeError
from gridfield.core.field_type import FieldType

__all__ = [
    "FieldType",
    "GridFieldError",
    "CellDecodeError",
    "TypeOptionDecodeError",
]
