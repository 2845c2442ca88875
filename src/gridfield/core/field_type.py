"""Field-type tags for table columns.

Every field (column) declares one ``FieldType``.  The tag's ``value`` is
the key under which the matching type option is registered, and is the
string written to configuration documents.
"""
from __future__ import annotations

from enum import Enum


class FieldType(Enum):
    """Declared type of a table field."""

    SINGLE_SELECT = "single_select"
    MULTI_SELECT = "multi_select"
    CHECKLIST = "checklist"

    @property
    def is_checklist(self) -> bool:
        return self is FieldType.CHECKLIST

    @property
    def is_single_select(self) -> bool:
        return self is FieldType.SINGLE_SELECT

    @property
    def is_multi_select(self) -> bool:
        return self is FieldType.MULTI_SELECT

    @property
    def is_select_option(self) -> bool:
        """Return True for field types whose cells reference option ids."""
        return self in (
            FieldType.SINGLE_SELECT,
            FieldType.MULTI_SELECT,
            FieldType.CHECKLIST,
        )

    @classmethod
    def parse(cls, value: "str | FieldType") -> "FieldType":
        """Return the tag for ``value``, accepting the enum or its string.

        Raises
        ------
        ValueError
            If ``value`` names no known field type.
        """
        if isinstance(value, FieldType):
            return value
        normalized = value.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            known = ", ".join(t.value for t in cls)
            raise ValueError(
                f"Unknown field type {value!r}. Known field types: {known}"
            ) from None
