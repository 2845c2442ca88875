"""Selection primitives shared by every option-based field type.

Exports the option registry, the stored selection state, the changeset
merge and the sort comparators.
"""
from __future__ import annotations

from gridfield.selection.changeset import EditChangeset, merge_changeset
from gridfield.selection.compare import (
    compare_by_count,
    compare_by_count_then_options,
    compare_by_first_option,
)
from gridfield.selection.ids import SELECTION_IDS_SEPARATOR, SelectionState
from gridfield.selection.options import (
    OptionRegistry,
    SelectOption,
    SelectOptionCellData,
    SelectOptionColor,
)

__all__ = [
    # Options
    "SelectOption",
    "SelectOptionColor",
    "OptionRegistry",
    "SelectOptionCellData",
    # State
    "SelectionState",
    "SELECTION_IDS_SEPARATOR",
    # Operations
    "EditChangeset",
    "merge_changeset",
    "compare_by_count",
    "compare_by_first_option",
    "compare_by_count_then_options",
]
