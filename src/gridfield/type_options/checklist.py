"""Checklist type option.

A checklist cell is a to-do list inside a table cell: the options of the
field are the items, and the cell records which of them are checked.
There is no cap on how many items a cell may check.
"""
from __future__ import annotations

from gridfield.core.field_type import FieldType
from gridfield.filter.checklist import ChecklistFilter
from gridfield.selection.compare import compare_by_count
from gridfield.selection.ids import SelectionState
from gridfield.type_options.select_base import SelectTypeOption


class ChecklistTypeOption(SelectTypeOption[ChecklistFilter]):
    """Type option of a checklist field.

    Example
    -------
    ::

        checklist = ChecklistTypeOption([a, b, c])
        cell_str, state = checklist.apply_changeset(
            EditChangeset.of(insert_ids=[c.id], delete_ids=[a.id]),
            f"{a.id},{b.id}",
        )
    """

    field_type = FieldType.CHECKLIST

    def max_selectable(self) -> None:
        return None

    def apply_filter(
        self,
        filter_value: ChecklistFilter,
        field_type: FieldType,
        cell_data: SelectionState,
    ) -> bool:
        if not field_type.is_checklist:
            return True
        return filter_value.is_visible(self.options, cell_data)

    def apply_cmp(self, cell_data: SelectionState, other_cell_data: SelectionState) -> int:
        # Counts recorded ids, stale ones included; filtering counts only resolved ids.
        return compare_by_count(cell_data, other_cell_data)
