"""Multi-select type option."""
from __future__ import annotations

from gridfield.core.field_type import FieldType
from gridfield.filter.select import SelectOptionFilter
from gridfield.selection.compare import compare_by_count_then_options
from gridfield.selection.ids import SelectionState
from gridfield.type_options.select_base import SelectTypeOption


class MultiSelectTypeOption(SelectTypeOption[SelectOptionFilter]):
    """Type option of a field whose cells hold any number of options."""

    field_type = FieldType.MULTI_SELECT

    def max_selectable(self) -> None:
        return None

    def apply_filter(
        self,
        filter_value: SelectOptionFilter,
        field_type: FieldType,
        cell_data: SelectionState,
    ) -> bool:
        if not field_type.is_multi_select:
            return True
        return filter_value.is_visible(field_type, self.encode_for_display(cell_data))

    def apply_cmp(self, cell_data: SelectionState, other_cell_data: SelectionState) -> int:
        return compare_by_count_then_options(self.options, cell_data, other_cell_data)
