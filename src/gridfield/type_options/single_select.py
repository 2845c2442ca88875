"""Single-select type option."""
from __future__ import annotations

from gridfield.core.field_type import FieldType
from gridfield.filter.select import SelectOptionFilter
from gridfield.selection.changeset import EditChangeset, filter_insert_ids
from gridfield.selection.compare import compare_by_first_option
from gridfield.selection.ids import SelectionState
from gridfield.type_options.select_base import SelectTypeOption


class SingleSelectTypeOption(SelectTypeOption[SelectOptionFilter]):
    """Type option of a field whose cells hold at most one option.

    An edit that inserts several ids (e.g. a pasted id list) keeps only
    the first valid one and replaces whatever the cell held.  An edit
    with no valid insert only applies its deletes.
    """

    field_type = FieldType.SINGLE_SELECT

    def max_selectable(self) -> int:
        return 1

    def apply_changeset(
        self, changeset: EditChangeset, prior_cell_str: str | None
    ) -> tuple[str, SelectionState]:
        insert_ids = filter_insert_ids(changeset, self.options.valid_ids)
        if insert_ids:
            selection = SelectionState.from_ids(insert_ids[:1])
        else:
            selection = self.decode_cell_str(prior_cell_str)
        selection = selection.without(changeset.delete_ids)
        return selection.to_cell_str(), selection

    def apply_filter(
        self,
        filter_value: SelectOptionFilter,
        field_type: FieldType,
        cell_data: SelectionState,
    ) -> bool:
        if not field_type.is_single_select:
            return True
        return filter_value.is_visible(field_type, self.encode_for_display(cell_data))

    def apply_cmp(self, cell_data: SelectionState, other_cell_data: SelectionState) -> int:
        return compare_by_first_option(self.options, cell_data, other_cell_data)
