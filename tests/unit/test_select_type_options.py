"""Unit tests for the single- and multi-select type options."""
from __future__ import annotations

from gridfield.core.field_type import FieldType
from gridfield.filter.select import SelectOptionFilter, SelectOptionFilterCondition
from gridfield.selection.changeset import EditChangeset
from gridfield.selection.ids import SelectionState
from gridfield.selection.options import OptionRegistry
from gridfield.type_options.multi_select import MultiSelectTypeOption
from gridfield.type_options.single_select import SingleSelectTypeOption


def _state(*ids: str) -> SelectionState:
    return SelectionState(ids)


# ===========================================================================
# SingleSelectTypeOption
# ===========================================================================


class TestSingleSelect:
    def test_field_type_and_cap(self, registry: OptionRegistry) -> None:
        type_option = SingleSelectTypeOption(registry)
        assert type_option.field_type is FieldType.SINGLE_SELECT
        assert type_option.max_selectable() == 1

    def test_insert_replaces_current(self, registry: OptionRegistry) -> None:
        cell_str, state = SingleSelectTypeOption(registry).apply_changeset(
            EditChangeset.insert("B"), "A"
        )
        assert cell_str == "B"
        assert state == _state("B")

    def test_pasted_id_list_keeps_first_valid(self, registry: OptionRegistry) -> None:
        cell_str, _ = SingleSelectTypeOption(registry).apply_changeset(
            EditChangeset.insert("nope", "C", "A"), None
        )
        assert cell_str == "C"

    def test_delete_clears(self, registry: OptionRegistry) -> None:
        cell_str, state = SingleSelectTypeOption(registry).apply_changeset(
            EditChangeset.delete("A"), "A"
        )
        assert cell_str == ""
        assert state == SelectionState()

    def test_unknown_insert_keeps_prior(self, registry: OptionRegistry) -> None:
        cell_str, _ = SingleSelectTypeOption(registry).apply_changeset(
            EditChangeset.insert("nope"), "B"
        )
        assert cell_str == "B"

    def test_insert_and_delete_same_id_cancels(self, registry: OptionRegistry) -> None:
        cell_str, _ = SingleSelectTypeOption(registry).apply_changeset(
            EditChangeset.of(["A"], ["A"]), "B"
        )
        assert cell_str == ""

    def test_filter(self, registry: OptionRegistry) -> None:
        type_option = SingleSelectTypeOption(registry)
        is_a = SelectOptionFilter(SelectOptionFilterCondition.OPTION_IS, ("A",))
        assert type_option.apply_filter(is_a, FieldType.SINGLE_SELECT, _state("A"))
        assert not type_option.apply_filter(is_a, FieldType.SINGLE_SELECT, _state("B"))

    def test_filter_pass_through_for_other_type(self, registry: OptionRegistry) -> None:
        type_option = SingleSelectTypeOption(registry)
        is_a = SelectOptionFilter(SelectOptionFilterCondition.OPTION_IS, ("A",))
        assert type_option.apply_filter(is_a, FieldType.CHECKLIST, _state("B"))

    def test_sort_by_option_order(self, registry: OptionRegistry) -> None:
        type_option = SingleSelectTypeOption(registry)
        assert type_option.sort_cells(["C", "", "A", "B"]) == ["", "A", "B", "C"]


# ===========================================================================
# MultiSelectTypeOption
# ===========================================================================


class TestMultiSelect:
    def test_field_type_and_cap(self, registry: OptionRegistry) -> None:
        type_option = MultiSelectTypeOption(registry)
        assert type_option.field_type is FieldType.MULTI_SELECT
        assert type_option.max_selectable() is None

    def test_merge_like_checklist(self, registry: OptionRegistry) -> None:
        cell_str, _ = MultiSelectTypeOption(registry).apply_changeset(
            EditChangeset.of(["C"], ["A"]), "A,B"
        )
        assert cell_str == "B,C"

    def test_filter_option_is(self, registry: OptionRegistry) -> None:
        type_option = MultiSelectTypeOption(registry)
        is_ab = SelectOptionFilter(SelectOptionFilterCondition.OPTION_IS, ("A", "B"))
        assert type_option.apply_filter(is_ab, FieldType.MULTI_SELECT, _state("B", "A", "gone"))
        assert not type_option.apply_filter(is_ab, FieldType.MULTI_SELECT, _state("A"))

    def test_filter_pass_through_for_other_type(self, registry: OptionRegistry) -> None:
        type_option = MultiSelectTypeOption(registry)
        empty = SelectOptionFilter(SelectOptionFilterCondition.OPTION_IS_EMPTY)
        assert type_option.apply_filter(empty, FieldType.SINGLE_SELECT, _state("A"))

    def test_sort_by_count_then_order(self, registry: OptionRegistry) -> None:
        type_option = MultiSelectTypeOption(registry)
        assert type_option.sort_cells(["B,C", "A", "A,C", ""]) == ["", "A", "A,C", "B,C"]
