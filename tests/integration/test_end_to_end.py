"""End-to-end: configure a checklist field, edit cells, then filter and sort rows."""
from __future__ import annotations

from gridfield.core.field_type import FieldType
from gridfield.filter import ChecklistFilter, ChecklistFilterCondition
from gridfield.selection import EditChangeset, SelectOption
from gridfield.type_options import (
    ChecklistTypeOption,
    ChecklistTypeOptionBuilder,
    TypeOptionSerializer,
)


def _build_checklist() -> ChecklistTypeOption:
    return (
        ChecklistTypeOptionBuilder()
        .add_option(SelectOption("A", "Draft"))
        .add_option(SelectOption("B", "Review"))
        .add_option(SelectOption("C", "Ship"))
        .build()
    )


def test_edit_filter_sort_pipeline() -> None:
    checklist = _build_checklist()

    # The worked example: "A,B" + insert C, delete A
    cell_str, state = checklist.apply_changeset(EditChangeset.of(["C"], ["A"]), "A,B")
    assert cell_str == "B,C"
    assert [o.label for o in checklist.encode_for_display(state)] == ["Review", "Ship"]

    complete = ChecklistFilter(ChecklistFilterCondition.IS_COMPLETE)
    not_empty = ChecklistFilter(ChecklistFilterCondition.IS_NOT_EMPTY)
    assert checklist.apply_filter(complete, FieldType.CHECKLIST, state) is False
    assert checklist.apply_filter(not_empty, FieldType.CHECKLIST, state) is True

    # A table of rows, each written through successive edits
    rows: dict[str, str | None] = {"r1": None, "r2": None, "r3": None}
    edits = [
        ("r1", EditChangeset.insert("A", "B", "C")),
        ("r2", EditChangeset.insert("B")),
        ("r3", EditChangeset.insert("C", "ghost")),
        ("r3", EditChangeset.delete("C")),
        ("r2", EditChangeset.insert("A")),
    ]
    for row_id, changeset in edits:
        rows[row_id], _ = checklist.apply_changeset(changeset, rows[row_id])

    assert rows == {"r1": "A,B,C", "r2": "B,A", "r3": ""}

    stored = [cell for cell in rows.values() if cell is not None]
    assert checklist.filter_cells(complete, stored) == ["A,B,C"]
    assert checklist.sort_cells(stored) == ["", "B,A", "A,B,C"]


def test_option_removed_after_cells_written() -> None:
    checklist = _build_checklist()
    cell_str, _ = checklist.apply_changeset(EditChangeset.insert("A", "B", "C"), None)

    # The field drops option C; the cell still references it
    trimmed = checklist.delete_option("C")
    state = trimmed.decode_cell_str(cell_str)

    complete = ChecklistFilter(ChecklistFilterCondition.IS_COMPLETE)
    assert trimmed.apply_filter(complete, FieldType.CHECKLIST, state) is True
    assert [o.id for o in trimmed.encode_for_display(state)] == ["A", "B"]
    # Sorting still counts the stale id
    assert trimmed.apply_cmp(state, trimmed.decode_cell_str("A,B")) == 1


def test_configuration_survives_yaml_round_trip() -> None:
    serializer = TypeOptionSerializer()
    checklist = _build_checklist()
    reloaded = serializer.from_yaml(serializer.to_yaml(checklist))
    assert reloaded == checklist
    assert reloaded.apply_changeset(EditChangeset.insert("B"), "A")[0] == "A,B"
