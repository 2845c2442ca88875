#!/usr/bin/env python3
"""Example: Quickstart — gridfield

Minimal working example: build a checklist field, edit a cell,
then filter and sort a few rows.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install gridfield
"""
from __future__ import annotations

import gridfield
from gridfield.core import FieldType
from gridfield.filter import ChecklistFilter, ChecklistFilterCondition
from gridfield.selection import SelectOption
from gridfield.type_options import ChecklistTypeOptionBuilder, TypeOptionSerializer


def main() -> None:
    print(f"gridfield version: {gridfield.__version__}")

    # Step 1: Build a checklist field with three items
    checklist = (
        ChecklistTypeOptionBuilder()
        .add_option(SelectOption("A", "Draft"))
        .add_option(SelectOption("B", "Review"))
        .add_option(SelectOption("C", "Ship"))
        .build()
    )
    print(TypeOptionSerializer().to_yaml(checklist))

    # Step 2: Edit a stored cell: check C, uncheck A
    cell_str, state = gridfield.apply_edit(checklist, "A,B", insert=["C"], delete=["A"])
    labels = [option.label for option in checklist.encode_for_display(state)]
    print(f"Stored cell: {cell_str!r} -> {labels}")

    # Step 3: Filter rows
    rows = ["A,B,C", cell_str, "", "A"]
    for condition in ChecklistFilterCondition:
        visible = checklist.filter_cells(ChecklistFilter(condition), rows, FieldType.CHECKLIST)
        print(f"  {condition.name:<14} {visible}")

    # Step 4: Sort rows by number of checked items
    print(f"Sorted: {checklist.sort_cells(rows)}")


if __name__ == "__main__":
    main()
