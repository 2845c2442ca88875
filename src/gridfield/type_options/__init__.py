"""Field type options: per-field configuration plus cell behavior.

Public API
----------
``type_option_for`` builds the type option for a field's declared type;
``TypeOptionSerializer`` loads and saves configurations; the builders
assemble options at field-creation time.

Example
-------
::

    from gridfield.type_options import type_option_for
    from gridfield.selection import EditChangeset

    checklist = type_option_for("checklist", config)
    cell_str, state = checklist.apply_changeset(EditChangeset.insert("a1"), None)
"""
from __future__ import annotations

from gridfield.type_options.base import TypeOption
from gridfield.type_options.builder import (
    ChecklistTypeOptionBuilder,
    MultiSelectTypeOptionBuilder,
    SelectTypeOptionBuilder,
    SingleSelectTypeOptionBuilder,
    builder_for,
)
from gridfield.type_options.checklist import ChecklistTypeOption
from gridfield.type_options.multi_select import MultiSelectTypeOption
from gridfield.type_options.registry import (
    ENTRYPOINT_GROUP,
    available_field_types,
    type_option_class,
    type_option_for,
    type_option_registry,
)
from gridfield.type_options.select_base import SelectTypeOption
from gridfield.type_options.serializer import TypeOptionSerializer
from gridfield.type_options.single_select import SingleSelectTypeOption

__all__ = [
    # Base classes
    "TypeOption",
    "SelectTypeOption",
    # Type options
    "ChecklistTypeOption",
    "SingleSelectTypeOption",
    "MultiSelectTypeOption",
    # Builders
    "SelectTypeOptionBuilder",
    "ChecklistTypeOptionBuilder",
    "SingleSelectTypeOptionBuilder",
    "MultiSelectTypeOptionBuilder",
    "builder_for",
    # Dispatch
    "type_option_registry",
    "type_option_class",
    "type_option_for",
    "available_field_types",
    "ENTRYPOINT_GROUP",
    # Serialization
    "TypeOptionSerializer",
]
