"""Construction-time builders for selection type options.

A builder collects options before a field is created and produces the
finished, immutable type option::

    checklist = (
        ChecklistTypeOptionBuilder()
        .add_option(SelectOption.new("Write tests"))
        .add_option(SelectOption.new("Ship it"))
        .build()
    )

Builders can also be seeded from a serialized configuration with
``from_json`` or ``from_dict``.
"""
from __future__ import annotations

import json
from typing import Any, ClassVar, Generic, TypeVar

from gridfield.core.errors import TypeOptionDecodeError
from gridfield.core.field_type import FieldType
from gridfield.selection.options import OptionRegistry, SelectOption
from gridfield.type_options.checklist import ChecklistTypeOption
from gridfield.type_options.multi_select import MultiSelectTypeOption
from gridfield.type_options.select_base import SelectTypeOption
from gridfield.type_options.single_select import SingleSelectTypeOption

SelectT = TypeVar("SelectT", bound=SelectTypeOption[Any])
BuilderT = TypeVar("BuilderT", bound="SelectTypeOptionBuilder[Any]")


class SelectTypeOptionBuilder(Generic[SelectT]):
    """Accumulates options for one selection type option."""

    type_option_cls: ClassVar[type[SelectTypeOption[Any]]]

    def __init__(self) -> None:
        self._options = OptionRegistry()
        self._disable_color = False

    @property
    def field_type(self) -> FieldType:
        return self.type_option_cls.field_type

    def add_option(self: BuilderT, option: SelectOption) -> BuilderT:
        """Append ``option``; an option with the same id is replaced in place."""
        self._options = self._options.insert(option)
        return self

    def add_label(self: BuilderT, label: str) -> BuilderT:
        """Append a new option for ``label`` colored by least use."""
        return self.add_option(self._options.create_option(label))

    def disable_color(self: BuilderT, disabled: bool = True) -> BuilderT:
        self._disable_color = disabled
        return self

    def build(self) -> SelectT:
        return self.type_option_cls(  # type: ignore[return-value]
            options=self._options, disable_color=self._disable_color
        )

    @classmethod
    def from_dict(cls: type[BuilderT], data: dict[str, Any]) -> BuilderT:
        """Seed a builder from a serialized configuration.

        A ``field_type`` entry, if present, must match the builder's.
        """
        builder = cls()
        declared = data.get("field_type")
        if declared is not None and declared != builder.field_type.value:
            raise TypeOptionDecodeError(
                f"expected field_type {builder.field_type.value!r}, got {declared!r}"
            )
        seed = builder.type_option_cls.from_dict(data)
        builder._options = seed.options
        builder._disable_color = seed.disable_color
        return builder

    @classmethod
    def from_json(cls: type[BuilderT], text: str) -> BuilderT:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TypeOptionDecodeError(f"invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise TypeOptionDecodeError("type option JSON must be an object")
        return cls.from_dict(data)


class ChecklistTypeOptionBuilder(SelectTypeOptionBuilder[ChecklistTypeOption]):
    type_option_cls = ChecklistTypeOption


class SingleSelectTypeOptionBuilder(SelectTypeOptionBuilder[SingleSelectTypeOption]):
    type_option_cls = SingleSelectTypeOption


class MultiSelectTypeOptionBuilder(SelectTypeOptionBuilder[MultiSelectTypeOption]):
    type_option_cls = MultiSelectTypeOption


_BUILDERS: dict[FieldType, type[SelectTypeOptionBuilder[Any]]] = {
    FieldType.CHECKLIST: ChecklistTypeOptionBuilder,
    FieldType.SINGLE_SELECT: SingleSelectTypeOptionBuilder,
    FieldType.MULTI_SELECT: MultiSelectTypeOptionBuilder,
}


def builder_for(field_type: FieldType | str) -> SelectTypeOptionBuilder[Any]:
    """Return a new, empty builder for ``field_type``."""
    return _BUILDERS[FieldType.parse(field_type)]()
