"""Field-type dispatch: find the type option for a field's declared type.

Built-in type options are registered at import time under their
``FieldType`` tag values.  Installed packages may add more through the
``gridfield.type_options`` entry-point group, see
:meth:`PluginRegistry.load_entrypoints`.
"""
from __future__ import annotations

from typing import Any

from gridfield.core.field_type import FieldType
from gridfield.plugins.registry import PluginRegistry
from gridfield.type_options.base import TypeOption
from gridfield.type_options.checklist import ChecklistTypeOption
from gridfield.type_options.multi_select import MultiSelectTypeOption
from gridfield.type_options.single_select import SingleSelectTypeOption

ENTRYPOINT_GROUP = "gridfield.type_options"

type_option_registry: PluginRegistry[TypeOption[Any, Any]] = PluginRegistry(
    TypeOption, "type_options"
)

for _builtin in (ChecklistTypeOption, SingleSelectTypeOption, MultiSelectTypeOption):
    type_option_registry.register_class(_builtin.field_type.value, _builtin)


def _registry_key(field_type: FieldType | str) -> str:
    if isinstance(field_type, FieldType):
        return field_type.value
    return field_type.strip().lower().replace("-", "_")


def type_option_class(field_type: FieldType | str) -> type[TypeOption[Any, Any]]:
    """Return the type option class registered for ``field_type``.

    Raises
    ------
    PluginNotFoundError
        If no type option is registered for ``field_type``.
    """
    return type_option_registry.get(_registry_key(field_type))


def type_option_for(
    field_type: FieldType | str, data: dict[str, Any] | None = None
) -> TypeOption[Any, Any]:
    """Build the type option for ``field_type``.

    Parameters
    ----------
    field_type:
        The field's declared type, as a tag or its string value.
    data:
        Serialized configuration (see ``TypeOption.to_dict``).  ``None``
        builds the type's empty default configuration.
    """
    cls = type_option_class(field_type)
    return cls.from_dict(data or {})


def available_field_types() -> list[str]:
    """Return the registered field-type keys."""
    return type_option_registry.list_plugins()
