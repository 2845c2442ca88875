"""gridfield — pluggable cell-data types for tabular data engines.

Public API
----------
The stable public surface is everything exported from this module and
from the ``selection``, ``filter`` and ``type_options`` subpackages.

Example
-------
::

    import gridfield
    from gridfield.selection import EditChangeset

    # Load a checklist field's configuration
    checklist = gridfield.load("todo.yaml")

    # Merge an edit into the stored cell string
    cell_str, state = gridfield.apply_edit(
        checklist, "a1,b2", insert=["c3"], delete=["a1"]
    )

    # Decode a stored cell string
    state = gridfield.decode("b2,c3")

    gridfield.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from gridfield.core.field_type import FieldType
    from gridfield.selection.ids import SelectionState
    from gridfield.type_options.base import TypeOption


def load(path: str | Path) -> "TypeOption[Any, Any]":
    """Load a type option from a JSON or YAML configuration file.

    Parameters
    ----------
    path:
        Path to a ``.json``, ``.yaml`` or ``.yml`` document.

    Raises
    ------
    gridfield.core.TypeOptionDecodeError
        If the document is malformed.
    """
    from gridfield.type_options.serializer import TypeOptionSerializer

    return TypeOptionSerializer().load(path)


def type_option_for(
    field_type: "FieldType | str", data: dict[str, Any] | None = None
) -> "TypeOption[Any, Any]":
    """Build the type option registered for ``field_type``.

    Parameters
    ----------
    field_type:
        The field's declared type, e.g. ``"checklist"``.
    data:
        Serialized configuration; ``None`` gives an empty configuration.
    """
    from gridfield.type_options.registry import type_option_for as _type_option_for

    return _type_option_for(field_type, data)


def decode(cell_str: str | None) -> "SelectionState":
    """Decode a stored selection cell string.

    Never fails: blank tokens and repeated ids are dropped.
    """
    from gridfield.selection.ids import SelectionState

    return SelectionState.from_cell_str(cell_str)


def apply_edit(
    type_option: "TypeOption[Any, Any]",
    prior_cell_str: str | None,
    insert: Iterable[str] = (),
    delete: Iterable[str] = (),
) -> tuple[str, Any]:
    """Apply an insert/delete edit to a stored cell.

    Parameters
    ----------
    type_option:
        The field's type option.
    prior_cell_str:
        The cell's stored string, or ``None`` if it was never written.
    insert:
        Option ids to add.
    delete:
        Option ids to remove.

    Returns
    -------
    tuple[str, Any]
        The new stored string and the decoded cell value.
    """
    from gridfield.selection.changeset import EditChangeset

    changeset = EditChangeset.of(insert_ids=insert, delete_ids=delete)
    return type_option.apply_changeset(changeset, prior_cell_str)


__all__ = [
    "__version__",
    "load",
    "type_option_for",
    "decode",
    "apply_edit",
]
