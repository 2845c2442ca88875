"""Abstract base class for field type options.

A type option is the per-field configuration of one field type plus the
behavior the table engine dispatches to for cells of that field.  Each
field type (checklist, single-select, ...) implements ``TypeOption``
and registers itself in ``gridfield.type_options.type_option_registry``
under its ``FieldType`` tag.

The contract for every cell operation is:

* **Pure** — no side effects; the type option is never mutated.
* **Total** — malformed input is normalized, not rejected.  The single
  declared failure channel is ``CellDecodeError`` from
  :meth:`TypeOption.decode_cell_str`.
"""
from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Generic, TypeVar

from gridfield.core.field_type import FieldType
from gridfield.selection.changeset import EditChangeset

CellDataT = TypeVar("CellDataT")
FilterT = TypeVar("FilterT")
TypeOptionT = TypeVar("TypeOptionT", bound="TypeOption[Any, Any]")


class TypeOption(ABC, Generic[CellDataT, FilterT]):
    """Configuration and cell behavior of one field type.

    Subclasses set :attr:`field_type` and implement the abstract
    methods.  ``CellDataT`` is the decoded cell value and ``FilterT`` the
    filter value the type understands.
    """

    field_type: ClassVar[FieldType]

    @abstractmethod
    def decode_cell_str(self, cell_str: str | None) -> CellDataT:
        """Decode a stored cell string.

        Raises
        ------
        CellDecodeError
            If the string cannot be interpreted by this field type.
        """

    @abstractmethod
    def apply_changeset(
        self, changeset: EditChangeset, prior_cell_str: str | None
    ) -> tuple[str, CellDataT]:
        """Apply ``changeset`` to a cell.

        Parameters
        ----------
        changeset:
            The requested edit.
        prior_cell_str:
            The cell's stored string, or ``None`` if it was never written.

        Returns
        -------
        tuple[str, CellDataT]
            The new stored string and the decoded value it encodes.
        """

    @abstractmethod
    def apply_filter(
        self, filter_value: FilterT, field_type: FieldType, cell_data: CellDataT
    ) -> bool:
        """Return True if the row holding ``cell_data`` stays visible.

        ``field_type`` is the type of the row's cell.  When it is not
        this type option's field type the filter does not apply and the
        row is visible.
        """

    @abstractmethod
    def apply_cmp(self, cell_data: CellDataT, other_cell_data: CellDataT) -> int:
        """Three-way compare two decoded cells: -1, 0 or 1."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize the configuration to a JSON-compatible dict."""

    @classmethod
    @abstractmethod
    def from_dict(cls: type[TypeOptionT], data: dict[str, Any]) -> TypeOptionT:
        """Build a type option from the output of :meth:`to_dict`.

        Raises
        ------
        TypeOptionDecodeError
            If ``data`` is not a valid configuration for this type.
        """

    # ------------------------------------------------------------------
    # Conveniences built on the abstract operations
    # ------------------------------------------------------------------

    def sort_key(self) -> Callable[[CellDataT], Any]:
        """Return a ``sorted`` key ordering decoded cells by :meth:`apply_cmp`."""
        return functools.cmp_to_key(self.apply_cmp)

    def sort_cells(
        self, cell_strs: Iterable[str], reverse: bool = False
    ) -> list[str]:
        """Return stored cell strings sorted by their decoded values.

        The sort is stable, so cells that compare equal keep their
        input order.
        """
        key = self.sort_key()
        return sorted(
            cell_strs,
            key=lambda cell_str: key(self.decode_cell_str(cell_str)),
            reverse=reverse,
        )

    def filter_cells(
        self,
        filter_value: FilterT,
        cell_strs: Iterable[str],
        field_type: FieldType | None = None,
    ) -> list[str]:
        """Return the stored cell strings that pass ``filter_value``.

        ``field_type`` defaults to this type option's own field type.
        """
        row_type = field_type if field_type is not None else self.field_type
        return [
            cell_str
            for cell_str in cell_strs
            if self.apply_filter(filter_value, row_type, self.decode_cell_str(cell_str))
        ]
