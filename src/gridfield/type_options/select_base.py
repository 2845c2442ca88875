"""Behavior shared by every option-based type option.

Single-select, multi-select and checklist fields all store a
``SelectionState`` that references an ``OptionRegistry``.  This module
holds what they have in common: decoding, display resolution, option
editing and the default changeset merge.
"""
from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, TypeVar

from gridfield.core.errors import TypeOptionDecodeError
from gridfield.selection.changeset import EditChangeset, merge_changeset
from gridfield.selection.ids import SelectionState
from gridfield.selection.options import (
    OptionRegistry,
    SelectOption,
    SelectOptionCellData,
)
from gridfield.type_options.base import FilterT, TypeOption

SelfT = TypeVar("SelfT", bound="SelectTypeOption[Any]")


class SelectTypeOption(TypeOption[SelectionState, FilterT]):
    """Base class for type options whose cells select registry options.

    Instances are immutable; option edits return a new type option.

    Parameters
    ----------
    options:
        The field's options in display order.
    disable_color:
        When True, display layers render options without their colors.
    """

    def __init__(
        self,
        options: OptionRegistry | Iterable[SelectOption] = (),
        disable_color: bool = False,
    ) -> None:
        if not isinstance(options, OptionRegistry):
            options = OptionRegistry.of(options)
        self._options = options
        self._disable_color = disable_color

    @property
    def options(self) -> OptionRegistry:
        return self._options

    @property
    def disable_color(self) -> bool:
        return self._disable_color

    @abstractmethod
    def max_selectable(self) -> int | None:
        """Maximum number of options a cell may select; ``None`` is unbounded."""

    # ------------------------------------------------------------------
    # Cell operations
    # ------------------------------------------------------------------

    def decode_cell_str(self, cell_str: str | None) -> SelectionState:
        return SelectionState.from_cell_str(cell_str)

    def encode_for_display(self, selection: SelectionState) -> tuple[SelectOption, ...]:
        """Resolve ``selection`` to options in selection order.

        Ids that no longer exist in the registry are skipped.
        """
        return self._options.resolve(selection)

    def cell_data(self, selection: SelectionState) -> SelectOptionCellData:
        """Return the display payload for a cell."""
        return SelectOptionCellData(
            options=self._options.options,
            select_options=self.encode_for_display(selection),
        )

    def apply_changeset(
        self, changeset: EditChangeset, prior_cell_str: str | None
    ) -> tuple[str, SelectionState]:
        prior = None if prior_cell_str is None else self.decode_cell_str(prior_cell_str)
        merged = merge_changeset(prior, changeset, self._options.valid_ids)
        return merged.to_cell_str(), merged

    # ------------------------------------------------------------------
    # Option editing
    # ------------------------------------------------------------------

    def _replace_options(self: SelfT, options: OptionRegistry) -> SelfT:
        return type(self)(options=options, disable_color=self._disable_color)

    def create_option(self, label: str) -> SelectOption:
        """Build (but do not add) an option colored by least use."""
        return self._options.create_option(label)

    def insert_option(self: SelfT, option: SelectOption) -> SelfT:
        """Return a copy with ``option`` added or replaced by id."""
        return self._replace_options(self._options.insert(option))

    def delete_option(self: SelfT, option_id: str) -> SelfT:
        """Return a copy without the option ``option_id``."""
        return self._replace_options(self._options.delete(option_id))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "field_type": self.field_type.value,
            "options": [option.to_dict() for option in self._options],
            "disable_color": self._disable_color,
        }

    @classmethod
    def from_dict(cls: type[SelfT], data: dict[str, Any]) -> SelfT:
        options = data.get("options") or []
        if not isinstance(options, list):
            raise TypeOptionDecodeError(
                f"'options' must be a list, got {type(options).__name__}"
            )
        disable_color = data.get("disable_color", False)
        if not isinstance(disable_color, bool):
            raise TypeOptionDecodeError(
                f"'disable_color' must be a boolean, got {disable_color!r}"
            )
        return cls(
            options=[SelectOption.from_dict(option) for option in options],
            disable_color=disable_color,
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._options == other._options  # type: ignore[attr-defined]
            and self._disable_color == other._disable_color  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        return hash((type(self), self._options, self._disable_color))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(options={len(self._options)}, "
            f"disable_color={self._disable_color})"
        )
