"""Visibility filter for single- and multi-select cells."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from gridfield.core.field_type import FieldType
from gridfield.selection.options import SelectOption


class SelectOptionFilterCondition(Enum):
    """Conditions of a select-option filter."""

    OPTION_IS = auto()
    OPTION_IS_NOT = auto()
    OPTION_IS_EMPTY = auto()
    OPTION_IS_NOT_EMPTY = auto()

    @classmethod
    def parse(cls, value: str) -> "SelectOptionFilterCondition":
        """Look up a condition by name, with or without the ``option-`` prefix."""
        key = value.strip().upper().replace("-", "_")
        if not key.startswith("OPTION_"):
            key = f"OPTION_{key}"
        try:
            return cls[key]
        except KeyError:
            known = ", ".join(c.name.lower().replace("_", "-") for c in cls)
            raise ValueError(
                f"Unknown select option condition {value!r}. Known conditions: {known}"
            ) from None


@dataclass(frozen=True, slots=True)
class SelectOptionFilter:
    """A select-option filter.

    Parameters
    ----------
    condition:
        How the selected options are tested.
    option_ids:
        Option ids the ``OPTION_IS``/``OPTION_IS_NOT`` conditions test
        against.  An empty tuple makes those conditions match every row.
    """

    condition: SelectOptionFilterCondition
    option_ids: tuple[str, ...] = ()

    def is_visible(
        self, field_type: FieldType, selected_options: Sequence[SelectOption]
    ) -> bool:
        """Return True if a cell with ``selected_options`` passes the filter.

        For single-select cells only the first selected option counts.
        For multi-select cells ``OPTION_IS`` requires the selected set to
        equal the filter's id set.
        """
        selected_ids = [option.id for option in selected_options]

        if self.condition is SelectOptionFilterCondition.OPTION_IS_EMPTY:
            return not selected_ids
        if self.condition is SelectOptionFilterCondition.OPTION_IS_NOT_EMPTY:
            return bool(selected_ids)
        if not self.option_ids:
            return True

        matches = self._matches(field_type, selected_ids)
        if self.condition is SelectOptionFilterCondition.OPTION_IS:
            return matches
        return not matches

    def _matches(self, field_type: FieldType, selected_ids: list[str]) -> bool:
        if field_type.is_single_select:
            return bool(selected_ids) and selected_ids[0] in self.option_ids
        return set(selected_ids) == set(self.option_ids)
