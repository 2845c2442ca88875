"""Visibility filter for checklist cells.

A checklist filter looks only at the options a cell selects that still
exist in the field's registry; stale ids are ignored.  An empty
registry can be neither complete nor incomplete.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from gridfield.selection.ids import SelectionState
from gridfield.selection.options import OptionRegistry


class ChecklistFilterCondition(Enum):
    """Visibility modes for a checklist column."""

    IS_COMPLETE = auto()
    IS_INCOMPLETE = auto()
    IS_EMPTY = auto()
    IS_NOT_EMPTY = auto()

    @classmethod
    def parse(cls, value: str) -> "ChecklistFilterCondition":
        """Look up a condition by name, e.g. ``"is-complete"``."""
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            known = ", ".join(c.name.lower().replace("_", "-") for c in cls)
            raise ValueError(
                f"Unknown checklist condition {value!r}. Known conditions: {known}"
            ) from None


@dataclass(frozen=True, slots=True)
class ChecklistFilter:
    """A checklist filter: one visibility condition."""

    condition: ChecklistFilterCondition

    def is_visible(self, options: OptionRegistry, selection: SelectionState) -> bool:
        """Return True if a cell holding ``selection`` passes the filter.

        Parameters
        ----------
        options:
            The field's full option registry.
        selection:
            The cell's decoded selection; unresolved ids do not count.
        """
        selected = len(options.resolve(selection))
        total = len(options)
        is_complete = total > 0 and selected == total

        if self.condition is ChecklistFilterCondition.IS_COMPLETE:
            return is_complete
        if self.condition is ChecklistFilterCondition.IS_INCOMPLETE:
            return total > 0 and not is_complete
        if self.condition is ChecklistFilterCondition.IS_EMPTY:
            return selected == 0
        return selected > 0
