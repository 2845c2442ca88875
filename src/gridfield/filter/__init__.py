"""Cell filters for option-based field types."""
from __future__ import annotations

from gridfield.filter.checklist import ChecklistFilter, ChecklistFilterCondition
from gridfield.filter.select import SelectOptionFilter, SelectOptionFilterCondition

__all__ = [
    "ChecklistFilter",
    "ChecklistFilterCondition",
    "SelectOptionFilter",
    "SelectOptionFilterCondition",
]
