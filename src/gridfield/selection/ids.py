"""Selection state: the value stored in a selection cell.

A cell stores the ids of its selected options as one flat string,
joined with ``SELECTION_IDS_SEPARATOR``.  Decoding is total: empty or
garbage strings produce an empty selection, empty tokens are dropped
and repeated ids keep their first occurrence.  Tokens are kept verbatim,
so any id without the separator survives a store and decode unchanged.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

SELECTION_IDS_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class SelectionState:
    """Ordered, duplicate-free sequence of option ids.

    Repeated ids passed at construction keep their first occurrence.
    Ids are not checked against any registry here, so a state may hold
    stale ids.
    """

    ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", tuple(dict.fromkeys(self.ids)))

    @classmethod
    def empty(cls) -> "SelectionState":
        return cls()

    @classmethod
    def from_ids(cls, ids: Iterable[str]) -> "SelectionState":
        """Return a state holding ``ids`` in order, dropping repeats."""
        return cls(tuple(ids))

    @classmethod
    def from_cell_str(cls, cell_str: str | None) -> "SelectionState":
        """Decode a stored cell string.

        Empty tokens and repeated ids are dropped; other tokens are kept
        as they are.  ``None`` decodes to the empty state.
        """
        if not cell_str:
            return cls()
        return cls.from_ids(
            token for token in cell_str.split(SELECTION_IDS_SEPARATOR) if token
        )

    def to_cell_str(self) -> str:
        """Encode to the stored string form."""
        return SELECTION_IDS_SEPARATOR.join(self.ids)

    def with_appended(self, option_id: str) -> "SelectionState":
        if option_id in self.ids:
            return self
        return SelectionState(self.ids + (option_id,))

    def without(self, option_ids: Iterable[str]) -> "SelectionState":
        removed = set(option_ids)
        return SelectionState(tuple(i for i in self.ids if i not in removed))

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    def __contains__(self, option_id: object) -> bool:
        return option_id in self.ids

    def __bool__(self) -> bool:
        return bool(self.ids)

    def __str__(self) -> str:
        return self.to_cell_str()
