"""Merging a cell edit into a previously stored selection.

An ``EditChangeset`` is the delta a caller asks for: option ids to
insert and option ids to delete.  ``merge_changeset`` reconciles it with
the prior state.  Inserts are validated against the field's current
options and applied before deletes, so an id that is both inserted and
deleted in the same changeset ends up absent.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Set
from dataclasses import dataclass

from gridfield.selection.ids import SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EditChangeset:
    """Requested delta for one cell.

    Parameters
    ----------
    insert_ids:
        Option ids to add, in the order they should be appended.
    delete_ids:
        Option ids to remove.
    """

    insert_ids: tuple[str, ...] = ()
    delete_ids: tuple[str, ...] = ()

    @classmethod
    def insert(cls, *option_ids: str) -> "EditChangeset":
        return cls(insert_ids=option_ids)

    @classmethod
    def delete(cls, *option_ids: str) -> "EditChangeset":
        return cls(delete_ids=option_ids)

    @classmethod
    def of(
        cls,
        insert_ids: Iterable[str] = (),
        delete_ids: Iterable[str] = (),
    ) -> "EditChangeset":
        return cls(insert_ids=tuple(insert_ids), delete_ids=tuple(delete_ids))

    @property
    def is_empty(self) -> bool:
        return not self.insert_ids and not self.delete_ids


def filter_insert_ids(changeset: EditChangeset, valid_ids: Set[str]) -> list[str]:
    """Return the changeset's insert ids that exist in ``valid_ids``.

    Unknown ids are dropped silently; inserting a reference to a deleted
    option is a no-op.
    """
    accepted = []
    for option_id in changeset.insert_ids:
        if option_id in valid_ids:
            accepted.append(option_id)
        else:
            logger.debug("Ignoring insert of unknown option id %r", option_id)
    return accepted


def merge_changeset(
    prior: SelectionState | None,
    changeset: EditChangeset,
    valid_ids: Set[str],
) -> SelectionState:
    """Apply ``changeset`` to ``prior`` and return the new selection.

    Parameters
    ----------
    prior:
        The cell's current selection, or ``None`` if the cell has never
        been written.
    changeset:
        The requested inserts and deletes.
    valid_ids:
        Ids of the options currently defined for the field.

    Returns
    -------
    SelectionState
        A new, duplicate-free selection.  The prior order is kept (an
        absent prior counts as empty), accepted inserts not already
        present are appended in changeset order, and then every id in
        ``delete_ids`` is removed.
    """
    insert_ids = filter_insert_ids(changeset, valid_ids)

    merged = prior if prior is not None else SelectionState.empty()
    for option_id in insert_ids:
        merged = merged.with_appended(option_id)
    return merged.without(changeset.delete_ids)
