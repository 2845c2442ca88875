"""Three-way comparators used when sorting selection cells.

Comparators return ``-1``, ``0`` or ``1`` and are meant to be wrapped
with ``functools.cmp_to_key``.  Equal results leave tie ordering to the
caller's (stable) sort.
"""
from __future__ import annotations

from gridfield.selection.ids import SelectionState
from gridfield.selection.options import OptionRegistry


def _cmp(left: int, right: int) -> int:
    return (left > right) - (left < right)


def compare_by_count(a: SelectionState, b: SelectionState) -> int:
    """Order by number of recorded ids, fewer first.

    Ids are counted raw: stale ids that no longer resolve still count.
    """
    return _cmp(len(a), len(b))


def _positions(options: OptionRegistry, selection: SelectionState) -> list[int]:
    positions = []
    for option_id in selection:
        position = options.index_of(option_id)
        if position is not None:
            positions.append(position)
    return positions


def compare_by_first_option(
    options: OptionRegistry, a: SelectionState, b: SelectionState
) -> int:
    """Order by registry position of the first resolvable option.

    Cells with nothing resolvable sort before cells with an option.
    """
    left = _positions(options, a)[:1]
    right = _positions(options, b)[:1]
    if not left or not right:
        return _cmp(len(left), len(right))
    return _cmp(left[0], right[0])


def compare_by_count_then_options(
    options: OptionRegistry, a: SelectionState, b: SelectionState
) -> int:
    """Order by raw count, then pairwise by registry position."""
    ordering = compare_by_count(a, b)
    if ordering:
        return ordering
    for left, right in zip(_positions(options, a), _positions(options, b)):
        if left != right:
            return _cmp(left, right)
    return 0
