"""Unit tests for gridfield.selection.changeset — merging edits into a selection."""
from __future__ import annotations

import logging

import pytest

from gridfield.selection.changeset import EditChangeset, filter_insert_ids, merge_changeset
from gridfield.selection.ids import SelectionState

VALID = frozenset({"A", "B", "C"})


def _state(*ids: str) -> SelectionState:
    return SelectionState(ids)


# ===========================================================================
# EditChangeset
# ===========================================================================


class TestEditChangeset:
    def test_insert_constructor(self) -> None:
        assert EditChangeset.insert("A", "B") == EditChangeset(insert_ids=("A", "B"))

    def test_delete_constructor(self) -> None:
        assert EditChangeset.delete("A") == EditChangeset(delete_ids=("A",))

    def test_of_accepts_lists(self) -> None:
        changeset = EditChangeset.of(["A"], ["B"])
        assert changeset.insert_ids == ("A",)
        assert changeset.delete_ids == ("B",)

    def test_is_empty(self) -> None:
        assert EditChangeset().is_empty
        assert not EditChangeset.insert("A").is_empty

    def test_filter_insert_ids_drops_unknown(self) -> None:
        assert filter_insert_ids(EditChangeset.insert("A", "Z", "C"), VALID) == ["A", "C"]


# ===========================================================================
# merge_changeset: no prior state
# ===========================================================================


class TestMergeWithoutPrior:
    def test_result_is_inserts_in_order(self) -> None:
        assert merge_changeset(None, EditChangeset.insert("B", "A"), VALID) == _state("B", "A")

    def test_unknown_insert_yields_empty(self) -> None:
        assert merge_changeset(None, EditChangeset.insert("unknown"), VALID) == SelectionState()

    def test_duplicate_inserts_deduplicated(self) -> None:
        assert merge_changeset(None, EditChangeset.insert("A", "A", "B"), VALID) == _state("A", "B")

    def test_insert_and_delete_same_id_cancels(self) -> None:
        changeset = EditChangeset.of(insert_ids=["A", "B"], delete_ids=["A"])
        assert merge_changeset(None, changeset, VALID) == _state("B")

    def test_empty_valid_ids_drops_everything(self) -> None:
        assert merge_changeset(None, EditChangeset.insert("A"), frozenset()) == SelectionState()


# ===========================================================================
# merge_changeset: with prior state
# ===========================================================================


class TestMergeWithPrior:
    def test_prior_built_with_repeats_yields_unique_ids(self) -> None:
        merged = merge_changeset(SelectionState(("A", "A", "B")), EditChangeset(), VALID)
        assert merged.ids == ("A", "B")
        assert len(merged) == len(set(merged))

    def test_appends_new_ids_at_end(self) -> None:
        assert merge_changeset(_state("B"), EditChangeset.insert("A"), VALID) == _state("B", "A")

    def test_existing_insert_does_not_move(self) -> None:
        result = merge_changeset(_state("A", "B"), EditChangeset.insert("A"), VALID)
        assert result == _state("A", "B")

    def test_delete_pre_existing(self) -> None:
        result = merge_changeset(_state("A", "B"), EditChangeset.delete("A"), VALID)
        assert result == _state("B")

    def test_delete_unknown_is_noop(self) -> None:
        result = merge_changeset(_state("A"), EditChangeset.delete("Z"), VALID)
        assert result == _state("A")

    def test_delete_removes_stale_prior_id(self) -> None:
        result = merge_changeset(_state("gone", "A"), EditChangeset.delete("gone"), VALID)
        assert result == _state("A")

    def test_stale_prior_ids_are_kept(self) -> None:
        result = merge_changeset(_state("gone"), EditChangeset.insert("A"), VALID)
        assert result == _state("gone", "A")

    def test_inserts_applied_before_deletes(self) -> None:
        changeset = EditChangeset.of(insert_ids=["C"], delete_ids=["C"])
        assert "C" not in merge_changeset(_state("A"), changeset, VALID)

    def test_end_to_end_example(self) -> None:
        changeset = EditChangeset.of(insert_ids=["C"], delete_ids=["A"])
        result = merge_changeset(_state("A", "B"), changeset, VALID)
        assert result == _state("B", "C")
        assert result.to_cell_str() == "B,C"

    def test_does_not_mutate_prior(self) -> None:
        prior = _state("A")
        merge_changeset(prior, EditChangeset.of(["B"], ["A"]), VALID)
        assert prior == _state("A")

    def test_empty_changeset_returns_prior(self) -> None:
        assert merge_changeset(_state("A", "B"), EditChangeset(), VALID) == _state("A", "B")


# ===========================================================================
# Algebraic properties
# ===========================================================================


_PRIORS = [None, SelectionState(), _state("A"), _state("C", "B"), _state("gone", "A")]


class TestMergeProperties:
    @pytest.mark.parametrize("prior", _PRIORS)
    @pytest.mark.parametrize("option_id", sorted(VALID))
    def test_insert_is_idempotent(self, prior: SelectionState | None, option_id: str) -> None:
        once = merge_changeset(prior, EditChangeset.insert(option_id), VALID)
        twice = merge_changeset(once, EditChangeset.insert(option_id), VALID)
        assert twice == once

    @pytest.mark.parametrize("prior", _PRIORS)
    def test_delete_is_idempotent(self, prior: SelectionState | None) -> None:
        once = merge_changeset(prior, EditChangeset.delete("A"), VALID)
        twice = merge_changeset(once, EditChangeset.delete("A"), VALID)
        assert twice == once

    @pytest.mark.parametrize("prior", _PRIORS)
    @pytest.mark.parametrize("option_id", sorted(VALID))
    def test_insert_then_delete_cancels(self, prior: SelectionState | None, option_id: str) -> None:
        changeset = EditChangeset.of(insert_ids=[option_id], delete_ids=[option_id])
        assert option_id not in merge_changeset(prior, changeset, VALID)

    def test_order_preserved_across_edits(self) -> None:
        state = merge_changeset(None, EditChangeset.insert("A"), VALID)
        state = merge_changeset(state, EditChangeset.insert("B"), VALID)
        assert state == _state("A", "B")

    def test_unknown_insert_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="gridfield.selection.changeset"):
            merge_changeset(None, EditChangeset.insert("ghost"), VALID)
        assert "ghost" in caplog.text
