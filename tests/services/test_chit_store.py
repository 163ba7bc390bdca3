"""
Unit Tests for ChitStore

List / remaining-pool bookkeeping, draws without replacement and persistence.
"""

import random
from collections import Counter

import pytest

from src.chit_picker.adapters.chit_storage_memory import InMemoryChitStorage
from src.chit_picker.domain import CHITS_KEY, ChitIndexError, EmptyPoolError
from src.chit_picker.services.chit_store import ChitStore


def _store_with(storage, texts, rng=None):
    storage.set(CHITS_KEY, texts)
    store = ChitStore(storage, rng=rng)
    store.load()
    return store


class TestLoad:
    def test_load_when_nothing_saved_then_empty(self, chit_store):
        assert chit_store.load() == []
        assert chit_store.items == []
        assert chit_store.remaining == []

    def test_load_when_saved_then_list_and_pool_identical(self, storage):
        store = _store_with(storage, ["a", "b", "a"])
        assert store.items == ["a", "b", "a"]
        assert store.remaining == ["a", "b", "a"]
        assert store.last_drawn is None


class TestAddItems:
    def test_add_when_mixed_lines_then_only_trimmed_non_empty_appended(self, chit_store):
        chit_store.add_items("seed")
        added = chit_store.add_items("a\n\nb \n  \nc")
        assert added == ["a", "b", "c"]
        assert chit_store.items == ["seed", "a", "b", "c"]
        assert chit_store.remaining == ["seed", "a", "b", "c"]

    def test_add_when_nothing_survives_then_still_persists(self, storage, chit_store):
        chit_store.add_items("  \n\n")
        assert chit_store.items == []
        assert storage.get(CHITS_KEY) == []

    def test_add_when_round_in_progress_then_draw_history_kept(self, storage, first_choice):
        store = _store_with(storage, ["x", "y"], rng=first_choice)
        assert store.draw() == "x"
        store.add_items("z")
        assert store.items == ["x", "y", "z"]
        assert store.remaining == ["y", "z"]

    def test_add_when_called_then_persisted(self, storage, chit_store):
        chit_store.add_items("one\ntwo")
        assert storage.get(CHITS_KEY) == ["one", "two"]


class TestEditItem:
    def test_edit_when_valid_index_then_replaced_and_pool_reset(self, storage, first_choice):
        store = _store_with(storage, ["a", "b", "c"], rng=first_choice)
        store.draw()
        store.edit_item(1, "new")
        assert store.items == ["a", "new", "c"]
        assert store.remaining == ["a", "new", "c"]
        assert storage.get(CHITS_KEY) == ["a", "new", "c"]

    def test_edit_when_index_out_of_range_then_index_error_and_unchanged(self, storage):
        store = _store_with(storage, ["a", "b", "c"])
        with pytest.raises(IndexError):
            store.edit_item(5, "x")
        assert store.items == ["a", "b", "c"]

    def test_edit_when_negative_index_then_chit_index_error(self, storage):
        store = _store_with(storage, ["a"])
        with pytest.raises(ChitIndexError):
            store.edit_item(-1, "x")

    def test_edit_when_whitespace_text_then_accepted_verbatim(self, storage):
        """Edits skip the trim/empty filter that adds apply."""
        store = _store_with(storage, ["a", "b"])
        store.edit_item(0, "   ")
        store.edit_item(1, "")
        assert store.items == ["   ", ""]

    def test_edit_when_session_open_then_session_cleared(self, storage):
        store = _store_with(storage, ["a", "b"])
        store.begin_edit(0)
        store.edit_item(1, "z")
        assert store.edit_session is None


class TestDeleteItems:
    def test_delete_when_multiple_indices_then_refer_to_pre_deletion_list(self, storage):
        store = _store_with(storage, ["a", "b", "c", "d"])
        store.delete_items({1, 3})
        assert store.items == ["a", "c"]
        assert storage.get(CHITS_KEY) == ["a", "c"]

    def test_delete_when_out_of_range_indices_then_ignored(self, storage):
        store = _store_with(storage, ["a", "b"])
        store.delete_items({7, -3, 0})
        assert store.items == ["b"]

    def test_delete_when_round_in_progress_then_pool_reset(self, storage, first_choice):
        store = _store_with(storage, ["a", "b", "c"], rng=first_choice)
        store.draw()
        store.delete_items({2})
        assert store.remaining == ["a", "b"]


class TestClearAll:
    def test_clear_when_called_then_list_pool_and_storage_empty(self, storage):
        store = _store_with(storage, ["a", "b"])
        store.clear_all()
        assert store.items == []
        assert store.remaining == []
        assert storage.get(CHITS_KEY) == []

    def test_clear_then_draw_raises_empty_pool(self, storage):
        store = _store_with(storage, ["a"])
        store.clear_all()
        with pytest.raises(EmptyPoolError):
            store.draw()


class TestDraw:
    def test_draw_when_three_items_then_permutation_then_empty(self, storage, rng):
        store = _store_with(storage, ["x", "y", "z"], rng=rng)
        picks = [store.draw() for _ in range(3)]
        assert sorted(picks) == ["x", "y", "z"]
        assert store.remaining == []
        assert not store.can_draw
        with pytest.raises(EmptyPoolError):
            store.draw()

    def test_draw_when_duplicate_value_then_only_one_occurrence_removed(self, storage, first_choice):
        store = _store_with(storage, ["a", "a", "b"], rng=first_choice)
        assert store.draw() == "a"
        assert Counter(store.remaining) == Counter({"a": 1, "b": 1})
        assert store.drawn == ["a"]

    def test_draw_when_called_then_not_persisted(self, storage, rng):
        store = _store_with(storage, ["a", "b"], rng=rng)
        store.draw()
        assert storage.get(CHITS_KEY) == ["a", "b"]

    def test_draw_when_called_then_last_drawn_recorded(self, storage, rng):
        store = _store_with(storage, ["only"], rng=rng)
        assert store.draw() == "only"
        assert store.last_drawn == "only"

    def test_draw_when_many_rounds_then_every_chit_reachable(self, storage):
        seen = set()
        for seed in range(50):
            store = _store_with(InMemoryChitStorage(), ["a", "b", "c"], rng=random.Random(seed))
            seen.add(store.draw())
        assert seen == {"a", "b", "c"}


class TestPersistence:
    def test_persist_then_fresh_load_reproduces_list_and_full_pool(self, storage, rng):
        store = _store_with(storage, ["a", "b", "b", "c"], rng=rng)
        store.draw()
        store.draw()
        store.persist()

        fresh = ChitStore(storage)
        assert fresh.load() == ["a", "b", "b", "c"]
        assert fresh.remaining == ["a", "b", "b", "c"]

    def test_persist_when_custom_key_then_written_under_that_key(self, storage):
        store = ChitStore(storage, key="other")
        store.add_items("a")
        assert storage.get("other") == ["a"]
        assert storage.get(CHITS_KEY) is None


class TestEditSession:
    def test_begin_edit_when_valid_then_draft_is_current_text(self, storage):
        store = _store_with(storage, ["a", "b"])
        session = store.begin_edit(1)
        assert (session.index, session.draft) == (1, "b")

    def test_begin_edit_when_out_of_range_then_index_error(self, storage):
        store = _store_with(storage, ["a"])
        with pytest.raises(ChitIndexError):
            store.begin_edit(3)
        assert store.edit_session is None

    def test_commit_when_earlier_row_added_then_edits_same_chit(self, storage):
        store = _store_with(storage, ["a", "b"])
        store.begin_edit(1)
        store.update_draft("B")
        store.add_items("c")
        store.commit_edit()
        assert store.items == ["a", "B", "c"]

    def test_commit_when_chit_deleted_then_index_error_and_session_closed(self, storage):
        store = _store_with(storage, ["a", "b"])
        session = store.begin_edit(1)
        chit_id = session.chit_id
        # simulate a stale session surviving a delete
        store.delete_items({1})
        store.edit_session = session
        with pytest.raises(ChitIndexError):
            store.commit_edit()
        assert store.edit_session is None
        assert store.index_of(chit_id) is None
        assert store.items == ["a"]

    def test_cancel_when_session_open_then_closed_without_changes(self, storage):
        store = _store_with(storage, ["a"])
        store.begin_edit(0)
        store.update_draft("zzz")
        store.cancel_edit()
        assert store.edit_session is None
        assert store.items == ["a"]


class TestInvariants:
    def test_pool_never_larger_than_list_over_random_operations(self, storage):
        rnd = random.Random(42)
        store = ChitStore(storage, rng=random.Random(7))
        for _ in range(300):
            op = rnd.choice(["add", "edit", "delete", "clear", "draw"])
            if op == "add":
                store.add_items("\n".join(rnd.choice("abc ") for _ in range(rnd.randint(0, 3))))
            elif op == "edit" and store.items:
                store.edit_item(rnd.randrange(len(store.items)), rnd.choice("abc"))
            elif op == "delete":
                store.delete_items({rnd.randrange(5) for _ in range(2)})
            elif op == "clear" and rnd.random() < 0.2:
                store.clear_all()
            elif op == "draw" and store.can_draw:
                store.draw()
            assert len(store.remaining) <= len(store.items)
            assert not Counter(store.remaining) - Counter(store.items)
