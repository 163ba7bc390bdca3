"""
Tests for the in-memory storage adapter.
"""

from src.chit_picker.adapters.chit_storage_memory import InMemoryChitStorage


class TestInMemoryChitStorage:
    def test_get_when_unset_then_none(self):
        assert InMemoryChitStorage().get("k") is None

    def test_set_when_caller_mutates_list_then_stored_copy_unchanged(self):
        storage = InMemoryChitStorage()
        values = ["a"]
        storage.set("k", values)
        values.append("b")
        assert storage.get("k") == ["a"]

    def test_init_when_seeded_then_values_available(self):
        assert InMemoryChitStorage({"k": ["x"]}).get("k") == ["x"]
