"""Tests for the in-memory graph store."""

import pytest

from mindmap.domain.models import DEFAULT_ENTRY_TITLE, Entry


class TestCreateEntry:
    def test_ids_are_monotonic(self, in_memory_graph):
        ids = [in_memory_graph.create_entry(f"e{i}").id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]
        assert in_memory_graph.next_id == 6

    def test_fields(self, in_memory_graph):
        e = in_memory_graph.create_entry("Idea", "line 1\nline 2", (12.5, -3.0))
        assert e.title == "Idea"
        assert e.note == "line 1\nline 2"
        assert e.position == (12.5, -3.0)
        assert e.connection_ids == []
        assert in_memory_graph.get_entry(e.id) is e

    def test_empty_title_gets_placeholder(self, in_memory_graph):
        assert in_memory_graph.create_entry("").title == DEFAULT_ENTRY_TITLE

    def test_ids_not_recycled_after_remove(self, in_memory_graph):
        first = in_memory_graph.create_entry("a")
        second = in_memory_graph.create_entry("b")
        in_memory_graph.remove_entry(second.id)
        in_memory_graph.remove_entry(first.id)
        third = in_memory_graph.create_entry("c")
        assert third.id == 3

    def test_insertion_order(self, sample_store):
        titles = [e.title for e in sample_store.get_all_entries()]
        assert titles == ["Warehouse Plan", "Apple", "Application", "Apply"]
        assert len(sample_store) == 4


class TestRemoveEntry:
    def test_remove_scrubs_incoming_links(self, sample_store):
        assert sample_store.remove_entry(2)
        assert sample_store.get_entry(2) is None
        for e in sample_store.get_all_entries():
            assert 2 not in e.connection_ids
        assert sample_store.get_entry(1).connection_ids == [3]
        assert sample_store.get_entry(4).connection_ids == []

    def test_remove_missing(self, sample_store):
        before = [list(e.connection_ids) for e in sample_store.get_all_entries()]
        assert not sample_store.remove_entry(99)
        assert [e.connection_ids for e in sample_store.get_all_entries()] == before
        assert len(sample_store) == 4

    def test_contains(self, sample_store):
        assert 1 in sample_store
        sample_store.remove_entry(1)
        assert 1 not in sample_store
        assert "1" not in sample_store


class TestConnections:
    def test_add_twice_keeps_one(self, in_memory_graph):
        a = in_memory_graph.create_entry("a")
        b = in_memory_graph.create_entry("b")
        assert in_memory_graph.add_connection(a.id, b.id)
        assert not in_memory_graph.add_connection(a.id, b.id)
        assert a.connection_ids == [b.id]

    def test_self_link_ignored(self, in_memory_graph):
        a = in_memory_graph.create_entry("a")
        assert not in_memory_graph.add_connection(a.id, a.id)
        assert a.connection_ids == []

    def test_unknown_endpoints_ignored(self, in_memory_graph):
        a = in_memory_graph.create_entry("a")
        assert not in_memory_graph.add_connection(a.id, 42)
        assert not in_memory_graph.add_connection(42, a.id)
        assert a.connection_ids == []

    def test_links_are_directed_and_ordered(self, sample_store):
        assert sample_store.get_entry(1).connection_ids == [2, 3]
        assert sample_store.get_entry(2).connection_ids == []

    def test_cycles_allowed(self, sample_store):
        assert 3 in sample_store.get_entry(1).connection_ids
        assert 1 in sample_store.get_entry(3).connection_ids

    def test_remove_connection(self, sample_store):
        assert sample_store.remove_connection(1, 2)
        assert sample_store.get_entry(1).connection_ids == [3]
        assert not sample_store.remove_connection(1, 2)
        assert not sample_store.remove_connection(99, 2)

    def test_remove_connection_drops_all_duplicates(self, in_memory_graph):
        in_memory_graph.restore([Entry(id=1, connection_ids=[2, 2, 3, 2]), Entry(id=2)], 3)
        assert in_memory_graph.remove_connection(1, 2)
        assert in_memory_graph.get_entry(1).connection_ids == [3]

    def test_links_to_follows_add_and_remove(self, sample_store):
        plan = sample_store.get_entry(1)
        assert plan.links_to(2)
        assert not sample_store.add_connection(1, 2)
        assert sample_store.remove_connection(1, 2)
        assert not plan.links_to(2)
        assert not sample_store.remove_connection(1, 2)
        assert sample_store.add_connection(1, 2)
        assert plan.connection_ids == [3, 2]


class TestLifecycle:
    def test_clear(self, sample_store):
        sample_store.clear()
        assert sample_store.get_all_entries() == []
        assert sample_store.next_id == 1
        assert sample_store.create_entry("fresh").id == 1

    def test_restore_keeps_ids_and_counter(self, in_memory_graph):
        in_memory_graph.restore([Entry(id=5), Entry(id=2)], 3)
        assert [e.id for e in in_memory_graph.get_all_entries()] == [5, 2]
        assert in_memory_graph.next_id == 3

    def test_restore_rejects_non_empty_store(self, sample_store):
        with pytest.raises(ValueError):
            sample_store.restore([Entry(id=10)], 11)

    def test_restore_rejects_duplicate_ids(self, in_memory_graph):
        with pytest.raises(ValueError, match="Duplicate"):
            in_memory_graph.restore([Entry(id=1), Entry(id=1)], 2)
        assert len(in_memory_graph) == 0

    def test_ensure_next_id_raises_stale_counter(self, in_memory_graph):
        in_memory_graph.restore([Entry(id=4), Entry(id=9)], 2)
        in_memory_graph.ensure_next_id_consistency()
        assert in_memory_graph.next_id == 10
        assert in_memory_graph.create_entry("new").id == 10

    def test_ensure_next_id_keeps_larger_counter(self, in_memory_graph):
        in_memory_graph.restore([Entry(id=4)], 50)
        in_memory_graph.ensure_next_id_consistency()
        assert in_memory_graph.next_id == 50

    def test_ensure_next_id_on_empty_store(self, in_memory_graph):
        in_memory_graph.ensure_next_id_consistency()
        assert in_memory_graph.next_id == 1
