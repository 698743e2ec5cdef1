"""Shared test fixtures: in-memory adapters and sample maps."""

from __future__ import annotations

import os

import pytest

from mindmap.adapters.storage.in_memory import InMemoryProjectStorage
from mindmap.adapters.stores.in_memory_graph import InMemoryGraphStore
from mindmap.config import reset_settings
from mindmap.services.workspace import MindMapWorkspace


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for key in list(os.environ):
        if key.startswith("MINDMAP__"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def in_memory_graph():
    return InMemoryGraphStore()


@pytest.fixture
def in_memory_storage():
    return InMemoryProjectStorage()


@pytest.fixture
def sample_store():
    """Four entries; 1 -> 2, 1 -> 3, 3 -> 1, 4 -> 2."""
    store = InMemoryGraphStore()
    store.create_entry("Warehouse Plan", "Todo: count pallets\nbudget", (0.0, 0.0))
    store.create_entry("Apple", "", (10.0, 5.5))
    store.create_entry("Application", "multi\nline", (-3.25, 7.0))
    store.create_entry("Apply", "todo:   call supplier  ", (100.0, 200.0))
    store.add_connection(1, 2)
    store.add_connection(1, 3)
    store.add_connection(3, 1)
    store.add_connection(4, 2)
    return store


@pytest.fixture
def workspace(in_memory_storage):
    return MindMapWorkspace(InMemoryGraphStore(), in_memory_storage)
