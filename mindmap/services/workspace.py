"""Workspace: the session object a host UI drives.

Holds the current graph store (the single source of truth for the map),
the title-search state and the last project path. The host's view is a
projection of the store: after a load it should rebuild every node from
``workspace.store``, and before a save it should push edits it made on
screen back through ``update_entry``.

A load never touches the current store until the new one is fully
decoded; the swap is a single reference assignment.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from mindmap.adapters.stores.in_memory_graph import InMemoryGraphStore
from mindmap.domain.errors import DecodeError
from mindmap.domain.models import DEFAULT_ENTRY_TITLE, Entry, TodoItem
from mindmap.ports.graph_store import GraphStorePort
from mindmap.ports.project_storage import ProjectStoragePort
from mindmap.services import project_codec
from mindmap.services.title_search import TitleSearchIndex
from mindmap.services.todo_list import DEFAULT_TODO_PREFIX, collect_todos

log = logging.getLogger(__name__)

DEFAULT_PROJECT_PATH = "mindmap.json"


class MindMapWorkspace:
    """Top-level entry point for editing, searching and persisting a map."""

    def __init__(
        self,
        graph_store: GraphStorePort,
        storage: ProjectStoragePort,
        *,
        store_factory: Callable[[], GraphStorePort] = InMemoryGraphStore,
        default_title: str = DEFAULT_ENTRY_TITLE,
        todo_prefix: str = DEFAULT_TODO_PREFIX,
        default_project_path: str = DEFAULT_PROJECT_PATH,
        spawn_origin: tuple[float, float] = (120.0, 120.0),
        spawn_step: tuple[float, float] = (40.0, 30.0),
        spawn_cycle: int = 5,
    ):
        self._store = graph_store
        self._storage = storage
        self._store_factory = store_factory
        self._default_title = default_title
        self._todo_prefix = todo_prefix
        self._spawn_origin = spawn_origin
        self._spawn_step = spawn_step
        self._spawn_cycle = max(1, spawn_cycle)
        self._spawn_index = 0

        self.search = TitleSearchIndex()
        self.last_project_path = default_project_path

    @property
    def store(self) -> GraphStorePort:
        return self._store

    # ── editing ──

    def next_spawn_position(self) -> tuple[float, float]:
        ox, oy = self._spawn_origin
        sx, sy = self._spawn_step
        step = self._spawn_index % self._spawn_cycle
        return (ox + sx * step, oy + sy * step)

    def add_entry(
        self,
        position: tuple[float, float] | None = None,
        title: str | None = None,
        note: str = "",
    ) -> Entry:
        """Create an entry, placing it at the next spawn position by default."""
        if position is None:
            position = self.next_spawn_position()
        entry = self._store.create_entry(title or self._default_title, note, position)
        self._spawn_index += 1
        return entry

    def update_entry(
        self,
        entry_id: int,
        *,
        title: str | None = None,
        note: str | None = None,
        position: tuple[float, float] | None = None,
    ) -> bool:
        """Copy view-side edits of one entry back into the store."""
        entry = self._store.get_entry(entry_id)
        if entry is None:
            log.debug("update_entry: no entry %d", entry_id)
            return False
        if title is not None:
            entry.title = title
        if note is not None:
            entry.note = note
        if position is not None:
            entry.position = position
        return True

    def remove_entry(self, entry_id: int) -> bool:
        removed = self._store.remove_entry(entry_id)
        if not removed:
            log.debug("remove_entry: no entry %d", entry_id)
        return removed

    def connect(self, from_id: int, to_id: int) -> bool:
        added = self._store.add_connection(from_id, to_id)
        log.debug("connect %d -> %d: %s", from_id, to_id, "added" if added else "unchanged")
        return added

    def disconnect(self, from_id: int, to_id: int) -> bool:
        removed = self._store.remove_connection(from_id, to_id)
        log.debug("disconnect %d -> %d: %s", from_id, to_id, "removed" if removed else "unchanged")
        return removed

    # ── search / todos ──

    def apply_search(self, query: str | None) -> int:
        """Re-rank entries for *query*; returns the number of matches."""
        return len(self.search.apply_search(query, self._store.get_all_entries()))

    def reset_search(self) -> None:
        self.search.reset()

    def todos(self) -> list[TodoItem]:
        return collect_todos(self._store.get_all_entries(), self._todo_prefix)

    # ── persistence ──

    def save_project(self, path: str | None = None) -> bool:
        path = path or self.last_project_path
        text = project_codec.encode(self._store)
        try:
            self._storage.write_text(path, text)
        except OSError as exc:
            log.error("Cannot write project to %s: %s", path, exc)
            return False
        self.last_project_path = path
        log.info("Saved %d entries to %s", len(self._store), path)
        return True

    def save_to_last_path(self) -> bool:
        """Overwrite the last project file, but only if it already exists."""
        path = self.last_project_path
        if not path or not self._storage.exists(path):
            return False
        return self.save_project(path)

    def load_project(self, path: str | None = None) -> bool:
        """Replace the current map with the one saved at *path*.

        On any failure the current store is left exactly as it was.
        """
        path = path or self.last_project_path
        if not self._storage.exists(path):
            log.warning("Save file does not exist: %s", path)
            return False

        try:
            text = self._storage.read_text(path)
        except OSError as exc:
            log.error("Cannot read project from %s: %s", path, exc)
            return False
        except UnicodeDecodeError as exc:
            log.error("Failed to decode project %s: not UTF-8 text (%s)", path, exc)
            return False

        try:
            loaded = project_codec.load(text, self._store_factory)
        except DecodeError as exc:
            log.error("Failed to decode project %s: %s", path, exc)
            return False

        self._store = loaded
        self.last_project_path = path
        self._spawn_index = len(loaded)
        self.search.reset()
        log.info("Loaded %d entries from %s", len(loaded), path)
        return True

    def open_or_create(self, path: str | None = None) -> bool:
        """Load *path* if it exists, otherwise start an empty map bound to it.

        Returns False only when an existing file could not be loaded.
        """
        path = path or self.last_project_path
        if self._storage.exists(path):
            return self.load_project(path)
        self._store = self._store_factory()
        self.last_project_path = path
        self._spawn_index = 0
        self.search.reset()
        log.info("Starting new project at %s", path)
        return True
