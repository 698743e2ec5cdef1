"""Graph store adapter: in-memory."""

from __future__ import annotations

import logging

from mindmap.domain.models import DEFAULT_ENTRY_TITLE, Entry
from mindmap.ports.graph_store import GraphStorePort

log = logging.getLogger(__name__)


class InMemoryGraphStore(GraphStorePort):
    """Entries kept in a dict, in creation order.

    Ids come from a monotonically increasing counter and are never
    recycled, so a removed entry's id can't be picked up by a stale link.
    """

    def __init__(self) -> None:
        self._entries: dict[int, Entry] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # ── write ──

    def create_entry(
        self,
        title: str,
        note: str = "",
        position: tuple[float, float] = (0.0, 0.0),
    ) -> Entry:
        entry = Entry(
            id=self._next_id,
            title=title or DEFAULT_ENTRY_TITLE,
            note=note or "",
        )
        entry.position = position
        self._next_id += 1
        self._entries[entry.id] = entry
        log.debug("Created entry %d (%r)", entry.id, entry.title)
        return entry

    def remove_entry(self, entry_id: int) -> bool:
        if self._entries.pop(entry_id, None) is None:
            return False

        for entry in self._entries.values():
            entry.connection_ids[:] = [
                cid for cid in entry.connection_ids if cid != entry_id
            ]
        log.debug("Removed entry %d", entry_id)
        return True

    def add_connection(self, from_id: int, to_id: int) -> bool:
        if from_id == to_id:
            return False
        source = self._entries.get(from_id)
        if source is None or to_id not in self._entries:
            return False
        if source.links_to(to_id):
            return False
        source.connection_ids.append(to_id)
        return True

    def remove_connection(self, from_id: int, to_id: int) -> bool:
        source = self._entries.get(from_id)
        if source is None or not source.links_to(to_id):
            return False
        source.connection_ids[:] = [cid for cid in source.connection_ids if cid != to_id]
        return True

    # ── read ──

    def get_entry(self, entry_id: int) -> Entry | None:
        return self._entries.get(entry_id)

    def get_all_entries(self) -> list[Entry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    # ── bulk / lifecycle ──

    def restore(self, entries: list[Entry], next_id: int) -> None:
        if self._entries:
            raise ValueError("restore() needs an empty store")
        restored: dict[int, Entry] = {}
        for entry in entries:
            if entry.id in restored:
                raise ValueError(f"Duplicate entry id: {entry.id}")
            restored[entry.id] = entry
        self._entries = restored
        self._next_id = next_id

    def ensure_next_id_consistency(self) -> None:
        max_id = max(self._entries, default=0)
        self._next_id = max(self._next_id, max_id + 1)

    def clear(self) -> None:
        self._entries.clear()
        self._next_id = 1
