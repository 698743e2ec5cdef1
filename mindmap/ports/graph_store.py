"""Port: mind-map graph storage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from mindmap.domain.models import Entry


class GraphStorePort(ABC):
    """Own mind-map entries, id allocation and outgoing connections."""

    # ── write ──

    @abstractmethod
    def create_entry(
        self,
        title: str,
        note: str = "",
        position: tuple[float, float] = (0.0, 0.0),
    ) -> Entry:
        """Allocate the next id and store a new entry with no connections."""

    @abstractmethod
    def remove_entry(self, entry_id: int) -> bool:
        """Delete an entry and scrub its id from every other entry's links."""

    @abstractmethod
    def add_connection(self, from_id: int, to_id: int) -> bool: ...

    @abstractmethod
    def remove_connection(self, from_id: int, to_id: int) -> bool: ...

    # ── read ──

    @abstractmethod
    def get_entry(self, entry_id: int) -> Entry | None: ...

    @abstractmethod
    def get_all_entries(self) -> list[Entry]: ...

    @property
    @abstractmethod
    def next_id(self) -> int: ...

    # ── bulk / lifecycle ──

    @abstractmethod
    def restore(self, entries: list[Entry], next_id: int) -> None:
        """Populate an empty store with already-identified entries."""

    @abstractmethod
    def ensure_next_id_consistency(self) -> None: ...

    @abstractmethod
    def clear(self) -> None: ...

    def __len__(self) -> int:
        return len(self.get_all_entries())

    def __contains__(self, entry_id: object) -> bool:
        return isinstance(entry_id, int) and self.get_entry(entry_id) is not None
