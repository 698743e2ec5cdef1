"""Port: where project documents are read from and written to."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProjectStoragePort(ABC):
    """Opaque text storage addressed by path.

    Implementations raise ``OSError`` when a path can't be read or written.
    """

    @abstractmethod
    def exists(self, path: str) -> bool: ...

    @abstractmethod
    def read_text(self, path: str) -> str: ...

    @abstractmethod
    def write_text(self, path: str, text: str) -> None: ...
