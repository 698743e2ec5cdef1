"""Project storage adapter: in-memory (for tests)."""

from __future__ import annotations

from mindmap.ports.project_storage import ProjectStoragePort


class InMemoryProjectStorage(ProjectStoragePort):
    """Non-persistent path → text mapping."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})

    def exists(self, path: str) -> bool:
        return path in self.files

    def read_text(self, path: str) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def write_text(self, path: str, text: str) -> None:
        self.files[path] = text
