"""Project storage adapter: local filesystem."""

from __future__ import annotations

from pathlib import Path

from mindmap.ports.project_storage import ProjectStoragePort


class LocalFileStorage(ProjectStoragePort):
    """UTF-8 files on disk; relative paths resolve against *base_dir*."""

    def __init__(self, base_dir: str = ".") -> None:
        self._base_dir = Path(base_dir)

    def _resolve(self, path: str) -> Path:
        p = Path(path).expanduser()
        if not p.is_absolute():
            p = self._base_dir / p
        return p

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read_text(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def write_text(self, path: str, text: str) -> None:
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        # The previous save stays intact until the new text is fully written.
        tmp = p.with_name(p.name + ".tmp")
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(p)
