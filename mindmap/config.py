"""Configuration loading and adapter factory.

Reads an optional YAML config file, overlays environment variables and
wires the chosen adapters into a ``MindMapWorkspace``.

Env vars take precedence over YAML values.
Env var naming: MINDMAP__{section}__{key} (double underscore separator)
e.g., MINDMAP__PROJECT__DEFAULT_PATH overrides project.default_path
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Walk up from this file (mindmap/config.py) to the project root and load .env
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

from mindmap.domain.models import DEFAULT_ENTRY_TITLE
from mindmap.ports.graph_store import GraphStorePort
from mindmap.ports.project_storage import ProjectStoragePort
from mindmap.services.todo_list import DEFAULT_TODO_PREFIX
from mindmap.services.workspace import DEFAULT_PROJECT_PATH, MindMapWorkspace

log = logging.getLogger(__name__)

ENV_PREFIX = "MINDMAP__"


@dataclass
class ProjectConfig:
    default_path: str = DEFAULT_PROJECT_PATH
    base_dir: str = "."


@dataclass
class EntriesConfig:
    default_title: str = DEFAULT_ENTRY_TITLE
    spawn_x: float = 120.0
    spawn_y: float = 120.0
    spawn_step_x: float = 40.0
    spawn_step_y: float = 30.0
    spawn_cycle: int = 5


@dataclass
class TodosConfig:
    prefix: str = DEFAULT_TODO_PREFIX


@dataclass
class StorageConfig:
    graph_store: str = "in_memory"
    project_storage: str = "local"


@dataclass
class LoggingConfig:
    level: str = "INFO"

    def resolved_level(self) -> int | str:
        """Level for ``logging.basicConfig``: a number or an upper-cased name."""
        level = str(self.level).strip()
        if level.isdigit():
            return int(level)
        return level.upper()


@dataclass
class Settings:
    project: ProjectConfig = field(default_factory=ProjectConfig)
    entries: EntriesConfig = field(default_factory=EntriesConfig)
    todos: TodosConfig = field(default_factory=TodosConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_settings: Settings | None = None


def get_settings(config_path: str = "config.yaml") -> Settings:
    """Get the global settings instance, loading from config if not yet loaded."""
    global _settings
    if _settings is None:
        _settings = load_settings(config_path)
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings
    _settings = None


def load_settings(config_path: str | None = "config.yaml") -> Settings:
    """Load settings from YAML file (if present) with env var overlay."""
    settings = Settings()

    if config_path:
        config_file = Path(config_path)
        if config_file.exists():
            with open(config_file, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
            if not isinstance(yaml_config, dict):
                raise ValueError(f"Config file must contain a mapping: {config_path}")
            _apply_yaml(settings, yaml_config)
        else:
            log.debug("No config file at %s, using defaults", config_path)

    _apply_env_vars(settings)
    return settings


def _sections(settings: Settings) -> dict[str, Any]:
    return {f.name: getattr(settings, f.name) for f in fields(settings)}


def _apply_yaml(settings: Settings, yaml_config: dict[str, Any]) -> None:
    """Apply YAML config values to settings, section by section."""
    for section, section_obj in _sections(settings).items():
        values = yaml_config.get(section)
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        for key, value in values.items():
            if hasattr(section_obj, key):
                current_value = getattr(section_obj, key)
                setattr(section_obj, key, _coerce(current_value, value, f"{section}.{key}"))
            else:
                log.warning("Ignoring unknown config key %s.%s", section, key)


def _apply_env_vars(settings: Settings) -> None:
    """Apply environment variable overrides. Format: MINDMAP__SECTION__KEY."""
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        parts = key[len(ENV_PREFIX):].lower().split("__")
        if len(parts) != 2:
            continue

        section, field_name = parts
        _set_field(settings, section, field_name, value)


def _set_field(settings: Settings, section: str, field_name: str, value: str) -> None:
    """Set a field on the settings object from an env var value."""
    section_obj = _sections(settings).get(section)
    if section_obj is None or not hasattr(section_obj, field_name):
        return

    current_value = getattr(section_obj, field_name)
    setattr(section_obj, field_name, _coerce(current_value, value, f"{section}.{field_name}"))


def _coerce(current_value: Any, value: Any, name: str) -> Any:
    """Convert *value* to the type of the field's current value."""
    if value is None:
        return current_value
    try:
        if isinstance(current_value, bool):
            if isinstance(value, bool):
                return value
            return str(value).lower() in ("true", "1", "yes")
        elif isinstance(current_value, int):
            return int(value)
        elif isinstance(current_value, float):
            return float(value)
        return str(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Bad value for config key {name}: {value!r}") from exc


# ── Adapter factories ──


def build_graph_store(adapter: str) -> GraphStorePort:
    if adapter == "in_memory":
        from mindmap.adapters.stores.in_memory_graph import InMemoryGraphStore
        return InMemoryGraphStore()

    raise ValueError(f"Unknown graph_store adapter: {adapter}")


def build_storage(adapter: str, *, base_dir: str = ".") -> ProjectStoragePort:
    if adapter == "local":
        from mindmap.adapters.storage.local_file import LocalFileStorage
        return LocalFileStorage(base_dir=base_dir)

    elif adapter == "in_memory":
        from mindmap.adapters.storage.in_memory import InMemoryProjectStorage
        return InMemoryProjectStorage()

    raise ValueError(f"Unknown project_storage adapter: {adapter}")


# ── Top-level builder ──


def build_workspace(settings: Settings | None = None) -> MindMapWorkspace:
    """Wire the configured adapters into a workspace."""
    if settings is None:
        settings = get_settings()

    graph_adapter = settings.storage.graph_store
    log.debug("  → graph store: %s", graph_adapter)
    graph_store = build_graph_store(graph_adapter)

    storage = build_storage(
        settings.storage.project_storage,
        base_dir=settings.project.base_dir,
    )
    log.debug("  → project storage: %s (%s)", settings.storage.project_storage, settings.project.base_dir)

    ent = settings.entries
    return MindMapWorkspace(
        graph_store,
        storage,
        store_factory=lambda: build_graph_store(graph_adapter),
        default_title=ent.default_title,
        todo_prefix=settings.todos.prefix,
        default_project_path=settings.project.default_path,
        spawn_origin=(float(ent.spawn_x), float(ent.spawn_y)),
        spawn_step=(float(ent.spawn_step_x), float(ent.spawn_step_y)),
        spawn_cycle=int(ent.spawn_cycle),
    )
