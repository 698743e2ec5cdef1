"""Project document codec.

Converts a graph store to and from the saved project format::

    {
      "Entries": [
        {"Id": 1, "Title": "...", "Note": "...",
         "PositionX": 0.0, "PositionY": 0.0, "ConnectionIds": [2]}
      ],
      "NextId": 2
    }

``decode`` only parses: it builds a fresh store and leaves the id counter
exactly as written. ``load`` is decode followed by the counter repair that
every real load needs.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from mindmap.adapters.stores.in_memory_graph import InMemoryGraphStore
from mindmap.domain.errors import InvalidDocumentError, MalformedDocumentError
from mindmap.domain.models import DEFAULT_ENTRY_TITLE, Entry
from mindmap.ports.graph_store import GraphStorePort

StoreFactory = Callable[[], GraphStorePort]


# ── encode ──


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    return {
        "Id": entry.id,
        "Title": entry.title,
        "Note": entry.note,
        "PositionX": float(entry.position_x),
        "PositionY": float(entry.position_y),
        "ConnectionIds": list(entry.connection_ids),
    }


def encode(store: GraphStorePort) -> str:
    """Serialise *store* as pretty-printed JSON, entries in creation order."""
    document = {
        "Entries": [entry_to_dict(e) for e in store.get_all_entries()],
        "NextId": store.next_id,
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


# ── decode ──


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _string_field(raw: dict[str, Any], key: str, default: str, index: int) -> str:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidDocumentError(f"'{key}' must be a string", entry_index=index)
    return value


def _number_field(raw: dict[str, Any], key: str, index: int) -> float:
    value = raw.get(key)
    if value is None:
        return 0.0
    if not _is_number(value):
        raise InvalidDocumentError(f"'{key}' must be a number", entry_index=index)
    return float(value)


def entry_from_dict(raw: Any, index: int) -> Entry:
    if not isinstance(raw, dict):
        raise MalformedDocumentError(f"Entries[{index}] is not an object")

    if "Id" not in raw:
        raise InvalidDocumentError("missing 'Id'", entry_index=index)
    entry_id = raw["Id"]
    if not _is_int(entry_id):
        raise InvalidDocumentError("'Id' must be an integer", entry_index=index)

    connection_ids = raw.get("ConnectionIds")
    if connection_ids is None:
        connection_ids = []
    if not isinstance(connection_ids, list) or not all(_is_int(c) for c in connection_ids):
        raise InvalidDocumentError(
            "'ConnectionIds' must be a list of integers", entry_index=index
        )

    return Entry(
        id=entry_id,
        title=_string_field(raw, "Title", DEFAULT_ENTRY_TITLE, index),
        note=_string_field(raw, "Note", "", index),
        position_x=_number_field(raw, "PositionX", index),
        position_y=_number_field(raw, "PositionY", index),
        connection_ids=list(connection_ids),
    )


def decode(text: str, store_factory: StoreFactory = InMemoryGraphStore) -> GraphStorePort:
    """Parse *text* into a new store.

    Raises:
        MalformedDocumentError: the text is not a project document.
        InvalidDocumentError: a required field is missing or mistyped.
    """
    if not text or not text.strip():
        raise MalformedDocumentError("Project document is empty")
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # ValueError also covers over-long integer literals
        raise MalformedDocumentError(f"Project document is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise MalformedDocumentError("Project document must be a JSON object")

    raw_entries = document.get("Entries")
    if raw_entries is None:
        raw_entries = []
    if not isinstance(raw_entries, list):
        raise MalformedDocumentError("'Entries' must be a list")

    next_id = document.get("NextId", 1)
    if not _is_int(next_id):
        raise InvalidDocumentError("'NextId' must be an integer")

    entries = [entry_from_dict(raw, i) for i, raw in enumerate(raw_entries)]

    store = store_factory()
    try:
        store.restore(entries, next_id)
    except ValueError as exc:
        raise InvalidDocumentError(str(exc)) from exc
    return store


def load(text: str, store_factory: StoreFactory = InMemoryGraphStore) -> GraphStorePort:
    """Decode *text* and repair the id counter, ready for further edits."""
    store = decode(text, store_factory)
    store.ensure_next_id_consistency()
    return store
