"""Service: collect ``Todo:`` lines from entry notes."""

from __future__ import annotations

from collections.abc import Iterable

from mindmap.domain.models import Entry, TodoItem

DEFAULT_TODO_PREFIX = "Todo:"


def collect_todos(
    entries: Iterable[Entry],
    prefix: str = DEFAULT_TODO_PREFIX,
) -> list[TodoItem]:
    """Return every todo line in note order, entry by entry.

    A todo line is a note line that, once trimmed, starts with *prefix*
    (case-insensitive). The item text is whatever follows the prefix.
    """
    marker = prefix.lower()
    items: list[TodoItem] = []
    for entry in entries:
        if not entry.note or entry.note.isspace():
            continue
        for line in entry.note.split("\n"):
            trimmed = line.strip()
            if not trimmed.lower().startswith(marker):
                continue
            text = trimmed[len(prefix):].strip()
            items.append(TodoItem(entry_id=entry.id, title=entry.title, text=text))
    return items
