"""Pure domain models, no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ENTRY_TITLE = "New Entry"


# ── Mind map ────────────────────────────────────────────────────────────────

@dataclass
class Entry:
    """A single mind-map node.

    ``connection_ids`` holds the ids of the entries this one links *to*.
    Entries reference each other by id only, never by object.
    """

    id: int
    title: str = DEFAULT_ENTRY_TITLE
    note: str = ""
    position_x: float = 0.0
    position_y: float = 0.0
    connection_ids: list[int] = field(default_factory=list)

    @property
    def position(self) -> tuple[float, float]:
        return (self.position_x, self.position_y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        x, y = value
        self.position_x = float(x)
        self.position_y = float(y)

    def links_to(self, entry_id: int) -> bool:
        return entry_id in self.connection_ids


# ── Search / Todo results ───────────────────────────────────────────────────

@dataclass(frozen=True)
class TodoItem:
    """One ``Todo:`` line found in an entry's note."""

    entry_id: int
    title: str
    text: str

    def __str__(self) -> str:
        return f"{self.title}: {self.text}"
