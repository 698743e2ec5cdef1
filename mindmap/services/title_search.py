"""Service: ranked title search with a navigation cursor."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mindmap.domain.models import Entry
from mindmap.services import fuzzy_matcher

log = logging.getLogger(__name__)


class TitleSearchIndex:
    """Rank entries by how well their titles match a query.

    Ranking is tier (substring before subsequence), then score descending,
    then id ascending, so results never depend on store order.
    """

    def __init__(self) -> None:
        self._matches: list[int] = []
        self._cursor = -1

    @property
    def matches(self) -> list[int]:
        return list(self._matches)

    @property
    def count(self) -> int:
        return len(self._matches)

    @property
    def current_id(self) -> int | None:
        if self._cursor < 0:
            return None
        return self._matches[self._cursor]

    def is_match(self, entry_id: int) -> bool:
        return entry_id in self._matches

    def apply_search(self, query: str | None, entries: Iterable[Entry]) -> list[int]:
        """Re-run *query* over *entries* and move the cursor to the best hit."""
        self.reset()
        if not query or not query.strip():
            return []

        scored: list[tuple[fuzzy_matcher.TitleMatch, int]] = []
        for entry in entries:
            found = fuzzy_matcher.match(query, entry.title)
            if found is not None:
                scored.append((found, entry.id))

        scored.sort(key=lambda item: (-item[0].tier, -item[0].score, item[1]))
        self._matches = [entry_id for _, entry_id in scored]
        if self._matches:
            self._cursor = 0

        log.debug("Search %r matched %d entries", query, len(self._matches))
        return list(self._matches)

    def reset(self) -> None:
        self._matches.clear()
        self._cursor = -1

    # ── navigation ──

    def next_match(self) -> int | None:
        return self._step(1)

    def previous_match(self) -> int | None:
        return self._step(-1)

    def _step(self, delta: int) -> int | None:
        if not self._matches:
            return None
        self._cursor = (self._cursor + delta) % len(self._matches)
        return self._matches[self._cursor]
