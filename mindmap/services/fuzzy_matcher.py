"""Fuzzy title matching.

Two tiers of match, both case-insensitive on trimmed input:

* **substring** – the query appears contiguously in the candidate.
  Score: ``2000 - 5 * start - |len(candidate) - len(query)|``.
* **subsequence** – the query's characters appear in order, greedily
  taken left to right.
  Score: ``1000 - 3 * max(0, span - len(query)) - first_index``.

A substring match always ranks above a subsequence match, whatever the raw
numbers say; very long titles can push a substring score below 1000, so
callers that rank should compare ``TitleMatch`` objects, not bare scores.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SUBSTRING_BASE_SCORE = 2000
SUBSTRING_START_PENALTY = 5
SUBSEQUENCE_BASE_SCORE = 1000
SUBSEQUENCE_SPREAD_PENALTY = 3


class MatchTier(IntEnum):
    SUBSEQUENCE = 1
    SUBSTRING = 2


@dataclass(frozen=True, order=True)
class TitleMatch:
    """A scored match; orders by tier first, then by raw score."""

    tier: MatchTier
    score: int


def _normalize(text: str | None) -> str:
    if not text or text.isspace():
        return ""
    return text.strip().lower()


def match(query: str | None, candidate: str | None) -> TitleMatch | None:
    """Match *query* against *candidate*; ``None`` when nothing matches."""
    q = _normalize(query)
    c = _normalize(candidate)
    if not q or not c:
        return None

    start = c.find(q)
    if start >= 0:
        score = SUBSTRING_BASE_SCORE
        score -= SUBSTRING_START_PENALTY * start
        score -= abs(len(c) - len(q))
        return TitleMatch(MatchTier.SUBSTRING, score)

    qi = 0
    first = last = -1
    for ci, ch in enumerate(c):
        if qi == len(q):
            break
        if ch != q[qi]:
            continue
        if first < 0:
            first = ci
        last = ci
        qi += 1

    if qi != len(q):
        return None

    span = last - first + 1
    compactness_penalty = max(0, span - len(q))
    score = SUBSEQUENCE_BASE_SCORE
    score -= SUBSEQUENCE_SPREAD_PENALTY * compactness_penalty
    score -= first
    return TitleMatch(MatchTier.SUBSEQUENCE, score)


def score(query: str | None, candidate: str | None) -> int | None:
    """Raw score of the best match, or ``None`` for no match."""
    found = match(query, candidate)
    return found.score if found is not None else None
