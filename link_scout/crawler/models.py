# link_scout/crawler/models.py
"""
Data models shared by the discoverer, the scheduler and the aggregator.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PageData:
    """A fetched seed page or script: final URL and decoded body."""

    url: str
    content: str


@dataclass(frozen=True, slots=True)
class MatchResult:
    """One matched value and the URL of the body it was found in."""

    source: str
    value: str


@dataclass(slots=True)
class FetchStats:
    """Outcome counters of one :meth:`FetchScheduler.fetch_all` call."""

    completed: int = 0
    failed: int = 0
    abandoned: int = 0

    @property
    def total(self) -> int:
        return self.completed + self.failed + self.abandoned
