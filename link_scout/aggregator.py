# File: link_scout/aggregator.py
"""link_scout.aggregator: thread-safe collector of matched values."""

from __future__ import annotations

import threading
from typing import List, Optional

from link_scout.crawler.models import MatchResult
from link_scout.utils import strip_quotes

__all__ = ["ResultAggregator"]


class ResultAggregator:
    """Append-only store of (source URL, value) pairs shared by all workers.

    ``add`` only appends under a lock and is safe to call from any task or
    thread. ``finalize`` and ``finalize_records`` are meant for the end of the
    run: they strip quote characters, drop repeated values (first occurrence
    wins) and apply the optional substring filter.
    """

    def __init__(self, filter: Optional[str] = None) -> None:
        self.filter = filter or None
        self._records: List[MatchResult] = []
        self._lock = threading.Lock()

    def add(self, source: str, value: str) -> None:
        record = MatchResult(source, value)
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> List[MatchResult]:
        """Snapshot of everything appended so far, in append order."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def finalize_records(self) -> List[MatchResult]:
        """Deduplicated and filtered results, each keeping the source it was first seen in."""
        seen: set[str] = set()
        final: List[MatchResult] = []
        for record in self.records:
            value = strip_quotes(record.value)
            if not value or value in seen:
                continue
            seen.add(value)
            if self.filter is not None and self.filter not in value:
                continue
            final.append(MatchResult(record.source, value))
        return final

    def finalize(self) -> List[str]:
        """Deduplicated and filtered values only."""
        return [record.value for record in self.finalize_records()]
