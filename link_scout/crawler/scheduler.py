# === FILE: link_scout/crawler/scheduler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional, Sequence

from link_scout.aggregator import ResultAggregator
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.models import FetchStats
from link_scout.extractor import Extractor, default_extractor
from link_scout.logger import logger

__all__ = ("Deadline", "FetchScheduler")


class Deadline:
    """Monotonic expiry shared by every fetch phase of a run. ``None`` never expires."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout
        self._expires_at = None if timeout is None else time.monotonic() + timeout

    def remaining(self) -> Optional[float]:
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0


class FetchScheduler:
    """Fetches script URLs with a fixed-size worker pool and feeds every body to the extractor."""

    def __init__(
        self,
        fetcher: Fetcher,
        aggregator: ResultAggregator,
        extractor: Optional[Extractor] = None,
    ) -> None:
        self.fetcher = fetcher
        self.aggregator = aggregator
        self.extractor = extractor or default_extractor

    async def fetch_all(
        self,
        urls: Sequence[str],
        concurrency: int = 10,
        deadline: Optional[Deadline] = None,
    ) -> FetchStats:
        """Fetch every URL once and return when all are done or *deadline* elapses.

        Results aggregated before the deadline are kept; requests still queued
        or in flight at that point are abandoned.
        """
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        stats = FetchStats()
        if not urls:
            return stats

        queue: asyncio.Queue[str] = asyncio.Queue()
        for url in urls:
            queue.put_nowait(url)

        start = time.monotonic()
        workers = [asyncio.create_task(self._worker(queue, stats)) for _ in range(concurrency)]
        timeout = deadline.remaining() if deadline is not None else None
        try:
            await asyncio.wait_for(queue.join(), timeout=timeout)
        except asyncio.TimeoutError:
            stats.abandoned = len(urls) - stats.completed - stats.failed
            logger.warning("Deadline reached, abandoned %d of %d script(s)", stats.abandoned, len(urls))
        finally:
            for w in workers:
                w.cancel()
            await asyncio.gather(*workers, return_exceptions=True)

        duration = time.monotonic() - start
        logger.info(
            "Fetched %d/%d script(s) in %.2f s (%d failed)",
            stats.completed, len(urls), duration, stats.failed,
        )
        return stats

    async def _worker(self, queue: asyncio.Queue[str], stats: FetchStats) -> None:
        while True:
            url = await queue.get()
            try:
                page = await self.fetcher.fetch(url)
                if page is None:
                    stats.failed += 1
                    continue
                matches: List[str] = self.extractor.findall(page.content)
                for value in matches:
                    self.aggregator.add(url, value)
                stats.completed += 1
                logger.debug("%s: %d match(es)", url, len(matches))
            except Exception as exc:
                stats.failed += 1
                logger.debug("Dropped %s: %s", url, exc)
            finally:
                queue.task_done()
