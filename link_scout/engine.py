# File: link_scout/engine.py
"""link_scout.engine: orchestration of discovery, script fetching and aggregation."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence

from aiohttp import ClientSession, ClientTimeout

from link_scout.aggregator import ResultAggregator
from link_scout.config import FinderConfig, NoSeedsError
from link_scout.crawler.discoverer import LinkDiscoverer
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.scheduler import Deadline, FetchScheduler
from link_scout.extractor import Extractor, default_extractor
from link_scout.logger import logger
from link_scout.utils import normalize_url

__all__ = ["Engine", "run_scan"]


class Engine:
    """Facade for the CLI and tests: runs every seed and returns the filled aggregator."""

    def __init__(self, config: FinderConfig, aggregator: Optional[ResultAggregator] = None) -> None:
        self.config = config
        self.aggregator = aggregator if aggregator is not None else ResultAggregator(config.filter)
        self.extractor = Extractor(config.pattern) if config.pattern else default_extractor

    async def run(self, seeds: Sequence[str]) -> ResultAggregator:
        """Process *seeds* one after another; scripts of each seed are fetched concurrently."""
        if not seeds:
            raise NoSeedsError("No domains provided. Use -d, -l, or pipe input via stdin.")

        deadline = Deadline(self.config.fetch_deadline)
        timeout = ClientTimeout(total=self.config.timeout)
        async with ClientSession(timeout=timeout) as session:
            discoverer = LinkDiscoverer(
                Fetcher(session, require_success=False, failure_level=logging.WARNING),
                self.aggregator,
                self.extractor,
            )
            scheduler = FetchScheduler(
                Fetcher(session, headers={"User-Agent": self.config.user_agent}),
                self.aggregator,
                self.extractor,
            )
            for seed in seeds:
                base_url = normalize_url(seed)
                logger.info("Processing %s", base_url)
                scripts = await discoverer.discover(base_url)
                if deadline.expired:
                    logger.warning("Deadline reached, skipping %d script(s) of %s", len(scripts), base_url)
                    continue
                await scheduler.fetch_all(scripts, self.config.concurrency, deadline)

        logger.info("Collected %d raw match(es)", len(self.aggregator))
        return self.aggregator

    def start_scan(self, seeds: Sequence[str]) -> ResultAggregator:
        """Blocking wrapper around :meth:`run`."""
        return asyncio.run(self.run(seeds))


async def run_scan(config: FinderConfig, seeds: Sequence[str]) -> ResultAggregator:
    """Run a full scan of *seeds* with *config* and return the aggregator."""
    return await Engine(config).run(seeds)
