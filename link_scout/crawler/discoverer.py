# link_scout/crawler/discoverer.py
"""
Script discovery on seed pages.

A seed page is fetched once, its ``<script src>`` attributes are collected,
and the shared extractor runs over the inline script text and the whole
page. Every match is recorded for the seed itself; matches that look like
script paths become additional fetch targets.
"""
from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from link_scout.aggregator import ResultAggregator
from link_scout.crawler.fetcher import Fetcher
from link_scout.extractor import Extractor, default_extractor
from link_scout.logger import logger
from link_scout.utils import remove_duplicates, resolve_reference, strip_quotes


def script_sources(soup: BeautifulSoup) -> List[str]:
    """Return the non-empty ``src`` attribute of every ``<script>`` element."""
    sources: List[str] = []
    for tag in soup.find_all("script", src=True):
        if not isinstance(tag, Tag):
            continue
        src = tag.get("src")
        if isinstance(src, str) and src.strip():
            sources.append(src.strip())
    return sources


def inline_script_text(soup: BeautifulSoup) -> str:
    """Concatenate the text of all ``<script>`` elements."""
    return "".join(tag.get_text() for tag in soup.find_all("script"))


class LinkDiscoverer:
    """Turns one seed URL into the absolute script URLs it references."""

    def __init__(
        self,
        fetcher: Fetcher,
        aggregator: ResultAggregator,
        extractor: Optional[Extractor] = None,
    ) -> None:
        self.fetcher = fetcher
        self.aggregator = aggregator
        self.extractor = extractor or default_extractor

    async def discover(self, seed_url: str) -> List[str]:
        """Fetch *seed_url* and return the deduplicated absolute script URLs found on it.

        Network and parse failures are logged and yield an empty list.
        """
        page = await self.fetcher.fetch(seed_url)
        if page is None:
            return []
        if not page.content.strip():
            logger.warning("Empty response body for %s", seed_url)
            return []

        try:
            soup = BeautifulSoup(page.content, "html.parser")
        except Exception as exc:
            logger.warning("Error parsing HTML for %s: %s", seed_url, exc)
            return []

        references = script_sources(soup)
        for text in (inline_script_text(soup), page.content):
            for match in self.extractor.findall(text):
                self.aggregator.add(seed_url, match)
                if ".js" in match:
                    references.append(strip_quotes(match))

        resolved: List[str] = []
        for reference in remove_duplicates(references):
            url = resolve_reference(reference, seed_url)
            if url is not None:
                resolved.append(url)
        scripts = remove_duplicates(resolved)
        logger.info("Found %d script(s) on %s", len(scripts), seed_url)
        return scripts
