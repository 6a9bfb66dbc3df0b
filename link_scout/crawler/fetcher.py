# link_scout/crawler/fetcher.py
"""
Fetcher module: a single GET with timeout, no retries, failures reported as ``None``.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Optional

from aiohttp import ClientError, ClientSession

from link_scout.crawler.models import PageData
from link_scout.logger import logger


class Fetcher:
    """Issues one GET per URL over a shared session and drains the body into memory."""

    def __init__(
        self,
        session: ClientSession,
        headers: Optional[Mapping[str, str]] = None,
        *,
        require_success: bool = True,
        failure_level: int = logging.DEBUG,
    ) -> None:
        self.session = session
        self.headers = dict(headers) if headers else None
        self.require_success = require_success
        self.failure_level = failure_level

    async def fetch(self, url: str) -> PageData | None:
        """
        Fetch *url* once.

        Returns PageData on success, or None when the request fails, times out
        or (with ``require_success``) answers with a non-2xx status.
        """
        try:
            async with self.session.get(url, headers=self.headers, raise_for_status=False) as resp:
                if self.require_success and not 200 <= resp.status < 300:
                    logger.log(self.failure_level, "Dropped %s: HTTP %s", url, resp.status)
                    return None
                body = await resp.read()
                charset = resp.charset or "utf-8"
        except asyncio.TimeoutError:
            logger.log(self.failure_level, "Dropped %s: timed out", url)
            return None
        except (ClientError, ValueError) as exc:
            logger.log(self.failure_level, "Dropped %s: %s", url, exc)
            return None

        try:
            text = body.decode(charset, errors="replace")
        except LookupError:
            text = body.decode("utf-8", errors="replace")
        return PageData(url, text)
