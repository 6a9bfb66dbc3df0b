# File: tests/conftest.py
from collections.abc import AsyncIterator

import pytest
from aiohttp import web

from link_scout.aggregator import ResultAggregator
from link_scout.config import FinderConfig
from link_scout.logger import configure


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> FinderConfig:
    """
    Return a small, fast FinderConfig for engine tests.
    """
    return FinderConfig(
        concurrency=4,
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def aggregator() -> ResultAggregator:
    return ResultAggregator()


@pytest.fixture()
def seed_html() -> str:
    """
    Seed page with one external script and one inline API call.
    """
    return (
        "<html><head>"
        '<script src="/bundle.js"></script>'
        "<script>fetch(\"/api/v1/users\");</script>"
        "</head><body></body></html>"
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests bind the log handler to a temporary stderr; restore a live one afterwards."""
    yield
    configure(level="INFO")
