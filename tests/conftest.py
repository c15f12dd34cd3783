"""Pytest configuration and fixtures."""

import asyncio
from typing import Any

import pytest

from src.config.settings import Settings


class ScriptedFetcher:
    """Fetch collaborator returning queued payloads; the last one repeats."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, url: str) -> list[Any]:
        self.calls.append(url)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True


async def wait_until(condition, timeout: float = 2.0) -> None:
    """Poll *condition* on the running loop until it holds or time runs out."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not condition():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.005)


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings(
        _env_file=None,
        data_url="http://source.test/data",
        poll_interval_seconds=60,
        canvas_width=800,
        canvas_height=400,
    )


@pytest.fixture
def scripted_fetcher():
    """Factory for ScriptedFetcher instances."""
    return ScriptedFetcher


@pytest.fixture
def wait():
    return wait_until
