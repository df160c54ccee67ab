"""Shared fixtures: a scriptable stand-in for the model gateway."""

from __future__ import annotations

import asyncio

import pytest

from trivia_service.domain.entities import GenerationConfig
from trivia_service.infrastructure.config import get_settings


class FakeGateway:
    """In-memory ModelGateway returning a canned reply or raising an error."""

    def __init__(
        self,
        reply: str = "",
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls: list[tuple[str, GenerationConfig, float | None]] = []

    async def generate(
        self,
        prompt: str,
        config: GenerationConfig,
        *,
        timeout: float | None = None,
    ) -> str:
        self.calls.append((prompt, config, timeout))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def make_gateway():
    return FakeGateway


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate every test from the developer's environment and cached settings."""
    for var in (
        "OPENAI_MODEL", "OPENAI_BASE_URL", "SEND_TOP_K", "LLM_MAX_RETRIES",
        "REQUEST_TIMEOUT_SECONDS", "CORS_ALLOW_ORIGINS", "LOG_LEVEL", "HOST", "PORT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
