"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from trivia_service.infrastructure.config import Settings
from trivia_service.infrastructure.openai_gateway import OpenAIGateway
from trivia_service.services.trivia_orchestrator import TriviaOrchestrator

_http_client: httpx.AsyncClient | None = None
_model_gateway: OpenAIGateway | None = None
_settings: Settings | None = None


async def startup(settings: Settings) -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _model_gateway, _settings  # noqa: PLW0603

    _settings = settings
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))
    _model_gateway = OpenAIGateway(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.openai_model,
        base_url=settings.openai_base_url,
        http_client=_http_client,
        max_retries=settings.llm_max_retries,
        send_top_k=settings.send_top_k,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _model_gateway, _settings  # noqa: PLW0603

    _settings = None
    if _model_gateway:
        await _model_gateway.close()
        _model_gateway = None
    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_orchestrator() -> TriviaOrchestrator:
    """Build the orchestrator around the shared model gateway."""
    assert _model_gateway is not None, "startup() was not called"
    assert _settings is not None, "startup() was not called"

    return TriviaOrchestrator(
        model_gateway=_model_gateway,
        timeout=_settings.request_timeout_seconds,
    )
