"""Port: model gateway — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from trivia_service.domain.entities import GenerationConfig


class ModelGateway(Protocol):
    """Abstract contract for a single-shot text-completion model."""

    async def generate(
        self,
        prompt: str,
        config: GenerationConfig,
        *,
        timeout: float | None = None,
    ) -> str:
        """Return the best candidate's text, or ``""`` when there is none.

        Raises :class:`~trivia_service.domain.exceptions.ModelGatewayError`
        when the provider call fails.
        """
        ...
