"""OpenAI adapter — implements the ModelGateway port.

Works against any OpenAI-compatible chat-completions endpoint (set
``OPENAI_BASE_URL`` to e.g. Gemini's compatibility endpoint).
"""

from __future__ import annotations

import logging

import httpx
from openai import APITimeoutError, AsyncOpenAI, AuthenticationError, RateLimitError

from trivia_service.domain.entities import GenerationConfig
from trivia_service.domain.exceptions import ModelGatewayError

logger = logging.getLogger(__name__)


class OpenAIGateway:
    """Concrete ``ModelGateway`` backed by the OpenAI chat-completions API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        max_retries: int = 0,
        send_top_k: bool = False,
    ) -> None:
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            http_client=http_client,
            max_retries=max_retries,
        )
        self._model = model
        self._send_top_k = send_top_k

    async def generate(
        self,
        prompt: str,
        config: GenerationConfig,
        *,
        timeout: float | None = None,
    ) -> str:
        """Send a single user prompt and return the first candidate's text."""
        try:
            kwargs: dict[str, object] = {
                "model": self._model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": config.temperature,
                "top_p": config.top_p,
                "max_tokens": config.max_output_tokens,
                "n": 1,
            }
            # The OpenAI API itself has no top-k; compatible providers may accept it.
            if self._send_top_k:
                kwargs["extra_body"] = {"top_k": config.top_k}
            if timeout is not None:
                kwargs["timeout"] = timeout

            response = await self._client.chat.completions.create(**kwargs)  # type: ignore[arg-type]

        except AuthenticationError as exc:
            raise ModelGatewayError(
                "Invalid API key. "
                "Set a valid key in the OPENAI_API_KEY environment variable."
            ) from exc

        except RateLimitError as exc:
            detail = str(exc)
            logger.error("OpenAI RateLimitError: %s", detail)
            raise ModelGatewayError(f"Rate limit / quota error: {detail}") from exc

        except APITimeoutError as exc:
            raise ModelGatewayError("Model request timed out.") from exc

        except Exception as exc:
            raise ModelGatewayError(f"Model call failed: {exc}") from exc

        if not response.choices:
            logger.debug("Model returned no candidates")
            return ""

        content = response.choices[0].message.content
        return content or ""

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        await self._client.close()
