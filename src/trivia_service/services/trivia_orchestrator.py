"""Trivia use cases — build the prompt, call the model once, parse the reply.

The orchestrator depends only on the :class:`ModelGateway` port and the pure
prompt / parser modules.  The interface layer injects a concrete gateway at
runtime; tests inject a fake one.
"""

from __future__ import annotations

import asyncio
import logging

from trivia_service.domain.entities import (
    ANSWER_CHECK_GENERATION,
    QUESTION_GENERATION,
    AnswerVerdict,
    GenerationConfig,
    Question,
)
from trivia_service.domain.exceptions import (
    InvalidModelResponseError,
    InvalidRequestError,
    UpstreamUnavailableError,
)
from trivia_service.domain.ports.model_gateway import ModelGateway
from trivia_service.services.prompt_builder import (
    build_answer_check_prompt,
    build_question_prompt,
)
from trivia_service.services.response_parser import (
    parse_answer_verdict,
    parse_question,
)

logger = logging.getLogger(__name__)


class TriviaOrchestrator:
    """Runs the two trivia operations against a language model.

    Parameters
    ----------
    model_gateway:
        Shared adapter that sends a prompt to the model.  Must be safe for
        concurrent use.
    timeout:
        Default deadline in seconds for a single model call, or ``None`` to
        rely on the provider's own timeout behaviour.
    """

    def __init__(self, model_gateway: ModelGateway, timeout: float | None = None) -> None:
        self._gateway = model_gateway
        self._timeout = timeout

    # ── Public entry points ─────────────────────────────────────────────

    async def generate_question(self, *, timeout: float | None = None) -> Question:
        """Ask the model for one trivia question."""
        logger.info("Generating trivia question")
        raw = await self._generate(build_question_prompt(), QUESTION_GENERATION, timeout)
        try:
            return parse_question(raw)
        except InvalidModelResponseError as exc:
            logger.warning("Unusable question from model: %s", exc)
            raise

    async def check_answer(
        self, question: str, answer: str, *, timeout: float | None = None
    ) -> AnswerVerdict:
        """Ask the model to grade *answer* against *question*."""
        if not question.strip():
            raise InvalidRequestError("question must not be empty.")

        logger.info(
            "Checking answer (%d chars) for question (%d chars)", len(answer), len(question)
        )
        prompt = build_answer_check_prompt(question, answer)
        raw = await self._generate(prompt, ANSWER_CHECK_GENERATION, timeout)
        try:
            return parse_answer_verdict(raw)
        except InvalidModelResponseError as exc:
            logger.warning("Unusable verdict from model: %s", exc)
            logger.debug("Raw model output: %r", raw)
            raise

    # ── Model interaction ───────────────────────────────────────────────

    async def _generate(
        self, prompt: str, config: GenerationConfig, timeout: float | None
    ) -> str:
        """Single round trip to the model; every failure becomes UpstreamUnavailableError."""
        deadline = timeout if timeout is not None else self._timeout
        try:
            return await asyncio.wait_for(
                self._gateway.generate(prompt, config, timeout=deadline),
                timeout=deadline,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("Model call exceeded %ss deadline", deadline)
            raise UpstreamUnavailableError(
                f"Model call timed out after {deadline}s."
            ) from exc
        except Exception as exc:
            logger.warning("Model call failed: %s", exc)
            raise UpstreamUnavailableError(f"Model call failed: {exc}") from exc
