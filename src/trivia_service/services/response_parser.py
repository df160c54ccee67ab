"""Response parser — turns raw model text into typed domain values.

This is the untrusted boundary of the application.  Parsing is strict: a
response that deviates from the output contract is rejected, never repaired.
Prose around the JSON object or markdown code fences count as deviations.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationError

from trivia_service.domain.entities import AnswerVerdict, Question
from trivia_service.domain.exceptions import EmptyOutputError, MalformedModelOutputError

logger = logging.getLogger(__name__)


class _VerdictPayload(BaseModel):
    """Wire schema of the answer-check response."""

    model_config = ConfigDict(strict=True, extra="forbid")

    correct: bool
    feedback: str
    tidbit: str


def parse_question(raw: str) -> Question:
    """Strip surrounding whitespace and wrap the text as a :class:`Question`."""
    text = raw.strip()
    if not text:
        raise EmptyOutputError("Model returned an empty question.")
    return Question(text=text)


def parse_answer_verdict(raw: str) -> AnswerVerdict:
    """Decode *raw* as exactly one JSON object with the verdict schema.

    Raises :class:`MalformedModelOutputError` when the text is not valid JSON,
    is not an object, has a missing or unknown key, or a field of the wrong
    type (``correct`` must be a real JSON boolean).
    """
    try:
        payload = _VerdictPayload.model_validate_json(raw)
    except ValidationError as exc:
        logger.debug("Verdict decoding failed: %s", exc)
        reasons = ", ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['type']}"
            for err in exc.errors()
        )
        raise MalformedModelOutputError(
            f"Model returned a verdict that does not match the schema ({reasons}).",
            raw=raw,
        ) from exc

    return AnswerVerdict(
        correct=payload.correct,
        feedback=payload.feedback,
        tidbit=payload.tidbit,
    )
