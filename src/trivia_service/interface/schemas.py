"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class CheckAnswerRequest(BaseModel):
    """Request body for ``POST /api/check-answer``.

    ``answer`` may be empty; the model grades it as incorrect.
    """

    question: str
    answer: str

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "question must not be empty."
            raise ValueError(msg)
        return v


class QuestionResponse(BaseModel):
    """Successful response from ``GET /api/question``."""

    question: str


class CheckAnswerResponse(BaseModel):
    """Successful response from ``POST /api/check-answer``."""

    correct: bool
    feedback: str
    tidbit: str


class HealthResponse(BaseModel):
    """Liveness payload from ``GET /api/health``."""

    status: str = "ok"
    message: str = "Server is running"


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    error: str
