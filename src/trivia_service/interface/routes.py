"""API routes — thin controllers that delegate to the orchestrator."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from trivia_service.interface.dependencies import get_orchestrator
from trivia_service.interface.schemas import (
    CheckAnswerRequest,
    CheckAnswerResponse,
    ErrorResponse,
    HealthResponse,
    QuestionResponse,
)
from trivia_service.services.trivia_orchestrator import TriviaOrchestrator

router = APIRouter(prefix="/api")


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse()


@router.get(
    "/question",
    response_model=QuestionResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Model unavailable or unusable output"},
    },
)
async def get_question(
    orchestrator: TriviaOrchestrator = Depends(get_orchestrator),
) -> QuestionResponse:
    """Generate a new trivia question."""
    question = await orchestrator.generate_question()
    return QuestionResponse(question=question.text)


@router.post(
    "/check-answer",
    response_model=CheckAnswerResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Model unavailable or unusable output"},
    },
)
async def check_answer(
    body: CheckAnswerRequest,
    orchestrator: TriviaOrchestrator = Depends(get_orchestrator),
) -> CheckAnswerResponse:
    """Grade the user's answer to a trivia question."""
    verdict = await orchestrator.check_answer(body.question, body.answer)
    return CheckAnswerResponse(
        correct=verdict.correct,
        feedback=verdict.feedback,
        tidbit=verdict.tidbit,
    )
