"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Question:
    """A single generated trivia question."""

    text: str


@dataclass(frozen=True, slots=True)
class AnswerVerdict:
    """The graded outcome of an answer check."""

    correct: bool
    feedback: str
    tidbit: str


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Sampling parameters sent with every model call."""

    temperature: float
    top_k: int
    top_p: float
    max_output_tokens: int


QUESTION_GENERATION = GenerationConfig(
    temperature=0.7,
    top_k=40,
    top_p=0.95,
    max_output_tokens=100,
)

# Larger budget: the verdict carries feedback plus a one-to-two sentence tidbit.
ANSWER_CHECK_GENERATION = GenerationConfig(
    temperature=0.7,
    top_k=40,
    top_p=0.95,
    max_output_tokens=200,
)
