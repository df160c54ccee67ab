"""Prompt templates for the two trivia operations.

The model is a free-text generator, so the prompt is the only lever for
structured output: these templates ask for a strict format which
:mod:`trivia_service.services.response_parser` then verifies strictly.
"""

from __future__ import annotations

# ── Prompt templates ────────────────────────────────────────────────────────

QUESTION_PROMPT = """\
Generate one random trivia question. The question should be interesting and \
educational.

Format: reply with the question text only. Do NOT include the answer, hints, \
numbering, or any additional commentary.
"""

ANSWER_CHECK_PROMPT = """\
Analyze this trivia question and the user's answer.

Question: {question}
User's Answer: {answer}

If the user's answer is empty, treat it as incorrect.

Respond with exactly one JSON object and nothing else, using exactly these \
three keys:

{{
  "correct": <true or false>,
  "feedback": "<brief feedback about the answer (1 sentence)>",
  "tidbit": "<an interesting fact related to the topic (1-2 sentences)>"
}}

Do NOT wrap the object in markdown code fences and do NOT add any text \
before or after it.
"""


def build_question_prompt() -> str:
    """Return the constant instruction for generating a single question."""
    return QUESTION_PROMPT


def build_answer_check_prompt(question: str, answer: str) -> str:
    """Render the grading prompt with *question* and *answer* inserted verbatim."""
    return ANSWER_CHECK_PROMPT.format(question=question, answer=answer)
