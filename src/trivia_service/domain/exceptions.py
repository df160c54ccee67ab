"""Domain exception hierarchy.

Each exception carries an :class:`ErrorKind` and an opaque ``public_message``.
Inner layers raise these; the outermost error-handler translates them to HTTP
responses without leaking model output or internal diagnostics.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Actionable failure categories surfaced to the API boundary."""

    INVALID_REQUEST = "invalid_request"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    INVALID_MODEL_RESPONSE = "invalid_model_response"
    EMPTY_OUTPUT = "empty_output"
    MALFORMED_MODEL_OUTPUT = "malformed_model_output"
    INTERNAL = "internal"


class TriviaServiceError(Exception):
    """Base exception for the entire application."""

    kind: ErrorKind = ErrorKind.INTERNAL
    public_message: str = "An unexpected error occurred. Please try again later."


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRequestError(TriviaServiceError):
    """The caller-supplied request failed basic shape validation."""

    kind = ErrorKind.INVALID_REQUEST
    public_message = "Invalid request body"


# ── Upstream model errors ───────────────────────────────────────────────────


class UpstreamUnavailableError(TriviaServiceError):
    """The model could not be reached (network, auth, quota or timeout)."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE
    public_message = "The trivia generator is currently unavailable."


class ModelGatewayError(UpstreamUnavailableError):
    """Raised by gateway adapters when the provider call itself fails."""


# ── Model output errors ─────────────────────────────────────────────────────


class InvalidModelResponseError(TriviaServiceError):
    """The model answered, but its output did not satisfy the output contract."""

    kind = ErrorKind.INVALID_MODEL_RESPONSE
    public_message = "The trivia generator returned an unusable response."


class EmptyOutputError(InvalidModelResponseError):
    """The model returned no candidates or only whitespace."""

    kind = ErrorKind.EMPTY_OUTPUT


class MalformedModelOutputError(InvalidModelResponseError):
    """The model's answer-check response failed strict structured decoding.

    ``raw`` keeps the original text for diagnostics only; it is never part of
    the exception message.
    """

    kind = ErrorKind.MALFORMED_MODEL_OUTPUT

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw
