"""Tests for the trivia use cases against a fake model gateway."""

import asyncio
import json

import pytest

from trivia_service.domain.entities import (
    ANSWER_CHECK_GENERATION,
    QUESTION_GENERATION,
    AnswerVerdict,
    Question,
)
from trivia_service.domain.exceptions import (
    EmptyOutputError,
    ErrorKind,
    InvalidRequestError,
    MalformedModelOutputError,
    ModelGatewayError,
    UpstreamUnavailableError,
)
from trivia_service.services.prompt_builder import build_answer_check_prompt, build_question_prompt
from trivia_service.services.trivia_orchestrator import TriviaOrchestrator

PARIS_VERDICT = {
    "correct": True,
    "feedback": "Correct!",
    "tidbit": "Paris has been France's capital since 508 AD.",
}


class TestGenerateQuestion:

    def test_returns_question_from_model(self, make_gateway):
        gateway = make_gateway(reply="What is the capital of France?")
        orchestrator = TriviaOrchestrator(gateway)

        question = asyncio.run(orchestrator.generate_question())

        assert question == Question(text="What is the capital of France?")

    def test_single_call_with_question_prompt_and_config(self, make_gateway):
        gateway = make_gateway(reply="Q?")
        asyncio.run(TriviaOrchestrator(gateway).generate_question())

        assert len(gateway.calls) == 1
        prompt, config, _ = gateway.calls[0]
        assert prompt == build_question_prompt()
        assert config is QUESTION_GENERATION

    def test_blank_model_output_is_empty_output(self, make_gateway):
        gateway = make_gateway(reply="   \n")
        with pytest.raises(EmptyOutputError):
            asyncio.run(TriviaOrchestrator(gateway).generate_question())

    def test_gateway_failure_is_upstream_unavailable(self, make_gateway):
        gateway = make_gateway(error=ModelGatewayError("connection refused"))
        with pytest.raises(UpstreamUnavailableError) as exc_info:
            asyncio.run(TriviaOrchestrator(gateway).generate_question())
        assert exc_info.value.kind is ErrorKind.UPSTREAM_UNAVAILABLE
        assert isinstance(exc_info.value.__cause__, ModelGatewayError)

    def test_raw_network_error_is_upstream_unavailable(self, make_gateway):
        gateway = make_gateway(error=ConnectionError("network down"))
        with pytest.raises(UpstreamUnavailableError):
            asyncio.run(TriviaOrchestrator(gateway).generate_question())


class TestCheckAnswer:

    def test_returns_exact_verdict(self, make_gateway):
        gateway = make_gateway(reply=json.dumps(PARIS_VERDICT))
        orchestrator = TriviaOrchestrator(gateway)

        verdict = asyncio.run(
            orchestrator.check_answer("What is the capital of France?", "Paris")
        )

        assert verdict == AnswerVerdict(**PARIS_VERDICT)

    def test_single_call_with_grading_prompt_and_config(self, make_gateway):
        gateway = make_gateway(reply=json.dumps(PARIS_VERDICT))
        asyncio.run(TriviaOrchestrator(gateway).check_answer("Q?", "A"))

        assert len(gateway.calls) == 1
        prompt, config, _ = gateway.calls[0]
        assert prompt == build_answer_check_prompt("Q?", "A")
        assert config is ANSWER_CHECK_GENERATION

    def test_empty_answer_is_sent_to_model(self, make_gateway):
        reply = {"correct": False, "feedback": "No answer given.", "tidbit": "Fact."}
        gateway = make_gateway(reply=json.dumps(reply))

        verdict = asyncio.run(TriviaOrchestrator(gateway).check_answer("Q?", ""))

        assert verdict.correct is False
        assert len(gateway.calls) == 1

    def test_prose_wrapped_json_is_malformed(self, make_gateway):
        gateway = make_gateway(reply="Sure! " + json.dumps(PARIS_VERDICT))
        with pytest.raises(MalformedModelOutputError) as exc_info:
            asyncio.run(TriviaOrchestrator(gateway).check_answer("Q?", "Paris"))
        assert exc_info.value.kind is ErrorKind.MALFORMED_MODEL_OUTPUT

    def test_string_true_is_not_a_verdict(self, make_gateway):
        gateway = make_gateway(reply="true")
        with pytest.raises(MalformedModelOutputError):
            asyncio.run(TriviaOrchestrator(gateway).check_answer("Q?", "Paris"))

    def test_gateway_failure_is_upstream_unavailable(self, make_gateway):
        gateway = make_gateway(error=ModelGatewayError("quota exceeded"))
        with pytest.raises(UpstreamUnavailableError):
            asyncio.run(TriviaOrchestrator(gateway).check_answer("Q?", "A"))

    @pytest.mark.parametrize("question", ["", "   "])
    def test_blank_question_rejected_before_model_call(self, make_gateway, question):
        gateway = make_gateway(reply=json.dumps(PARIS_VERDICT))
        with pytest.raises(InvalidRequestError):
            asyncio.run(TriviaOrchestrator(gateway).check_answer(question, "Paris"))
        assert gateway.calls == []


class TestDeadline:

    def test_default_timeout_is_passed_to_gateway(self, make_gateway):
        gateway = make_gateway(reply="Q?")
        asyncio.run(TriviaOrchestrator(gateway, timeout=12.5).generate_question())
        assert gateway.calls[0][2] == 12.5

    def test_per_call_timeout_overrides_default(self, make_gateway):
        gateway = make_gateway(reply=json.dumps(PARIS_VERDICT))
        orchestrator = TriviaOrchestrator(gateway, timeout=12.5)
        asyncio.run(orchestrator.check_answer("Q?", "A", timeout=3.0))
        assert gateway.calls[0][2] == 3.0

    def test_no_timeout_by_default(self, make_gateway):
        gateway = make_gateway(reply="Q?")
        asyncio.run(TriviaOrchestrator(gateway).generate_question())
        assert gateway.calls[0][2] is None

    def test_slow_gateway_is_upstream_unavailable(self, make_gateway):
        gateway = make_gateway(reply="Q?", delay=1.0)
        orchestrator = TriviaOrchestrator(gateway, timeout=0.01)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            asyncio.run(orchestrator.generate_question())
        assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)

    def test_slow_grading_is_upstream_unavailable(self, make_gateway):
        gateway = make_gateway(reply=json.dumps(PARIS_VERDICT), delay=1.0)
        orchestrator = TriviaOrchestrator(gateway)

        with pytest.raises(UpstreamUnavailableError):
            asyncio.run(orchestrator.check_answer("Q?", "A", timeout=0.01))


class TestConcurrency:

    def test_concurrent_calls_share_one_gateway(self, make_gateway):
        gateway = make_gateway(reply=json.dumps(PARIS_VERDICT), delay=0.01)
        orchestrator = TriviaOrchestrator(gateway)

        async def _run():
            return await asyncio.gather(
                *(orchestrator.check_answer(f"Q{i}?", "A") for i in range(5))
            )

        verdicts = asyncio.run(_run())

        assert len(verdicts) == 5
        assert {call[0] for call in gateway.calls} == {
            build_answer_check_prompt(f"Q{i}?", "A") for i in range(5)
        }
