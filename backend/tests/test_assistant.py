import json
import logging

import pytest

from models.responses import ChatReply, ResumeAnalysis
from services import fallback_analyzer, fallback_responder
from services.assistant import INSIGHTS_UNAVAILABLE, HRAssistant, resolve
from services.gemini_client import FailureKind, GatewayFailure, GatewaySuccess
from services.prompt_builder import GENERIC_APOLOGY

RESUME = "5 years of experience. Skills: JavaScript, React, Node.js, Python. Led a project team."


def test_resolve_success():
    assert resolve(GatewaySuccess("ok"), lambda: "fallback", "chat") == "ok"


@pytest.mark.parametrize("kind", list(FailureKind))
def test_resolve_failure_uses_fallback(kind, caplog):
    with caplog.at_level(logging.ERROR):
        assert resolve(GatewayFailure(kind, "detail"), lambda: "fallback", "chat") == "fallback"
    assert kind.value in caplog.text


class TestDemoMode:
    @pytest.mark.asyncio
    async def test_analyze_resume_uses_fallback(self, demo_assistant):
        result = await demo_assistant.analyze_resume(RESUME, "React developer")
        assert result == fallback_analyzer.analyze(RESUME, "React developer")

    @pytest.mark.asyncio
    async def test_chat_uses_fallback_responder(self, demo_assistant):
        response = await demo_assistant.chat_with_ai("How do I apply for leave?")
        assert response == fallback_responder.LEAVE_APPLY_RESPONSE

    @pytest.mark.asyncio
    async def test_chat_reply_has_suggestions(self, demo_assistant):
        reply = await demo_assistant.chat("How do I apply for leave?")
        assert isinstance(reply, ChatReply)
        assert len(reply.suggestions) == 3

    @pytest.mark.asyncio
    async def test_insights_sentinel(self, demo_assistant):
        assert await demo_assistant.generate_performance_insights({"score": 3}) == INSIGHTS_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_no_failure_logged(self, demo_assistant, caplog):
        with caplog.at_level(logging.WARNING):
            await demo_assistant.analyze_resume("")
            await demo_assistant.chat_with_ai("")
        assert caplog.records == []

    def test_is_configured(self, demo_assistant):
        assert demo_assistant.is_configured is False


class TestConfiguredProvider:
    @pytest.mark.asyncio
    async def test_analyze_resume_success(self, make_provider):
        payload = {"skills": ["Go"], "aiScore": 72, "summary": "AI summary"}
        assistant = HRAssistant(make_provider(text=json.dumps(payload)))
        result = await assistant.analyze_resume(RESUME)
        assert isinstance(result, ResumeAnalysis)
        assert result.summary == "AI summary"
        assert result.ai_score == 72

    @pytest.mark.asyncio
    async def test_analyze_resume_parse_failure_falls_back(self, make_provider):
        assistant = HRAssistant(make_provider(text="not json"))
        assert await assistant.analyze_resume(RESUME) == fallback_analyzer.analyze(RESUME)

    @pytest.mark.asyncio
    async def test_analyze_resume_provider_error_falls_back(self, make_provider):
        assistant = HRAssistant(make_provider(error=TimeoutError()))
        assert await assistant.analyze_resume(RESUME, "Python") == fallback_analyzer.analyze(RESUME, "Python")

    @pytest.mark.asyncio
    async def test_chat_success_verbatim(self, make_provider):
        assistant = HRAssistant(make_provider(text="Use the Leave module."))
        assert await assistant.chat_with_ai("leave?") == "Use the Leave module."

    @pytest.mark.asyncio
    async def test_chat_empty_body_apology(self, make_provider):
        assistant = HRAssistant(make_provider(text=""))
        assert await assistant.chat_with_ai("leave?") == GENERIC_APOLOGY

    @pytest.mark.asyncio
    async def test_chat_error_falls_back(self, make_provider):
        assistant = HRAssistant(make_provider(error=RuntimeError("quota exceeded")))
        assert await assistant.chat_with_ai("hello") == fallback_responder.GREETING_RESPONSE

    @pytest.mark.asyncio
    async def test_insights_success(self, make_provider):
        assistant = HRAssistant(make_provider(text="Keep mentoring."))
        assert await assistant.generate_performance_insights({"kpi": 0.9}) == "Keep mentoring."

    @pytest.mark.asyncio
    async def test_insights_error_sentinel(self, make_provider):
        assistant = HRAssistant(make_provider(error=RuntimeError("down")))
        assert await assistant.generate_performance_insights({}) == INSIGHTS_UNAVAILABLE

    def test_is_configured(self, make_provider):
        assert HRAssistant(make_provider()).is_configured is True


@pytest.mark.asyncio
@pytest.mark.parametrize("score", ["null", "[85]", "Infinity", "1e999"])
async def test_unusable_ai_score_falls_back(make_provider, score):
    assistant = HRAssistant(make_provider(text='{"skills": ["Go"], "aiScore": ' + score + "}"))
    assert await assistant.analyze_resume(RESUME, "Go") == fallback_analyzer.analyze(RESUME, "Go")
