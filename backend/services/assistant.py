"""Public AI entry points: resume analysis, HR chat, performance insights.

Each entry point tries the Gemini gateway when a provider is configured and
maps a failed result to its local fallback. Nothing raised by the provider
reaches the caller.
"""

import logging
from typing import Any, Callable, TypeVar

from models.responses import ChatReply, ResumeAnalysis
from services import fallback_analyzer, fallback_responder, gemini_client
from services.gemini_client import Configured, GatewayResult, GatewaySuccess, ProviderCapability
from services.suggestions import generate_suggestions

logger = logging.getLogger(__name__)

T = TypeVar("T")

INSIGHTS_UNAVAILABLE = "Unable to generate performance insights at this time."


def resolve(result: GatewayResult, fallback: Callable[[], T], operation: str) -> T:
    """Return the gateway payload, or the fallback's value for any failure kind."""
    if isinstance(result, GatewaySuccess):
        return result.payload
    logger.error("Gemini %s during %s: %s", result.kind.value, operation, result.detail)
    return fallback()


class HRAssistant:
    def __init__(self, provider: ProviderCapability):
        self.provider = provider

    @property
    def is_configured(self) -> bool:
        return self.provider.is_configured

    async def analyze_resume(self, resume_text: str, job_description: str | None = None) -> ResumeAnalysis:
        def fallback() -> ResumeAnalysis:
            return fallback_analyzer.analyze(resume_text, job_description)

        if not isinstance(self.provider, Configured):
            return fallback()
        result = await gemini_client.request_resume_analysis(self.provider, resume_text, job_description)
        return resolve(result, fallback, "resume analysis")

    async def chat_with_ai(self, message: str, context: str | None = None) -> str:
        def fallback() -> str:
            return fallback_responder.respond(message)

        if not isinstance(self.provider, Configured):
            return fallback()
        result = await gemini_client.request_chat_reply(self.provider, message, context)
        return resolve(result, fallback, "chat")

    async def chat(self, message: str, context: str | None = None) -> ChatReply:
        """Chat reply plus up to three follow-up suggestions."""
        response = await self.chat_with_ai(message, context)
        return ChatReply(response=response, suggestions=generate_suggestions(message))

    async def generate_performance_insights(self, performance_data: dict[str, Any]) -> str:
        # No structured fallback here: degraded output is a fixed sentence
        def fallback() -> str:
            return INSIGHTS_UNAVAILABLE

        if not isinstance(self.provider, Configured):
            return fallback()
        result = await gemini_client.request_performance_insights(self.provider, performance_data)
        return resolve(result, fallback, "performance insights")


_assistant: HRAssistant | None = None


def get_assistant() -> HRAssistant:
    """Process-wide assistant; the provider key is read once on first use."""
    global _assistant
    if _assistant is None:
        _assistant = HRAssistant(gemini_client.build_capability())
    return _assistant


async def analyze_resume(resume_text: str, job_description: str | None = None) -> ResumeAnalysis:
    return await get_assistant().analyze_resume(resume_text, job_description)


async def chat_with_ai(message: str, context: str | None = None) -> str:
    return await get_assistant().chat_with_ai(message, context)


async def generate_performance_insights(performance_data: dict[str, Any]) -> str:
    return await get_assistant().generate_performance_insights(performance_data)
