"""Google Gemini gateway.

The provider is modelled as a capability: ``Configured`` (holds a client and
can be called) or ``Unconfigured`` (demo mode, no key). Gateway requests never
raise for provider or parse problems; they return ``GatewaySuccess`` or
``GatewayFailure`` and leave the choice of fallback to the caller.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from google import genai
from google.genai import types
from pydantic import ValidationError

from config import settings
from models.responses import ResumeAnalysis
from services import prompt_builder

logger = logging.getLogger(__name__)

T = TypeVar("T")

PERFORMANCE_UNAVAILABLE = "Performance analysis unavailable"


class FailureKind(str, Enum):
    PROVIDER_ERROR = "provider_error"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class GatewaySuccess(Generic[T]):
    payload: T


@dataclass(frozen=True)
class GatewayFailure:
    kind: FailureKind
    detail: str


GatewayResult = GatewaySuccess | GatewayFailure


@dataclass(frozen=True)
class Unconfigured:
    is_configured: ClassVar[bool] = False


@dataclass(frozen=True)
class Configured:
    client: Any
    model: str = "gemini-2.5-flash"
    is_configured: ClassVar[bool] = True

    async def call(
        self,
        prompt: str,
        *,
        system_instruction: str | None = None,
        temperature: float = 0.3,
        max_tokens: int = 1000,
    ) -> str:
        """Send one prompt and return the stripped response text ("" if empty)."""
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=temperature,
                max_output_tokens=max_tokens,
            ),
        )
        return (response.text or "").strip()


ProviderCapability = Configured | Unconfigured


def build_capability(api_key: str | None = None, model: str | None = None) -> ProviderCapability:
    """Create the provider capability from an explicit key or the settings."""
    key = settings.gemini_api_key if api_key is None else api_key
    if not key:
        logger.info("No GEMINI_API_KEY set - running in demo mode with local fallbacks")
        return Unconfigured()
    return Configured(client=genai.Client(api_key=key), model=model or settings.gemini_model)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if the model added one."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_resume_analysis(raw: str) -> GatewayResult:
    try:
        data = json.loads(strip_code_fences(raw))
        return GatewaySuccess(ResumeAnalysis.model_validate(data))
    except json.JSONDecodeError as e:
        return GatewayFailure(FailureKind.PARSE_ERROR, f"invalid JSON: {e}")
    except ValidationError as e:
        return GatewayFailure(FailureKind.PARSE_ERROR, f"unexpected analysis shape: {e.error_count()} errors")
    except Exception as e:
        return GatewayFailure(FailureKind.PARSE_ERROR, f"unreadable analysis: {type(e).__name__}: {e}")


async def _call(provider: Configured, prompt: str, **kwargs: Any) -> GatewayResult:
    try:
        return GatewaySuccess(await provider.call(prompt, **kwargs))
    except Exception as e:
        return GatewayFailure(FailureKind.PROVIDER_ERROR, str(e) or type(e).__name__)


async def request_resume_analysis(
    provider: Configured, resume_text: str, job_description: str | None = None
) -> GatewayResult:
    result = await _call(
        provider,
        prompt_builder.build_resume_prompt(resume_text, job_description),
        temperature=settings.resume_temperature,
        max_tokens=settings.resume_max_tokens,
    )
    if isinstance(result, GatewayFailure):
        return result
    return parse_resume_analysis(result.payload)


async def request_chat_reply(provider: Configured, message: str, context: str | None = None) -> GatewayResult:
    result = await _call(
        provider,
        message,
        system_instruction=prompt_builder.build_chat_system_prompt(context),
        temperature=settings.chat_temperature,
        max_tokens=settings.chat_max_tokens,
    )
    if isinstance(result, GatewaySuccess) and not result.payload:
        return GatewaySuccess(prompt_builder.GENERIC_APOLOGY)
    return result


async def request_performance_insights(provider: Configured, performance_data: dict[str, Any]) -> GatewayResult:
    result = await _call(
        provider,
        prompt_builder.build_performance_prompt(performance_data),
        temperature=settings.insights_temperature,
        max_tokens=settings.insights_max_tokens,
    )
    if isinstance(result, GatewaySuccess) and not result.payload:
        return GatewaySuccess(PERFORMANCE_UNAVAILABLE)
    return result
