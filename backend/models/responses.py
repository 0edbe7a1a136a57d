import math

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_STRENGTHS = ("Technical background", "Professional experience")
DEFAULT_WEAKNESSES = (
    "Could provide more specific examples",
    "Additional certifications could strengthen profile",
)

STRONG_CANDIDATE = "Strong candidate - recommend immediate interview"
GOOD_CANDIDATE = "Good candidate - consider for interview with additional screening"
ENTRY_LEVEL_CANDIDATE = "Consider for entry-level positions or with additional training"
RECOMMENDATION_TIERS = (STRONG_CANDIDATE, GOOD_CANDIDATE, ENTRY_LEVEL_CANDIDATE)


def clamp_score(score: int) -> int:
    return max(0, min(100, score))


def recommendation_for(score: int) -> str:
    """Map a 0-100 score to one of the three hiring tiers."""
    if score >= 80:
        return STRONG_CANDIDATE
    if score >= 60:
        return GOOD_CANDIDATE
    return ENTRY_LEVEL_CANDIDATE


class ResumeAnalysis(BaseModel):
    """Structured resume assessment, produced either by the AI provider or
    by the local fallback analyzer.

    Fields serialize in camelCase (``aiScore``) and accept both spellings
    on input, so the provider's JSON can be validated directly.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    skills: list[str] = []
    experience: str = ""
    education: str = ""
    ai_score: int = 0
    strengths: list[str] = Field(default_factory=list, validate_default=True)
    weaknesses: list[str] = Field(default_factory=list, validate_default=True)
    recommendation: str = Field("", validate_default=True)
    summary: str = ""

    @field_validator("ai_score", mode="before")
    @classmethod
    def _coerce_score(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValueError("aiScore must be numeric")
        try:
            score = float(value)
        except (TypeError, ValueError):
            raise ValueError("aiScore must be numeric")
        if not math.isfinite(score):
            raise ValueError("aiScore must be finite")
        return clamp_score(round(score))

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    @field_validator("strengths")
    @classmethod
    def _default_strengths(cls, value: list[str]) -> list[str]:
        return value or list(DEFAULT_STRENGTHS)

    @field_validator("weaknesses")
    @classmethod
    def _default_weaknesses(cls, value: list[str]) -> list[str]:
        return value or list(DEFAULT_WEAKNESSES)

    @field_validator("recommendation")
    @classmethod
    def _tier_recommendation(cls, value: str, info: ValidationInfo) -> str:
        if value in RECOMMENDATION_TIERS:
            return value
        # ai_score is declared earlier, so it is already validated here
        return recommendation_for(info.data.get("ai_score", 0))


class ChatReply(BaseModel):
    response: str
    suggestions: list[str] = Field(default_factory=list, max_length=3)


class PerformanceInsights(BaseModel):
    insights: str
