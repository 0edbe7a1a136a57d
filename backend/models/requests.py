from typing import Any

from pydantic import BaseModel, Field

from config import settings


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=settings.max_resume_chars, description="Plain text resume content")
    job_description: str | None = Field(
        None, max_length=settings.max_job_description_chars, description="Optional job description text"
    )


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=settings.max_message_chars, description="User message")
    context: str | None = Field(None, max_length=1000, description="Caller identity / role")


class PerformanceInsightsRequest(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict, description="Opaque employee performance record")
