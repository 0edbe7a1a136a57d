import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Empty key = demo mode: every entry point answers from the local fallbacks
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    # Per-entry-point generation settings
    resume_temperature: float = 0.3
    resume_max_tokens: int = 1000
    chat_temperature: float = 0.7
    chat_max_tokens: int = 600
    insights_temperature: float = 0.5
    insights_max_tokens: int = 400

    max_upload_size_mb: int = 5
    max_resume_chars: int = 50000
    max_job_description_chars: int = 10000
    max_message_chars: int = 4000

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    rate_limit: str = "10/minute"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
