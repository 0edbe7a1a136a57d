"""Shared dependencies for API routes."""

from services.assistant import HRAssistant, get_assistant as _default_assistant


def get_assistant() -> HRAssistant:
    return _default_assistant()
