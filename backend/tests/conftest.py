"""Shared test configuration: demo-mode assistant and stubbed Gemini providers."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from services.assistant import HRAssistant
from services.gemini_client import Configured, Unconfigured


def _make_provider(text: str | None = "", error: Exception | None = None) -> Configured:
    """Configured provider whose client returns ``text`` or raises ``error``."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(text=text),
        side_effect=error,
    )
    return Configured(client=client, model="test-model")


@pytest.fixture
def make_provider():
    return _make_provider


@pytest.fixture
def demo_assistant():
    return HRAssistant(Unconfigured())
