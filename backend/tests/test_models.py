import pytest
from pydantic import ValidationError

from models.responses import (
    DEFAULT_WEAKNESSES,
    ENTRY_LEVEL_CANDIDATE,
    ChatReply,
    ResumeAnalysis,
    clamp_score,
)


def test_resume_analysis_defaults():
    analysis = ResumeAnalysis()
    assert analysis.ai_score == 0
    assert analysis.weaknesses == list(DEFAULT_WEAKNESSES)
    assert analysis.recommendation == ENTRY_LEVEL_CANDIDATE


def test_resume_analysis_serializes_camel_case():
    data = ResumeAnalysis(ai_score=64).model_dump(by_alias=True)
    assert data["aiScore"] == 64
    assert "ai_score" not in data


def test_resume_analysis_is_frozen():
    analysis = ResumeAnalysis(ai_score=10)
    with pytest.raises(ValidationError):
        analysis.ai_score = 90


def test_score_rejects_booleans():
    with pytest.raises(ValidationError):
        ResumeAnalysis(aiScore=True)


@pytest.mark.parametrize("value, expected", [(-1, 0), (0, 0), (55, 55), (100, 100), (101, 100)])
def test_clamp_score(value, expected):
    assert clamp_score(value) == expected


def test_chat_reply_limits_suggestions():
    with pytest.raises(ValidationError):
        ChatReply(response="hi", suggestions=["a", "b", "c", "d"])


@pytest.mark.parametrize("value", [None, [85], {"v": 1}, float("inf"), float("nan"), "high"])
def test_score_rejects_unusable_values(value):
    with pytest.raises(ValidationError):
        ResumeAnalysis(aiScore=value)


def test_score_accepts_numeric_strings():
    assert ResumeAnalysis(aiScore="72.4").ai_score == 72
