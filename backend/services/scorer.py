"""Additive heuristic suitability score used when no AI provider answers."""

from models.responses import clamp_score
from services.text_features import extract_skills

BASE_SCORE = 50
SKILL_POINTS = 5
SKILL_CAP = 30
RELEVANT_SKILL_POINTS = 3
RELEVANT_SKILL_CAP = 15

# (keyword, bonus) applied once each when the keyword appears in the resume
CONTENT_BONUSES: tuple[tuple[str, int], ...] = (
    ("experience", 10),
    ("project", 5),
    ("leadership", 5),
)


def base_score(text: str) -> int:
    """Score resume text alone. Capped at 100; the lower bound is applied by
    :func:`final_score`."""
    lowered = text.lower()
    score = BASE_SCORE + min(len(extract_skills(text)) * SKILL_POINTS, SKILL_CAP)
    for keyword, bonus in CONTENT_BONUSES:
        if keyword in lowered:
            score += bonus
    return min(score, 100)


def relevant_skills(skills: list[str], job_description: str) -> list[str]:
    """Skills that appear literally in the job description."""
    jd_lower = job_description.lower()
    return [skill for skill in skills if skill.lower() in jd_lower]


def job_description_boost(skills: list[str], job_description: str) -> int:
    return min(len(relevant_skills(skills, job_description)) * RELEVANT_SKILL_POINTS, RELEVANT_SKILL_CAP)


def final_score(text: str, job_description: str | None = None) -> int:
    """Base score plus the job-description boost, clamped to 0-100."""
    score = base_score(text)
    if job_description:
        score += job_description_boost(extract_skills(text), job_description)
    return clamp_score(score)
