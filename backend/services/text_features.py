"""Keyword/pattern extraction of resume signals for the local fallback path."""

import re

# Ordered catalogue: extraction preserves this order
SKILL_CATALOGUE: tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "C++",
    "HTML", "CSS", "SQL", "MongoDB", "PostgreSQL", "AWS", "Docker", "Git",
    "Angular", "Vue.js", "Express", "Django", "Flask", "Spring Boot",
    "Machine Learning", "Data Analysis", "Project Management", "Leadership",
)

EDUCATION_KEYWORDS: tuple[str, ...] = (
    "Bachelor", "Master", "PhD", "Degree", "University", "College",
)

EXPERIENCE_NOT_SPECIFIED = "Experience details not clearly specified"
EDUCATION_NOT_SPECIFIED = "Education details not specified"

_YEARS_RE = re.compile(r"(\d+)\s*(years?|yrs?)", re.IGNORECASE)


def extract_skills(text: str) -> list[str]:
    """Return catalogue skills mentioned anywhere in the text (substring match)."""
    lowered = text.lower()
    return [skill for skill in SKILL_CATALOGUE if skill.lower() in lowered]


def extract_experience(text: str) -> str:
    match = _YEARS_RE.search(text)
    if match:
        return f"{match.group(1)} years of professional experience"
    return EXPERIENCE_NOT_SPECIFIED


def extract_education(text: str) -> str:
    lowered = text.lower()
    for keyword in EDUCATION_KEYWORDS:
        if keyword.lower() in lowered:
            return f"{keyword} level education identified"
    return EDUCATION_NOT_SPECIFIED
