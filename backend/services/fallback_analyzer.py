"""Deterministic resume analysis used when the AI provider is absent or fails.

Pipeline:
1. Extract skills / experience / education (text_features)
2. Score with the additive heuristic, boosted by job-description overlap
3. Detect strengths and weaknesses from fixed content checks
4. Tier the recommendation and write the summary sentence

Never raises: any string, including "", yields a fully populated analysis.
"""

from models.responses import ResumeAnalysis, recommendation_for
from services.scorer import final_score, relevant_skills
from services.text_features import (
    EDUCATION_NOT_SPECIFIED,
    EXPERIENCE_NOT_SPECIFIED,
    extract_education,
    extract_experience,
    extract_skills,
)

# (label, keywords) - strength applies when every group has at least one hit
_CONTENT_STRENGTHS: tuple[tuple[str, tuple[tuple[str, ...], ...]], ...] = (
    ("Project leadership experience", (("project",), ("lead",))),
    ("Team management skills", (("team",), ("manage",))),
    ("Professional certifications", (("certification", "certified"),)),
    ("Performance recognition", (("award", "recognition"),)),
)

JD_ENHANCED_NOTE = " The analysis was enhanced with the provided job description."


def _has_all(text: str, groups: tuple[tuple[str, ...], ...]) -> bool:
    return all(any(word in text for word in group) for group in groups)


def _find_strengths(text: str, skills: list[str], job_description: str | None) -> list[str]:
    strengths: list[str] = []

    if job_description:
        jd_lower = job_description.lower()
        if relevant_skills(skills, job_description):
            strengths.append("Skills align well with job description")
        if "leadership" in jd_lower and "leadership" in text:
            strengths.append("Leadership experience relevant to job description")
        if "project management" in jd_lower and "project" in text:
            strengths.append("Project management experience relevant to job description")

    if len(skills) > 3:
        strengths.append("Strong technical skill set")
    for label, groups in _CONTENT_STRENGTHS:
        if _has_all(text, groups):
            strengths.append(label)

    return strengths


def _find_weaknesses(text: str, skills: list[str], job_description: str | None) -> list[str]:
    weaknesses: list[str] = []

    if job_description and not relevant_skills(skills, job_description):
        weaknesses.append("Limited alignment with job description skills")

    if len(skills) < 2:
        weaknesses.append("Limited technical skills mentioned")
    if "experience" not in text and "year" not in text:
        weaknesses.append("Experience details unclear")
    if "education" not in text and "degree" not in text:
        weaknesses.append("Education background not specified")
    if "project" not in text:
        weaknesses.append("Limited project experience details")

    return weaknesses


def _fit_label(score: int) -> str:
    if score >= 70:
        return "strong"
    if score >= 50:
        return "moderate"
    return "developing"


def build_summary(
    skills: list[str],
    experience: str,
    education: str,
    score: int,
    job_description: str | None = None,
) -> str:
    skill_phrase = "solid technical skills" if skills else "potential"
    experience_phrase = (
        experience.lower() if experience != EXPERIENCE_NOT_SPECIFIED else "professional background"
    )
    education_phrase = (
        f"Education: {education}"
        if education != EDUCATION_NOT_SPECIFIED
        else "Education background needs clarification"
    )
    summary = (
        f"Candidate demonstrates {skill_phrase} with {experience_phrase}. "
        f"{education_phrase}. "
        f"Overall assessment indicates {_fit_label(score)} fit for the role."
    )
    if job_description:
        summary += JD_ENHANCED_NOTE
    return summary


def analyze(resume_text: str, job_description: str | None = None) -> ResumeAnalysis:
    """Build a complete analysis from resume text alone (plus optional JD)."""
    text = resume_text.lower()
    skills = extract_skills(resume_text)
    experience = extract_experience(resume_text)
    education = extract_education(resume_text)
    score = final_score(resume_text, job_description)

    # Empty strength/weakness lists are replaced by the model's default pairs
    return ResumeAnalysis(
        skills=skills,
        experience=experience,
        education=education,
        ai_score=score,
        strengths=_find_strengths(text, skills, job_description),
        weaknesses=_find_weaknesses(text, skills, job_description),
        recommendation=recommendation_for(score),
        summary=build_summary(skills, experience, education, score, job_description),
    )
