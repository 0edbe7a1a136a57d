from services.scorer import base_score, final_score, job_description_boost, relevant_skills


def test_base_score_empty():
    assert base_score("") == 50


def test_base_score_skill_points():
    assert base_score("Python") == 55
    assert base_score("Python, React") == 60


def test_base_score_skill_cap():
    text = "JavaScript TypeScript React Node.js Python C++ HTML CSS"
    assert base_score(text) == 80


def test_base_score_content_bonuses():
    assert base_score("experience") == 60
    assert base_score("project") == 55
    assert base_score("leadership") == 60  # also matches the Leadership skill
    assert base_score("experience project") == 65


def test_base_score_never_exceeds_100():
    text = (
        "JavaScript TypeScript React Node.js Python SQL AWS Docker "
        "experience project leadership"
    )
    assert base_score(text) == 100


def test_base_score_monotonic_in_skills():
    skills = ["Python", "React", "Docker", "AWS", "Git", "Flask", "Django", "SQL"]
    previous = base_score("")
    for i in range(1, len(skills) + 1):
        current = base_score(" ".join(skills[:i]))
        assert current >= previous
        previous = current


def test_relevant_skills_literal_match():
    jd = "We need Python and Docker skills"
    assert relevant_skills(["Python", "React", "Docker"], jd) == ["Python", "Docker"]


def test_job_description_boost_cap():
    skills = ["Python", "React", "Docker", "AWS", "Git", "SQL"]
    jd = "python react docker aws git sql"
    assert job_description_boost(skills, jd) == 15


def test_final_score_with_job_description():
    assert final_score("Python", "Senior Python engineer") == 58


def test_final_score_ignores_empty_job_description():
    assert final_score("Python", "") == final_score("Python")


def test_final_score_clamped():
    text = (
        "JavaScript TypeScript React Node.js Python SQL AWS Docker "
        "experience project leadership"
    )
    assert final_score(text, "javascript typescript react python sql") == 100
