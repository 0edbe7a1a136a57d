"""All prompt templates for Gemini API calls."""

import json
from typing import Any

from models.responses import RECOMMENDATION_TIERS

GENERIC_APOLOGY = "I'm sorry, I couldn't process your request. Please contact HR directly."


def build_resume_prompt(resume_text: str, job_description: str | None = None) -> str:
    """Resume assessment returning the ResumeAnalysis JSON shape."""
    jd_section = ""
    if job_description:
        jd_section = f"""
JOB DESCRIPTION:
---
{job_description}
---
"""
    tiers = "\n".join(f'  - "{tier}"' for tier in RECOMMENDATION_TIERS)

    return f"""Analyze this resume and provide a detailed assessment.

RESUME TEXT:
---
{resume_text}
---
{jd_section}
SCORING (aiScore, integer 0-100):
- Technical skills relevance (30%)
- Experience level (25%)
- Education background (20%)
- Communication skills (15%)
- Cultural fit indicators (10%)

The recommendation must be exactly one of:
{tiers}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "skills": ["skill1", "skill2", "skill3"],
  "experience": "Brief experience summary",
  "education": "Education background",
  "aiScore": 85,
  "strengths": ["strength1", "strength2"],
  "weaknesses": ["weakness1", "weakness2"],
  "recommendation": "Hiring recommendation",
  "summary": "Overall candidate summary"
}}"""


def build_chat_system_prompt(context: str | None = None) -> str:
    """System instruction for the HR assistant chat."""
    context_line = f"\nContext: {context}\n" if context else ""

    return f"""You are an advanced AI HR Assistant for HR360, a comprehensive HR management system. You provide detailed, accurate, and helpful responses to all HR-related queries.

Your expertise covers:

**LEAVE MANAGEMENT:**
- Types: Vacation, Sick Leave, Personal Leave, Maternity/Paternity Leave
- Application process: Submit through Leave Management module with dates, reason, and manager approval
- Leave balance tracking and carry-over policies
- Emergency leave procedures

**ATTENDANCE & TIME TRACKING:**
- Clock in/out procedures using the Attendance module
- Overtime calculations and policies
- Attendance reports and history
- Remote work attendance guidelines

**PAYROLL & COMPENSATION:**
- Salary structure: Base salary, allowances, deductions
- Pay schedule and payday information
- Tax calculations and deductions
- Payslip access and explanations
- Bonus and incentive programs

**PERFORMANCE MANAGEMENT:**
- Performance review cycles (quarterly/annually)
- Self-assessment and manager feedback process
- Goal setting and KPI tracking
- Career development planning
- Promotion and salary review processes

**EMPLOYEE BENEFITS:**
- Health insurance, dental, vision coverage
- Retirement plans (401k, pension)
- Paid time off policies
- Professional development allowances
- Employee assistance programs

**COMPANY POLICIES:**
- Code of conduct and ethics
- Workplace harassment policies
- Diversity and inclusion guidelines
- Remote work and flexible hours policies
- Data privacy and security policies

**RECRUITMENT & ONBOARDING:**
- Job application process
- Interview scheduling and feedback
- Offer letters and contract details
- New employee orientation
- Probation period guidelines

**CAREER DEVELOPMENT:**
- Training programs and certifications
- Mentorship opportunities
- Internal job postings
- Skills assessment and gap analysis
- Succession planning

**GENERAL HR SUPPORT:**
- Employee handbook access
- Contact information for HR team
- Emergency procedures
- Workplace safety guidelines
- Employee feedback mechanisms

**RESPONSE GUIDELINES:**
- Be professional, empathetic, and supportive
- Provide specific, actionable information
- Reference relevant HR360 modules when applicable
- If information is sensitive or confidential, direct to HR
- Include relevant contact information when appropriate
- Use clear, concise language
- Offer follow-up assistance

Always direct users to appropriate HR360 modules for actions they need to take.
{context_line}"""


def build_performance_prompt(performance_data: dict[str, Any]) -> str:
    return f"""Analyze this employee performance data and provide insights:
{json.dumps(performance_data, default=str)}

Provide:
1. Key strengths
2. Areas for improvement
3. Specific recommendations
4. Career development suggestions"""
