"""Canned HR guidance for chat messages when the AI provider is unavailable.

The taxonomy is an ordered table of intent categories. The first category
whose trigger matches the lower-cased message wins; inside it, sub-intents
are tried in order and the category's generic template is the fallback.
Exactly one template is returned per message.
"""

import re
from dataclasses import dataclass, field


def _words(*phrases: str) -> re.Pattern:
    """Trigger matching whole words/phrases only (ASCII word boundaries)."""
    return re.compile(r"\b(?:" + "|".join(re.escape(p) for p in phrases) + r")\b", re.ASCII)


def _substrings(*phrases: str) -> re.Pattern:
    """Trigger matching anywhere in the message, inside words too."""
    return re.compile("|".join(re.escape(p) for p in phrases))


@dataclass(frozen=True)
class SubIntent:
    name: str
    trigger: re.Pattern
    template: str


@dataclass(frozen=True)
class IntentCategory:
    name: str
    trigger: re.Pattern
    template: str
    sub_intents: tuple[SubIntent, ...] = field(default_factory=tuple)

    def matches(self, message: str) -> bool:
        return self.trigger.search(message) is not None

    def respond(self, message: str) -> str:
        for sub in self.sub_intents:
            if sub.trigger.search(message):
                return sub.template
        return self.template


GREETING_RESPONSE = (
    "Hello! 👋 I'm your HR360 AI Assistant. I'm here to help you with all your HR-related "
    "questions and guide you through our HR management system. What can I assist you with today?"
)

LEAVE_APPLY_RESPONSE = (
    "To apply for leave in HR360:\n"
    "1. Navigate to the 'Leave Management' module\n"
    "2. Click 'Apply for Leave'\n"
    "3. Select leave type (Vacation, Sick, Personal, etc.)\n"
    "4. Choose start and end dates\n"
    "5. Provide a reason for your leave\n"
    "6. Submit for manager approval\n\n"
    "Your leave balance and approval status will be tracked automatically."
)

DEFAULT_RESPONSE = (
    "I'm your HR360 AI Assistant, here to help with all HR-related queries! I can assist with:\n\n"
    "• Leave applications and policies\n"
    "• Attendance tracking and reports\n"
    "• Payroll and salary information\n"
    "• Performance reviews and goals\n"
    "• Company policies and benefits\n"
    "• Career development opportunities\n"
    "• Recruitment and onboarding\n\n"
    "What specific HR topic can I help you with today?"
)

INTENT_CATEGORIES: tuple[IntentCategory, ...] = (
    IntentCategory(
        "greeting",
        _words("hello", "hi", "hey", "greetings", "good morning", "good afternoon", "good evening"),
        GREETING_RESPONSE,
    ),
    IntentCategory(
        "well_being",
        _words("how are you", "how's it going", "what's up"),
        "I'm doing great, thank you for asking! I'm here and ready to help you with any "
        "HR-related questions or tasks in HR360. How can I assist you today?",
    ),
    IntentCategory(
        "gratitude",
        _words("thank you", "thanks", "thankyou"),
        "You're very welcome! I'm glad I could help. If you have any other HR questions or "
        "need assistance with HR360, feel free to ask anytime.",
    ),
    IntentCategory(
        "farewell",
        _words("bye", "goodbye", "see you", "farewell"),
        "Goodbye! Have a great day. Remember, I'm always here in HR360 if you need any HR assistance.",
    ),
    IntentCategory(
        "help",
        _words("help", "assist", "support"),
        "I'm here to help! I can assist you with:\n\n"
        "• Leave applications and policies\n"
        "• Attendance tracking and reports\n"
        "• Payroll and salary information\n"
        "• Performance reviews and goals\n"
        "• Company policies and benefits\n"
        "• Career development opportunities\n"
        "• Recruitment and onboarding\n\n"
        "What specific area would you like help with?",
    ),
    IntentCategory(
        "leave",
        _substrings("leave", "vacation", "holiday"),
        "HR360 supports various leave types: Vacation, Sick Leave, Personal Leave, "
        "Maternity/Paternity Leave. All leave requests require manager approval and are "
        "tracked in the Leave Management module.",
        (
            SubIntent("apply", _substrings("apply", "request"), LEAVE_APPLY_RESPONSE),
            SubIntent(
                "balance",
                _substrings("balance", "remaining"),
                "You can check your leave balance in the Leave Management section. It shows:\n"
                "• Vacation days available\n"
                "• Sick leave balance\n"
                "• Personal days\n"
                "• Used days this year\n\n"
                "Contact HR if you need to carry over leave from previous years.",
            ),
        ),
    ),
    IntentCategory(
        "attendance",
        _substrings("attendance", "clock", "time"),
        "The Attendance module helps you track work hours, view attendance history, and "
        "monitor your work schedule. Use the clock in/out buttons for accurate time tracking.",
        (
            SubIntent(
                "clock",
                _substrings("clock in", "clock out"),
                "To track your attendance:\n"
                "1. Go to the 'Attendance' module\n"
                "2. Use the 'Clock In' button when you start work\n"
                "3. Use the 'Clock Out' button when you finish\n"
                "4. Your hours are automatically calculated\n\n"
                "The system tracks regular hours, overtime, and provides attendance reports.",
            ),
            SubIntent(
                "report",
                _substrings("report", "history"),
                "Your attendance history is available in the Attendance module. You can view:\n"
                "• Daily clock in/out times\n"
                "• Total hours worked per day\n"
                "• Weekly/monthly summaries\n"
                "• Attendance trends and patterns\n\n"
                "Managers can access team attendance reports.",
            ),
        ),
    ),
    IntentCategory(
        "payroll",
        _substrings("payroll", "salary", "pay", "payslip"),
        "Payroll information is available in the Payroll Management module. You can view "
        "salary details, tax calculations, payslips, and payment history. Contact Finance for "
        "questions about deductions or allowances.",
        (
            SubIntent(
                "payslip",
                _substrings("payslip", "download"),
                "To access your payslips:\n"
                "1. Go to the 'Payroll Management' module\n"
                "2. Select the desired pay period\n"
                "3. Click 'View Details' to see salary breakdown\n"
                "4. Use 'Download PDF' to save your payslip\n\n"
                "Payslips show base salary, allowances, deductions, and net pay.",
            ),
            SubIntent(
                "structure",
                _substrings("structure", "breakdown"),
                "Your salary structure typically includes:\n"
                "• Base Salary (monthly/annual)\n"
                "• HRA (House Rent Allowance)\n"
                "• Conveyance Allowance\n"
                "• LTA (Leave Travel Allowance)\n"
                "• Medical Allowance\n"
                "• Tax deductions (TDS)\n"
                "• Provident Fund contributions\n\n"
                "Check Payroll section for your specific breakdown.",
            ),
        ),
    ),
    IntentCategory(
        "performance",
        _substrings("performance", "review", "appraisal"),
        "The Performance Management module tracks your performance scores, reviews, goals, and "
        "development plans. Regular feedback helps you grow professionally and align with "
        "company expectations.",
        (
            SubIntent(
                "review",
                _substrings("review", "cycle"),
                "Performance reviews are conducted quarterly/annually. To view your reviews:\n"
                "1. Go to 'Performance Management' module\n"
                "2. Check your current score and trends\n"
                "3. View detailed feedback from managers\n"
                "4. See goals and achievements\n\n"
                "Reviews include self-assessment, manager feedback, and development plans.",
            ),
            SubIntent(
                "goals",
                _substrings("goal", "kpi"),
                "Performance goals are set during reviews and tracked throughout the year. You can:\n"
                "• View current goals in Performance Management\n"
                "• Update progress on objectives\n"
                "• Request feedback from managers\n"
                "• Set new development goals\n\n"
                "Goals are aligned with company objectives and your role.",
            ),
        ),
    ),
    IntentCategory(
        "benefits",
        _substrings("benefit", "insurance", "health"),
        "Employee benefits in HR360 include:\n"
        "• Health Insurance (medical, dental, vision)\n"
        "• Retirement Plans (401k, pension)\n"
        "• Paid Time Off (vacation, sick leave)\n"
        "• Professional Development allowance\n"
        "• Employee Assistance Programs\n\n"
        "Check with HR for specific coverage details and enrollment.",
    ),
    IntentCategory(
        "policy",
        _substrings("policy", "handbook", "code"),
        "Company policies cover:\n"
        "• Code of Conduct and Ethics\n"
        "• Workplace Harassment policies\n"
        "• Diversity and Inclusion guidelines\n"
        "• Remote Work policies\n"
        "• Data Privacy and Security\n"
        "• Safety and Emergency procedures\n\n"
        "The Employee Handbook is available through HR. Contact HR department for specific "
        "policy interpretations.",
    ),
    IntentCategory(
        "career",
        _substrings("career", "training", "development"),
        "Career development opportunities include:\n"
        "• Training programs and certifications\n"
        "• Mentorship programs\n"
        "• Internal job postings\n"
        "• Skills assessment and gap analysis\n"
        "• Leadership development programs\n\n"
        "Discuss your career goals with your manager or HR for personalized development plans.",
    ),
    IntentCategory(
        "recruitment",
        _substrings("recruit", "hire", "interview"),
        "For recruitment queries:\n"
        "• Job openings are posted internally first\n"
        "• Apply through the Resume Screening module\n"
        "• Interviews are scheduled via Interview Scheduling\n"
        "• New hires go through orientation\n\n"
        "Contact HR for current openings or application status.",
    ),
    IntentCategory(
        "hr_contact",
        _substrings("hr", "contact", "help"),
        "For additional HR support:\n"
        "• Email: hr@hr360.com\n"
        "• Phone: Ext. 123\n"
        "• HR Portal: Access all modules from the main dashboard\n"
        "• Emergency: Contact your manager or HR directly\n\n"
        "I'm here to help with system-related questions and general guidance.",
    ),
    IntentCategory(
        "affirmative",
        _words("yes", "yeah", "yep", "sure", "okay", "ok"),
        "Great! I'm here to help. What specific HR topic would you like assistance with? I can "
        "help with leave management, attendance, payroll, performance reviews, benefits, "
        "policies, and more.",
    ),
    IntentCategory(
        "negative",
        _words("no", "nope", "nah", "not really"),
        "No problem at all! If you change your mind and need help with any HR-related questions "
        "or tasks in HR360, just let me know. I'm always here to assist.",
    ),
    IntentCategory(
        "capabilities",
        _substrings("what can you do", "what do you do", "your capabilities"),
        "As your HR360 AI Assistant, I can help you with:\n\n"
        "• 📋 Leave applications and balance tracking\n"
        "• ⏰ Attendance tracking and reports\n"
        "• 💰 Payroll information and payslips\n"
        "• 📈 Performance reviews and goal setting\n"
        "• 🏥 Employee benefits and insurance\n"
        "• 📖 Company policies and procedures\n"
        "• 🎯 Career development and training\n"
        "• 👥 Recruitment and onboarding\n\n"
        "I provide step-by-step guidance and direct you to the right HR360 modules for your needs.",
    ),
    IntentCategory(
        "identity",
        _substrings("who are you", "what are you"),
        "I'm the AI HR Assistant for HR360, your comprehensive HR management system. I'm designed "
        "to help employees, managers, and HR staff with all HR-related questions and tasks. I "
        "provide accurate information, step-by-step guidance, and can direct you to the "
        "appropriate modules in the system.",
    ),
)


def match_intent(message: str) -> IntentCategory | None:
    """First category (in priority order) triggered by the message."""
    lowered = message.lower()
    for category in INTENT_CATEGORIES:
        if category.matches(lowered):
            return category
    return None


def respond(message: str) -> str:
    lowered = message.lower()
    category = match_intent(lowered)
    if category is None:
        return DEFAULT_RESPONSE
    return category.respond(lowered)
