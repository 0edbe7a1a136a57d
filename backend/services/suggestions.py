"""Follow-up suggestions offered with every chat reply."""

MAX_SUGGESTIONS = 3

# (trigger substrings, suggestions); unlike intent matching, every hit contributes
SUGGESTION_MAP: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (
        ("leave", "vacation"),
        (
            "What's my leave balance?",
            "How many vacation days do I have left?",
            "Can I see my leave history?",
        ),
    ),
    (
        ("attendance", "clock"),
        (
            "Show me my attendance report",
            "How many hours did I work this month?",
            "Am I eligible for overtime?",
        ),
    ),
    (
        ("payroll", "salary", "pay"),
        (
            "What's my salary breakdown?",
            "When is payday?",
            "How do I download my payslip?",
        ),
    ),
    (
        ("performance", "review"),
        (
            "What's my current performance score?",
            "When is my next review?",
            "How can I improve my performance?",
        ),
    ),
    (
        ("benefit", "insurance"),
        (
            "What health insurance do I have?",
            "Tell me about retirement benefits",
            "How does the 401k work?",
        ),
    ),
    (
        ("career", "training"),
        (
            "What training programs are available?",
            "How can I get promoted?",
            "Are there mentorship opportunities?",
        ),
    ),
    (
        ("policy", "handbook"),
        (
            "What's the remote work policy?",
            "Tell me about the code of conduct",
            "What are the safety procedures?",
        ),
    ),
)

DEFAULT_SUGGESTIONS = (
    "How do I apply for leave?",
    "Check my attendance",
    "Show me my payslip",
    "Tell me about benefits",
)


def generate_suggestions(message: str) -> list[str]:
    lowered = message.lower()
    suggestions: list[str] = []
    for triggers, items in SUGGESTION_MAP:
        if any(t in lowered for t in triggers):
            suggestions.extend(items)
    if not suggestions:
        suggestions.extend(DEFAULT_SUGGESTIONS)
    return list(dict.fromkeys(suggestions))[:MAX_SUGGESTIONS]
