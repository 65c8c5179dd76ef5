"""
Questionnaire Definition

Three-page questionnaire served to clients so the form and the validator
share one set of options. Enumerated questions take their options from
the model enums; tag questions list suggested (unenforced) values.
"""
from typing import Any, Dict, List

from policygen.models.questionnaire import (
    Sector,
    OrganizationSize,
    Jurisdiction,
    YesNo,
    ExistingFramework,
    RiskAppetite,
    REGULATOR_OPTIONS,
    AI_SYSTEM_OPTIONS,
    DATA_TYPE_OPTIONS,
    OWNER_OPTIONS,
    TIMELINE_OPTIONS,
)


def _values(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


QUESTIONNAIRE_PAGES: List[Dict[str, Any]] = [
    {
        "title": "Organization Context",
        "questions": [
            {"id": "sector", "label": "What sector are you in?", "type": "radio",
             "options": _values(Sector), "required": True},
            {"id": "organizationSize", "label": "What is your organization size?", "type": "radio",
             "options": _values(OrganizationSize), "required": True},
            {"id": "jurisdiction", "label": "Which jurisdiction applies?", "type": "select",
             "options": _values(Jurisdiction), "required": True},
            {"id": "regulatedBy", "label": "Are you regulated by:", "type": "checkbox",
             "options": list(REGULATOR_OPTIONS), "required": True},
        ],
    },
    {
        "title": "AI Use Cases",
        "questions": [
            {"id": "aiSystems", "label": "What AI systems do you use or plan to use?", "type": "checkbox",
             "options": list(AI_SYSTEM_OPTIONS), "required": False},
            {"id": "dataTypes", "label": "What data types do you process?", "type": "checkbox",
             "options": list(DATA_TYPE_OPTIONS), "required": False},
            {"id": "highRisk", "label": "Do you use AI for high-risk decisions?", "type": "radio",
             "options": _values(YesNo), "required": False},
            {"id": "customerFacing", "label": "Do you deploy AI customer-facing?", "type": "radio",
             "options": _values(YesNo), "required": False},
        ],
    },
    {
        "title": "Governance Maturity",
        "questions": [
            {"id": "existingFramework", "label": "Do you have an existing AI governance framework?",
             "type": "radio", "options": _values(ExistingFramework), "required": False},
            {"id": "riskAppetite", "label": "What is your risk appetite?", "type": "radio",
             "options": _values(RiskAppetite), "required": False},
            {"id": "owner", "label": "Who will own AI governance?", "type": "radio",
             "options": list(OWNER_OPTIONS), "required": False},
            {"id": "timeline", "label": "When do you need this policy by?", "type": "radio",
             "options": list(TIMELINE_OPTIONS), "required": False},
        ],
    },
]


def get_questionnaire() -> List[Dict[str, Any]]:
    """Return a copy of the questionnaire pages."""
    return [
        {"title": page["title"], "questions": [dict(q) for q in page["questions"]]}
        for page in QUESTIONNAIRE_PAGES
    ]
