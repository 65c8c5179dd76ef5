"""AI Governance Policy Generator - Data Models"""
from .questionnaire import (
    # Enums
    Sector, OrganizationSize, Jurisdiction, YesNo, ExistingFramework, RiskAppetite,
    # Input
    QuestionnaireInput,
)
from .policy_document import (
    PolicySection, MANDATORY_SECTIONS, EXTENDED_SECTIONS,
    RegulatoryReference, PolicyDocument, PolicySummary,
    count_words,
)

__all__ = [
    "Sector", "OrganizationSize", "Jurisdiction", "YesNo", "ExistingFramework", "RiskAppetite",
    "QuestionnaireInput",
    "PolicySection", "MANDATORY_SECTIONS", "EXTENDED_SECTIONS",
    "RegulatoryReference", "PolicyDocument", "PolicySummary",
    "count_words",
]
