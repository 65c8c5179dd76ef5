"""
Policy Generator - Deterministic AI Governance Policy Assembly

Turns a questionnaire into a multi-section AI governance policy.

Core Principle: Policies are ASSEMBLED, not WRITTEN.

Components:
- QuestionnaireValidator: raw submission -> QuestionnaireInput
- SectionComposer: questionnaire -> section drafts
- ContentExpander: draft -> draft padded to its target word count
- Regulatory references: sector -> 5 citations
- PolicyValidator: structural invariants of an assembled policy
- PolicyAssembler: orchestrates all of the above

Usage:
    from policygen.services.policy_generator import generate_policy

    policy = generate_policy({
        "sector": "Finance",
        "organizationSize": "100-500",
        "jurisdiction": "Federal",
        "regulatedBy": ["ASIC", "APRA"],
    })

    print(policy.word_count)
"""

from .errors import (
    PolicyGenerationError,
    QuestionnaireValidationError,
    MissingField,
    InvalidEnum,
    InvalidFieldValue,
    PolicyInvariantViolation,
    PolicyTooShort,
    MissingSection,
    InsufficientReferences,
)

from .input_validator import (
    QuestionnaireValidator,
    get_validator,
    validate_questionnaire,
)

from .regulatory_references import (
    REGULATORY_REFERENCES,
    get_regulatory_references,
)

from .section_composer import (
    SectionComposer,
    SECTION_TEMPLATES,
    build_context,
    get_composer,
    compose_section,
)

from .content_expander import (
    ContentExpander,
    SECTION_TARGET_WORDS,
    SECTOR_ELABORATIONS,
    IMPLEMENTATION_APPROACH,
    FILLER_PARAGRAPHS,
    MAX_FILLER_WORDS,
    filler_paragraph_count,
    get_expander,
    expand_content,
)

from .output_validator import (
    PolicyValidator,
    MIN_POLICY_WORDS,
    MIN_REGULATORY_REFERENCES,
    get_policy_validator,
    validate_policy,
)

from .policy_assembler import (
    PolicyAssembler,
    get_assembler,
    assemble_policy,
    generate_policy,
)

from .questionnaire import (
    QUESTIONNAIRE_PAGES,
    get_questionnaire,
)

__all__ = [
    # Errors
    "PolicyGenerationError",
    "QuestionnaireValidationError",
    "MissingField",
    "InvalidEnum",
    "InvalidFieldValue",
    "PolicyInvariantViolation",
    "PolicyTooShort",
    "MissingSection",
    "InsufficientReferences",
    # Input Validator
    "QuestionnaireValidator",
    "get_validator",
    "validate_questionnaire",
    # Reference Table
    "REGULATORY_REFERENCES",
    "get_regulatory_references",
    # Section Composer
    "SectionComposer",
    "SECTION_TEMPLATES",
    "build_context",
    "get_composer",
    "compose_section",
    # Content Expander
    "ContentExpander",
    "SECTION_TARGET_WORDS",
    "SECTOR_ELABORATIONS",
    "IMPLEMENTATION_APPROACH",
    "FILLER_PARAGRAPHS",
    "MAX_FILLER_WORDS",
    "filler_paragraph_count",
    "get_expander",
    "expand_content",
    # Output Validator
    "PolicyValidator",
    "MIN_POLICY_WORDS",
    "MIN_REGULATORY_REFERENCES",
    "get_policy_validator",
    "validate_policy",
    # Policy Assembler
    "PolicyAssembler",
    "get_assembler",
    "assemble_policy",
    "generate_policy",
    # Questionnaire
    "QUESTIONNAIRE_PAGES",
    "get_questionnaire",
]
