"""
Policy Output Validator

Defines what a valid policy is. Checks run in a fixed order and stop at
the first failure:

1. Total word count >= MIN_POLICY_WORDS          -> PolicyTooShort
2. Every mandatory section non-empty when trimmed -> MissingSection
3. Regulatory mapping has >= MIN_REGULATORY_REFERENCES entries
                                                  -> InsufficientReferences
"""

from typing import Optional

from policygen.models.policy_document import PolicyDocument, MANDATORY_SECTIONS

from .errors import PolicyTooShort, MissingSection, InsufficientReferences


MIN_POLICY_WORDS = 8000
MIN_REGULATORY_REFERENCES = 5


class PolicyValidator:
    """Validates assembled policy documents against structural invariants."""

    def __init__(
        self,
        min_words: int = MIN_POLICY_WORDS,
        min_references: int = MIN_REGULATORY_REFERENCES,
    ):
        self.min_words = min_words
        self.min_references = min_references

    def validate(self, document: PolicyDocument) -> PolicyDocument:
        """
        Validate a document, returning it unchanged if valid.

        Raises:
            PolicyTooShort: word_count below minimum
            MissingSection: a mandatory section is absent or blank
            InsufficientReferences: too few regulatory references
        """
        if document.word_count < self.min_words:
            raise PolicyTooShort(document.word_count, self.min_words)

        for section in MANDATORY_SECTIONS:
            text = document.section(section)
            if not text or not text.strip():
                raise MissingSection(section.value)

        reference_count = len(document.regulatory_mapping)
        if reference_count < self.min_references:
            raise InsufficientReferences(reference_count, self.min_references)

        return document


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_policy_validator: Optional[PolicyValidator] = None


def get_policy_validator() -> PolicyValidator:
    """Get or create the default policy validator singleton."""
    global _policy_validator
    if _policy_validator is None:
        _policy_validator = PolicyValidator()
    return _policy_validator


def validate_policy(document: PolicyDocument) -> PolicyDocument:
    """Convenience function to validate a document with the default validator."""
    return get_policy_validator().validate(document)
