"""
Policy Generator Errors

Two families:
- QuestionnaireValidationError: user-facing, always names the offending field
- PolicyInvariantViolation: an assembled policy broke a structural invariant.
  These indicate an engine defect and never occur for validated input.
"""


class PolicyGenerationError(Exception):
    """Base class for all policy engine failures."""
    pass


# =============================================================================
# INPUT ERRORS
# =============================================================================

class QuestionnaireValidationError(PolicyGenerationError):
    """Raised when a questionnaire submission is rejected."""

    code = "invalid_questionnaire"

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}" if field else message)

    def to_dict(self) -> dict:
        return {"error": str(self), "field": self.field, "code": self.code}


class MissingField(QuestionnaireValidationError):
    """A required field is absent."""
    code = "missing_field"


class InvalidEnum(QuestionnaireValidationError):
    """A value falls outside its declared option set."""
    code = "invalid_enum"


class InvalidFieldValue(QuestionnaireValidationError):
    """A value has the wrong shape (e.g. a number where a tag list is expected)."""
    code = "invalid_value"


# =============================================================================
# STRUCTURAL ERRORS
# =============================================================================

class PolicyInvariantViolation(PolicyGenerationError):
    """Raised when an assembled policy fails output validation."""
    pass


class PolicyTooShort(PolicyInvariantViolation):

    def __init__(self, word_count: int, minimum: int):
        self.word_count = word_count
        self.minimum = minimum
        super().__init__(f"Policy too short: {word_count} words (minimum {minimum} required)")


class MissingSection(PolicyInvariantViolation):

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Missing required section: {section}")


class InsufficientReferences(PolicyInvariantViolation):

    def __init__(self, count: int, minimum: int):
        self.count = count
        self.minimum = minimum
        super().__init__(f"Insufficient regulatory references: {count} (minimum {minimum} required)")
