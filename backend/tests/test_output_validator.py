"""
Policy Output Validator Tests

Checks run in order (word count, mandatory sections, references) and
stop at the first failure.
"""

import pytest
from datetime import datetime, timezone

from policygen.models.questionnaire import Sector
from policygen.models.policy_document import (
    PolicyDocument,
    PolicySection,
    MANDATORY_SECTIONS,
)
from policygen.services.policy_generator import (
    PolicyValidator,
    PolicyInvariantViolation,
    PolicyTooShort,
    MissingSection,
    InsufficientReferences,
    MIN_POLICY_WORDS,
    get_regulatory_references,
    validate_policy,
)


# =============================================================================
# FIXTURES
# =============================================================================

def make_document(sections=None, references=None, word_count=MIN_POLICY_WORDS) -> PolicyDocument:
    if sections is None:
        sections = {s: f"{s.value} text" for s in MANDATORY_SECTIONS}
    if references is None:
        references = get_regulatory_references(Sector.FINANCE)
    return PolicyDocument(
        id="policy-001",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        sections=sections,
        regulatory_mapping=references,
        word_count=word_count,
    )


@pytest.fixture
def validator():
    return PolicyValidator()


# =============================================================================
# TESTS
# =============================================================================

class TestPolicyValidator:
    """Tests for PolicyValidator.validate()."""

    def test_valid_document_returned(self, validator):
        document = make_document()
        assert validator.validate(document) is document

    def test_too_short(self, validator):
        with pytest.raises(PolicyTooShort) as exc_info:
            validator.validate(make_document(word_count=7999))

        assert exc_info.value.word_count == 7999
        assert str(exc_info.value) == "Policy too short: 7999 words (minimum 8000 required)"

    def test_missing_section(self, validator):
        sections = {s: "text" for s in MANDATORY_SECTIONS if s != PolicySection.RISK_FRAMEWORK}

        with pytest.raises(MissingSection) as exc_info:
            validator.validate(make_document(sections=sections))

        assert exc_info.value.section == "riskFramework"

    def test_blank_section(self, validator):
        sections = {s: "text" for s in MANDATORY_SECTIONS}
        sections[PolicySection.PURPOSE_AND_SCOPE] = "  \n\t "

        with pytest.raises(MissingSection) as exc_info:
            validator.validate(make_document(sections=sections))

        assert exc_info.value.section == "purposeAndScope"

    def test_extended_sections_not_required(self, validator):
        assert PolicySection.INCIDENT_RESPONSE not in make_document().sections
        validator.validate(make_document())

    def test_insufficient_references(self, validator):
        references = get_regulatory_references(Sector.FINANCE)[:4]

        with pytest.raises(InsufficientReferences) as exc_info:
            validator.validate(make_document(references=references))

        assert exc_info.value.count == 4

    def test_word_count_checked_first(self, validator):
        document = make_document(sections={}, references=(), word_count=10)

        with pytest.raises(PolicyTooShort):
            validator.validate(document)

    def test_sections_checked_before_references(self, validator):
        with pytest.raises(MissingSection):
            validator.validate(make_document(sections={}, references=()))

    def test_all_violations_share_base(self):
        for error_cls in (PolicyTooShort, MissingSection, InsufficientReferences):
            assert issubclass(error_cls, PolicyInvariantViolation)

    def test_custom_thresholds(self):
        validator = PolicyValidator(min_words=10, min_references=1)
        references = get_regulatory_references(Sector.FINANCE)[:1]

        assert validator.validate(make_document(references=references, word_count=10))

    def test_convenience_function(self):
        with pytest.raises(PolicyTooShort):
            validate_policy(make_document(word_count=0))
