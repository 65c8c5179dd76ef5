"""
Questionnaire Validation Tests

Verifies:
1. Valid submissions produce a QuestionnaireInput
2. The first offending field is named in every rejection
3. Absent keys, explicit nulls and empty values are all "missing"
4. Enumerated fields reject values outside their option sets
5. Short field names from the web form are accepted
"""

import pytest

from policygen.models.questionnaire import (
    QuestionnaireInput,
    Sector,
    OrganizationSize,
    Jurisdiction,
    ExistingFramework,
)
from policygen.services.policy_generator import (
    QuestionnaireValidator,
    QuestionnaireValidationError,
    MissingField,
    InvalidEnum,
    InvalidFieldValue,
    validate_questionnaire,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def validator():
    return QuestionnaireValidator()


@pytest.fixture
def minimal_submission():
    """Only the required fields."""
    return {
        "sector": "Finance",
        "organizationSize": "100-500",
        "jurisdiction": "Federal",
        "regulatedBy": ["ASIC", "APRA"],
    }


@pytest.fixture
def full_submission(minimal_submission):
    return {
        **minimal_submission,
        "aiSystems": ["Chatbots", "Predictive Analytics"],
        "dataTypes": ["Personal Info"],
        "highRisk": "Yes",
        "customerFacing": "No",
        "existingFramework": "Partial",
        "riskAppetite": "Conservative",
        "owner": "Risk",
        "timeline": "Urgent (<1 month)",
    }


# =============================================================================
# ACCEPTED SUBMISSIONS
# =============================================================================

class TestValidSubmissions:
    """Submissions that must be accepted."""

    def test_minimal_submission(self, validator, minimal_submission):
        q = validator.validate(minimal_submission)

        assert isinstance(q, QuestionnaireInput)
        assert q.sector == Sector.FINANCE
        assert q.organization_size == OrganizationSize.SMALL
        assert q.jurisdiction == Jurisdiction.FEDERAL
        assert q.regulated_by == ("ASIC", "APRA")
        assert q.ai_systems == ()
        assert q.high_risk is None
        assert q.owner is None

    def test_full_submission(self, validator, full_submission):
        q = validator.validate(full_submission)

        assert q.existing_framework == ExistingFramework.PARTIAL
        assert q.ai_systems == ("Chatbots", "Predictive Analytics")
        assert q.timeline == "Urgent (<1 month)"

    def test_short_field_names_accepted(self, validator):
        q = validator.validate({
            "sector": "Public Sector",
            "size": "2000+",
            "jurisdiction": "NSW",
            "regulated": ["OAIC"],
            "existing": "Yes",
        })

        assert q.organization_size == OrganizationSize.LARGE
        assert q.regulated_by == ("OAIC",)
        assert q.existing_framework == ExistingFramework.YES

    def test_unknown_keys_ignored(self, validator, minimal_submission):
        q = validator.validate({**minimal_submission, "favouriteColour": "blue"})
        assert q.sector == Sector.FINANCE

    def test_free_text_tags_accepted(self, validator, minimal_submission):
        """Regulators and AI systems are not restricted to the suggested options."""
        q = validator.validate({
            **minimal_submission,
            "regulatedBy": ["AUSTRAC"],
            "aiSystems": ["Fraud Scoring"],
        })
        assert q.regulated_by == ("AUSTRAC",)
        assert q.ai_systems == ("Fraud Scoring",)

    def test_duplicate_tags_removed_in_order(self, validator, minimal_submission):
        q = validator.validate({**minimal_submission, "regulatedBy": ["APRA", "ASIC", "APRA"]})
        assert q.regulated_by == ("APRA", "ASIC")

    def test_blank_tags_dropped(self, validator, minimal_submission):
        q = validator.validate({
            **minimal_submission,
            "regulatedBy": ["ASIC", " "],
            "aiSystems": ["", "NLP"],
        })
        assert q.regulated_by == ("ASIC",)
        assert q.ai_systems == ("NLP",)

    def test_blank_owner_treated_as_unset(self, validator, minimal_submission):
        q = validator.validate({**minimal_submission, "owner": "   "})
        assert q.owner is None

    def test_validated_input_passes_through(self, validator, minimal_submission):
        q = validator.validate(minimal_submission)
        assert validator.validate(q) is q

    def test_to_dict_uses_wire_names(self, validator, full_submission):
        data = validator.validate(full_submission).to_dict()

        assert data["organizationSize"] == "100-500"
        assert data["regulatedBy"] == ["ASIC", "APRA"]
        assert data["existingFramework"] == "Partial"

    def test_convenience_function(self, minimal_submission):
        assert validate_questionnaire(minimal_submission).sector == Sector.FINANCE


# =============================================================================
# REJECTED SUBMISSIONS
# =============================================================================

class TestRejectedSubmissions:
    """Every rejection names the offending field."""

    def test_missing_sector(self, validator, minimal_submission):
        del minimal_submission["sector"]

        with pytest.raises(MissingField) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "sector"
        assert str(exc_info.value) == "sector: Sector is required"

    def test_null_counts_as_missing(self, validator, minimal_submission):
        minimal_submission["jurisdiction"] = None

        with pytest.raises(MissingField) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "jurisdiction"

    def test_unknown_jurisdiction(self, validator, minimal_submission):
        minimal_submission["jurisdiction"] = "Mars"

        with pytest.raises(InvalidEnum) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "jurisdiction"
        assert "Mars" in str(exc_info.value)

    def test_unknown_sector(self, validator, minimal_submission):
        minimal_submission["sector"] = "Healthcare"

        with pytest.raises(InvalidEnum) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "sector"

    def test_unknown_organization_size(self, validator, minimal_submission):
        minimal_submission["organizationSize"] = "enormous"

        with pytest.raises(InvalidEnum) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "organizationSize"

    def test_empty_organization_size_is_missing(self, validator, minimal_submission):
        minimal_submission["organizationSize"] = ""

        with pytest.raises(MissingField) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "organizationSize"

    def test_empty_regulators(self, validator, minimal_submission):
        minimal_submission["regulatedBy"] = []

        with pytest.raises(MissingField) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "regulatedBy"
        assert exc_info.value.message == "At least one regulator is required"

    def test_non_string_tag(self, validator, minimal_submission):
        minimal_submission["regulatedBy"] = [1]

        with pytest.raises(InvalidFieldValue) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "regulatedBy.0"

    def test_invalid_optional_enum(self, validator, minimal_submission):
        minimal_submission["riskAppetite"] = "Reckless"

        with pytest.raises(InvalidEnum) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "riskAppetite"

    @pytest.mark.parametrize("field", ["highRisk", "customerFacing", "existingFramework", "riskAppetite"])
    def test_empty_optional_enum_is_invalid(self, validator, minimal_submission, field):
        """An empty answer to an optional enum is not one of its options."""
        minimal_submission[field] = ""

        with pytest.raises(InvalidEnum) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == field
        assert exc_info.value.code == "invalid_enum"

    def test_blank_regulators_are_missing(self, validator, minimal_submission):
        minimal_submission["regulatedBy"] = ["", "  "]

        with pytest.raises(MissingField) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.field == "regulatedBy"

    def test_first_failing_field_reported(self, validator):
        """Sector is declared before jurisdiction, so it is reported first."""
        with pytest.raises(QuestionnaireValidationError) as exc_info:
            validator.validate({
                "organizationSize": "1-100",
                "jurisdiction": "Mars",
                "regulatedBy": ["ASIC"],
            })

        assert exc_info.value.field == "sector"

    @pytest.mark.parametrize("raw", [None, [], "Finance", 42])
    def test_non_object_rejected(self, validator, raw):
        with pytest.raises(InvalidFieldValue):
            validator.validate(raw)

    def test_error_to_dict(self, validator, minimal_submission):
        del minimal_submission["sector"]

        with pytest.raises(MissingField) as exc_info:
            validator.validate(minimal_submission)

        assert exc_info.value.to_dict() == {
            "error": "sector: Sector is required",
            "field": "sector",
            "code": "missing_field",
        }
