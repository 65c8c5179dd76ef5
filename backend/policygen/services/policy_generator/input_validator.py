"""
Questionnaire Input Validator

Turns an untyped submission into a QuestionnaireInput or raises a
QuestionnaireValidationError naming the first offending field.

Schema enforcement is pydantic's; this module maps the first pydantic
error onto the engine's error taxonomy:
- missing / null / empty required value  -> MissingField
- value outside an enumerated option set -> InvalidEnum
- anything else (wrong type or shape)    -> InvalidFieldValue
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional
import logging

from pydantic import ValidationError

from policygen.models.questionnaire import QuestionnaireInput

from .errors import (
    QuestionnaireValidationError,
    MissingField,
    InvalidEnum,
    InvalidFieldValue,
)

logger = logging.getLogger(__name__)


# Every accepted key (wire name, short alias, python name) -> wire name
FIELD_PATHS: Dict[str, str] = {
    "sector": "sector",
    "organizationSize": "organizationSize",
    "organization_size": "organizationSize",
    "size": "organizationSize",
    "jurisdiction": "jurisdiction",
    "regulatedBy": "regulatedBy",
    "regulated_by": "regulatedBy",
    "regulated": "regulatedBy",
    "aiSystems": "aiSystems",
    "ai_systems": "aiSystems",
    "dataTypes": "dataTypes",
    "data_types": "dataTypes",
    "highRisk": "highRisk",
    "high_risk": "highRisk",
    "customerFacing": "customerFacing",
    "customer_facing": "customerFacing",
    "existingFramework": "existingFramework",
    "existing_framework": "existingFramework",
    "existing": "existingFramework",
    "riskAppetite": "riskAppetite",
    "risk_appetite": "riskAppetite",
    "owner": "owner",
    "timeline": "timeline",
}

# Human-readable "required" messages for required fields
REQUIRED_MESSAGES: Dict[str, str] = {
    "sector": "Sector is required",
    "organizationSize": "Organization size is required",
    "jurisdiction": "Jurisdiction is required",
    "regulatedBy": "At least one regulator is required",
}

ENUM_ERROR_TYPES = {"enum", "literal_error"}
EMPTY_ERROR_TYPES = {"too_short", "string_too_short"}


def _field_path(loc: tuple) -> str:
    """Build a dotted field path from a pydantic error location."""
    if not loc:
        return ""
    head = FIELD_PATHS.get(str(loc[0]), str(loc[0]))
    return ".".join([head] + [str(part) for part in loc[1:]])


def _options(error: Dict[str, Any]) -> Optional[str]:
    expected = (error.get("ctx") or {}).get("expected")
    if expected:
        return str(expected).replace("'", "")
    return None


class QuestionnaireValidator:
    """
    Validates raw questionnaire submissions.

    Rules:
    - Fails fast: only the first violation (in field declaration order) is reported
    - Absent keys and explicit nulls are both "missing"
    - Tag lists (regulators, AI systems, data types) are free text;
      only the enumerated fields are checked against option sets
    - No side effects
    """

    def validate(self, raw: Any) -> QuestionnaireInput:
        """
        Validate a raw submission.

        Args:
            raw: Untyped structured payload (normally a decoded JSON object)

        Returns:
            QuestionnaireInput

        Raises:
            MissingField: A required field is absent or empty
            InvalidEnum: An enumerated field holds an unknown value
            InvalidFieldValue: A field has the wrong type, or raw is not an object
        """
        if isinstance(raw, QuestionnaireInput):
            return raw

        if not isinstance(raw, Mapping):
            raise InvalidFieldValue("", "Questionnaire submission must be an object")

        try:
            return QuestionnaireInput.model_validate(dict(raw))
        except ValidationError as exc:
            error = self._translate(exc.errors()[0])
            logger.warning(f"Questionnaire rejected: {error}")
            raise error from None

    def _translate(self, error: Dict[str, Any]) -> QuestionnaireValidationError:
        """Map one pydantic error onto the engine error taxonomy."""
        path = _field_path(tuple(error.get("loc", ())))
        error_type = error.get("type", "")
        value = error.get("input")

        if error_type == "missing":
            return MissingField(path, REQUIRED_MESSAGES.get(path, f"{path} is required"))

        # Empty answers are missing only for required fields
        empty_required = path in REQUIRED_MESSAGES and error_type in ENUM_ERROR_TYPES and value == ""
        if error_type in EMPTY_ERROR_TYPES or empty_required:
            return MissingField(path, REQUIRED_MESSAGES.get(path, f"{path} must not be empty"))

        if error_type in ENUM_ERROR_TYPES:
            options = _options(error)
            message = f"Invalid {path} value '{value}'"
            if options:
                message = f"{message}; expected {options}"
            return InvalidEnum(path, message)

        return InvalidFieldValue(path, error.get("msg", "Invalid value"))


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_validator: Optional[QuestionnaireValidator] = None


def get_validator() -> QuestionnaireValidator:
    """Get or create the default questionnaire validator singleton."""
    global _validator
    if _validator is None:
        _validator = QuestionnaireValidator()
    return _validator


def validate_questionnaire(raw: Any) -> QuestionnaireInput:
    """Convenience function to validate a submission with the default validator."""
    return get_validator().validate(raw)
