"""
AI Governance Policy Generator - Questionnaire Models

The questionnaire is the ONLY input to the policy engine.
Enumerated fields are closed sets; tag lists are free text.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================

class Sector(str, Enum):
    FINANCE = "Finance"
    PUBLIC_SECTOR = "Public Sector"


class OrganizationSize(str, Enum):
    """Headcount bands offered by the questionnaire."""
    MICRO = "1-100"
    SMALL = "100-500"
    MEDIUM = "500-2000"
    LARGE = "2000+"


class Jurisdiction(str, Enum):
    FEDERAL = "Federal"
    NSW = "NSW"
    VIC = "VIC"
    QLD = "QLD"
    SA = "SA"
    WA = "WA"
    TAS = "TAS"
    NT = "NT"
    ACT = "ACT"


class YesNo(str, Enum):
    YES = "Yes"
    NO = "No"


class ExistingFramework(str, Enum):
    YES = "Yes"
    NO = "No"
    PARTIAL = "Partial"


class RiskAppetite(str, Enum):
    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    PROGRESSIVE = "Progressive"


# Suggested tags shown by the questionnaire form (not enforced)
REGULATOR_OPTIONS = ("ASIC", "APRA", "OAIC", "Other")
AI_SYSTEM_OPTIONS = (
    "Chatbots",
    "Predictive Analytics",
    "Decision Automation",
    "Computer Vision",
    "NLP",
    "Other",
)
DATA_TYPE_OPTIONS = (
    "Personal Info",
    "Financial Data",
    "Health Records",
    "Biometric Data",
    "Public Data",
)
OWNER_OPTIONS = ("Compliance", "IT", "Risk", "Dedicated Team")
TIMELINE_OPTIONS = ("Urgent (<1 month)", "Normal (1-3 months)", "Planning (>3 months)")


def _dedupe(values: Tuple[str, ...]) -> Tuple[str, ...]:
    """Drop repeated tags, keeping first occurrence order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return tuple(result)


# =============================================================================
# QUESTIONNAIRE INPUT
# =============================================================================

class QuestionnaireInput(BaseModel):
    """
    Validated questionnaire submission.

    Field order is validation order - the first failing field is the one
    reported back to the caller.

    Wire names are camelCase. The web form's short names
    (size, regulated, existing) are accepted as aliases.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    sector: Sector
    organization_size: OrganizationSize = Field(
        validation_alias=AliasChoices("organizationSize", "size", "organization_size"),
        serialization_alias="organizationSize",
    )
    jurisdiction: Jurisdiction
    regulated_by: Tuple[str, ...] = Field(
        min_length=1,
        validation_alias=AliasChoices("regulatedBy", "regulated", "regulated_by"),
        serialization_alias="regulatedBy",
    )
    ai_systems: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("aiSystems", "ai_systems"),
        serialization_alias="aiSystems",
    )
    data_types: Tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("dataTypes", "data_types"),
        serialization_alias="dataTypes",
    )
    high_risk: Optional[YesNo] = Field(
        default=None,
        validation_alias=AliasChoices("highRisk", "high_risk"),
        serialization_alias="highRisk",
    )
    customer_facing: Optional[YesNo] = Field(
        default=None,
        validation_alias=AliasChoices("customerFacing", "customer_facing"),
        serialization_alias="customerFacing",
    )
    existing_framework: Optional[ExistingFramework] = Field(
        default=None,
        validation_alias=AliasChoices("existingFramework", "existing", "existing_framework"),
        serialization_alias="existingFramework",
    )
    risk_appetite: Optional[RiskAppetite] = Field(
        default=None,
        validation_alias=AliasChoices("riskAppetite", "risk_appetite"),
        serialization_alias="riskAppetite",
    )
    owner: Optional[str] = None
    timeline: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat explicit nulls as absent fields."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("regulated_by", "ai_systems", "data_types", mode="before")
    @classmethod
    def drop_blank_tags(cls, value: Any) -> Any:
        """Blank tags carry no answer; non-string items are left for type checking."""
        if isinstance(value, (list, tuple)):
            return [v for v in value if not (isinstance(v, str) and not v.strip())]
        return value

    @field_validator("regulated_by", "ai_systems", "data_types")
    @classmethod
    def dedupe_tags(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return _dedupe(value)

    @field_validator("owner", "timeline")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    def to_dict(self) -> dict:
        """Convert to wire-format dictionary (camelCase, unset fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
