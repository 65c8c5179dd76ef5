"""
Policy Document Models - Canonical Generated Policy Structure

A PolicyDocument is created once by the assembler and never edited.
A new questionnaire produces a new document with a new identifier.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from hashlib import sha256
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple
import json


class PolicySection(str, Enum):
    """Policy sections - declaration order is document order."""
    EXECUTIVE_SUMMARY = "executiveSummary"
    PURPOSE_AND_SCOPE = "purposeAndScope"
    GOVERNANCE_STRUCTURE = "governanceStructure"
    RISK_FRAMEWORK = "riskFramework"
    DATA_GOVERNANCE = "dataGovernance"
    COMPLIANCE_MONITORING = "complianceMonitoring"
    INCIDENT_RESPONSE = "incidentResponse"

    @property
    def is_mandatory(self) -> bool:
        return self in MANDATORY_SECTIONS


MANDATORY_SECTIONS: Tuple[PolicySection, ...] = (
    PolicySection.EXECUTIVE_SUMMARY,
    PolicySection.PURPOSE_AND_SCOPE,
    PolicySection.GOVERNANCE_STRUCTURE,
    PolicySection.RISK_FRAMEWORK,
)

EXTENDED_SECTIONS: Tuple[PolicySection, ...] = (
    PolicySection.DATA_GOVERNANCE,
    PolicySection.COMPLIANCE_MONITORING,
    PolicySection.INCIDENT_RESPONSE,
)


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


@dataclass(frozen=True)
class RegulatoryReference:
    """A (regulation, clause, requirement) triple from the reference table."""
    regulation: str
    clause: str
    requirement: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "regulation": self.regulation,
            "clause": self.clause,
            "requirement": self.requirement,
        }


@dataclass(frozen=True)
class PolicyDocument:
    """
    Complete generated policy.

    - sections: Section text keyed by PolicySection, in document order.
      The four mandatory sections are always present; extended sections
      only when requested.
    - regulatory_mapping: Ordered references for the organization's sector
    - word_count: Sum of whitespace tokens across all present sections
    """
    id: str
    created_at: datetime
    sections: Mapping[PolicySection, str]
    regulatory_mapping: Tuple[RegulatoryReference, ...]
    word_count: int

    def __post_init__(self):
        """Freeze section mapping in document order."""
        ordered = {s: self.sections[s] for s in PolicySection if s in self.sections}
        object.__setattr__(self, "sections", MappingProxyType(ordered))
        object.__setattr__(self, "regulatory_mapping", tuple(self.regulatory_mapping))

    def section(self, kind: PolicySection) -> Optional[str]:
        return self.sections.get(kind)

    @property
    def executive_summary(self) -> str:
        return self.sections.get(PolicySection.EXECUTIVE_SUMMARY, "")

    @property
    def purpose_and_scope(self) -> str:
        return self.sections.get(PolicySection.PURPOSE_AND_SCOPE, "")

    @property
    def governance_structure(self) -> str:
        return self.sections.get(PolicySection.GOVERNANCE_STRUCTURE, "")

    @property
    def risk_framework(self) -> str:
        return self.sections.get(PolicySection.RISK_FRAMEWORK, "")

    def content_hash(self) -> str:
        """
        Generate deterministic hash of document content.

        Identifier and creation timestamp are excluded - identical
        questionnaires produce identical hashes.
        """
        content = {
            "sections": {s.value: text for s, text in self.sections.items()},
            "regulatory_mapping": [r.to_dict() for r in self.regulatory_mapping],
            "word_count": self.word_count,
        }
        return sha256(json.dumps(content, sort_keys=True).encode()).hexdigest()[:16]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to camelCase dictionary for JSON serialization."""
        data: Dict[str, Any] = {"id": self.id}
        for section, text in self.sections.items():
            data[section.value] = text
        data["regulatoryMapping"] = [r.to_dict() for r in self.regulatory_mapping]
        data["wordCount"] = self.word_count
        data["createdAt"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PolicyDocument":
        """Rebuild a document from its to_dict() form."""
        created_at = datetime.fromisoformat(data["createdAt"])
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=data["id"],
            created_at=created_at,
            sections={s: data[s.value] for s in PolicySection if s.value in data},
            regulatory_mapping=tuple(
                RegulatoryReference(**ref) for ref in data.get("regulatoryMapping", [])
            ),
            word_count=data["wordCount"],
        )


@dataclass(frozen=True)
class PolicySummary:
    """Listing view of a stored policy."""
    id: str
    created_at: datetime
    word_count: int
    sections: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, document: PolicyDocument) -> "PolicySummary":
        return cls(
            id=document.id,
            created_at=document.created_at,
            word_count=document.word_count,
            sections=tuple(s.value for s in document.sections),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "wordCount": self.word_count,
            "createdAt": self.created_at.isoformat(),
            "sections": list(self.sections),
        }
