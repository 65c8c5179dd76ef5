"""
Policy Generator - Conditional Phrasings

Every point where policy prose varies with the questionnaire is a table
keyed by an enum value. Unset optional fields resolve to an explicit
DEFAULT_* key - there is no implicit fallback inside the section templates.

Tables must cover every member of their key enum; a missing entry is a
hard failure (KeyError) at composition time.
"""
from enum import Enum
from typing import Dict, Iterable, Optional, TypeVar

from policygen.models.questionnaire import (
    Sector,
    Jurisdiction,
    OrganizationSize,
    YesNo,
    ExistingFramework,
    RiskAppetite,
)

K = TypeVar("K")


class TimelineCadence(str, Enum):
    """Rollout cadence derived from the free-text timeline answer."""
    URGENT = "urgent"
    NORMAL = "normal"
    PLANNING = "planning"


# =============================================================================
# DEFAULTS FOR UNSET FIELDS
# =============================================================================

DEFAULT_RISK_APPETITE = RiskAppetite.MODERATE
DEFAULT_HIGH_RISK = YesNo.NO
DEFAULT_CUSTOMER_FACING = YesNo.NO
DEFAULT_EXISTING_FRAMEWORK = ExistingFramework.NO
DEFAULT_TIMELINE = TimelineCadence.NORMAL
DEFAULT_OWNER = "Governance Owner"
DEFAULT_AI_SYSTEMS_LABEL = "general AI applications"
DEFAULT_DATA_TYPES_LABEL = "organizational data"
DEFAULT_REGULATORS_LABEL = "applicable regulators"


# =============================================================================
# SECTOR
# =============================================================================

SECTOR_LABELS: Dict[Sector, str] = {
    Sector.FINANCE: "financial services",
    Sector.PUBLIC_SECTOR: "public sector",
}

SECTOR_ACCOUNTABILITY: Dict[Sector, str] = {
    Sector.FINANCE: (
        "As a financial services organization, we are accountable to our prudential and conduct "
        "regulators, to our customers, and to the integrity of the markets in which we operate. "
        "AI governance decisions are therefore documented to a standard that supports regulatory "
        "examination, licence obligations and the fair treatment of customers."
    ),
    Sector.PUBLIC_SECTOR: (
        "As a public sector agency, we are accountable to the public, to Parliament and to the "
        "independent bodies that oversee government administration. AI governance decisions are "
        "therefore documented to a standard that supports public scrutiny, freedom of information "
        "requests and review by integrity and audit bodies."
    ),
}

SECTOR_OVERSIGHT_BODY: Dict[Sector, str] = {
    Sector.FINANCE: (
        "The Board Risk Committee receives quarterly AI risk reporting and retains authority to "
        "pause any AI system that threatens prudential soundness or customer outcomes."
    ),
    Sector.PUBLIC_SECTOR: (
        "The agency Audit and Risk Committee receives quarterly AI risk reporting, and the "
        "accountable authority remains answerable to the public for every automated decision "
        "made on behalf of the agency."
    ),
}


# =============================================================================
# JURISDICTION
# =============================================================================

JURISDICTION_NAMES: Dict[Jurisdiction, str] = {
    Jurisdiction.FEDERAL: "the Commonwealth of Australia",
    Jurisdiction.NSW: "New South Wales",
    Jurisdiction.VIC: "Victoria",
    Jurisdiction.QLD: "Queensland",
    Jurisdiction.SA: "South Australia",
    Jurisdiction.WA: "Western Australia",
    Jurisdiction.TAS: "Tasmania",
    Jurisdiction.NT: "the Northern Territory",
    Jurisdiction.ACT: "the Australian Capital Territory",
}


# =============================================================================
# ORGANIZATION SIZE
# =============================================================================

PROPORTIONATE_STRUCTURE = (
    "a proportionate governance structure appropriate for our organization size, in which a "
    "small number of accountable roles combine oversight, risk and compliance responsibilities"
)
MULTI_TIER_STRUCTURE = (
    "a comprehensive multi-tiered governance structure, in which strategic, risk and operational "
    "tiers each hold distinct decision rights and report through defined escalation channels"
)

GOVERNANCE_SCALE: Dict[OrganizationSize, str] = {
    OrganizationSize.MICRO: PROPORTIONATE_STRUCTURE,
    OrganizationSize.SMALL: PROPORTIONATE_STRUCTURE,
    OrganizationSize.MEDIUM: MULTI_TIER_STRUCTURE,
    OrganizationSize.LARGE: MULTI_TIER_STRUCTURE,
}


# =============================================================================
# RISK APPETITE
# =============================================================================

RISK_APPETITE_STANCE: Dict[RiskAppetite, str] = {
    RiskAppetite.CONSERVATIVE: (
        "We prioritize safety and compliance over speed to market, require extensive testing "
        "before any deployment, and maintain significant human oversight of AI-supported decisions."
    ),
    RiskAppetite.MODERATE: (
        "We balance innovation with prudent risk management, apply standard testing and validation "
        "processes, and retain appropriate human oversight for high-stakes decisions."
    ),
    RiskAppetite.PROGRESSIVE: (
        "We accept calculated risks in pursuit of innovation, support rapid deployment backed by "
        "robust monitoring, and rely on AI systems within clearly defined guardrails."
    ),
}

RISK_APPETITE_THRESHOLDS: Dict[RiskAppetite, str] = {
    RiskAppetite.CONSERVATIVE: (
        "Any residual risk rated medium or above requires Executive approval before deployment."
    ),
    RiskAppetite.MODERATE: (
        "Residual risks rated high require Executive approval; medium risks may be accepted by the "
        "AI Risk Committee with documented compensating controls."
    ),
    RiskAppetite.PROGRESSIVE: (
        "Residual risks rated high require Executive approval; medium and low risks may be accepted "
        "by the system owner provided monitoring and rollback controls are in place."
    ),
}


# =============================================================================
# HIGH-RISK USE
# =============================================================================

HIGH_RISK_SCOPE: Dict[YesNo, str] = {
    YesNo.YES: "high-risk AI systems requiring enhanced controls",
    YesNo.NO: "AI systems with appropriate risk management",
}

HIGH_RISK_ASSESSMENT: Dict[YesNo, str] = {
    YesNo.YES: (
        "Given the high-risk nature of our AI applications, we implement mandatory algorithmic "
        "impact assessments before deployment, regular independent algorithmic auditing, and "
        "enhanced human oversight requirements for every consequential decision."
    ),
    YesNo.NO: (
        "For our standard-risk AI applications, we implement proportionate risk assessment, "
        "regular monitoring and review, and appropriate human oversight."
    ),
}

HIGH_RISK_APPROVAL: Dict[YesNo, str] = {
    YesNo.YES: "All high-risk AI deployments require formal approval from the AI Governance Committee.",
    YesNo.NO: "All standard AI deployments require formal approval from the accountable system owner.",
}


# =============================================================================
# CUSTOMER-FACING USE
# =============================================================================

CUSTOMER_FACING_REVIEW: Dict[YesNo, str] = {
    YesNo.YES: (
        "Customer-facing AI systems require enhanced review, including plain-language disclosure "
        "that AI is in use and a clear path to a human decision-maker."
    ),
    YesNo.NO: (
        "Internal AI systems follow standard review processes, with disclosure to the staff whose "
        "work the system supports."
    ),
}

CUSTOMER_FACING_IMPACT: Dict[YesNo, str] = {
    YesNo.YES: "customers and members of the public",
    YesNo.NO: "internal operations",
}


# =============================================================================
# EXISTING FRAMEWORK
# =============================================================================

EXISTING_FRAMEWORK_POSITION: Dict[ExistingFramework, str] = {
    ExistingFramework.YES: (
        "This policy consolidates and supersedes our existing AI governance arrangements, which "
        "remain in force until the transition activities described here are complete."
    ),
    ExistingFramework.PARTIAL: (
        "This policy builds on the partial AI governance arrangements already in place, filling "
        "the gaps identified during their review and bringing them under a single framework."
    ),
    ExistingFramework.NO: (
        "This policy establishes our first formal AI governance framework; no prior arrangements "
        "are superseded."
    ),
}


# =============================================================================
# TIMELINE
# =============================================================================

TIMELINE_PREFIXES: Dict[str, TimelineCadence] = {
    "urgent": TimelineCadence.URGENT,
    "normal": TimelineCadence.NORMAL,
    "planning": TimelineCadence.PLANNING,
}

TIMELINE_ROLLOUT: Dict[TimelineCadence, str] = {
    TimelineCadence.URGENT: (
        "an accelerated implementation timeline, prioritizing inventory and risk assessment of "
        "existing AI systems within the first month"
    ),
    TimelineCadence.NORMAL: (
        "a normal implementation timeline of one to three months, sequencing governance "
        "structures, risk assessment and training"
    ),
    TimelineCadence.PLANNING: (
        "a staged implementation timeline beyond three months, allowing consultation and pilot "
        "reviews before full adoption"
    ),
}


def classify_timeline(timeline: Optional[str]) -> Optional[TimelineCadence]:
    """Derive rollout cadence from a timeline answer; None if unset or unrecognised."""
    if not timeline:
        return None
    words = timeline.strip().lower().split()
    if not words:
        return None
    return TIMELINE_PREFIXES.get(words[0])


# =============================================================================
# SELECTION HELPERS
# =============================================================================

def select_phrasing(table: Dict[K, str], value: Optional[K], default: K) -> str:
    """
    Select the phrasing for an enum value, using the default key when unset.

    Raises:
        KeyError: If the table has no entry for the resolved key
    """
    key = default if value is None else value
    return table[key]


def join_labels(values: Iterable[str], default: str) -> str:
    """Join tags as prose ("A, B and C"); default when empty."""
    items = [v for v in values if v]
    if not items:
        return default
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]
