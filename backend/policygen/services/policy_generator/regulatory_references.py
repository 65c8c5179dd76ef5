"""
Regulatory Reference Table - Single Source of Truth (SSOT)

Sector -> ordered regulation citations for the policy's regulatory mapping.

References are keyed by sector only. Jurisdiction, regulators and
organization size do not change the citations returned; adding a sector
is a data change to REGULATORY_REFERENCES, not a logic change.
"""

from typing import Dict, Tuple

from policygen.models.questionnaire import Sector
from policygen.models.policy_document import RegulatoryReference


REGULATORY_REFERENCES: Dict[Sector, Tuple[RegulatoryReference, ...]] = {
    Sector.FINANCE: (
        RegulatoryReference(
            regulation="ASIC Regulatory Guide 274",
            clause="RG 274.45",
            requirement="Product design and distribution obligations",
        ),
        RegulatoryReference(
            regulation="APRA Prudential Standard CPS 234",
            clause="CPS 234.15",
            requirement="Information security management",
        ),
        RegulatoryReference(
            regulation="Privacy Act 1988 (Cth)",
            clause="s 6",
            requirement="Australian Privacy Principles",
        ),
        RegulatoryReference(
            regulation="Corporations Act 2001 (Cth)",
            clause="s 912A",
            requirement="General obligations of financial services licensees",
        ),
        RegulatoryReference(
            regulation="Banking Act 1959 (Cth)",
            clause="s 11AF",
            requirement="Prudential standards and requirements",
        ),
    ),
    Sector.PUBLIC_SECTOR: (
        RegulatoryReference(
            regulation="Privacy Act 1988 (Cth)",
            clause="s 6",
            requirement="Australian Privacy Principles",
        ),
        RegulatoryReference(
            regulation="Freedom of Information Act 1982 (Cth)",
            clause="s 11",
            requirement="Right of access to documents",
        ),
        RegulatoryReference(
            regulation="OAIC Privacy Guidelines",
            clause="APP 1",
            requirement="Open and transparent management of personal information",
        ),
        RegulatoryReference(
            regulation="Public Governance Act 2013 (Cth)",
            clause="s 15",
            requirement="Duty of care and diligence",
        ),
        RegulatoryReference(
            regulation="Australian Government AI Ethics Framework",
            clause="Principle 1",
            requirement="Human, social and environmental wellbeing",
        ),
    ),
}


def get_regulatory_references(sector: Sector) -> Tuple[RegulatoryReference, ...]:
    """
    Look up the regulatory mapping for a sector.

    Raises:
        KeyError: If the sector has no reference set (table defect)
    """
    return REGULATORY_REFERENCES[Sector(sector)]
