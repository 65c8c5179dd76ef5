"""
Section Composer

Composes the draft text of each policy section from a validated
questionnaire. Drafts are fixed prose skeletons interpolated with
questionnaire-derived strings; conditional clauses come from the
enum-keyed tables in phrasings.py.

Drafts are deterministic: the same questionnaire always yields
byte-identical text. Drafts are NOT length-checked here - the
ContentExpander brings each mandatory section up to its target.
"""

from typing import Callable, Dict, Optional

from policygen.models.questionnaire import QuestionnaireInput
from policygen.models.policy_document import PolicySection

from .phrasings import (
    DEFAULT_AI_SYSTEMS_LABEL,
    DEFAULT_CUSTOMER_FACING,
    DEFAULT_DATA_TYPES_LABEL,
    DEFAULT_EXISTING_FRAMEWORK,
    DEFAULT_HIGH_RISK,
    DEFAULT_OWNER,
    DEFAULT_REGULATORS_LABEL,
    DEFAULT_RISK_APPETITE,
    DEFAULT_TIMELINE,
    CUSTOMER_FACING_IMPACT,
    CUSTOMER_FACING_REVIEW,
    EXISTING_FRAMEWORK_POSITION,
    GOVERNANCE_SCALE,
    HIGH_RISK_APPROVAL,
    HIGH_RISK_ASSESSMENT,
    HIGH_RISK_SCOPE,
    JURISDICTION_NAMES,
    RISK_APPETITE_STANCE,
    RISK_APPETITE_THRESHOLDS,
    SECTOR_ACCOUNTABILITY,
    SECTOR_LABELS,
    SECTOR_OVERSIGHT_BODY,
    TIMELINE_ROLLOUT,
    classify_timeline,
    join_labels,
    select_phrasing,
)


# =============================================================================
# SECTION TEMPLATES
# =============================================================================

EXECUTIVE_SUMMARY_TEMPLATE = """Executive Summary

This AI Governance Policy establishes a comprehensive framework for the responsible development, deployment and management of artificial intelligence systems within our {sector_label} organization operating in {jurisdiction_name} ({jurisdiction}).

As a {size} organization, we recognize the transformative potential of AI technologies while acknowledging the critical importance of implementing robust governance mechanisms to ensure ethical, transparent and compliant AI operations. Our AI portfolio includes {ai_systems}, processing {data_types}, and our activities are overseen by {regulators}.

{existing_position}

This policy addresses key aspects of AI governance including risk management, data protection, algorithmic accountability, human oversight and regulatory compliance. It provides clear guidelines for decision-making, establishes governance structures, and outlines processes for continuous monitoring and improvement. The policy reflects our {risk_appetite} risk appetite and applies to {high_risk_scope}.

Key objectives of this policy include ensuring AI systems operate in alignment with organizational values, maintaining public trust, meeting regulatory obligations, protecting stakeholder interests, and fostering innovation within appropriate risk boundaries.

Accountability for this policy rests with {owner}, who will oversee {timeline_rollout}."""


PURPOSE_AND_SCOPE_TEMPLATE = """Purpose and Scope

Purpose:
The primary purpose of this AI Governance Policy is to establish a structured, comprehensive framework that governs all aspects of artificial intelligence systems throughout their lifecycle, from conception and development through deployment, operation and eventual decommissioning.

This policy provides clear governance structures and decision-making processes, establishes standards for ethical AI development and use, ensures compliance with applicable laws and regulations, protects stakeholder rights and interests, manages AI-related risks effectively, and promotes transparency and accountability in AI operations.

Scope:
This policy applies to all AI systems, machine learning models and automated decision-making tools developed, procured, deployed or operated by the organization, including {ai_systems}. It covers both customer-facing and internal AI applications, regardless of whether they are developed in-house, by third-party vendors, or through collaborative partnerships. {customer_facing_review}

The policy covers all data processed by AI systems, including {data_types}, and applies to the full AI lifecycle including research and development, testing and validation, deployment and integration, ongoing operation and monitoring, maintenance and updates, and decommissioning procedures.

Jurisdiction:
This policy is designed for a {sector_label} organization operating in {jurisdiction_name}, and addresses requirements arising from oversight by {regulators}.

All personnel involved in AI-related activities are bound by this policy, including data scientists, machine learning engineers, product managers, business stakeholders, compliance officers, risk managers and executive leadership."""


GOVERNANCE_STRUCTURE_TEMPLATE = """Governance Structure

The AI governance framework establishes {governance_scale}, with clearly defined roles, responsibilities and decision-making authority across all levels of the organization.

{sector_accountability}

Executive Oversight:
Ultimate accountability for AI governance rests with the Executive Leadership Team. The AI Governance Committee, comprising senior executives, provides strategic oversight and approves major AI initiatives and policy changes. {sector_oversight}

Roles and Responsibilities:
Primary accountability for AI governance rests with {owner}. The AI Ethics Lead ensures ethical considerations are embedded in AI development, the Risk Manager oversees AI risk assessment and mitigation, and the Compliance Officer monitors obligations to {regulators}.

Risk Appetite:
The organization maintains a {risk_appetite} approach to AI risk, carefully weighing innovation opportunities against potential harms and regulatory requirements. {risk_appetite_stance}

Decision-Making Framework:
{high_risk_approval} {customer_facing_review} All significant AI decisions follow a structured approval process with clear escalation paths, documentation requirements and review procedures, and governance reviews are conducted quarterly."""


RISK_FRAMEWORK_TEMPLATE = """Risk Management Framework

This policy establishes a comprehensive risk management framework specifically designed for {high_risk_scope}. The framework identifies, assesses, mitigates and monitors AI-related risks throughout the system lifecycle of {ai_systems}.

Risk Categories:
AI systems may present various risk categories including ethical risks related to fairness, bias and discrimination; operational risks affecting business continuity and performance; compliance and legal risks from regulatory violations; reputational risks impacting stakeholder trust; security and privacy risks to {data_types}; and technical risks from model failures or errors.

Risk Assessment Process:
{high_risk_assessment} Every assessment evaluates potential impact on {customer_facing_impact}, the likelihood and severity of adverse outcomes, existing controls and mitigation measures, residual risk after controls, and an overall risk rating.

Risk Appetite:
Our {risk_appetite} risk appetite guides decision-making. {risk_appetite_stance} {risk_appetite_threshold}

Risk Mitigation:
Mitigation strategies include technical controls such as bias testing and model validation, procedural controls including approval workflows and documentation, human oversight mechanisms, monitoring and alerting systems, incident response procedures, and regular audits and reviews.

Continuous Monitoring:
Deployed AI systems are subject to continuous monitoring to detect performance degradation, bias drift, unexpected outcomes, security incidents and compliance violations, with quarterly risk assessments and an annual policy review aligned with {timeline_rollout}."""


DATA_GOVERNANCE_TEMPLATE = """Data Governance

Data governance ensures the quality, security and ethical use of data in AI systems operated by our {sector_label} organization.

Data Types Covered:
This section applies to {data_types} used to train, test or operate {ai_systems}.

Key Principles:
Data quality requires accuracy, completeness and timeliness. Data security protects against unauthorized access and breaches. Data privacy requires compliance with the Privacy Act 1988 and the Australian Privacy Principles. Data ethics requires that data is used responsibly and transparently.

Requirements:
Data classification and handling procedures, data retention and disposal policies, third-party data sharing agreements, and regular data quality audits are maintained by {owner}."""


COMPLIANCE_MONITORING_TEMPLATE = """Compliance Monitoring

Ongoing compliance monitoring ensures adherence to policy requirements and regulatory obligations.

Monitoring Activities:
Monitoring combines real-time system monitoring, periodic compliance reviews, internal audits, and external regulatory examinations.

Reporting Requirements:
Monthly operational reports, quarterly compliance status reports, an annual governance review and ad-hoc incident reports are provided to the AI Governance Committee.

Regulatory Engagement:
As a {sector_label} organization operating in {jurisdiction_name}, we maintain proactive engagement and timely reporting with {regulators}."""


INCIDENT_RESPONSE_TEMPLATE = """Incident Response

Incident response procedures ensure rapid detection, escalation and resolution of AI-related incidents.

Incident Categories:
Critical incidents are system failures affecting {customer_facing_impact}. High incidents are regulatory compliance breaches. Medium incidents are performance degradation. Low incidents are minor issues with no immediate impact.

Response Procedures:
Each incident proceeds through detection and initial assessment, escalation to appropriate stakeholders, containment and mitigation, root cause analysis, remediation and prevention, and documentation of lessons learned.

Communication:
Internal stakeholders are notified within four hours of a critical incident. Regulatory notification is made as required by {regulators}, and affected parties are notified of service-affecting incidents."""


SECTION_TEMPLATES: Dict[PolicySection, str] = {
    PolicySection.EXECUTIVE_SUMMARY: EXECUTIVE_SUMMARY_TEMPLATE,
    PolicySection.PURPOSE_AND_SCOPE: PURPOSE_AND_SCOPE_TEMPLATE,
    PolicySection.GOVERNANCE_STRUCTURE: GOVERNANCE_STRUCTURE_TEMPLATE,
    PolicySection.RISK_FRAMEWORK: RISK_FRAMEWORK_TEMPLATE,
    PolicySection.DATA_GOVERNANCE: DATA_GOVERNANCE_TEMPLATE,
    PolicySection.COMPLIANCE_MONITORING: COMPLIANCE_MONITORING_TEMPLATE,
    PolicySection.INCIDENT_RESPONSE: INCIDENT_RESPONSE_TEMPLATE,
}


# =============================================================================
# INTERPOLATION CONTEXT
# =============================================================================

def build_context(questionnaire: QuestionnaireInput) -> Dict[str, str]:
    """
    Resolve every questionnaire-derived string used by the section templates.

    Unset optional fields resolve through the DEFAULT_* constants.
    """
    q = questionnaire
    risk_appetite = q.risk_appetite or DEFAULT_RISK_APPETITE
    cadence = classify_timeline(q.timeline)

    return {
        "sector_label": SECTOR_LABELS[q.sector],
        "size": q.organization_size.value,
        "jurisdiction": q.jurisdiction.value,
        "jurisdiction_name": JURISDICTION_NAMES[q.jurisdiction],
        "regulators": join_labels(q.regulated_by, DEFAULT_REGULATORS_LABEL),
        "ai_systems": join_labels(q.ai_systems, DEFAULT_AI_SYSTEMS_LABEL),
        "data_types": join_labels(q.data_types, DEFAULT_DATA_TYPES_LABEL),
        "owner": q.owner or DEFAULT_OWNER,
        "risk_appetite": risk_appetite.value.lower(),
        "risk_appetite_stance": select_phrasing(RISK_APPETITE_STANCE, q.risk_appetite, DEFAULT_RISK_APPETITE),
        "risk_appetite_threshold": select_phrasing(RISK_APPETITE_THRESHOLDS, q.risk_appetite, DEFAULT_RISK_APPETITE),
        "high_risk_scope": select_phrasing(HIGH_RISK_SCOPE, q.high_risk, DEFAULT_HIGH_RISK),
        "high_risk_assessment": select_phrasing(HIGH_RISK_ASSESSMENT, q.high_risk, DEFAULT_HIGH_RISK),
        "high_risk_approval": select_phrasing(HIGH_RISK_APPROVAL, q.high_risk, DEFAULT_HIGH_RISK),
        "customer_facing_review": select_phrasing(CUSTOMER_FACING_REVIEW, q.customer_facing, DEFAULT_CUSTOMER_FACING),
        "customer_facing_impact": select_phrasing(CUSTOMER_FACING_IMPACT, q.customer_facing, DEFAULT_CUSTOMER_FACING),
        "existing_position": select_phrasing(
            EXISTING_FRAMEWORK_POSITION, q.existing_framework, DEFAULT_EXISTING_FRAMEWORK
        ),
        "timeline_rollout": select_phrasing(TIMELINE_ROLLOUT, cadence, DEFAULT_TIMELINE),
        "governance_scale": GOVERNANCE_SCALE[q.organization_size],
        "sector_accountability": SECTOR_ACCOUNTABILITY[q.sector],
        "sector_oversight": SECTOR_OVERSIGHT_BODY[q.sector],
    }


# =============================================================================
# COMPOSER
# =============================================================================

class SectionComposer:
    """
    Composes section drafts.

    Rules:
    - One template per section kind; missing templates cause hard failure
    - No randomness, no clock reads
    - Output is the draft only - length targets are the expander's job
    """

    def __init__(self, templates: Optional[Dict[PolicySection, str]] = None):
        self.templates = templates or SECTION_TEMPLATES

    def compose(self, section: PolicySection, questionnaire: QuestionnaireInput) -> str:
        """
        Compose the draft text of one section.

        Raises:
            KeyError: If the section has no template
        """
        template = self.templates[PolicySection(section)]
        return template.format(**build_context(questionnaire))


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_composer: Optional[SectionComposer] = None


def get_composer() -> SectionComposer:
    """Get or create the default section composer singleton."""
    global _composer
    if _composer is None:
        _composer = SectionComposer()
    return _composer


def compose_section(section: PolicySection, questionnaire: QuestionnaireInput) -> str:
    """Convenience function to compose a section with the default composer."""
    return get_composer().compose(section, questionnaire)


def _section_composer(section: PolicySection) -> Callable[[QuestionnaireInput], str]:
    def compose(questionnaire: QuestionnaireInput) -> str:
        return compose_section(section, questionnaire)
    compose.__name__ = f"compose_{section.name.lower()}"
    compose.__doc__ = f"Compose the {section.value} draft."
    return compose


compose_executive_summary = _section_composer(PolicySection.EXECUTIVE_SUMMARY)
compose_purpose_and_scope = _section_composer(PolicySection.PURPOSE_AND_SCOPE)
compose_governance_structure = _section_composer(PolicySection.GOVERNANCE_STRUCTURE)
compose_risk_framework = _section_composer(PolicySection.RISK_FRAMEWORK)
compose_data_governance = _section_composer(PolicySection.DATA_GOVERNANCE)
compose_compliance_monitoring = _section_composer(PolicySection.COMPLIANCE_MONITORING)
compose_incident_response = _section_composer(PolicySection.INCIDENT_RESPONSE)
