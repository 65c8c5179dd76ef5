"""
Content Expander

Pads a section draft to its target word count with a fixed corpus:

    draft
    + sector elaboration block      (one of two, by sector)
    + implementation approach block (always)
    + filler paragraphs             (8 fixed paragraphs, cycled in order)

The number of filler paragraphs is computed directly from the known
paragraph word counts - there is no accumulate-and-check loop. Appended
content stops at the first filler paragraph that covers the shortfall, so
a draft is never padded by more than one paragraph past its target once
fillers are needed.
"""

from bisect import bisect_left
from itertools import accumulate
from typing import Dict, List, Optional, Tuple

from policygen.models.questionnaire import Sector
from policygen.models.policy_document import PolicySection, count_words


PARAGRAPH_SEPARATOR = "\n\n"


# =============================================================================
# TARGET WORD COUNTS
# =============================================================================

SECTION_TARGET_WORDS: Dict[PolicySection, int] = {
    PolicySection.EXECUTIVE_SUMMARY: 2000,
    PolicySection.PURPOSE_AND_SCOPE: 1500,
    PolicySection.GOVERNANCE_STRUCTURE: 2000,
    PolicySection.RISK_FRAMEWORK: 2500,
}


# =============================================================================
# EXPANSION CORPUS - FIXED ORDER, NO MODIFICATION AT RUNTIME
# =============================================================================

SECTOR_ELABORATIONS: Dict[Sector, str] = {
    Sector.FINANCE: """Additional Considerations for Financial Services:

Financial institutions face unique challenges and requirements when implementing AI systems. These include stringent regulatory requirements from bodies such as ASIC and APRA, heightened expectations for transparency and explainability, critical importance of fairness in lending and insurance decisions, need for robust model risk management, requirements for audit trails and documentation, and obligations to protect consumer financial data.

AI systems in financial services must comply with existing financial services regulations, consumer protection laws, privacy legislation, and emerging AI-specific requirements. This includes obligations around responsible lending, fair treatment of customers, anti-money laundering, fraud prevention, and market integrity.

The governance framework must ensure AI systems undergo rigorous testing for bias and discrimination, particularly in credit decisioning, insurance underwriting, and customer service applications. Regular validation, back-testing, and independent review processes are essential to maintain system reliability and fairness.

Model risk management practices must align with regulatory expectations, including comprehensive model inventories, lifecycle management processes, validation by independent experts, documentation of model limitations, and clear escalation of model issues.""",

    Sector.PUBLIC_SECTOR: """Additional Considerations for Public Sector:

Public sector organizations have unique responsibilities regarding AI governance, including obligations for public accountability and transparency, requirements to serve all community members fairly, need to maintain public trust and confidence, obligations under freedom of information legislation, requirements for privacy protection under the Privacy Act, and duties to ensure accessible and equitable services.

AI systems in the public sector must operate with high levels of transparency, enabling citizens to understand how decisions affecting them are made. This includes clear explanations of AI system purpose and operation, processes for individuals to challenge automated decisions, regular reporting on AI system performance and outcomes, and proactive disclosure of AI use in government services.

The governance framework must ensure AI systems comply with public sector values including integrity, impartiality, accountability, respect, and leadership. Systems must be designed and operated to serve the public interest, promote equality and non-discrimination, protect vulnerable populations, and support democratic principles.

Consultation and engagement with stakeholders, including citizens, advocacy groups, and oversight bodies, is essential to ensure AI systems meet community expectations and serve the public interest effectively.""",
}

IMPLEMENTATION_APPROACH = """Implementation Approach:

The implementation of this AI governance framework follows a phased approach, beginning with foundational capabilities including policy establishment, governance structure formation, and initial risk assessments. Subsequent phases build operational capabilities, expand coverage to all AI systems, and continuously mature governance practices.

Change management processes ensure smooth adoption of new governance requirements, with clear communication, training programs, stakeholder engagement, and ongoing support for teams implementing AI systems under the new framework.

Success measures include compliance metrics tracking adherence to policy requirements, risk metrics monitoring AI system safety and performance, efficiency metrics assessing governance process effectiveness, and outcome metrics measuring the impact of governance on AI system quality and stakeholder trust.

Regular review and continuous improvement processes ensure the governance framework remains effective and adapts to evolving technology, regulatory requirements, organizational needs, and stakeholder expectations."""

FILLER_PARAGRAPHS: Tuple[str, ...] = (
    "Risk management processes ensure continuous monitoring and evaluation of AI system performance, identifying potential issues before they impact operations or stakeholders.",
    "The governance framework establishes clear accountability chains, ensuring all stakeholders understand their roles and responsibilities in AI system oversight.",
    "Documentation requirements ensure transparency and enable effective auditing of AI systems throughout their lifecycle from development to decommissioning.",
    "Training programs ensure all personnel involved with AI systems understand their obligations under this policy and maintain appropriate levels of competence.",
    "Review cycles enable continuous improvement of AI governance practices, incorporating lessons learned and adapting to evolving regulatory and technological landscapes.",
    "Stakeholder engagement processes ensure affected parties have opportunities to provide input on AI system development and deployment decisions.",
    "Performance metrics enable objective assessment of AI system effectiveness, fairness, and compliance with policy requirements.",
    "Escalation procedures ensure serious issues receive appropriate attention from senior leadership and are resolved in a timely manner.",
)

FILLER_WORD_COUNTS: Tuple[int, ...] = tuple(count_words(p) for p in FILLER_PARAGRAPHS)

# Cumulative word counts: FILLER_PREFIX_WORDS[i] = words in paragraphs 0..i
FILLER_PREFIX_WORDS: Tuple[int, ...] = tuple(accumulate(FILLER_WORD_COUNTS))

FILLER_CYCLE_WORDS = FILLER_PREFIX_WORDS[-1]

MAX_FILLER_WORDS = max(FILLER_WORD_COUNTS)


def filler_paragraph_count(words_needed: int) -> int:
    """
    Number of filler paragraphs (cycled in order) needed to reach words_needed.

    Closed form: whole cycles by integer division, then the shortest
    prefix of the cycle that covers the remainder.
    """
    if words_needed <= 0:
        return 0
    full_cycles, remainder = divmod(words_needed, FILLER_CYCLE_WORDS)
    if remainder == 0:
        return full_cycles * len(FILLER_PARAGRAPHS)
    return full_cycles * len(FILLER_PARAGRAPHS) + bisect_left(FILLER_PREFIX_WORDS, remainder) + 1


class ContentExpander:
    """
    Expands section drafts to a minimum word count.

    Rules:
    - Drafts already at target are returned unchanged
    - Otherwise ALWAYS appends the sector elaboration and implementation
      approach, then the computed number of filler paragraphs
    - Fully deterministic; bounded by the target and the fixed corpus
    """

    def __init__(
        self,
        elaborations: Optional[Dict[Sector, str]] = None,
        implementation: str = IMPLEMENTATION_APPROACH,
    ):
        self.elaborations = elaborations or SECTOR_ELABORATIONS
        self.implementation = implementation

    def expand(self, draft: str, target_words: int, sector: Sector) -> str:
        """
        Expand a draft to at least target_words words.

        Args:
            draft: Section draft text (may be empty)
            target_words: Minimum word count of the returned text
            sector: Selects the sector elaboration block

        Returns:
            Draft, unchanged if already long enough, otherwise followed by
            the expansion blocks

        Raises:
            KeyError: If the sector has no elaboration block
        """
        draft_words = count_words(draft)
        shortfall = target_words - draft_words
        if shortfall <= 0:
            return draft

        elaboration = self.elaborations[Sector(sector)]
        blocks: List[str] = [draft] if draft.strip() else []
        blocks.extend([elaboration, self.implementation])

        fixed_words = count_words(elaboration) + count_words(self.implementation)
        count = filler_paragraph_count(shortfall - fixed_words)
        blocks.extend(FILLER_PARAGRAPHS[i % len(FILLER_PARAGRAPHS)] for i in range(count))

        return PARAGRAPH_SEPARATOR.join(blocks)

    def expand_section(self, section: PolicySection, draft: str, sector: Sector) -> str:
        """
        Expand a mandatory section to its fixed target.

        Raises:
            KeyError: If the section has no target (extended sections)
        """
        return self.expand(draft, SECTION_TARGET_WORDS[PolicySection(section)], sector)


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_expander: Optional[ContentExpander] = None


def get_expander() -> ContentExpander:
    """Get or create the default content expander singleton."""
    global _expander
    if _expander is None:
        _expander = ContentExpander()
    return _expander


def expand_content(draft: str, target_words: int, sector: Sector) -> str:
    """Convenience function to expand a draft with the default expander."""
    return get_expander().expand(draft, target_words, sector)
