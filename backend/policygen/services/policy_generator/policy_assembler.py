"""
Policy Assembler

Orchestrates Validator -> Composer -> Expander -> Output Validator and
produces one immutable PolicyDocument per questionnaire.

Assembly is all-or-nothing: a document that fails output validation is
never returned. Each call uses a fresh identifier and timestamp; no state
is carried between calls.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional
from uuid import uuid4
import logging

from policygen.models.questionnaire import QuestionnaireInput
from policygen.models.policy_document import (
    PolicyDocument,
    PolicySection,
    MANDATORY_SECTIONS,
    EXTENDED_SECTIONS,
    count_words,
)

from .errors import PolicyInvariantViolation
from .input_validator import QuestionnaireValidator, get_validator
from .section_composer import SectionComposer, get_composer
from .content_expander import ContentExpander, get_expander
from .regulatory_references import get_regulatory_references
from .output_validator import PolicyValidator, get_policy_validator

logger = logging.getLogger(__name__)


def _new_policy_id() -> str:
    return str(uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PolicyAssembler:
    """
    Assembles complete policy documents from questionnaires.

    Assembly:
    1. Compose each mandatory section and expand it to its target
    2. Compose any requested extended sections (not expanded)
    3. Look up the sector's regulatory mapping
    4. Stamp identifier and creation time
    5. Sum word counts across present sections
    6. Validate the result
    """

    def __init__(
        self,
        validator: Optional[QuestionnaireValidator] = None,
        composer: Optional[SectionComposer] = None,
        expander: Optional[ContentExpander] = None,
        policy_validator: Optional[PolicyValidator] = None,
        id_factory: Callable[[], str] = _new_policy_id,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize the policy assembler.

        Args:
            validator: QuestionnaireValidator instance (defaults to singleton)
            composer: SectionComposer instance (defaults to singleton)
            expander: ContentExpander instance (defaults to singleton)
            policy_validator: PolicyValidator instance (defaults to singleton)
            id_factory: Produces a fresh unique document identifier
            clock: Produces the creation timestamp
        """
        self.validator = validator or get_validator()
        self.composer = composer or get_composer()
        self.expander = expander or get_expander()
        self.policy_validator = policy_validator or get_policy_validator()
        self.id_factory = id_factory
        self.clock = clock

    def assemble(
        self,
        questionnaire: QuestionnaireInput,
        extended_sections: Iterable[PolicySection] = (),
    ) -> PolicyDocument:
        """
        Assemble a validated policy document.

        Args:
            questionnaire: Validated questionnaire (raw mappings are validated first)
            extended_sections: Optional sections to include in addition to
                the mandatory ones

        Returns:
            PolicyDocument that passed output validation

        Raises:
            QuestionnaireValidationError: If questionnaire is a raw mapping that fails validation
            PolicyInvariantViolation: If the assembled document breaks an invariant
            ValueError: If an extended section is not an optional section
        """
        questionnaire = self.validator.validate(questionnaire)
        extended = self._resolve_extended(extended_sections)

        sections: Dict[PolicySection, str] = {}
        for section in MANDATORY_SECTIONS:
            draft = self.composer.compose(section, questionnaire)
            sections[section] = self.expander.expand_section(section, draft, questionnaire.sector)

        for section in extended:
            sections[section] = self.composer.compose(section, questionnaire)

        document = PolicyDocument(
            id=self.id_factory(),
            created_at=self.clock(),
            sections=sections,
            regulatory_mapping=get_regulatory_references(questionnaire.sector),
            word_count=sum(count_words(text) for text in sections.values()),
        )

        try:
            self.policy_validator.validate(document)
        except PolicyInvariantViolation as e:
            logger.error(f"Assembled policy {document.id} failed validation: {e}")
            raise

        logger.info(
            f"Assembled policy {document.id}: {document.word_count} words, "
            f"sector={questionnaire.sector.value}, sections={len(sections)}"
        )
        return document

    def generate(
        self,
        raw_input: Any,
        extended_sections: Iterable[PolicySection] = (),
    ) -> PolicyDocument:
        """
        Validate a raw submission and assemble its policy.

        Raises:
            QuestionnaireValidationError: If the submission is rejected
            PolicyInvariantViolation: If the assembled document breaks an invariant
        """
        questionnaire = self.validator.validate(raw_input)
        return self.assemble(questionnaire, extended_sections)

    def _resolve_extended(self, extended_sections: Iterable[PolicySection]) -> list:
        requested = {PolicySection(s) for s in extended_sections}
        invalid = requested.difference(EXTENDED_SECTIONS)
        if invalid:
            names = ", ".join(sorted(s.value for s in invalid))
            raise ValueError(f"Not an extended section: {names}")
        return [s for s in EXTENDED_SECTIONS if s in requested]


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_assembler: Optional[PolicyAssembler] = None


def get_assembler() -> PolicyAssembler:
    """Get or create the default policy assembler singleton."""
    global _assembler
    if _assembler is None:
        _assembler = PolicyAssembler()
    return _assembler


def assemble_policy(
    questionnaire: QuestionnaireInput,
    extended_sections: Iterable[PolicySection] = (),
) -> PolicyDocument:
    """Convenience function to assemble a policy with the default assembler."""
    return get_assembler().assemble(questionnaire, extended_sections)


def generate_policy(
    raw_input: Any,
    extended_sections: Iterable[PolicySection] = (),
) -> PolicyDocument:
    """
    Convenience function to validate and assemble a policy.

    Args:
        raw_input: Untyped questionnaire payload

    Returns:
        Validated PolicyDocument

    Raises:
        QuestionnaireValidationError: If the submission is rejected
        PolicyInvariantViolation: If the assembled document breaks an invariant
    """
    return get_assembler().generate(raw_input, extended_sections)
