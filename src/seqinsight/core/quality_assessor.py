import logging
from typing import Optional

from ..constants.constants import *
from ..models.bio_models import CompositionResult, SequenceType
from ..models.insight_models import QualityAssessment
from ..tools.bio.bio_analysis import calculate_gc_content
from ..tools.bio.pattern_search import has_tandem_repeat
from . import insight_templates as templates
from .knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)


def assess_quality(
    sequence: str,
    sequence_type: SequenceType,
    knowledge_base: KnowledgeBase,
    composition: Optional[CompositionResult] = None,
) -> QualityAssessment:
    """Score a normalized sequence from 100 down, one fixed penalty per detected problem."""
    issues: list[str] = []
    warnings: list[str] = []
    score = QUALITY_MAX_SCORE

    ambiguity_codes = (
        BIO_PROTEIN_AMBIGUITY_CODES
        if sequence_type is SequenceType.PROTEIN
        else BIO_NUCLEOTIDE_AMBIGUITY_CODES
    )
    ambiguous = sum(1 for symbol in sequence if symbol in ambiguity_codes)
    if ambiguous:
        percentage = ambiguous / len(sequence) * PERCENTAGE_MULTIPLIER
        if percentage > AMBIGUOUS_HIGH_PERCENT:
            issues.append(templates.HIGH_AMBIGUITY_ISSUE.format(percentage=percentage))
            score -= PENALTY_HIGH_AMBIGUITY
        elif percentage > AMBIGUOUS_MODERATE_PERCENT:
            warnings.append(templates.MODERATE_AMBIGUITY_WARNING.format(percentage=percentage))
            score -= PENALTY_MODERATE_AMBIGUITY

    lengths = knowledge_base.length_thresholds
    if len(sequence) < lengths.short:
        warnings.append(templates.SHORT_SEQUENCE_WARNING)
        score -= PENALTY_SHORT_SEQUENCE
    elif len(sequence) > lengths.very_long:
        warnings.append(templates.VERY_LONG_SEQUENCE_WARNING)

    if sequence_type.is_nucleotide:
        composition = composition or calculate_gc_content(sequence, sequence_type)
        gc = knowledge_base.gc_thresholds
        if composition.gc_content < gc.extreme_low or composition.gc_content > gc.extreme_high:
            warnings.append(templates.EXTREME_GC_WARNING.format(gc_content=composition.gc_content))
            score -= PENALTY_EXTREME_GC

        if has_tandem_repeat(sequence):
            warnings.append(templates.TANDEM_REPEAT_WARNING)
            score -= PENALTY_TANDEM_REPEAT

    score = max(QUALITY_MIN_SCORE, score)
    logger.debug(f"Quality score {score} with {len(issues)} issues, {len(warnings)} warnings")
    return QualityAssessment(score=score, issues=tuple(issues), warnings=tuple(warnings))
