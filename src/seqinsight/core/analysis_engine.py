import asyncio
import logging
from dataclasses import asdict
from enum import Enum
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from ..exceptions import IncompatibleAnalysis, InvalidSequence, UnresolvableReference
from ..models.bio_models import SequenceType
from ..models.insight_models import (
    AnalysisContext,
    ComparativeAnalysis,
    FunctionalAnalysis,
    SequenceAnalysisReport,
)
from ..settings import Settings, settings as default_settings
from ..tools.bio.bio_analysis import analyze_codon_usage, calculate_composition
from ..tools.bio.mutation_comparator import calculate_similarity, compare_mutations
from ..tools.bio.orf_scanner import find_orfs
from ..tools.bio.pattern_search import detect_motifs, predict_protein_domains
from ..tools.bio.sequence_normalizer import normalize_sequence
from ..tools.bio.translator import calculate_protein_properties, translate_sequence
from .insight_generator import InsightGenerator
from .insight_rules import InsightInputs
from .knowledge_base import KnowledgeBase, build_knowledge_base
from .quality_assessor import assess_quality

logger = logging.getLogger(__name__)

T = TypeVar("T")
ContextLike = Union[AnalysisContext, Mapping[str, Any], None]


class SequenceAnalysisEngine:
    """Runs every analysis on one sequence and assembles the report.

    The engine holds no per-call state: the knowledge base and settings are
    read-only, so one instance can serve concurrent ``analyze`` calls.
    """

    def __init__(
        self,
        knowledge_base: Optional[KnowledgeBase] = None,
        config: Optional[Settings] = None,
    ):
        self.settings = config or default_settings
        self.knowledge_base = knowledge_base or build_knowledge_base(self.settings)
        self.insight_generator = InsightGenerator(self.knowledge_base)

    def analyze(
        self,
        sequence: str,
        sequence_type: Union[SequenceType, str],
        context: ContextLike = None,
    ) -> SequenceAnalysisReport:
        sequence_type = SequenceType.parse(sequence_type)
        context = self._resolve_context(context)

        normalized = normalize_sequence(sequence, sequence_type)
        logger.info(f"Analyzing {len(normalized):,} {sequence_type.value} symbols")

        composition = calculate_composition(normalized, sequence_type)
        quality = assess_quality(normalized, sequence_type, self.knowledge_base, composition)
        functional = self._analyze_functional_elements(normalized, sequence_type)
        comparative = self._compare_with_reference(normalized, sequence_type, context)

        insights = self.insight_generator.generate(
            InsightInputs(
                sequence=normalized,
                sequence_type=sequence_type,
                quality=quality,
                composition=composition,
                functional=functional,
                comparative=comparative,
                context=context,
            )
        )

        return SequenceAnalysisReport(
            sequence=normalized,
            sequence_type=sequence_type,
            quality=quality,
            composition=composition,
            functional=functional,
            comparative=comparative,
            insights=tuple(insights),
        )

    async def analyze_async(
        self,
        sequence: str,
        sequence_type: Union[SequenceType, str],
        context: ContextLike = None,
    ) -> SequenceAnalysisReport:
        return await asyncio.to_thread(self.analyze, sequence, sequence_type, context)

    def _resolve_context(self, context: ContextLike) -> Optional[AnalysisContext]:
        if context is None or isinstance(context, AnalysisContext):
            return context
        return AnalysisContext.from_mapping(context)

    def _analyze_functional_elements(
        self, sequence: str, sequence_type: SequenceType
    ) -> FunctionalAnalysis:
        orfs = self._optional(
            find_orfs, sequence, sequence_type, self.settings.min_orf_protein_length
        ) or []
        codon_usage = self._optional(
            analyze_codon_usage, sequence, sequence_type, self.settings.top_codon_count
        )

        domains: list[str] = []
        if sequence_type is SequenceType.PROTEIN:
            translation = calculate_protein_properties(sequence)
            domains = predict_protein_domains(sequence)
        elif orfs:
            translation = translate_sequence(sequence, sequence_type)
        else:
            translation = None

        motifs = detect_motifs(sequence, self.knowledge_base.motifs_for(sequence_type))

        return FunctionalAnalysis(
            orfs=tuple(orfs),
            translation=translation,
            codon_usage=codon_usage,
            motifs=tuple(motifs),
            domains=tuple(domains),
        )

    def _optional(self, analysis: Callable[..., T], *args: Any) -> Optional[T]:
        try:
            return analysis(*args)
        except IncompatibleAnalysis as e:
            logger.debug(f"Skipping {analysis.__name__}: {e}")
            return None

    def _compare_with_reference(
        self,
        sequence: str,
        sequence_type: SequenceType,
        context: Optional[AnalysisContext],
    ) -> Optional[ComparativeAnalysis]:
        if context is None or not context.reference_sequence:
            return None

        try:
            reference = self._resolve_reference(context.reference_sequence, sequence_type)
        except UnresolvableReference as e:
            logger.warning(f"Comparative analysis skipped: {e}")
            return None

        return ComparativeAnalysis(
            mutations=compare_mutations(reference, sequence, sequence_type),
            similarity=calculate_similarity(sequence, reference),
            reference_length=len(reference),
            query_length=len(sequence),
        )

    def _resolve_reference(self, reference: str, sequence_type: SequenceType) -> str:
        try:
            return normalize_sequence(reference, sequence_type)
        except InvalidSequence as e:
            raise UnresolvableReference(
                f"Reference sequence is not a valid {sequence_type.value} sequence: {e}",
                sequence_type.value,
            ) from e


def report_to_dict(report: SequenceAnalysisReport) -> dict[str, Any]:
    """Plain dict/list/str/number rendering of a report for storage or display layers."""
    return _to_plain(asdict(report))


def _to_plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_to_plain(key): _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value
