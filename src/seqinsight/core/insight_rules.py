import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..constants.constants import *
from ..models.bio_models import CompositionResult, MutationEffect, SequenceType
from ..models.insight_models import (
    AIInsight,
    AnalysisContext,
    ComparativeAnalysis,
    FunctionalAnalysis,
    InsightCategory,
    InsightKind,
    QualityAssessment,
)
from ..tools.bio.pattern_search import count_codons
from . import insight_templates as templates
from .knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)

Binding = dict[str, Any]


@dataclass(frozen=True)
class InsightInputs:
    sequence: str
    sequence_type: SequenceType
    quality: QualityAssessment
    composition: CompositionResult
    functional: FunctionalAnalysis
    comparative: Optional[ComparativeAnalysis] = None
    context: Optional[AnalysisContext] = None

    @property
    def research_text(self) -> str:
        return self.context.research_text if self.context else ""


@dataclass(frozen=True)
class InsightRule:
    """One row of the rule table.

    ``bindings`` inspects the analysis results and returns one mapping per
    insight to emit; an empty list means the rule does not fire. Each mapping
    fills the title/description templates and becomes the insight's evidence.
    """

    rule_id: str
    kind: InsightKind
    category: InsightCategory
    title: str
    description: str
    confidence: float
    actionable: bool
    bindings: Callable[[InsightInputs, KnowledgeBase], list[Binding]]

    def evaluate(self, inputs: InsightInputs, knowledge_base: KnowledgeBase) -> list[Binding]:
        return self.bindings(inputs, knowledge_base)

    def build(self, binding: Binding, insight_id: str) -> AIInsight:
        return AIInsight(
            id=insight_id,
            kind=self.kind,
            category=self.category,
            title=self.title.format(**binding),
            description=self.description.format(**binding),
            confidence=self.confidence,
            actionable=self.actionable,
            evidence=dict(binding) or None,
        )


def _mentions(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


# Quality

def _low_quality(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    quality = inputs.quality
    if quality.score >= kb.insight_thresholds.quality_score:
        return []
    return [
        {
            "score": quality.score,
            "issues": ", ".join(quality.issues),
            "warnings": list(quality.warnings),
        }
    ]


def _quality_warnings(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    return [{"warning": warning} for warning in inputs.quality.warnings]


# Composition

def _high_gc(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    gc_content = inputs.composition.gc_content
    if gc_content is None or gc_content <= kb.gc_thresholds.high:
        return []
    return [{"gc_content": gc_content}]


def _low_gc(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    gc_content = inputs.composition.gc_content
    if gc_content is None or gc_content >= kb.gc_thresholds.low:
        return []
    return [{"gc_content": gc_content}]


def _gc_skew(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    gc_skew = inputs.composition.gc_skew
    if gc_skew is None or abs(gc_skew) <= kb.insight_thresholds.gc_skew:
        return []
    return [{"gc_skew": gc_skew}]


# Functional

def _significant_orf(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    orfs = inputs.functional.orfs
    if not orfs or len(orfs[0].protein) <= kb.insight_thresholds.significant_orf_length:
        return []
    longest = orfs[0]
    return [
        {
            "protein_length": len(longest.protein),
            "start": longest.start,
            "end": longest.end,
            "frame": longest.frame,
            "protein": longest.protein,
        }
    ]


def _multiple_orfs(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    orfs = inputs.functional.orfs
    if len(orfs) <= kb.insight_thresholds.multiple_orf_count:
        return []
    per_frame = Counter(orf.frame for orf in orfs)
    distribution = ", ".join(f"frame {frame}: {per_frame[frame]}" for frame in READING_FRAMES)
    return [
        {
            "orf_count": len(orfs),
            "frame_distribution": distribution,
            "frames": {str(frame): per_frame[frame] for frame in READING_FRAMES},
        }
    ]


def _codon_bias(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    codon_usage = inputs.functional.codon_usage
    if codon_usage is None or codon_usage.codon_bias <= kb.insight_thresholds.codon_bias:
        return []
    return [
        {
            "codon_bias": codon_usage.codon_bias,
            "most_frequent": list(codon_usage.most_frequent),
            "total_codons": codon_usage.total_codons,
        }
    ]


def _motifs(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    return [
        {
            "name": motif.name,
            "function": motif.function,
            "count": motif.count,
            "positions": list(motif.positions),
        }
        for motif in inputs.functional.motifs
    ]


def _domains(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    return [{"domain": domain} for domain in inputs.functional.domains]


def _translated_protein(inputs: InsightInputs):
    translation = inputs.functional.translation
    if translation is None or translation.length == 0:
        return None
    return translation


def _hydrophobic_protein(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    translation = _translated_protein(inputs)
    if translation is None or translation.hydropathy <= kb.insight_thresholds.hydrophobic:
        return []
    return [{"hydropathy": translation.hydropathy}]


def _hydrophilic_protein(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    translation = _translated_protein(inputs)
    if translation is None or translation.hydropathy >= kb.insight_thresholds.hydrophilic:
        return []
    return [{"hydropathy": translation.hydropathy}]


def _basic_protein(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    translation = _translated_protein(inputs)
    if translation is None or translation.isoelectric_point <= kb.insight_thresholds.basic_pi:
        return []
    return [{"isoelectric_point": translation.isoelectric_point}]


def _acidic_protein(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    translation = _translated_protein(inputs)
    if translation is None or translation.isoelectric_point >= kb.insight_thresholds.acidic_pi:
        return []
    return [{"isoelectric_point": translation.isoelectric_point}]


# Comparative

def _high_mutation_rate(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    comparative = inputs.comparative
    if comparative is None:
        return []
    mutations = comparative.mutations
    if mutations.mutation_rate <= kb.insight_thresholds.mutation_rate:
        return []
    return [
        {
            "mutation_rate": mutations.mutation_rate,
            "total_mutations": mutations.total_mutations,
        }
    ]


def _nonsense_mutations(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    if inputs.comparative is None:
        return []
    mutations = inputs.comparative.mutations
    nonsense_count = mutations.count(MutationEffect.NONSENSE)
    if nonsense_count == 0:
        return []
    positions = [m.position for m in mutations.mutations if m.effect is MutationEffect.NONSENSE]
    return [{"nonsense_count": nonsense_count, "positions": positions}]


def _missense_dominant(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    if inputs.comparative is None:
        return []
    mutations = inputs.comparative.mutations
    missense_count = mutations.count(MutationEffect.MISSENSE)
    nonsense_count = mutations.count(MutationEffect.NONSENSE)
    if missense_count <= nonsense_count or missense_count <= kb.insight_thresholds.missense_count:
        return []
    return [{"missense_count": missense_count}]


def _low_similarity(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    comparative = inputs.comparative
    if comparative is None or comparative.similarity >= kb.insight_thresholds.similarity:
        return []
    return [{"similarity": comparative.similarity}]


# Research context

def _disease_context(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    return [{}] if _mentions(inputs.research_text, DISEASE_KEYWORDS) else []


def _expression_optimization(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    if not _mentions(inputs.research_text, EXPRESSION_KEYWORDS):
        return []
    codon_usage = inputs.functional.codon_usage
    if codon_usage is None or codon_usage.codon_bias <= kb.insight_thresholds.codon_bias:
        return []
    return [{"codon_bias": codon_usage.codon_bias, "target_organism": inputs.context.target_organism}]


def _drug_target(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    if inputs.sequence_type is not SequenceType.PROTEIN:
        return []
    return [{}] if _mentions(inputs.research_text, DRUG_KEYWORDS) else []


# Optimization

def _rare_codons(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    if not inputs.sequence_type.is_nucleotide or inputs.context is None:
        return []
    organism = inputs.context.target_organism
    rare_codons = kb.rare_codons_for(organism)
    if not rare_codons:
        return []
    rare_codon_count = count_codons(inputs.sequence, rare_codons)
    if rare_codon_count == 0:
        return []
    return [
        {
            "rare_codon_count": rare_codon_count,
            "target_organism": organism,
            "rare_codons": list(rare_codons),
        }
    ]


def _long_sequence(inputs: InsightInputs, kb: KnowledgeBase) -> list[Binding]:
    if len(inputs.sequence) <= kb.length_thresholds.long:
        return []
    return [{"length": len(inputs.sequence)}]


def _rule(rule_id, kind, category, title, description, confidence, actionable, bindings):
    return InsightRule(
        rule_id=rule_id,
        kind=kind,
        category=category,
        title=title,
        description=description,
        confidence=confidence,
        actionable=actionable,
        bindings=bindings,
    )


K, C = InsightKind, InsightCategory

DEFAULT_RULES: tuple[InsightRule, ...] = (
    _rule("quality_low", K.WARNING, C.QUALITY, templates.LOW_QUALITY_TITLE,
          templates.LOW_QUALITY_DESCRIPTION, 0.9, True, _low_quality),
    _rule("quality_warning", K.INFO, C.QUALITY, templates.QUALITY_NOTICE_TITLE,
          templates.QUALITY_NOTICE_DESCRIPTION, 0.7, False, _quality_warnings),
    _rule("gc_high", K.INFO, C.STRUCTURAL, templates.HIGH_GC_TITLE,
          templates.HIGH_GC_DESCRIPTION, 0.8, True, _high_gc),
    _rule("gc_low", K.INFO, C.STRUCTURAL, templates.LOW_GC_TITLE,
          templates.LOW_GC_DESCRIPTION, 0.8, True, _low_gc),
    _rule("gc_skew", K.SUGGESTION, C.FUNCTIONAL, templates.GC_SKEW_TITLE,
          templates.GC_SKEW_DESCRIPTION, 0.6, False, _gc_skew),
    _rule("orf_significant", K.INFO, C.FUNCTIONAL, templates.SIGNIFICANT_ORF_TITLE,
          templates.SIGNIFICANT_ORF_DESCRIPTION, 0.8, True, _significant_orf),
    _rule("multiple_orfs", K.SUGGESTION, C.FUNCTIONAL, templates.MULTIPLE_ORFS_TITLE,
          templates.MULTIPLE_ORFS_DESCRIPTION, 0.7, True, _multiple_orfs),
    _rule("codon_bias", K.SUGGESTION, C.OPTIMIZATION, templates.CODON_BIAS_TITLE,
          templates.CODON_BIAS_DESCRIPTION, 0.7, True, _codon_bias),
    _rule("motif", K.INFO, C.FUNCTIONAL, templates.MOTIF_TITLE,
          templates.MOTIF_DESCRIPTION, 0.6, False, _motifs),
    _rule("domain", K.INFO, C.STRUCTURAL, templates.DOMAIN_TITLE,
          templates.DOMAIN_DESCRIPTION, 0.5, False, _domains),
    _rule("protein_hydrophobic", K.INFO, C.STRUCTURAL, templates.HYDROPHOBIC_PROTEIN_TITLE,
          templates.HYDROPHOBIC_PROTEIN_DESCRIPTION, 0.6, False, _hydrophobic_protein),
    _rule("protein_hydrophilic", K.INFO, C.STRUCTURAL, templates.HYDROPHILIC_PROTEIN_TITLE,
          templates.HYDROPHILIC_PROTEIN_DESCRIPTION, 0.6, False, _hydrophilic_protein),
    _rule("protein_basic", K.INFO, C.STRUCTURAL, templates.BASIC_PROTEIN_TITLE,
          templates.BASIC_PROTEIN_DESCRIPTION, 0.6, False, _basic_protein),
    _rule("protein_acidic", K.INFO, C.STRUCTURAL, templates.ACIDIC_PROTEIN_TITLE,
          templates.ACIDIC_PROTEIN_DESCRIPTION, 0.6, False, _acidic_protein),
    _rule("high_mutation_rate", K.WARNING, C.COMPARATIVE, templates.HIGH_MUTATION_RATE_TITLE,
          templates.HIGH_MUTATION_RATE_DESCRIPTION, 0.9, True, _high_mutation_rate),
    _rule("nonsense_mutations", K.CRITICAL, C.COMPARATIVE, templates.NONSENSE_TITLE,
          templates.NONSENSE_DESCRIPTION, 0.95, True, _nonsense_mutations),
    _rule("missense_dominant", K.SUGGESTION, C.COMPARATIVE, templates.MISSENSE_TITLE,
          templates.MISSENSE_DESCRIPTION, 0.7, True, _missense_dominant),
    _rule("low_similarity", K.INFO, C.COMPARATIVE, templates.LOW_SIMILARITY_TITLE,
          templates.LOW_SIMILARITY_DESCRIPTION, 0.8, False, _low_similarity),
    _rule("disease_context", K.SUGGESTION, C.COMPARATIVE, templates.DISEASE_CONTEXT_TITLE,
          templates.DISEASE_CONTEXT_DESCRIPTION, 0.6, True, _disease_context),
    _rule("expression_optimization", K.SUGGESTION, C.OPTIMIZATION, templates.EXPRESSION_TITLE,
          templates.EXPRESSION_DESCRIPTION, 0.8, True, _expression_optimization),
    _rule("drug_target", K.SUGGESTION, C.FUNCTIONAL, templates.DRUG_TARGET_TITLE,
          templates.DRUG_TARGET_DESCRIPTION, 0.7, True, _drug_target),
    _rule("rare_codons", K.SUGGESTION, C.OPTIMIZATION, templates.RARE_CODONS_TITLE,
          templates.RARE_CODONS_DESCRIPTION, 0.8, True, _rare_codons),
    _rule("long_sequence", K.SUGGESTION, C.OPTIMIZATION, templates.LONG_SEQUENCE_TITLE,
          templates.LONG_SEQUENCE_DESCRIPTION, 0.6, True, _long_sequence),
)

RULES_BY_ID = {rule.rule_id: rule for rule in DEFAULT_RULES}
