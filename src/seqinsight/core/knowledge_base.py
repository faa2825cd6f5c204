import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ..constants.constants import *
from ..models.bio_models import MotifDefinition, SequenceType
from ..settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GCThresholds:
    low: float = GC_LOW_THRESHOLD
    high: float = GC_HIGH_THRESHOLD
    extreme_low: float = GC_EXTREME_LOW_THRESHOLD
    extreme_high: float = GC_EXTREME_HIGH_THRESHOLD


@dataclass(frozen=True)
class LengthThresholds:
    short: int = LENGTH_SHORT_THRESHOLD
    medium: int = LENGTH_MEDIUM_THRESHOLD
    long: int = LENGTH_LONG_THRESHOLD
    very_long: int = LENGTH_VERY_LONG_THRESHOLD


@dataclass(frozen=True)
class InsightThresholds:
    quality_score: int = INSIGHT_QUALITY_SCORE_THRESHOLD
    gc_skew: float = INSIGHT_GC_SKEW_THRESHOLD
    significant_orf_length: int = INSIGHT_SIGNIFICANT_ORF_LENGTH
    multiple_orf_count: int = INSIGHT_MULTIPLE_ORF_COUNT
    codon_bias: float = INSIGHT_CODON_BIAS_THRESHOLD
    mutation_rate: float = INSIGHT_MUTATION_RATE_THRESHOLD
    missense_count: int = INSIGHT_MISSENSE_COUNT_THRESHOLD
    similarity: float = INSIGHT_SIMILARITY_THRESHOLD
    hydrophobic: float = INSIGHT_HYDROPHOBIC_THRESHOLD
    hydrophilic: float = INSIGHT_HYDROPHILIC_THRESHOLD
    basic_pi: float = INSIGHT_BASIC_PI_THRESHOLD
    acidic_pi: float = INSIGHT_ACIDIC_PI_THRESHOLD


DNA_MOTIFS = (
    MotifDefinition("TATA Box", "Promoter element", ("TATAAA",)),
    MotifDefinition("CAAT Box", "Promoter element", ("CAAT",)),
    MotifDefinition("GC Box", "Promoter element", ("GGCCGG",)),
    MotifDefinition("Start Codon", "Translation initiation", ("ATG",)),
    MotifDefinition("Stop Codon", "Translation termination", ("TAA", "TAG", "TGA")),
)

PROTEIN_MOTIFS = (
    MotifDefinition("RGD Motif", "Cell adhesion", ("RGD",)),
    MotifDefinition("ER Retention Signal", "Protein localization", ("KDEL",)),
    MotifDefinition("Nuclear Localization Signal", "Nuclear import", ("PKKKRKV",)),
)

RARE_CODONS = {
    "E. coli": ("TTG", "CTG", "CTA", "TTA"),
    "S. cerevisiae": ("CTA", "CTC", "TTG", "CTG"),
    "Human": ("CGA", "CGG", "AGA", "AGG"),
}


def _as_rna(motif: MotifDefinition) -> MotifDefinition:
    return MotifDefinition(
        motif.name, motif.function, tuple(p.replace("T", "U") for p in motif.patterns)
    )


@dataclass(frozen=True)
class KnowledgeBase:
    """Read-only lookup tables shared by every analysis.

    Built once (see ``build_knowledge_base``) and passed to the engine; nothing
    mutates it afterwards, so concurrent analyses can share one instance.
    """

    gc_thresholds: GCThresholds
    length_thresholds: LengthThresholds
    insight_thresholds: InsightThresholds
    motifs: Mapping[SequenceType, tuple[MotifDefinition, ...]]
    rare_codons: Mapping[str, tuple[str, ...]]

    def motifs_for(self, sequence_type: SequenceType) -> tuple[MotifDefinition, ...]:
        return self.motifs.get(sequence_type, ())

    def rare_codons_for(self, organism: Optional[str]) -> Optional[tuple[str, ...]]:
        if not organism:
            return None
        wanted = organism.strip().lower()
        for name, codons in self.rare_codons.items():
            if name.lower() == wanted:
                return codons
        return None


def build_knowledge_base(config: Optional[Settings] = None) -> KnowledgeBase:
    config = config or default_settings

    knowledge_base = KnowledgeBase(
        gc_thresholds=GCThresholds(
            low=config.gc_low_threshold,
            high=config.gc_high_threshold,
            extreme_low=config.gc_extreme_low_threshold,
            extreme_high=config.gc_extreme_high_threshold,
        ),
        length_thresholds=LengthThresholds(
            short=config.length_short_threshold,
            medium=config.length_medium_threshold,
            long=config.length_long_threshold,
            very_long=config.length_very_long_threshold,
        ),
        insight_thresholds=InsightThresholds(
            quality_score=config.quality_score_threshold,
            gc_skew=config.gc_skew_threshold,
            significant_orf_length=config.significant_orf_length,
            multiple_orf_count=config.multiple_orf_count,
            codon_bias=config.codon_bias_threshold,
            mutation_rate=config.mutation_rate_threshold,
            missense_count=config.missense_count_threshold,
            similarity=config.similarity_threshold,
        ),
        motifs=MappingProxyType(
            {
                SequenceType.DNA: DNA_MOTIFS,
                SequenceType.RNA: tuple(_as_rna(motif) for motif in DNA_MOTIFS),
                SequenceType.PROTEIN: PROTEIN_MOTIFS,
            }
        ),
        rare_codons=MappingProxyType(dict(RARE_CODONS)),
    )

    logger.debug(f"Knowledge base built with {len(RARE_CODONS)} host organisms")
    return knowledge_base
