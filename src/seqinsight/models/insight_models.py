from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from ..constants.constants import CONTEXT_KEY_ALIASES
from .bio_models import (
    CodonUsageResult,
    CompositionResult,
    MotifHit,
    MutationComparison,
    ORF,
    SequenceType,
    TranslationResult,
)


class InsightKind(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"
    INFO = "info"

    @property
    def rank(self) -> int:
        return INSIGHT_KIND_RANKS[self]


INSIGHT_KIND_RANKS = {
    InsightKind.CRITICAL: 4,
    InsightKind.WARNING: 3,
    InsightKind.SUGGESTION: 2,
    InsightKind.INFO: 1,
}


class InsightCategory(Enum):
    QUALITY = "quality"
    FUNCTIONAL = "functional"
    STRUCTURAL = "structural"
    OPTIMIZATION = "optimization"
    COMPARATIVE = "comparative"


@dataclass(frozen=True)
class AIInsight:
    id: str
    kind: InsightKind
    category: InsightCategory
    title: str
    description: str
    confidence: float
    actionable: bool
    evidence: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class QualityAssessment:
    score: int
    issues: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class FunctionalAnalysis:
    orfs: tuple[ORF, ...] = ()
    translation: Optional[TranslationResult] = None
    codon_usage: Optional[CodonUsageResult] = None
    motifs: tuple[MotifHit, ...] = ()
    domains: tuple[str, ...] = ()


@dataclass(frozen=True)
class ComparativeAnalysis:
    mutations: MutationComparison
    similarity: float
    reference_length: int
    query_length: int


@dataclass(frozen=True)
class AnalysisContext:
    question: Optional[str] = None
    reference_sequence: Optional[str] = None
    target_organism: Optional[str] = None
    analysis_goal: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnalysisContext":
        values = {}
        for key, value in data.items():
            field_name = CONTEXT_KEY_ALIASES.get(key)
            if field_name and value is not None:
                values[field_name] = str(value)
        return cls(**values)

    @property
    def research_text(self) -> str:
        parts = [self.question or "", self.analysis_goal or ""]
        return " ".join(part for part in parts if part).lower()


@dataclass(frozen=True)
class SequenceAnalysisReport:
    sequence: str
    sequence_type: SequenceType
    quality: QualityAssessment
    composition: CompositionResult
    functional: FunctionalAnalysis
    comparative: Optional[ComparativeAnalysis] = None
    insights: tuple[AIInsight, ...] = field(default_factory=tuple)
