from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class SequenceType(Enum):
    DNA = "dna"
    RNA = "rna"
    PROTEIN = "protein"

    @classmethod
    def parse(cls, value: Union["SequenceType", str]) -> "SequenceType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sequence type: {value!r}") from None

    @property
    def is_nucleotide(self) -> bool:
        return self is not SequenceType.PROTEIN


class MutationEffect(Enum):
    SILENT = "silent"
    MISSENSE = "missense"
    NONSENSE = "nonsense"


@dataclass(frozen=True)
class CompositionResult:
    length: int
    counts: dict[str, int]
    gc_content: Optional[float] = None
    at_content: Optional[float] = None
    gc_skew: Optional[float] = None
    at_skew: Optional[float] = None
    ambiguous_count: int = 0
    stop_codon_count: int = 0


@dataclass(frozen=True)
class CodonUsageResult:
    codons: dict[str, int]
    amino_acids: dict[str, int]
    total_codons: int
    most_frequent: tuple[str, ...]
    least_frequent: tuple[str, ...]
    codon_bias: float


@dataclass(frozen=True)
class ORF:
    start: int
    end: int
    frame: int
    protein: str

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def orf_id(self) -> str:
        return f"ORF_{self.start}_{self.end}_{self.frame}"


@dataclass(frozen=True)
class TranslationResult:
    protein_sequence: str
    length: int
    molecular_weight: float
    isoelectric_point: float
    hydropathy: float
    amino_acid_counts: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Mutation:
    position: int
    reference_symbol: str
    query_symbol: str
    effect: MutationEffect


@dataclass(frozen=True)
class MutationComparison:
    mutations: tuple[Mutation, ...]
    total_mutations: int
    mutation_rate: float

    def count(self, effect: MutationEffect) -> int:
        return sum(1 for mutation in self.mutations if mutation.effect is effect)


@dataclass(frozen=True)
class MotifHit:
    name: str
    function: str
    patterns: tuple[str, ...]
    positions: tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class MotifDefinition:
    name: str
    function: str
    patterns: tuple[str, ...]
