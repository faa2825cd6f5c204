import logging
import re
from collections import Counter
from itertools import product
from typing import Union

import numpy as np
from Bio.Data import CodonTable

from ...constants.constants import *
from ...exceptions import IncompatibleAnalysis
from ...models.bio_models import CodonUsageResult, CompositionResult, SequenceType
from .sequence_normalizer import to_dna

logger = logging.getLogger(__name__)

STANDARD_TABLE = CodonTable.unambiguous_dna_by_id[BIO_STANDARD_TABLE_ID]
STOP_CODONS = frozenset(STANDARD_TABLE.stop_codons)
_STOP_CODON_PATTERN = re.compile("|".join(sorted(STOP_CODONS)))


def codon_to_amino_acid(codon: str) -> str:
    """Translate one codon (DNA or RNA letters) with the standard genetic code."""
    dna_codon = to_dna(codon)
    if dna_codon in STOP_CODONS:
        return BIO_STOP_SYMBOL
    return STANDARD_TABLE.forward_table.get(dna_codon, BIO_UNKNOWN_RESIDUE)


def split_codons(sequence: str, frame: int = 0) -> list[str]:
    return [
        sequence[i : i + CODON_LENGTH]
        for i in range(frame, len(sequence) - CODON_LENGTH + 1, CODON_LENGTH)
    ]


def calculate_composition(
    sequence: str, sequence_type: Union[SequenceType, str]
) -> CompositionResult:
    sequence_type = SequenceType.parse(sequence_type)
    if sequence_type.is_nucleotide:
        return calculate_gc_content(sequence, sequence_type)

    return CompositionResult(length=len(sequence), counts=dict(Counter(sequence)))


def calculate_gc_content(
    sequence: str, sequence_type: Union[SequenceType, str] = SequenceType.DNA
) -> CompositionResult:
    sequence_type = SequenceType.parse(sequence_type)
    if not sequence_type.is_nucleotide:
        raise IncompatibleAnalysis("GC content", sequence_type.value)

    counts = Counter(sequence)
    weak_partner = "U" if sequence_type is SequenceType.RNA else "T"

    g, c, a, t = counts["G"], counts["C"], counts["A"], counts[weak_partner]
    unambiguous = g + c + a + t

    if unambiguous:
        gc_fraction = (g + c) / unambiguous
        gc_content = round(gc_fraction * PERCENTAGE_MULTIPLIER, CONTENT_DECIMALS)
        at_content = round((1 - gc_fraction) * PERCENTAGE_MULTIPLIER, CONTENT_DECIMALS)
    else:
        gc_content = at_content = NEUTRAL_VALUE

    ambiguous_count = sum(
        count for symbol, count in counts.items() if symbol in BIO_NUCLEOTIDE_AMBIGUITY_CODES
    )

    return CompositionResult(
        length=len(sequence),
        counts=dict(counts),
        gc_content=gc_content,
        at_content=at_content,
        gc_skew=_skew(g, c),
        at_skew=_skew(a, t),
        ambiguous_count=ambiguous_count,
        stop_codon_count=len(_STOP_CODON_PATTERN.findall(to_dna(sequence))),
    )


def _skew(first: int, second: int) -> float:
    total = first + second
    if total == 0:
        return NEUTRAL_VALUE
    return round((first - second) / total, SKEW_DECIMALS)


def analyze_codon_usage(
    sequence: str,
    sequence_type: Union[SequenceType, str] = SequenceType.DNA,
    top_k: int = DEFAULT_TOP_CODON_COUNT,
) -> CodonUsageResult:
    sequence_type = SequenceType.parse(sequence_type)
    if not sequence_type.is_nucleotide:
        raise IncompatibleAnalysis("Codon usage", sequence_type.value)

    codons = Counter(split_codons(sequence))
    amino_acids: Counter = Counter()
    for codon, count in codons.items():
        amino_acids[codon_to_amino_acid(codon)] += count

    logger.debug(f"Counted {sum(codons.values())} codons ({len(codons)} distinct)")

    by_frequency = sorted(codons.items(), key=lambda item: (-item[1], item[0]))
    by_rarity = sorted(codons.items(), key=lambda item: (item[1], item[0]))

    return CodonUsageResult(
        codons=dict(sorted(codons.items())),
        amino_acids=dict(sorted(amino_acids.items())),
        total_codons=len(sequence) // CODON_LENGTH,
        most_frequent=tuple(codon for codon, _ in by_frequency[:top_k]),
        least_frequent=tuple(codon for codon, _ in by_rarity[:top_k]),
        codon_bias=calculate_codon_bias(codons, sequence_type),
    )


def calculate_codon_bias(codons: dict[str, int], sequence_type: SequenceType) -> float:
    """Normalised squared deviation of codon frequencies from uniform usage.

    Only the 64 unambiguous codons take part. The sum of squared deviations
    from 1/64 is divided by its maximum (63/64, every codon identical), giving
    0 for perfectly uniform usage and 1 for a single repeated codon.
    """
    bases = BIO_RNA_BASES if sequence_type is SequenceType.RNA else BIO_DNA_BASES
    codon_space = ["".join(triplet) for triplet in product(bases, repeat=CODON_LENGTH)]

    observed = np.array([codons.get(codon, 0) for codon in codon_space], dtype=float)
    total = observed.sum()
    if total == 0:
        return NEUTRAL_VALUE

    expected = 1.0 / CODON_SPACE_SIZE
    deviation = np.square(observed / total - expected).sum()
    return round(float(deviation / (1.0 - expected)), BIAS_DECIMALS)
