import logging
from typing import Union

from ...constants.constants import *
from ...models.bio_models import Mutation, MutationComparison, MutationEffect, SequenceType
from .bio_analysis import codon_to_amino_acid

logger = logging.getLogger(__name__)


def compare_mutations(
    reference: str,
    query: str,
    sequence_type: Union[SequenceType, str] = SequenceType.DNA,
) -> MutationComparison:
    """Position-by-position substitutions between two normalized sequences.

    Only the overlapping prefix is compared; there is no alignment, so an
    insertion or deletion shows up as a run of substitutions after it.
    """
    sequence_type = SequenceType.parse(sequence_type)
    overlap = min(len(reference), len(query))

    mutations = []
    for position in range(overlap):
        reference_symbol, query_symbol = reference[position], query[position]
        if reference_symbol == query_symbol:
            continue

        if sequence_type.is_nucleotide:
            effect = _classify_codon_change(reference, query, position)
        else:
            effect = MutationEffect.MISSENSE

        mutations.append(
            Mutation(
                position=position,
                reference_symbol=reference_symbol,
                query_symbol=query_symbol,
                effect=effect,
            )
        )

    mutation_rate = len(mutations) / overlap * PERCENTAGE_MULTIPLIER if overlap else NEUTRAL_VALUE
    logger.debug(f"Compared {overlap} positions: {len(mutations)} substitutions")

    return MutationComparison(
        mutations=tuple(mutations),
        total_mutations=len(mutations),
        mutation_rate=round(mutation_rate, CONTENT_DECIMALS),
    )


def _classify_codon_change(reference: str, query: str, position: int) -> MutationEffect:
    codon_start = (position // CODON_LENGTH) * CODON_LENGTH
    reference_codon = reference[codon_start : codon_start + CODON_LENGTH]
    query_codon = query[codon_start : codon_start + CODON_LENGTH]

    if len(reference_codon) < CODON_LENGTH or len(query_codon) < CODON_LENGTH:
        return MutationEffect.MISSENSE

    reference_residue = codon_to_amino_acid(reference_codon)
    query_residue = codon_to_amino_acid(query_codon)

    if BIO_UNKNOWN_RESIDUE in (reference_residue, query_residue):
        return MutationEffect.MISSENSE
    if reference_residue == query_residue:
        return MutationEffect.SILENT
    if query_residue == BIO_STOP_SYMBOL:
        return MutationEffect.NONSENSE
    return MutationEffect.MISSENSE


def calculate_similarity(first: str, second: str) -> float:
    """Percentage of matching positions over the overlap, relative to the longer sequence."""
    longest = max(len(first), len(second))
    if longest == 0:
        return NEUTRAL_VALUE

    matches = sum(1 for a, b in zip(first, second) if a == b)
    return round(matches / longest * PERCENTAGE_MULTIPLIER, CONTENT_DECIMALS)
