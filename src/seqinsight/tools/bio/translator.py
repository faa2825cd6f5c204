import logging
from collections import Counter
from typing import Union

from Bio.Data import IUPACData
from Bio.Seq import Seq
from Bio.SeqUtils import ProtParamData
from Bio.SeqUtils.IsoelectricPoint import IsoelectricPoint

from ...constants.constants import *
from ...exceptions import IncompatibleAnalysis
from ...models.bio_models import SequenceType, TranslationResult

logger = logging.getLogger(__name__)


def translate_sequence(
    sequence: str,
    sequence_type: Union[SequenceType, str] = SequenceType.DNA,
    frame: int = 0,
) -> TranslationResult:
    """Translate ``sequence`` from ``frame`` up to (not including) the first stop codon.

    Uses biopython's ambiguity-aware standard table, so DNA and RNA letters are
    both accepted and codons that cannot be resolved become ``X``.
    """
    sequence_type = SequenceType.parse(sequence_type)
    if not sequence_type.is_nucleotide:
        raise IncompatibleAnalysis("Translation", sequence_type.value)

    frame_seq = sequence[frame:]
    usable_length = len(frame_seq) - len(frame_seq) % CODON_LENGTH
    protein = str(
        Seq(frame_seq[:usable_length]).translate(table=BIO_STANDARD_TABLE_ID, to_stop=True)
    )
    logger.debug(f"Translated {len(sequence)} nt (frame {frame}) to {len(protein)} aa")
    return calculate_protein_properties(protein)


def calculate_protein_properties(protein_sequence: str) -> TranslationResult:
    clean_seq = protein_sequence.replace(BIO_STOP_SYMBOL, "")

    return TranslationResult(
        protein_sequence=clean_seq,
        length=len(clean_seq),
        molecular_weight=calculate_molecular_weight(clean_seq),
        isoelectric_point=calculate_isoelectric_point(clean_seq),
        hydropathy=calculate_hydropathy(clean_seq),
        amino_acid_counts=dict(sorted(Counter(clean_seq).items())),
    )


def calculate_molecular_weight(protein_sequence: str) -> float:
    """Average mass in Da: free amino acid masses minus one water per peptide bond."""
    if not protein_sequence:
        return NEUTRAL_VALUE

    total = sum(
        IUPACData.protein_weights.get(residue, AVERAGE_RESIDUE_MASS)
        for residue in protein_sequence
    )
    peptide_bonds = len(protein_sequence) - 1
    return round(total - peptide_bonds * WATER_MASS, PROPERTY_DECIMALS)


def calculate_isoelectric_point(protein_sequence: str) -> float:
    """pH of zero net charge from a Henderson-Hasselbalch charge balance.

    Acidic (D, E, C, Y) and basic (K, R, H) side chains plus both termini are
    weighted with Bjellqvist pK values and the root is found by bisection, so
    adding acidic residues lowers the estimate and basic ones raise it.
    """
    if not protein_sequence:
        return NEUTRAL_VALUE
    return round(IsoelectricPoint(protein_sequence).pi(), PROPERTY_DECIMALS)


def calculate_hydropathy(protein_sequence: str) -> float:
    """Mean Kyte-Doolittle index over residues with a known value."""
    values = [
        ProtParamData.kd[residue] for residue in protein_sequence if residue in ProtParamData.kd
    ]
    if not values:
        return NEUTRAL_VALUE
    return round(sum(values) / len(values), PROPERTY_DECIMALS)
