import logging
from typing import Optional, Union

from ...constants.constants import *
from ...exceptions import IncompatibleAnalysis
from ...models.bio_models import ORF, SequenceType
from .bio_analysis import STOP_CODONS, codon_to_amino_acid
from .sequence_normalizer import to_dna

logger = logging.getLogger(__name__)


def find_orfs(
    sequence: str,
    sequence_type: Union[SequenceType, str] = SequenceType.DNA,
    min_protein_length: int = 0,
) -> list[ORF]:
    """Find start-to-stop open reading frames on the three forward frames.

    A start codon opens a region that stays open until the next in-frame stop;
    starts inside an open region are not reported on their own, and a region
    still open at the end of the sequence is dropped. The result is ordered by
    descending protein length, then ascending start.
    """
    sequence_type = SequenceType.parse(sequence_type)
    if not sequence_type.is_nucleotide:
        raise IncompatibleAnalysis("ORF scanning", sequence_type.value)

    dna_sequence = to_dna(sequence)
    orfs = []
    for frame in READING_FRAMES:
        orfs.extend(_find_orfs_in_frame(dna_sequence, frame, min_protein_length))

    orfs.sort(key=lambda orf: (-len(orf.protein), orf.start))
    logger.debug(f"Found {len(orfs)} ORFs across {len(READING_FRAMES)} frames")
    return orfs


def _find_orfs_in_frame(dna_sequence: str, frame: int, min_protein_length: int) -> list[ORF]:
    orfs = []
    start: Optional[int] = None
    residues: list[str] = []

    for i in range(frame, len(dna_sequence) - CODON_LENGTH + 1, CODON_LENGTH):
        codon = dna_sequence[i : i + CODON_LENGTH]

        if start is None:
            if _is_start_codon(codon):
                start = i
                residues = [codon_to_amino_acid(codon)]
            continue

        if _is_stop_codon(codon):
            protein = "".join(residues)
            if len(protein) >= min_protein_length:
                orfs.append(ORF(start=start, end=i + CODON_LENGTH, frame=frame, protein=protein))
            start = None
            residues = []
        else:
            residues.append(codon_to_amino_acid(codon))

    return orfs


def _is_start_codon(codon: str) -> bool:
    return codon == BIO_DNA_START_CODON


def _is_stop_codon(codon: str) -> bool:
    return codon in STOP_CODONS
