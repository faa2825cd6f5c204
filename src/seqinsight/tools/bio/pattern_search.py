import logging
from typing import Iterable

import numpy as np

from ...constants.constants import *
from ...models.bio_models import MotifDefinition, MotifHit
from .sequence_normalizer import to_dna

logger = logging.getLogger(__name__)


def find_pattern_positions(sequence: str, pattern: str) -> list[int]:
    """Start indices of non-overlapping occurrences of ``pattern``."""
    positions = []
    index = sequence.find(pattern)
    while index != -1:
        positions.append(index)
        index = sequence.find(pattern, index + len(pattern))
    return positions


def detect_motifs(sequence: str, motifs: Iterable[MotifDefinition]) -> list[MotifHit]:
    detected = []
    for motif in motifs:
        positions = sorted(
            position
            for pattern in motif.patterns
            for position in find_pattern_positions(sequence, pattern)
        )
        if positions:
            detected.append(
                MotifHit(
                    name=motif.name,
                    function=motif.function,
                    patterns=motif.patterns,
                    positions=tuple(positions),
                )
            )

    logger.debug(f"Detected {len(detected)} motif types")
    return detected


def count_codons(sequence: str, codons: Iterable[str]) -> int:
    """Count non-overlapping occurrences of each codon anywhere in ``sequence``, in any frame."""
    dna_sequence = to_dna(sequence)
    wanted = {to_dna(codon) for codon in codons}
    return sum(len(find_pattern_positions(dna_sequence, codon)) for codon in wanted)


def has_tandem_repeat(
    sequence: str,
    min_unit: int = TANDEM_REPEAT_MIN_UNIT,
    min_copies: int = TANDEM_REPEAT_MIN_COPIES,
    max_unit: int = TANDEM_REPEAT_MAX_UNIT,
) -> bool:
    """True if a unit of ``min_unit`` to ``max_unit`` symbols occurs ``min_copies`` times back to back.

    A stretch is periodic with period k exactly when ``s[i] == s[i + k]`` holds
    for (copies - 1) * k consecutive positions, which is checked per k with a
    cumulative sum over the shifted comparison. Capping the unit length keeps
    the scan linear in the sequence length.
    """
    length = len(sequence)
    if length < min_unit * min_copies:
        return False

    symbols = np.frombuffer(sequence.encode("ascii"), dtype=np.uint8)
    for unit in range(min_unit, min(max_unit, length // min_copies) + 1):
        window = unit * (min_copies - 1)
        matches = symbols[:-unit] == symbols[unit:]
        if matches.size < window:
            continue

        running = np.concatenate(([0], np.cumsum(matches, dtype=np.int64)))
        if np.any(running[window:] - running[:-window] == window):
            return True

    return False


def predict_protein_domains(protein_sequence: str) -> list[str]:
    domains = []

    if _longest_hydrophobic_run(protein_sequence) >= TRANSMEMBRANE_MIN_RUN:
        domains.append(TRANSMEMBRANE_DOMAIN_LABEL)

    if len(protein_sequence) > SIGNAL_PEPTIDE_WINDOW:
        n_terminal = protein_sequence[:SIGNAL_PEPTIDE_WINDOW]
        hydrophobic_count = sum(1 for residue in n_terminal if residue in HYDROPHOBIC_RESIDUES)
        if hydrophobic_count > SIGNAL_PEPTIDE_MIN_HYDROPHOBIC:
            domains.append(SIGNAL_PEPTIDE_LABEL)

    return domains


def _longest_hydrophobic_run(protein_sequence: str) -> int:
    longest = current = 0
    for residue in protein_sequence:
        current = current + 1 if residue in HYDROPHOBIC_RESIDUES else 0
        longest = max(longest, current)
    return longest
