import logging
from typing import Union

from ...constants.constants import *
from ...exceptions import InvalidSequence
from ...models.bio_models import SequenceType

logger = logging.getLogger(__name__)

ALPHABETS = {
    SequenceType.DNA: BIO_DNA_ALPHABET,
    SequenceType.RNA: BIO_RNA_ALPHABET,
    SequenceType.PROTEIN: BIO_PROTEIN_ALPHABET,
}


def normalize_sequence(raw: str, sequence_type: Union[SequenceType, str]) -> str:
    """Turn raw user or FASTA text into a canonical sequence for ``sequence_type``.

    Header lines starting with ``>`` are dropped, the remainder is upper-cased,
    T/U are harmonised for nucleotide types and every symbol outside the
    alphabet is removed. Raises ``InvalidSequence`` if nothing legal is left.
    """
    sequence_type = SequenceType.parse(sequence_type)
    if not raw:
        raise InvalidSequence("Empty sequence provided", sequence_type.value)

    body = "".join(
        line for line in raw.splitlines() if not line.lstrip().startswith(FASTA_HEADER_PREFIX)
    )
    body = _harmonize_bases(body.upper(), sequence_type)

    alphabet = ALPHABETS[sequence_type]
    clean_sequence = "".join(symbol for symbol in body if symbol in alphabet)

    if not validate_sequence(clean_sequence, sequence_type):
        logger.debug(f"Normalization left no legal {sequence_type.value} symbols")
        raise InvalidSequence(
            f"No valid {sequence_type.value} symbols found in input", sequence_type.value
        )

    return clean_sequence


def validate_sequence(sequence: str, sequence_type: Union[SequenceType, str]) -> bool:
    if not sequence:
        return False
    alphabet = ALPHABETS[SequenceType.parse(sequence_type)]
    return all(symbol in alphabet for symbol in sequence)


def _harmonize_bases(sequence: str, sequence_type: SequenceType) -> str:
    if sequence_type is SequenceType.RNA:
        return sequence.replace("T", "U")
    if sequence_type is SequenceType.DNA:
        return sequence.replace("U", "T")
    return sequence


def to_dna(sequence: str) -> str:
    return sequence.replace("U", "T")
