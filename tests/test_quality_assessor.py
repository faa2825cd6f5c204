import pytest

from seqinsight.core.quality_assessor import assess_quality
from seqinsight.models.bio_models import SequenceType
from seqinsight.tools.bio.bio_analysis import calculate_gc_content
from seqinsight.tools.bio.pattern_search import has_tandem_repeat


CLEAN_DNA = (
    'ATGCGTACGT' 'TAGCCATGAC' 'TGGATCCGAT'
    'TGCAGTCAAG' 'CTTGCATGCC' 'TGCAGGTCGA'
)


def test_clean_sequence_scores_100(knowledge_base):
    quality = assess_quality(CLEAN_DNA, SequenceType.DNA, knowledge_base)
    assert quality.score == 100
    assert quality.issues == ()
    assert quality.warnings == ()


def test_short_sequence_penalty(knowledge_base):
    quality = assess_quality('ATGCGTACGT', SequenceType.DNA, knowledge_base)
    assert quality.score == 90
    assert quality.warnings == ('Very short sequence - may limit analysis accuracy',)


def test_high_ambiguity_is_an_issue(knowledge_base):
    quality = assess_quality('NNNNNN' + CLEAN_DNA[6:], SequenceType.DNA, knowledge_base)
    assert quality.score == 80
    assert quality.issues == ('High ambiguous character content: 10.0%',)


def test_moderate_ambiguity_is_a_warning(knowledge_base):
    sequence = 'NN' + (CLEAN_DNA + CLEAN_DNA[:40])[2:]
    quality = assess_quality(sequence, SequenceType.DNA, knowledge_base)
    assert quality.score == 95
    assert quality.warnings == ('Moderate ambiguous character content: 2.0%',)


def test_extreme_gc_penalty(knowledge_base):
    sequence = 'GGCCGCGGACCGTGCCGGCAGGCGTCCGCAGCGGCTCGCCGGATGCCGCGGTCGGCCGCA'
    quality = assess_quality(sequence, SequenceType.DNA, knowledge_base)
    expected = 100 - 15 - (5 if has_tandem_repeat(sequence) else 0)
    assert quality.score == expected
    assert any(w.startswith('Extreme GC content') for w in quality.warnings)


def test_tandem_repeat_penalty(knowledge_base):
    sequence = CLEAN_DNA + 'CAGCAGCAGCAG'
    quality = assess_quality(sequence, SequenceType.DNA, knowledge_base)
    assert quality.score == 95
    assert quality.warnings == ('Repetitive sequences detected',)


def test_very_long_sequence_has_no_penalty(knowledge_base):
    protein = 'ACDEFGHIKLMNPQRSTVWY' * 501
    quality = assess_quality(protein, SequenceType.PROTEIN, knowledge_base)
    assert quality.score == 100
    assert quality.warnings == ('Very long sequence - consider analyzing in segments',)


def test_protein_ambiguity_codes(knowledge_base):
    protein = 'X' * 10 + 'ACDEFGHIKLMNPQRSTVWY' * 4
    quality = assess_quality(protein, SequenceType.PROTEIN, knowledge_base)
    assert quality.score == 80
    assert len(quality.issues) == 1


def test_protein_skips_nucleotide_checks(knowledge_base):
    quality = assess_quality('G' * 60, SequenceType.PROTEIN, knowledge_base)
    assert quality.score == 100


@pytest.mark.parametrize('seq', ['ATGC', 'NNNN' * 20, CLEAN_DNA])
def test_score_in_range(knowledge_base, seq):
    assert 0 <= assess_quality(seq, SequenceType.DNA, knowledge_base).score <= 100


def test_precomputed_composition_matches_default(knowledge_base):
    sequence = 'GGCCGCGGAC' * 6
    composition = calculate_gc_content(sequence, SequenceType.DNA)
    assert assess_quality(sequence, SequenceType.DNA, knowledge_base, composition) == \
        assess_quality(sequence, SequenceType.DNA, knowledge_base, None)
