import pytest

from seqinsight.models.bio_models import Mutation, MutationEffect
from seqinsight.tools.bio.mutation_comparator import calculate_similarity, compare_mutations


@pytest.mark.parametrize('seq,seq_type', [
    ('ATGAAATAA', 'dna'),
    ('AUGGCU', 'rna'),
    ('MKVLA', 'protein'),
])
def test_compare_mutations_reflexive(seq, seq_type):
    result = compare_mutations(seq, seq, seq_type)
    assert result.total_mutations == 0
    assert result.mutation_rate == 0
    assert result.mutations == ()


def test_stop_to_stop_is_silent():
    result = compare_mutations('ATGAAATAA', 'ATGAAATAG', 'dna')
    assert result.mutations == (
        Mutation(position=8, reference_symbol='A', query_symbol='G', effect=MutationEffect.SILENT),
    )
    assert result.total_mutations == 1


@pytest.mark.parametrize('ref,query,seq_type,position,effect', [
    ('ATGAAATGG', 'ATGAAATGA', 'dna', 8, MutationEffect.NONSENSE),
    ('ATGAAA', 'ATGGAA', 'dna', 3, MutationEffect.MISSENSE),
    ('GCTAAA', 'GCCAAA', 'dna', 2, MutationEffect.SILENT),
    ('AUGAAAUAA', 'AUGAAAUAG', 'rna', 8, MutationEffect.SILENT),
    ('AUGUGG', 'AUGUAG', 'rna', 4, MutationEffect.NONSENSE),
    ('ATGNAA', 'ATGCAA', 'dna', 3, MutationEffect.MISSENSE),
    ('ATGA', 'ATGC', 'dna', 3, MutationEffect.MISSENSE),
    ('MKV', 'MRV', 'protein', 1, MutationEffect.MISSENSE),
])
def test_mutation_effect(ref, query, seq_type, position, effect):
    result = compare_mutations(ref, query, seq_type)
    assert len(result.mutations) == 1
    assert result.mutations[0].position == position
    assert result.mutations[0].effect is effect


def test_protein_stop_like_change_is_missense():
    result = compare_mutations('MKW', 'MKX', 'protein')
    assert result.mutations[0].effect is MutationEffect.MISSENSE


def test_only_overlap_is_compared():
    result = compare_mutations('ATGAAACCC', 'ATGAAT', 'dna')
    assert [m.position for m in result.mutations] == [5]
    assert result.mutation_rate == pytest.approx(16.67)


def test_mutation_rate_and_order():
    result = compare_mutations('ATGC', 'TTGA', 'dna')
    assert [m.position for m in result.mutations] == [0, 3]
    assert result.mutation_rate == pytest.approx(50.0)
    assert result.count(MutationEffect.MISSENSE) == 2


def test_longer_query_without_mismatches():
    result = compare_mutations('ATGAAA', 'ATGAAAGGG', 'dna')
    assert result.total_mutations == 0
    assert result.mutation_rate == 0


@pytest.mark.parametrize('first,second,exp', [
    ('ATGC', 'ATGC', 100.0),
    ('ATGC', 'ATGA', 75.0),
    ('ATGC', 'ATGCAAAA', 50.0),
    ('', '', 0.0),
])
def test_calculate_similarity(first, second, exp):
    assert calculate_similarity(first, second) == pytest.approx(exp)
