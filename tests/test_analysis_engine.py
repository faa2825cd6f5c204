import asyncio
import json

import pytest

from seqinsight.core.analysis_engine import report_to_dict
from seqinsight.exceptions import InvalidSequence
from seqinsight.models.bio_models import ORF, MutationEffect, SequenceType
from seqinsight.models.insight_models import AnalysisContext, InsightKind


NO_ORF_DNA = 'CCCGGGTTTAAACCCGGGTTTAAACCCGGG'
MEMBRANE_PROTEIN = 'MKT' + 'L' * 20 + 'PKKKRKVDE'


def assert_prioritized(insights):
    keys = [(-i.kind.rank, -i.confidence) for i in insights]
    assert keys == sorted(keys)


def test_analyze_minimal_orf(engine):
    report = engine.analyze('ATGGCTTAA', SequenceType.DNA)

    assert report.sequence == 'ATGGCTTAA'
    assert report.functional.orfs == (ORF(start=0, end=9, frame=0, protein='MA'),)
    assert report.functional.translation.protein_sequence == 'MA'
    assert report.functional.codon_usage.total_codons == 3
    assert report.comparative is None
    assert_prioritized(report.insights)


def test_translation_reads_frame_zero_of_whole_sequence(engine):
    report = engine.analyze('CCATGGCTTAA', SequenceType.DNA)

    assert report.functional.orfs == (ORF(start=2, end=11, frame=2, protein='MA'),)
    assert report.functional.translation.protein_sequence == 'PWL'


def test_analyze_normalizes_input(engine):
    report = engine.analyze('>seq1\natg gct\ntaa\n', 'DNA')
    assert report.sequence == 'ATGGCTTAA'
    assert report.sequence_type is SequenceType.DNA


def test_analyze_rna(engine):
    report = engine.analyze('AUGGCUUAA', SequenceType.RNA)
    assert report.functional.orfs[0].protein == 'MA'
    assert any(hit.name == 'Start Codon' for hit in report.functional.motifs)


@pytest.mark.parametrize('raw', ['', '12345', '>header only\n'])
def test_analyze_rejects_invalid_sequence(engine, raw):
    with pytest.raises(InvalidSequence):
        engine.analyze(raw, SequenceType.DNA)


def test_analyze_rejects_unknown_type(engine):
    with pytest.raises(ValueError):
        engine.analyze('ATGC', 'peptide')


def test_unresolvable_reference_is_skipped(engine):
    report = engine.analyze('ATGGCTTAA', SequenceType.DNA, AnalysisContext(reference_sequence='12345'))
    assert report.comparative is None
    assert not any(i.category.value == 'comparative' for i in report.insights)


def test_nonsense_mutation_is_top_insight(engine):
    report = engine.analyze(
        'ATGAAATGATAA',
        SequenceType.DNA,
        AnalysisContext(reference_sequence='ATGAAATGGTAA'),
    )

    comparative = report.comparative
    assert comparative.mutations.total_mutations == 1
    assert comparative.mutations.mutations[0].position == 8
    assert comparative.mutations.mutations[0].effect is MutationEffect.NONSENSE
    assert comparative.mutations.mutation_rate == 8.33
    assert comparative.similarity == 91.67

    top = report.insights[0]
    assert top.kind is InsightKind.CRITICAL
    assert top.id.startswith('nonsense_mutations_')
    assert report.insights[1].kind is InsightKind.WARNING
    assert any(i.id.startswith('high_mutation_rate_') for i in report.insights)
    assert_prioritized(report.insights)


def test_context_mapping_with_camel_case_keys(engine):
    report = engine.analyze(
        'ATGAAATGATAA',
        SequenceType.DNA,
        {'referenceSequence': 'ATGAAATGGTAA', 'targetOrganism': 'E. coli', 'unused': 1},
    )
    assert report.comparative is not None
    assert report.comparative.reference_length == 12


def test_protein_analysis(engine):
    report = engine.analyze(MEMBRANE_PROTEIN, SequenceType.PROTEIN)
    functional = report.functional

    assert functional.orfs == ()
    assert functional.codon_usage is None
    assert functional.translation.protein_sequence == MEMBRANE_PROTEIN
    assert functional.translation.hydropathy > 1.0
    assert functional.domains == ('Potential transmembrane domain', 'Potential signal peptide')
    assert [hit.name for hit in functional.motifs] == ['Nuclear Localization Signal']
    assert report.composition.gc_content is None

    ids = [i.id for i in report.insights]
    assert any(i.startswith('domain_') for i in ids)
    assert any(i.startswith('protein_hydrophobic_') for i in ids)
    assert not any(i.startswith('gc_') for i in ids)


def test_drug_target_context_for_protein(engine):
    report = engine.analyze(MEMBRANE_PROTEIN, 'protein', {'question': 'Is this a drug target?'})
    assert any(i.id.startswith('drug_target_') for i in report.insights)


def test_sequence_without_orfs(engine):
    report = engine.analyze(NO_ORF_DNA, SequenceType.DNA)

    assert report.functional.orfs == ()
    assert report.functional.translation is None
    assert report.quality.score == 90
    assert not any(i.id.startswith('orf_') for i in report.insights)


def test_analysis_is_deterministic(engine):
    context = {'question': 'expression in E. coli', 'targetOrganism': 'E. coli'}
    first = engine.analyze('ATGCTGCTGAAATAA' * 4, SequenceType.DNA, context)
    second = engine.analyze('ATGCTGCTGAAATAA' * 4, SequenceType.DNA, context)
    assert first == second


def test_rare_codon_insight(engine):
    report = engine.analyze('ATGCTGCTGAAATAA', SequenceType.DNA, {'targetOrganism': 'E. coli'})
    rare = [i for i in report.insights if i.id.startswith('rare_codons_')]
    assert len(rare) == 1
    assert rare[0].evidence['rare_codon_count'] == 2


def test_analyze_async_matches_sync(engine):
    report = asyncio.run(engine.analyze_async('ATGGCTTAA', SequenceType.DNA))
    assert report == engine.analyze('ATGGCTTAA', SequenceType.DNA)


def test_report_to_dict_is_json_serializable(engine):
    report = engine.analyze(
        'ATGAAATGATAA',
        SequenceType.DNA,
        AnalysisContext(reference_sequence='ATGAAATGGTAA', question='disease link?'),
    )
    data = report_to_dict(report)

    assert data['sequence_type'] == 'dna'
    assert data['insights'][0]['kind'] == 'critical'
    assert data['comparative']['mutations']['mutations'][0]['effect'] == 'nonsense'
    json.dumps(data)
