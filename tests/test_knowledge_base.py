from dataclasses import FrozenInstanceError

import pytest

from seqinsight.core.knowledge_base import build_knowledge_base
from seqinsight.models.bio_models import SequenceType
from seqinsight.settings import Settings


def test_default_thresholds(knowledge_base):
    gc = knowledge_base.gc_thresholds
    assert (gc.low, gc.high, gc.extreme_low, gc.extreme_high) == (40, 60, 25, 75)

    lengths = knowledge_base.length_thresholds
    assert (lengths.short, lengths.medium, lengths.long, lengths.very_long) == (50, 500, 2000, 10000)

    insight = knowledge_base.insight_thresholds
    assert insight.quality_score == 70
    assert insight.codon_bias == pytest.approx(0.02)
    assert insight.similarity == pytest.approx(80)


def test_knowledge_base_is_read_only(knowledge_base):
    with pytest.raises(FrozenInstanceError):
        knowledge_base.gc_thresholds = None
    with pytest.raises(TypeError):
        knowledge_base.motifs[SequenceType.DNA] = ()
    with pytest.raises(TypeError):
        knowledge_base.rare_codons['Mouse'] = ('CGA',)


@pytest.mark.parametrize('organism,exp', [
    ('E. coli', ('TTG', 'CTG', 'CTA', 'TTA')),
    ('e. coli ', ('TTG', 'CTG', 'CTA', 'TTA')),
    ('HUMAN', ('CGA', 'CGG', 'AGA', 'AGG')),
    ('Martian', None),
    (None, None),
])
def test_rare_codons_lookup(knowledge_base, organism, exp):
    assert knowledge_base.rare_codons_for(organism) == exp


def test_rna_motifs_use_uracil(knowledge_base):
    patterns = [p for motif in knowledge_base.motifs_for(SequenceType.RNA) for p in motif.patterns]
    assert patterns
    assert not any('T' in pattern for pattern in patterns)


def test_knowledge_base_from_custom_settings():
    kb = build_knowledge_base(Settings(gc_low_threshold=35, codon_bias_threshold=0.05))
    assert kb.gc_thresholds.low == 35
    assert kb.insight_thresholds.codon_bias == pytest.approx(0.05)
