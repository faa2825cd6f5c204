import logging

import pytest

from seqinsight.logging_config import configure_logging
from seqinsight.settings import Settings, settings


def test_default_settings():
    config = Settings()
    assert config.top_codon_count == 5
    assert config.min_orf_protein_length == 0
    assert config.gc_high_threshold == 60


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv('SEQINSIGHT_TOP_CODON_COUNT', '3')
    monkeypatch.setenv('SEQINSIGHT_GC_HIGH_THRESHOLD', '65')
    config = Settings()
    assert config.top_codon_count == 3
    assert config.gc_high_threshold == 65


@pytest.mark.parametrize('overrides', [
    {'gc_low_threshold': 70},
    {'length_short_threshold': 5000},
    {'top_codon_count': 0},
])
def test_inconsistent_settings_rejected(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)


def test_configure_logging():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging('debug')
        assert root.level == logging.DEBUG
        configure_logging(logging.WARNING)
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_configure_logging_defaults_to_settings_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging()
        assert root.level == logging.getLevelName(settings.log_level.upper())
    finally:
        root.setLevel(previous)
