import logging

from pydantic_settings import BaseSettings

from .constants.constants import *

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Analysis Options
    top_codon_count: int = DEFAULT_TOP_CODON_COUNT
    min_orf_protein_length: int = 0

    # GC Content Thresholds (percent)
    gc_low_threshold: float = GC_LOW_THRESHOLD
    gc_high_threshold: float = GC_HIGH_THRESHOLD
    gc_extreme_low_threshold: float = GC_EXTREME_LOW_THRESHOLD
    gc_extreme_high_threshold: float = GC_EXTREME_HIGH_THRESHOLD

    # Sequence Length Thresholds
    length_short_threshold: int = LENGTH_SHORT_THRESHOLD
    length_medium_threshold: int = LENGTH_MEDIUM_THRESHOLD
    length_long_threshold: int = LENGTH_LONG_THRESHOLD
    length_very_long_threshold: int = LENGTH_VERY_LONG_THRESHOLD

    # Insight Calibration
    quality_score_threshold: int = INSIGHT_QUALITY_SCORE_THRESHOLD
    gc_skew_threshold: float = INSIGHT_GC_SKEW_THRESHOLD
    significant_orf_length: int = INSIGHT_SIGNIFICANT_ORF_LENGTH
    multiple_orf_count: int = INSIGHT_MULTIPLE_ORF_COUNT
    codon_bias_threshold: float = INSIGHT_CODON_BIAS_THRESHOLD
    mutation_rate_threshold: float = INSIGHT_MUTATION_RATE_THRESHOLD
    missense_count_threshold: int = INSIGHT_MISSENSE_COUNT_THRESHOLD
    similarity_threshold: float = INSIGHT_SIMILARITY_THRESHOLD

    log_level: str = "INFO"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        if self.top_codon_count < 1:
            raise ValueError("TOP_CODON_COUNT must be at least 1.")

        if not (
            self.gc_extreme_low_threshold
            <= self.gc_low_threshold
            <= self.gc_high_threshold
            <= self.gc_extreme_high_threshold
        ):
            raise ValueError(
                "GC thresholds must satisfy extreme_low <= low <= high <= extreme_high."
            )

        if not (
            self.length_short_threshold
            <= self.length_medium_threshold
            <= self.length_long_threshold
            <= self.length_very_long_threshold
        ):
            raise ValueError("Length thresholds must be ordered short <= medium <= long <= very_long.")

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
