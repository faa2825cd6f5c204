from typing import Optional


class SequenceAnalysisError(Exception):
    """Base class for errors raised by the analysis engine."""


class InvalidSequence(SequenceAnalysisError, ValueError):
    """The sequence is empty or contains symbols outside its alphabet after normalization."""

    def __init__(self, message: str, sequence_type: Optional[str] = None):
        super().__init__(message)
        self.sequence_type = sequence_type


class UnresolvableReference(InvalidSequence):
    """The reference sequence supplied for comparison cannot be normalized."""


class IncompatibleAnalysis(SequenceAnalysisError):
    """The requested analysis does not apply to the sequence type."""

    def __init__(self, analysis: str, sequence_type: str):
        super().__init__(f"{analysis} is not available for {sequence_type} sequences")
        self.analysis = analysis
        self.sequence_type = sequence_type
