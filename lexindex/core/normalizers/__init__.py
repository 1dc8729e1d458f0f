"""
Normalizers for converting raw vocabulary records to NormalizedWord.

Each normalizer validates untrusted source data and returns either an
accepted word with its group or a rejection with a reason.
"""

from lexindex.core.normalizers.records import (
    Accepted,
    NormalizationResult,
    RecordContext,
    RecordNormalizer,
    Rejected,
    normalize_record,
)

__all__ = [
    "Accepted",
    "NormalizationResult",
    "RecordContext",
    "RecordNormalizer",
    "Rejected",
    "normalize_record",
]
