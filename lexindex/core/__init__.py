"""
Core Package.

This package provides the data model, configuration, diagnostics and
record normalization for the lexindex package.
"""

from lexindex.core.constants import DEFAULT_GROUP
from lexindex.core.diagnostics import configure_logging, get_logger, report_failure
from lexindex.core.lexical import Language, NormalizedWord, SourceDescriptor, WordGroups
from lexindex.core.models import LoaderSettings, get_settings
from lexindex.core.normalizers import (
    Accepted,
    RecordContext,
    RecordNormalizer,
    Rejected,
    normalize_record,
)
from lexindex.core.utils import collapse_whitespace, read_json_file, stable_word_id

__all__ = [
    # Data model
    "DEFAULT_GROUP",
    "Language",
    "NormalizedWord",
    "SourceDescriptor",
    "WordGroups",
    # Normalization
    "Accepted",
    "RecordContext",
    "RecordNormalizer",
    "Rejected",
    "normalize_record",
    # Configuration and diagnostics
    "LoaderSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "report_failure",
    # Utilities
    "collapse_whitespace",
    "read_json_file",
    "stable_word_id",
]
