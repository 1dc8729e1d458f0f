"""
LexIndex: vocabulary source loading and grouping for Ancient Greek, Hebrew and Latin.

This package discovers the vocabulary sources available for a language,
loads and normalizes their word records, and groups the words by semantic
or grammatical category.
"""

from lexindex.core.lexical import Language, NormalizedWord, SourceDescriptor, WordGroups
from lexindex.processing.catalog import list_sources
from lexindex.processing.index import VocabularyIndex, build_index
from lexindex.processing.records import load_records

__version__ = "0.1.0"

__all__ = [
    "Language",
    "NormalizedWord",
    "SourceDescriptor",
    "VocabularyIndex",
    "WordGroups",
    "build_index",
    "list_sources",
    "load_records",
]
