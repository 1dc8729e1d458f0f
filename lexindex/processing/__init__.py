"""
Processing Package.

Document stores, catalog and record loading, index building and queries.
"""

from lexindex.processing.api_client import DocumentFetchError, JsonHttpClient
from lexindex.processing.catalog import list_sources
from lexindex.processing.index import VocabularyIndex, build_index
from lexindex.processing.query import (
    flatten_groups,
    group_counts,
    paginate,
    sample_words,
    search_words,
    unique_by_id,
)
from lexindex.processing.records import RawRecordPair, load_records
from lexindex.processing.store import (
    DocumentStore,
    FileDocumentStore,
    HttpDocumentStore,
    MemoryDocumentStore,
    get_default_store,
    set_default_store,
)

__all__ = [
    # Transport
    "DocumentFetchError",
    "DocumentStore",
    "FileDocumentStore",
    "HttpDocumentStore",
    "JsonHttpClient",
    "MemoryDocumentStore",
    # Loading
    "RawRecordPair",
    "VocabularyIndex",
    "build_index",
    "get_default_store",
    "list_sources",
    "load_records",
    "set_default_store",
    # Queries
    "flatten_groups",
    "group_counts",
    "paginate",
    "sample_words",
    "search_words",
    "unique_by_id",
]
