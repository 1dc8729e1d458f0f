"""
Raw record loading for one vocabulary source.

A source document is either an object mapping group keys to lists of
records or a plain list of records. The loader only flattens it into
(group key, record) pairs in document order; validation is left to the
normalizer.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Union

from lexindex.core.diagnostics import get_logger, report_failure
from lexindex.core.lexical import Language
from lexindex.processing.api_client import DocumentFetchError
from lexindex.processing.store import DocumentStore, get_default_store

logger = get_logger(__name__)

OPERATION = "load_records"


class RawRecordPair(NamedTuple):
    """A raw record and the document group it was listed under."""

    group: Optional[str]
    record: Any


def load_records(
    language: Union[Language, str],
    source_key: str,
    store: Optional[DocumentStore] = None,
) -> List[RawRecordPair]:
    """Fetch and flatten the raw records of one source.

    Args:
        language: A supported language (member, display value or slug)
        source_key: Key of the source, as listed in the language catalog
        store: Document store; defaults to the configured one

    Returns:
        (group, record) pairs in document order; empty when the source is
        unavailable or malformed

    Raises:
        ValueError: If the language is not supported
    """
    language = Language.coerce(language)
    if store is None:
        store = get_default_store()

    try:
        document = store.fetch_source(language, source_key)
    except DocumentFetchError as e:
        report_failure("source_unavailable", OPERATION, language, e, source_key=source_key)
        return []

    if isinstance(document, list):
        pairs = [RawRecordPair(None, record) for record in document]
    elif isinstance(document, dict):
        pairs = []
        for group, records in document.items():
            if not isinstance(records, list):
                report_failure(
                    "group_malformed",
                    OPERATION,
                    language,
                    f"expected a list of records, got {type(records).__name__}",
                    source_key=source_key,
                    group=group,
                )
                continue
            pairs.extend(RawRecordPair(group, record) for record in records)
    else:
        report_failure(
            "source_malformed",
            OPERATION,
            language,
            f"expected an object or a list, got {type(document).__name__}",
            source_key=source_key,
        )
        return []

    logger.debug("records_loaded", language=language.value, source_key=source_key, count=len(pairs))
    return pairs
