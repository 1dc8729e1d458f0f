"""
Source catalog loading.

A catalog maps source keys to display labels for one language. Catalog
problems are reported on the diagnostic channel and produce an empty list;
they never raise to the caller.
"""

from __future__ import annotations

from typing import List, Optional, Union

from lexindex.core.diagnostics import get_logger, report_failure
from lexindex.core.lexical import Language, SourceDescriptor
from lexindex.processing.api_client import DocumentFetchError
from lexindex.processing.store import DocumentStore, get_default_store

logger = get_logger(__name__)

OPERATION = "list_sources"


def list_sources(
    language: Union[Language, str],
    store: Optional[DocumentStore] = None,
) -> List[SourceDescriptor]:
    """List the vocabulary sources available for a language.

    Args:
        language: A supported language (member, display value or slug)
        store: Document store; defaults to the configured one

    Returns:
        Source descriptors in catalog order, or an empty list when the
        catalog is unavailable or malformed

    Raises:
        ValueError: If the language is not supported
    """
    language = Language.coerce(language)
    if store is None:
        store = get_default_store()

    try:
        catalog = store.fetch_catalog(language)
    except DocumentFetchError as e:
        report_failure("catalog_unavailable", OPERATION, language, e)
        return []

    if not isinstance(catalog, dict):
        report_failure(
            "catalog_malformed",
            OPERATION,
            language,
            f"expected an object, got {type(catalog).__name__}",
        )
        return []

    sources = []
    for key, label in catalog.items():
        if not key.strip() or not isinstance(label, str):
            report_failure(
                "catalog_entry_skipped",
                OPERATION,
                language,
                "source key must be non-empty and its label a string",
                source_key=key,
            )
            continue
        sources.append(SourceDescriptor(key=key, display_value=label))

    logger.debug("sources_listed", language=language.value, count=len(sources))
    return sources
