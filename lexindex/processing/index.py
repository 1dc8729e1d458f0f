"""
Group index building across vocabulary sources.

Sources are fetched concurrently but folded strictly in the order the
caller listed them, so the resulting groups never depend on which fetch
finished first. Each call returns a new WordGroups mapping that the index
never touches again.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Union

from tqdm import tqdm

from lexindex.core.diagnostics import get_logger, report_failure
from lexindex.core.lexical import Language, SourceDescriptor, WordGroups
from lexindex.core.models import LoaderSettings, get_settings
from lexindex.core.normalizers.records import Accepted, RecordContext, RecordNormalizer
from lexindex.processing.catalog import list_sources
from lexindex.processing.records import RawRecordPair, load_records
from lexindex.processing.store import DocumentStore, get_default_store

logger = get_logger(__name__)

OPERATION = "build_index"


def _fetch_all(
    language: Language,
    source_keys: Sequence[str],
    store: DocumentStore,
    max_workers: int,
) -> List[List[RawRecordPair]]:
    """Load every source; results line up with ``source_keys``."""
    if max_workers <= 1 or len(source_keys) <= 1:
        return [load_records(language, key, store) for key in source_keys]

    workers = min(max_workers, len(source_keys))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="lexindex") as executor:
        # map() yields in submission order regardless of completion order
        return list(executor.map(lambda key: load_records(language, key, store), source_keys))


def build_index(
    language: Union[Language, str],
    source_keys: Iterable[str],
    store: Optional[DocumentStore] = None,
    normalizer: Optional[RecordNormalizer] = None,
    max_workers: Optional[int] = None,
    progress: bool = False,
) -> WordGroups:
    """Aggregate the words of several sources into groups.

    Args:
        language: A supported language (member, display value or slug)
        source_keys: Sources to load, in the order their words are listed
        store: Document store; defaults to the configured one
        normalizer: Record normalizer; defaults to a fresh RecordNormalizer
        max_workers: Concurrent fetches (defaults to the configured value)
        progress: Show a progress bar while folding sources

    Returns:
        Mapping of group key to words. Unavailable sources and rejected
        records are reported and left out.

    Raises:
        ValueError: If the language is not supported
    """
    language = Language.coerce(language)
    store = store if store is not None else get_default_store()
    normalizer = normalizer if normalizer is not None else RecordNormalizer()
    if max_workers is None:
        max_workers = get_settings().max_workers

    # Each source is folded once, at its first position
    keys = list(dict.fromkeys(source_keys))
    loaded = _fetch_all(language, keys, store, max_workers)

    groups: WordGroups = {}
    rejected = 0
    folding = tqdm(
        zip(keys, loaded),
        total=len(keys),
        desc=f"Indexing {language.value}",
        unit="source",
        disable=not progress,
    )
    for source_key, pairs in folding:
        for position, (group, record) in enumerate(pairs):
            context = RecordContext(language, source_key, position, group)
            result = normalizer.normalize(record, context)
            if isinstance(result, Accepted):
                groups.setdefault(result.group, []).append(result.word)
                continue
            rejected += 1
            report_failure(
                "record_rejected",
                OPERATION,
                language,
                result.detail or result.reason,
                source_key=source_key,
                position=position,
                group=group,
                reason=result.reason,
            )

    logger.debug(
        "index_built",
        language=language.value,
        sources=len(keys),
        groups=len(groups),
        words=sum(len(words) for words in groups.values()),
        rejected=rejected,
    )
    return groups


class VocabularyIndex:
    """Catalog listing, record loading and index building over one store.

    Example:
        >>> index = VocabularyIndex(FileDocumentStore("data"))
        >>> groups = index.build_all(Language.HEBREW)
    """

    def __init__(
        self,
        store: Optional[DocumentStore] = None,
        settings: Optional[LoaderSettings] = None,
        normalizer: Optional[RecordNormalizer] = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.store = store if store is not None else self.settings.create_store()
        self.normalizer = normalizer if normalizer is not None else RecordNormalizer()

    def list_sources(self, language: Union[Language, str]) -> List[SourceDescriptor]:
        return list_sources(language, self.store)

    def load_records(self, language: Union[Language, str], source_key: str) -> List[RawRecordPair]:
        return load_records(language, source_key, self.store)

    def build_index(
        self,
        language: Union[Language, str],
        source_keys: Iterable[str],
        progress: bool = False,
    ) -> WordGroups:
        return build_index(
            language,
            source_keys,
            store=self.store,
            normalizer=self.normalizer,
            max_workers=self.settings.max_workers,
            progress=progress,
        )

    def build_all(self, language: Union[Language, str], progress: bool = False) -> WordGroups:
        """Build the index from every source in the language catalog."""
        keys = [source.key for source in self.list_sources(language)]
        return self.build_index(language, keys, progress=progress)
