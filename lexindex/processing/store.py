"""
Document stores for vocabulary catalogs and source files.

A store resolves a document address to parsed JSON. Catalogs live at
``<root>/<slug>/<catalog_name>.json`` and sources at
``<root>/<slug>/<source_key>.json``. Every retrieval or parse failure,
including an unknown source key, is raised as DocumentFetchError.
"""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from lexindex.core.constants import DEFAULT_CATALOG_NAME, DOCUMENT_SUFFIX, ERROR_NOT_FOUND, ERROR_TOO_DEEP
from lexindex.core.lexical import Language
from lexindex.core.models import get_settings
from lexindex.core.utils import read_json_file
from lexindex.processing.api_client import DocumentFetchError, JsonHttpClient


class DocumentStore(ABC):
    """Resolves (language, document name) addresses to parsed JSON."""

    def __init__(self, catalog_name: str = DEFAULT_CATALOG_NAME):
        self.catalog_name = catalog_name

    def fetch_catalog(self, language: Union[Language, str]) -> Any:
        """Fetch the catalog document for a language."""
        return self._fetch(Language.coerce(language).slug, self.catalog_name)

    def fetch_source(self, language: Union[Language, str], source_key: str) -> Any:
        """Fetch one source document for a language."""
        slug = Language.coerce(language).slug
        if not self._is_valid_name(source_key):
            raise DocumentFetchError(f"{slug}/{source_key}", ERROR_NOT_FOUND)
        return self._fetch(slug, source_key)

    @staticmethod
    def _is_valid_name(name: Any) -> bool:
        # Names address a single file inside the language directory
        if not isinstance(name, str) or not name.strip():
            return False
        return "/" not in name and "\\" not in name and name not in (".", "..")

    @abstractmethod
    def _fetch(self, slug: str, name: str) -> Any:
        """Fetch document ``name`` of the language directory ``slug``."""


class FileDocumentStore(DocumentStore):
    """Documents read from a local directory tree."""

    def __init__(self, root: Union[str, Path], catalog_name: str = DEFAULT_CATALOG_NAME):
        super().__init__(catalog_name)
        self.root = Path(root)

    def path_for(self, slug: str, name: str) -> Path:
        return self.root / slug / f"{name}{DOCUMENT_SUFFIX}"

    def _fetch(self, slug: str, name: str) -> Any:
        path = self.path_for(slug, name)
        if not path.is_file():
            raise DocumentFetchError(str(path), ERROR_NOT_FOUND)
        try:
            return read_json_file(path)
        except json.JSONDecodeError as e:
            raise DocumentFetchError(str(path), f"invalid JSON: {e}")
        except RecursionError:
            raise DocumentFetchError(str(path), ERROR_TOO_DEEP)
        except UnicodeDecodeError as e:
            raise DocumentFetchError(str(path), f"not UTF-8: {e}")
        except OSError as e:
            raise DocumentFetchError(str(path), f"unreadable: {e}")


class HttpDocumentStore(DocumentStore):
    """Documents served over HTTP(S) below a base URL."""

    def __init__(
        self,
        base_url: str,
        client: Optional[JsonHttpClient] = None,
        catalog_name: str = DEFAULT_CATALOG_NAME,
    ):
        super().__init__(catalog_name)
        self.base_url = base_url.rstrip("/")
        self.client = client if client is not None else JsonHttpClient()

    def url_for(self, slug: str, name: str) -> str:
        return f"{self.base_url}/{quote(slug)}/{quote(name)}{DOCUMENT_SUFFIX}"

    def _fetch(self, slug: str, name: str) -> Any:
        return self.client.get_json(self.url_for(slug, name))


class MemoryDocumentStore(DocumentStore):
    """Documents held in memory, keyed by (slug, name).

    Handy for embedded data sets and tests. Each fetch returns a deep copy,
    so callers can never alter the stored documents.
    """

    def __init__(
        self,
        documents: Optional[Mapping[Tuple[str, str], Any]] = None,
        catalog_name: str = DEFAULT_CATALOG_NAME,
    ):
        super().__init__(catalog_name)
        self.documents: Dict[Tuple[str, str], Any] = dict(documents or {})

    def put_catalog(self, language: Union[Language, str], catalog: Any) -> None:
        self.documents[(Language.coerce(language).slug, self.catalog_name)] = catalog

    def put_source(self, language: Union[Language, str], source_key: str, document: Any) -> None:
        self.documents[(Language.coerce(language).slug, source_key)] = document

    def _fetch(self, slug: str, name: str) -> Any:
        address = f"memory://{slug}/{name}"
        try:
            return copy.deepcopy(self.documents[(slug, name)])
        except KeyError:
            raise DocumentFetchError(address, ERROR_NOT_FOUND)
        except RecursionError:
            raise DocumentFetchError(address, ERROR_TOO_DEEP)


_default_store: Optional[DocumentStore] = None


def get_default_store() -> DocumentStore:
    """Get or create the store described by the process settings."""
    global _default_store
    if _default_store is None:
        _default_store = get_settings().create_store()
    return _default_store


def set_default_store(store: Optional[DocumentStore]) -> None:
    """Replace the process-wide store (None resets to the configured one)."""
    global _default_store
    _default_store = store
