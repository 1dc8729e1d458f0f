"""
Configuration model for the vocabulary loader.

Settings are read from ``LEXINDEX_*`` environment variables and validated
by pydantic. The configured store is built lazily by :meth:`create_store`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lexindex.core.constants import (
    DEFAULT_CATALOG_NAME,
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT,
    ERROR_NO_STORE_CONFIGURED,
    MAX_RETRIES,
)

if TYPE_CHECKING:
    from lexindex.processing.store import DocumentStore


class LoaderSettings(BaseSettings):
    """Configuration for document lookup, fetching and diagnostics."""

    model_config = SettingsConfigDict(env_prefix="LEXINDEX_", extra="ignore")

    data_dir: Optional[Path] = None
    base_url: Optional[str] = None
    catalog_name: str = Field(default=DEFAULT_CATALOG_NAME, min_length=1)

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(default=MAX_RETRIES, ge=0)
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    def create_store(self) -> "DocumentStore":
        """Build the document store these settings describe.

        A base URL wins over a data directory when both are set.

        Raises:
            ValueError: If neither a base URL nor a data directory is set
        """
        from lexindex.processing.api_client import JsonHttpClient
        from lexindex.processing.store import FileDocumentStore, HttpDocumentStore

        if self.base_url:
            client = JsonHttpClient(timeout=self.timeout, max_retries=self.max_retries)
            return HttpDocumentStore(self.base_url, client=client, catalog_name=self.catalog_name)
        if self.data_dir is not None:
            return FileDocumentStore(self.data_dir, catalog_name=self.catalog_name)
        raise ValueError(ERROR_NO_STORE_CONFIGURED)


@lru_cache(maxsize=1)
def get_settings() -> LoaderSettings:
    """Get or create the process-wide settings."""
    return LoaderSettings()
