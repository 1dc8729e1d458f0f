"""
HTTP client for JSON documents with connection pooling and retry logic.
"""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from lexindex.core.constants import (
    DEFAULT_TIMEOUT,
    ERROR_TOO_DEEP,
    MAX_RETRIES,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_CODES,
    USER_AGENT,
)


class DocumentFetchError(Exception):
    """A document could not be retrieved or parsed."""

    def __init__(self, address: str, reason: str):
        super().__init__(f"{address}: {reason}")
        self.address = address
        self.reason = reason


class JsonHttpClient:
    """
    GET-only JSON client:
    - Exponential backoff retry on throttling and server errors
    - Connection pooling shared across worker threads
    - Every failure raised as DocumentFetchError
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        :param timeout: Request timeout in seconds
        :param max_retries: Maximum retry attempts
        :param session: Pre-built session (a pooled one with retries is created if omitted)
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = session if session is not None else self._build_session(max_retries)

    @staticmethod
    def _build_session(max_retries: int) -> requests.Session:
        session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=RETRY_BACKOFF_FACTOR,
            status_forcelist=list(RETRY_STATUS_CODES),
            allowed_methods=["HEAD", "GET", "OPTIONS"],
        )
        adapter = HTTPAdapter(
            max_retries=retry_strategy,
            pool_connections=10,
            pool_maxsize=20,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            }
        )
        return session

    def get_json(self, url: str) -> Any:
        """
        Fetch and parse a JSON document.

        :param url: Document URL
        :return: Parsed JSON
        :raises DocumentFetchError: On timeout, connection failure, non-success status or invalid JSON
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise DocumentFetchError(url, f"timed out after {self.timeout}s")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise DocumentFetchError(url, f"HTTP {status}")
        except requests.exceptions.RequestException as e:
            raise DocumentFetchError(url, f"request failed: {e}")

        try:
            return response.json()
        except RecursionError:
            raise DocumentFetchError(url, ERROR_TOO_DEEP)
        except ValueError as e:
            raise DocumentFetchError(url, f"invalid JSON: {e}")

    def close(self) -> None:
        self.session.close()
