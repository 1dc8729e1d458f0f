"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# API Configuration
DEFAULT_TIMEOUT = 10.0  # seconds
MAX_RETRIES = 3
RETRY_BACKOFF_FACTOR = 1  # 1, 2, 4 seconds
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
USER_AGENT = "LexIndex/0.1 (Vocabulary Loader)"

# Loader Configuration
DEFAULT_MAX_WORKERS = 4
DEFAULT_CATALOG_NAME = "index"
DOCUMENT_SUFFIX = ".json"

# Grouping
DEFAULT_GROUP = "ungrouped"

# Record rejection reasons
REJECT_NOT_AN_OBJECT = "not_an_object"
REJECT_MISSING_WORD = "missing_word"
REJECT_MISSING_MEANINGS = "missing_meanings"
REJECT_INVALID_FIELDS = "invalid_fields"

# Error messages
ERROR_INVALID_LANGUAGE = "Invalid language specified. Supported languages are 'Ancient Greek', 'Hebrew' and 'Latin'."
ERROR_NO_STORE_CONFIGURED = "No document store configured. Set LEXINDEX_DATA_DIR or LEXINDEX_BASE_URL."
ERROR_NOT_FOUND = "document not found"
ERROR_TOO_DEEP = "invalid JSON: nesting too deep"
