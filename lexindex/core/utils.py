"""
Core Utilities Module.

This module provides utility functions that are used across the application.
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Union


def collapse_whitespace(text: str) -> str:
    """
    Collapse runs of whitespace to single spaces and strip the ends.

    Args:
        text: Raw text

    Returns:
        str: Cleaned text (possibly empty)
    """
    return " ".join(text.split())


def stable_word_id(language_slug: str, source_key: str, position: int, word: str) -> str:
    """
    Build a deterministic identifier for a word that has no id of its own.

    The same language, source, position and word always give the same id, so
    repeated loads of unchanged data are referentially stable.

    Args:
        language_slug: Language directory segment (e.g. "hebrew")
        source_key: Catalog key of the source document
        position: Position of the record in the source document
        word: The normalized headword

    Returns:
        str: Identifier of the form "<slug>:<source>:<12 hex chars>"
    """
    key_str = f"{language_slug}\x1f{source_key}\x1f{position}\x1f{word}"
    digest = hashlib.sha256(key_str.encode("utf-8")).hexdigest()
    return f"{language_slug}:{source_key}:{digest[:12]}"


def read_json_file(file_path: Union[str, Path], encoding: str = "utf-8") -> Any:
    """
    Read and parse a JSON file.

    Args:
        file_path: Path to the file
        encoding: File encoding (default: utf-8)

    Returns:
        Parsed JSON contents

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the contents are not valid JSON
    """
    with open(file_path, "r", encoding=encoding) as f:
        return json.load(f)
