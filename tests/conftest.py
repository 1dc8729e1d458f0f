"""
Pytest configuration for test discovery, import path setup and shared fixtures.

Ensures the project root is on sys.path so that imports like
`from lexindex.processing.index import build_index` work regardless of how
pytest is invoked (e.g., `pytest` or `pytest tests/`).
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, List

import pytest
import structlog


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

from lexindex.processing.store import MemoryDocumentStore, set_default_store  # noqa: E402

HEBREW_WORD = "אֱלֹהִים"


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Keep structlog configuration and the default store test-local."""
    yield
    structlog.reset_defaults()
    set_default_store(None)


@pytest.fixture
def memory_store() -> MemoryDocumentStore:
    """Store with a Hebrew catalog and two sources."""
    store = MemoryDocumentStore()
    store.put_catalog("Hebrew", {"core": "core.json", "extra": "extra.json"})
    store.put_source(
        "Hebrew",
        "core",
        {
            "nouns": [{"word": HEBREW_WORD, "meanings": ["God", "gods"]}],
            "bad": [{"word": ""}],
        },
    )
    store.put_source(
        "Hebrew",
        "extra",
        {
            "nouns": [{"word": "תּוֹרָה", "meanings": ["instruction", "law"], "transliteration": "Torah"}],
            "verbs": [{"word": "אָהַב", "meaning": "to love", "partOfSpeech": "verb"}],
        },
    )
    return store


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Directory tree with a Latin catalog and two source files."""
    root = tmp_path / "data"
    write_json(root / "latin" / "index.json", {"basics": "Basic vocabulary", "verbs": "Common verbs"})
    write_json(
        root / "latin" / "basics.json",
        {
            "nouns": [
                {"word": "amor", "meanings": ["love"], "inflection": "amoris", "id": "lat_amor"},
                {"word": "pax", "meaning": "peace", "inflection": "pacis"},
            ]
        },
    )
    write_json(
        root / "latin" / "verbs.json",
        [
            {"word": "amo", "meanings": ["I love"], "semanticGroup": "emotion"},
            {"word": "video", "meanings": ["I see"]},
        ],
    )
    return root
