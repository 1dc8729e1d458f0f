"""
Core lexical data models for the vocabulary loading layer.

This module defines the canonical internal representation for vocabulary
words, providing a source-agnostic model that all record normalization
produces and all grouping and querying consumes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from lexindex.core.constants import DEFAULT_GROUP, ERROR_INVALID_LANGUAGE


class Language(str, Enum):
    """Supported languages for vocabulary data."""

    ANCIENT_GREEK = "Ancient Greek"
    HEBREW = "Hebrew"
    LATIN = "Latin"

    @property
    def slug(self) -> str:
        """Directory segment used to address this language's documents."""
        return LANGUAGE_SLUGS[self]

    @classmethod
    def coerce(cls, value: Union["Language", str]) -> "Language":
        """Resolve a member, display value or slug to a Language.

        Raises:
            ValueError: If the value names no supported language
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for language in cls:
                if wanted in (language.value.lower(), language.slug):
                    return language
        raise ValueError(f"{ERROR_INVALID_LANGUAGE} Got: {value!r}")


LANGUAGE_SLUGS: Dict[Language, str] = {
    Language.ANCIENT_GREEK: "greek",
    Language.HEBREW: "hebrew",
    Language.LATIN: "latin",
}


class SourceDescriptor(BaseModel):
    """A named vocabulary source listed in a language catalog."""

    model_config = ConfigDict(frozen=True)

    key: str
    display_value: str

    def __str__(self) -> str:
        return f"{self.key}\t{self.display_value}"


class NormalizedWord(BaseModel):
    """Canonical vocabulary word.

    Only ``id``, ``word`` and ``meanings`` are guaranteed. The descriptive
    fields are carried over from the raw record as given. Field aliases are
    the camelCase keys used in the source documents.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    word: str = Field(min_length=1)
    meanings: List[str] = Field(min_length=1)
    source: Optional[str] = None

    part_of_speech: Optional[StrictStr] = Field(default=None, alias="partOfSpeech")
    root: Optional[StrictStr] = None
    transliteration: Optional[StrictStr] = None
    inflection: Optional[StrictStr] = None
    semantic_group: Optional[StrictStr] = Field(default=None, alias="semanticGroup")
    frequency: Optional[Union[StrictInt, StrictFloat]] = None

    @property
    def primary_meaning(self) -> str:
        return self.meanings[0]

    def to_record(self) -> Dict[str, Any]:
        """Dump to a JSON-ready dict with camelCase keys, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# Group key -> words in load order
WordGroups = Dict[str, List[NormalizedWord]]

__all__ = [
    "DEFAULT_GROUP",
    "LANGUAGE_SLUGS",
    "Language",
    "NormalizedWord",
    "SourceDescriptor",
    "WordGroups",
]
