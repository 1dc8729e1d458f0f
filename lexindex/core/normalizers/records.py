"""
Normalizer for raw vocabulary records.

Transforms untrusted JSON word records into canonical NormalizedWord
instances. Validation failures are returned as values so that one bad
record never fails the source it came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from lexindex.core.constants import (
    DEFAULT_GROUP,
    REJECT_INVALID_FIELDS,
    REJECT_MISSING_MEANINGS,
    REJECT_MISSING_WORD,
    REJECT_NOT_AN_OBJECT,
)
from lexindex.core.lexical import Language, NormalizedWord
from lexindex.core.utils import collapse_whitespace, stable_word_id

# Descriptive fields copied from the raw record as given
PASSTHROUGH_FIELDS = (
    "partOfSpeech",
    "root",
    "transliteration",
    "inflection",
    "semanticGroup",
    "frequency",
)


@dataclass(frozen=True)
class RecordContext:
    """Where a raw record came from."""

    language: Language
    source_key: str
    position: int
    group: Optional[str] = None


@dataclass(frozen=True)
class Accepted:
    """A record that survived normalization."""

    word: NormalizedWord
    group: str


@dataclass(frozen=True)
class Rejected:
    """A record dropped by normalization, with the reason why."""

    reason: str
    detail: str = ""


NormalizationResult = Union[Accepted, Rejected]


class RecordNormalizer:
    """Normalizes raw vocabulary records to canonical form.

    Source files come from different hands: some list several ``meanings``,
    older ones carry a single ``meaning``, and most omit ids. This
    normalizer validates the headword and meanings, resolves the meaning
    fields (the plural list wins; the singular is used only when the list is
    absent or has no usable entry), and assigns a stable id where none is
    given.
    """

    def __init__(self, default_group: str = DEFAULT_GROUP):
        """Initialize the normalizer.

        Args:
            default_group: Group for records with neither a semantic group
                nor a document group
        """
        self.default_group = default_group

    def normalize(self, raw: Any, context: RecordContext) -> NormalizationResult:
        """Convert a raw record to a normalized word.

        Args:
            raw: Raw record as parsed from the source document
            context: Language, source key, position and document group

        Returns:
            Accepted with the word and its group, or Rejected with a reason
        """
        if not isinstance(raw, dict):
            return Rejected(REJECT_NOT_AN_OBJECT, f"got {type(raw).__name__}")

        word = raw.get("word")
        if not isinstance(word, str) or not word.strip():
            return Rejected(REJECT_MISSING_WORD)
        word = word.strip()

        meanings = self._resolve_meanings(raw)
        if not meanings:
            return Rejected(REJECT_MISSING_MEANINGS)

        entry_kwargs: Dict[str, Any] = {
            "id": self._resolve_id(raw.get("id"), context, word),
            "word": word,
            "meanings": meanings,
            "source": context.source_key,
        }
        for field_name in PASSTHROUGH_FIELDS:
            if raw.get(field_name) is not None:
                entry_kwargs[field_name] = raw[field_name]

        try:
            normalized = NormalizedWord.model_validate(entry_kwargs)
        except ValidationError as exc:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
            return Rejected(REJECT_INVALID_FIELDS, ", ".join(fields))

        return Accepted(normalized, self._resolve_group(normalized, context))

    def _resolve_meanings(self, raw: Dict[str, Any]) -> List[str]:
        """Pick the meanings list, plural field first."""
        meanings = self._clean_meanings(raw.get("meanings"))
        if meanings:
            return meanings
        return self._clean_meanings(raw.get("meaning"))

    @staticmethod
    def _clean_meanings(value: Any) -> List[str]:
        """Collapse whitespace and drop empty or non-string meanings."""
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return []

        cleaned = []
        for item in value:
            if not isinstance(item, str):
                continue
            item = collapse_whitespace(item)
            if item:
                cleaned.append(item)
        return cleaned

    @staticmethod
    def _resolve_id(raw_id: Any, context: RecordContext, word: str) -> str:
        # bool is an int subclass; never treat it as an id
        if isinstance(raw_id, int) and not isinstance(raw_id, bool):
            return str(raw_id)
        if isinstance(raw_id, str) and raw_id.strip():
            return raw_id.strip()
        return stable_word_id(context.language.slug, context.source_key, context.position, word)

    def _resolve_group(self, word: NormalizedWord, context: RecordContext) -> str:
        if word.semantic_group and word.semantic_group.strip():
            return word.semantic_group.strip()
        if context.group and context.group.strip():
            return context.group.strip()
        return self.default_group


_default_normalizer = RecordNormalizer()


def normalize_record(raw: Any, context: RecordContext) -> NormalizationResult:
    """Normalize one record with the default normalizer."""
    return _default_normalizer.normalize(raw, context)
