"""
Read-only queries over built word groups.

These helpers never mutate their input; each returns a new list.
"""

from __future__ import annotations

import random
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from lexindex.core.lexical import NormalizedWord, WordGroups


def flatten_groups(groups: WordGroups, group_keys: Optional[Iterable[str]] = None) -> List[NormalizedWord]:
    """
    Flatten groups into one list of words.

    Args:
        groups: Word groups as returned by build_index
        group_keys: Restrict to these groups, in this order (default: all groups)

    Returns:
        List[NormalizedWord]: Words in group order, then load order
    """
    keys = groups.keys() if group_keys is None else group_keys
    words: List[NormalizedWord] = []
    for key in keys:
        words.extend(groups.get(key, []))
    return words


def _as_words(words_or_groups: Union[WordGroups, Iterable[NormalizedWord]]) -> List[NormalizedWord]:
    if isinstance(words_or_groups, Mapping):
        return flatten_groups(words_or_groups)
    return list(words_or_groups)


def search_words(
    words_or_groups: Union[WordGroups, Iterable[NormalizedWord]],
    term: str,
) -> List[NormalizedWord]:
    """
    Find words whose headword, transliteration or meanings contain a term.

    Matching is case-insensitive. A blank term matches everything.

    Args:
        words_or_groups: Word groups or a plain list of words
        term: Search text

    Returns:
        List[NormalizedWord]: Matching words in their original order
    """
    words = _as_words(words_or_groups)
    needle = term.strip().casefold()
    if not needle:
        return words

    def matches(word: NormalizedWord) -> bool:
        haystack = [word.word, word.transliteration or "", *word.meanings]
        return any(needle in text.casefold() for text in haystack)

    return [word for word in words if matches(word)]


def unique_by_id(words: Iterable[NormalizedWord]) -> List[NormalizedWord]:
    """Keep the first word for each id."""
    seen = set()
    unique = []
    for word in words:
        if word.id in seen:
            continue
        seen.add(word.id)
        unique.append(word)
    return unique


def group_counts(groups: WordGroups) -> Dict[str, int]:
    return {key: len(words) for key, words in groups.items()}


def paginate(words: Sequence[NormalizedWord], page: int, page_size: int) -> List[NormalizedWord]:
    """
    Return one page of words.

    Args:
        words: Words to page through
        page: 1-based page number
        page_size: Words per page

    Returns:
        List[NormalizedWord]: The page (empty past the last page)

    Raises:
        ValueError: If page or page_size is not positive
    """
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be positive")
    start = (page - 1) * page_size
    return list(words[start : start + page_size])


def sample_words(
    words: Sequence[NormalizedWord],
    count: int = 10,
    rng: Optional[random.Random] = None,
) -> List[NormalizedWord]:
    """
    Pick up to ``count`` distinct words at random, e.g. for a practice round.

    Args:
        words: Words to draw from
        count: How many words to draw
        rng: Random generator (seed one for repeatable draws)

    Returns:
        List[NormalizedWord]: Shuffled selection of at most ``count`` words
    """
    rng = rng if rng is not None else random.Random()
    shuffled = list(words)
    rng.shuffle(shuffled)
    return shuffled[: max(count, 0)]
