"""Subsequence matching of search text against window fields."""

from typing import Iterable, Optional, Tuple

from core.models import WindowEntry


def normalize_query(text: Optional[str]) -> str:
    """Fold user input into the form the matcher expects. None means no query."""
    if text is None:
        return ""
    return text.lower()


def fuzzy_match(query: str, candidate: str) -> bool:
    """
    Check whether every character of query appears in candidate, in order.

    Characters need not be adjacent but each position of candidate is used at
    most once. Both arguments must already be folded to the same case.

    Args:
        query: Normalized search text
        candidate: Normalized text to search in

    Returns:
        True if query is a subsequence of candidate
    """
    start = 0
    for letter in query:
        if start >= len(candidate):
            return False
        index = candidate.find(letter, start)
        if index == -1:
            return False
        start = index + 1
    return True


def matches_entry(query: str, entry: WindowEntry) -> bool:
    """True if the entry has a title and query matches its title or process name."""
    if not entry.title:
        return False
    return (fuzzy_match(query, entry.title.lower()) or
            fuzzy_match(query, (entry.process_name or "").lower()))


def filter_windows(query: str, entries: Iterable[WindowEntry]) -> Tuple[WindowEntry, ...]:
    """
    Select the entries shown for query, keeping the order of entries.

    An empty query lists every window that has a title; no fuzzy matching is
    done in that case.
    """
    if not query:
        return tuple(e for e in entries if e.title)
    return tuple(e for e in entries if matches_entry(query, e))
