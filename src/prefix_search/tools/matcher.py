"""
Prefix matcher for Prefix Search.

Compares file base names against the search terms. Terms are tried longest
first, so when both ``foo`` and ``foobar`` prefix ``foobar.txt`` the more
specific ``foobar`` wins, and each file is attributed to exactly one term.
"""

from typing import Iterable, List, Optional
import logging

from ..models.search_results import FileEntry, PrefixMatch


logger = logging.getLogger(__name__)


def sort_terms_longest_first(terms: Iterable[str]) -> List[str]:
    """
    Order terms by descending length; terms of equal length keep their order.

    Args:
        terms: Search terms in the order given

    Returns:
        New list of terms, longest first
    """
    return sorted(terms, key=len, reverse=True)


def match_prefix(name: str, sorted_terms: Iterable[str]) -> Optional[str]:
    """
    Find the first term that the name starts with.

    Args:
        name: File base name
        sorted_terms: Terms already ordered longest first

    Returns:
        The matching term, or None if no term prefixes the name
    """
    for term in sorted_terms:
        if name.startswith(term):
            return term
    return None


class PrefixMatcher:
    """Matches file entries against a fixed set of search terms."""

    def __init__(self, terms: Iterable[str]):
        self.terms = sort_terms_longest_first(terms)
        logger.debug(f"Matching terms in order: {self.terms}")

    def match_name(self, name: str) -> Optional[str]:
        return match_prefix(name, self.terms)

    def match(self, entry: FileEntry) -> Optional[PrefixMatch]:
        """
        Match a walked file against the terms.

        Args:
            entry: File entry produced by the walk

        Returns:
            PrefixMatch for the winning term, or None
        """
        term = self.match_name(entry.name)
        if term is None:
            return None
        return PrefixMatch(term=term, path=entry.path, filename=entry.name)
