"""
Search tools for Prefix Search.

This package contains the filesystem walker and the prefix matcher.
"""

from .fs_walker import FSWalker
from .matcher import PrefixMatcher, match_prefix, sort_terms_longest_first

__all__ = [
    'FSWalker',
    'PrefixMatcher',
    'match_prefix',
    'sort_terms_longest_first'
]
