"""
Data models for Prefix Search.

This module contains all the core data structures used throughout the system.
"""

from .config import CategoryConfig, PrefixSearchConfig
from .search_query import SearchQuery
from .search_results import FileEntry, PrefixMatch, SearchResults

__all__ = [
    'CategoryConfig',
    'PrefixSearchConfig',
    'SearchQuery',
    'FileEntry',
    'PrefixMatch',
    'SearchResults'
]
