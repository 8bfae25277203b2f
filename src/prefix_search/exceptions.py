"""Custom exceptions for Prefix Search."""

from pathlib import Path
from typing import Union


class PrefixSearchError(Exception):
    """Base exception for prefix search errors."""
    pass


class ConfigurationError(PrefixSearchError):
    """Raised when configuration parsing, validation or bootstrap fails."""
    pass


class CategoryNotFoundError(PrefixSearchError):
    """Raised when a requested search category is not configured."""

    def __init__(self, category: str):
        super().__init__(f"Search category not found: {category}")
        self.category = category


class FileNameError(PrefixSearchError):
    """Raised when a base name cannot be extracted from a walked path."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Could not get file name for path: {path}")
        self.path = path
