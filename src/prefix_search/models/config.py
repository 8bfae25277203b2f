"""
Configuration data models for Prefix Search.

This module defines the data structures for the category configuration: a
mapping from category name to the ordered list of root directories that are
searched when that category is requested.
"""

from typing import Dict, List, Any
from pathlib import Path
from pydantic import BaseModel, Field, field_validator, model_validator

from ..exceptions import CategoryNotFoundError


class CategoryConfig(BaseModel):
    """
    Configuration for a single search category.

    Attributes:
        dirs: Ordered list of root directories searched for this category
    """

    dirs: List[str] = Field(default_factory=list, description="Root directories of the category")

    @field_validator('dirs', mode='before')
    @classmethod
    def validate_dirs(cls, v) -> List[str]:
        """Accept a single directory string and reject non-list values."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if not isinstance(v, list):
            raise ValueError(f"'dirs' must be a list of directories, got {type(v).__name__}")
        return v

    @field_validator('dirs')
    @classmethod
    def normalize_dirs(cls, v: List[str]) -> List[str]:
        """Drop blank entries and expand the user's home directory."""
        normalized = []
        for directory in v:
            if not directory or not directory.strip():
                continue
            directory = directory.strip()
            if directory.startswith('~'):
                directory = str(Path(directory).expanduser())
            normalized.append(directory)
        return normalized

    def get_missing_dirs(self) -> List[str]:
        """Get configured directories that do not exist or are not directories."""
        return [d for d in self.dirs if not Path(d).is_dir()]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {'dirs': list(self.dirs)}


class PrefixSearchConfig(BaseModel):
    """
    Main configuration class for Prefix Search.

    On disk the categories are stored flattened at the top level of the
    YAML document, each one holding a ``dirs`` list::

        docs:
          dirs:
            - ~/Documents

    Attributes:
        categories: Mapping from category name to its configuration
    """

    categories: Dict[str, CategoryConfig] = Field(default_factory=dict, description="Search categories")

    @model_validator(mode='after')
    def validate_category_names(self):
        """Category names are used as CLI arguments and must be non-blank."""
        for name in self.categories:
            if not str(name).strip():
                raise ValueError("Category names cannot be empty")
        return self

    def get_category(self, name: str) -> CategoryConfig:
        """
        Look up a category by name.

        Raises:
            CategoryNotFoundError: If no category with that name is configured
        """
        try:
            return self.categories[name]
        except KeyError:
            raise CategoryNotFoundError(name) from None

    def category_names(self) -> List[str]:
        """Get the configured category names in sorted order."""
        return sorted(self.categories)

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for non-fatal problems.

        Returns:
            List of warning messages
        """
        warnings = []
        for name in self.category_names():
            category = self.categories[name]
            if not category.dirs:
                warnings.append(f"Category '{name}' has no directories configured")
                continue
            for directory in category.get_missing_dirs():
                warnings.append(f"Category '{name}': directory does not exist: {directory}")
        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to its flattened on-disk representation."""
        return {name: category.to_dict() for name, category in self.categories.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PrefixSearchConfig':
        """Create configuration from its flattened on-disk representation."""
        return cls.model_validate({'categories': data or {}})

    def __str__(self) -> str:
        """String representation of the configuration."""
        names = self.category_names()
        return f"Categories: {len(names)} ({', '.join(names) or 'none'})"
