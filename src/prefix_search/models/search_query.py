"""
Search query data model for Prefix Search.

This module defines the structure describing one search run: which category
to search, which prefixes to look for, and whether the run is a quiet
yes/no question asked from a shell conditional.
"""

from typing import Dict, List, Any
from pydantic import BaseModel, Field, field_validator

from ..encoding import lossy_str


class SearchQuery(BaseModel):
    """
    Represents a prefix search request.

    Attributes:
        category: Name of the configured category to search
        terms: Search terms (filename prefixes), in the order given
        quiet: Suppress all output and answer through the exit code only
    """

    category: str = Field(..., min_length=1, description="Category to search")
    terms: List[str] = Field(..., min_length=1, description="Filename prefixes to search for")
    quiet: bool = Field(False, description="Answer through the exit code only")

    @field_validator('category', mode='before')
    @classmethod
    def decode_category(cls, v):
        """Replace undecodable bytes coming from argv."""
        return lossy_str(v) if isinstance(v, (str, bytes)) else v

    @field_validator('terms', mode='before')
    @classmethod
    def decode_terms(cls, v):
        """Replace undecodable bytes so terms compare against decoded filenames."""
        if isinstance(v, (list, tuple)):
            return [lossy_str(t) if isinstance(t, (str, bytes)) else t for t in v]
        return v

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: str) -> str:
        """Validate the category name."""
        if not v.strip():
            raise ValueError("Search category cannot be empty")
        return v

    @field_validator('terms')
    @classmethod
    def validate_terms(cls, v: List[str]) -> List[str]:
        """Reject empty terms; an empty prefix would match every file."""
        for term in v:
            if not term:
                raise ValueError("Search terms cannot be empty")
        return v

    @property
    def only_first_match(self) -> bool:
        """Whether the walk may stop once any match is found."""
        return self.quiet

    @property
    def fail_if_no_match(self) -> bool:
        """Whether a run without matches should exit with a failure code."""
        return self.quiet

    def unique_terms(self) -> List[str]:
        """Get the terms deduplicated, preserving first occurrence order."""
        return list(dict.fromkeys(self.terms))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchQuery':
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Category: '{self.category}'"]
        parts.append(f"Terms: {' '.join(self.terms)}")
        if self.quiet:
            parts.append("Quiet")
        return " | ".join(parts)
