"""
Search results data models for Prefix Search.

This module defines the data structures produced while searching: the
transient file entries yielded by the walk, the prefix matches found among
them, and the accumulated results of a complete run.
"""

import os
from typing import Dict, List, Any, Set, Union
from pathlib import Path
from pydantic import BaseModel, Field, computed_field, model_validator

from .search_query import SearchQuery
from ..encoding import lossy_str
from ..exceptions import FileNameError


class FileEntry(BaseModel):
    """
    A file found during the directory walk.

    Attributes:
        path: Path of the file as produced by the walk
        name: Base name of the file
    """

    path: str = Field(..., min_length=1, description="Path of the file")
    name: str = Field(..., min_length=1, description="Base name of the file")

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike]) -> 'FileEntry':
        """
        Build an entry from a walked path.

        Undecodable bytes in the path are replaced, so odd filenames are
        still matched and printed instead of aborting the walk.

        Raises:
            FileNameError: If the path has no base name (e.g. ``/`` or ``..``)
        """
        name = Path(path).name
        if not name or name in ('.', '..'):
            raise FileNameError(path)
        return cls(path=lossy_str(path), name=lossy_str(name))


class PrefixMatch(BaseModel):
    """
    A file whose base name starts with one of the search terms.

    Attributes:
        term: The search term that matched
        path: Path of the matched file
        filename: Base name of the matched file
    """

    term: str = Field(..., min_length=1, description="Search term that matched")
    path: str = Field(..., min_length=1, description="Path of the matched file")
    filename: str = Field(..., min_length=1, description="Base name of the matched file")

    @model_validator(mode='after')
    def validate_prefix(self):
        """The filename must actually start with the term."""
        if not self.filename.startswith(self.term):
            raise ValueError(f"Filename '{self.filename}' does not start with '{self.term}'")
        return self

    @property
    def matched(self) -> str:
        """The matched prefix segment of the filename."""
        return self.filename[:len(self.term)]

    @property
    def remainder(self) -> str:
        """The part of the filename after the matched prefix."""
        return self.filename[len(self.term):]

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        data['matched'] = self.matched
        data['remainder'] = self.remainder
        return data

    def __str__(self) -> str:
        return f"{self.filename} ({self.path})"


class SearchResults(BaseModel):
    """
    Accumulated results of one search run.

    Attributes:
        query: The query that produced these results
        matches: Prefix matches in the order they were found
        seen_terms: Terms that matched at least one file
        directories_searched: Category directories that were walked
        files_scanned: Number of files compared against the terms
        errors: Number of walk errors that were skipped
    """

    query: SearchQuery = Field(..., description="The query that produced these results")
    matches: List[PrefixMatch] = Field(default_factory=list, description="Prefix matches found")
    seen_terms: Set[str] = Field(default_factory=set, description="Terms that matched at least one file")
    directories_searched: List[str] = Field(default_factory=list, description="Directories walked")
    files_scanned: int = Field(0, ge=0, description="Number of files compared")
    errors: int = Field(0, ge=0, description="Number of skipped walk errors")

    @computed_field
    @property
    def n_found(self) -> int:
        """Number of files that matched a term."""
        return len(self.matches)

    def add_match(self, match: PrefixMatch) -> None:
        """Record a match and mark its term as seen."""
        self.matches.append(match)
        self.seen_terms.add(match.term)

    def found_any(self) -> bool:
        return self.n_found > 0

    def unmatched_terms(self) -> List[str]:
        """Get the given terms that matched no file, in the order they were given."""
        return [term for term in self.query.unique_terms() if term not in self.seen_terms]

    def exit_code(self) -> int:
        """
        Get the process exit status for this run.

        Runs that do not fail on an empty result always succeed; otherwise the
        status is 0 when anything was found and 1 when nothing was.
        """
        if not self.query.fail_if_no_match:
            return 0
        return 0 if self.found_any() else 1

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        data['matches'] = [match.to_dict() for match in self.matches]
        data['seen_terms'] = sorted(self.seen_terms)
        data['unmatched_terms'] = self.unmatched_terms()
        return data

    def __str__(self) -> str:
        parts = [f"Found {self.n_found} files"]
        parts.append(f"Scanned: {self.files_scanned}")
        unmatched = self.unmatched_terms()
        if unmatched:
            parts.append(f"Unmet: {' '.join(unmatched)}")
        return " | ".join(parts)
