"""
Search engine for Prefix Search.

Ties the pieces of one run together: the directories of the requested
category are walked in order, every file is matched against the terms and
reported, and the counters are accumulated into a ``SearchResults`` that is
returned to the caller.
"""

import logging
from typing import Optional

from .models.config import PrefixSearchConfig
from .models.search_query import SearchQuery
from .models.search_results import FileEntry, SearchResults
from .output.reporter import Reporter
from .tools.fs_walker import FSWalker
from .tools.matcher import PrefixMatcher


logger = logging.getLogger(__name__)


class PrefixSearcher:
    """
    Runs prefix searches over the categories of a configuration.

    Each call to ``search`` uses fresh accumulators, so one searcher can serve
    several queries.
    """

    def __init__(self, config: PrefixSearchConfig, walker: Optional[FSWalker] = None):
        self.config = config
        self.walker = walker or FSWalker()

    def search(self, query: SearchQuery, reporter: Reporter) -> SearchResults:
        """
        Execute a query.

        Args:
            query: The category, terms and mode of the run
            reporter: Receives every match and the final summary

        Returns:
            Results of the run

        Raises:
            CategoryNotFoundError: If the query's category is not configured
            FileNameError: If a walked path has no base name
        """
        category = self.config.get_category(query.category)
        matcher = PrefixMatcher(query.terms)
        results = SearchResults(query=query)
        self.walker.reset_stats()

        for directory in category.dirs:
            logger.debug(f"Searching in dir: {directory}")
            results.directories_searched.append(directory)
            found_before = results.n_found

            for path in self.walker.walk_dir(directory):
                results.files_scanned += 1
                match = matcher.match(FileEntry.from_path(path))
                if match is not None:
                    reporter.report_match(match)
                    results.add_match(match)
                    if query.only_first_match:
                        break

            logger.debug(f"Found {results.n_found - found_before} matches in {directory}")
            if query.only_first_match and results.found_any():
                break

        results.errors = self.walker.get_stats()['errors']
        reporter.report_summary(results)
        return results


def run_search(config: PrefixSearchConfig, query: SearchQuery, reporter: Reporter) -> SearchResults:
    """
    Convenience function to run a single search.

    Args:
        config: Loaded category configuration
        query: Query to execute
        reporter: Output sink for matches and summary

    Returns:
        Results of the run
    """
    return PrefixSearcher(config).search(query, reporter)
