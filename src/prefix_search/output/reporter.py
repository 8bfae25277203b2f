"""
Match reporter for Prefix Search.

Renders each match as the highlighted prefix, the rest of the filename and
the dimmed path of the file, and finishes a run with a short summary. In
quiet mode nothing is written at all.
"""

import logging

from .styled_writer import Style, StyledWriter
from ..models.search_results import PrefixMatch, SearchResults


logger = logging.getLogger(__name__)


class Reporter:
    """Writes matches and the run summary to a StyledWriter."""

    def __init__(self, writer: StyledWriter, quiet: bool = False):
        """
        Args:
            writer: Sink for styled output
            quiet: Suppress all per-match and summary output
        """
        self.writer = writer
        self.quiet = quiet

    def report_match(self, match: PrefixMatch) -> None:
        """Write one match as ``<matched><remainder> (<path>)``."""
        if self.quiet:
            return
        self.writer.write(match.matched, Style.MATCHED)
        self.writer.write(match.remainder, Style.REMAINDER)
        self.writer.write(f" ({match.path})", Style.PATH)
        self.writer.newline()

    def report_summary(self, results: SearchResults) -> None:
        """Write the total match count and any terms that matched nothing."""
        logger.debug(f"Search finished: {results}")
        if self.quiet:
            return
        self.writer.write_line(f"Found {results.n_found} files")
        unmatched = results.unmatched_terms()
        if unmatched:
            self.writer.write_line(f"Unmet search terms: {' '.join(unmatched)}")
