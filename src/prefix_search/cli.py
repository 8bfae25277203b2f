"""Command-line interface for Prefix Search.

``prefix-search <category> [-q] <term> [<term>...]`` lists the files of a
configured category whose names start with one of the terms. With ``-q`` it
prints nothing and answers through the exit status instead, for use in shell
conditionals::

    if prefix-search docs -q report; then ...
"""

import logging
from typing import List, Optional, Tuple

import click
from rich.console import Console

from . import __version__
from .config.parser import APP_NAME, ConfigParser
from .exceptions import CategoryNotFoundError, ConfigurationError
from .logging_config import setup_logging
from .models.search_query import SearchQuery
from .output.reporter import Reporter
from .output.styled_writer import RichStyledWriter
from .search import PrefixSearcher


logger = logging.getLogger(__name__)


def _usage_line(categories: List[str]) -> str:
    return f"Usage: {APP_NAME} [{', '.join(categories)}] [-q] <SEARCH_TERM> [<SEARCH_TERM>...]"


def _known_categories(config_path: Optional[str]) -> List[str]:
    """Best-effort category list for the usage line."""
    try:
        return ConfigParser(config_path).load_config().config.category_names()
    except ConfigurationError as e:
        logger.debug(f"Cannot list categories: {e}")
        return []


def _make_console(color: str) -> Console:
    if color == 'always':
        return Console(force_terminal=True, highlight=False)
    if color == 'never':
        return Console(no_color=True, highlight=False)
    return Console(highlight=False)


class PrefixSearchCommand(click.Command):
    """Command that reports usage errors with the category list and exit status 1."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug(f"Usage error: {e.format_message()}")
            click.echo(_usage_line(_known_categories(ctx.params.get('config_path'))), err=True)
            ctx.exit(1)


@click.command(cls=PrefixSearchCommand, name=APP_NAME)
@click.argument('search_category')
@click.argument('search_terms', nargs=-1, required=True)
@click.option('-q', '--question', is_flag=True,
              help="To use the command in shell's if-else condition.")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Path to configuration file.')
@click.option('--color', type=click.Choice(['auto', 'always', 'never']), default='auto',
              show_default=True, help='When to style the output.')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Set logging level (overrides PREFIX_SEARCH_LOG).')
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx: click.Context, search_category: str, search_terms: Tuple[str, ...], question: bool,
        config_path: Optional[str], color: str, log_level: Optional[str]) -> None:
    """Find files whose names start with SEARCH_TERMS in a category's directories."""
    setup_logging(log_level)

    try:
        config = ConfigParser(config_path).load_config().config
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        query = SearchQuery(category=search_category, terms=list(search_terms), quiet=question)
    except ValueError as e:
        logger.debug(f"Invalid query: {e}")
        click.echo(_usage_line(config.category_names()), err=True)
        ctx.exit(1)

    reporter = Reporter(RichStyledWriter(_make_console(color)), quiet=query.quiet)

    try:
        results = PrefixSearcher(config).search(query, reporter)
    except CategoryNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(_usage_line(config.category_names()), err=True)
        ctx.exit(1)

    ctx.exit(results.exit_code())


def main() -> None:
    """Console script entry point."""
    cli(prog_name=APP_NAME)


if __name__ == '__main__':  # pragma: no cover
    main()
