"""Logging configuration for Prefix Search."""

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


LOG_LEVEL_ENV_VAR = 'PREFIX_SEARCH_LOG'
DEFAULT_LOG_LEVEL = 'WARNING'


def resolve_log_level(level: Optional[Union[str, int]] = None) -> int:
    """
    Resolve the effective log level.

    Args:
        level: Explicit level name or number. Falls back to the
            PREFIX_SEARCH_LOG environment variable, then WARNING.

    Returns:
        Numeric logging level
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        logging.getLogger(__name__).warning(f"Invalid log level '{level}', using {DEFAULT_LOG_LEVEL}")
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return resolved


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Handler:
    """
    Send log records to stderr through rich.

    Calling this again replaces the handler installed by the previous call
    and leaves any other root handlers alone.

    Args:
        level: Log level name or number (see ``resolve_log_level``)

    Returns:
        The installed handler
    """
    root_logger = logging.getLogger()

    for handler in list(root_logger.handlers):
        if getattr(handler, '_prefix_search', False):
            root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler._prefix_search = True

    root_logger.addHandler(handler)
    root_logger.setLevel(resolve_log_level(level))
    return handler
