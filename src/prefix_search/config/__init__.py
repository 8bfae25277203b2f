"""
Configuration management package for Prefix Search.

This package provides discovery, first-run creation and parsing of the
category configuration file.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    get_config_dir,
    get_default_config_path,
    load_config
)
from ..exceptions import ConfigurationError

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'get_config_dir',
    'get_default_config_path',
    'load_config'
]
