"""
Console output for Prefix Search.
"""

from .reporter import Reporter
from .styled_writer import RichStyledWriter, Style, StyledWriter

__all__ = ['Reporter', 'RichStyledWriter', 'Style', 'StyledWriter']
