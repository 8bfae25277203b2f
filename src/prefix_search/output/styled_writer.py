"""
Styled output sinks for Prefix Search.

The reporter emits text segments tagged with a ``Style``; a ``StyledWriter``
decides how a tag is rendered. ``RichStyledWriter`` renders through a
``rich`` console, which drops the styling when color is disabled or stdout
is not a terminal.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional

from rich.console import Console
from rich.text import Text


class Style(Enum):
    """Style tags for output segments."""
    MATCHED = "matched"
    REMAINDER = "remainder"
    PATH = "path"
    PLAIN = "plain"


DEFAULT_THEME: Dict[Style, str] = {
    Style.MATCHED: "bold green",
    Style.REMAINDER: "bold",
    Style.PATH: "dim",
    Style.PLAIN: "",
}


class StyledWriter(ABC):
    """Sink for styled text segments, written one line at a time."""

    @abstractmethod
    def write(self, text: str, style: Style = Style.PLAIN) -> None:
        """Append a segment to the current line."""

    @abstractmethod
    def newline(self) -> None:
        """Finish the current line."""

    def write_line(self, text: str = "", style: Style = Style.PLAIN) -> None:
        if text:
            self.write(text, style)
        self.newline()


class RichStyledWriter(StyledWriter):
    """StyledWriter that renders segments on a rich Console."""

    def __init__(self, console: Optional[Console] = None, theme: Optional[Dict[Style, str]] = None):
        self.console = console or Console()
        self.theme = dict(DEFAULT_THEME)
        if theme:
            self.theme.update(theme)
        self._line = Text()

    def write(self, text: str, style: Style = Style.PLAIN) -> None:
        self._line.append(text, style=self.theme.get(style) or None)

    def newline(self) -> None:
        # soft_wrap keeps long paths on one line
        self.console.print(self._line, soft_wrap=True, highlight=False)
        self._line = Text()
