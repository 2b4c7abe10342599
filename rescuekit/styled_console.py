"""A text stream that records styled runs of text and renders them as HTML."""

from __future__ import annotations

import html
import io
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntFlag

from rescuekit.color import Color

__all__ = ["DEFAULT_FONT_SIZE", "TextStyle", "Style", "StyledConsole"]

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class TextStyle(IntFlag):
    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclass(frozen=True)
class Style:
    """The colour, weight/slant and point size applied to a run of text."""

    color: Color = Color.BLACK
    text_style: TextStyle = TextStyle.NORMAL
    size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("Font size cannot be negative.")


class StyledConsole(io.TextIOBase):
    """Collects written text, tagging each run with the style in force when written."""

    def __init__(self) -> None:
        super().__init__()
        self._style = Style()
        self._pending: list[str] = []
        self._chunks: list[tuple[Style, str]] = []

    @property
    def style(self) -> Style:
        return self._style

    @property
    def chunks(self) -> list[tuple[Style, str]]:
        """All text written so far, as (style, text) runs."""
        self._flush_pending()
        return list(self._chunks)

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        if not isinstance(text, str):
            raise TypeError(f"write() argument must be str, not {type(text).__name__}")
        self._pending.append(text)
        return len(text)

    def _flush_pending(self) -> None:
        text = "".join(self._pending)
        self._pending.clear()
        if text:
            self._chunks.append((self._style, text))

    def set_style(
        self,
        color: Color = Color.BLACK,
        style: TextStyle = TextStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Change the style applied to text written from now on."""
        new_style = Style(color, TextStyle(style), size)
        self._flush_pending()
        self._style = new_style

    def clear(self) -> None:
        """Discard everything written so far."""
        self._pending.clear()
        self._chunks.clear()

    def render_html(self) -> str:
        """Render all written text as an HTML document."""
        parts = [_HTML_HEADER]
        for style, text in self.chunks:
            css = [f"color:{style.color.to_html()};"]
            if style.text_style & TextStyle.BOLD:
                css.append("font-weight:bold;")
            if style.text_style & TextStyle.ITALIC:
                css.append("font-style:italic;")
            css.append(f"font-size:{style.size}pt;")
            parts.append(f'<span style="{"".join(css)}">{html.escape(text)}</span>')
        parts.append(_HTML_FOOTER)
        return "".join(parts)

    @contextmanager
    def styled(
        self,
        color: Color | None = None,
        style: TextStyle | None = None,
        size: int | None = None,
    ) -> Iterator[StyledConsole]:
        """Temporarily change any of colour, style and size; restore them afterwards."""
        previous = self._style
        self.set_style(
            previous.color if color is None else color,
            previous.text_style if style is None else style,
            previous.size if size is None else size,
        )
        try:
            yield self
        finally:
            self.set_style(previous.color, previous.text_style, previous.size)