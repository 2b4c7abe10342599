"""Styled fonts: a family, a style, a point size and a colour."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from enum import Enum

from rescuekit.color import Color

__all__ = ["FontFamily", "FontStyle", "Font"]


class FontFamily(Enum):
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    UNICODE_SERIF = "unicode-serif"
    UNICODE_SANS_SERIF = "unicode-sans-serif"
    UNICODE_MONOSPACE = "unicode-monospace"


class FontStyle(Enum):
    NORMAL = "<normal>"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    BOLD_ITALIC = "BOLDITALIC"


def _family_name(family: FontFamily) -> str:
    apple = sys.platform == "darwin"
    windows = sys.platform == "win32"
    if family is FontFamily.SERIF:
        return "Didot" if apple else "Serif"
    if family is FontFamily.SANS_SERIF:
        return "Helvetica" if apple else "Sans Serif"
    if family is FontFamily.MONOSPACE:
        return "Monaco" if apple else "Monospace"
    if family is FontFamily.UNICODE_SERIF:
        return "Times" if apple else "Times New Roman" if windows else "Serif"
    if family is FontFamily.UNICODE_SANS_SERIF:
        return "Lucida Grande" if apple else "Lucida Sans Unicode" if windows else "Sans Serif"
    if family is FontFamily.UNICODE_MONOSPACE:
        return "Lucida Grande" if apple else "Lucida Sans Unicode" if windows else "Monospace"
    raise ValueError("Unknown font family.")


@dataclass(frozen=True)
class Font:
    """An immutable font description."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = Color.BLACK

    def with_family(self, family: FontFamily) -> Font:
        return replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        return replace(self, style=style)

    def with_size(self, size: int) -> Font:
        return replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        return replace(self, color=color)

    def library_string(self) -> str:
        """Return the font as a ``Name-STYLE-size`` string for the current platform."""
        parts = [_family_name(self.family)]
        if self.style is not FontStyle.NORMAL:
            parts.append(self.style.value)
        parts.append(str(self.size))
        return "-".join(parts)