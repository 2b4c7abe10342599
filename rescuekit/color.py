"""Immutable 24-bit RGB colours."""

from __future__ import annotations

import math
import random as _random
from functools import total_ordering
from typing import ClassVar

__all__ = ["Color"]


@total_ordering
class Color:
    """An RGB colour whose components each run from 0 to 255. Defaults to black."""

    __slots__ = ("_rgb",)

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GRAY: ClassVar[Color]

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        components = (int(red), int(green), int(blue))
        if any(not 0 <= value < 256 for value in components):
            raise ValueError("Color values out of range.")
        r, g, b = components
        self._rgb = (r << 16) + (g << 8) + b

    @property
    def red(self) -> int:
        return (self._rgb >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self._rgb >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self._rgb & 0xFF

    def to_rgb(self) -> int:
        """Return the colour packed as 0xRRGGBB."""
        return self._rgb

    def to_html(self) -> str:
        """Return the colour as an HTML hex string such as ``#a0b1c2``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from a packed 0xRRGGBB value."""
        if not 0 <= hex_value <= 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each between 0 and 1."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> float:
            k = math.fmod(n + h * 6, 6)
            return v - v * s * max(0.0, min(k, 4 - k, 1.0))

        return cls(int(255 * channel(5)), int(255 * channel(3)), int(255 * channel(1)))

    @classmethod
    def random(cls) -> Color:
        """Return a randomly chosen colour."""
        return cls(_random.randint(0, 255), _random.randint(0, 255), _random.randint(0, 255))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb < other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"

    def __str__(self) -> str:
        for name in _NAMED_ORDER:
            if getattr(Color, name) == self:
                return f"Color.{name}"
        return self.to_html()


_NAMED_ORDER = ("BLACK", "BLUE", "CYAN", "GRAY", "GREEN", "MAGENTA", "RED", "WHITE", "YELLOW")

Color.WHITE = Color.from_hex(0xFFFFFF)
Color.BLACK = Color.from_hex(0x000000)
Color.RED = Color.from_hex(0xFF0000)
Color.GREEN = Color.from_hex(0x00FF00)
Color.BLUE = Color.from_hex(0x0000FF)
Color.YELLOW = Color.from_hex(0xFFFF00)
Color.CYAN = Color.from_hex(0x00FFFF)
Color.MAGENTA = Color.from_hex(0xFF00FF)
Color.GRAY = Color.from_hex(0x808080)