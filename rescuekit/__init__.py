"""Emergency supply planning over road networks, with a map parser, console demo and layout helpers."""

__version__ = "0.1.0"
__all__ = [
    "planning",
    "parser",
    "console",
    "demo",
    "color",
    "font",
    "styled_console",
    "shift",
    "calendar_view",
]