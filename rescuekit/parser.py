"""Reading disaster-planning scenarios from text.

Each data line has the form::

    City Name (X, Y): Neighbour One, Neighbour Two

Blank lines and lines starting with ``#`` are ignored. Roads listed in one
direction are added in the other direction as well.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["ParseError", "DisasterTest", "load_disaster"]

Point = tuple[float, float]

_CITY_PATTERN = re.compile(
    r"([A-Za-z0-9 .\-]+)\(\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\)"
)


class ParseError(ValueError):
    """Raised when a scenario file is malformed."""


@dataclass
class DisasterTest:
    """A road network together with where each city should be drawn."""

    network: dict[str, set[str]] = field(default_factory=dict)
    city_locations: dict[str, Point] = field(default_factory=dict)


def _parse_city(city_info: str, result: DisasterTest) -> str:
    match = _CITY_PATTERN.fullmatch(city_info.strip())
    if match is None:
        raise ParseError(f"Can't parse this data; is it city info? {city_info}")

    name = match.group(1).strip()
    if not name:
        raise ParseError("City names can't be empty.")

    result.city_locations[name] = (float(match.group(2)), float(match.group(3)))
    result.network[name] = set()
    return name


def _parse_links(city_name: str, links: str, result: DisasterTest) -> None:
    outgoing: set[str] = set()
    result.network[city_name] = outgoing
    if not links.strip():
        return

    for entry in links.split(","):
        destination = entry.strip()
        if not destination:
            raise ParseError("Blank name in list of outgoing cities?")
        if destination in outgoing:
            raise ParseError("City appears twice in outgoing list?")
        outgoing.add(destination)


def _parse_city_line(line: str, result: DisasterTest) -> None:
    if line.count(":") != 1:
        raise ParseError("Each data line should have exactly one colon on it.")
    city_info, links = line.split(":", 1)
    name = _parse_city(city_info, result)
    _parse_links(name, links, result)


def _add_reverse_edges(result: DisasterTest) -> None:
    forward = {source: sorted(dests) for source, dests in sorted(result.network.items())}
    for source, destinations in forward.items():
        for destination in destinations:
            if destination not in result.network:
                raise ParseError(f"Outgoing link found to nonexistent city '{destination}'")
            result.network[destination].add(source)


def _validate_locations(result: DisasterTest) -> None:
    seen: dict[Point, str] = {}
    for name in sorted(result.city_locations):
        location = result.city_locations[name]
        if location in seen:
            raise ParseError(f"{name} is at the same location as {seen[location]}")
        seen[location] = name


def load_disaster(source: str | Iterable[str]) -> DisasterTest:
    """Parse a scenario from a string or an iterable of lines, such as an open file."""
    lines = source.splitlines() if isinstance(source, str) else source

    result = DisasterTest()
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        _parse_city_line(line, result)

    _add_reverse_edges(result)
    _validate_locations(result)
    return result