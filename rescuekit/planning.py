"""Choosing cities to stockpile emergency supplies in a road network.

A city is covered when it holds supplies itself or is joined by a road to a
city that does. Cities and their neighbours are examined in sorted order, so
the answer found for a given network is deterministic.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping

RoadNetwork = Mapping[str, Collection[str]]

__all__ = ["place_emergency_supplies", "make_symmetric", "is_covered"]


def is_covered(city: str, road_network: RoadNetwork, supply_locations: Collection[str]) -> bool:
    """Return whether ``city`` holds supplies or neighbours a city that does."""
    if city in supply_locations:
        return True
    return any(neighbor in supply_locations for neighbor in road_network.get(city, ()))


def make_symmetric(source: RoadNetwork) -> dict[str, set[str]]:
    """Return a copy of ``source`` in which every road runs both ways."""
    result: dict[str, set[str]] = {city: set(neighbors) for city, neighbors in source.items()}
    for origin, neighbors in source.items():
        for destination in neighbors:
            result.setdefault(origin, set()).add(destination)
            result.setdefault(destination, set()).add(origin)
    return result


def place_emergency_supplies(road_network: RoadNetwork, num_cities: int) -> set[str] | None:
    """Find at most ``num_cities`` cities whose supplies cover every city.

    Returns the chosen cities, or ``None`` when no such choice exists.
    Raises ``ValueError`` if ``num_cities`` is negative.
    """
    if num_cities < 0:
        raise ValueError("Number of supply cities cannot be negative.")

    cities = sorted(road_network)
    options = {city: (city, *sorted(road_network[city])) for city in cities}
    chosen: set[str] = set()

    def first_uncovered(candidates: Iterable[str]) -> str | None:
        return next(
            (city for city in candidates if not is_covered(city, road_network, chosen)),
            None,
        )

    def search() -> bool:
        city = first_uncovered(cities)
        if city is None:
            return True
        if len(chosen) >= num_cities:
            return False
        # The uncovered city must be covered by itself or by one of its neighbours.
        for candidate in options[city]:
            chosen.add(candidate)
            if search():
                return True
            chosen.discard(candidate)
        return False

    return set(chosen) if search() else None