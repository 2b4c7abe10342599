"""Console demo and drawing helpers for disaster planning scenarios."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from rescuekit.console import ask_yes_or_no, make_file_selection
from rescuekit.parser import DisasterTest, ParseError, load_disaster
from rescuekit.planning import place_emergency_supplies

__all__ = [
    "PROBLEM_SUFFIX",
    "BASE_PATH",
    "BUFFER_SPACE",
    "LOGICAL_PADDING",
    "MAX_SHORTHAND_LENGTH",
    "CityState",
    "Geometry",
    "geometry_for",
    "city_state",
    "shorthand_for",
    "solve_optimally",
    "pluralize",
    "format_map",
    "format_best_cities",
    "sample_problems",
    "main",
]

PROBLEM_SUFFIX = ".dst"
BASE_PATH = "res/disaster-planning/"

# Space left around the drawing on every side of the canvas.
BUFFER_SPACE = 60.0

# Lower bound on the extent of the data range, for collinear cities.
LOGICAL_PADDING = 1e-5

MAX_SHORTHAND_LENGTH = 3

Point = tuple[float, float]


class CityState(Enum):
    """How a city is covered by a set of supply locations."""

    UNCOVERED = 0
    COVERED_INDIRECTLY = 1
    COVERED_DIRECTLY = 2


@dataclass(frozen=True)
class Geometry:
    """The data range of a scenario and the canvas area it is drawn into."""

    min_data_x: float
    min_data_y: float
    max_data_x: float
    max_data_y: float
    min_draw_x: float
    min_draw_y: float
    max_draw_x: float
    max_draw_y: float

    def logical_to_physical(self, point: Point) -> Point:
        """Map a point in data coordinates to canvas coordinates."""
        x, y = point
        px = (x - self.min_data_x) / (self.max_data_x - self.min_data_x) * (
            self.max_draw_x - self.min_draw_x
        ) + self.min_draw_x
        py = (y - self.min_data_y) / (self.max_data_y - self.min_data_y) * (
            self.max_draw_y - self.min_draw_y
        ) + self.min_draw_y
        return px, py


def geometry_for(test: DisasterTest, canvas_width: float, canvas_height: float) -> Geometry:
    """Fit the cities of ``test`` into the canvas, keeping their aspect ratio.

    Raises ``ValueError`` if there are no cities or the canvas is too small to
    hold anything inside its border.
    """
    if not test.city_locations:
        raise ValueError("Cannot compute geometry for a scenario with no cities.")
    if canvas_width <= 2 * BUFFER_SPACE or canvas_height <= 2 * BUFFER_SPACE:
        raise ValueError("Canvas is too small to draw in.")

    xs = [x for x, _ in test.city_locations.values()]
    ys = [y for _, y in test.city_locations.values()]
    min_x, max_x = min(xs) - LOGICAL_PADDING, max(xs) + LOGICAL_PADDING
    min_y, max_y = min(ys) - LOGICAL_PADDING, max(ys) + LOGICAL_PADDING

    win_width = canvas_width - 2 * BUFFER_SPACE
    win_height = canvas_height - 2 * BUFFER_SPACE
    win_aspect = win_width / win_height
    data_aspect = (max_x - min_x) / (max_y - min_y)

    # Whichever dimension is the limiting factor fills the available space.
    if data_aspect >= win_aspect:
        data_width = win_width
        data_height = data_width / data_aspect
    else:
        data_height = win_height
        data_width = data_aspect * data_height

    min_draw_x = (win_width - data_width) / 2.0 + BUFFER_SPACE
    min_draw_y = (win_height - data_height) / 2.0 + BUFFER_SPACE
    return Geometry(
        min_data_x=min_x,
        min_data_y=min_y,
        max_data_x=max_x,
        max_data_y=max_y,
        min_draw_x=min_draw_x,
        min_draw_y=min_draw_y,
        max_draw_x=min_draw_x + data_width,
        max_draw_y=min_draw_y + data_height,
    )


def city_state(
    city: str, network: Mapping[str, Collection[str]], selected: Collection[str]
) -> CityState:
    """Report whether ``city`` holds supplies, neighbours supplies, or neither."""
    if city in selected:
        return CityState.COVERED_DIRECTLY
    if any(neighbor in selected for neighbor in network.get(city, ())):
        return CityState.COVERED_INDIRECTLY
    return CityState.UNCOVERED


def shorthand_for(name: str) -> str:
    """Return a short label: the first three letters of a single word, else initials."""
    components = name.split(" ")
    if len(components) == 1:
        return components[0][:MAX_SHORTHAND_LENGTH]
    initials = [word[0] for word in components if word]
    return "".join(initials[:MAX_SHORTHAND_LENGTH])


def solve_optimally(network: Mapping[str, Collection[str]]) -> set[str]:
    """Find a smallest set of supply cities covering ``network`` by binary search."""
    low, high = 0, len(network)
    best = place_emergency_supplies(network, high)
    result: set[str] = best if best is not None else set()

    while low < high:
        mid = low + (high - low) // 2
        attempt = place_emergency_supplies(network, mid)
        if attempt is not None:
            high = mid
            result = attempt
        else:
            low = mid + 1
    return result


def pluralize(count: int, singular: str, plural: str) -> str:
    """Return ``count`` followed by the singular or plural word as appropriate."""
    return f"{count} {singular if count == 1 else plural}"


def format_map(network: Mapping[str, Collection[str]]) -> str:
    """Describe a transportation grid city by city."""
    lines = [f"This transportation grid has {pluralize(len(network), 'city', 'cities')}."]
    for city in sorted(network):
        neighbors = sorted(network[city])
        lines.append(
            f"  The city {city} is adjacent to {pluralize(len(neighbors), 'city', 'cities')}."
        )
        lines.extend(f"    {neighbor}" for neighbor in neighbors)
    return "\n".join(lines)


def format_best_cities(cities: Iterable[str]) -> str:
    """Describe the cities used by a solution."""
    chosen = sorted(cities)
    lines = [
        f"You need to stockpile in {pluralize(len(chosen), 'city', 'cities')} to provide coverage."
    ]
    lines.extend(f"  {city}" for city in chosen)
    return "\n".join(lines)


def sample_problems(base_path: str = BASE_PATH) -> list[str]:
    """List the scenario files in ``base_path``, sorted by name."""
    return sorted(name for name in os.listdir(base_path) if name.endswith(PROBLEM_SUFFIX))


def _run_scenario(path: str) -> None:
    with open(path, encoding="utf-8") as handle:
        scenario = load_disaster(handle)

    print(format_map(scenario.network))
    print("Finding the fewest number of cities needed... ", end="", flush=True)
    cities = solve_optimally(scenario.network)
    print("done!")
    print(format_best_cities(cities))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the disaster planning demo on the given files, or interactively."""
    parser = argparse.ArgumentParser(
        prog="rescuekit", description="Find the fewest cities needed to stockpile supplies."
    )
    parser.add_argument("files", nargs="*", help="scenario files to solve")
    parser.add_argument(
        "--directory", default="res/", help="directory to choose scenarios from interactively"
    )
    args = parser.parse_args(argv)

    print("Disaster Planning")
    try:
        if args.files:
            for path in args.files:
                _run_scenario(path)
            return 0

        while True:
            _run_scenario(make_file_selection(PROBLEM_SUFFIX, args.directory))
            if not ask_yes_or_no("Try another demo file? "):
                return 0
    except (OSError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1