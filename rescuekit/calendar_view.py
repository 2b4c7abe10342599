"""Layout helpers for drawing a week of shifts as a calendar."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from rescuekit.shift import Day, Shift

__all__ = [
    "STANDARD_HOURS",
    "LOW_WEIGHT",
    "HIGH_WEIGHT",
    "Rect",
    "hour_to_string",
    "cell_bounding_boxes",
    "assign_subcolumns",
    "hour_range",
    "total_profit",
    "total_length",
    "standard_shifts",
    "randomize_values",
]

# Hours an employee may work in a week.
STANDARD_HOURS = 30

# Range of per-hour values used when randomising shift values.
LOW_WEIGHT = 0
HIGH_WEIGHT = 99 // 8

_STANDARD_SPANS = {
    Day.SUNDAY: ((8, 14), (12, 18)),
    Day.MONDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.TUESDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.WEDNESDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.THURSDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.FRIDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.SATURDAY: ((8, 14), (12, 18)),
}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def expand(self, delta: float) -> Rect:
        """Grow the rectangle by ``delta`` on every side; negative values shrink it."""
        return Rect(
            self.x - delta,
            self.y - delta,
            self.width + 2 * delta,
            self.height + 2 * delta,
        )


def hour_to_string(hour: int) -> str:
    """Return a twelve-hour label such as ``12AM`` or ``3PM``."""
    hour %= 24
    if hour == 0:
        return "12AM"
    if hour < 12:
        return f"{hour}AM"
    if hour == 12:
        return "12PM"
    return f"{hour - 12}PM"


def cell_bounding_boxes(bounds: Rect, low_hour: int, high_hour: int) -> list[Rect]:
    """Split ``bounds`` into equal rows, one per hour from ``low_hour`` to ``high_hour``."""
    if high_hour < low_hour:
        raise ValueError("High hour must not be before low hour.")
    cell_height = bounds.height / (high_hour - low_hour + 1)
    return [
        Rect(bounds.x, bounds.y + cell_height * offset, bounds.width, cell_height)
        for offset in range(high_hour - low_hour + 1)
    ]


def assign_subcolumns(shifts: Iterable[Shift]) -> dict[Shift, int]:
    """Place each shift in the first subcolumn where it fits, in shift order.

    Shifts sharing a subcolumn never overlap, and the number of subcolumns
    used is minimal for shifts on one day.
    """
    bottoms: list[int] = []
    result: dict[Shift, int] = {}
    for shift in sorted(set(shifts)):
        for index, bottom in enumerate(bottoms):
            if bottom <= shift.start_hour:
                bottoms[index] = shift.end_hour
                result[shift] = index
                break
        else:
            bottoms.append(shift.end_hour)
            result[shift] = len(bottoms) - 1
    return result


def hour_range(shifts: Iterable[Shift]) -> tuple[int, int]:
    """Return the earliest start and latest end, or ``(0, 24)`` when there are none."""
    shifts = list(shifts)
    if not shifts:
        return 0, 24
    return min(s.start_hour for s in shifts), max(s.end_hour for s in shifts)


def total_profit(shifts: Iterable[Shift]) -> int:
    """Sum of the values of the shifts."""
    return sum(shift.value for shift in shifts)


def total_length(shifts: Iterable[Shift]) -> int:
    """Sum of the lengths of the shifts, in hours."""
    return sum(shift.length for shift in shifts)


def standard_shifts() -> set[Shift]:
    """The standard week of shifts, all with value zero."""
    return {
        Shift(day, start, end, 0)
        for day, spans in _STANDARD_SPANS.items()
        for start, end in spans
    }


def randomize_values(
    shifts: Iterable[Shift],
    low: int = LOW_WEIGHT,
    high: int = HIGH_WEIGHT,
    rng: random.Random | None = None,
) -> set[Shift]:
    """Give each shift a random per-hour rate in ``[low, high]`` times its length."""
    if low > high:
        raise ValueError("Low weight must not exceed high weight.")
    generator = random.Random() if rng is None else rng
    return {
        Shift(
            shift.day,
            shift.start_hour,
            shift.end_hour,
            generator.randint(low, high) * shift.length,
        )
        for shift in sorted(set(shifts))
    }