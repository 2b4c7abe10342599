# rescuekit

Decide where to stockpile emergency supplies in a road network so that every
city either holds supplies or is one road away from a city that does, using at
most a given number of cities.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Library use

```python
from rescuekit.planning import make_symmetric, place_emergency_supplies, is_covered

network = make_symmetric({
    "A": {"B"},
    "B": {"C", "D"},
    "C": {"D"},
    "D": {"F", "G"},
    "E": {"F"},
    "F": {"G"},
})

print(place_emergency_supplies(network, 1))   # None: one city is not enough
print(place_emergency_supplies(network, 2))   # {'B', 'F'}
```

`place_emergency_supplies(road_network, num_cities)` returns a set of cities,
or `None` when no placement within the limit exists. A negative limit raises
`ValueError`. Cities and neighbours are tried in sorted order, so the answer
for a given network is always the same. `make_symmetric` returns a copy of a
network with every road made two-way, and `is_covered(city, road_network,
supply_locations)` tells whether one city is covered.

### Map files

`rescuekit.parser.load_disaster` reads a scenario from a string or from any
iterable of lines, such as an open file. One city per line:

    # comment
    Alpha (0, 0): Beta, Gamma
    Beta (1, 0):
    Gamma (0, 1): Beta

Each line gives a name, its `(x, y)` location, exactly one colon and a
comma-separated list of neighbours. Blank lines and lines starting with `#`
are skipped. Roads are made two-way on load. Malformed input — a missing or
extra colon, a blank or repeated neighbour, a link to an unknown city, two
cities at the same location — raises `rescuekit.parser.ParseError` (a
`ValueError`). The result is a `DisasterTest` with `network` and
`city_locations` dictionaries.

### Finding the fewest cities

`rescuekit.demo.solve_optimally(network)` binary-searches the limit and
returns a smallest set of cities that covers the whole network.

`rescuekit.demo` also has helpers for presenting a scenario:
`format_map`, `format_best_cities`, `pluralize`, `shorthand_for` (a label of
at most three letters), `city_state` (returns a `CityState`), `sample_problems`
(the `.dst` files in a directory), and `geometry_for(test, canvas_width,
canvas_height)`, whose `Geometry.logical_to_physical` maps city locations onto
a canvas while keeping their aspect ratio.

### Console prompts

`rescuekit.console` offers `make_selection_from`, `make_file_selection` and
`ask_yes_or_no`. Each takes an `input_fn` and an `output` stream, so they can be
driven from code as well as from a terminal.

### Other helpers

- `rescuekit.color.Color`: an immutable 24-bit colour with `from_hex`,
  `from_hsv`, `random`, `to_rgb`, `to_html` and named colours such as
  `Color.WHITE`.
- `rescuekit.font.Font`: an immutable font (`FontFamily`, `FontStyle`, size,
  colour) with `with_family`, `with_style`, `with_size`, `with_color` and
  `library_string`.
- `rescuekit.styled_console.StyledConsole`: a writable text stream that
  collects text in styled runs and renders it with `render_html`;
  `styled(...)` is a context manager that restores the previous style.
- `rescuekit.shift`: `Day` and `Shift` (ordered, with `length` and
  `overlaps_with`).
- `rescuekit.calendar_view`: layout helpers for a week of shifts —
  `Rect`, `hour_to_string`, `cell_bounding_boxes`, `assign_subcolumns`,
  `hour_range`, `total_profit`, `total_length`, `standard_shifts` and
  `randomize_values`.

## Command line

    rescuekit-disaster map1.dst map2.dst

prints each scenario's road network and the fewest cities needed to cover it.
With no files it lists the `.dst` files in `res/`, asks you to pick one, and
offers to try another afterwards. Choose a different directory with
`--directory`:

    rescuekit-disaster --directory path/to/maps

A file that cannot be read or parsed makes the command print an error and exit
with status 1.

## What is not included

There is no graphical window: the geometry, colour, font and calendar helpers
compute layouts and styles but draw nothing. There is also no solver that
chooses which shifts to work; `rescuekit.shift` and `rescuekit.calendar_view`
only describe and lay out shifts.