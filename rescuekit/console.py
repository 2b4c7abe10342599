"""Small helpers for interactive console programs."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

__all__ = ["make_selection_from", "make_file_selection", "ask_yes_or_no"]

InputFn = Callable[[str], str]


def _read_integer(prompt: str, input_fn: InputFn, output: TextIO) -> int:
    while True:
        answer = input_fn(prompt).strip()
        try:
            return int(answer)
        except ValueError:
            print("Illegal integer format. Try again.", file=output)


def make_selection_from(
    title: str,
    options: Sequence[str],
    input_fn: InputFn = input,
    output: TextIO | None = None,
) -> int:
    """List ``options`` and prompt until a valid index is chosen; return that index."""
    out = sys.stdout if output is None else output
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")

    print(title, file=out)
    for index, option in enumerate(options):
        print(f"{index} {option}", file=out)

    while True:
        choice = _read_integer("Your choice: ", input_fn, out)
        if 0 <= choice < len(options):
            return choice
        print(f"Please enter a number between 0 and {len(options) - 1}", file=out)


def make_file_selection(
    suffix: str,
    directory: str = "res/",
    input_fn: InputFn = input,
    output: TextIO | None = None,
) -> str:
    """Ask the user to pick a file ending in ``suffix`` from ``directory``; return its path."""
    listing_dir = directory or "."
    options = sorted(name for name in os.listdir(listing_dir) if name.endswith(suffix))

    prefix = listing_dir if listing_dir.endswith("/") else listing_dir + "/"
    index = make_selection_from(
        "Please choose a demo file from this list:", options, input_fn, output
    )
    return prefix + options[index]


def ask_yes_or_no(
    prompt: str,
    input_fn: InputFn = input,
    output: TextIO | None = None,
) -> bool:
    """Prompt until the answer starts with Y or N; return True for yes."""
    out = sys.stdout if output is None else output
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        print("Please type a word that starts with 'Y' or 'N'.", file=out)