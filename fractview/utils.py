"""Number parsing, coordinate mapping and the colour palette."""

from __future__ import annotations

import re

from fractview.sets import MAX_ITERATIONS

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(?:\.([0-9]*))?")

INSIDE_COLOR = 0x000000FF
LOW_COLOR = 0x2E8B57FF
MID_COLOR = 0x87CEEBFF
HIGH_COLOR = 0xF0E68CFF


def atodbl(s: str) -> float:
    """Parse the leading decimal number of ``s``, ignoring what follows.

    Leading whitespace and one sign are accepted; text that holds no number
    gives 0.0.
    """
    match = _NUMBER.match(s)
    sign, whole, fraction = match.group(1), match.group(2), match.group(3) or ""
    result = 0.0
    for digit in whole:
        result = result * 10 + int(digit)
    divisor = 10.0
    for digit in fraction:
        result += int(digit) / divisor
        divisor *= 10
    return -result if sign == "-" else result


def map_range(value: float, new_min: float, new_max: float, old_max: float) -> float:
    """Map ``value`` from the range [0, old_max] onto [new_min, new_max]."""
    return new_min + (new_max - new_min) * (value / old_max)


def calculate_color(iterations: int) -> int:
    """Return the RGBA colour, packed as 0xRRGGBBAA, for an escape count."""
    if iterations == MAX_ITERATIONS:
        return INSIDE_COLOR
    if iterations < 33:
        return LOW_COLOR
    if iterations < 66:
        return MID_COLOR
    return HIGH_COLOR