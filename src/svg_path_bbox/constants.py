"""Constants for the SVG path utilities."""

from __future__ import annotations

import re
from typing import Literal, TypeAlias

COMMANDS = r"MLQCZVHTSAmlqczvhtsa"
"""A string containing all the SVG path command letters."""

PARSABLE_COMMANDS = set("MLQCZVHTS")
"""A set containing the upper case SVG path commands the parser understands."""

ParsableCommand: TypeAlias = Literal["M", "L", "Q", "C", "Z", "V", "H", "T", "S"]
"""A type alias for the parsable SVG path commands."""

SUBCOMMAND_PATTERN = re.compile(r"([" + COMMANDS + r"])([^" + COMMANDS + r"]*)")
"""A regex pattern to match SVG path subcommands."""

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
"""A regex pattern to match a single number in path data."""

ARG_COUNTS: dict[ParsableCommand, int] = {
    "M": 2,
    "L": 2,
    "Q": 4,
    "C": 6,
    "Z": 0,
    "V": 1,
    "H": 1,
    "T": 2,
    "S": 4,
}
"""The number of values expected for each SVG path command."""

DEFAULT_DECIMAL_PLACES = 2
"""Decimal places used for non-integral values in path data."""

DEFAULT_FILL = "black"
"""Implicit fill of a path, omitted from the markup."""

DEFAULT_STROKE_WIDTH = 1.0
"""Stroke width used when a stroke is set without a width."""

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
"""The SVG XML namespace."""

MAX_INTEGER_DIGITS = 310
"""Upper bound on the integer digits of a finite double."""
