"""Parse SVG path data into path commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeGuard

from .commands import Close, CubicCurveTo, LineTo, MoveTo, QuadCurveTo
from .constants import (
    ARG_COUNTS,
    COMMANDS,
    NUMBER_PATTERN,
    PARSABLE_COMMANDS,
    SUBCOMMAND_PATTERN,
    ParsableCommand,
)

if TYPE_CHECKING:
    from .commands import PathCommand

logger = logging.getLogger(__name__)


def _check_subcommands(
    data: list[tuple[str, bool, str]],
) -> TypeGuard[list[tuple[ParsableCommand, bool, str]]]:
    """Check if the subcommands are valid.

    Raises:
        NotImplementedError: If an arc command is found.
    """
    subcommands = {x[0] for x in data}

    if "A" in subcommands:
        raise NotImplementedError("Arc commands are not supported")

    return subcommands <= PARSABLE_COMMANDS


def _split_in_subcommands(d: str) -> list[tuple[ParsableCommand, bool, str]]:
    """Split the path data into subcommands and their data.

    Raises:
        ValueError: If no subcommands are found in the path data.
        ValueError: If the path data does not start with a command.
        NotImplementedError: If an arc command is found.
    """
    d = d.strip()
    if not d:
        raise ValueError("No subcommands found in path data")

    if d[0] not in COMMANDS:
        raise ValueError(f"Path data has to start with a command: {d[:10]!r}")

    subcommands_with_data: list[tuple[str, str]] = SUBCOMMAND_PATTERN.findall(d)

    subcommands_with_info = [
        (x.upper(), x.islower(), y) for x, y in subcommands_with_data
    ]

    if not _check_subcommands(subcommands_with_info):
        raise ValueError("Invalid subcommands found in path data")

    return subcommands_with_info


def _split_in_values(command: ParsableCommand, data: str) -> list[list[float]]:
    """Split the data of a subcommand into groups of values.

    Raises:
        ValueError: If the data contains something other than numbers.
        ValueError: If the number of values does not fit the command.
    """
    if NUMBER_PATTERN.sub("", data).strip(", \t\r\n"):
        raise ValueError(f"Invalid values for {command} command: {data.strip()!r}")

    floats = [float(x) for x in NUMBER_PATTERN.findall(data)]
    count = ARG_COUNTS[command]

    if count == 0:
        if floats:
            raise ValueError(f"{command} command takes no values, got {floats}")
        return [[]]

    if not floats or len(floats) % count:
        raise ValueError(
            f"{command} command expects a multiple of {count} values, "
            f"got {len(floats)}"
        )

    return [floats[i : i + count] for i in range(0, len(floats), count)]


def _to_points(values: list[float], offset: complex) -> list[complex]:
    """Pair the values into points and shift them by the offset."""
    return [
        complex(values[i], values[i + 1]) + offset for i in range(0, len(values), 2)
    ]


def _reflect(curr_pos: complex, prev_control: complex | None) -> complex:
    """Reflect the previous control point on the current point."""
    if prev_control is None:
        return curr_pos
    return 2 * curr_pos - prev_control


def parse_path_data(d: str) -> list[PathCommand]:  # noqa: C901, PLR0912
    """Parses the path data into the commands of the path model.

    Horizontal and vertical lines are lowered to line commands, smooth curves
    to full curves with the reflected control point.

    Args:
        d: The path string

    Returns:
        The commands in absolute coordinates.

    Example:
        >>> parse_path_data("M 10 10 h 10 Z")
        [MoveTo(x=10.0, y=10.0), LineTo(x=20.0, y=10.0), Close()]
    """
    commands: list[PathCommand] = []

    curr_pos = complex(0, 0)
    start_pos = complex(0, 0)
    prev_control: complex | None = None
    last_command: ParsableCommand | None = None

    for subcommand, is_rel, data in _split_in_subcommands(d):
        for ix, values in enumerate(_split_in_values(subcommand, data)):
            offset = curr_pos if is_rel else complex(0, 0)
            # additional coordinate pairs after a move are line commands
            command: ParsableCommand = "L" if subcommand == "M" and ix else subcommand

            if command == "M":
                curr_pos = start_pos = _to_points(values, offset)[0]
                commands.append(MoveTo(curr_pos.real, curr_pos.imag))

            elif command == "L":
                curr_pos = _to_points(values, offset)[0]
                commands.append(LineTo(curr_pos.real, curr_pos.imag))

            elif command == "H" or command == "V":  # noqa: PLR1714
                logger.debug("Lowering %s %s to a line command", command, values)
                value = values[0]
                if command == "H":
                    x = value + curr_pos.real if is_rel else value
                    curr_pos = complex(x, curr_pos.imag)
                else:
                    y = value + curr_pos.imag if is_rel else value
                    curr_pos = complex(curr_pos.real, y)
                commands.append(LineTo(curr_pos.real, curr_pos.imag))

            elif command == "C" or command == "S":  # noqa: PLR1714
                points = _to_points(values, offset)
                if command == "S":
                    logger.debug("Lowering S %s to a cubic command", values)
                    reflected = last_command in {"C", "S"}
                    control = _reflect(curr_pos, prev_control if reflected else None)
                    points = [control, *points]

                control1, control2, curr_pos = points
                prev_control = control2
                commands.append(
                    CubicCurveTo(
                        control1.real,
                        control1.imag,
                        control2.real,
                        control2.imag,
                        curr_pos.real,
                        curr_pos.imag,
                    )
                )

            elif command == "Q" or command == "T":  # noqa: PLR1714
                points = _to_points(values, offset)
                if command == "T":
                    logger.debug("Lowering T %s to a quadratic command", values)
                    reflected = last_command in {"Q", "T"}
                    control = _reflect(curr_pos, prev_control if reflected else None)
                    points = [control, *points]

                control, curr_pos = points
                prev_control = control
                commands.append(
                    QuadCurveTo(control.real, control.imag, curr_pos.real, curr_pos.imag)
                )

            else:
                curr_pos = start_pos
                commands.append(Close())

            last_command = command

    return commands
