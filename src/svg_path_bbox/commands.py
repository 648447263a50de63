"""Path commands, one frozen dataclass per SVG path command."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import ClassVar, Literal, TypeAlias

CommandType: TypeAlias = Literal["M", "L", "C", "Q", "Z"]
"""A type alias for the command letters of the path model."""


@dataclass(frozen=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    type: ClassVar[CommandType] = "M"

    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The coordinates in path data order."""
        return astuple(self)


@dataclass(frozen=True)
class LineTo:
    """Straight line from the current point to (x, y)."""

    type: ClassVar[CommandType] = "L"

    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The coordinates in path data order."""
        return astuple(self)


@dataclass(frozen=True)
class CubicCurveTo:
    """Cubic Bezier curve with the controls (x1, y1), (x2, y2) ending in (x, y)."""

    type: ClassVar[CommandType] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The coordinates in path data order."""
        return astuple(self)


@dataclass(frozen=True)
class QuadCurveTo:
    """Quadratic Bezier curve with the control (x1, y1) ending in (x, y)."""

    type: ClassVar[CommandType] = "Q"

    x1: float
    y1: float
    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The coordinates in path data order."""
        return astuple(self)


@dataclass(frozen=True)
class Close:
    """Close the current subpath."""

    type: ClassVar[CommandType] = "Z"

    @property
    def values(self) -> tuple[float, ...]:
        """No coordinates."""
        return ()


PathCommand: TypeAlias = MoveTo | LineTo | CubicCurveTo | QuadCurveTo | Close
"""Any command of the path model."""

PATH_COMMAND_TYPES = (MoveTo, LineTo, CubicCurveTo, QuadCurveTo, Close)
"""The command classes, for `isinstance` checks."""
