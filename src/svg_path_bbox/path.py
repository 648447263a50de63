"""Vector path made of drawing commands."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING, Protocol

from typing_extensions import Self, override

from .bbox import BoundingBox
from .commands import (
    PATH_COMMAND_TYPES,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    QuadCurveTo,
)
from .constants import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_FILL,
    DEFAULT_STROKE_WIDTH,
    MAX_INTEGER_DIGITS,
)
from .parse import parse_path_data
from .svg import path_element, read_path_element, split_style

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from xml.etree import ElementTree as ET

    from .commands import PathCommand

logger = logging.getLogger(__name__)


class DrawingContext(Protocol):
    """A 2D drawing surface the path can be replayed onto."""

    fill_style: str
    stroke_style: str
    line_width: float

    def begin_path(self) -> None:
        """Start a new path."""

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath."""

    def line_to(self, x: float, y: float) -> None:
        """Draw a straight line."""

    def bezier_curve_to(  # noqa: PLR0913
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        """Draw a cubic Bezier curve."""

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve."""

    def close_path(self) -> None:
        """Close the current subpath."""

    def fill(self) -> None:
        """Fill the path with the fill style."""

    def stroke(self) -> None:
        """Stroke the path with the stroke style."""


def format_number(value: float, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Format a value for path data.

    Integral values have no decimal point, all others are rounded half away
    from zero to the given decimal places.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(0.125)
        '0.13'
    """
    if round(value) == value:
        return str(round(value))

    # room for every integer digit of a double plus the fraction
    context = Context(prec=MAX_INTEGER_DIGITS + decimal_places)
    quantum = Decimal(10) ** -decimal_places
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=context)
    return f"{rounded:f}"


def format_stroke_width(value: float) -> str:
    """Format a stroke width as its shortest representation.

    Examples:
        >>> format_stroke_width(2.0)
        '2'
        >>> format_stroke_width(0.5)
        '0.5'
    """
    if round(value) == value:
        return str(round(value))
    return repr(float(value))


def pack_values(values: Iterable[float], decimal_places: int) -> str:
    """Join the values, separated by a space unless the sign separates them.

    Examples:
        >>> pack_values([10, -5, 2.5], 2)
        '10-5 2.50'
    """
    s = ""
    for i, value in enumerate(values):
        if value >= 0 and i > 0:
            s += " "
        s += format_number(value, decimal_places)
    return s


def _unexpected(cmd: object) -> ValueError:
    return ValueError(f"Unexpected path command {cmd!r}")


class Path:
    """An ordered sequence of drawing commands with fill and stroke.

    The commands are only ever appended. Fill and stroke are presentational
    and have no influence on the bounding box.
    """

    def __init__(
        self,
        commands: Iterable[PathCommand] = (),
        fill: str | None = DEFAULT_FILL,
        stroke: str | None = None,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
    ) -> None:
        """Initialize the path.

        Args:
            commands: Initial commands, appended in order.
            fill: The fill color or None for no fill.
            stroke: The stroke color or None for no stroke.
            stroke_width: The width of the stroke.
        """
        self.commands: list[PathCommand] = []
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.append_commands(commands)

    @override
    def __repr__(self) -> str:
        return f"Path({self.to_path_data()!r})"

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @classmethod
    def from_path_data(
        cls,
        d: str,
        fill: str | None = DEFAULT_FILL,
        stroke: str | None = None,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
    ) -> Self:
        """Create a path from SVG path data."""
        return cls(
            parse_path_data(d), fill=fill, stroke=stroke, stroke_width=stroke_width
        )

    @classmethod
    def from_svg(cls, svg: str | ET.Element) -> Self:
        """Create a path from a `<path>` element or its markup.

        Reads the path data together with fill, stroke and stroke width,
        either as attributes or from the style attribute.
        """
        elem = read_path_element(svg)
        attrs = split_style(dict(elem.attrib))

        if ignored := set(attrs) - {"d", "fill", "stroke", "stroke-width"}:
            logger.debug("Ignoring path attributes %s", sorted(ignored))

        fill: str | None = attrs.get("fill", DEFAULT_FILL)
        stroke: str | None = attrs.get("stroke")
        stroke_width = float(
            attrs.get("stroke-width", str(DEFAULT_STROKE_WIDTH)).removesuffix("px")
        )

        return cls(
            parse_path_data(attrs.get("d", "")),
            fill=None if fill == "none" else fill,
            stroke=None if stroke == "none" else stroke,
            stroke_width=stroke_width,
        )

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        self.commands.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        """Draw a line to (x, y)."""
        self.commands.append(LineTo(x, y))

    def curve_to(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Draw a cubic curve.

        Args:
            x1: X of control 1.
            y1: Y of control 1.
            x2: X of control 2.
            y2: Y of control 2.
            x: X of the path point.
            y: Y of the path point.
        """
        self.commands.append(CubicCurveTo(x1, y1, x2, y2, x, y))

    bezier_curve_to = curve_to

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        """Draw a quadratic curve.

        Args:
            x1: X of the control.
            y1: Y of the control.
            x: X of the path point.
            y: Y of the path point.
        """
        self.commands.append(QuadCurveTo(x1, y1, x, y))

    quadratic_curve_to = quad_to

    def close(self) -> None:
        """Close the path."""
        self.commands.append(Close())

    close_path = close

    def append_commands(self, commands: Iterable[PathCommand]) -> None:
        """Append the commands in order."""
        self.commands.extend(commands)

    def append_rectangle(self, box: BoundingBox) -> None:
        """Append the outline of the box as a closed subpath."""
        self.move_to(box.x1, box.y1)
        self.line_to(box.x2, box.y1)
        self.line_to(box.x2, box.y2)
        self.line_to(box.x1, box.y2)
        self.close()

    def extend(self, other: Path | BoundingBox | Iterable[PathCommand]) -> None:
        """Add the commands of another path, a list of commands or a box outline.

        Raises:
            TypeError: If other is a string or a single command.
        """
        if isinstance(other, BoundingBox):
            self.append_rectangle(other)
        elif isinstance(other, Path):
            self.append_commands(other.commands)
        elif isinstance(other, str) or isinstance(other, PATH_COMMAND_TYPES):
            raise TypeError(f"Cannot extend a path with {other!r}")
        else:
            self.append_commands(other)

    def get_bounding_box(self) -> BoundingBox:
        """Calculate the bounding box of the path.

        Falls back to the origin if the path has no points.

        Raises:
            ValueError: If an unexpected command is found.
        """
        box = BoundingBox()

        start_x = start_y = 0.0
        prev_x = prev_y = 0.0
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                box.add_point(cmd.x, cmd.y)
                start_x = prev_x = cmd.x
                start_y = prev_y = cmd.y
            elif isinstance(cmd, LineTo):
                box.add_point(cmd.x, cmd.y)
                prev_x, prev_y = cmd.x, cmd.y
            elif isinstance(cmd, QuadCurveTo):
                box.add_quad(prev_x, prev_y, cmd.x1, cmd.y1, cmd.x, cmd.y)
                prev_x, prev_y = cmd.x, cmd.y
            elif isinstance(cmd, CubicCurveTo):
                box.add_bezier(
                    prev_x, prev_y, cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y
                )
                prev_x, prev_y = cmd.x, cmd.y
            elif isinstance(cmd, Close):
                prev_x, prev_y = start_x, start_y
            else:
                raise _unexpected(cmd)

        if box.is_empty():
            box.add_point(0, 0)

        return box

    def draw(self, ctx: DrawingContext) -> None:
        """Draw the path to a 2D context, then fill and stroke it.

        Raises:
            ValueError: If an unexpected command is found.
        """
        ctx.begin_path()
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                ctx.move_to(cmd.x, cmd.y)
            elif isinstance(cmd, LineTo):
                ctx.line_to(cmd.x, cmd.y)
            elif isinstance(cmd, CubicCurveTo):
                ctx.bezier_curve_to(cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
            elif isinstance(cmd, QuadCurveTo):
                ctx.quadratic_curve_to(cmd.x1, cmd.y1, cmd.x, cmd.y)
            elif isinstance(cmd, Close):
                ctx.close_path()
            else:
                raise _unexpected(cmd)

        if self.fill:
            ctx.fill_style = self.fill
            ctx.fill()

        if self.stroke:
            ctx.stroke_style = self.stroke
            ctx.line_width = self.stroke_width
            ctx.stroke()

    def to_path_data(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """Convert the path to a string of path data instructions.

        See http://www.w3.org/TR/SVG/paths.html#PathData

        Raises:
            ValueError: If an unexpected command is found.
        """
        d: list[str] = []
        for cmd in self.commands:
            if not isinstance(cmd, PATH_COMMAND_TYPES):
                raise _unexpected(cmd)
            d.append(cmd.type + pack_values(cmd.values, decimal_places))

        return "".join(d)

    def to_svg(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """Convert the path to an SVG `<path>` element, as a string."""
        svg = f'<path d="{self.to_path_data(decimal_places)}"'

        if self.fill is None:
            svg += ' fill="none"'
        elif self.fill != DEFAULT_FILL:
            svg += f' fill="{self.fill}"'

        if self.stroke:
            stroke_width = format_stroke_width(self.stroke_width)
            svg += f' stroke="{self.stroke}" stroke-width="{stroke_width}"'

        return svg + "/>"

    def to_element(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> ET.Element:
        """Convert the path to a namespaced SVG path element."""
        return path_element(self.to_path_data(decimal_places))
