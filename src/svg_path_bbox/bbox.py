"""Bounding box accumulator for points and Bezier curves."""

from __future__ import annotations

import math
from typing import TypeAlias

from typing_extensions import override

from .math import cubic_bezier_extrema, elevate_quadratic

BBox: TypeAlias = tuple[float, float, float, float]
"""Bounding box as a tuple (x, y, width, height)."""


class BoundingBox:
    """The smallest axis aligned box around all points added so far.

    On initialization x1/y1/x2/y2 are NaN. Check if the box is empty
    using :meth:`is_empty`. The minima (x1, y1) only ever decrease and the
    maxima (x2, y2) only ever increase.
    """

    def __init__(self) -> None:
        """Initialize an empty bounding box."""
        self.x1 = math.nan
        self.y1 = math.nan
        self.x2 = math.nan
        self.y2 = math.nan

    @override
    def __repr__(self) -> str:
        return f"BoundingBox(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"

    def __contains__(self, point: complex) -> bool:
        """Checks if a point (x + yj) lies within the closed box."""
        return self.x1 <= point.real <= self.x2 and self.y1 <= point.imag <= self.y2

    @property
    def width(self) -> float:
        """The extent along the x axis."""
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        """The extent along the y axis."""
        return self.y2 - self.y1

    def as_bbox(self) -> BBox:
        """The box as a tuple (x, y, width, height)."""
        return self.x1, self.y1, self.width, self.height

    def is_empty(self) -> bool:
        """If no point has been added to the box yet."""
        return (
            math.isnan(self.x1)
            or math.isnan(self.y1)
            or math.isnan(self.x2)
            or math.isnan(self.y2)
        )

    def add_point(self, x: float | None, y: float | None) -> None:
        """Extend the box to include the point.

        Args:
            x: The X coordinate, None to leave the x axis untouched.
            y: The Y coordinate, None to leave the y axis untouched.
        """
        if x is not None:
            if math.isnan(self.x1) or math.isnan(self.x2):
                self.x1 = x
                self.x2 = x
            if x < self.x1:
                self.x1 = x
            if x > self.x2:
                self.x2 = x

        if y is not None:
            if math.isnan(self.y1) or math.isnan(self.y2):
                self.y1 = y
                self.y2 = y
            if y < self.y1:
                self.y1 = y
            if y > self.y2:
                self.y2 = y

    def add_x(self, x: float) -> None:
        """Extend the box along the x axis only."""
        self.add_point(x, None)

    def add_y(self, y: float) -> None:
        """Extend the box along the y axis only."""
        self.add_point(None, y)

    def add_bezier(  # noqa: PLR0913
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x: float,
        y: float,
    ) -> None:
        """Extend the box to include the entire cubic Bezier curve.

        The control points are not added themselves, only the endpoints and
        the curve values where the derivative along an axis vanishes.

        Args:
            x0: The starting X coordinate.
            y0: The starting Y coordinate.
            x1: The X coordinate of the first control point.
            y1: The Y coordinate of the first control point.
            x2: The X coordinate of the second control point.
            y2: The Y coordinate of the second control point.
            x: The ending X coordinate.
            y: The ending Y coordinate.
        """
        self.add_point(x0, y0)
        self.add_point(x, y)

        for value in cubic_bezier_extrema(x0, x1, x2, x):
            if not math.isnan(value):
                self.add_x(value)

        for value in cubic_bezier_extrema(y0, y1, y2, y):
            if not math.isnan(value):
                self.add_y(value)

    def add_quad(  # noqa: PLR0913
        self, x0: float, y0: float, x1: float, y1: float, x: float, y: float
    ) -> None:
        """Extend the box to include the entire quadratic Bezier curve.

        Args:
            x0: The starting X coordinate.
            y0: The starting Y coordinate.
            x1: The X coordinate of the control point.
            y1: The Y coordinate of the control point.
            x: The ending X coordinate.
            y: The ending Y coordinate.
        """
        cp1x, cp2x = elevate_quadratic(x0, x1, x)
        cp1y, cp2y = elevate_quadratic(y0, y1, y)
        self.add_bezier(x0, y0, cp1x, cp1y, cp2x, cp2y, x, y)
