"""Vector paths with exact Bezier bounding boxes and SVG path data output."""

from __future__ import annotations

from .bbox import BBox, BoundingBox
from .commands import Close, CubicCurveTo, LineTo, MoveTo, PathCommand, QuadCurveTo
from .parse import parse_path_data
from .path import DrawingContext, Path

__all__ = [
    "BBox",
    "BoundingBox",
    "Close",
    "CubicCurveTo",
    "DrawingContext",
    "LineTo",
    "MoveTo",
    "Path",
    "PathCommand",
    "QuadCurveTo",
    "parse_path_data",
]
