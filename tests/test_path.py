"""Tests the path commands and their serialization."""

from __future__ import annotations

import pytest

from svg_path_bbox import (
    BoundingBox,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadCurveTo,
)
from svg_path_bbox.path import format_number, pack_values


class RecordingContext:
    """A drawing context which records all calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ...]] = []
        self.fill_style = ""
        self.stroke_style = ""
        self.line_width = 0.0

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float) -> None:
        self.calls.append(("move_to", x, y))

    def line_to(self, x: float, y: float) -> None:
        self.calls.append(("line_to", x, y))

    def bezier_curve_to(  # noqa: PLR0913
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        self.calls.append(("bezier_curve_to", cp1x, cp1y, cp2x, cp2y, x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self.calls.append(("quadratic_curve_to", cpx, cpy, x, y))

    def close_path(self) -> None:
        self.calls.append(("close_path",))

    def fill(self) -> None:
        self.calls.append(("fill", self.fill_style))

    def stroke(self) -> None:
        self.calls.append(("stroke", self.stroke_style, self.line_width))


def _square() -> Path:
    path = Path()
    path.move_to(0, 0)
    path.line_to(10, 0)
    path.line_to(10, 10)
    path.close()
    return path


def test_append_commands() -> None:
    path = Path()
    path.move_to(0, 0)
    path.line_to(1, 2)
    path.curve_to(1, 2, 3, 4, 5, 6)
    path.quad_to(7, 8, 9, 10)
    path.close()

    assert path.commands == [
        MoveTo(0, 0),
        LineTo(1, 2),
        CubicCurveTo(1, 2, 3, 4, 5, 6),
        QuadCurveTo(7, 8, 9, 10),
        Close(),
    ]
    assert len(path) == 5
    assert list(path) == path.commands


def test_canvas_aliases() -> None:
    path = Path()
    path.move_to(0, 0)
    path.bezier_curve_to(1, 2, 3, 4, 5, 6)
    path.quadratic_curve_to(7, 8, 9, 10)
    path.close_path()
    assert [cmd.type for cmd in path] == ["M", "C", "Q", "Z"]


def test_path_data() -> None:
    assert _square().to_path_data() == "M0 0L10 0L10 10Z"


def test_path_data_decimals() -> None:
    path = Path()
    path.move_to(-1.5, 2.25)
    path.curve_to(1.5, -2, 3.333, 4, 5, -6.125)
    path.quad_to(0.1, 0.2, 0.3, 0.4)
    assert path.to_path_data() == "M-1.50 2.25C1.50-2 3.33 4 5-6.13Q0.10 0.20 0.30 0.40"
    assert path.to_path_data(1) == "M-1.5 2.3C1.5-2 3.3 4 5-6.1Q0.1 0.2 0.3 0.4"


@pytest.mark.parametrize(
    ("value", "decimal_places", "expected"),
    [
        (10.0, 2, "10"),
        (-0.0, 2, "0"),
        (-3, 2, "-3"),
        (0.125, 2, "0.13"),
        (-0.125, 2, "-0.13"),
        (1 / 3, 4, "0.3333"),
        (2.5, 0, "3"),
        (-0.001, 2, "-0.00"),
        (1.5, 30, "1.5" + "0" * 29),
        (0.1, 20, "0.10000000000000000555"),
        (123456789.25, 20, "123456789.25" + "0" * 18),
        (1e300 + 0.5, 2, str(int(1e300))),
        (4503599627370495.5, 2, "4503599627370495.50"),
        (-2.5e-7, 10, "-0.0000002500"),
    ],
)
def test_format_number(value: float, decimal_places: int, expected: str) -> None:
    assert format_number(value, decimal_places) == expected


def test_pack_values() -> None:
    assert pack_values([1, 2, -3, 4], 2) == "1 2-3 4"
    assert pack_values([-1, -2], 2) == "-1-2"
    assert pack_values([], 2) == ""


def test_to_svg() -> None:
    path = _square()
    assert path.to_svg() == '<path d="M0 0L10 0L10 10Z"/>'

    path.fill = None
    assert path.to_svg() == '<path d="M0 0L10 0L10 10Z" fill="none"/>'

    path.fill = "red"
    path.stroke = "blue"
    path.stroke_width = 2
    assert path.to_svg() == (
        '<path d="M0 0L10 0L10 10Z" fill="red" stroke="blue" stroke-width="2"/>'
    )


def test_to_svg_decimals() -> None:
    path = Path(stroke="blue", stroke_width=0.5)
    path.move_to(0.123, 0)
    assert path.to_svg(1) == '<path d="M0.1 0" stroke="blue" stroke-width="0.5"/>'


def test_to_svg_stroke_width_shortest() -> None:
    path = Path(stroke="blue", stroke_width=0.5)
    path.move_to(0, 0)
    assert path.to_svg() == '<path d="M0 0" stroke="blue" stroke-width="0.5"/>'

    path.stroke_width = 0.125
    assert path.to_svg(1) == '<path d="M0 0" stroke="blue" stroke-width="0.125"/>'


def test_path_data_many_decimals() -> None:
    path = Path()
    path.move_to(123456789.25, 0)
    assert path.to_path_data(20) == "M123456789." + "25" + "0" * 18 + " 0"


def test_from_path_data_attributes() -> None:
    path = Path.from_path_data("M 0 0 L 1 1", fill=None, stroke="red", stroke_width=3)
    assert path.fill is None
    assert path.stroke == "red"
    assert path.stroke_width == 3
    assert path.to_svg() == '<path d="M0 0L1 1" fill="none" stroke="red" stroke-width="3"/>'


def test_extend_with_path() -> None:
    path = Path()
    path.move_to(5, 5)
    path.extend(_square())
    assert path.commands == [MoveTo(5, 5), *_square().commands]


def test_extend_with_commands() -> None:
    path = Path()
    path.extend([MoveTo(1, 1), LineTo(2, 2)])
    path.extend(cmd for cmd in [Close()])
    assert path.to_path_data() == "M1 1L2 2Z"


def test_extend_with_box() -> None:
    box = BoundingBox()
    box.add_point(0, 0)
    box.add_point(5, 5)

    path = Path()
    path.extend(box)
    assert path.commands == [
        MoveTo(0, 0),
        LineTo(5, 0),
        LineTo(5, 5),
        LineTo(0, 5),
        Close(),
    ]


def test_box_outline_keeps_bbox() -> None:
    path = Path.from_path_data("M 0 0 C 0 10 10 10 10 0")
    box = path.get_bounding_box()
    outline = Path()
    outline.append_rectangle(box)
    outline_box = outline.get_bounding_box()
    assert outline_box.as_bbox() == box.as_bbox()


@pytest.mark.parametrize("other", ["M 0 0", MoveTo(0, 0)])
def test_extend_invalid(other: object) -> None:
    with pytest.raises(TypeError, match="Cannot extend a path"):
        Path().extend(other)  # type: ignore[arg-type]


def test_path_data_unexpected_command() -> None:
    path = Path([MoveTo(0, 0), ("A", 1, 2)])  # type: ignore[list-item]
    with pytest.raises(ValueError, match="Unexpected path command"):
        path.to_path_data()


def test_draw() -> None:
    path = Path.from_path_data("M 0 0 L 1 1 C 1 2 3 4 5 6 Q 7 8 9 10 Z")
    path.stroke = "blue"
    path.stroke_width = 3

    ctx = RecordingContext()
    path.draw(ctx)

    assert ctx.calls == [
        ("begin_path",),
        ("move_to", 0, 0),
        ("line_to", 1, 1),
        ("bezier_curve_to", 1, 2, 3, 4, 5, 6),
        ("quadratic_curve_to", 7, 8, 9, 10),
        ("close_path",),
        ("fill", "black"),
        ("stroke", "blue", 3),
    ]


def test_draw_without_fill() -> None:
    path = _square()
    path.fill = None

    ctx = RecordingContext()
    path.draw(ctx)

    assert ("fill", "black") not in ctx.calls
    assert ctx.calls[-1] == ("close_path",)


def test_draw_unexpected_command() -> None:
    path = Path([MoveTo(0, 0), None])  # type: ignore[list-item]
    with pytest.raises(ValueError, match="Unexpected path command"):
        path.draw(RecordingContext())
