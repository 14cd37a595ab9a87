"""Tests for building paths with the Path class."""

import math

import pytest

from vpath.common import FULL_TURN, FillRule, InvalidArgumentError, PathOperation
from vpath.geom import Offset, Rect, RRect
from vpath.path import Path
from vpath.path_support import (
    Arc,
    ClosePath,
    CubicTo,
    Ellipse,
    LineTo,
    MoveTo,
    QuadraticTo,
    RoundRect,
)


class TestPathInit:
    """Tests for a freshly created path."""

    def test_new_path_is_empty(self):
        """A new path has no commands, nonZero fill and the origin as pen."""
        path = Path()
        assert path.commands == ()
        assert path.is_empty
        assert len(path) == 0
        assert path.fill_rule == FillRule.NON_ZERO
        assert path.current_point == Offset(0, 0)

    def test_fill_rule_from_string(self):
        """Fill rules can be given by their SVG name."""
        assert Path("evenodd").fill_rule == FillRule.EVEN_ODD
        path = Path()
        path.fill_rule = "evenodd"
        assert path.fill_rule == FillRule.EVEN_ODD

    def test_invalid_fill_rule(self):
        """An unknown fill rule is rejected."""
        with pytest.raises(InvalidArgumentError, match="Unknown fill rule"):
            Path("winding")
        path = Path()
        with pytest.raises(InvalidArgumentError):
            path.fill_rule = "bogus"
        assert path.fill_rule == FillRule.NON_ZERO


class TestPathBuilding:
    """Tests for the command appending operations."""

    def test_move_and_line(self):
        """Absolute commands are stored as given and move the pen."""
        path = Path()
        path.move_to(10, 20)
        path.line_to(30, 40)
        assert path.commands == (MoveTo(10, 20), LineTo(30, 40))
        assert path.current_point == Offset(30, 40)

    def test_relative_move_and_line(self):
        """Relative commands are resolved against the current point."""
        path = Path()
        path.move_to(10, 10)
        path.relative_move_to(5, 5)
        path.relative_line_to(10, -5)
        assert path.commands == (MoveTo(10, 10), MoveTo(15, 15), LineTo(25, 10))
        assert path.current_point == Offset(25, 10)

    def test_relative_on_empty_path_uses_origin(self):
        """On an empty path relative offsets are taken from the origin."""
        path = Path()
        path.relative_line_to(3, 4)
        assert path.commands == (LineTo(3, 4),)

    def test_relative_quadratic(self):
        """Control and end point of a relative quadratic are both resolved."""
        path = Path()
        path.move_to(10, 10)
        path.relative_quadratic_bezier_to(5, 5, 10, 0)
        assert path.commands[-1] == QuadraticTo(15, 15, 20, 10)
        assert path.current_point == Offset(20, 10)

    def test_relative_cubic(self):
        """All three points of a relative cubic are resolved."""
        path = Path()
        path.move_to(10, 10)
        path.relative_cubic_to(0, 10, 10, 10, 10, 0)
        assert path.commands[-1] == CubicTo(10, 20, 20, 20, 20, 10)

    def test_nan_coordinates_are_accepted(self):
        """Non-finite coordinates are stored without validation."""
        path = Path()
        path.move_to(float("nan"), 0)
        path.line_to(float("inf"), 1)
        assert len(path) == 2
        assert math.isnan(path.commands[0].x)

    def test_close_returns_to_subpath_start(self):
        """After close() the pen is back at the last move_to."""
        path = Path()
        path.move_to(0, 0)
        path.line_to(10, 0)
        path.close()
        path.move_to(5, 5)
        path.line_to(20, 20)
        path.close()
        assert path.commands[-1] == ClosePath()
        assert path.current_point == Offset(5, 5)
        assert path.subpath_start == Offset(5, 5)

    def test_arc_to_without_move(self):
        """arc_to() appends one Arc inscribed in the rectangle's smaller extent."""
        path = Path()
        path.arc_to(Rect(0, 0, 100, 50), 0.0, math.pi / 2, False)
        assert path.commands == (Arc(50, 25, 25, 0.0, math.pi / 2),)
        assert path.current_point.dx == pytest.approx(50.0)
        assert path.current_point.dy == pytest.approx(50.0)

    def test_arc_to_with_forced_move(self):
        """force_move_to starts a new subpath at the arc's start point."""
        path = Path()
        path.arc_to(Rect(0, 0, 100, 50), 0.0, math.pi / 2, True)
        assert path.commands[0] == MoveTo(75.0, 25.0)
        assert isinstance(path.commands[1], Arc)
        assert path.subpath_start == Offset(75.0, 25.0)

    def test_add_rect(self):
        """add_rect() emits a closed TL, TR, BR, BL subpath."""
        path = Path()
        path.add_rect(Rect(10, 10, 110, 60))
        assert path.commands == (
            MoveTo(10, 10),
            LineTo(110, 10),
            LineTo(110, 60),
            LineTo(10, 60),
            ClosePath(),
        )
        assert path.current_point == Offset(10, 10)

    def test_add_rrect_uses_minimum_radius(self):
        """add_rrect() keeps only the smallest corner radius."""
        path = Path()
        path.add_rrect(RRect(Rect(0, 0, 100, 50), 10, 12, 8, 8, 6, 9, 7, 7))
        assert path.commands == (RoundRect(0, 0, 100, 50, 6),)
        assert path.current_point == Offset(0, 0)

    def test_add_oval(self):
        """add_oval() emits one unrotated full-turn Ellipse."""
        path = Path()
        path.add_oval(Rect(10, 10, 110, 60))
        assert path.commands == (Ellipse(60, 35, 50, 25, 0.0, 0.0, FULL_TURN),)

    def test_add_circle(self):
        """add_circle() emits one full-turn Arc and leaves the pen at angle 0."""
        path = Path()
        path.add_circle(Offset(50, 50), 25)
        assert path.commands == (Arc(50, 50, 25, 0.0, FULL_TURN),)
        assert path.current_point.dx == pytest.approx(75.0)
        assert path.current_point.dy == pytest.approx(50.0)

    def test_add_polygon_closed(self):
        """A closed polygon ends with ClosePath."""
        path = Path()
        path.add_polygon([Offset(0, 0), Offset(10, 0), Offset(5, 10)], True)
        assert path.commands == (MoveTo(0, 0), LineTo(10, 0), LineTo(5, 10), ClosePath())

    def test_add_polygon_open(self):
        """An open polygon has no ClosePath."""
        path = Path()
        path.add_polygon([Offset(0, 0), Offset(10, 0)], False)
        assert path.commands == (MoveTo(0, 0), LineTo(10, 0))

    def test_add_polygon_empty(self):
        """No points, no commands, whatever the close flag."""
        path = Path()
        path.add_polygon([], True)
        path.add_polygon([], False)
        assert path.is_empty

    def test_add_path(self):
        """add_path() appends the other path's commands, optionally translated."""
        other = Path()
        other.add_rect(Rect(0, 0, 10, 10))

        path = Path()
        path.add_path(other)
        path.add_path(other, Offset(5, 5))

        assert len(path) == 10
        assert path.commands[:5] == other.commands
        assert path.commands[5] == MoveTo(5, 5)
        assert path.commands[7] == LineTo(15, 15)
        assert path.current_point == Offset(5, 5)
        assert len(other) == 5


class TestPathLifecycle:
    """Tests for reset, clone and equality."""

    def test_reset(self):
        """reset() removes all commands and restores the initial state."""
        path = Path(FillRule.EVEN_ODD)
        path.add_rect(Rect(0, 0, 10, 10))
        path.line_to(3, 3)
        path.reset()
        assert path.is_empty
        assert path.current_point == Offset(0, 0)
        assert path.subpath_start == Offset(0, 0)
        assert path.fill_rule == FillRule.NON_ZERO
        assert path.get_bounds() == Rect(0, 0, 0, 0)

    def test_clone_is_independent(self):
        """Mutating a clone leaves the original untouched and vice versa."""
        path = Path(FillRule.EVEN_ODD)
        path.add_rect(Rect(0, 0, 10, 10))

        copy = path.clone()
        assert copy == path
        assert copy is not path

        copy.line_to(100, 100)
        assert len(path) == 5
        assert len(copy) == 6
        assert path.get_bounds() == Rect(0, 0, 10, 10)

        path.reset()
        assert len(copy) == 6
        assert copy.fill_rule == FillRule.EVEN_ODD

    def test_commands_view_is_read_only(self):
        """The exposed commands are a snapshot tuple."""
        path = Path()
        path.move_to(1, 1)
        snapshot = path.commands
        path.line_to(2, 2)
        assert snapshot == (MoveTo(1, 1),)
        assert list(path) == [MoveTo(1, 1), LineTo(2, 2)]

    def test_intersects_compares_bounds(self):
        """intersects() reports overlapping bounding rectangles."""
        first = Path()
        first.add_rect(Rect(0, 0, 50, 50))
        second = Path()
        second.add_circle(Offset(60, 60), 20)
        far = Path()
        far.add_rect(Rect(100, 100, 150, 150))
        assert first.intersects(second)
        assert second.intersects(first)
        assert not first.intersects(far)

    def test_equality(self):
        """Paths with equal commands and fill rule compare equal."""
        first = Path()
        second = Path()
        for path in (first, second):
            path.add_circle(Offset(0, 0), 5)
        assert first == second
        second.fill_rule = FillRule.EVEN_ODD
        assert first != second
        assert first != "not a path"

    def test_equality_includes_subpath_start(self):
        """Paths that would close to different points are not equal."""
        first = Path()
        first.move_to(2, 2)
        first.line_to(5, 5)

        head = Path()
        head.move_to(2, 2)
        tail = Path()
        tail.line_to(5, 5)
        second = Path.combine(PathOperation.UNION, head, tail)

        assert second.commands == first.commands
        assert second.current_point == first.current_point
        assert second.subpath_start == Offset(0, 0)
        assert first != second

        first.close()
        second.close()
        assert first.current_point == Offset(2, 2)
        assert second.current_point == Offset(0, 0)
