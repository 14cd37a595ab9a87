"""Command model and supporting utilities for Path.

This module contains the path commands (one frozen dataclass per command kind),
command metadata, the replay protocol consumed by rendering backends, and the
command walker which resolves the current point and subpath start that the
geometric queries rely on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Protocol, Type, Union

from vpath.geom import ORIGIN, GeomMath, Offset


###############################################################################
# PathContext
###############################################################################


class PathContext(Protocol):
    """Drawing backend able to replay path commands.

    Any object offering these eight primitives can consume a Path, e.g. a canvas
    wrapper or the SVG recorder in ``vpath.svgpath``.
    """

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def bezier_curve_to(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def arc(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, center_x: float, center_y: float, radius: float, start_angle: float, end_angle: float
    ) -> None: ...

    def ellipse(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        center_x: float,
        center_y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
    ) -> None: ...

    def rounded_rect(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, x: float, y: float, width: float, height: float, radius: float
    ) -> None: ...

    def close_path(self) -> None: ...


###############################################################################
# Commands
###############################################################################


@dataclass(frozen=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    x: float
    y: float

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return Offset(self.x, self.y)

    def replay(self, context: PathContext) -> None:
        context.move_to(self.x, self.y)


@dataclass(frozen=True)
class LineTo:
    """Straight line from the current point to (x, y)."""

    x: float
    y: float

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return Offset(self.x, self.y)

    def replay(self, context: PathContext) -> None:
        context.line_to(self.x, self.y)


@dataclass(frozen=True)
class QuadraticTo:
    """Quadratic Bezier curve with control point (cx, cy) ending in (x, y)."""

    cx: float
    cy: float
    x: float
    y: float

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return Offset(self.x, self.y)

    def replay(self, context: PathContext) -> None:
        context.quadratic_curve_to(self.cx, self.cy, self.x, self.y)


@dataclass(frozen=True)
class CubicTo:
    """Cubic Bezier curve with control points (c1x, c1y), (c2x, c2y) ending in (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return Offset(self.x, self.y)

    def replay(self, context: PathContext) -> None:
        context.bezier_curve_to(self.c1x, self.c1y, self.c2x, self.c2y, self.x, self.y)


@dataclass(frozen=True)
class Arc:
    """Circular arc around (center_x, center_y) from start_angle to end_angle (radians)."""

    center_x: float
    center_y: float
    radius: float
    start_angle: float
    end_angle: float

    @property
    def start_point(self) -> Offset:
        return Offset(*GeomMath.point_on_circle(self.center_x, self.center_y, self.radius, self.start_angle))

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return Offset(*GeomMath.point_on_circle(self.center_x, self.center_y, self.radius, self.end_angle))

    def replay(self, context: PathContext) -> None:
        context.arc(self.center_x, self.center_y, self.radius, self.start_angle, self.end_angle)


@dataclass(frozen=True)
class Ellipse:
    """Elliptical arc, rotated by _rotation_ around its center, from start_angle to end_angle."""

    center_x: float
    center_y: float
    radius_x: float
    radius_y: float
    rotation: float
    start_angle: float
    end_angle: float

    def _point_at(self, angle: float) -> Offset:
        return Offset(
            *GeomMath.point_on_ellipse(
                self.center_x, self.center_y, self.radius_x, self.radius_y, self.rotation, angle
            )
        )

    @property
    def start_point(self) -> Offset:
        return self._point_at(self.start_angle)

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return self._point_at(self.end_angle)

    def replay(self, context: PathContext) -> None:
        context.ellipse(
            self.center_x,
            self.center_y,
            self.radius_x,
            self.radius_y,
            self.rotation,
            self.start_angle,
            self.end_angle,
        )


@dataclass(frozen=True)
class RoundRect:
    """Closed rectangle at (x, y) of given size with one corner radius for all corners."""

    x: float
    y: float
    width: float
    height: float
    corner_radius: float

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        # a rounded rect is drawn as closed subpath which leaves the pen at its origin
        return Offset(self.x, self.y)

    def replay(self, context: PathContext) -> None:
        context.rounded_rect(self.x, self.y, self.width, self.height, self.corner_radius)


@dataclass(frozen=True)
class ClosePath:
    """Close the current subpath by an implicit line back to its start."""

    def end_point(self, current: Offset, subpath_start: Offset) -> Offset:  # pylint: disable=unused-argument
        return subpath_start

    def replay(self, context: PathContext) -> None:
        context.close_path()


PathCommand = Union[MoveTo, LineTo, QuadraticTo, CubicTo, Arc, Ellipse, RoundRect, ClosePath]


###############################################################################
# PathCommandInfo
###############################################################################


@dataclass(frozen=True)
class PathCommandInfo:
    """Metadata for path commands.

    Attributes:
        opens_subpath: Whether this command sets a new subpath start
    """

    opens_subpath: bool = False


# Command registry with metadata
COMMAND_INFO: Dict[Type, PathCommandInfo] = {
    MoveTo: PathCommandInfo(opens_subpath=True),
    LineTo: PathCommandInfo(),
    QuadraticTo: PathCommandInfo(),
    CubicTo: PathCommandInfo(),
    Arc: PathCommandInfo(),
    Ellipse: PathCommandInfo(),
    RoundRect: PathCommandInfo(opens_subpath=True),
    ClosePath: PathCommandInfo(),
}


###############################################################################
# PathCommandProcessor
###############################################################################


@dataclass(frozen=True)
class PathStep:
    """One command together with the pen positions it was drawn between.

    Attributes:
        command: The command of this step
        start: Current point before the command
        end: Current point after the command
        subpath_start: Start of the active subpath after the command
    """

    command: PathCommand
    start: Offset
    end: Offset
    subpath_start: Offset


class PathCommandProcessor:
    """Handles command sequence processing."""

    @staticmethod
    def walk(
        commands: Iterable[PathCommand], current: Offset = ORIGIN, subpath_start: Offset = ORIGIN
    ) -> Iterator[PathStep]:
        """Iterate over _commands_ while tracking current point and subpath start.

        A ClosePath step ends on the subpath start; it is never materialized as LineTo.

        Args:
            commands: Commands to walk in draw order
            current: Current point before the first command. Defaults to the origin.
            subpath_start: Subpath start before the first command. Defaults to the origin.

        Yields:
            PathStep: one step per command
        """
        for command in commands:
            end = command.end_point(current, subpath_start)
            if COMMAND_INFO[type(command)].opens_subpath:
                subpath_start = end
            yield PathStep(command, current, end, subpath_start)
            current = end

    @staticmethod
    def replay(commands: Iterable[PathCommand], context: PathContext) -> None:
        """Replay _commands_ in order into _context_."""
        for command in commands:
            command.replay(context)
