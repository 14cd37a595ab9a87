"""Vector path building and geometric queries for 2D drawing."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple, Union

from vpath.common import FULL_TURN, FillRule, InvalidArgumentError, PathOperation
from vpath.geom import ORIGIN, GeomMath, Offset, Rect, RRect
from vpath.path_bounds import PathBounds
from vpath.path_combine import PathCombiner
from vpath.path_hit_test import PathHitTester
from vpath.path_measure import PathPerimeter
from vpath.path_support import (
    COMMAND_INFO,
    Arc,
    ClosePath,
    CubicTo,
    Ellipse,
    LineTo,
    MoveTo,
    PathCommand,
    PathCommandProcessor,
    PathContext,
    QuadraticTo,
    RoundRect,
)
from vpath.path_transform import AffineMatrix, MatrixLike, PathTransformer
from vpath.svgpath import SvgPathContext


###############################################################################
# Path
###############################################################################
class Path:
    """An ordered, replayable sequence of path commands.

    The path owns its command list exclusively. Commands are immutable; only
    whole-path operations (clone, transform, combine) create new paths.
    Besides the commands a path holds its fill rule, the current point (pen
    position after the last command) and the start of the active subpath,
    which resolve relative operations and ClosePath.

    Geometric queries (bounds, contains, perimeter) are computed from the
    commands on every call; nothing is cached.

    The path is not synchronized; concurrent mutation of one instance from
    several threads must be prevented by the caller.

    Example:
        path = Path()
        path.add_rect(Rect(10, 10, 110, 60))
        path.get_bounds()              # Rect(10, 10, 110, 60)
        path.contains(Offset(50, 50))  # True
        path.get_perimeter()           # 300.0
    """

    def __init__(self, fill_rule: Union[FillRule, str] = FillRule.NON_ZERO):
        self._commands: List[PathCommand] = []
        self._fill_rule: FillRule = self._to_fill_rule(fill_rule)
        self._current_point: Offset = ORIGIN
        self._subpath_start: Offset = ORIGIN

    @staticmethod
    def _to_fill_rule(value: Union[FillRule, str]) -> FillRule:
        if isinstance(value, FillRule):
            return value
        try:
            return FillRule(value)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown fill rule: {value!r}") from e

    @classmethod
    def _from_commands(
        cls,
        commands: List[PathCommand],
        fill_rule: FillRule,
        current_point: Offset,
        subpath_start: Offset,
    ) -> Path:
        path = cls(fill_rule)
        path._commands = commands
        path._current_point = current_point
        path._subpath_start = subpath_start
        return path

    ###########################################################################
    # Properties
    ###########################################################################

    @property
    def commands(self) -> Tuple[PathCommand, ...]:
        """The commands of this path in draw order (read-only)."""
        return tuple(self._commands)

    @property
    def fill_rule(self) -> FillRule:
        """The fill rule used by contains() and by renderers."""
        return self._fill_rule

    @fill_rule.setter
    def fill_rule(self, value: Union[FillRule, str]) -> None:
        self._fill_rule = self._to_fill_rule(value)

    @property
    def current_point(self) -> Offset:
        """The pen position after the last command (origin for an empty path)."""
        return self._current_point

    @property
    def subpath_start(self) -> Offset:
        """The start of the active subpath, i.e. where ClosePath leads back to."""
        return self._subpath_start

    @property
    def is_empty(self) -> bool:
        """True if the path has no commands."""
        return not self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(tuple(self._commands))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self._commands == other._commands
            and self._fill_rule == other._fill_rule
            and self._current_point == other._current_point
            and self._subpath_start == other._subpath_start
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Path(fill_rule={self._fill_rule.value}, commands={self._commands!r})"

    ###########################################################################
    # Building
    ###########################################################################

    def _append(self, command: PathCommand) -> None:
        self._commands.append(command)
        self._current_point = command.end_point(self._current_point, self._subpath_start)
        if COMMAND_INFO[type(command)].opens_subpath:
            self._subpath_start = self._current_point

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        self._append(MoveTo(x, y))

    def relative_move_to(self, dx: float, dy: float) -> None:
        """Start a new subpath at the current point displaced by (dx, dy)."""
        self.move_to(self._current_point.dx + dx, self._current_point.dy + dy)

    def line_to(self, x: float, y: float) -> None:
        """Draw a straight line from the current point to (x, y)."""
        self._append(LineTo(x, y))

    def relative_line_to(self, dx: float, dy: float) -> None:
        """Draw a straight line to the current point displaced by (dx, dy)."""
        self.line_to(self._current_point.dx + dx, self._current_point.dy + dy)

    def quadratic_bezier_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Draw a quadratic Bezier curve with control point (cx, cy) to (x, y)."""
        self._append(QuadraticTo(cx, cy, x, y))

    def relative_quadratic_bezier_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Like quadratic_bezier_to() with all points relative to the current point."""
        ox, oy = self._current_point.dx, self._current_point.dy
        self.quadratic_bezier_to(ox + cx, oy + cy, ox + x, oy + y)

    def cubic_to(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        """Draw a cubic Bezier curve with control points (c1x, c1y), (c2x, c2y) to (x, y)."""
        self._append(CubicTo(c1x, c1y, c2x, c2y, x, y))

    def relative_cubic_to(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        """Like cubic_to() with all points relative to the current point."""
        ox, oy = self._current_point.dx, self._current_point.dy
        self.cubic_to(ox + c1x, oy + c1y, ox + c2x, oy + c2y, ox + x, oy + y)

    def arc_to(self, rect: Rect, start_angle: float, sweep_angle: float, force_move_to: bool) -> None:
        """
        Add an arc of the circle inscribed in _rect_.

        The radius is the smaller half-extent of _rect_; elliptical arcs are not
        supported here (use add_oval() for full ellipses).

        Args:
            rect (Rect): Rectangle the circle is inscribed in
            start_angle (float): Start angle in radians
            sweep_angle (float): Swept angle in radians added to the start angle to give the end angle
            force_move_to (bool): Start a new subpath at the arc's start point
        """
        center = rect.center
        radius = min(rect.width / 2, rect.height / 2)
        if force_move_to:
            self.move_to(*GeomMath.point_on_circle(center.dx, center.dy, radius, start_angle))
        self._append(Arc(center.dx, center.dy, radius, start_angle, start_angle + sweep_angle))

    def add_rect(self, rect: Rect) -> None:
        """Add _rect_ as closed subpath: top-left, top-right, bottom-right, bottom-left."""
        self.move_to(rect.left, rect.top)
        self.line_to(rect.right, rect.top)
        self.line_to(rect.right, rect.bottom)
        self.line_to(rect.left, rect.bottom)
        self.close()

    def add_rrect(self, rrect: RRect) -> None:
        """
        Add a rounded rectangle as a single RoundRect command.

        Only one corner radius survives: the minimum of all requested radii.
        """
        rect = rrect.rect
        self._append(RoundRect(rect.left, rect.top, rect.width, rect.height, rrect.min_radius))

    def add_oval(self, rect: Rect) -> None:
        """Add the ellipse inscribed in _rect_ as a single full-turn Ellipse command."""
        center = rect.center
        self._append(Ellipse(center.dx, center.dy, rect.width / 2, rect.height / 2, 0.0, 0.0, FULL_TURN))

    def add_circle(self, center: Offset, radius: float) -> None:
        """Add a circle as a single full-turn Arc command."""
        self._append(Arc(center.dx, center.dy, radius, 0.0, FULL_TURN))

    def add_polygon(self, points: Sequence[Offset], close: bool) -> None:
        """Add a polyline through _points_, closed if _close_ is True. No points, no commands."""
        if not points:
            return
        self.move_to(points[0].dx, points[0].dy)
        for point in points[1:]:
            self.line_to(point.dx, point.dy)
        if close:
            self.close()

    def add_path(self, other: Path, offset: Optional[Offset] = None) -> None:
        """Append all commands of _other_, translated by _offset_ if given."""
        commands: Sequence[PathCommand] = other._commands
        if offset is not None:
            commands = PathTransformer.transform_commands(commands, AffineMatrix.translation(offset.dx, offset.dy))
        for command in list(commands):
            self._append(command)

    def close(self) -> None:
        """Close the current subpath; the pen returns to the subpath start."""
        self._append(ClosePath())

    def reset(self) -> None:
        """Remove all commands and restore the initial state."""
        self._commands = []
        self._fill_rule = FillRule.NON_ZERO
        self._current_point = ORIGIN
        self._subpath_start = ORIGIN

    def clone(self) -> Path:
        """Return an independent copy of this path."""
        return Path._from_commands(list(self._commands), self._fill_rule, self._current_point, self._subpath_start)

    ###########################################################################
    # Queries
    ###########################################################################

    def get_bounds(self) -> Rect:
        """Return the bounding rectangle; Rect(0, 0, 0, 0) for an empty path."""
        return PathBounds.compute(self._commands)

    def contains(self, point: Offset) -> bool:
        """Return True if _point_ is inside the path under the active fill rule."""
        return PathHitTester.contains(self._commands, point, self._fill_rule)

    def winding_number(self, point: Offset) -> int:
        """Return the signed winding number of the path around _point_."""
        return PathHitTester.winding_number(self._commands, point)

    def get_perimeter(self) -> float:
        """Return the (approximated) total length of the path."""
        return PathPerimeter.compute(self._commands)

    def intersects(self, other: Path) -> bool:
        """Return True if the bounding rectangles of both paths overlap."""
        return self.get_bounds().overlaps(other.get_bounds())

    ###########################################################################
    # Derived paths
    ###########################################################################

    def transform(self, matrix: MatrixLike) -> Path:
        """
        Return a new path with all coordinates mapped through _matrix_ [a, b, c, d, e, f].

        This path is not modified.

        Raises:
            InvalidArgumentError: If _matrix_ does not have exactly 6 elements.
        """
        trafo = AffineMatrix.validate(matrix)
        return Path._from_commands(
            PathTransformer.transform_commands(self._commands, trafo),
            self._fill_rule,
            PathTransformer.transform_offset(self._current_point, trafo),
            PathTransformer.transform_offset(self._subpath_start, trafo),
        )

    def shift(self, offset: Offset) -> Path:
        """Return a new path translated by _offset_."""
        return self.transform(AffineMatrix.translation(offset.dx, offset.dy))

    @staticmethod
    def combine(operation: Union[PathOperation, str], path_a: Path, path_b: Path) -> Path:
        """
        Return a new path approximating _operation_ applied to _path_a_ and _path_b_.

        See PathCombiner for the approximation. The current point of the result is
        the one of _path_b_.

        Raises:
            UnsupportedOperationError: If _operation_ is unknown.
        """
        commands, fill_rule = PathCombiner.combine_commands(
            operation, path_a._commands, path_a._fill_rule, path_b._commands
        )
        return Path._from_commands(commands, fill_rule, path_b._current_point, path_b._subpath_start)

    ###########################################################################
    # Replay
    ###########################################################################

    def replay(self, context: PathContext) -> None:
        """Replay all commands in order into _context_ (e.g. a canvas backend)."""
        PathCommandProcessor.replay(self._commands, context)

    def svg_path_string(self, precision: int = 6) -> str:
        """Return the path as SVG path data (the ``d`` attribute)."""
        context = SvgPathContext(precision)
        self.replay(context)
        return context.path_string
