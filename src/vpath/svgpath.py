"""Recording path commands as SVG path data"""

from __future__ import annotations

import math
from typing import Callable, List, Tuple

from vpath.geom import ORIGIN, GeomMath, Offset


class SvgPathContext:
    """
    A PathContext which records the replayed commands as SVG path data.

    Commands (path primitive : SVG command):
        move_to            : M
        line_to            : L
        quadratic_curve_to : Q
        bezier_curve_to    : C
        arc / ellipse      : L or M to the start point, then A (clockwise, split into pieces of at most half a turn)
        rounded_rect       : M, L and quarter A corners, Z
        close_path         : Z

    Arcs are drawn like a canvas draws them: clockwise from start to end angle, one
    full turn at most, connected to the current subpath with a line; without a
    current point they start a new subpath.
    """

    def __init__(self, precision: int = 6):
        """
        Args:
            precision (int, optional): Maximum number of decimal places. Defaults to 6.
        """
        self._precision = precision
        self._tokens: List[str] = []
        self._current: Offset = ORIGIN
        self._subpath_start: Offset = ORIGIN
        self._has_current = False

    @property
    def path_string(self) -> str:
        """The recorded SVG path data."""
        return " ".join(self._tokens)

    def _fmt(self, value: float) -> str:
        if not math.isfinite(value):
            return f"{value}"
        text = f"{round(float(value), self._precision):.{self._precision}f}".rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text

    def _emit(self, letter: str, *values: float) -> None:
        self._tokens.append(" ".join([letter, *(self._fmt(v) for v in values)]))

    ###########################################################################
    # PathContext
    ###########################################################################

    def move_to(self, x: float, y: float) -> None:
        self._emit("M", x, y)
        self._current = self._subpath_start = Offset(x, y)
        self._has_current = True

    def line_to(self, x: float, y: float) -> None:
        if not self._has_current:
            self.move_to(x, y)
            return
        self._emit("L", x, y)
        self._current = Offset(x, y)

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        if not self._has_current:
            self.move_to(cx, cy)
        self._emit("Q", cx, cy, x, y)
        self._current = Offset(x, y)

    def bezier_curve_to(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        if not self._has_current:
            self.move_to(c1x, c1y)
        self._emit("C", c1x, c1y, c2x, c2y, x, y)
        self._current = Offset(x, y)

    def arc(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, center_x: float, center_y: float, radius: float, start_angle: float, end_angle: float
    ) -> None:
        self._elliptic_arc(
            radius,
            radius,
            0.0,
            lambda angle: GeomMath.point_on_circle(center_x, center_y, radius, angle),
            start_angle,
            end_angle,
        )

    def ellipse(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        center_x: float,
        center_y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        self._elliptic_arc(
            radius_x,
            radius_y,
            rotation,
            lambda angle: GeomMath.point_on_ellipse(center_x, center_y, radius_x, radius_y, rotation, angle),
            start_angle,
            end_angle,
        )

    def rounded_rect(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self, x: float, y: float, width: float, height: float, radius: float
    ) -> None:
        radius = min(max(radius, 0.0), abs(width) / 2, abs(height) / 2)
        right = x + width
        bottom = y + height
        if radius == 0:
            self._emit("M", x, y)
            self._emit("L", right, y)
            self._emit("L", right, bottom)
            self._emit("L", x, bottom)
        else:
            self._emit("M", x + radius, y)
            self._emit("L", right - radius, y)
            self._emit("A", radius, radius, 0, 0, 1, right, y + radius)
            self._emit("L", right, bottom - radius)
            self._emit("A", radius, radius, 0, 0, 1, right - radius, bottom)
            self._emit("L", x + radius, bottom)
            self._emit("A", radius, radius, 0, 0, 1, x, bottom - radius)
            self._emit("L", x, y + radius)
            self._emit("A", radius, radius, 0, 0, 1, x + radius, y)
        self._tokens.append("Z")
        # the pen stays at the rectangle's origin, which starts the next subpath
        self._current = self._subpath_start = Offset(x, y)
        self._has_current = True

    def close_path(self) -> None:
        if not self._has_current:
            return
        self._tokens.append("Z")
        self._current = self._subpath_start

    ###########################################################################
    # Helpers
    ###########################################################################

    def _elliptic_arc(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        radius_x: float,
        radius_y: float,
        rotation: float,
        point_at: Callable[[float], Tuple[float, float]],
        start_angle: float,
        end_angle: float,
    ) -> None:
        """Emit an arc as SVG "A" pieces of at most half a turn each."""
        start_x, start_y = point_at(start_angle)
        if self._has_current:
            self._emit("L", start_x, start_y)
            self._current = Offset(start_x, start_y)
        else:
            self.move_to(start_x, start_y)

        sweep = GeomMath.clockwise_sweep(start_angle, end_angle)
        if sweep == 0:
            return
        pieces = max(1, math.ceil(sweep / math.pi)) if math.isfinite(sweep) else 1
        step = sweep / pieces
        rotation_deg = math.degrees(rotation) if math.isfinite(rotation) else rotation
        for i in range(1, pieces + 1):
            px, py = point_at(start_angle + i * step)
            self._emit("A", abs(radius_x), abs(radius_y), rotation_deg, 0, 1, px, py)
            self._current = Offset(px, py)
