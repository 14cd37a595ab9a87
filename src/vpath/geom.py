"""Handling geometries"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from vpath.common import ARC_SEGMENTS_PER_RADIAN, FULL_TURN, MIN_ARC_SEGMENTS

Number = Union[int, float]


###############################################################################
# Offset
###############################################################################
@dataclass(frozen=True)
class Offset:
    """A 2D point or displacement.

    Attributes:
        dx (float): The x-coordinate (or x-displacement).
        dy (float): The y-coordinate (or y-displacement).
    """

    dx: float = 0.0
    dy: float = 0.0

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: Offset) -> Offset:
        return Offset(self.dx - other.dx, self.dy - other.dy)

    def distance_to(self, other: Offset) -> float:
        """Euclidean distance between this point and _other_."""
        return math.hypot(other.dx - self.dx, other.dy - self.dy)


ORIGIN = Offset(0.0, 0.0)


###############################################################################
# Rect
###############################################################################
@dataclass(frozen=True)
class Rect:
    """
    Represents an axis-aligned rectangle given by its edges.

    The y-axis points downwards (canvas convention), so _top_ is the smaller
    y-coordinate for a well-formed rectangle. Edges are stored as given and are
    not normalized.

    Attributes:
        left (float): The x-coordinate of the left edge.
        top (float): The y-coordinate of the top edge.
        right (float): The x-coordinate of the right edge.
        bottom (float): The y-coordinate of the bottom edge.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> Rect:
        """Create a Rect from its top-left corner and its size."""
        return cls(left, top, left + width, top + height)

    @property
    def width(self) -> float:
        """float: The width of the rectangle (difference between right and left)."""
        return self.right - self.left

    @property
    def height(self) -> float:
        """float: The height of the rectangle (difference between bottom and top)."""
        return self.bottom - self.top

    @property
    def center(self) -> Offset:
        """The center point of the rectangle."""
        return Offset((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the rectangle as Tuple (left, top, right, bottom)."""
        return self.left, self.top, self.right, self.bottom

    def contains_point(self, point: Offset) -> bool:
        """True if _point_ lies inside the rectangle or on its edges."""
        return self.left <= point.dx <= self.right and self.top <= point.dy <= self.bottom

    def overlaps(self, other: Rect) -> bool:
        """True if both rectangles share at least one point (touching edges count)."""
        return not (
            self.right < other.left or self.left > other.right or self.bottom < other.top or self.top > other.bottom
        )


###############################################################################
# RRect
###############################################################################
@dataclass(frozen=True)
class RRect:
    """A rectangle with an elliptical radius pair per corner.

    Corners are tl (top-left), tr (top-right), br (bottom-right) and bl (bottom-left).
    """

    rect: Rect
    tl_radius_x: float = 0.0
    tl_radius_y: float = 0.0
    tr_radius_x: float = 0.0
    tr_radius_y: float = 0.0
    br_radius_x: float = 0.0
    br_radius_y: float = 0.0
    bl_radius_x: float = 0.0
    bl_radius_y: float = 0.0

    @classmethod
    def from_rect_and_radius(cls, rect: Rect, radius: float) -> RRect:
        """Create a RRect with the same circular radius on every corner."""
        return cls.from_rect_xy(rect, radius, radius)

    @classmethod
    def from_rect_xy(cls, rect: Rect, radius_x: float, radius_y: float) -> RRect:
        """Create a RRect with the same elliptical radii on every corner."""
        return cls(rect, *((radius_x, radius_y) * 4))

    @property
    def radii(self) -> Tuple[float, ...]:
        """All eight corner radii in tl, tr, br, bl order (x before y)."""
        return (
            self.tl_radius_x,
            self.tl_radius_y,
            self.tr_radius_x,
            self.tr_radius_y,
            self.br_radius_x,
            self.br_radius_y,
            self.bl_radius_x,
            self.bl_radius_y,
        )

    @property
    def min_radius(self) -> float:
        """The smallest of all corner radii."""
        return min(self.radii)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def transform_point(matrix: Sequence[Number], x: float, y: float) -> Tuple[float, float]:
        """
        Perform an affine transformation on the given 2D point.

        The given _matrix_ is a list of 6 floats [a, b, c, d, e, f], i.e.
            | x' | = | a  c  e |   | x |
            | y' | = | b  d  f | * | y |
            | 1  | = | 0  0  1 |   | 1 |
        which is the canvas / SVG ``matrix(a, b, c, d, e, f)`` convention.

        Args:
            matrix (Sequence[float]): Affine transformation [a, b, c, d, e, f]
            x (float): x-coordinate of the point
            y (float): y-coordinate of the point

        Returns:
            Tuple[float, float]: the transformed point
        """
        a, b, c, d, e, f = matrix
        return float(a * x + c * y + e), float(b * x + d * y + f)

    @staticmethod
    def scale_factors(matrix: Sequence[Number]) -> Tuple[float, float]:
        """Return the per-axis scale factors (hypot(a, b), hypot(c, d)) of _matrix_."""
        a, b, c, d = matrix[0], matrix[1], matrix[2], matrix[3]
        return float(math.hypot(a, b)), float(math.hypot(c, d))

    @staticmethod
    def point_on_circle(center_x: float, center_y: float, radius: float, angle: float) -> Tuple[float, float]:
        """Return the point of the circle at _angle_ (radians, clockwise in y-down coordinates)."""
        return float(center_x + radius * np.cos(angle)), float(center_y + radius * np.sin(angle))

    @staticmethod
    def point_on_ellipse(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        center_x: float,
        center_y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        angle: float,
    ) -> Tuple[float, float]:
        """Return the point of the rotated ellipse at the parametric _angle_."""
        cos_rot = np.cos(rotation)
        sin_rot = np.sin(rotation)
        ex = radius_x * np.cos(angle)
        ey = radius_y * np.sin(angle)
        return float(center_x + ex * cos_rot - ey * sin_rot), float(center_y + ex * sin_rot + ey * cos_rot)

    @staticmethod
    def angle_in_span(angle: float, start_angle: float, end_angle: float) -> bool:
        """
        Check whether _angle_ lies on the arc drawn from _start_angle_ to _end_angle_.

        All three angles are normalized to [0, 2*pi); if the normalized start lies
        behind the normalized end the span wraps around angle 0. This is the
        clockwise arc a canvas draws for arc(cx, cy, r, start, end).
        A difference of a full turn or more in either direction passes every angle.
        """
        if abs(end_angle - start_angle) >= FULL_TURN:
            return True
        angle = angle % FULL_TURN
        start = start_angle % FULL_TURN
        end = end_angle % FULL_TURN
        if start <= end:
            return start <= angle <= end
        return angle >= start or angle <= end

    @staticmethod
    def clockwise_sweep(start_angle: float, end_angle: float) -> float:
        """
        Return the angle swept by a canvas arc from _start_angle_ to _end_angle_.

        The result lies in [0, 2*pi]: a difference of a full turn or more in either
        direction draws one full turn, anything less is wrapped into a positive
        sweep. A NaN difference gives NaN.
        """
        sweep = end_angle - start_angle
        if abs(sweep) >= FULL_TURN:
            return FULL_TURN
        if not math.isfinite(sweep):
            return math.nan
        return sweep % FULL_TURN

    @staticmethod
    def arc_segment_count(start_angle: float, end_angle: float) -> int:
        """Number of chords used to approximate an arc from _start_angle_ to _end_angle_."""
        sweep = abs(end_angle - start_angle)
        if not math.isfinite(sweep):
            return MIN_ARC_SEGMENTS
        return max(MIN_ARC_SEGMENTS, int(math.floor(sweep * ARC_SEGMENTS_PER_RADIAN)))

    @staticmethod
    def drawn_angles(start_angle: float, end_angle: float) -> NDArray[np.float64]:
        """
        Sample angles along the clockwise arc from _start_angle_ to _end_angle_.

        At most one full turn is sampled, so the number of angles stays bounded
        for any finite input.
        """
        sweep = GeomMath.clockwise_sweep(start_angle, end_angle)
        segments = GeomMath.arc_segment_count(0.0, sweep)
        return np.linspace(start_angle, start_angle + sweep, segments + 1, dtype=np.float64)

    @staticmethod
    def sample_arc(
        center_x: float, center_y: float, radius: float, start_angle: float, end_angle: float
    ) -> NDArray[np.float64]:
        """
        Sample a circular arc into a polyline.

        Returns:
            NDArray[np.float64]: points of shape (segments + 1, 2) along the drawn arc
        """
        angles = GeomMath.drawn_angles(start_angle, end_angle)
        return np.column_stack([center_x + radius * np.cos(angles), center_y + radius * np.sin(angles)])

    @staticmethod
    def sample_ellipse(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        center_x: float,
        center_y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
    ) -> NDArray[np.float64]:
        """
        Sample a rotated elliptical arc into a polyline.

        Returns:
            NDArray[np.float64]: points of shape (segments + 1, 2) along the drawn arc
        """
        angles = GeomMath.drawn_angles(start_angle, end_angle)
        ex = radius_x * np.cos(angles)
        ey = radius_y * np.sin(angles)
        cos_rot = np.cos(rotation)
        sin_rot = np.sin(rotation)
        return np.column_stack([center_x + ex * cos_rot - ey * sin_rot, center_y + ex * sin_rot + ey * cos_rot])
