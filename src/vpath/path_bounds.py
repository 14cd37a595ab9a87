"""Axis-aligned bounding box computation for path command sequences."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

import numpy as np

from vpath.geom import GeomMath, Rect
from vpath.path_support import (
    Arc,
    CubicTo,
    Ellipse,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticTo,
    RoundRect,
)

# Angles where a circle reaches its axis-aligned extremes
_CRITICAL_ANGLES: Tuple[float, ...] = (0.0, math.pi / 2, math.pi, 3 * math.pi / 2)

EMPTY_BOUNDS = Rect(0.0, 0.0, 0.0, 0.0)


class PathBounds:
    """Computes the bounding rectangle of a command sequence.

    Bezier curves contribute their control points (not the tight curve extremes)
    and round rects their corners, so the result may over-approximate the
    silhouette. Circular arcs and ellipses are bounded exactly.
    """

    @staticmethod
    def extreme_points(command: PathCommand) -> List[Tuple[float, float]]:
        """Return the points of _command_ which may influence the bounds."""
        if isinstance(command, (MoveTo, LineTo)):
            return [(command.x, command.y)]

        if isinstance(command, QuadraticTo):
            return [(command.cx, command.cy), (command.x, command.y)]

        if isinstance(command, CubicTo):
            return [(command.c1x, command.c1y), (command.c2x, command.c2y), (command.x, command.y)]

        if isinstance(command, Arc):
            angles = [command.start_angle, command.end_angle]
            angles.extend(
                angle
                for angle in _CRITICAL_ANGLES
                if GeomMath.angle_in_span(angle, command.start_angle, command.end_angle)
            )
            return [
                GeomMath.point_on_circle(command.center_x, command.center_y, command.radius, angle)
                for angle in angles
            ]

        if isinstance(command, Ellipse):
            if command.rotation == 0:
                half_width = command.radius_x
                half_height = command.radius_y
            else:
                cos_rot = np.cos(command.rotation)
                sin_rot = np.sin(command.rotation)
                half_width = math.hypot(command.radius_x * cos_rot, command.radius_y * sin_rot)
                half_height = math.hypot(command.radius_x * sin_rot, command.radius_y * cos_rot)
            return [
                (command.center_x - half_width, command.center_y - half_height),
                (command.center_x + half_width, command.center_y + half_height),
            ]

        if isinstance(command, RoundRect):
            return [(command.x, command.y), (command.x + command.width, command.y + command.height)]

        # ClosePath adds no coordinates of its own
        return []

    @staticmethod
    def compute(commands: Iterable[PathCommand]) -> Rect:
        """
        Compute the bounding rectangle of _commands_.

        NaN coordinates propagate into every edge of the result and infinite
        coordinates are kept. Without any coordinate the result is Rect(0, 0, 0, 0).

        Args:
            commands: Commands to bound

        Returns:
            Rect: The bounding rectangle
        """
        points: List[Tuple[float, float]] = []
        for command in commands:
            points.extend(PathBounds.extreme_points(command))

        if not points:
            return EMPTY_BOUNDS

        arr = np.asarray(points, dtype=np.float64)
        # np.min / np.max propagate NaN (unlike the builtins min / max)
        (left, top), (right, bottom) = arr.min(axis=0), arr.max(axis=0)
        return Rect(float(left), float(top), float(right), float(bottom))
