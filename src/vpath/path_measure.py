"""Length estimation for path command sequences."""

from __future__ import annotations

import math
from typing import Iterable

from vpath.common import CURVE_LENGTH_FACTOR, FULL_TURN
from vpath.path_support import (
    Arc,
    ClosePath,
    CubicTo,
    Ellipse,
    LineTo,
    PathCommand,
    PathCommandProcessor,
    QuadraticTo,
    RoundRect,
)


class PathPerimeter:
    """Approximates the total length of a path.

    Accuracy per command:
        - LineTo, ClosePath edge, Arc: exact.
        - QuadraticTo / CubicTo: chord length * CURVE_LENGTH_FACTOR (1.2).
          This is a heuristic; do not rely on it for sub-percent accuracy.
        - Ellipse: Ramanujan's approximation, scaled by the swept fraction of a turn.
        - RoundRect: exact for a circular corner radius.
    """

    @staticmethod
    def ellipse_circumference(radius_x: float, radius_y: float) -> float:
        """Circumference of a full ellipse (Ramanujan's second approximation)."""
        a = abs(radius_x)
        b = abs(radius_y)
        if a + b == 0:
            return 0.0
        h = ((a - b) / (a + b)) ** 2
        return math.pi * (a + b) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h)))

    @staticmethod
    def round_rect_perimeter(width: float, height: float, corner_radius: float) -> float:
        """Perimeter of a rectangle whose corners are rounded by _corner_radius_."""
        width = abs(width)
        height = abs(height)
        radius = min(max(corner_radius, 0.0), width / 2, height / 2)
        return 2 * (width + height) - (8 - FULL_TURN) * radius

    @staticmethod
    def compute(commands: Iterable[PathCommand]) -> float:
        """
        Sum up the lengths of all drawing commands.

        Args:
            commands: Commands of the path

        Returns:
            float: The (approximated) perimeter; 0.0 for an empty path
        """
        perimeter = 0.0
        for step in PathCommandProcessor.walk(commands):
            command = step.command
            if isinstance(command, (LineTo, ClosePath)):
                perimeter += step.start.distance_to(step.end)
            elif isinstance(command, (QuadraticTo, CubicTo)):
                perimeter += step.start.distance_to(step.end) * CURVE_LENGTH_FACTOR
            elif isinstance(command, Arc):
                perimeter += command.radius * abs(command.end_angle - command.start_angle)
            elif isinstance(command, Ellipse):
                sweep = min(abs(command.end_angle - command.start_angle), FULL_TURN)
                perimeter += PathPerimeter.ellipse_circumference(command.radius_x, command.radius_y) * (
                    sweep / FULL_TURN
                )
            elif isinstance(command, RoundRect):
                perimeter += PathPerimeter.round_rect_perimeter(command.width, command.height, command.corner_radius)
        return perimeter
