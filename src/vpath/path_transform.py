"""Affine transformation of path command sequences."""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from vpath.common import InvalidArgumentError
from vpath.geom import GeomMath, Offset
from vpath.path_support import (
    Arc,
    ClosePath,
    CubicTo,
    Ellipse,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticTo,
    RoundRect,
)

logger = logging.getLogger(__name__)

Matrix = Tuple[float, float, float, float, float, float]
MatrixLike = Union[Sequence[float], NDArray[np.float64]]


###############################################################################
# AffineMatrix
###############################################################################
class AffineMatrix:
    """Helpers to build 2x3 affine matrices [a, b, c, d, e, f].

    A point (x, y) maps to (a*x + c*y + e, b*x + d*y + f).
    """

    @staticmethod
    def validate(matrix: MatrixLike) -> Matrix:
        """
        Check that _matrix_ consists of exactly 6 numbers.

        Raises:
            InvalidArgumentError: If the matrix is not a flat sequence of 6 numbers.
        """
        try:
            arr = np.asarray(matrix, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Matrix must consist of numbers [a, b, c, d, e, f]: {e}") from e
        if arr.shape != (6,):
            raise InvalidArgumentError(f"Matrix must have 6 elements [a, b, c, d, e, f], got shape {arr.shape}")
        a, b, c, d, e, f = (float(v) for v in arr)
        return a, b, c, d, e, f

    @staticmethod
    def identity() -> Matrix:
        return 1.0, 0.0, 0.0, 1.0, 0.0, 0.0

    @staticmethod
    def translation(tx: float, ty: float) -> Matrix:
        return 1.0, 0.0, 0.0, 1.0, float(tx), float(ty)

    @staticmethod
    def scaling(sx: float, sy: float) -> Matrix:
        return float(sx), 0.0, 0.0, float(sy), 0.0, 0.0

    @staticmethod
    def rotation(angle: float) -> Matrix:
        """Rotation by _angle_ radians around the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0

    @staticmethod
    def multiply(first: MatrixLike, second: MatrixLike) -> Matrix:
        """Return the matrix which applies _first_ and then _second_."""
        m1 = AffineMatrix._to_3x3(AffineMatrix.validate(first))
        m2 = AffineMatrix._to_3x3(AffineMatrix.validate(second))
        product = m2 @ m1
        return (
            float(product[0, 0]),
            float(product[1, 0]),
            float(product[0, 1]),
            float(product[1, 1]),
            float(product[0, 2]),
            float(product[1, 2]),
        )

    @staticmethod
    def _to_3x3(matrix: Matrix) -> NDArray[np.float64]:
        a, b, c, d, e, f = matrix
        return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


###############################################################################
# PathTransformer
###############################################################################
class PathTransformer:
    """Maps path commands through an affine matrix.

    Points (end points, control points, centers) are mapped exactly. Radii are
    approximated:
        - Arc.radius and RoundRect.corner_radius are scaled by the average of the
          per-axis scale factors hypot(a, b) and hypot(c, d); a circle under a
          non-uniform matrix would be an ellipse which Arc cannot represent.
        - Ellipse.radius_x / radius_y are scaled by hypot(a, b) / hypot(c, d),
          which is exact for axis-aligned scaling only.
    Angles and the ellipse rotation are kept as they are.
    """

    @staticmethod
    def transform_command(command: PathCommand, matrix: Matrix) -> PathCommand:
        """Return a new command with the coordinates of _command_ mapped through _matrix_."""
        # pylint: disable=too-many-return-statements
        if isinstance(command, (MoveTo, LineTo)):
            x, y = GeomMath.transform_point(matrix, command.x, command.y)
            return type(command)(x, y)

        if isinstance(command, QuadraticTo):
            cx, cy = GeomMath.transform_point(matrix, command.cx, command.cy)
            x, y = GeomMath.transform_point(matrix, command.x, command.y)
            return QuadraticTo(cx, cy, x, y)

        if isinstance(command, CubicTo):
            c1x, c1y = GeomMath.transform_point(matrix, command.c1x, command.c1y)
            c2x, c2y = GeomMath.transform_point(matrix, command.c2x, command.c2y)
            x, y = GeomMath.transform_point(matrix, command.x, command.y)
            return CubicTo(c1x, c1y, c2x, c2y, x, y)

        scale_x, scale_y = GeomMath.scale_factors(matrix)
        avg_scale = (scale_x + scale_y) / 2

        if isinstance(command, Arc):
            cx, cy = GeomMath.transform_point(matrix, command.center_x, command.center_y)
            return Arc(cx, cy, command.radius * avg_scale, command.start_angle, command.end_angle)

        if isinstance(command, Ellipse):
            cx, cy = GeomMath.transform_point(matrix, command.center_x, command.center_y)
            return Ellipse(
                cx,
                cy,
                command.radius_x * scale_x,
                command.radius_y * scale_y,
                command.rotation,
                command.start_angle,
                command.end_angle,
            )

        if isinstance(command, RoundRect):
            x1, y1 = GeomMath.transform_point(matrix, command.x, command.y)
            x2, y2 = GeomMath.transform_point(matrix, command.x + command.width, command.y + command.height)
            return RoundRect(
                min(x1, x2),
                min(y1, y2),
                abs(x2 - x1),
                abs(y2 - y1),
                command.corner_radius * avg_scale,
            )

        if isinstance(command, ClosePath):
            return ClosePath()

        raise TypeError(f"Unknown path command {command!r}")

    @staticmethod
    def transform_commands(commands: Sequence[PathCommand], matrix: Matrix) -> List[PathCommand]:
        """Return new commands with all coordinates of _commands_ mapped through _matrix_."""
        logger.debug("transforming %d commands with matrix %s", len(commands), matrix)
        return [PathTransformer.transform_command(command, matrix) for command in commands]

    @staticmethod
    def transform_offset(offset: Offset, matrix: Matrix) -> Offset:
        """Return _offset_ (a point) mapped through _matrix_."""
        return Offset(*GeomMath.transform_point(matrix, offset.dx, offset.dy))
