"""Central module containing constants, enums and errors for vector path handling."""

from __future__ import annotations

import math
from enum import Enum

###############################################################################
# Consts
###############################################################################

# A full turn in radians
FULL_TURN: float = 2.0 * math.pi

# Heuristic ratio of a Bezier curve's length to its chord length
CURVE_LENGTH_FACTOR: float = 1.2

# Arcs are sampled into max(MIN_ARC_SEGMENTS, |sweep| * ARC_SEGMENTS_PER_RADIAN) chords
MIN_ARC_SEGMENTS: int = 8
ARC_SEGMENTS_PER_RADIAN: int = 8


###############################################################################
# Enums
###############################################################################


class FillRule(Enum):
    """Enum to define how the inside of a (self-intersecting) path is determined.

    The values match the SVG ``fill-rule`` and canvas naming.
    """

    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class PathOperation(Enum):
    """Enum to define the boolean operations of ``Path.combine``."""

    UNION = "union"
    INTERSECT = "intersect"
    DIFFERENCE = "difference"
    XOR = "xor"


###############################################################################
# Errors
###############################################################################


class PathError(Exception):
    """Base exception for path-related errors."""


class InvalidArgumentError(PathError, ValueError):
    """Raised when an argument is malformed, e.g. a transform matrix without 6 elements."""


class UnsupportedOperationError(PathError, ValueError):
    """Raised when an unknown boolean operation is requested."""
