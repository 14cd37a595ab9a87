"""Approximated boolean combination of two paths."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple, Union

from vpath.common import FillRule, PathOperation, UnsupportedOperationError
from vpath.path_support import PathCommand

logger = logging.getLogger(__name__)


class PathCombiner:
    """Combines the command sequences of two paths.

    No polygon clipping is performed. Both sequences are concatenated and the
    fill rule is chosen so the renderer produces an approximation of the
    requested operation:
        - UNION keeps the fill rule of the first path.
        - INTERSECT, XOR and DIFFERENCE force EVEN_ODD. The overlap then cancels,
          which matches a real XOR for simple non-self-overlapping shapes and a
          real DIFFERENCE only if the second path lies fully inside the first.
          INTERSECT yields the same silhouette as XOR.
    """

    @staticmethod
    def parse_operation(operation: Union[PathOperation, str]) -> PathOperation:
        """
        Convert _operation_ to a PathOperation.

        Raises:
            UnsupportedOperationError: If the operation is unknown.
        """
        if isinstance(operation, PathOperation):
            return operation
        try:
            return PathOperation(operation)
        except ValueError as e:
            raise UnsupportedOperationError(f"Unsupported path operation: {operation!r}") from e

    @staticmethod
    def combine_commands(
        operation: Union[PathOperation, str],
        commands_a: Sequence[PathCommand],
        fill_rule_a: FillRule,
        commands_b: Sequence[PathCommand],
    ) -> Tuple[List[PathCommand], FillRule]:
        """
        Combine two command sequences.

        Args:
            operation: The boolean operation
            commands_a: Commands of the first path
            fill_rule_a: Fill rule of the first path
            commands_b: Commands of the second path

        Returns:
            Tuple[List[PathCommand], FillRule]: new command list and its fill rule

        Raises:
            UnsupportedOperationError: If the operation is unknown.
        """
        op = PathCombiner.parse_operation(operation)
        logger.debug("combining %d and %d commands using %s", len(commands_a), len(commands_b), op.value)

        commands = list(commands_a) + list(commands_b)
        if op == PathOperation.UNION:
            return commands, fill_rule_a
        # INTERSECT, XOR and DIFFERENCE rely on even-odd cancellation
        return commands, FillRule.EVEN_ODD
