"""Classification and rendering of JSON tree nodes."""

import logging
import math
from typing import Any, Dict, Optional


# Integral floats below this magnitude are written without a fractional part
MAX_EXACT_INTEGER = 2 ** 53


class NodeClassifier:
    """
    Classifier for parsed JSON nodes.

    Decides whether a node opens a block (objects and arrays) or becomes a
    single ``key = value`` line, and renders scalar nodes as value text.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the node classifier.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def is_namespace_type(node: Any) -> bool:
        """
        Check whether a node maps to a block.

        Args:
            node: Parsed JSON node

        Returns:
            True for objects and arrays, False for scalars
        """
        return isinstance(node, (dict, list))

    def render_scalar(self, node: Any) -> str:
        """
        Render a scalar node as property value text.

        Args:
            node: String, number, boolean or null

        Returns:
            Natural textual form of the scalar

        Raises:
            TypeError: If the node is not a JSON scalar
        """
        # bool is a subclass of int, check it first
        if isinstance(node, bool):
            return "true" if node else "false"
        elif node is None:
            return "null"
        elif isinstance(node, str):
            return node
        elif isinstance(node, int):
            return str(node)
        elif isinstance(node, float):
            return self._render_float(node)
        else:
            raise TypeError(f"Not a JSON scalar: {type(node).__name__}")

    def _render_float(self, value: float) -> str:
        """
        Render a float, dropping the fraction of exactly integral values.

        Other values use the shortest round-trip form (``0.1``), not the
        17 significant digits of ``%.17g`` (``0.10000000000000001``).
        """
        if not math.isfinite(value):
            raise TypeError(f"Non-finite number {value!r} has no JSON form")

        if value.is_integer() and abs(value) < MAX_EXACT_INTEGER:
            return str(int(value))

        return repr(value)

    def first_key(self, node: Any) -> Optional[str]:
        """
        Get the first key of an object node.

        Args:
            node: Parsed JSON node

        Returns:
            The first key in encounter order, or None for arrays, scalars
            and empty objects
        """
        if isinstance(node, dict) and node:
            return next(iter(node))
        return None

    def describe(self, node: Any) -> Dict[str, Any]:
        """Short description of a node for log messages."""
        if isinstance(node, dict):
            return {"kind": "object", "size": len(node)}
        elif isinstance(node, list):
            return {"kind": "array", "size": len(node)}
        else:
            return {"kind": "scalar", "type": type(node).__name__}
