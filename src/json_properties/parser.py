"""JSON parser with validation and structure statistics."""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from .error_handler import ErrorHandler
from .utils.validation import reject_constant


class JSONParser:
    """
    JSON parser producing the value tree consumed by the converter.

    Object key order is preserved as it appears in the source text. Parse
    failures are reported before any conversion starts.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON string.

        Args:
            json_string: JSON string to parse

        Returns:
            Parsed JSON value tree

        Raises:
            ValueError: If JSON is invalid
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = []
            for error in validation_result.errors:
                if error.location and error.location != "input":
                    error_messages.append(f"{error.message} at {error.location}")
                else:
                    error_messages.append(error.message)
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        try:
            data = json.loads(json_string, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")
        except ValueError as e:
            raise ValueError(f"Invalid JSON input: {e}")
        except RecursionError:
            raise ValueError("JSON nesting too deep to parse")

        self.logger.debug(f"Parsed JSON with root type: {type(data).__name__}")
        return data

    def calculate_nesting_depth(self, data: Any) -> int:
        """
        Calculate maximum nesting depth of a value tree.

        Scalars have depth 0, an object or array of scalars has depth 1.
        """
        max_depth = 0
        stack: List[Tuple[Any, int]] = [(data, 0)]

        while stack:
            node, depth = stack.pop()
            if isinstance(node, dict):
                stack.extend((value, depth + 1) for value in node.values())
                max_depth = max(max_depth, depth + 1)
            elif isinstance(node, list):
                stack.extend((item, depth + 1) for item in node)
                max_depth = max(max_depth, depth + 1)

        return max_depth

    def get_structure_statistics(self, data: Any) -> Dict[str, Any]:
        """
        Get statistics about the value tree.

        Args:
            data: Parsed data to analyze

        Returns:
            Dictionary with structure statistics
        """
        stats = {
            "max_depth": self.calculate_nesting_depth(data),
            "object_count": 0,
            "array_count": 0,
            "scalar_count": 0,
            "total_keys": 0,
            "total_items": 0
        }

        stack = [data]
        while stack:
            node = stack.pop()
            if isinstance(node, dict):
                stats["object_count"] += 1
                stats["total_keys"] += len(node)
                stack.extend(node.values())
            elif isinstance(node, list):
                stats["array_count"] += 1
                stats["total_items"] += len(node)
                stack.extend(node)
            else:
                stats["scalar_count"] += 1

        return stats
