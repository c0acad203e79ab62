"""Validation utilities for JSON input and property output safety."""

import json
from typing import Any, List, Tuple
from ..types import ValidationResult, ValidationError, ErrorType


# Characters with meaning in the property format; there is no escaping for them
UNSAFE_CHARACTERS = ("{", "}", "=", "\n", "\r")


def reject_constant(name: str) -> Any:
    """Refuse NaN, Infinity and -Infinity, which are not valid JSON."""
    raise ValueError(f"Non-standard JSON constant: '{name}'")


class ValidationUtils:
    """Utility class for validating JSON input."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors)

        try:
            json.loads(json_string, parse_constant=reject_constant)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e}",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors)
        except RecursionError:
            errors.append(ValidationError(
                type=ErrorType.DEPTH,
                message="JSON nesting too deep to parse",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors)

        return ValidationResult(is_valid=True, errors=errors)

    @staticmethod
    def is_safe_token(text: str) -> bool:
        """Check that text contains no property format syntax characters."""
        return not any(char in text for char in UNSAFE_CHARACTERS)

    @staticmethod
    def find_unsafe_tokens(data: Any) -> List[str]:
        """
        Find keys and string values that would break the property syntax.

        Args:
            data: Parsed JSON data

        Returns:
            Paths of offending keys and values
        """
        unsafe = []
        # Explicit stack so deeply nested documents do not recurse
        stack: List[Tuple[str, Any]] = [("$", data)]

        while stack:
            path, node = stack.pop()
            children = []

            if isinstance(node, dict):
                for key, value in node.items():
                    child_path = f"{path}.{key}"
                    if not ValidationUtils.is_safe_token(key):
                        unsafe.append(child_path)
                    children.append((child_path, value))
            elif isinstance(node, list):
                children = [(f"{path}[{i}]", item) for i, item in enumerate(node)]
            elif isinstance(node, str) and not ValidationUtils.is_safe_token(node):
                unsafe.append(path)

            stack.extend(reversed(children))

        return unsafe
