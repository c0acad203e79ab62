"""Error handling implementation for the JSON property converter."""

import logging
import os
from pathlib import Path
from typing import Optional, Union
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


PathLike = Union[str, Path]


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for JSON property converter operations.

    Validates inputs and output locations before any file is touched, and
    maps processing errors to a single human-readable message.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        return ValidationUtils.validate_json_string(input_data)

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and suggest a remedy.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with the message and a suggested action
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.DEPTH:
            action = "Reduce the nesting depth of the input document or raise max_depth."
        elif error.error_type == ErrorType.FILESYSTEM:
            action = "Check that the input file exists and the output location is writable."
        elif error.error_type == ErrorType.PATH:
            action = "Check the input and output paths."
        else:
            action = "Fix the JSON syntax error at the reported location."

        return ErrorResponse(
            error_type=error.error_type,
            message=str(error),
            suggested_action=action
        )

    def validate_input_path(self, path: PathLike) -> ValidationResult:
        """
        Validate that the input path names a readable file.

        Args:
            path: Input file path

        Returns:
            ValidationResult with validation details
        """
        errors = []
        input_path = Path(path)

        if not str(path):
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message="Input path cannot be empty",
                location="input"
            ))
        elif not input_path.exists():
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Failed to open input file: {path} does not exist",
                location="input"
            ))
        elif not input_path.is_file():
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Failed to open input file: {path} is not a file",
                location="input"
            ))
        elif not os.access(input_path, os.R_OK):
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Failed to open input file: {path} is not readable",
                location="input"
            ))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def validate_output_path(self, path: PathLike) -> ValidationResult:
        """
        Validate that the output path can be created or overwritten.

        Args:
            path: Output file path

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        output_path = Path(path)

        if not str(path):
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message="Output path cannot be empty",
                location="output"
            ))
            return ValidationResult(is_valid=False, errors=errors)

        parent = output_path.parent
        if output_path.is_dir():
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Output path is a directory: {path}",
                location="output"
            ))
        elif not parent.is_dir():
            errors.append(ValidationError(
                type=ErrorType.PATH,
                message=f"Output directory does not exist: {parent}",
                location="output"
            ))
        elif output_path.exists():
            warnings.append(f"Output file {path} will be overwritten")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )
