"""Core type definitions for the JSON property converter."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, TextIO


class EmissionKind(Enum):
    """Most recent thing written inside a block."""
    NONE = "none"
    VALUE = "value"
    BLOCK = "block"


class ArrayNaming(Enum):
    """Naming strategy for namespace-type array elements."""
    SYNTHESIZE = "synthesize"
    FIRST_KEY = "first-key"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    PATH = "path"
    DEPTH = "depth"
    FILESYSTEM = "filesystem"


@dataclass
class ConversionResult:
    """Result of a file conversion."""
    success: bool
    output_path: str
    line_count: int = 0
    block_count: int = 0
    value_count: int = 0
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str] = field(default_factory=list)


@dataclass
class ErrorResponse:
    """Response for error handling."""
    error_type: ErrorType
    message: str
    suggested_action: str


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class ConverterInterface(ABC):
    """Abstract interface for JSON tree to property text converters."""

    @abstractmethod
    def iter_lines(self, data: Any) -> Iterator[str]:
        """Yield output lines for a parsed JSON tree."""
        pass

    @abstractmethod
    def convert(self, data: Any, sink: TextIO) -> int:
        """Write output lines to a text sink and return the line count."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
