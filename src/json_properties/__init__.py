"""
JSON Properties - JSON to Gameplay3D property file converter.

Maps JSON objects and arrays onto nested named blocks and JSON scalars
onto ``key = value`` lines.
"""

__version__ = "1.0.0"

from .json_properties import JSONPropertyConverter
from .converter import PropertyConverter
from .models import Block, BlockState
from .types import ArrayNaming, ConversionResult, EmissionKind, ErrorType, ProcessingError

__all__ = [
    "JSONPropertyConverter",
    "PropertyConverter",
    "Block",
    "BlockState",
    "ArrayNaming",
    "ConversionResult",
    "EmissionKind",
    "ErrorType",
    "ProcessingError",
]
