"""File I/O operations for the JSON property converter."""

from .file_reader import FileReader
from .file_writer import FileWriter

__all__ = ["FileReader", "FileWriter"]
