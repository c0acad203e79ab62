"""Utility functions for the JSON property converter."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
