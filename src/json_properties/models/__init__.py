"""Data models for the JSON property converter."""

from .block import Block, BlockState

__all__ = ["Block", "BlockState"]
