"""Tests for data models."""

import pytest
from dataclasses import FrozenInstanceError
from json_properties.models import Block, BlockState
from json_properties.types import EmissionKind


class TestBlock:
    """Tests for Block class."""

    def test_root_block(self):
        """Test the synthetic root block."""
        root = Block.root()

        assert root.name == ""
        assert root.depth == -1
        assert root.is_root

    def test_child_block(self):
        """Test creating nested blocks."""
        child = Block.root().child("scene")
        grandchild = child.child("node")

        assert child.name == "scene"
        assert child.depth == 0
        assert not child.is_root
        assert grandchild.depth == 1

    def test_indentation(self):
        """Test name and content indentation."""
        block = Block(name="node", depth=2)

        assert block.indentation(4) == " " * 8
        assert block.content_indentation(4) == " " * 12
        assert Block.root().content_indentation(4) == ""

    def test_synthesize_child_name(self):
        """Test anonymous child naming."""
        block = Block(name="lights", depth=0)

        assert block.synthesize_child_name(BlockState()) == "lights_0"
        assert block.synthesize_child_name(BlockState(child_block_count=3)) == "lights_3"
        assert Block.root().synthesize_child_name(BlockState(child_block_count=1)) == "_1"

    def test_name_is_immutable(self):
        """Test that a block's name cannot change."""
        block = Block(name="scene", depth=0)

        with pytest.raises(FrozenInstanceError):
            block.name = "other"

    def test_invalid_depth(self):
        """Test validation of depth."""
        with pytest.raises(ValueError, match="depth must be >= -1"):
            Block(name="x", depth=-2)

    def test_named_root_rejected(self):
        """Test validation of the root name."""
        with pytest.raises(ValueError, match="root block cannot have a name"):
            Block(name="x", depth=-1)


class TestBlockState:
    """Tests for BlockState class."""

    def test_initial_state(self):
        """Test a fresh block state."""
        state = BlockState()

        assert state.last_emission == EmissionKind.NONE
        assert state.child_block_count == 0
        assert not state.needs_separator_before_block
        assert not state.needs_separator_before_value

    def test_after_value(self):
        """Test state after a value line."""
        state = BlockState().after_value()

        assert state.last_emission == EmissionKind.VALUE
        assert state.child_block_count == 0
        assert state.needs_separator_before_block
        assert not state.needs_separator_before_value

    def test_after_block(self):
        """Test state after a child block."""
        state = BlockState().after_block().after_block()

        assert state.last_emission == EmissionKind.BLOCK
        assert state.child_block_count == 2
        assert state.needs_separator_before_block
        assert state.needs_separator_before_value

    def test_transitions_return_new_states(self):
        """Test that states are never mutated."""
        original = BlockState()
        original.after_block()

        assert original == BlockState()
