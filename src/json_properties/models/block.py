"""Block model implementation."""

from dataclasses import dataclass, replace
from ..types import EmissionKind


ROOT_DEPTH = -1


@dataclass(frozen=True)
class Block:
    """
    A named, brace-delimited scope of the property output.

    The root block has an empty name and a virtual depth of -1; it is
    never emitted itself, so its children start at depth 0.
    """

    name: str
    depth: int

    def __post_init__(self):
        """Validate block after initialization."""
        if self.depth < ROOT_DEPTH:
            raise ValueError("depth must be >= -1")

        if self.depth == ROOT_DEPTH and self.name:
            raise ValueError("root block cannot have a name")

    @classmethod
    def root(cls) -> 'Block':
        """Create the synthetic root block."""
        return cls(name="", depth=ROOT_DEPTH)

    @property
    def is_root(self) -> bool:
        return self.depth == ROOT_DEPTH

    def child(self, name: str) -> 'Block':
        """Create a block nested one level below this one."""
        return Block(name=name, depth=self.depth + 1)

    def synthesize_child_name(self, state: 'BlockState') -> str:
        """Name for an anonymous child, unique among this block's children."""
        return f"{self.name}_{state.child_block_count}"

    def indentation(self, width: int) -> str:
        """Indent for this block's name and brace lines."""
        return " " * (self.depth * width)

    def content_indentation(self, width: int) -> str:
        """Indent for value lines inside this block."""
        return " " * ((self.depth + 1) * width)


@dataclass(frozen=True)
class BlockState:
    """
    Formatting state of a block during traversal.

    Instances are immutable; each emission returns a successor state that
    the converter threads back up to the caller.
    """

    last_emission: EmissionKind = EmissionKind.NONE
    child_block_count: int = 0

    def after_value(self) -> 'BlockState':
        return replace(self, last_emission=EmissionKind.VALUE)

    def after_block(self) -> 'BlockState':
        return replace(
            self,
            last_emission=EmissionKind.BLOCK,
            child_block_count=self.child_block_count + 1
        )

    @property
    def needs_separator_before_block(self) -> bool:
        return self.last_emission != EmissionKind.NONE

    @property
    def needs_separator_before_value(self) -> bool:
        return self.last_emission == EmissionKind.BLOCK
