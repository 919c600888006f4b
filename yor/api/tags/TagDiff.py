"""Tag diff dataclass."""

from dataclasses import dataclass, field

from .Tag import Tag
from .UpdatedTag import UpdatedTag


@dataclass(frozen=True)
class TagDiff:
    """Decomposition of a block's tag change into added and updated tags."""

    added: list[Tag] = field(default_factory=list)
    updated: list[UpdatedTag] = field(default_factory=list)
