"""Tag change types consumed by the report builder."""

from .Block import Block
from .DEFAULT_TAG_GROUPS import DEFAULT_TAG_GROUPS
from .Tag import Tag
from .TagChangeAccumulator import TagChangeAccumulator
from .TagDiff import TagDiff
from .TaggedBlock import TaggedBlock
from .UpdatedTag import UpdatedTag

__all__ = [
    "DEFAULT_TAG_GROUPS",
    "Block",
    "Tag",
    "TagChangeAccumulator",
    "TagDiff",
    "TaggedBlock",
    "UpdatedTag",
]
