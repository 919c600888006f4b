"""Block protocol."""

from typing import Protocol

from .Tag import Tag
from .TagDiff import TagDiff


class Block(Protocol):
    """A taggable resource as reported by the scanning process."""

    def get_file_path(self) -> str: ...

    def get_resource_id(self) -> str: ...

    def get_trace_id(self) -> str: ...

    def get_new_tags(self) -> list[Tag]: ...

    def calculate_tags_diff(self) -> TagDiff: ...
