"""In-memory block implementation."""

from dataclasses import dataclass, field

from .Tag import Tag
from .TagDiff import TagDiff
from .UpdatedTag import UpdatedTag


@dataclass(frozen=True)
class TaggedBlock:
    """Block holding its previous and current tags.

    Tag order follows the insertion order of ``tags``.
    """

    file_path: str
    resource_id: str
    trace_id: str
    tags: dict[str, str] = field(default_factory=dict)
    previous_tags: dict[str, str] = field(default_factory=dict)

    def get_file_path(self) -> str:
        return self.file_path

    def get_resource_id(self) -> str:
        return self.resource_id

    def get_trace_id(self) -> str:
        return self.trace_id

    def get_new_tags(self) -> list[Tag]:
        return [Tag(key=key, value=value) for key, value in self.tags.items()]

    def calculate_tags_diff(self) -> TagDiff:
        """Compare current tags against the previous trace.

        Tags missing from the previous state are added; tags present with a
        different value are updated. Removed tags are not reported.
        """
        added: list[Tag] = []
        updated: list[UpdatedTag] = []
        for key, value in self.tags.items():
            if key not in self.previous_tags:
                added.append(Tag(key=key, value=value))
            elif self.previous_tags[key] != value:
                updated.append(UpdatedTag(key=key, prev_value=self.previous_tags[key], new_value=value))
        return TagDiff(added=added, updated=updated)
