"""Read-only snapshot of the tag change accumulator."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .Block import Block
from .TaggedBlock import TaggedBlock

_SECTIONS = ("scanned", "new", "updated")


@dataclass(frozen=True)
class TagChangeAccumulator:
    """Blocks collected by one scan.

    ``new_block_traces`` and ``updated_block_traces`` are subsets of
    ``scanned_blocks``; enumeration order is the scan order.
    """

    scanned_blocks: tuple[Block, ...] = ()
    new_block_traces: tuple[Block, ...] = ()
    updated_block_traces: tuple[Block, ...] = ()

    @classmethod
    def from_blocks(
        cls,
        scanned: Sequence[Block] = (),
        new: Sequence[Block] = (),
        updated: Sequence[Block] = (),
    ) -> "TagChangeAccumulator":
        return cls(
            scanned_blocks=tuple(scanned),
            new_block_traces=tuple(new),
            updated_block_traces=tuple(updated),
        )

    @classmethod
    def from_dict(cls, data: Any) -> "TagChangeAccumulator":
        """Load a snapshot written by the scanning process.

        Expected shape::

            {"scanned": [block, ...], "new": [block, ...], "updated": [block, ...]}

        where each block is ``{"file", "resourceId", "traceId", "tags",
        "previousTags"}``. Missing sections are empty.

        Raises:
            ValueError: If the snapshot does not match the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"snapshot must be an object (found: {type(data).__name__})")

        unknown = sorted(set(data) - set(_SECTIONS))
        if unknown:
            raise ValueError(f"snapshot has unknown sections: {', '.join(unknown)}")

        sections: dict[str, list[TaggedBlock]] = {}
        for section in _SECTIONS:
            raw_blocks = data.get(section, [])
            if not isinstance(raw_blocks, list):
                raise ValueError(f"{section} must be a list (found: {type(raw_blocks).__name__})")
            sections[section] = [_parse_block(raw, f"{section}[{i}]") for i, raw in enumerate(raw_blocks)]

        return cls.from_blocks(
            scanned=sections["scanned"],
            new=sections["new"],
            updated=sections["updated"],
        )


def _parse_block(raw: Any, where: str) -> TaggedBlock:
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be an object (found: {type(raw).__name__})")

    values: dict[str, str] = {}
    for name in ("file", "resourceId", "traceId"):
        value = raw.get(name)
        if not isinstance(value, str):
            raise ValueError(f"{where}.{name} must be a string (found: {type(value).__name__})")
        values[name] = value

    return TaggedBlock(
        file_path=values["file"],
        resource_id=values["resourceId"],
        trace_id=values["traceId"],
        tags=_parse_tags(raw.get("tags", {}), f"{where}.tags"),
        previous_tags=_parse_tags(raw.get("previousTags", {}), f"{where}.previousTags"),
    )


def _parse_tags(raw: Any, where: str) -> dict[str, str]:
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be an object (found: {type(raw).__name__})")
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ValueError(f"{where}.{key} must be a string (found: {type(value).__name__})")
    return dict(raw)
