"""Build a report from a tag change accumulator snapshot."""

from ..tags.Block import Block
from ..tags.TagChangeAccumulator import TagChangeAccumulator
from .Report import Report
from .ReportSummary import ReportSummary
from .TagRecord import TagRecord


def build_report(accumulator: TagChangeAccumulator) -> Report:
    """Flatten the accumulator's new and updated blocks into tag records.

    New blocks contribute every current tag in the block's own order. Updated
    blocks contribute their added tags, then their changed tags, each group
    sorted by tag key. Blocks keep the accumulator's order.

    The summary counts distinct resources behind the records, not records.

    Args:
        accumulator: Snapshot of one scan; not modified

    Returns:
        A new, immutable Report
    """
    new_resource_tags: list[TagRecord] = []
    for block in accumulator.new_block_traces:
        for tag in block.get_new_tags():
            new_resource_tags.append(_record(block, tag.get_key(), "", tag.get_value()))

    updated_resource_tags: list[TagRecord] = []
    for block in accumulator.updated_block_traces:
        diff = block.calculate_tags_diff()
        for tag in sorted(diff.added, key=lambda t: t.get_key()):
            updated_resource_tags.append(_record(block, tag.get_key(), "", tag.get_value()))
        for change in sorted(diff.updated, key=lambda u: u.key):
            updated_resource_tags.append(_record(block, change.key, change.prev_value, change.new_value))

    return Report(
        summary=ReportSummary(
            scanned=len(accumulator.scanned_blocks),
            new_resources=_count_resources(new_resource_tags),
            updated_resources=_count_resources(updated_resource_tags),
        ),
        new_resource_tags=tuple(new_resource_tags),
        updated_resource_tags=tuple(updated_resource_tags),
    )


def _record(block: Block, key: str, old_value: str, updated_value: str) -> TagRecord:
    return TagRecord(
        file=block.get_file_path(),
        resource_id=block.get_resource_id(),
        key=key,
        old_value=old_value,
        updated_value=updated_value,
        yor_trace_id=block.get_trace_id(),
    )


def _count_resources(records: list[TagRecord]) -> int:
    return len({record.resource_id for record in records})
