"""Cell merging for report tables."""

from collections.abc import Sequence


def merge_cells(rows: Sequence[Sequence[str]], columns: Sequence[int]) -> list[tuple[list[str], bool]]:
    """Blank out merged-column cells of rows that continue the row above.

    A row continues the row above only when every merged column repeats the
    same non-empty value. Rich draws row lines across the whole table, so a
    row that only partly repeats keeps all of its cells.

    Args:
        rows: Table rows, all of the same width
        columns: Indexes of the columns to merge

    Returns:
        One ``(cells, continued)`` pair per row; ``continued`` is True when
        the row's merged cells were blanked into the row above.
    """
    merged: list[tuple[list[str], bool]] = []
    previous: Sequence[str] | None = None
    for row in rows:
        cells = list(row)
        continued = (
            previous is not None
            and bool(columns)
            and all(row[column] != "" and row[column] == previous[column] for column in columns)
        )
        if continued:
            for column in columns:
                cells[column] = ""
        merged.append((cells, continued))
        previous = row
    return merged
