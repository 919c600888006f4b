"""Updated tag dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UpdatedTag:
    """A tag whose value changed between the previous trace and this pass."""

    key: str
    prev_value: str
    new_value: str
