"""Tag dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """A single key/value tag, optionally with a catalog description."""

    key: str
    value: str = ""
    description: str = ""

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> str:
        return self.value

    def get_description(self) -> str:
        return self.description
