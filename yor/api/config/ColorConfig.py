"""Terminal color configuration for report rendering."""

from dataclasses import dataclass

from .ReportConfig import ReportConfig


@dataclass(frozen=True)
class ColorConfig:
    """Rich style names used by the tabular renderer.

    With ``no_color`` set, renderers apply no styles at all; table layout is
    unaffected.
    """

    no_color: bool = False
    banner: str = "magenta"
    header: str = "bold cyan"
    scanned: str = "blue"
    new: str = "yellow"
    updated: str = "green"
    tag_key: str = "bold"
    old_value: str = "red"
    new_value: str = "green"

    @classmethod
    def from_report_config(cls, cfg: ReportConfig) -> "ColorConfig":
        """Build color config from the report section."""
        return cls(no_color=cfg.no_color)

    def style(self, name: str) -> str:
        """Return the style for ``name``, or an empty style when colors are off."""
        if self.no_color:
            return ""
        return getattr(self, name)
