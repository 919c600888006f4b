"""Console factory for report output."""

from rich.console import Console

from ..config.ColorConfig import ColorConfig


def _new_console(colors: ColorConfig) -> Console:
    """Create a stdout console honoring the color flag."""
    return Console(no_color=colors.no_color, highlight=False)
