"""Domain enumerations for the price chart."""

from enum import Enum


class BarColor(str, Enum):
    """Volume bar direction tag."""

    UP = "up"  # close held or rose vs previous bar
    DOWN = "down"  # previous close was higher

    @property
    def hex(self) -> str:
        """Display colour for the tag."""
        return _BAR_COLORS[self]


_BAR_COLORS = {
    BarColor.UP: "#03a678",
    BarColor.DOWN: "#c0392b",
}
