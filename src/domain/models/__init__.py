"""Domain models for the price chart."""

from src.domain.models.chart import (
    ChartFrame,
    ChartScales,
    FocusState,
    LinearScale,
    LinePoint,
    Margin,
    TimeScale,
    Viewport,
    VolumeBar,
)
from src.domain.models.enums import BarColor
from src.domain.models.market import MovingAveragePoint, PriceRecord, RawQuote

__all__ = [
    # Enums
    "BarColor",
    # Market data
    "RawQuote",
    "PriceRecord",
    "MovingAveragePoint",
    # Geometry
    "Margin",
    "Viewport",
    "LinearScale",
    "TimeScale",
    "ChartScales",
    "LinePoint",
    "VolumeBar",
    # Interaction & render output
    "FocusState",
    "ChartFrame",
]
