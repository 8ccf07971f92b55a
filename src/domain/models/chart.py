"""Chart geometry models - viewport, scales and render-pass output."""

import math
from datetime import date, datetime, timedelta

from pydantic import BaseModel, Field

from src.domain.models.enums import BarColor
from src.domain.models.market import MovingAveragePoint, PriceRecord

SECONDS_PER_DAY = 86_400


class Margin(BaseModel):
    """Space reserved around the plot area for axes."""

    model_config = {"frozen": True}

    top: float = Field(default=50, ge=0)
    right: float = Field(default=50, ge=0)
    bottom: float = Field(default=50, ge=0)
    left: float = Field(default=50, ge=0)


class Viewport(BaseModel):
    """Inner plot area in pixels."""

    model_config = {"frozen": True}

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @classmethod
    def from_window(
        cls,
        window_width: float,
        window_height: float,
        margin: Margin | None = None,
    ) -> "Viewport":
        """Derive the plot area from the outer window size minus margins.

        Raises:
            ValueError: If the margins leave no room to draw
        """
        margin = margin or Margin()
        width = window_width - margin.left - margin.right
        height = window_height - margin.top - margin.bottom
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Window {window_width}x{window_height} too small for margins {margin}"
            )
        return cls(width=width, height=height)


def _interpolate(
    value: float,
    source: tuple[float, float],
    target: tuple[float, float],
) -> float:
    s0, s1 = source
    t0, t1 = target
    if s1 == s0:
        # Degenerate side - pin to the middle of the other side
        return (t0 + t1) / 2
    return t0 + (value - s0) / (s1 - s0) * (t1 - t0)


def to_day_number(value: date | datetime) -> float:
    """Continuous day count: proleptic ordinal plus the fraction of the day."""
    if isinstance(value, datetime):
        seconds = value.hour * 3600 + value.minute * 60 + value.second
        seconds += value.microsecond / 1_000_000
        return value.toordinal() + seconds / SECONDS_PER_DAY
    return float(value.toordinal())


def from_day_number(day_number: float) -> datetime:
    """Inverse of to_day_number (naive datetime)."""
    whole = math.floor(day_number)
    return datetime.fromordinal(whole) + timedelta(days=day_number - whole)


class LinearScale(BaseModel):
    """Linear mapping from a numeric domain to a pixel range.

    Not clamped: values outside the domain extrapolate.
    """

    model_config = {"frozen": True}

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: float) -> float:
        return _interpolate(float(value), self.domain, self.range)

    def invert(self, pixel: float) -> float:
        """Map a pixel position back into the domain."""
        return _interpolate(float(pixel), self.range, self.domain)


class TimeScale(BaseModel):
    """Linear mapping from calendar time to a pixel range."""

    model_config = {"frozen": True}

    domain: tuple[date, date]
    range: tuple[float, float]

    @property
    def day_domain(self) -> tuple[float, float]:
        """Domain as continuous day numbers."""
        return to_day_number(self.domain[0]), to_day_number(self.domain[1])

    def __call__(self, value: date | datetime) -> float:
        return _interpolate(to_day_number(value), self.day_domain, self.range)

    def invert(self, pixel: float) -> datetime:
        """Map a pixel position back to a point in time."""
        return from_day_number(_interpolate(float(pixel), self.range, self.day_domain))


class ChartScales(BaseModel):
    """The three axis scales of one render pass."""

    model_config = {"frozen": True}

    time: TimeScale
    price: LinearScale
    volume: LinearScale | None = None  # None when no day has volume


class LinePoint(BaseModel):
    """Pixel vertex of a drawn line."""

    model_config = {"frozen": True}

    x: float
    y: float


class VolumeBar(BaseModel):
    """One volume rectangle, growing up from the bottom of the plot."""

    model_config = {"frozen": True}

    date: date
    volume: int
    x: float
    y: float
    width: float = 1
    height: float
    color: BarColor


class FocusState(BaseModel):
    """Crosshair snapped to the record nearest the pointer."""

    model_config = {"frozen": True}

    record: PriceRecord
    x: float
    y: float
    horizontal_length: float  # crosshair arm from the point to the right edge
    vertical_length: float  # crosshair arm from the point down to the time axis
    legend: dict[str, str]


class ChartFrame(BaseModel):
    """Everything the renderer needs for one pass."""

    model_config = {"frozen": True}

    viewport: Viewport
    records: list[PriceRecord]
    moving_average: list[MovingAveragePoint]
    scales: ChartScales
    price_line: list[LinePoint]
    moving_average_line: list[LinePoint]
    volume_bars: list[VolumeBar]

    @property
    def is_empty(self) -> bool:
        """True when nothing survived series preparation."""
        return not self.records
