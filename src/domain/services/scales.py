"""Scale builder - data domain to pixel range for the three chart axes.

- Time:   [first date, last date]          -> [0, width]
- Price:  [min close - 5, max close]       -> [height, 0]      (inverted)
- Volume: [min volume, max volume]         -> [height, 3/4 height]

Volume only counts days that traded; with none the volume scale is omitted.
An empty series yields degenerate scales that map everything to the middle
of their range instead of failing.
"""

from datetime import date

from src.domain.models.chart import ChartScales, LinearScale, TimeScale, Viewport
from src.domain.models.market import PriceRecord
from src.domain.rules import PRICE_FLOOR_PADDING, VOLUME_BAND_FRACTION

_EMPTY_DATE = date(1970, 1, 1)


def build_time_scale(records: list[PriceRecord], viewport: Viewport) -> TimeScale:
    """Time scale over the series' date span."""
    if not records:
        return TimeScale(domain=(_EMPTY_DATE, _EMPTY_DATE), range=(0, viewport.width))

    dates = [record.date for record in records]
    return TimeScale(domain=(min(dates), max(dates)), range=(0, viewport.width))


def build_price_scale(records: list[PriceRecord], viewport: Viewport) -> LinearScale:
    """Price scale over closes, padded below the lowest close only.

    Args:
        records: Price series
        viewport: Plot area

    Returns:
        LinearScale with domain (min close - padding, max close)
    """
    if not records:
        return LinearScale(domain=(0, 0), range=(viewport.height, 0))

    closes = [record.close for record in records]
    return LinearScale(
        domain=(float(min(closes) - PRICE_FLOOR_PADDING), float(max(closes))),
        range=(viewport.height, 0),
    )


def build_volume_scale(
    records: list[PriceRecord],
    viewport: Viewport,
) -> LinearScale | None:
    """Volume scale for the bottom band of the plot.

    Args:
        records: Price series (days without volume are ignored)
        viewport: Plot area

    Returns:
        LinearScale, or None when no record has volume
    """
    volumes = [record.volume for record in records if record.has_volume]
    if not volumes:
        return None

    band_top = viewport.height * (1 - VOLUME_BAND_FRACTION)
    return LinearScale(
        domain=(min(volumes), max(volumes)),
        range=(viewport.height, band_top),
    )


def build_scales(records: list[PriceRecord], viewport: Viewport) -> ChartScales:
    """Build all axis scales for one render pass.

    The moving average shares the time and price scales, so only the
    price series feeds the domains.
    """
    return ChartScales(
        time=build_time_scale(records, viewport),
        price=build_price_scale(records, viewport),
        volume=build_volume_scale(records, viewport),
    )
