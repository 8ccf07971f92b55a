"""Crosshair placement for the focused record.

The crosshair is anchored on the record's close. Its horizontal arm runs
right to the price axis, its vertical arm runs down to the time axis.
"""

from datetime import date, datetime

from src.domain.models.chart import ChartScales, FocusState, Viewport
from src.domain.models.market import PriceRecord
from src.domain.rules import LEGEND_DATE_FORMAT
from src.domain.services.legend import format_legend
from src.domain.services.locator import locate_nearest


def build_focus(
    record: PriceRecord,
    scales: ChartScales,
    viewport: Viewport,
    date_format: str = LEGEND_DATE_FORMAT,
) -> FocusState:
    """Place the crosshair on a record and format its legend.

    Args:
        record: Record to focus
        scales: Scales of the current render pass
        viewport: Plot area
        date_format: strftime pattern for the legend date

    Returns:
        FocusState with anchor, arm lengths and legend
    """
    x = scales.time(record.date)
    y = scales.price(record.close)

    return FocusState(
        record=record,
        x=x,
        y=y,
        horizontal_length=viewport.width - x,
        vertical_length=viewport.height - y,
        legend=format_legend(record, date_format),
    )


def focus_at(
    records: list[PriceRecord],
    query: date | datetime,
    scales: ChartScales,
    viewport: Viewport,
    date_format: str = LEGEND_DATE_FORMAT,
) -> FocusState | None:
    """Snap the crosshair to the record nearest query.

    Returns:
        FocusState, or None when the series is empty
    """
    record = locate_nearest(records, query)
    if record is None:
        return None
    return build_focus(record, scales, viewport, date_format)
