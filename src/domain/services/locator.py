"""Nearest-point lookup that drives the crosshair and legend.

Bisects the ascending date sequence, then picks the closer of the two
records straddling the query. Queries outside the series snap to the
first or last record.
"""

from bisect import bisect_left
from datetime import date, datetime

from src.domain.models.chart import to_day_number
from src.domain.models.market import PriceRecord


def bisect_dates(
    records: list[PriceRecord],
    query: date | datetime,
    lo: int = 0,
) -> int:
    """Left insertion point of query in the ascending record dates.

    Args:
        records: Price series, oldest first
        query: Point in time to insert
        lo: Lowest index to return

    Returns:
        Index i such that every record before i is dated before query
    """
    return bisect_left(
        records,
        to_day_number(query),
        lo=lo,
        key=lambda record: to_day_number(record.date),
    )


def locate_nearest(
    records: list[PriceRecord],
    query: date | datetime,
) -> PriceRecord | None:
    """Find the record whose date is closest to query.

    Ties between two equally distant neighbours go to the later record.

    Args:
        records: Price series, oldest first
        query: Data-space time under the pointer

    Returns:
        Closest record, or None for an empty series
    """
    if not records:
        return None

    i = bisect_dates(records, query, lo=1)
    if i >= len(records):
        return records[-1]

    earlier = records[i - 1]
    later = records[i]
    target = to_day_number(query)

    if target - to_day_number(earlier.date) >= to_day_number(later.date) - target:
        return later
    return earlier
