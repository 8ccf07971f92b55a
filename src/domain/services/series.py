"""Series preparation - turns loader rows into the chart's price series.

Two filters, applied in order:
1. Validity - date and all four prices present and positive (zero counts
   as missing), volume absent or non-negative
2. Date range - only records on or after the start date

Order is preserved; the input is expected oldest first and is not sorted here.
"""

from collections.abc import Iterable
from datetime import date

from src.domain.models.market import PriceRecord, RawQuote
from src.domain.rules import DEFAULT_START_DATE


def is_valid_record(raw: RawQuote) -> bool:
    """Check that a row can be plotted.

    Args:
        raw: Loader row

    Returns:
        True if date is present, open, high, low and close are all present
        and positive, and volume is missing or non-negative
    """
    if not raw.date:
        return False

    prices = (raw.high, raw.low, raw.open, raw.close)
    if any(price is None or price <= 0 for price in prices):
        return False

    return raw.volume is None or raw.volume >= 0


def to_price_record(raw: RawQuote) -> PriceRecord:
    """Promote a valid row to a PriceRecord.

    Raises:
        pydantic.ValidationError: If the row fails is_valid_record
    """
    return PriceRecord(
        date=raw.date,
        high=raw.high,
        low=raw.low,
        open=raw.open,
        close=raw.close,
        volume=raw.volume,
    )


def prepare_series(
    raws: Iterable[RawQuote],
    start_date: date = DEFAULT_START_DATE,
) -> list[PriceRecord]:
    """Filter loader rows down to the plotted series.

    Args:
        raws: Loader rows, oldest first (may contain nulls or bad values)
        start_date: Inclusive lower bound on the record date

    Returns:
        Valid records dated on or after start_date, in input order.
        Empty when nothing qualifies.
    """
    valid = [raw for raw in raws if is_valid_record(raw)]
    return [to_price_record(raw) for raw in valid if raw.date >= start_date]
