"""Yahoo chart JSON file adapter.

Reads the payload shape returned by Yahoo's v8 chart endpoint:

    {"chart": {"result": [{
        "timestamp": [...unix seconds...],
        "indicators": {"quote": [{"open": [...], "high": [...],
                                  "low": [...], "close": [...],
                                  "volume": [...]}]}
    }]}}

Each OHLCV array runs parallel to ``timestamp`` and may hold nulls.
"""

import json
from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any

from src.domain.interfaces.data_feed import ChartDataFeed
from src.domain.models.market import RawQuote
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

QUOTE_FIELDS = ("high", "low", "open", "close", "volume")


class ChartDataError(ValueError):
    """Raised when a chart payload does not have the expected shape."""


def timestamp_to_date(seconds: int | float | None) -> date | None:
    """UNIX seconds to the UTC calendar date."""
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc).date()


def _to_decimal(value: float | int | None) -> Decimal | None:
    if value is None:
        return None
    return Decimal(str(round(value, 6)))


def _to_volume(value: float | int | None) -> int | None:
    if value is None:
        return None
    return int(value)


def parse_yahoo_chart(payload: dict[str, Any]) -> list[RawQuote]:
    """Convert a Yahoo chart payload into loader rows.

    Args:
        payload: Decoded JSON document

    Returns:
        List of RawQuote objects in source order

    Raises:
        ChartDataError: If the result/quote structure is missing or the
            arrays are not parallel to the timestamps
    """
    try:
        result = payload["chart"]["result"][0]
        timestamps = result["timestamp"]
        quote = result["indicators"]["quote"][0]
    except (KeyError, IndexError, TypeError) as e:
        raise ChartDataError(f"Not a Yahoo chart payload: missing {e}") from e

    columns: dict[str, list] = {}
    for field in QUOTE_FIELDS:
        values = quote.get(field) or [None] * len(timestamps)
        if len(values) != len(timestamps):
            raise ChartDataError(
                f"'{field}' has {len(values)} values for {len(timestamps)} timestamps"
            )
        columns[field] = values

    return [
        RawQuote(
            date=timestamp_to_date(ts),
            high=_to_decimal(columns["high"][i]),
            low=_to_decimal(columns["low"][i]),
            open=_to_decimal(columns["open"][i]),
            close=_to_decimal(columns["close"][i]),
            volume=_to_volume(columns["volume"][i]),
        )
        for i, ts in enumerate(timestamps)
    ]


class YahooChartFileFeed(ChartDataFeed):
    """Static dataset stored as a Yahoo chart JSON file."""

    def __init__(self, path: Path | str):
        """Initialize file feed.

        Args:
            path: Location of the JSON file
        """
        self._path = Path(path)

    @property
    def source_name(self) -> str:
        """Return data source name."""
        return "yahoo-file"

    @property
    def path(self) -> Path:
        """File this feed reads."""
        return self._path

    def get_quotes(self) -> list[RawQuote]:
        """Read and parse the file.

        Raises:
            FileNotFoundError: If the file does not exist
            ChartDataError: If the JSON is not a chart payload
        """
        with open(self._path, encoding="utf-8") as f:
            try:
                payload = json.load(f)
            except json.JSONDecodeError as e:
                raise ChartDataError(f"Invalid JSON in {self._path}: {e}") from e

        quotes = parse_yahoo_chart(payload)
        logger.info(f"Loaded {len(quotes)} rows from {self._path}")
        return quotes
