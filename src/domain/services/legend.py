"""Legend text for the focused record."""

from decimal import ROUND_HALF_UP

from src.domain.models.market import PriceRecord
from src.domain.rules import (
    LEGEND_DATE_FORMAT,
    MISSING_VALUE_TEXT,
    PRICE_DECIMALS,
    PRICE_FIELDS,
)


def format_field(name: str, value: object, date_format: str = LEGEND_DATE_FORMAT) -> str:
    """Display string for a single record field."""
    if name == "date":
        return value.strftime(date_format)
    if name in PRICE_FIELDS:
        return str(value.quantize(PRICE_DECIMALS, rounding=ROUND_HALF_UP))
    if value is None:
        return MISSING_VALUE_TEXT
    return str(value)


def format_legend(
    record: PriceRecord,
    date_format: str = LEGEND_DATE_FORMAT,
) -> dict[str, str]:
    """Field -> display text, in the record's field order.

    - date: locale date string
    - open/high/low/close: two decimals
    - anything else: plain str() of the value, "null" when missing

    Args:
        record: Focused record
        date_format: strftime pattern for the date

    Returns:
        Ordered mapping of field name to text
    """
    return {
        name: format_field(name, getattr(record, name), date_format)
        for name in type(record).model_fields
    }


def legend_lines(
    record: PriceRecord,
    date_format: str = LEGEND_DATE_FORMAT,
) -> list[str]:
    """Legend rows as "field: value" strings, top to bottom."""
    return [f"{name}: {text}" for name, text in format_legend(record, date_format).items()]
