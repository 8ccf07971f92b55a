"""Market data domain models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class RawQuote(BaseModel):
    """One daily row as produced by a loader - any field may be missing."""

    model_config = {"frozen": True}

    date: date | None  # required, may be null
    high: Decimal | None = None
    low: Decimal | None = None
    open: Decimal | None = None
    close: Decimal | None = None
    volume: int | None = None


class PriceRecord(BaseModel):
    """Daily OHLCV record - immutable value object.

    Field order is the order the legend displays them in.
    """

    model_config = {"frozen": True}

    date: date
    high: Decimal = Field(..., gt=0)
    low: Decimal = Field(..., gt=0)
    open: Decimal = Field(..., gt=0)
    close: Decimal = Field(..., gt=0)
    volume: int | None = Field(default=None, ge=0)

    @property
    def has_volume(self) -> bool:
        """True when the day carries trading volume (not null, not zero)."""
        return self.volume is not None and self.volume != 0


class MovingAveragePoint(BaseModel):
    """Simple moving average of closes at one record."""

    model_config = {"frozen": True}

    date: date
    average: Decimal
