"""Data feed interface (port) - defines where the chart's raw rows come from."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.market import RawQuote


class ChartDataFeed(ABC):
    """Abstract interface for a static daily OHLCV dataset.

    This is a port in Clean Architecture - the chart only needs ordered
    rows, not how they are stored or fetched.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the name of this data source (e.g., 'yahoo-file')."""
        ...

    @abstractmethod
    def get_quotes(self) -> list["RawQuote"]:
        """Load every daily row of the dataset.

        Returns:
            List of RawQuote objects, oldest first. Fields may be null.
        """
        ...
