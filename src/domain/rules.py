"""Chart rules configuration.

Fixed constants of the daily price chart, kept explicit and testable.
Runtime overrides (start date, window, viewport) come from settings and
are passed into the services as parameters.
"""

from datetime import date
from decimal import Decimal
from typing import Final

# =============================================================================
# SERIES PREPARATION
# =============================================================================

# Records dated before this are dropped from the chart
DEFAULT_START_DATE: Final[date] = date(2018, 1, 1)


# =============================================================================
# MOVING AVERAGE
# =============================================================================

# 50-day SMA expressed as "49 prior points plus the current one"
MOVING_AVERAGE_PRIOR_POINTS: Final[int] = 49


# =============================================================================
# SCALES
# =============================================================================

# Price axis starts this many price units under the lowest close; no padding on top
PRICE_FLOOR_PADDING: Final[Decimal] = Decimal("5")

# Volume bars use the bottom quarter of the plot
VOLUME_BAND_FRACTION: Final[float] = 0.25

# Width of a single volume bar in pixels
VOLUME_BAR_WIDTH: Final[float] = 1.0


# =============================================================================
# LEGEND
# =============================================================================

# Fields rendered with two decimals; anything else uses its plain string form
PRICE_FIELDS: Final[frozenset[str]] = frozenset({"open", "high", "low", "close"})

PRICE_DECIMALS: Final[Decimal] = Decimal("0.01")

# Locale's date representation
LEGEND_DATE_FORMAT: Final[str] = "%x"

# Shown for a field without a value (e.g. no volume that day)
MISSING_VALUE_TEXT: Final[str] = "null"
