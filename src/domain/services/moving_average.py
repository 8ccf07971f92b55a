"""Simple moving average of closing prices.

For index i the window is closes[max(0, i - prior_points) : i + 1].
The first points average over a shorter window instead of being left empty,
so the output always lines up 1:1 with the input series.

The 50-day SMA uses prior_points=49.
"""

from decimal import Decimal

from src.domain.models.market import MovingAveragePoint, PriceRecord
from src.domain.rules import MOVING_AVERAGE_PRIOR_POINTS


def window_bounds(index: int, prior_points: int) -> tuple[int, int]:
    """Slice bounds [start, end) of the trailing window ending at index.

    Args:
        index: Position of the current record
        prior_points: How many earlier records join the current one

    Returns:
        Tuple of (start, end) suitable for slicing
    """
    return max(0, index - prior_points), index + 1


def calculate_moving_average(
    records: list[PriceRecord],
    prior_points: int = MOVING_AVERAGE_PRIOR_POINTS,
) -> list[MovingAveragePoint]:
    """Calculate the SMA series with a running sum.

    Args:
        records: Price series, oldest first
        prior_points: Earlier records included in each window (>= 0)

    Returns:
        One MovingAveragePoint per record

    Raises:
        ValueError: If prior_points is negative
    """
    if prior_points < 0:
        raise ValueError(f"prior_points must be >= 0, got {prior_points}")

    results: list[MovingAveragePoint] = []
    running = Decimal("0")

    for i, record in enumerate(records):
        running += record.close
        start, end = window_bounds(i, prior_points)

        # Drop the close that just slid out of the window
        if start > 0:
            running -= records[start - 1].close

        results.append(
            MovingAveragePoint(date=record.date, average=running / (end - start))
        )

    return results
