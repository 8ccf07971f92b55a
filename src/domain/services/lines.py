"""Pixel vertices for the close-price line and the moving-average line."""

from src.domain.models.chart import ChartScales, LinePoint
from src.domain.models.market import MovingAveragePoint, PriceRecord


def project_price_line(records: list[PriceRecord], scales: ChartScales) -> list[LinePoint]:
    """Close price of each record mapped to pixels."""
    return [
        LinePoint(x=scales.time(record.date), y=scales.price(record.close))
        for record in records
    ]


def project_moving_average(
    points: list[MovingAveragePoint],
    scales: ChartScales,
) -> list[LinePoint]:
    """Moving average mapped to pixels on the shared time/price scales."""
    return [
        LinePoint(x=scales.time(point.date), y=scales.price(point.average))
        for point in points
    ]
