#!/usr/bin/env python3
"""Render the daily price chart data and print a summary.

Usage:
    python scripts/render_chart.py                               # Uses CHART_DATA_FILE
    python scripts/render_chart.py data/aapl.json                # Explicit dataset
    python scripts/render_chart.py --at 2018-03-01               # Legend at a date
    python scripts/render_chart.py --start 2017-06-01 --window 19
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

# Add src to path and load environment
sys.path.insert(0, str(Path(__file__).parent.parent))
load_dotenv(Path(__file__).parent.parent / ".env")

from src.adapters.data_feeds.yahoo_chart_feed import ChartDataError, YahooChartFileFeed
from src.application.workflows.chart_session import ChartSession
from src.application.workflows.render_workflow import RenderWorkflow
from src.domain.models.enums import BarColor
from src.domain.services.legend import legend_lines
from src.infrastructure.config import get_settings
from src.infrastructure.logging import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render daily OHLCV chart data")
    parser.add_argument("data_file", nargs="?", type=Path, help="Yahoo chart JSON file")
    parser.add_argument("--start", type=date.fromisoformat, help="First date to plot (YYYY-MM-DD)")
    parser.add_argument(
        "--window",
        type=int,
        help="Earlier points in each moving-average window (49 = 50-day SMA)",
    )
    parser.add_argument("--at", type=date.fromisoformat, help="Print the legend nearest this date")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    feed = YahooChartFileFeed(args.data_file or settings.data_file)
    try:
        quotes = feed.get_quotes()
    except (FileNotFoundError, ChartDataError) as e:
        logger.error(f"Cannot load {feed.path}: {e}")
        return 1

    workflow = RenderWorkflow(
        start_date=args.start or settings.start_date,
        prior_points=args.window if args.window is not None else settings.moving_average_prior_points,
    )
    session = ChartSession(
        quotes,
        settings.viewport(),
        workflow=workflow,
        date_format=settings.legend_date_format,
    )
    frame = session.frame

    print("=" * 60)
    print(f"DAILY CHART - {feed.path}")
    print("=" * 60)

    if frame.is_empty:
        print("No plottable records.")
        return 0

    first, last = frame.records[0], frame.records[-1]
    ups = sum(1 for bar in frame.volume_bars if bar.color == BarColor.UP)
    downs = len(frame.volume_bars) - ups

    print(f"Records:        {len(frame.records)} ({first.date} -> {last.date})")
    print(f"Last close:     {last.close}")
    print(f"Last SMA:       {frame.moving_average[-1].average:.2f}")
    print(f"Price domain:   {frame.scales.price.domain[0]:.2f} - {frame.scales.price.domain[1]:.2f}")
    if frame.scales.volume is not None:
        low, high = frame.scales.volume.domain
        print(f"Volume domain:  {low:,.0f} - {high:,.0f}")
    print(f"Volume bars:    {len(frame.volume_bars)} ({ups} up / {downs} down)")

    if args.at:
        focus = session.pointer_move_to(args.at)
        print()
        print(f"Legend nearest {args.at}:")
        for line in legend_lines(focus.record, settings.legend_date_format):
            print(f"  {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
