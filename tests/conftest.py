"""Pytest configuration and fixtures for all tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from src.domain.models.chart import Viewport
from src.domain.models.market import PriceRecord
from src.infrastructure.config import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process - reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixture_path() -> Path:
    """Yahoo chart JSON fixture (AAPL, late Dec 2017 - Jan 2018)."""
    return FIXTURES_DIR / "yahoo_chart.json"


@pytest.fixture
def viewport() -> Viewport:
    """Sample plot area."""
    return Viewport(width=900, height=400)


@pytest.fixture
def simple_records() -> list[PriceRecord]:
    """Five consecutive days with closes 10, 20, 30, 40, 50."""
    return [
        PriceRecord(
            date=date(2018, 1, i + 1),
            high=Decimal(10 * (i + 1) + 1),
            low=Decimal(10 * (i + 1) - 1),
            open=Decimal(10 * (i + 1)),
            close=Decimal(10 * (i + 1)),
            volume=1000 * (i + 1),
        )
        for i in range(5)
    ]
