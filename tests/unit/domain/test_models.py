"""Unit tests for domain models."""

from datetime import date, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.domain.models import (
    BarColor,
    LinearScale,
    Margin,
    MovingAveragePoint,
    PriceRecord,
    RawQuote,
    TimeScale,
    Viewport,
)
from src.domain.models.chart import from_day_number, to_day_number


class TestPriceRecord:
    """Tests for PriceRecord model."""

    def test_valid_record(self):
        """Test creating a valid record."""
        record = PriceRecord(
            date=date(2018, 3, 1),
            high=Decimal("105"),
            low=Decimal("100"),
            open=Decimal("101.2345"),
            close=Decimal("103.456"),
            volume=500000,
        )
        assert record.close == Decimal("103.456")
        assert record.has_volume is True

    def test_non_positive_price_fails(self):
        """Test that a zero price is rejected."""
        with pytest.raises(ValidationError):
            PriceRecord(
                date=date(2018, 3, 1),
                high=Decimal("105"),
                low=Decimal("0"),
                open=Decimal("101"),
                close=Decimal("103"),
            )

    def test_negative_volume_fails(self):
        """Test that volume cannot be negative."""
        with pytest.raises(ValidationError):
            PriceRecord(
                date=date(2018, 3, 1),
                high=Decimal("105"),
                low=Decimal("100"),
                open=Decimal("101"),
                close=Decimal("103"),
                volume=-1,
            )

    @pytest.mark.parametrize("volume", [None, 0])
    def test_no_trading_volume(self, volume):
        """Null and zero volume both mean no trading data."""
        record = PriceRecord(
            date=date(2018, 3, 1),
            high=Decimal("105"),
            low=Decimal("100"),
            open=Decimal("101"),
            close=Decimal("103"),
            volume=volume,
        )
        assert record.has_volume is False

    def test_record_is_frozen(self):
        """Test that PriceRecord is immutable."""
        record = PriceRecord(
            date=date(2018, 3, 1),
            high=Decimal("105"),
            low=Decimal("100"),
            open=Decimal("101"),
            close=Decimal("103"),
        )
        with pytest.raises(ValidationError):
            record.close = Decimal("1")

    def test_field_order(self):
        """Legend order follows the loader's field order."""
        assert list(PriceRecord.model_fields) == ["date", "high", "low", "open", "close", "volume"]


class TestRawQuote:
    """Tests for RawQuote model."""

    def test_all_prices_nullable(self):
        """Loader rows may be entirely empty."""
        raw = RawQuote(date=None)
        assert raw.close is None
        assert raw.volume is None

    def test_moving_average_point(self):
        """Test MovingAveragePoint holds date and average."""
        point = MovingAveragePoint(date=date(2018, 1, 2), average=Decimal("15"))
        assert point.average == Decimal("15")


class TestViewport:
    """Tests for Viewport and margins."""

    def test_from_window_subtracts_margins(self):
        """Default 50px margins come off each side."""
        viewport = Viewport.from_window(1000, 600)
        assert viewport.width == 900
        assert viewport.height == 500

    def test_from_window_custom_margin(self):
        """Test asymmetric margins."""
        viewport = Viewport.from_window(400, 300, Margin(top=10, right=20, bottom=30, left=40))
        assert viewport.width == 340
        assert viewport.height == 260

    def test_from_window_too_small(self):
        """Margins larger than the window raise."""
        with pytest.raises(ValueError, match="too small"):
            Viewport.from_window(80, 600)

    def test_zero_size_rejected(self):
        """Test that an empty plot area is invalid."""
        with pytest.raises(ValidationError):
            Viewport(width=0, height=100)


class TestLinearScale:
    """Tests for LinearScale mapping."""

    def test_maps_domain_to_range(self):
        """Test endpoints and midpoint."""
        scale = LinearScale(domain=(0, 100), range=(400, 0))
        assert scale(0) == 400
        assert scale(100) == 0
        assert scale(50) == 200

    def test_invert(self):
        """Test pixel back to data."""
        scale = LinearScale(domain=(95, 105), range=(400, 0))
        assert scale.invert(200) == pytest.approx(100)

    def test_extrapolates_outside_domain(self):
        """Scales are not clamped."""
        scale = LinearScale(domain=(0, 10), range=(0, 100))
        assert scale(20) == 200

    def test_accepts_decimal(self):
        """Decimal prices map without conversion by the caller."""
        scale = LinearScale(domain=(0, 10), range=(0, 100))
        assert scale(Decimal("2.5")) == pytest.approx(25)

    def test_degenerate_domain(self):
        """Equal domain bounds map to the middle of the range."""
        scale = LinearScale(domain=(5, 5), range=(400, 300))
        assert scale(5) == 350
        assert scale(1000) == 350

    def test_degenerate_range_invert(self):
        """Equal range bounds invert to the middle of the domain."""
        scale = LinearScale(domain=(0, 10), range=(7, 7))
        assert scale.invert(7) == 5


class TestTimeScale:
    """Tests for TimeScale mapping."""

    def test_maps_dates(self):
        """Test dates map linearly across the range."""
        scale = TimeScale(domain=(date(2018, 1, 1), date(2018, 1, 11)), range=(0, 100))
        assert scale(date(2018, 1, 1)) == 0
        assert scale(date(2018, 1, 11)) == 100
        assert scale(date(2018, 1, 6)) == 50

    def test_maps_datetimes_between_days(self):
        """Test intraday positions fall between the day ticks."""
        scale = TimeScale(domain=(date(2018, 1, 1), date(2018, 1, 11)), range=(0, 100))
        assert scale(datetime(2018, 1, 1, 12)) == pytest.approx(5)

    def test_invert_returns_datetime(self):
        """Test pixel back to a point in time."""
        scale = TimeScale(domain=(date(2018, 1, 1), date(2018, 1, 11)), range=(0, 100))
        assert scale.invert(55) == datetime(2018, 1, 6, 12)

    def test_single_day_domain(self):
        """A one-day series maps to the middle of the range."""
        scale = TimeScale(domain=(date(2018, 1, 1), date(2018, 1, 1)), range=(0, 100))
        assert scale(date(2018, 1, 1)) == 50


class TestDayNumber:
    """Tests for the continuous day count."""

    def test_date_is_ordinal(self):
        """Test a date maps to its ordinal."""
        assert to_day_number(date(2018, 1, 1)) == date(2018, 1, 1).toordinal()

    def test_datetime_adds_fraction(self):
        """Test 6am is a quarter day."""
        assert to_day_number(datetime(2018, 1, 1, 6)) == date(2018, 1, 1).toordinal() + 0.25

    def test_from_day_number(self):
        """Test the inverse conversion."""
        assert from_day_number(date(2018, 1, 1).toordinal() + 0.5) == datetime(2018, 1, 1, 12)


class TestBarColor:
    """Tests for BarColor enum."""

    def test_colors(self):
        """Test display colours."""
        assert BarColor.UP.hex == "#03a678"
        assert BarColor.DOWN.hex == "#c0392b"

    def test_values(self):
        """Test string values."""
        assert BarColor("up") is BarColor.UP
        assert BarColor.DOWN.value == "down"
