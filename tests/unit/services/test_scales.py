"""Unit tests for the scale builder."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models.chart import Viewport
from src.domain.models.market import PriceRecord
from src.domain.services.scales import (
    build_price_scale,
    build_scales,
    build_time_scale,
    build_volume_scale,
)


def make_record(dt: date, c: str, v: int | None = 1000) -> PriceRecord:
    """Helper to create a record around a close."""
    close = Decimal(c)
    return PriceRecord(date=dt, high=close + 1, low=close - 1, open=close, close=close, volume=v)


class TestTimeScale:
    """Tests for the time axis."""

    def test_domain_is_date_span(self, simple_records, viewport):
        """Domain runs from first to last date."""
        scale = build_time_scale(simple_records, viewport)

        assert scale.domain == (date(2018, 1, 1), date(2018, 1, 5))
        assert scale.range == (0, viewport.width)

    def test_endpoints(self, simple_records, viewport):
        """First date at 0, last date at the full width."""
        scale = build_time_scale(simple_records, viewport)

        assert scale(date(2018, 1, 1)) == 0
        assert scale(date(2018, 1, 5)) == viewport.width

    def test_invert_roundtrip(self, simple_records, viewport):
        """Pixel of a date inverts back to that date."""
        scale = build_time_scale(simple_records, viewport)

        assert scale.invert(scale(date(2018, 1, 3))).date() == date(2018, 1, 3)

    def test_empty_series_does_not_raise(self, viewport):
        """Degenerate domain maps to the middle."""
        scale = build_time_scale([], viewport)

        assert scale(date(2018, 1, 1)) == viewport.width / 2


class TestPriceScale:
    """Tests for the price axis."""

    def test_domain_padding(self, simple_records, viewport):
        """Five under the lowest close, nothing above the highest."""
        scale = build_price_scale(simple_records, viewport)

        assert scale.domain == (5.0, 50.0)

    def test_range_is_inverted(self, simple_records, viewport):
        """Higher prices sit higher on screen (smaller y)."""
        scale = build_price_scale(simple_records, viewport)

        assert scale.range == (viewport.height, 0)
        assert scale(50) == 0
        assert scale(5) == viewport.height
        assert scale(40) < scale(20)

    def test_fractional_closes(self, viewport):
        """Padding is applied to the exact minimum close."""
        records = [
            make_record(date(2018, 1, 2), "172.26"),
            make_record(date(2018, 1, 3), "175.0"),
            make_record(date(2018, 1, 4), "173.03"),
        ]
        scale = build_price_scale(records, viewport)

        assert scale.domain[0] == pytest.approx(167.26)
        assert scale.domain[1] == 175.0

    def test_only_close_counts(self, viewport):
        """Highs and lows do not widen the domain."""
        record = PriceRecord(
            date=date(2018, 1, 2),
            high=Decimal("500"),
            low=Decimal("1"),
            open=Decimal("100"),
            close=Decimal("100"),
        )
        scale = build_price_scale([record], viewport)

        assert scale.domain == (95.0, 100.0)

    def test_empty_series_does_not_raise(self, viewport):
        """Degenerate scale for an empty series."""
        scale = build_price_scale([], viewport)

        assert scale(123) == viewport.height / 2


class TestVolumeScale:
    """Tests for the volume axis."""

    def test_bottom_quarter(self, simple_records, viewport):
        """Range covers the bottom quarter, baseline at the bottom edge."""
        scale = build_volume_scale(simple_records, viewport)

        assert scale.range == (400, 300)
        assert scale.domain == (1000, 5000)
        assert scale(1000) == 400
        assert scale(5000) == 300

    def test_ignores_days_without_volume(self, viewport):
        """Null and zero volumes stay out of the domain."""
        records = [
            make_record(date(2018, 1, 2), "100", v=0),
            make_record(date(2018, 1, 3), "100", v=200),
            make_record(date(2018, 1, 4), "100", v=None),
            make_record(date(2018, 1, 5), "100", v=800),
        ]
        scale = build_volume_scale(records, viewport)

        assert scale.domain == (200, 800)

    def test_no_volume_omits_scale(self, viewport):
        """No traded days - no volume scale."""
        records = [make_record(date(2018, 1, 2), "100", v=None), make_record(date(2018, 1, 3), "100", v=0)]

        assert build_volume_scale(records, viewport) is None

    def test_single_volume(self, viewport):
        """One traded day gives a degenerate scale, not a division error."""
        scale = build_volume_scale([make_record(date(2018, 1, 2), "100", v=500)], viewport)

        assert scale(500) == 350


class TestBuildScales:
    """Tests for building all scales at once."""

    def test_all_three(self, simple_records, viewport):
        """Test time, price and volume are built."""
        scales = build_scales(simple_records, viewport)

        assert scales.time.domain[0] == date(2018, 1, 1)
        assert scales.price.domain == (5.0, 50.0)
        assert scales.volume is not None

    def test_empty_series(self, viewport):
        """Empty series builds without raising and has no volume scale."""
        scales = build_scales([], viewport)

        assert scales.volume is None

    def test_viewport_drives_ranges(self, simple_records):
        """Ranges follow the viewport size."""
        scales = build_scales(simple_records, Viewport(width=200, height=100))

        assert scales.time.range == (0, 200)
        assert scales.price.range == (100, 0)
        assert scales.volume.range == (100, 75)
