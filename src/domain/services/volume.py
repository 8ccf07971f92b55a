"""Volume bars - subset, up/down colouring and pixel geometry.

Colouring is close-over-close on the volume subset: a bar is DOWN when the
previous bar in the subset closed higher, otherwise UP. The first bar is
always UP. Days without volume are skipped, so the comparison can reach
back past them.
"""

from src.domain.models.chart import ChartScales, VolumeBar, Viewport
from src.domain.models.enums import BarColor
from src.domain.models.market import PriceRecord
from src.domain.rules import VOLUME_BAR_WIDTH


def volume_subset(records: list[PriceRecord]) -> list[PriceRecord]:
    """Records that carry volume (not null, not zero), in order."""
    return [record for record in records if record.has_volume]


def colorize_volume(records: list[PriceRecord]) -> list[BarColor]:
    """Tag each volume bar UP or DOWN.

    Args:
        records: Volume subset, oldest first

    Returns:
        One BarColor per record
    """
    colors: list[BarColor] = []

    for i, record in enumerate(records):
        if i == 0:
            colors.append(BarColor.UP)
            continue

        prev_close = records[i - 1].close
        colors.append(BarColor.DOWN if prev_close > record.close else BarColor.UP)

    return colors


def build_volume_bars(
    records: list[PriceRecord],
    scales: ChartScales,
    viewport: Viewport,
) -> list[VolumeBar]:
    """Lay out the volume rectangles.

    Args:
        records: Full price series (filtered to the volume subset here)
        scales: Scales of this render pass
        viewport: Plot area; bars grow up from its bottom edge

    Returns:
        VolumeBar list, empty when there is no volume scale
    """
    if scales.volume is None:
        return []

    traded = volume_subset(records)
    bars: list[VolumeBar] = []

    for record, color in zip(traded, colorize_volume(traded)):
        y = scales.volume(record.volume)
        bars.append(
            VolumeBar(
                date=record.date,
                volume=record.volume,
                x=scales.time(record.date),
                y=y,
                width=VOLUME_BAR_WIDTH,
                height=viewport.height - y,
                color=color,
            )
        )

    return bars
