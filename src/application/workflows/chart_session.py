"""Interactive chart session - pointer events over a rendered frame.

Holds the current ChartFrame and the crosshair focus. The rendering layer
forwards pointer events here:

- pointer_move(x): pixel x inside the plot area -> nearest record
- pointer_move_to(when): same, with a data-space time already inverted
- pointer_leave(): hide the crosshair
- resize(viewport): rebuild the frame wholesale

Events are handled synchronously, one at a time, so the frame and focus
have a single writer.
"""

from datetime import date, datetime

from src.application.workflows.render_workflow import RenderWorkflow
from src.domain.models.chart import ChartFrame, FocusState, Viewport
from src.domain.models.market import RawQuote
from src.domain.rules import LEGEND_DATE_FORMAT
from src.domain.services.crosshair import focus_at
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ChartSession:
    """Frame + focus for one chart on a page."""

    def __init__(
        self,
        quotes: list[RawQuote],
        viewport: Viewport,
        workflow: RenderWorkflow | None = None,
        date_format: str = LEGEND_DATE_FORMAT,
    ):
        """Render the initial frame.

        Args:
            quotes: Raw loader rows, oldest first
            viewport: Initial plot area
            workflow: Render workflow (default settings if not provided)
            date_format: strftime pattern for the legend date
        """
        self._quotes = quotes
        self._workflow = workflow or RenderWorkflow()
        self._date_format = date_format
        self._frame = self._workflow.run(quotes, viewport)
        self._focus: FocusState | None = None

    @property
    def frame(self) -> ChartFrame:
        """Current render pass."""
        return self._frame

    @property
    def focus(self) -> FocusState | None:
        """Current crosshair focus, None while the pointer is outside."""
        return self._focus

    def pointer_move(self, x: float) -> FocusState | None:
        """Handle a pointer move at pixel x of the plot area.

        Returns:
            New focus, or None when the series is empty
        """
        if self._frame.is_empty:
            return None
        return self.pointer_move_to(self._frame.scales.time.invert(x))

    def pointer_move_to(self, when: date | datetime) -> FocusState | None:
        """Handle a pointer move at a data-space time.

        Returns:
            New focus, or None when the series is empty
        """
        self._focus = focus_at(
            self._frame.records,
            when,
            self._frame.scales,
            self._frame.viewport,
            self._date_format,
        )
        return self._focus

    def pointer_leave(self) -> None:
        """Clear the crosshair."""
        self._focus = None

    def resize(self, viewport: Viewport) -> ChartFrame:
        """Re-render for a new plot area.

        The previous frame is replaced wholesale and any focus is dropped,
        since its pixel anchor belongs to the old scales.
        """
        logger.debug(f"Resizing chart to {viewport.width}x{viewport.height}")
        self._frame = self._workflow.run(self._quotes, viewport)
        self._focus = None
        return self._frame
