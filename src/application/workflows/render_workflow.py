"""Render workflow for the daily price chart.

Runs once per render pass (initial draw and every resize) and turns raw
loader rows into a ChartFrame for the rendering layer.

Workflow stages:
1. PREPARE: Drop invalid rows and rows before the start date
2. AVERAGE: Moving average of closes
3. SCALE: Time, price and volume scales for the viewport
4. PROJECT: Pixel geometry for both lines and the volume bars
5. COMPLETE: Stamp the finish time

An empty series skips straight from PREPARE to COMPLETE and yields an
empty frame with degenerate scales.
"""

from datetime import date, datetime
from enum import Enum
from typing import Literal, TypedDict

from langgraph.graph import END, StateGraph

from src.domain.models.chart import ChartFrame, ChartScales, LinePoint, Viewport, VolumeBar
from src.domain.models.market import MovingAveragePoint, PriceRecord, RawQuote
from src.domain.rules import DEFAULT_START_DATE, MOVING_AVERAGE_PRIOR_POINTS
from src.domain.services.lines import project_moving_average, project_price_line
from src.domain.services.moving_average import calculate_moving_average
from src.domain.services.scales import build_scales
from src.domain.services.series import prepare_series
from src.domain.services.volume import build_volume_bars
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


class RenderStatus(str, Enum):
    """Status of a render pass."""

    PREPARING = "preparing"
    AVERAGING = "averaging"
    SCALING = "scaling"
    PROJECTING = "projecting"
    COMPLETED = "completed"
    EMPTY = "empty"


class RenderWorkflowState(TypedDict, total=False):
    """State for one render pass."""

    # Inputs
    quotes: list[RawQuote]
    viewport: Viewport
    start_date: date
    prior_points: int

    # Pipeline products
    records: list[PriceRecord]
    moving_average: list[MovingAveragePoint]
    scales: ChartScales
    price_line: list[LinePoint]
    moving_average_line: list[LinePoint]
    volume_bars: list[VolumeBar]

    # Results
    status: str
    started_at: str
    completed_at: str


def prepare(state: RenderWorkflowState) -> RenderWorkflowState:
    """Filter the raw rows down to the plotted series."""
    quotes = state.get("quotes", [])
    records = prepare_series(quotes, state.get("start_date", DEFAULT_START_DATE))

    dropped = len(quotes) - len(records)
    if dropped:
        logger.debug(f"Dropped {dropped} of {len(quotes)} rows (invalid or before start date)")

    return {
        **state,
        "records": records,
        "status": RenderStatus.AVERAGING.value,
    }


def average(state: RenderWorkflowState) -> RenderWorkflowState:
    """Compute the moving average over the prepared closes."""
    return {
        **state,
        "moving_average": calculate_moving_average(
            state["records"],
            state.get("prior_points", MOVING_AVERAGE_PRIOR_POINTS),
        ),
        "status": RenderStatus.SCALING.value,
    }


def scale(state: RenderWorkflowState) -> RenderWorkflowState:
    """Build the axis scales for the viewport."""
    scales = build_scales(state["records"], state["viewport"])
    if scales.volume is None:
        logger.info("No volume data in series - volume bars omitted")

    return {
        **state,
        "scales": scales,
        "status": RenderStatus.PROJECTING.value,
    }


def project(state: RenderWorkflowState) -> RenderWorkflowState:
    """Map the series into pixel geometry."""
    scales = state["scales"]
    return {
        **state,
        "price_line": project_price_line(state["records"], scales),
        "moving_average_line": project_moving_average(state["moving_average"], scales),
        "volume_bars": build_volume_bars(state["records"], scales, state["viewport"]),
    }


def complete(state: RenderWorkflowState) -> RenderWorkflowState:
    """Mark the pass finished."""
    status = RenderStatus.COMPLETED if state.get("records") else RenderStatus.EMPTY
    return {
        **state,
        "status": status.value,
        "completed_at": datetime.now().isoformat(),
    }


def should_continue_to_average(state: RenderWorkflowState) -> Literal["average", "complete"]:
    """Skip the drawing stages when nothing survived preparation."""
    if state.get("records"):
        return "average"
    logger.warning("Series is empty after preparation - nothing to draw")
    return "complete"


def create_render_workflow() -> StateGraph:
    """Create the render pass graph.

    Returns:
        StateGraph ready for compilation.
    """
    workflow = StateGraph(RenderWorkflowState)

    # Add nodes
    workflow.add_node("prepare", prepare)
    workflow.add_node("average", average)
    workflow.add_node("scale", scale)
    workflow.add_node("project", project)
    workflow.add_node("complete", complete)

    # Set entry point
    workflow.set_entry_point("prepare")

    # Conditional: prepare -> average or complete
    workflow.add_conditional_edges(
        "prepare",
        should_continue_to_average,
        {
            "average": "average",
            "complete": "complete",
        },
    )

    # Linear flow: average -> scale -> project -> complete
    workflow.add_edge("average", "scale")
    workflow.add_edge("scale", "project")
    workflow.add_edge("project", "complete")

    # Complete -> END
    workflow.add_edge("complete", END)

    return workflow


def get_compiled_render_workflow():
    """Get the compiled render workflow ready for invocation.

    Returns:
        Compiled workflow that can be invoked with .invoke()
    """
    return create_render_workflow().compile()


class RenderWorkflow:
    """High-level interface for producing a ChartFrame."""

    def __init__(
        self,
        start_date: date = DEFAULT_START_DATE,
        prior_points: int = MOVING_AVERAGE_PRIOR_POINTS,
    ):
        """Initialize the render workflow.

        Args:
            start_date: Inclusive first date of the plotted series
            prior_points: Earlier points in each moving-average window
        """
        self._start_date = start_date
        self._prior_points = prior_points
        self._workflow = get_compiled_render_workflow()

    def run(self, quotes: list[RawQuote], viewport: Viewport) -> ChartFrame:
        """Run one render pass.

        Args:
            quotes: Raw loader rows, oldest first
            viewport: Plot area

        Returns:
            ChartFrame; every sequence is empty when no record qualifies
        """
        initial_state: RenderWorkflowState = {
            "quotes": quotes,
            "viewport": viewport,
            "start_date": self._start_date,
            "prior_points": self._prior_points,
            "records": [],
            "moving_average": [],
            "price_line": [],
            "moving_average_line": [],
            "volume_bars": [],
            "status": RenderStatus.PREPARING.value,
            "started_at": datetime.now().isoformat(),
            "completed_at": "",
        }

        final_state = self._workflow.invoke(initial_state)

        records = final_state.get("records", [])
        frame = ChartFrame(
            viewport=viewport,
            records=records,
            moving_average=final_state.get("moving_average", []),
            scales=final_state.get("scales") or build_scales(records, viewport),
            price_line=final_state.get("price_line", []),
            moving_average_line=final_state.get("moving_average_line", []),
            volume_bars=final_state.get("volume_bars", []),
        )

        logger.info(
            f"Rendered {len(frame.records)} records, "
            f"{len(frame.volume_bars)} volume bars ({final_state.get('status')})"
        )
        return frame


def render_chart(
    quotes: list[RawQuote],
    viewport: Viewport,
    start_date: date = DEFAULT_START_DATE,
    prior_points: int = MOVING_AVERAGE_PRIOR_POINTS,
) -> ChartFrame:
    """Convenience wrapper for a single render pass."""
    return RenderWorkflow(start_date=start_date, prior_points=prior_points).run(quotes, viewport)
