"""Environment configuration using pydantic-settings."""

from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.models.chart import Margin, Viewport
from src.domain.rules import (
    DEFAULT_START_DATE,
    LEGEND_DATE_FORMAT,
    MOVING_AVERAGE_PRIOR_POINTS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Dataset
    data_file: Path = Field(default=Path("sample-data.json"), alias="CHART_DATA_FILE")

    # Series
    start_date: date = Field(default=DEFAULT_START_DATE, alias="CHART_START_DATE")
    moving_average_prior_points: int = Field(
        default=MOVING_AVERAGE_PRIOR_POINTS,
        ge=0,
        alias="CHART_MOVING_AVERAGE_PRIOR_POINTS",
        description="Earlier points averaged with the current one (49 = 50-day SMA)",
    )

    # Window (outer size, margins are subtracted)
    window_width: float = Field(default=1000, gt=0, alias="CHART_WIDTH")
    window_height: float = Field(default=600, gt=0, alias="CHART_HEIGHT")
    margin: float = Field(default=50, ge=0, alias="CHART_MARGIN")

    # Legend
    legend_date_format: str = Field(default=LEGEND_DATE_FORMAT, alias="CHART_LEGEND_DATE_FORMAT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    def viewport(self) -> Viewport:
        """Plot area for the configured window."""
        margin = Margin(top=self.margin, right=self.margin, bottom=self.margin, left=self.margin)
        return Viewport.from_window(self.window_width, self.window_height, margin)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
