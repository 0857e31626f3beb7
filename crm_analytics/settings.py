"""Central settings for the CRM analytics service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class AnalyticsSettings:
    """Holds filesystem locations and process-level defaults."""

    project_root: Path = Path(__file__).resolve().parents[1]
    config_root: Path = project_root / "configs" / "analytics"
    engine_config_name: str = "engine"
    log_level: str = field(default_factory=lambda: os.getenv("CRM_ANALYTICS_LOG_LEVEL", "INFO"))


def get_settings() -> AnalyticsSettings:
    """Return analytics service settings."""

    return AnalyticsSettings()


__all__ = ["AnalyticsSettings", "get_settings"]
