"""Engine configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from crm_analytics.settings import get_settings

logger = logging.getLogger(__name__)


class EngineConfig(BaseModel):
    """Tunable constants of the analytics engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    histogram_bin_count: int = Field(default=10, ge=1)
    domain_padding_percent: float = Field(default=0.1, ge=0.0)
    adaptive_threshold: float = Field(default=1000.0, gt=0.0)
    headroom_factor: float = Field(default=1.2, ge=1.0)
    outlier_iqr_multiplier: float = Field(default=1.5, ge=0.0)
    trend_stable_threshold_pct: float = Field(default=5.0, ge=0.0)


class AnalyticsConfigLoader:
    """Loads YAML configurations from the analytics config directory."""

    def __init__(self, base_path: str | Path | None = None) -> None:
        settings = get_settings()
        self.base_path: Path = Path(base_path) if base_path else settings.config_root

    def load_config(self, name: str) -> dict[str, Any]:
        """Load a YAML config by name without extension."""

        path = self.base_path / f"{name}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Analytics config '{name}' not found at {path}")

        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            message = f"Invalid YAML in analytics config '{name}': {exc}"
            logger.error(message)
            raise ValueError(message) from exc

        if not isinstance(data, dict):
            raise ValueError(f"Analytics config '{name}' must be a mapping, got {type(data).__name__}")

        logger.debug("Analytics config loaded | name=%s path=%s", name, path)
        return data

    def load_engine_config(self, name: str | None = None) -> EngineConfig:
        """Load and validate the engine section of a config file."""

        name = name or get_settings().engine_config_name
        data = self.load_config(name)
        try:
            return EngineConfig(**(data.get("engine") or {}))
        except ValidationError as exc:
            message = f"Invalid engine settings in analytics config '{name}': {exc}"
            logger.error(message)
            raise ValueError(message) from exc

    def list_configs(self) -> list[str]:
        """Return all available config names (without extension)."""

        if not self.base_path.exists():
            return []

        return sorted([config.stem for config in self.base_path.glob("*.yaml")])


def load_engine_config_or_default(base_path: str | Path | None = None) -> EngineConfig:
    """Return the configured engine settings, falling back to defaults when no file exists."""

    loader = AnalyticsConfigLoader(base_path)
    try:
        return loader.load_engine_config()
    except FileNotFoundError:
        logger.info("No engine config found under %s | using defaults", loader.base_path)
        return EngineConfig()


__all__ = ["AnalyticsConfigLoader", "EngineConfig", "load_engine_config_or_default"]
