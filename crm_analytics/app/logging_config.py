"""Logging configuration for the CRM analytics service."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(message)s"


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Configure standard logging (stdout unless ``stream`` is given) with a consistent format.

    ``CRM_ANALYTICS_LOG_LEVEL`` overrides the requested level.
    """

    env_level = os.getenv("CRM_ANALYTICS_LOG_LEVEL")
    resolved_level = (env_level or level or "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, resolved_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )


__all__ = ["configure_logging", "LOG_FORMAT"]
