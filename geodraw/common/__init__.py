"""
Common utilities for the geodraw package.

This module provides shared type definitions, logging setup and error
handling helpers.
"""

from geodraw.common.errors import ConfigError, raise_fatal_with_remedy, warn_soft_degrade
from geodraw.common.logging import configure_logging
from geodraw.common.types import PolygonCoordinates, Position, RawFeature, Ring

__all__ = [  # noqa: RUF022 - Grouped by source module for clarity
    # Errors (from .errors)
    "ConfigError",
    "raise_fatal_with_remedy",
    "warn_soft_degrade",
    # Logging (from .logging)
    "configure_logging",
    # Types (from .types)
    "PolygonCoordinates",
    "Position",
    "RawFeature",
    "Ring",
]
