"""Utility functions for svgfontmetrics.

This module provides logging setup and measurement statistics.
"""

from svgfontmetrics.utils.logging import (
    MeasurementStats,
    MetricsLogger,
    configure_logging,
)

__all__ = [
    "MeasurementStats",
    "MetricsLogger",
    "configure_logging",
]
