"""
Pydantic schemas for Blue Horizon API
"""

from .trend import (
    Sample, DataPoint, ParameterStats, TimeRange, SeriesSummary,
    TrendResponse, WaterStatusResponse
)

__all__ = [
    "Sample", "DataPoint", "ParameterStats", "TimeRange", "SeriesSummary",
    "TrendResponse", "WaterStatusResponse",
]
