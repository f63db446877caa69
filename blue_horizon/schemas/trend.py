"""
Trend data schemas for Blue Horizon API
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, Literal, Union
from datetime import datetime

from ..core.timeutil import ensure_utc

Trend = Literal['increasing', 'decreasing', 'stable']
DataSource = Literal['database', 'hybrid', 'mock']
# tds travels as an integer, the other readings as floats
Number = Union[int, float]


class Sample(BaseModel):
    """One time-stamped reading as stored by a data source"""
    timestamp: datetime = Field(..., description="Time of the reading")
    ph: Optional[float] = Field(None, description="pH (0-14)")
    turbidity: Optional[float] = Field(None, description="Turbidity in NTU")
    tds: Optional[float] = Field(None, description="Total dissolved solids in ppm")
    temperature: Optional[float] = Field(None, description="Water temperature in °C")
    dissolved_oxygen: Optional[float] = Field(None, description="Dissolved oxygen in mg/L")

    model_config = ConfigDict(frozen=True)

    @field_validator('timestamp')
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @field_validator('ph', 'turbidity', 'tds', 'temperature', 'dissolved_oxygen')
    @classmethod
    def drop_non_finite(cls, v: Optional[float]) -> Optional[float]:
        """NaN and infinite readings are treated as missing"""
        if v is not None and not math.isfinite(v):
            return None
        return v


class DataPoint(BaseModel):
    """Single chart point as sent to the dashboard"""
    t: str = Field(..., description="ISO-8601 timestamp")
    ph: Number
    ntu: Number
    tds: Number
    temp: Number
    dissolved_oxygen: Number = Field(..., alias="do")

    model_config = ConfigDict(populate_by_name=True)


class ParameterStats(BaseModel):
    """Summary statistics for one parameter"""
    current: Number
    min: Number
    max: Number
    avg: Number
    trend: Trend


class TimeRange(BaseModel):
    start: str
    end: str


class SeriesSummary(BaseModel):
    """Aggregate view of a completed series"""
    totalReadings: int
    timeRange: TimeRange
    parameters: Dict[str, ParameterStats]


class TrendResponse(BaseModel):
    """Response envelope for the trends endpoint"""
    deviceId: str
    range: str
    data: List[DataPoint]
    summary: Optional[SeriesSummary] = None
    dataSource: DataSource
    note: str


class WaterStatusResponse(BaseModel):
    """Response for the water status endpoint"""
    deviceId: str
    reading: Optional[DataPoint] = None
    status: Dict[str, Literal['good', 'warning', 'critical']]
    overall: Literal['good', 'warning', 'critical', 'offline']
    issues: List[str]
    hasIssues: bool
    dataSource: DataSource
