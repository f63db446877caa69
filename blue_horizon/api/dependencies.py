"""
FastAPI dependencies for Blue Horizon API
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends

from ..core.config import settings
from ..core.trends import TrendService
from ..storage import SampleSource, build_sample_source


@lru_cache()
def get_sample_source() -> Optional[SampleSource]:
    """Get the configured data source (singleton, None in mock mode)"""
    return build_sample_source(settings)


def get_trend_service(source: Optional[SampleSource] = Depends(get_sample_source)) -> TrendService:
    return TrendService(source)
