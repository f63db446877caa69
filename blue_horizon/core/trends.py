"""
Trend service: real samples from the configured source, completed by synthesis
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple
from datetime import datetime

from ..storage.base import SampleSource
from .combiner import CombinedSeries, combine_series, mock_series
from .exceptions import DataSourceError
from .ranges import DEFAULT_RANGE, resolve_range
from .timeutil import utc_now

logger = logging.getLogger(__name__)


class TrendService:
    """
    Builds trend responses for a device and range.

    The data source is injected; None means no source is configured and
    every response is mocked.
    """

    def __init__(
        self,
        source: Optional[SampleSource],
        clock: Callable[[], datetime] = utc_now,
        rng=None,
    ):
        self.source = source
        self.clock = clock
        self.rng = rng

    @property
    def source_name(self) -> str:
        return self.source.name if self.source is not None else "mock"

    async def build_series(self, device_id: str, range_token: str) -> CombinedSeries:
        range_spec = resolve_range(range_token)
        now = self.clock()

        if self.source is None:
            logger.info("Data source not configured, using mock data")
            return combine_series(None, range_spec, now=now, rng=self.rng)

        since = now - range_spec.span
        try:
            samples = await self.source.fetch_samples(device_id, since)
        except DataSourceError as e:
            logger.error(f"Data source error for device {device_id}: {e}")
            logger.info("Falling back to mock data due to error")
            return mock_series(range_spec, "Using mock data - data source unavailable", now=now, rng=self.rng)

        return combine_series(samples, range_spec, now=now, rng=self.rng, source_name=self.source.name)

    async def get_trends(self, device_id: str, range_token: str = DEFAULT_RANGE) -> Dict[str, Any]:
        """
        Response envelope for GET /api/trends/{device_id}

        Raises:
            InvalidRangeError: if range_token is not a supported range
        """
        logger.info(f"Trend request for device: {device_id}, range: {range_token}")
        combined = await self.build_series(device_id, range_token)
        return {
            'deviceId': device_id,
            'range': range_token,
            'data': combined.data,
            'summary': combined.summary,
            'dataSource': combined.data_source,
            'note': combined.note,
        }

    async def latest_reading(self, device_id: str) -> Tuple[Optional[Dict[str, Any]], str]:
        """
        Most recent point of the 24h series and where it came from.

        When the source returned readings, the last real one is used; hybrid
        filler after it is timestamped past the latest reading.
        """
        combined = await self.build_series(device_id, DEFAULT_RANGE)
        if combined.real_count:
            latest = combined.data[combined.real_count - 1]
        else:
            latest = combined.data[-1] if combined.data else None
        return latest, combined.data_source
