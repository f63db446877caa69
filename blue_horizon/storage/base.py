"""
Data source interface for real sensor samples
"""

from datetime import datetime
from typing import List, Protocol

from ..schemas.trend import Sample


class SampleSource(Protocol):
    """Something that can return the stored samples of a device"""

    name: str

    async def fetch_samples(self, device_id: str, since: datetime) -> List[Sample]:
        """
        Samples of `device_id` taken at or after `since`, oldest first.

        Raises:
            DataSourceError: if the samples cannot be fetched or decoded
        """
        ...
