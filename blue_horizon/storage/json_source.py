"""
JSON file sample source for local development
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from ..core.exceptions import DataSourceError
from ..core.timeutil import ensure_utc
from ..schemas.trend import Sample

logger = logging.getLogger(__name__)


class JsonSampleSource:
    """
    Reads sensor records from a JSON array on disk.

    Each record looks like the database row plus its device:
    {"device_id": "WQ-001", "timestamp": "...", "ph": 7.1, "turbidity": 1.2,
     "tds": 240, "temperature": 21.5, "dissolved_oxygen": 8.3}
    """

    name = "JSON file"

    def __init__(self, path: Union[str, Path]):
        self.data_file = Path(path)

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all records, an absent file being an empty source"""
        if not self.data_file.exists():
            logger.warning(f"Sample data file {self.data_file} not found, treating as empty")
            return []
        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DataSourceError(f"Error reading {self.data_file}: {e}") from e

        if not isinstance(records, list):
            raise DataSourceError(f"{self.data_file} must contain a JSON array")
        return records

    def get_by_device(self, device_id: str) -> List[Dict[str, Any]]:
        records = self.get_all()
        return [r for r in records if isinstance(r, dict) and r.get('device_id') == device_id]

    async def fetch_samples(self, device_id: str, since: datetime) -> List[Sample]:
        records = self.get_by_device(device_id)
        since = ensure_utc(since)

        try:
            samples = [Sample(**record) for record in records]
        except ValidationError as e:
            raise DataSourceError(f"Invalid record in {self.data_file}: {e}") from e

        samples = [s for s in samples if s.timestamp >= since]
        samples.sort(key=lambda s: s.timestamp)
        logger.info(f"JSON source: {len(records)} records for device {device_id}, {len(samples)} in range")
        return samples
