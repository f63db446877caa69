"""
Supabase sensor_data table accessed through its REST interface
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..core.exceptions import DataSourceError
from ..core.timeutil import to_iso
from ..schemas.trend import Sample

logger = logging.getLogger(__name__)

SELECT_COLUMNS = "timestamp,ph,turbidity,tds,temperature,dissolved_oxygen"


class SupabaseSampleSource:
    """Reads sensor samples from a Supabase (PostgREST) table"""

    name = "Supabase"

    def __init__(
        self,
        url: str,
        service_key: str,
        table: str = "sensor_data",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            url: Project URL, e.g. https://xyz.supabase.co
            service_key: Service role key used for both apikey and bearer auth
            table: Table holding the sensor records
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = url.rstrip('/')
        self.table = table
        self.timeout = timeout
        self._headers = {
            "apikey": service_key,
            "Authorization": f"Bearer {service_key}",
            "Accept": "application/json",
        }
        self._transport = transport

    def build_params(self, device_id: str, since: datetime) -> Dict[str, str]:
        return {
            "select": SELECT_COLUMNS,
            "device_id": f"eq.{device_id}",
            "timestamp": f"gte.{to_iso(since)}",
            "order": "timestamp.asc",
        }

    async def _get_rows(self, device_id: str, since: datetime) -> List[Dict[str, Any]]:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(
                f"/rest/v1/{self.table}",
                params=self.build_params(device_id, since),
            )
            response.raise_for_status()
            return response.json()

    async def fetch_samples(self, device_id: str, since: datetime) -> List[Sample]:
        logger.info(f"Querying Supabase from {to_iso(since)} for device {device_id}")
        try:
            rows = await self._get_rows(device_id, since)
        except httpx.HTTPStatusError as e:
            raise DataSourceError(
                f"Supabase returned {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise DataSourceError(f"Supabase request failed: {e}") from e
        except ValueError as e:
            raise DataSourceError(f"Supabase returned invalid JSON: {e}") from e

        if not isinstance(rows, list):
            raise DataSourceError("Supabase returned an unexpected payload")

        try:
            samples = [Sample(**row) for row in rows]
        except (ValidationError, TypeError) as e:
            raise DataSourceError(f"Could not decode Supabase rows: {e}") from e

        logger.info(f"Supabase returned {len(samples)} records")
        return samples
