"""
Water quality trend endpoints for Blue Horizon API
"""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ...core.ranges import DEFAULT_RANGE, SUPPORTED_RANGES, is_valid_range
from ...core.trends import TrendService
from ...schemas.trend import TrendResponse
from ..dependencies import get_trend_service

router = APIRouter(prefix="/trends", tags=["trends"])

# Configure logging
logger = logging.getLogger(__name__)

CSV_HEADERS = [
    'Timestamp',
    'pH',
    'Turbidity (NTU)',
    'TDS (ppm)',
    'Temperature (C)',
    'Dissolved Oxygen (mg/L)',
]


def validate_range(range_token: str) -> None:
    """Reject unsupported range tokens with a 400 before any work is done"""
    if not is_valid_range(range_token):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": f"Invalid range parameter. Use: {', '.join(SUPPORTED_RANGES[:-1])}, or {SUPPORTED_RANGES[-1]}",
                "received": range_token,
            }
        )


def series_to_csv(data: List[Dict[str, Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for point in data:
        writer.writerow([
            point['t'],
            f"{point['ph']:.2f}",
            f"{point['ntu']:.2f}",
            f"{point['tds']:.0f}",
            f"{point['temp']:.2f}",
            f"{point['do']:.2f}",
        ])
    return buffer.getvalue()


@router.get("/{device_id}", response_model=TrendResponse)
async def get_trends(
    device_id: str,
    range_token: str = Query(DEFAULT_RANGE, alias="range", description="24h | 7d | 30d"),
    service: TrendService = Depends(get_trend_service),
):
    """
    Get a chart-ready water quality series for a device.

    Real readings are used when there are enough of them for the range;
    sparse data is completed with simulated readings, and without a data
    source the whole series is simulated.
    """
    validate_range(range_token)
    try:
        return await service.get_trends(device_id, range_token)
    except Exception as e:
        logger.error(f"Error building trends for device {device_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to build trend data"
        )


@router.get("/{device_id}/export")
async def export_trends_csv(
    device_id: str,
    range_token: str = Query(DEFAULT_RANGE, alias="range", description="24h | 7d | 30d"),
    service: TrendService = Depends(get_trend_service),
):
    """Download the trend series of a device as CSV"""
    validate_range(range_token)
    try:
        envelope = await service.get_trends(device_id, range_token)
    except Exception as e:
        logger.error(f"Error exporting trends for device {device_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export trend data"
        )

    filename = f"water-quality-data-{datetime.now(timezone.utc).date().isoformat()}.csv"
    logger.info(f"Exporting {len(envelope['data'])} points for device {device_id} as {filename}")
    return Response(
        content=series_to_csv(envelope['data']),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
