"""
Current water status endpoint for Blue Horizon API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.trends import TrendService
from ...core.water_quality import assess_reading
from ...schemas.trend import WaterStatusResponse
from ..dependencies import get_trend_service

router = APIRouter(prefix="/status", tags=["status"])

logger = logging.getLogger(__name__)


@router.get("/{device_id}", response_model=WaterStatusResponse)
async def get_water_status(
    device_id: str,
    service: TrendService = Depends(get_trend_service),
):
    """
    Latest reading of a device with a good/warning/critical status per
    parameter and the list of issues to show on the dashboard
    """
    try:
        reading, data_source = await service.latest_reading(device_id)
    except Exception as e:
        logger.error(f"Error reading latest status for device {device_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get water status"
        )

    assessment = assess_reading(reading)
    if assessment['hasIssues']:
        logger.info(f"Device {device_id} has {len(assessment['issues'])} water quality issue(s)")

    return {
        "deviceId": device_id,
        "reading": reading,
        "dataSource": data_source,
        **assessment,
    }
