"""
Sample data sources for Blue Horizon API
"""

import logging
from typing import Optional

from ..core.config import Settings
from .base import SampleSource
from .json_source import JsonSampleSource
from .supabase_source import SupabaseSampleSource

logger = logging.getLogger(__name__)


def build_sample_source(settings: Settings) -> Optional[SampleSource]:
    """
    Build the configured data source.

    Supabase wins when its credentials are set, then a local JSON file;
    None means no data source is configured and trends are mocked.
    """
    if settings.supabase_configured:
        logger.info("Supabase credentials found, using Supabase data source")
        return SupabaseSampleSource(
            url=settings.SUPABASE_URL,
            service_key=settings.SUPABASE_SERVICE_KEY,
            table=settings.SUPABASE_TABLE,
            timeout=settings.DATA_SOURCE_TIMEOUT_SECONDS,
        )

    if settings.SAMPLE_DATA_FILE:
        logger.info(f"Using JSON sample data from {settings.SAMPLE_DATA_FILE}")
        return JsonSampleSource(settings.SAMPLE_DATA_FILE)

    logger.warning(
        "No data source configured - running in development mode with mock data. "
        "Set SUPABASE_URL and SUPABASE_SERVICE_KEY to use real readings."
    )
    return None


__all__ = [
    'SampleSource',
    'JsonSampleSource',
    'SupabaseSampleSource',
    'build_sample_source',
]
