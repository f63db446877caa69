from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from blue_horizon.api.dependencies import get_sample_source
from blue_horizon.core.exceptions import DataSourceError
from blue_horizon.main import app

from .utils.fakes import FakeSampleSource, MidpointRandom

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def midpoint_rng() -> MidpointRandom:
    return MidpointRandom()


@pytest.fixture
def make_client():
    """TestClient factory with the data source dependency replaced"""

    def _make(source) -> TestClient:
        app.dependency_overrides[get_sample_source] = lambda: source
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def failing_source() -> FakeSampleSource:
    return FakeSampleSource(error=DataSourceError("connection refused"))
