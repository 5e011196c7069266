"""Test configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path

from tests.helpers import FakeBackendClient


@pytest.fixture
def temp_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_harvests():
    """Two harvests from the backend, as decoded JSON."""
    return [
        {
            "_id": "h1",
            "harvest_date": "2024-06-01",
            "boat": "Sea Breeze",
            "location": "Port Clyde",
            "weight_kg": 10,
            "price_per_kg": 5,
            "notes": "",
        },
        {
            "_id": "h2",
            "harvest_date": "2024-06-02",
            "boat": "Lucky Trap",
            "location": "Stonington",
            "weight_kg": 4,
            "price_per_kg": 2.5,
        },
    ]


@pytest.fixture
def sample_investments():
    return [
        {
            "_id": "i1",
            "investor_name": "Ada Lovelace",
            "amount_usd": 1000,
            "investment_date": "2024-05-01",
            "instrument": "revenue share",
        },
        {
            "_id": "i2",
            "investor_name": "Grace Hopper",
            "amount_usd": 250.5,
            "investment_date": "2024-05-15",
            "instrument": "convertible note",
            "notes": "second tranche",
        },
    ]


@pytest.fixture
def fake_backend(sample_harvests, sample_investments):
    return FakeBackendClient(harvests=sample_harvests, investments=sample_investments)
