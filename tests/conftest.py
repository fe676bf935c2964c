"""Shared test fixtures for the trip service."""

import os
import sys
from pathlib import Path
from uuid import uuid4

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core.db.interface import DuplicateApiIdError, TripCollection  # noqa: E402
from core.models.trip import SavedTrip, SavedTripCreate  # noqa: E402


class InMemoryTripCollection(TripCollection):
    """TripCollection kept in a dict, insertion ordered. Enforces apiId uniqueness on create."""

    def __init__(self) -> None:
        self.trips: dict[str, SavedTrip] = {}

    def is_valid_id(self, trip_id: str) -> bool:
        return isinstance(trip_id, str) and len(trip_id) == 32 and all(c in "0123456789abcdef" for c in trip_id)

    async def find(self, filter: dict[str, str]) -> list[SavedTrip]:
        return [trip for trip in self.trips.values() if self._matches(trip, filter)]

    async def find_one(self, filter: dict[str, str]) -> SavedTrip | None:
        found = await self.find(filter)
        return found[0] if found else None

    async def create(self, record: SavedTripCreate) -> SavedTrip:
        if any(trip.api_id == record.api_id for trip in self.trips.values()):
            raise DuplicateApiIdError(record.api_id)
        trip = SavedTrip.model_validate({**record.model_dump(), "id": uuid4().hex})
        self.trips[trip.id] = trip
        return trip

    async def find_by_id_and_delete(self, trip_id: str) -> SavedTrip | None:
        return self.trips.pop(trip_id, None)

    @staticmethod
    def _matches(trip: SavedTrip, filter: dict[str, str]) -> bool:
        dumped = trip.model_dump(mode="json")
        return all(dumped.get(key) == value for key, value in filter.items())


@pytest.fixture
def trip_collection():
    return InMemoryTripCollection()


@pytest.fixture
def saved_trip_payload():
    return {
        "apiId": "a749c866-7928-4d08-9d5c-a6821a583d1a",
        "origin": "SYD",
        "destination": "GRU",
        "cost": 20,
        "duration": 5,
        "type": "flight",
        "display_name": "from SYD to GRU by flight",
    }


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def saved_trips_table(dynamodb_client):
    """Provide the SavedTrips table name, emptied after the test."""
    from core.config import get_config

    table_name = get_config().saved_trips_table
    yield table_name

    # Cleanup: scan and delete all items created during test
    response = dynamodb_client.scan(TableName=table_name)
    for item in response.get("Items", []):
        dynamodb_client.delete_item(TableName=table_name, Key={"pk": item["pk"]})
