"""Saved trip operations: list, save and delete."""

import logging

from core.db.interface import DuplicateApiIdError, TripCollection
from core.errors import ConflictError, FieldError, NotFoundError, ValidationError
from core.models.trip import AirportCode, SavedTrip, SavedTripCreate, SortBy
from core.services.sorting import sort_trips

logger = logging.getLogger(__name__)


class TripStore:
    def __init__(self, collection: TripCollection) -> None:
        self._collection = collection

    async def list(
        self,
        origin: AirportCode | None = None,
        destination: AirportCode | None = None,
        sort_by: SortBy | None = None,
    ) -> list[SavedTrip]:
        filter: dict[str, str] = {}
        if origin and destination:
            filter["origin"] = AirportCode(origin).value
            filter["destination"] = AirportCode(destination).value

        trips = await self._collection.find(filter)
        return sort_trips(trips, sort_by)

    async def save(self, candidate: SavedTripCreate) -> SavedTrip:
        existing = await self._collection.find_one({"api_id": candidate.api_id})
        if existing is not None:
            logger.warning("Rejected duplicate apiId %s", candidate.api_id)
            raise ConflictError()

        try:
            return await self._collection.create(candidate)
        except DuplicateApiIdError as e:
            # Lost the race against a concurrent save with the same apiId.
            logger.warning("Store rejected duplicate apiId %s", candidate.api_id)
            raise ConflictError() from e

    async def delete(self, trip_id: str) -> SavedTrip:
        if not self._collection.is_valid_id(trip_id):
            raise ValidationError(
                errors=[FieldError(field="id", message=f"{trip_id!r} is not a valid trip id")]
            )

        deleted = await self._collection.find_by_id_and_delete(trip_id)
        if deleted is None:
            raise NotFoundError()
        return deleted
