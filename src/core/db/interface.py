from abc import ABC, abstractmethod

from core.models.trip import SavedTrip, SavedTripCreate


class DuplicateApiIdError(Exception):
    """The store refused an insert because the apiId is already taken."""

    def __init__(self, api_id: str):
        self.api_id = api_id
        super().__init__(f"apiId {api_id} already exists")


class TripCollection(ABC):
    """Persistent collection of saved trips. Identities are opaque strings."""

    @abstractmethod
    async def find(self, filter: dict[str, str]) -> list[SavedTrip]: ...

    @abstractmethod
    async def find_one(self, filter: dict[str, str]) -> SavedTrip | None: ...

    @abstractmethod
    async def create(self, record: SavedTripCreate) -> SavedTrip: ...

    @abstractmethod
    async def find_by_id_and_delete(self, trip_id: str) -> SavedTrip | None: ...

    @abstractmethod
    def is_valid_id(self, trip_id: str) -> bool: ...
