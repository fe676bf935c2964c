"""
Pydantic models for the trip service.
"""

from core.models.requests import ListSavedTripsRequest, SearchTripsRequest
from core.models.trip import AirportCode, SavedTrip, SavedTripCreate, SortBy, Trip

__all__ = [
    "AirportCode",
    "ListSavedTripsRequest",
    "SavedTrip",
    "SavedTripCreate",
    "SearchTripsRequest",
    "SortBy",
    "Trip",
]
