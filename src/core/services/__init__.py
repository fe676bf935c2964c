"""
Business services for the trip service.

- search.py: SearchGateway, the flight-search provider proxy
- trip_store.py: TripStore, saved trip list/save/delete
- sorting.py: sort policy shared by both
"""

from core.services.search import SearchGateway
from core.services.sorting import sort_trips
from core.services.trip_store import TripStore

__all__ = ["SearchGateway", "TripStore", "sort_trips"]
