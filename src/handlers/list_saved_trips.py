"""GET /trips/saved — list saved trips, optionally filtered by route and sorted."""

import asyncio
import logging
from typing import Any

from core.api_gateway import error_response, get_query_params, json_response
from core.clients import get_dynamo_client
from core.config import get_config
from core.db import DynamoTripCollection
from core.errors import InternalError, TripServiceError
from core.models import ListSavedTripsRequest
from core.services.trip_store import TripStore
from core.validation import validate_payload

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        request = validate_payload(ListSavedTripsRequest, get_query_params(event)).unwrap()
        store = TripStore(DynamoTripCollection(get_dynamo_client(), get_config().saved_trips_table))
        trips = asyncio.run(store.list(request.origin, request.destination, request.sort_by))
    except TripServiceError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to list saved trips")
        return error_response(InternalError())

    return json_response(200, [trip.model_dump(mode="json", by_alias=True) for trip in trips])
