"""DELETE /trips/saved/{id} — delete a saved trip and return what was removed."""

import asyncio
import logging
from typing import Any

from core.api_gateway import error_response, json_response
from core.clients import get_dynamo_client
from core.config import get_config
from core.db import DynamoTripCollection
from core.errors import InternalError, TripServiceError
from core.services.trip_store import TripStore

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip_id = (event.get("pathParameters") or {}).get("id", "")

    try:
        store = TripStore(DynamoTripCollection(get_dynamo_client(), get_config().saved_trips_table))
        trip = asyncio.run(store.delete(trip_id))
    except TripServiceError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to delete saved trip %s", trip_id)
        return error_response(InternalError())

    return json_response(200, trip.model_dump(mode="json", by_alias=True))
