"""POST /trips — save a trip. Duplicate apiId answers 409."""

import asyncio
import logging
from typing import Any

from core.api_gateway import error_response, get_json_body, json_response
from core.clients import get_dynamo_client
from core.config import get_config
from core.db import DynamoTripCollection
from core.errors import InternalError, TripServiceError
from core.models import SavedTripCreate
from core.services.trip_store import TripStore
from core.validation import validate_payload

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        candidate = validate_payload(SavedTripCreate, get_json_body(event)).unwrap()
        store = TripStore(DynamoTripCollection(get_dynamo_client(), get_config().saved_trips_table))
        trip = asyncio.run(store.save(candidate))
    except TripServiceError as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to save trip")
        return error_response(InternalError())

    return json_response(201, trip.model_dump(mode="json", by_alias=True))
