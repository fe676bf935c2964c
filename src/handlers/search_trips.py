"""GET /trips — search the flight provider, sorted by the requested policy."""

import asyncio
import logging
from typing import Any

from core.api_gateway import error_response, get_header, get_query_params, json_response
from core.auth import verify_api_key
from core.config import get_config, get_search_config
from core.errors import InternalError, TripServiceError
from core.http_client import AiohttpClient
from core.models import SearchTripsRequest, Trip
from core.services.search import API_KEY_HEADER, SearchGateway
from core.validation import validate_payload

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        verify_api_key(get_header(event, API_KEY_HEADER), get_config().client_api_key)
        request = validate_payload(SearchTripsRequest, get_query_params(event)).unwrap()
        trips = asyncio.run(_search(request))
    except TripServiceError as e:
        return error_response(e)
    except Exception:
        logger.exception("Trip search failed")
        return error_response(InternalError())

    logger.info("Trip search %s-%s returned %d trips", request.origin.value, request.destination.value, len(trips))
    return json_response(200, [trip.model_dump(mode="json", exclude_none=True) for trip in trips])


async def _search(request: SearchTripsRequest) -> list[Trip]:
    search_config = get_search_config()
    async with AiohttpClient(timeout_seconds=search_config.timeout_seconds) as http_client:
        gateway = SearchGateway(search_config, http_client)
        return await gateway.search(request.origin, request.destination, request.sort_by)
