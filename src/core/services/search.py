"""Flight search gateway — proxies the external provider and sorts its results."""

import logging
from typing import Any

from core.config import SearchConfig
from core.errors import InternalError, UpstreamError
from core.http_client import HttpClient, HttpStatusError
from core.models.trip import AirportCode, SortBy, Trip
from core.services.sorting import sort_trips

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class SearchGateway:
    def __init__(self, config: SearchConfig, http_client: HttpClient) -> None:
        self._config = config
        self._http_client = http_client

    async def search(self, origin: AirportCode, destination: AirportCode, sort_by: SortBy) -> list[Trip]:
        """Fetch trips for a route and return them sorted by ``sort_by``.

        A single request is made; any failure is surfaced immediately. Provider
        errors keep their status and ``msg``, everything else becomes a 500.
        """
        try:
            response = await self._http_client.get(
                self._config.api_url,
                headers={API_KEY_HEADER: self._config.api_key},
                params={"origin": AirportCode(origin).value, "destination": AirportCode(destination).value},
            )
            trips = [Trip.model_validate(item) for item in response.data]
        except HttpStatusError as e:
            message = _error_message(e.data)
            logger.warning("Trip search %s-%s failed upstream: HTTP %d %s", origin, destination, e.status, message)
            raise UpstreamError(message, status_code=e.status or 500) from e
        except Exception as e:
            logger.exception("Trip search %s-%s failed", origin, destination)
            raise InternalError() from e

        return sort_trips(trips, sort_by)


def _error_message(data: Any) -> str | None:
    if isinstance(data, dict) and data.get("msg"):
        return str(data["msg"])
    return None
