"""Outbound HTTP client used by the flight search gateway."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status: int
    data: Any


class HttpStatusError(Exception):
    """The remote server answered with a 4xx/5xx status.

    ``data`` holds the parsed JSON body when there is one, otherwise the raw text.
    """

    def __init__(self, status: int, data: Any = None):
        self.status = status
        self.data = data
        super().__init__(f"HTTP {status}")


class HttpClient(ABC):
    @abstractmethod
    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> HttpResponse: ...


class AiohttpClient(HttpClient):
    """HttpClient backed by a single aiohttp session. Use as an async context manager."""

    def __init__(self, timeout_seconds: float = 10.0):
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "AiohttpClient":
        self._session = aiohttp.ClientSession(headers={"Accept": "application/json"})
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> HttpResponse:
        if self._session is None or self._session.closed:
            raise RuntimeError("AiohttpClient session is not open. Use 'async with AiohttpClient()'.")

        logger.debug("GET %s params=%s", url, params)
        async with self._session.get(url, headers=headers, params=params, timeout=self._timeout) as response:
            body = await response.text()
            data = _parse_body(body)
            if response.status >= 400:
                logger.debug("GET %s failed with HTTP %d", url, response.status)
                raise HttpStatusError(response.status, data)
            return HttpResponse(status=response.status, data=data)


def _parse_body(body: str) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body
