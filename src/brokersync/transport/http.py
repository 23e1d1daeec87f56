"""httpx-backed registry transport."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from brokersync.contracts.transport import HttpHandler, HttpResponse

logger = logging.getLogger(__name__)


class RegistryHttpHandler(HttpHandler):
    """Blocking JSON requests against the registry API.

    Transport-level failures are reported through :class:`HttpResponse`
    rather than raised. Requests are never retried.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
                "User-Agent": "brokersync",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self) -> RegistryHttpHandler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, uri: str, body: dict[str, Any] | None = None) -> HttpResponse:
        logger.debug("%s %s", method.upper(), uri)
        try:
            response = self._client.request(method.upper(), uri, json=body)
        except httpx.HTTPError as exc:
            return HttpResponse(error=f"{type(exc).__name__}: {exc}")
        return HttpResponse(status=response.status_code, body=response.text)
