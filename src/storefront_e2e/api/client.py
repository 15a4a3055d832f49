"""Logged HTTP verb wrapper over an injected transport."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from storefront_e2e.api.base import HttpResponse, HttpTransport
from storefront_e2e.api.models import RequestOptions
from storefront_e2e.constants.api import ContentType


_JSON_HEADERS: dict[str, str] = {"Content-Type": ContentType.JSON}


class ApiClient:
    """Performs one HTTP call per method against ``base_url + endpoint``.

    Every failure raised by the transport is logged and re-raised unchanged.
    There is no retry logic here.
    """

    def __init__(
        self,
        request: HttpTransport,
        base_url: str,
        *,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._request = request
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._log = logger or logging.getLogger(__name__)
        self._log.debug("ApiClient initialized for %s.", self._base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    # --- verbs ---

    async def get(self, endpoint: str, options: RequestOptions | None = None) -> HttpResponse:
        options = options or RequestOptions()
        kwargs: dict[str, Any] = {}
        if options.headers:
            kwargs["headers"] = dict(options.headers)
        if options.params:
            kwargs["params"] = dict(options.params)
        return await self._send("GET", endpoint, kwargs)

    async def post(
        self, endpoint: str, data: Any = None, options: RequestOptions | None = None
    ) -> HttpResponse:
        return await self._send_with_body("POST", endpoint, data, options)

    async def put(
        self, endpoint: str, data: Any = None, options: RequestOptions | None = None
    ) -> HttpResponse:
        return await self._send_with_body("PUT", endpoint, data, options)

    async def patch(
        self, endpoint: str, data: Any = None, options: RequestOptions | None = None
    ) -> HttpResponse:
        return await self._send_with_body("PATCH", endpoint, data, options)

    async def delete(self, endpoint: str, options: RequestOptions | None = None) -> HttpResponse:
        options = options or RequestOptions()
        kwargs: dict[str, Any] = {}
        if options.headers:
            kwargs["headers"] = dict(options.headers)
        return await self._send("DELETE", endpoint, kwargs)

    async def _send_with_body(
        self, verb: str, endpoint: str, data: Any, options: RequestOptions | None
    ) -> HttpResponse:
        options = options or RequestOptions()
        # Caller headers win per key; the JSON default stays for the rest.
        kwargs: dict[str, Any] = {"headers": {**_JSON_HEADERS, **options.headers}}
        if data is not None:
            kwargs["data"] = data
        self._log.debug("Request body: %s", json.dumps(data, default=str))
        return await self._send(verb, endpoint, kwargs)

    async def _send(self, verb: str, endpoint: str, kwargs: dict[str, Any]) -> HttpResponse:
        url = self.url_for(endpoint)
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        send = getattr(self._request, verb.lower())
        self._log.info("%s request to: %s", verb, url)
        try:
            response = await send(url, **kwargs)
        except Exception as exc:
            self._log.error("%s %s failed: %s", verb, url, exc)
            raise
        self._log.info("%s %s - Status: %d", verb, url, response.status)
        return response

    # --- response helpers ---

    async def response_body(self, response: HttpResponse) -> Any:
        """Return the response body parsed as JSON."""
        try:
            body = await response.json()
        except Exception as exc:
            self._log.error("Failed to parse response body: %s", exc)
            raise
        self._log.debug("Response body: %s", json.dumps(body, default=str))
        return body

    def status_code(self, response: HttpResponse) -> int:
        status = response.status
        self._log.debug("Response status: %d", status)
        return status

    def headers(self, response: HttpResponse) -> dict[str, str]:
        headers = dict(response.headers)
        self._log.debug("Response headers: %s", headers)
        return headers

    def is_successful(self, response: HttpResponse) -> bool:
        """``True`` iff the status code is in the 2xx range."""
        status = response.status
        success = 200 <= status <= 299
        self._log.debug("Response successful: %s (Status: %d)", success, status)
        return success

    def response_time(self, start: float) -> float:
        """Milliseconds elapsed since *start*, a ``time.perf_counter()`` value."""
        elapsed = (time.perf_counter() - start) * 1000
        self._log.debug("Response time: %.0fms", elapsed)
        return elapsed
