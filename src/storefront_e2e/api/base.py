"""Protocol definitions for the HTTP transport the API wrappers delegate to."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HttpResponse(Protocol):
    """The response handle returned by a transport call.

    Playwright's ``APIResponse`` satisfies this protocol.
    """

    @property
    def status(self) -> int:
        ...

    @property
    def headers(self) -> dict[str, str]:
        ...

    async def json(self) -> Any:
        """Parse the body as JSON."""
        ...

    async def text(self) -> str:
        """Return the body decoded as text."""
        ...


@runtime_checkable
class HttpTransport(Protocol):
    """Thin abstraction over an HTTP request capability.

    Playwright's ``APIRequestContext`` satisfies this protocol.  Connection
    handling, redirects and timeouts all live behind it.
    """

    async def get(self, url: str, **kwargs: Any) -> HttpResponse:
        ...

    async def post(self, url: str, **kwargs: Any) -> HttpResponse:
        ...

    async def put(self, url: str, **kwargs: Any) -> HttpResponse:
        ...

    async def patch(self, url: str, **kwargs: Any) -> HttpResponse:
        ...

    async def delete(self, url: str, **kwargs: Any) -> HttpResponse:
        ...
