"""Protocol definition for the page session the page wrappers drive."""

from __future__ import annotations

from typing import Any, Callable, Pattern, Protocol, runtime_checkable


@runtime_checkable
class PageSession(Protocol):
    """The subset of a browser page that :class:`PageActions` relies on.

    Playwright's async ``Page`` satisfies this protocol.  Every awaitable
    method suspends the scenario until the browser resolves it or the
    page's own timeout elapses.
    """

    @property
    def url(self) -> str:
        ...

    @property
    def keyboard(self) -> Any:
        ...

    def locator(self, selector: str, **kwargs: Any) -> Any:
        """Return a lazily re-resolved locator for *selector*."""
        ...

    async def goto(self, url: str, **kwargs: Any) -> Any:
        ...

    async def go_back(self, **kwargs: Any) -> Any:
        ...

    async def go_forward(self, **kwargs: Any) -> Any:
        ...

    async def reload(self, **kwargs: Any) -> Any:
        ...

    async def title(self) -> str:
        ...

    async def wait_for_load_state(self, state: str | None = None, **kwargs: Any) -> None:
        ...

    async def wait_for_url(self, url: str | Pattern[str] | Callable[[str], bool], **kwargs: Any) -> None:
        ...

    async def wait_for_timeout(self, timeout: float) -> None:
        ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        ...

    async def screenshot(self, **kwargs: Any) -> bytes:
        ...

    def on(self, event: str, f: Callable[..., Any]) -> None:
        """Register a standing listener for *event*."""
        ...

    def remove_listener(self, event: str, f: Callable[..., Any]) -> None:
        ...
