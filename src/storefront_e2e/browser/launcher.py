"""Playwright browser and API request contexts built from :class:`AppSettings`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from playwright.async_api import (
    APIRequestContext,
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)

from storefront_e2e.constants.ui import Timeouts
from storefront_e2e.exceptions import BrowserLaunchError
from storefront_e2e.settings import AppSettings

logger = logging.getLogger(__name__)

_VIEWPORT = {"width": 1280, "height": 720}


class BrowserSession:
    """One Chromium browser, context and page for a single scenario.

    Usable as an async context manager; leaving the block with an exception
    counts as a failure for artifact retention.
    """

    def __init__(self, settings: AppSettings, *, name: str = "session") -> None:
        self._settings = settings
        self._name = name
        self._pw: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def page(self) -> Page:
        assert self._page is not None, "Browser not launched, call launch() first."
        return self._page

    @property
    def context(self) -> BrowserContext:
        assert self._context is not None, "Browser not launched, call launch() first."
        return self._context

    @property
    def artifacts_dir(self) -> Path:
        return Path(self._settings.artifacts_dir)

    # --- lifecycle ---

    async def launch(self) -> Page:
        settings = self._settings
        try:
            self._pw = await async_playwright().start()
            self._browser = await self._pw.chromium.launch(
                headless=settings.headless,
                slow_mo=settings.slow_mo,
            )
            ctx_kwargs: dict[str, Any] = {
                "base_url": settings.ui_base_url,
                "viewport": _VIEWPORT,
                "ignore_https_errors": True,
            }
            if settings.video_on_failure:
                ctx_kwargs["record_video_dir"] = str(self.artifacts_dir / "videos")

            self._context = await self._browser.new_context(**ctx_kwargs)
            self._context.set_default_timeout(Timeouts.ACTION)
            self._context.set_default_navigation_timeout(settings.ui_timeout)
            if settings.trace_on_failure:
                await self._context.tracing.start(screenshots=True, snapshots=True)
            self._page = await self._context.new_page()
            logger.info(
                "Browser launched (headless=%s, slow_mo=%d).",
                settings.headless,
                settings.slow_mo,
            )
        except Exception as exc:
            await self._shutdown()
            raise BrowserLaunchError(f"Failed to start Playwright Chromium: {exc}") from exc
        return self._page

    async def close(self, failed: bool = False) -> None:
        """Close everything, keeping trace and video only when *failed*."""
        video = self._page.video if self._page else None
        if self._context and self._settings.trace_on_failure:
            if failed:
                trace_path = self.artifacts_dir / f"{self._name}-trace.zip"
                await self._context.tracing.stop(path=str(trace_path))
                logger.info("Trace saved to %s.", trace_path)
            else:
                await self._context.tracing.stop()
        await self._shutdown()
        if video is not None and not failed:
            Path(await video.path()).unlink(missing_ok=True)
        logger.info("Browser closed.")

    async def _shutdown(self) -> None:
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._pw:
            await self._pw.stop()
        self._context = self._browser = self._pw = None

    async def __aenter__(self) -> Page:
        return await self.launch()

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.close(failed=exc_type is not None)


async def api_request_context(playwright: Playwright, settings: AppSettings) -> APIRequestContext:
    """Create a request context for API scenarios.  Caller must ``dispose()`` it."""
    context = await playwright.request.new_context(
        ignore_https_errors=True,
        timeout=settings.api_timeout,
    )
    logger.debug("API request context created (timeout=%dms).", settings.api_timeout)
    return context
