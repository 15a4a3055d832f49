"""Logged navigation, wait, action and assertion primitives over a page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Pattern, Union

from playwright.async_api import Locator, expect

from storefront_e2e.browser.base import PageSession

TextPattern = Union[str, Pattern[str]]


class PageActions:
    """Adapts one page session into primitives for page objects and scenarios.

    Actions wait for the target to be visible before acting.  Provider
    errors (timeouts, detached elements, failed assertions) are never caught
    here, except by the ``is_*`` probes which answer ``False`` instead.
    """

    def __init__(
        self,
        page: PageSession,
        *,
        base_url: str = "",
        screenshot_dir: str | Path = "screenshots",
        logger: logging.Logger | None = None,
    ) -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")
        self._screenshot_dir = Path(screenshot_dir)
        self._log = logger or logging.getLogger(__name__)
        self._dialog_handler: Callable[[Any], Awaitable[None]] | None = None

    # --- navigation ---

    async def goto(self, path: str = "/") -> None:
        """Navigate to *path*; relative paths resolve against ``base_url``."""
        url = f"{self.base_url}{path}" if self.base_url and path.startswith("/") else path
        self._log.info("Navigating to: %s", url)
        await self.page.goto(url)
        self._log.info("Navigated to: %s", url)

    async def go_back(self) -> None:
        self._log.info("Navigating back")
        await self.page.go_back()
        self._log.info("Navigated back")

    async def go_forward(self) -> None:
        self._log.info("Navigating forward")
        await self.page.go_forward()
        self._log.info("Navigated forward")

    async def reload(self) -> None:
        self._log.info("Reloading page")
        await self.page.reload()
        self._log.info("Page reloaded")

    # --- waits ---

    async def wait_for_visible(self, locator: Locator, timeout: float | None = None) -> None:
        self._log.debug("Waiting for element to be visible")
        await locator.wait_for(state="visible", timeout=timeout)
        self._log.debug("Element is visible")

    async def wait_for_hidden(self, locator: Locator, timeout: float | None = None) -> None:
        self._log.debug("Waiting for element to be hidden")
        await locator.wait_for(state="hidden", timeout=timeout)
        self._log.debug("Element is hidden")

    async def wait_for_page_load(self) -> None:
        self._log.debug("Waiting for page load")
        await self.page.wait_for_load_state("load")
        self._log.debug("Page loaded")

    async def wait_for_network_idle(self) -> None:
        self._log.debug("Waiting for network idle")
        await self.page.wait_for_load_state("networkidle")
        self._log.debug("Network is idle")

    async def wait_for_url(self, pattern: TextPattern) -> None:
        self._log.debug("Waiting for URL: %s", pattern)
        await self.page.wait_for_url(pattern)
        self._log.debug("URL matched: %s", pattern)

    # --- actions ---

    async def click(self, locator: Locator) -> None:
        self._log.info("Clicking element")
        await locator.wait_for(state="visible")
        await locator.click()
        self._log.info("Element clicked")

    async def double_click(self, locator: Locator) -> None:
        self._log.info("Double clicking element")
        await locator.wait_for(state="visible")
        await locator.dblclick()
        self._log.info("Element double clicked")

    async def fill(self, locator: Locator, text: str) -> None:
        self._log.info('Filling text: "%s"', text)
        await locator.wait_for(state="visible")
        await locator.fill(text)
        self._log.info("Text filled")

    async def type_slowly(self, locator: Locator, text: str, delay: float | None = None) -> None:
        """Type *text* one key at a time, *delay* ms between keys."""
        self._log.info('Typing text: "%s"', text)
        await locator.wait_for(state="visible")
        await locator.press_sequentially(text, delay=delay)
        self._log.info("Text typed")

    async def select_option(self, locator: Locator, value: str) -> None:
        self._log.info('Selecting option: "%s"', value)
        await locator.wait_for(state="visible")
        await locator.select_option(value)
        self._log.info("Option selected")

    async def check(self, locator: Locator) -> None:
        self._log.info("Checking checkbox/radio")
        await locator.wait_for(state="visible")
        await locator.check()
        self._log.info("Checkbox/radio checked")

    async def uncheck(self, locator: Locator) -> None:
        self._log.info("Unchecking checkbox")
        await locator.wait_for(state="visible")
        await locator.uncheck()
        self._log.info("Checkbox unchecked")

    async def hover(self, locator: Locator) -> None:
        self._log.info("Hovering over element")
        await locator.wait_for(state="visible")
        await locator.hover()
        self._log.info("Hovered")

    async def scroll_into_view(self, locator: Locator) -> None:
        self._log.debug("Scrolling element into view")
        await locator.scroll_into_view_if_needed()
        self._log.debug("Element scrolled into view")

    async def scroll_to_top(self) -> None:
        self._log.debug("Scrolling to top")
        await self.page.evaluate("() => window.scrollTo(0, 0)")
        self._log.debug("Scrolled to top")

    async def scroll_to_bottom(self) -> None:
        self._log.debug("Scrolling to bottom")
        await self.page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")
        self._log.debug("Scrolled to bottom")

    # --- getters ---

    async def get_title(self) -> str:
        title = await self.page.title()
        self._log.debug("Page title: %s", title)
        return title

    def get_current_url(self) -> str:
        url = self.page.url
        self._log.debug("Current URL: %s", url)
        return url

    async def get_text(self, locator: Locator) -> str:
        """Return the element's text content, ``""`` when it has none."""
        await locator.wait_for(state="visible")
        text = await locator.text_content() or ""
        self._log.debug("Element text: %s", text)
        return text

    async def get_attribute(self, locator: Locator, name: str) -> str | None:
        value = await locator.get_attribute(name)
        self._log.debug("Attribute %s = %s", name, value)
        return value

    async def get_all_elements(self, locator: Locator) -> list[Locator]:
        elements = await locator.all()
        self._log.debug("Found %d elements", len(elements))
        return elements

    async def get_element_count(self, locator: Locator) -> int:
        count = await locator.count()
        self._log.debug("Element count: %d", count)
        return count

    # --- assertions ---

    async def _expect(self, description: str, assertion: Awaitable[None]) -> None:
        self._log.info("Asserting %s", description)
        try:
            await assertion
        except AssertionError:
            self._log.error("Assertion failed: %s", description)
            raise
        self._log.info("Assertion passed: %s", description)

    async def expect_visible(self, locator: Locator, timeout: float | None = None) -> None:
        await self._expect("element is visible", expect(locator).to_be_visible(timeout=timeout))

    async def expect_hidden(self, locator: Locator, timeout: float | None = None) -> None:
        await self._expect("element is hidden", expect(locator).to_be_hidden(timeout=timeout))

    async def expect_text(
        self, locator: Locator, text: TextPattern, timeout: float | None = None
    ) -> None:
        await self._expect(
            f"element has text: {text}",
            expect(locator).to_have_text(text, timeout=timeout),
        )

    async def expect_contains_text(
        self, locator: Locator, text: TextPattern, timeout: float | None = None
    ) -> None:
        await self._expect(
            f"element contains text: {text}",
            expect(locator).to_contain_text(text, timeout=timeout),
        )

    async def expect_title(self, title: TextPattern, timeout: float | None = None) -> None:
        await self._expect(
            f"page title: {title}",
            expect(self.page).to_have_title(title, timeout=timeout),
        )

    async def expect_url(self, url: TextPattern, timeout: float | None = None) -> None:
        await self._expect(
            f"page URL: {url}",
            expect(self.page).to_have_url(url, timeout=timeout),
        )

    async def expect_enabled(self, locator: Locator, timeout: float | None = None) -> None:
        await self._expect("element is enabled", expect(locator).to_be_enabled(timeout=timeout))

    async def expect_disabled(self, locator: Locator, timeout: float | None = None) -> None:
        await self._expect("element is disabled", expect(locator).to_be_disabled(timeout=timeout))

    async def expect_checked(self, locator: Locator, timeout: float | None = None) -> None:
        await self._expect("element is checked", expect(locator).to_be_checked(timeout=timeout))

    # --- utilities ---

    async def take_screenshot(self, name: str) -> Path:
        path = self._screenshot_dir / f"{name}.png"
        self._log.info("Taking screenshot: %s", name)
        await self.page.screenshot(path=str(path), full_page=True)
        self._log.info("Screenshot saved: %s", path)
        return path

    async def press_key(self, key: str) -> None:
        self._log.info("Pressing key: %s", key)
        await self.page.keyboard.press(key)
        self._log.info("Key pressed: %s", key)

    def accept_dialogs(self) -> None:
        """Accept every dialog the page opens from now on."""
        self._set_dialog_handler(accept=True)

    def dismiss_dialogs(self) -> None:
        """Dismiss every dialog the page opens from now on."""
        self._set_dialog_handler(accept=False)

    def clear_dialog_handler(self) -> None:
        if self._dialog_handler is not None:
            self.page.remove_listener("dialog", self._dialog_handler)
            self._dialog_handler = None

    def _set_dialog_handler(self, accept: bool) -> None:
        # One standing handler per instance; a new registration replaces the old.
        self.clear_dialog_handler()
        verb = "accept" if accept else "dismiss"
        log = self._log

        async def handler(dialog: Any) -> None:
            log.info("Dialog appeared: %s", dialog.message)
            if accept:
                await dialog.accept()
            else:
                await dialog.dismiss()
            log.info("Dialog %sed", verb)

        self._log.info("Registering dialog handler (%s)", verb)
        self.page.on("dialog", handler)
        self._dialog_handler = handler

    async def wait(self, ms: float) -> None:
        """Sleep unconditionally.  Prefer a wait on a condition."""
        self._log.debug("Waiting for %sms", ms)
        await self.page.wait_for_timeout(ms)
        self._log.debug("Wait completed")

    async def is_element_present(self, locator: Locator) -> bool:
        try:
            present = await locator.count() > 0
        except Exception as exc:
            self._log.debug("Presence probe failed: %s", exc)
            return False
        self._log.debug("Element present: %s", present)
        return present

    async def is_visible(self, locator: Locator) -> bool:
        try:
            visible = await locator.is_visible()
        except Exception as exc:
            self._log.debug("Visibility probe failed: %s", exc)
            return False
        self._log.debug("Element visible: %s", visible)
        return visible

    async def is_enabled(self, locator: Locator) -> bool:
        try:
            enabled = await locator.is_enabled()
        except Exception as exc:
            self._log.debug("Enabled probe failed: %s", exc)
            return False
        self._log.debug("Element enabled: %s", enabled)
        return enabled
