"""Page object for the storefront's combined login / signup page."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from storefront_e2e.browser.base import PageSession
from storefront_e2e.constants.ui import DataQa, ErrorMessages, SuccessMessages, UiRoutes
from storefront_e2e.pages.actions import PageActions

_ERROR_MESSAGE_SELECTOR = (
    '.login-form p[style*="color: red"], .signup-form p[style*="color: red"]'
)
_LOGIN_URL_PATTERN = re.compile(r".*login")


class LoginPage:
    """Locators and composite actions for ``/login``."""

    def __init__(
        self,
        page: PageSession,
        *,
        base_url: str = "",
        screenshot_dir: str | Path = "screenshots",
        logger: logging.Logger | None = None,
    ) -> None:
        self.actions = PageActions(
            page, base_url=base_url, screenshot_dir=screenshot_dir, logger=logger
        )

        # Login section
        self.login_email = page.locator(DataQa.selector(DataQa.LOGIN_EMAIL))
        self.login_password = page.locator(DataQa.selector(DataQa.LOGIN_PASSWORD))
        self.login_button = page.locator(DataQa.selector(DataQa.LOGIN_BUTTON))

        # Signup section
        self.signup_name = page.locator(DataQa.selector(DataQa.SIGNUP_NAME))
        self.signup_email = page.locator(DataQa.selector(DataQa.SIGNUP_EMAIL))
        self.signup_button = page.locator(DataQa.selector(DataQa.SIGNUP_BUTTON))

        # Messages
        self.error_message = page.locator(_ERROR_MESSAGE_SELECTOR)
        self.logged_in_user = page.locator("a", has_text=SuccessMessages.LOGIN_SUCCESS)

    async def navigate(self) -> None:
        await self.actions.goto(UiRoutes.LOGIN)

    # --- login ---

    async def login(self, email: str, password: str) -> None:
        await self.actions.fill(self.login_email, email)
        await self.actions.fill(self.login_password, password)
        await self.actions.click(self.login_button)

    async def fill_login_email(self, email: str) -> None:
        await self.actions.fill(self.login_email, email)

    async def fill_login_password(self, password: str) -> None:
        await self.actions.fill(self.login_password, password)

    async def click_login_button(self) -> None:
        await self.actions.click(self.login_button)

    # --- signup ---

    async def signup(self, name: str, email: str) -> None:
        await self.actions.fill(self.signup_name, name)
        await self.actions.fill(self.signup_email, email)
        await self.actions.click(self.signup_button)

    async def fill_signup_name(self, name: str) -> None:
        await self.actions.fill(self.signup_name, name)

    async def fill_signup_email(self, email: str) -> None:
        await self.actions.fill(self.signup_email, email)

    async def click_signup_button(self) -> None:
        await self.actions.click(self.signup_button)

    # --- assertions ---

    async def expect_login_success(self) -> None:
        await self.actions.expect_visible(self.logged_in_user)
        await self.actions.expect_contains_text(self.logged_in_user, SuccessMessages.LOGIN_SUCCESS)

    async def expect_login_error(self) -> None:
        await self.actions.expect_visible(self.error_message)
        await self.actions.expect_contains_text(
            self.error_message, ErrorMessages.INVALID_CREDENTIALS
        )

    async def expect_on_login_page(self) -> None:
        await self.actions.expect_url(_LOGIN_URL_PATTERN)
        await self.actions.expect_visible(self.login_button)

    async def expect_email_exists_error(self) -> None:
        await self.actions.expect_visible(self.error_message)
        await self.actions.expect_contains_text(self.error_message, ErrorMessages.EMAIL_EXISTS)

    # --- getters ---

    async def get_error_message(self) -> str:
        return await self.actions.get_text(self.error_message)

    async def is_logged_in(self) -> bool:
        return await self.actions.is_visible(self.logged_in_user)
