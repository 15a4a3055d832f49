"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from playwright.async_api import async_playwright

from storefront_e2e.api.client import ApiClient
from storefront_e2e.api.products import ProductsApi
from storefront_e2e.browser.launcher import BrowserSession, api_request_context
from storefront_e2e.constants.ui import ErrorMessages, SuccessMessages
from storefront_e2e.pages.login import LoginPage
from storefront_e2e.settings import AppSettings

BASE_URL = "https://store.example.test"


@pytest.fixture()
def tmp_settings_yaml(tmp_path):
    """Write a minimal settings.yaml and return its path."""
    content = """\
env_name: "ci"
ui_base_url: "http://localhost:8080/"
api_base_url: "http://localhost:3000"
api_timeout: 5000
test_user_email: "test@example.com"
test_user_password: "hunter2"
headless: false
slow_mo: 25
screenshot_on_failure: true
log_level: "debug"
screenshot_dir: "{shots}"
""".format(shots=str(tmp_path / "shots"))
    p = tmp_path / "settings.yaml"
    p.write_text(content)
    return p


class FakeResponse:
    """Stands in for Playwright's ``APIResponse``."""

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        *,
        headers: dict[str, str] | None = None,
        raw: str | None = None,
    ) -> None:
        self._status = status
        self._raw = raw if raw is not None else json.dumps(body)
        self._headers = headers or {"content-type": "application/json; charset=utf-8"}

    @property
    def status(self) -> int:
        return self._status

    @property
    def ok(self) -> bool:
        return 200 <= self._status <= 299

    @property
    def headers(self) -> dict[str, str]:
        return self._headers

    async def json(self) -> Any:
        return json.loads(self._raw)

    async def text(self) -> str:
        return self._raw


@pytest.fixture()
def product_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "title": "A",
        "price": 9.99,
        "description": "Fits in a 15 inch laptop sleeve.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    }


@pytest.fixture()
def transport() -> AsyncMock:
    """A request context whose verb methods answer 200 with an empty object."""
    mock = AsyncMock()
    for verb in ("get", "post", "put", "patch", "delete"):
        getattr(mock, verb).return_value = FakeResponse(200, {})
    return mock


@pytest.fixture()
def client(transport) -> ApiClient:
    return ApiClient(transport, BASE_URL)


@pytest.fixture()
def make_response():
    return FakeResponse


# --- browser-backed fixtures -------------------------------------------------

STOREFRONT_URL = "http://storefront.test"
VALID_EMAIL = "tester@example.com"
VALID_PASSWORD = "s3cret"

_LOGIN_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Automation Exercise - Signup / Login</title></head>
<body>
  <ul id="nav"><li><a href="/login">Signup / Login</a></li></ul>
  <div class="login-form">
    <h2>Login to your account</h2>
    <form onsubmit="return false;">
      <input type="email" data-qa="login-email" placeholder="Email Address">
      <input type="password" data-qa="login-password" placeholder="Password">
      <button type="button" data-qa="login-button" onclick="doLogin()">Login</button>
    </form>
  </div>
  <div class="signup-form">
    <h2>New User Signup!</h2>
    <form onsubmit="return false;">
      <input type="text" data-qa="signup-name" placeholder="Name">
      <input type="email" data-qa="signup-email" placeholder="Email Address">
      <button type="button" data-qa="signup-button" onclick="doSignup()">Signup</button>
    </form>
  </div>
  <script>
    function value(qa) {
      return document.querySelector('[data-qa="' + qa + '"]').value;
    }
    function showError(formSelector, text) {
      const p = document.createElement('p');
      p.setAttribute('style', 'color: red;');
      p.textContent = text;
      document.querySelector(formSelector).appendChild(p);
    }
    async function post(path, payload) {
      return fetch(path, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(payload),
      });
    }
    async function doLogin() {
      const res = await post('/login', {email: value('login-email'), password: value('login-password')});
      if (res.ok) {
        const data = await res.json();
        document.getElementById('nav').innerHTML =
          '<li><a href="/"><i class="fa fa-user"></i> __LOGGED_IN__ <b>' + data.name + '</b></a></li>';
      } else {
        showError('.login-form form', '__INVALID__');
      }
    }
    async function doSignup() {
      const res = await post('/signup', {name: value('signup-name'), email: value('signup-email')});
      if (!res.ok) {
        showError('.signup-form form', '__EXISTS__');
      }
    }
  </script>
</body>
</html>
"""


def _login_html() -> str:
    return (
        _LOGIN_HTML.replace("__LOGGED_IN__", SuccessMessages.LOGIN_SUCCESS)
        .replace("__INVALID__", ErrorMessages.INVALID_CREDENTIALS)
        .replace("__EXISTS__", ErrorMessages.EMAIL_EXISTS)
    )


async def _serve_storefront(route, request) -> None:
    """Mocked storefront backend: one login page plus its two form endpoints."""
    if request.method == "POST" and request.url.endswith("/login"):
        creds = request.post_data_json or {}
        if creds.get("email") == VALID_EMAIL and creds.get("password") == VALID_PASSWORD:
            await route.fulfill(status=200, json={"name": "Tester"})
        else:
            await route.fulfill(status=401, json={"error": "invalid credentials"})
    elif request.method == "POST" and request.url.endswith("/signup"):
        await route.fulfill(status=409, json={"error": "email exists"})
    else:
        await route.fulfill(status=200, content_type="text/html", body=_login_html())


@pytest_asyncio.fixture()
async def storefront_page():
    """A real Chromium page whose network is served by ``_serve_storefront``."""
    try:
        pw = await async_playwright().start()
    except Exception as exc:
        pytest.skip(f"Playwright unavailable: {exc}")
    try:
        browser = await pw.chromium.launch(headless=True)
    except Exception as exc:
        await pw.stop()
        pytest.skip(f"Chromium unavailable: {exc}")
    context = await browser.new_context(base_url=STOREFRONT_URL)
    page = await context.new_page()
    await page.route("**/*", _serve_storefront)
    yield page
    await context.close()
    await browser.close()
    await pw.stop()


# --- live scenario fixtures --------------------------------------------------


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings.from_yaml()


@pytest_asyncio.fixture()
async def products_api(settings):
    async with async_playwright() as pw:
        request = await api_request_context(pw, settings)
        yield ProductsApi.from_request(request, settings)
        await request.dispose()


@pytest_asyncio.fixture()
async def login_page(request, settings):
    """A ``LoginPage`` on the live site, already navigated to ``/login``."""
    session = BrowserSession(settings, name=request.node.name)
    page = await session.launch()
    login = LoginPage(page, screenshot_dir=settings.screenshot_dir)
    await login.navigate()
    yield login
    report = getattr(request.node, "rep_call", None)
    failed = bool(report and report.failed)
    if failed and settings.screenshot_on_failure:
        await login.actions.take_screenshot(request.node.name)
    await session.close(failed=failed)
