"""Custom exception hierarchy for storefront-e2e.

Transport, parse and assertion errors raised by Playwright are never wrapped
in these types; they reach the test runner unchanged.
"""


class StorefrontE2EError(Exception):
    """Base exception for all storefront-e2e errors."""


class ConfigurationError(StorefrontE2EError):
    """Raised when settings are invalid or missing."""


class BrowserLaunchError(StorefrontE2EError):
    """Raised when the browser fails to start."""
