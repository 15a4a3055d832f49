"""UI constants for the demo storefront (automationexercise.com)."""

from __future__ import annotations


class UiRoutes:
    """Relative page paths."""

    HOME = "/"
    LOGIN = "/login"
    SIGNUP = "/signup"
    PRODUCTS = "/products"
    CART = "/view_cart"
    CHECKOUT = "/checkout"
    PAYMENT = "/payment"
    CONTACT_US = "/contact_us"
    TEST_CASES = "/test_cases"


class PageTitles:
    HOME = "Automation Exercise"
    LOGIN = "Automation Exercise - Signup / Login"
    PRODUCTS = "Automation Exercise - All Products"
    CART = "Automation Exercise - Checkout"


class SuccessMessages:
    ACCOUNT_CREATED = "Account Created!"
    ACCOUNT_DELETED = "Account Deleted!"
    LOGIN_SUCCESS = "Logged in as"
    SUBSCRIPTION_SUCCESS = "You have been successfully subscribed!"
    MESSAGE_SENT = "Success! Your details have been submitted successfully."


class ErrorMessages:
    INVALID_CREDENTIALS = "Your email or password is incorrect!"
    EMAIL_EXISTS = "Email Address already exist!"
    REQUIRED_FIELD = "This field is required"


class UiTestData:
    PRODUCT_SEARCH_TERM = "Blue Top"
    SUBSCRIPTION_EMAIL = "test@subscription.com"
    CONTACT_SUBJECT = "Test Inquiry"
    CONTACT_MESSAGE = "This is a test message from automation"


class Timeouts:
    """Timeouts in ms."""

    SHORT = 5_000
    MEDIUM = 10_000
    LONG = 30_000
    NAVIGATION = 30_000
    ACTION = 10_000


class DataQa:
    """Values of the site's ``data-qa`` attributes."""

    LOGIN_EMAIL = "login-email"
    LOGIN_PASSWORD = "login-password"
    LOGIN_BUTTON = "login-button"
    SIGNUP_NAME = "signup-name"
    SIGNUP_EMAIL = "signup-email"
    SIGNUP_BUTTON = "signup-button"

    @staticmethod
    def selector(value: str) -> str:
        return f'[data-qa="{value}"]'
