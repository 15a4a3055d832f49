"""API constants for the fake store API (fakestoreapi.com)."""

from __future__ import annotations

from enum import IntEnum
from typing import Literal

SortDirection = Literal["asc", "desc"]
SORT_DIRECTIONS: tuple[str, ...] = ("asc", "desc")


class ApiEndpoints:
    """Endpoint paths, relative to the API base URL."""

    # --- products ---
    PRODUCTS = "/products"
    PRODUCT_CATEGORIES = "/products/categories"

    @staticmethod
    def product_by_id(product_id: int) -> str:
        return f"/products/{product_id}"

    @staticmethod
    def products_by_category(category: str) -> str:
        return f"/products/category/{category}"

    # --- carts ---
    CARTS = "/carts"

    @staticmethod
    def cart_by_id(cart_id: int) -> str:
        return f"/carts/{cart_id}"

    @staticmethod
    def user_carts(user_id: int) -> str:
        return f"/carts/user/{user_id}"

    # --- users ---
    USERS = "/users"

    @staticmethod
    def user_by_id(user_id: int) -> str:
        return f"/users/{user_id}"

    # --- auth ---
    LOGIN = "/auth/login"


class HttpStatus(IntEnum):
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


class ContentType:
    JSON = "application/json"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


class ApiResponseTimes:
    """Maximum acceptable response times in ms."""

    FAST = 500
    NORMAL = 1_000
    SLOW = 2_000
    VERY_SLOW = 5_000


class ApiTestData:
    VALID_USER_ID = 1
    VALID_PRODUCT_ID = 1
    VALID_CART_ID = 1
    INVALID_ID = 999_999
    PRODUCTS_LIMIT = 5
    CATEGORIES: tuple[str, ...] = (
        "electronics",
        "jewelery",
        "men's clothing",
        "women's clothing",
    )


class ApiErrorMessages:
    INVALID_CREDENTIALS = "username or password is incorrect"
    RESOURCE_NOT_FOUND = "Resource not found"
    VALIDATION_ERROR = "Validation error"
