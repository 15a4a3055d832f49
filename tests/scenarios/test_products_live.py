"""Products API scenarios against the live fake store API.

Run with ``pytest -m live``.
"""

from __future__ import annotations

import time

import pytest

from storefront_e2e.api.models import CreateProductRequest, PartialUpdateProductRequest
from storefront_e2e.constants.api import ApiResponseTimes, ApiTestData, HttpStatus

pytestmark = [pytest.mark.live, pytest.mark.asyncio]


async def test_get_all_products(products_api):
    start = time.perf_counter()
    response = await products_api.get_all_products()
    elapsed = products_api.client.response_time(start)

    assert products_api.client.status_code(response) == HttpStatus.OK
    assert products_api.client.is_successful(response)
    body = await products_api.client.response_body(response)
    assert isinstance(body, list) and body
    for key in ("id", "title", "price", "category", "description", "image"):
        assert key in body[0]
    assert elapsed < ApiResponseTimes.VERY_SLOW


async def test_all_products_have_valid_ratings(products_api):
    products = await products_api.get_all_products_data()
    assert products
    for product in products:
        assert 0 <= product.rating.rate <= 5
        assert product.rating.count >= 0
        assert product.price >= 0


async def test_get_single_product(products_api):
    product = await products_api.get_product_data(ApiTestData.VALID_PRODUCT_ID)
    assert product.id == ApiTestData.VALID_PRODUCT_ID


async def test_limited_products(products_api):
    products = await products_api.get_limited_products_data(ApiTestData.PRODUCTS_LIMIT)
    assert len(products) == ApiTestData.PRODUCTS_LIMIT


async def test_sorted_products_desc(products_api):
    response = await products_api.get_sorted_products("desc")
    ids = [p["id"] for p in await products_api.client.response_body(response)]
    assert ids == sorted(ids, reverse=True)


async def test_categories(products_api):
    categories = await products_api.get_categories_data()
    assert set(ApiTestData.CATEGORIES) <= set(categories)


async def test_products_by_category(products_api):
    response = await products_api.get_products_by_category("jewelery")
    items = await products_api.client.response_body(response)
    assert items and all(item["category"] == "jewelery" for item in items)


async def test_product_exists(products_api):
    assert await products_api.product_exists(ApiTestData.VALID_PRODUCT_ID) is True


async def test_create_update_delete(products_api):
    new = CreateProductRequest(
        title="test product",
        price=13.5,
        description="lorem ipsum set",
        image="https://i.pravatar.cc",
        category="electronic",
    )
    created = await products_api.create_product(new)
    assert products_api.client.is_successful(created)

    patched = await products_api.partial_update_product(
        ApiTestData.VALID_PRODUCT_ID, PartialUpdateProductRequest(price=1.0)
    )
    assert products_api.client.status_code(patched) == HttpStatus.OK

    deleted = await products_api.delete_product(ApiTestData.VALID_PRODUCT_ID)
    assert products_api.client.is_successful(deleted)
