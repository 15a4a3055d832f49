"""Products resource wrapper for the fake store API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel

from storefront_e2e.api.base import HttpResponse, HttpTransport
from storefront_e2e.api.client import ApiClient
from storefront_e2e.api.models import (
    CreateProductRequest,
    PartialUpdateProductRequest,
    Product,
    RequestOptions,
    UpdateProductRequest,
)
from storefront_e2e.constants.api import SORT_DIRECTIONS, ApiEndpoints, SortDirection
from storefront_e2e.settings import AppSettings

logger = logging.getLogger(__name__)


def _payload(data: BaseModel | Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_none=partial)
    if partial:
        return {k: v for k, v in data.items() if v is not None}
    return dict(data)


class ProductsApi:
    """CRUD, query and typed helpers for ``/products``.

    Every method is one fresh round trip through the wrapped :class:`ApiClient`;
    nothing is cached.
    """

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    @classmethod
    def from_request(
        cls,
        request: HttpTransport,
        settings: AppSettings,
        *,
        logger: logging.Logger | None = None,
    ) -> "ProductsApi":
        client = ApiClient(
            request,
            settings.api_base_url,
            timeout=settings.api_timeout,
            logger=logger,
        )
        return cls(client)

    # --- read ---

    async def get_all_products(self) -> HttpResponse:
        return await self.client.get(ApiEndpoints.PRODUCTS)

    async def get_product_by_id(self, product_id: int) -> HttpResponse:
        return await self.client.get(ApiEndpoints.product_by_id(product_id))

    async def get_products_by_category(self, category: str) -> HttpResponse:
        return await self.client.get(ApiEndpoints.products_by_category(category))

    async def get_all_categories(self) -> HttpResponse:
        return await self.client.get(ApiEndpoints.PRODUCT_CATEGORIES)

    async def get_limited_products(self, limit: int) -> HttpResponse:
        return await self.client.get(
            ApiEndpoints.PRODUCTS, RequestOptions(params={"limit": limit})
        )

    async def get_sorted_products(self, direction: SortDirection) -> HttpResponse:
        if direction not in SORT_DIRECTIONS:
            raise ValueError(f"sort direction must be one of {SORT_DIRECTIONS}, got {direction!r}")
        return await self.client.get(
            ApiEndpoints.PRODUCTS, RequestOptions(params={"sort": direction})
        )

    # --- write ---

    async def create_product(
        self, data: CreateProductRequest | Mapping[str, Any]
    ) -> HttpResponse:
        return await self.client.post(ApiEndpoints.PRODUCTS, _payload(data))

    async def update_product(
        self, product_id: int, data: UpdateProductRequest | Mapping[str, Any]
    ) -> HttpResponse:
        """Replace the product; every field must be present."""
        return await self.client.put(ApiEndpoints.product_by_id(product_id), _payload(data))

    async def partial_update_product(
        self, product_id: int, data: PartialUpdateProductRequest | Mapping[str, Any]
    ) -> HttpResponse:
        """Send only the fields that are set."""
        return await self.client.patch(
            ApiEndpoints.product_by_id(product_id), _payload(data, partial=True)
        )

    async def delete_product(self, product_id: int) -> HttpResponse:
        return await self.client.delete(ApiEndpoints.product_by_id(product_id))

    # --- typed helpers ---

    async def get_product_data(self, product_id: int) -> Product:
        response = await self.get_product_by_id(product_id)
        body = await self.client.response_body(response)
        return Product.model_validate(body)

    async def get_all_products_data(self) -> list[Product]:
        response = await self.get_all_products()
        body = await self.client.response_body(response)
        return [Product.model_validate(item) for item in body]

    async def get_limited_products_data(self, limit: int) -> list[Product]:
        response = await self.get_limited_products(limit)
        body = await self.client.response_body(response)
        return [Product.model_validate(item) for item in body]

    async def get_categories_data(self) -> list[str]:
        response = await self.get_all_categories()
        return [str(c) for c in await self.client.response_body(response)]

    async def product_exists(self, product_id: int) -> bool:
        """Return ``True`` if ``GET /products/{id}`` succeeds.

        Any error, from a 404 to a dropped connection, reads as ``False``;
        callers cannot tell those apart.
        """
        try:
            response = await self.get_product_by_id(product_id)
            return self.client.is_successful(response)
        except Exception as exc:
            logger.debug("Product %s treated as missing: %s", product_id, exc)
            return False

    async def get_product_count(self) -> int:
        return len(await self.get_all_products_data())
