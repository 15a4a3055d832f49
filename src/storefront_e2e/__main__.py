"""Entry point: ``python -m storefront_e2e``, a smoke check of the API target."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time

from playwright.async_api import async_playwright

from storefront_e2e.api.products import ProductsApi
from storefront_e2e.browser.launcher import api_request_context
from storefront_e2e.constants.api import ApiTestData
from storefront_e2e.exceptions import ConfigurationError
from storefront_e2e.logging_setup import configure_logging
from storefront_e2e.reporting.console import print_banner, print_products
from storefront_e2e.settings import AppSettings

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="storefront-e2e", description=__doc__)
    parser.add_argument(
        "--limit",
        type=int,
        default=ApiTestData.PRODUCTS_LIMIT,
        help="number of products to fetch (default: %(default)s)",
    )
    parser.add_argument("--settings", default=None, help="path to a settings.yaml")
    return parser.parse_args(argv)


async def _async_main(settings: AppSettings, limit: int) -> None:
    print_banner(settings)
    async with async_playwright() as pw:
        request = await api_request_context(pw, settings)
        try:
            api = ProductsApi.from_request(request, settings)
            start = time.perf_counter()
            products = await api.get_limited_products_data(limit)
            print_products(products, api.client.response_time(start))
        finally:
            await request.dispose()


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        settings = AppSettings.from_yaml(args.settings)
    except ConfigurationError as exc:
        configure_logging()
        logger.error("%s", exc)
        sys.exit(2)
    configure_logging(settings.log_level)
    try:
        asyncio.run(_async_main(settings, args.limit))
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        sys.exit(130)
    except Exception as exc:
        logger.error("Smoke check failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
