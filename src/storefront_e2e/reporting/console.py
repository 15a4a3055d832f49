"""Rich-powered console output for the smoke command."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from storefront_e2e.api.models import Product
from storefront_e2e.settings import AppSettings

_console = Console()


def print_banner(settings: AppSettings) -> None:
    """Display the active targets."""
    _console.print(
        Panel.fit(
            f"[bold cyan]storefront-e2e[/bold cyan]  ({settings.env_name})\n"
            f"UI   {settings.ui_base_url}\n"
            f"API  {settings.api_base_url}",
            border_style="cyan",
        )
    )


def print_products(products: list[Product], elapsed_ms: float) -> None:
    """Display fetched products as a table."""
    table = Table(title="Products", show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Category", style="dim")
    table.add_column("Price", justify="right")
    table.add_column("Rating", justify="right")

    for product in products:
        table.add_row(
            str(product.id),
            product.title,
            product.category,
            f"{product.price:.2f}",
            f"{product.rating.rate:.1f} ({product.rating.count})",
        )

    _console.print()
    _console.print(table)
    _console.print(f"[dim]{len(products)} product(s) in {elapsed_ms:.0f} ms[/dim]")
    _console.print()
