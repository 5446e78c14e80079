"""Catalog inspection CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.catalog.core.exceptions import CatalogError
from src.catalog.core.services import DbSessionService, ProductUseCases
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.repository import ProductRepository
from src.catalog.runtime.context import get_config

console = Console()

products_app = typer.Typer(help="Inspect products in the catalog database")


def _render(products: list[Product], title: str) -> None:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    for product in products:
        table.add_row(str(product.id), product.name, product.description or "")
    console.print(table)


@products_app.command("list")
def list_products() -> None:
    """List every product."""
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            products = ProductUseCases.from_port(ProductRepository(session)).find_all.find_all()
    finally:
        database_service.dispose()

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return
    _render(products, "Products")


@products_app.command("page")
def show_page(
    page: int = typer.Option(0, "--page", "-p", help="0-based page index"),
    page_size: int | None = typer.Option(
        None,
        "--page-size",
        "-s",
        help="Products per page (defaults to pagination.default_page_size)",
    ),
) -> None:
    """Show one page of products."""
    if page_size is None:
        page_size = get_config().pagination.default_page_size
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            use_cases = ProductUseCases.from_port(ProductRepository(session))
            product_page = use_cases.paged_search.paged_search(page, page_size)
    except CatalogError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    _render(
        product_page.products,
        f"Page {page} of {product_page.total_pages} "
        f"({product_page.total_elements} products)",
    )
