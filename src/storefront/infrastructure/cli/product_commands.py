"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.deactivate_product import DeactivateProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.list_products import ListProductsHandler
from storefront.application.restock_product import RestockProductHandler
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.application.update_product_details import UpdateProductDetailsHandler
from storefront.domain.repository.order_repository import DEFAULT_PAGE_SIZE
from storefront.infrastructure.bootstrap import product_repository
from storefront.infrastructure.cli.errors import unwrap


def _print_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  {dto.name}{'' if dto.active else '  (inactive)'}")
    click.echo(f"Price:     {dto.price} {dto.currency}")
    click.echo(f"Stock:     {dto.stock}")
    click.echo(f"Category:  {dto.category or '-'}")
    click.echo(f"Contact:   {dto.contact_email}")
    click.echo(f"Created:   {dto.created_at}")
    click.echo(f"Updated:   {dto.updated_at}")
    if dto.description:
        click.echo()
        click.echo(f"  {dto.description}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--email", "contact_email", required=True, help="Supplier contact email.")
@click.option("--category", default="", help="Catalog category.")
@click.option("--description", default="", help="Free-text description.")
@click.pass_obj
def product_add(
    settings,
    name: str,
    price: str,
    stock: int,
    contact_email: str,
    category: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings.data_dir))
    dto = unwrap(
        handler.handle(
            name=name,
            price=price,
            stock=stock,
            contact_email=contact_email,
            description=description,
            category=category,
        )
    )
    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price} {dto.currency}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--all", "include_inactive", is_flag=True, help="Also show an inactive product.")
@click.pass_obj
def product_show(settings, product_id: int, include_inactive: bool) -> None:
    """Show one product's details."""
    handler = ShowProductHandler(product_repo=product_repository(settings.data_dir))
    _print_product(unwrap(handler.handle(product_id, include_inactive=include_inactive)))


@click.command("list")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--page-size", default=DEFAULT_PAGE_SIZE, type=int, show_default=True)
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--search", default=None, help="Text to look for in name or description.")
@click.option("--all", "include_inactive", is_flag=True, help="Include inactive products.")
@click.pass_obj
def product_list(
    settings,
    page: int,
    page_size: int,
    category: str | None,
    search: str | None,
    include_inactive: bool,
) -> None:
    """List products in the catalog, newest first."""
    handler = ListProductsHandler(product_repo=product_repository(settings.data_dir))
    result = unwrap(
        handler.handle(
            page=page,
            page_size=page_size,
            category=category,
            search=search,
            include_inactive=include_inactive,
        )
    )

    if not result.data:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<12} {'Price':>10} {'Stock':>7}  Active")
    click.echo("-" * 65)
    for p in result.data:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.category:<12} {p.price:>10} {p.stock:>7}  "
            f"{'yes' if p.active else 'no'}"
        )
    click.echo(
        f"Page {result.page}/{max(result.total_pages, 1)} ({result.total} products)"
    )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(settings, product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository(settings.data_dir))
    dto = unwrap(handler.handle(product_id=product_id, new_price=price))
    click.echo(f"Product #{product_id} price updated to {dto.price} {dto.currency}")


@click.command("edit")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@click.option("--email", "contact_email", default=None, help="New contact email.")
@click.pass_obj
def product_edit(
    settings,
    product_id: int,
    name: str | None,
    description: str | None,
    category: str | None,
    contact_email: str | None,
) -> None:
    """Change a product's name, description, category or contact email."""
    handler = UpdateProductDetailsHandler(product_repo=product_repository(settings.data_dir))
    dto = unwrap(
        handler.handle(
            product_id,
            name=name,
            description=description,
            category=category,
            contact_email=contact_email,
        )
    )
    click.echo(f"Product #{dto.id} '{dto.name}' updated.")


@click.command("restock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.pass_obj
def product_restock(settings, product_id: int, quantity: int) -> None:
    """Add units to a product's stock."""
    handler = RestockProductHandler(product_repo=product_repository(settings.data_dir))
    dto = unwrap(handler.handle(product_id, quantity))
    click.echo(f"Product #{product_id} stock is now {dto.stock}")


@click.command("set-stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
@click.pass_obj
def product_set_stock(settings, product_id: int, quantity: int) -> None:
    """Overwrite a product's stock level."""
    handler = SetStockHandler(product_repo=product_repository(settings.data_dir))
    dto = unwrap(handler.handle(product_id, quantity))
    click.echo(f"Product #{product_id} stock set to {dto.stock}")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_deactivate(settings, product_id: int) -> None:
    """Remove a product from sale (soft delete)."""
    handler = DeactivateProductHandler(product_repo=product_repository(settings.data_dir))
    unwrap(handler.handle(product_id))
    click.echo(f"Product #{product_id} deactivated.")
