"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.add_item import AddItemHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.repository.order_repository import DEFAULT_PAGE_SIZE
from storefront.infrastructure.bootstrap import order_repository, product_repository
from storefront.infrastructure.cli.errors import unwrap


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product id : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product id and quantity must be integers."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:   {dto.created_at}")
    if dto.confirmed_at:
        click.echo(f"Confirmed: {dto.confirmed_at}")
    if dto.cancelled_at:
        click.echo(f"Cancelled: {dto.cancelled_at}  ({dto.cancellation_reason})")
    click.echo()

    click.echo(f"  {'ID':>4} {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:>4} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Order Total':<32} {dto.total + ' ' + dto.currency:>20}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_obj
def order_create(settings, items: str) -> None:
    """Create a new draft order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(settings.data_dir),
        product_repo=product_repository(settings.data_dir),
    )
    dto = unwrap(handler.handle(specs))

    click.echo(f"Order #{dto.id} created")
    _display_order(dto)


@click.command("add-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity to add.")
@click.pass_obj
def order_add_item(settings, order_id: int, product_id: int, quantity: int) -> None:
    """Add a product to a draft order (merges with an existing line)."""
    handler = AddItemHandler(
        order_repo=order_repository(settings.data_dir),
        product_repo=product_repository(settings.data_dir),
    )
    dto = unwrap(handler.handle(order_id, product_id, quantity))
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(settings.data_dir))
    _display_order(unwrap(handler.handle(order_id)))


@click.command("list")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--page-size", default=DEFAULT_PAGE_SIZE, type=int, show_default=True)
@click.option("--status", default=None, help="DRAFT, CONFIRMED or CANCELLED.")
@click.pass_obj
def order_list(settings, page: int, page_size: int, status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(settings.data_dir))
    result = unwrap(handler.handle(page=page, page_size=page_size, status=status))

    if not result.data:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':>5} {'Status':<10} {'Items':>5} {'Total':>12}  Created")
    click.echo("-" * 60)
    for dto in result.data:
        click.echo(
            f"{dto.id:>5} {dto.status:<10} {len(dto.items):>5} {dto.total:>12}  {dto.created_at}"
        )
    click.echo(
        f"Page {result.page}/{max(result.total_pages, 1)} ({result.total} orders)"
    )


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
@click.pass_obj
def order_confirm(settings, order_id: int) -> None:
    """Confirm a draft order."""
    handler = ConfirmOrderHandler(order_repo=order_repository(settings.data_dir))
    unwrap(handler.handle(order_id))
    click.echo(f"Order #{order_id} confirmed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.option("--reason", required=True, help="Why the order is being cancelled.")
@click.pass_obj
def order_cancel(settings, order_id: int, reason: str) -> None:
    """Cancel a draft or confirmed order."""
    handler = CancelOrderHandler(order_repo=order_repository(settings.data_dir))
    unwrap(handler.handle(order_id, reason))
    click.echo(f"Order #{order_id} cancelled.")
