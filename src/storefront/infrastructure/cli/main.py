from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from storefront.infrastructure.bootstrap import (
    DATA_DIR_ENVVAR,
    DEFAULT_DATA_DIR,
    LOG_LEVEL_ENVVAR,
)
from storefront.infrastructure.cli.order_commands import (
    order_add_item,
    order_cancel,
    order_confirm,
    order_create,
    order_list,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_deactivate,
    product_edit,
    product_list,
    product_restock,
    product_set_stock,
    product_show,
    product_update,
)
from storefront.infrastructure.logging import LEVELS, configure_logging


@dataclass(frozen=True)
class CliSettings:
    data_dir: Path


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar=DATA_DIR_ENVVAR,
    show_default=True,
    help="Directory holding products.json and orders.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    default="WARNING",
    envvar=LOG_LEVEL_ENVVAR,
    show_default=True,
    help="Minimum level of log events written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Storefront — products and orders"""
    configure_logging(log_level)
    ctx.obj = CliSettings(data_dir=data_dir)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_add_item)
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_restock)
product.add_command(product_set_stock)
product.add_command(product_show)
product.add_command(product_update)
