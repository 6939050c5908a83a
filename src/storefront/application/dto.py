"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the aggregates themselves.  Money is rendered as a decimal
string, timestamps as ISO-8601.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderPage


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which product the customer asked for and how many."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    product_id: int
    product_name: str
    unit_price: str  # e.g. "15.00"
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    status: str
    total: str
    currency: str
    created_at: str
    confirmed_at: str | None
    cancelled_at: str | None
    cancellation_reason: str | None
    items: list[OrderItemDTO]


@dataclass(frozen=True)
class OrderPageDTO:
    data: list[OrderDTO]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.page_size)


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str
    currency: str
    stock: int
    category: str
    active: bool
    description: str
    contact_email: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductPageDTO:
    data: list[ProductDTO]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.page_size)


# --- Mapping ------------------------------------------------------------------


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        total=f"{order.total.amount:.2f}",
        currency=order.total.currency,
        created_at=order.created_at.isoformat(),
        confirmed_at=_iso(order.confirmed_at),
        cancelled_at=_iso(order.cancelled_at),
        cancellation_reason=order.cancellation_reason,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=f"{item.unit_price.amount:.2f}",
                quantity=item.quantity,
                subtotal=f"{item.subtotal.amount:.2f}",
            )
            for item in order.items
        ],
    )


def order_page_to_dto(page: OrderPage) -> OrderPageDTO:
    return OrderPageDTO(
        data=[order_to_dto(o) for o in page.items],
        total=page.total,
        page=page.page,
        page_size=page.page_size,
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        price=f"{product.price.amount:.2f}",
        currency=product.price.currency,
        stock=product.stock,
        category=product.category,
        active=product.active,
        description=product.description,
        contact_email=product.contact_email,
        created_at=product.created_at.isoformat(),
        updated_at=product.updated_at.isoformat(),
    )
