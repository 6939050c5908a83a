"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  Every business
invariant is enforced inside the three transition methods
(``add_item``, ``confirm``, ``cancel``); state is private and exposed
through read-only properties only.

Rule violations come back as failed ``Result`` values and leave the
order untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Iterable

from storefront.domain.exceptions import ProgrammingError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.result import ErrorKind, Result


class OrderStatus(Enum):
    DRAFT = "DRAFT"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"

    @staticmethod
    def parse(raw: str | None) -> OrderStatus | None:
        """Case-insensitive lookup; unknown or blank input yields None."""
        if not raw or not raw.strip():
            return None
        try:
            return OrderStatus(raw.strip().upper())
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_DISTINCT_ITEMS = 20
MAX_ITEM_QUANTITY = 999
MIN_CONFIRMATION_TOTAL = Money(Decimal("10.00"))


@dataclass(frozen=True)
class OrderItem:
    """A product line, with name and price snapshotted when it was added.

    Items are immutable: the owning ``Order`` swaps in a new line when a
    quantity changes.  Later price changes on the ``Product`` never reach
    an existing item.
    """

    product_id: int
    product_name: str
    unit_price: Money
    quantity: int

    @staticmethod
    def create(product: Product, quantity: int) -> OrderItem:
        # Validation is the caller's job (Order.add_item).
        return OrderItem(
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            unit_price=product.price,
            quantity=quantity,
        )

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity

    def increment_quantity(self, additional: int) -> OrderItem:
        """Return a copy of this line with *additional* more units."""
        if additional <= 0:
            raise ProgrammingError("Additional quantity must be positive")
        if self.quantity + additional > MAX_ITEM_QUANTITY:
            raise ProgrammingError(
                f"Maximum quantity per item is {MAX_ITEM_QUANTITY}"
            )
        return replace(self, quantity=self.quantity + additional)


class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders.  ``Order.restore()`` rebuilds a
    persisted order without re-running the business rules.
    """

    def __init__(
        self,
        *,
        order_id: int | None,
        status: OrderStatus,
        created_at: datetime,
        items: Iterable[OrderItem] = (),
        confirmed_at: datetime | None = None,
        cancelled_at: datetime | None = None,
        cancellation_reason: str | None = None,
    ) -> None:
        self._id = order_id
        self._status = status
        self._created_at = created_at
        self._confirmed_at = confirmed_at
        self._cancelled_at = cancelled_at
        self._cancellation_reason = cancellation_reason
        self._items: list[OrderItem] = list(items)
        self._total = Money.zero()
        self._recalculate_total()

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create() -> Order:
        return Order(
            order_id=None,
            status=OrderStatus.DRAFT,
            created_at=datetime.now(timezone.utc),
        )

    @staticmethod
    def restore(
        order_id: int | None,
        status: OrderStatus,
        created_at: datetime,
        items: Iterable[OrderItem] = (),
        confirmed_at: datetime | None = None,
        cancelled_at: datetime | None = None,
        cancellation_reason: str | None = None,
    ) -> Order:
        return Order(
            order_id=order_id,
            status=status,
            created_at=created_at,
            items=items,
            confirmed_at=confirmed_at,
            cancelled_at=cancelled_at,
            cancellation_reason=cancellation_reason,
        )

    # --- Read-only state ------------------------------------------------------

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def total(self) -> Money:
        return self._total

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def confirmed_at(self) -> datetime | None:
        return self._confirmed_at

    @property
    def cancelled_at(self) -> datetime | None:
        return self._cancelled_at

    @property
    def cancellation_reason(self) -> str | None:
        return self._cancellation_reason

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    def assign_id(self, order_id: int) -> None:
        """Called once by the repository when the order is first saved."""
        if self._id is not None:
            raise ProgrammingError(f"Order already has id {self._id}")
        self._id = order_id

    # --- State transitions ----------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> Result[None]:
        """Add *quantity* of *product*, merging into an existing line.

        Checks run in a fixed order and the first failure wins.
        """
        if self._status != OrderStatus.DRAFT:
            return Result.fail(
                ErrorKind.INVALID_STATE, "Items can only be added to draft orders"
            )

        if quantity < 1 or quantity > MAX_ITEM_QUANTITY:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Quantity must be between 1 and {MAX_ITEM_QUANTITY}",
            )

        if not product.has_available_stock(quantity):
            return Result.fail(
                ErrorKind.INSUFFICIENT_STOCK,
                f"Product '{product.name}' does not have enough stock",
            )

        index = self._find_item(product.id)  # type: ignore[arg-type]
        if index is not None:
            existing = self._items[index]
            if existing.quantity + quantity > MAX_ITEM_QUANTITY:
                return Result.fail(
                    ErrorKind.INVALID_ARGUMENT,
                    f"Maximum quantity per item is {MAX_ITEM_QUANTITY} "
                    f"('{existing.product_name}' already has {existing.quantity})",
                )
            self._items[index] = existing.increment_quantity(quantity)
        else:
            if len(self._items) >= MAX_DISTINCT_ITEMS:
                return Result.fail(
                    ErrorKind.INVALID_STATE,
                    f"An order cannot have more than {MAX_DISTINCT_ITEMS} distinct items",
                )
            self._items.append(OrderItem.create(product, quantity))

        self._recalculate_total()
        return Result.ok()

    def confirm(self) -> Result[None]:
        """Transition DRAFT -> CONFIRMED."""
        if self._status != OrderStatus.DRAFT:
            return Result.fail(
                ErrorKind.INVALID_STATE, "Only draft orders can be confirmed"
            )

        if not self._items:
            return Result.fail(
                ErrorKind.INVALID_STATE, "Order must contain at least one item"
            )

        if self._total < MIN_CONFIRMATION_TOTAL:
            return Result.fail(
                ErrorKind.INVALID_STATE,
                f"Minimum total for confirmation is {MIN_CONFIRMATION_TOTAL}",
            )

        self._status = OrderStatus.CONFIRMED
        self._confirmed_at = datetime.now(timezone.utc)
        return Result.ok()

    def cancel(self, reason: str) -> Result[None]:
        """Transition DRAFT|CONFIRMED -> CANCELLED."""
        if self._status == OrderStatus.CANCELLED:
            return Result.fail(ErrorKind.INVALID_STATE, "Order is already cancelled")

        if not reason or not reason.strip():
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, "Cancellation reason is required"
            )

        self._status = OrderStatus.CANCELLED
        self._cancelled_at = datetime.now(timezone.utc)
        self._cancellation_reason = reason
        return Result.ok()

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.product_id == product_id:
                return index
        return None

    def _recalculate_total(self) -> None:
        total = Money.zero()
        for item in self._items:
            total = total + item.subtotal
        self._total = total

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id!r}, status={self._status.value}, "
            f"items={len(self._items)}, total={self._total})"
        )
