"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock is replenished, products are retired from the
catalog (soft delete via ``deactivate``).  Orders only ever *read* a
product: its id, name, price and ``has_available_stock``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain.exceptions import ProgrammingError
from storefront.domain.model.value_objects import Money
from storefront.domain.result import ErrorKind, Result

MIN_PRICE = Money(Decimal("0.01"))
MAX_STOCK = 99_999
MIN_NAME_LENGTH = 3


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price and stock updates are
    legitimate mutations on the aggregate.  Use ``Product.create()`` for
    new products; ``__init__`` is left plain so repositories can rebuild
    stored records without re-validating.
    """

    id: int | None
    name: str
    price: Money
    stock: int
    description: str = ""
    category: str = ""
    contact_email: str = ""
    active: bool = True
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        stock: int,
        contact_email: str,
        description: str = "",
        category: str = "",
    ) -> Result[Product]:
        if not name or len(name.strip()) < MIN_NAME_LENGTH:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Product name must have at least {MIN_NAME_LENGTH} characters",
            )
        if price < MIN_PRICE:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, "Product price must be greater than zero"
            )
        if stock < 0:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Stock cannot be negative")
        if stock > MAX_STOCK:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, f"Stock cannot exceed {MAX_STOCK} units"
            )
        if not contact_email or not contact_email.strip():
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Contact email is required")

        now = _now()
        return Result.ok(
            Product(
                id=None,
                name=name.strip(),
                price=price,
                stock=stock,
                description=description,
                category=category,
                contact_email=contact_email.strip(),
                created_at=now,
                updated_at=now,
            )
        )

    # --- Mutations ------------------------------------------------------------

    def update_price(self, new_price: Money) -> Result[None]:
        """Change the product price.

        Existing order items keep the price they captured when added.
        """
        if new_price < MIN_PRICE:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, "Product price must be greater than zero"
            )
        if new_price == self.price:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, "New price is equal to the current price"
            )
        self.price = new_price
        self._touch()
        return Result.ok()

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        contact_email: str | None = None,
    ) -> Result[None]:
        """Change descriptive fields; ``None`` leaves a field as it is.

        Nothing is changed unless every given field is valid.
        """
        if name is not None and len(name.strip()) < MIN_NAME_LENGTH:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Product name must have at least {MIN_NAME_LENGTH} characters",
            )
        if contact_email is not None and not contact_email.strip():
            return Result.fail(ErrorKind.INVALID_ARGUMENT, "Contact email is required")

        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if category is not None:
            self.category = category
        if contact_email is not None:
            self.contact_email = contact_email.strip()
        self._touch()
        return Result.ok()

    def restock(self, quantity: int) -> Result[None]:
        if quantity <= 0:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, "Restock quantity must be positive"
            )
        if self.stock + quantity > MAX_STOCK:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, f"Stock cannot exceed {MAX_STOCK} units"
            )
        self.stock += quantity
        self._touch()
        return Result.ok()

    def deactivate(self) -> Result[None]:
        if not self.active:
            return Result.fail(ErrorKind.INVALID_STATE, "Product is already inactive")
        self.active = False
        self._touch()
        return Result.ok()

    def adjust_stock(self, quantity: int) -> None:
        """Overwrite the stock level; callers validate the range first."""
        if quantity < 0:
            raise ProgrammingError("Stock cannot be negative")
        if quantity > MAX_STOCK:
            raise ProgrammingError(f"Stock cannot exceed {MAX_STOCK} units")
        self.stock = quantity
        self._touch()

    # --- Queries --------------------------------------------------------------

    def has_available_stock(self, quantity: int) -> bool:
        return self.active and self.stock >= quantity

    # --- Identity -------------------------------------------------------------

    def assign_id(self, product_id: int) -> None:
        if self.id is not None:
            raise ProgrammingError(f"Product already has id {self.id}")
        self.id = product_id

    def _touch(self) -> None:
        self.updated_at = _now()
