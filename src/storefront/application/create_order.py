"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Product lookup and item validation happen one spec at a time; the
first failure is returned as-is and nothing is persisted.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, item_specs: list[OrderItemSpec]) -> Result[OrderDTO]:
        """Create a draft order holding the requested items.

        Steps:
        1. Start an empty draft.
        2. Resolve each product ID and let ``Order.add_item`` apply the
           business rules (price snapshot, stock, merge, caps).
        3. Persist only when every item was accepted.
        """
        if not item_specs:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, "Order must contain at least one item"
            )

        order = Order.create()

        for spec in item_specs:
            product = self._product_repo.get_by_id(spec.product_id)
            if product is None:
                logger.info("order_rejected", reason="product_not_found", product_id=spec.product_id)
                return Result.fail(
                    ErrorKind.NOT_FOUND, f"Product {spec.product_id} not found"
                )

            added = order.add_item(product, spec.quantity)
            if added.is_failure:
                logger.info(
                    "order_rejected",
                    kind=added.kind.value,  # type: ignore[union-attr]
                    error=added.error,
                    product_id=spec.product_id,
                )
                return Result.fail(added.kind, added.error)  # type: ignore[arg-type]

        self._order_repo.save(order)
        logger.info(
            "order_created",
            order_id=order.id,
            items=len(order.items),
            total=str(order.total.amount),
        )
        return Result.ok(order_to_dto(order))
