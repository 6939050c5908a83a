"""Application service: Add Item to an existing draft order."""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class AddItemHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, product_id: int, quantity: int) -> Result[OrderDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Order #{order_id} not found")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Product {product_id} not found")

        added = order.add_item(product, quantity)
        if added.is_failure:
            logger.info(
                "order_item_rejected",
                order_id=order_id,
                product_id=product_id,
                kind=added.kind.value,  # type: ignore[union-attr]
                error=added.error,
            )
            return Result.fail(added.kind, added.error)  # type: ignore[arg-type]

        self._order_repo.save(order)
        logger.info(
            "order_item_added",
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            total=str(order.total.amount),
        )
        return Result.ok(order_to_dto(order))
