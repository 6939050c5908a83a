"""Application service: Confirm Order use case.

Stock is checked when items are added; confirmation only applies the
order-level rules (status, non-empty, minimum total).
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class ConfirmOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> Result[OrderDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Order #{order_id} not found")

        confirmed = order.confirm()
        if confirmed.is_failure:
            logger.info("order_confirm_rejected", order_id=order_id, error=confirmed.error)
            return Result.fail(confirmed.kind, confirmed.error)  # type: ignore[arg-type]

        self._order_repo.save(order)
        logger.info("order_confirmed", order_id=order_id, total=str(order.total.amount))
        return Result.ok(order_to_dto(order))
