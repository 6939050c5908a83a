"""Application service: Cancel Order use case.

Both DRAFT and CONFIRMED orders can be cancelled; a reason is
mandatory and stored on the order.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, reason: str) -> Result[OrderDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Order #{order_id} not found")

        previous = order.status
        cancelled = order.cancel(reason)
        if cancelled.is_failure:
            logger.info("order_cancel_rejected", order_id=order_id, error=cancelled.error)
            return Result.fail(cancelled.kind, cancelled.error)  # type: ignore[arg-type]

        self._order_repo.save(order)
        logger.info(
            "order_cancelled",
            order_id=order_id,
            previous_status=previous.value,
            reason=reason,
        )
        return Result.ok(order_to_dto(order))
