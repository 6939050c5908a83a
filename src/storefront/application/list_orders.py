"""Application service: List Orders use case (query).

Paging values are clamped rather than rejected, and a status filter
that does not name a known status is ignored.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderPageDTO, order_page_to_dto
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import (
    DEFAULT_PAGE_SIZE,
    OrderRepository,
    clamp_paging,
)
from storefront.domain.result import Result

logger = structlog.get_logger(__name__)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        status: str | None = None,
    ) -> Result[OrderPageDTO]:
        page, page_size = clamp_paging(page, page_size)
        status_filter = OrderStatus.parse(status)
        if status and status_filter is None:
            logger.debug("unknown_status_filter_ignored", status=status)

        result = self._order_repo.list_page(status_filter, page, page_size)
        return Result.ok(order_page_to_dto(result))
