"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.result import ErrorKind, Result


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> Result[OrderDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Order #{order_id} not found")
        return Result.ok(order_to_dto(order))
