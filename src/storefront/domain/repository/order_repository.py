"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.order import Order, OrderStatus

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class OrderPage:
    """One page of orders plus the size of the whole filtered set."""

    items: list[Order]
    total: int
    page: int
    page_size: int


def clamp_paging(page: int, page_size: int) -> tuple[int, int]:
    """Force ``page >= 1`` and ``1 <= page_size <= MAX_PAGE_SIZE``."""
    return max(page, 1), min(max(page_size, 1), MAX_PAGE_SIZE)


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order (with its items) by ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Insert or update an order.

        New orders (``id is None``) get an ID assigned via ``assign_id``.
        """

    @abstractmethod
    def list_page(
        self,
        status: OrderStatus | None,
        page: int,
        page_size: int,
    ) -> OrderPage:
        """Return orders newest-first, optionally filtered by status.

        ``page`` and ``page_size`` are expected to be clamped already.
        """
