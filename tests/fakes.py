"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import OrderPage, OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.save_count = 0

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.assign_id(self._next_id)
            self._next_id += 1
        self._store[order.id] = order
        self.save_count += 1

    def list_page(
        self,
        status: OrderStatus | None,
        page: int,
        page_size: int,
    ) -> OrderPage:
        orders = [
            o for o in self._store.values()
            if status is None or o.status == status
        ]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        start = (page - 1) * page_size
        return OrderPage(
            items=orders[start:start + page_size],
            total=len(orders),
            page=page,
            page_size=page_size,
        )


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.assign_id(max(self._store, default=0) + 1)
        self._store[product.id] = product
