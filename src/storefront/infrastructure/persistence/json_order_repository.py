"""JSON-file-backed implementation of OrderRepository.

The aggregate is mapped to a plain record through its public read
accessors (``_to_raw``) and rebuilt with ``Order.restore``
(``_to_domain``); the aggregate itself knows nothing about storage.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.order_repository import OrderPage, OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.assign_id(self._next_id(orders))

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    def list_page(
        self,
        status: OrderStatus | None,
        page: int,
        page_size: int,
    ) -> OrderPage:
        records = self._load_raw()
        if status is not None:
            records = [r for r in records if r["status"] == status.value]
        records.sort(key=lambda r: r["created_at"], reverse=True)

        start = (page - 1) * page_size
        window = records[start:start + page_size]
        return OrderPage(
            items=[self._to_domain(r) for r in window],
            total=len(records),
            page=page,
            page_size=page_size,
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "confirmed_at": _iso_or_none(order.confirmed_at),
            "cancelled_at": _iso_or_none(order.cancelled_at),
            "cancellation_reason": order.cancellation_reason,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)),
                quantity=i["quantity"],
            )
            for i in raw["items"]
        ]
        return Order.restore(
            order_id=raw["id"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            items=items,
            confirmed_at=_parse_or_none(raw.get("confirmed_at")),
            cancelled_at=_parse_or_none(raw.get("cancelled_at")),
            cancellation_reason=raw.get("cancellation_reason"),
        )

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _next_id(orders: list[dict]) -> int:
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _iso_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_or_none(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
