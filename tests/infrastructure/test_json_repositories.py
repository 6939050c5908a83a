"""Tests for the JSON-file repositories, using pytest's tmp_path."""

import json
from datetime import datetime, timedelta, timezone

from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_product_repository import JsonProductRepository
from tests.builders import ProductBuilder, product


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == []

    def test_save_assigns_ids_and_reloads(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        lamp = ProductBuilder.default().with_name("Lamp").with_price("12.30").build()
        desk = ProductBuilder.default().with_name("Desk").build()
        repo.save(lamp)
        repo.save(desk)

        assert (lamp.id, desk.id) == (1, 2)
        loaded = repo.get_by_id(1)
        assert loaded.name == "Lamp"
        assert loaded.price == Money.of("12.30")
        assert loaded.active
        assert repo.get_by_name("DESK").id == 2

    def test_deactivation_is_persisted(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        lamp = ProductBuilder.default().build()
        repo.save(lamp)
        lamp.deactivate()
        repo.save(lamp)

        assert len(repo.list_all()) == 1
        assert not repo.get_by_id(lamp.id).active


class TestJsonOrderRepository:

    def test_save_and_reload_keeps_every_field(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create()
        order.add_item(product(1, price="50.00", name="Product A"), 2)
        order.add_item(product(2, price="0.10", name="Product B"), 3)
        order.confirm()
        order.cancel("customer request")
        repo.save(order)

        loaded = repo.get_by_id(order.id)

        assert loaded.id == 1
        assert loaded.status == OrderStatus.CANCELLED
        assert loaded.total == Money.of("100.30")
        assert loaded.created_at == order.created_at
        assert loaded.confirmed_at == order.confirmed_at
        assert loaded.cancelled_at == order.cancelled_at
        assert loaded.cancellation_reason == "customer request"
        assert [(i.product_id, i.product_name, i.quantity) for i in loaded.items] == [
            (1, "Product A", 2), (2, "Product B", 3),
        ]

    def test_update_replaces_record(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create()
        order.add_item(product(1), 1)
        repo.save(order)

        reloaded = repo.get_by_id(order.id)
        reloaded.add_item(product(2), 4)
        repo.save(reloaded)

        raw = json.loads((tmp_path / "orders.json").read_text())
        assert len(raw) == 1
        assert len(raw[0]["items"]) == 2

    def test_missing_order(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(1) is None

    def test_list_page_filters_and_sorts(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        base = datetime(2025, 1, 1, tzinfo=timezone.utc)
        for minutes, status in enumerate(
            [OrderStatus.DRAFT, OrderStatus.CONFIRMED, OrderStatus.DRAFT, OrderStatus.DRAFT]
        ):
            repo.save(Order.restore(order_id=None, status=status, created_at=base + timedelta(minutes=minutes)))

        page = repo.list_page(OrderStatus.DRAFT, page=1, page_size=2)

        assert [o.id for o in page.items] == [4, 3]
        assert page.total == 3
        assert repo.list_page(None, page=2, page_size=2).items[0].id == 2
