"""Integration tests for the ConfirmOrder use case."""

from storefront.application.add_item import AddItemHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.domain.model.order import OrderStatus
from storefront.domain.result import ErrorKind
from tests.builders import product
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup():
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository([
        product(1, price="15.00", name="Widget"),
        product(2, price="9.99", name="Cheap"),
    ])
    return order_repo, product_repo


def _create(order_repo, product_repo, *specs):
    return CreateOrderHandler(order_repo, product_repo).handle(list(specs)).value.id


class TestConfirmOrder:

    def test_confirm_sets_status_and_timestamp(self):
        order_repo, product_repo = _setup()
        order_id = _create(order_repo, product_repo, OrderItemSpec(1, 1))

        result = ConfirmOrderHandler(order_repo).handle(order_id)

        assert result.is_success
        assert result.value.status == "CONFIRMED"
        assert result.value.confirmed_at is not None
        assert order_repo.get_by_id(order_id).status == OrderStatus.CONFIRMED

    def test_nonexistent_order(self):
        order_repo, _ = _setup()
        assert ConfirmOrderHandler(order_repo).handle(999).kind == ErrorKind.NOT_FOUND

    def test_below_minimum_total_rejected(self):
        order_repo, product_repo = _setup()
        order_id = _create(order_repo, product_repo, OrderItemSpec(2, 1))

        result = ConfirmOrderHandler(order_repo).handle(order_id)

        assert result.kind == ErrorKind.INVALID_STATE
        assert "10.00" in result.error
        assert order_repo.get_by_id(order_id).status == OrderStatus.DRAFT

    def test_reaching_minimum_by_adding_items(self):
        order_repo, product_repo = _setup()
        order_id = _create(order_repo, product_repo, OrderItemSpec(2, 1))
        AddItemHandler(order_repo, product_repo).handle(order_id, 2, 1)

        assert ConfirmOrderHandler(order_repo).handle(order_id).is_success

    def test_confirm_twice_rejected(self):
        order_repo, product_repo = _setup()
        order_id = _create(order_repo, product_repo, OrderItemSpec(1, 1))
        handler = ConfirmOrderHandler(order_repo)
        handler.handle(order_id)

        assert handler.handle(order_id).kind == ErrorKind.INVALID_STATE
