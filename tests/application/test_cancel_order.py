"""Integration tests for the CancelOrder use case."""

import pytest

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.domain.model.order import OrderStatus
from storefront.domain.result import ErrorKind
from tests.builders import product
from tests.fakes import FakeOrderRepository, FakeProductRepository


@pytest.fixture
def repos():
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository([product(1, price="50.00", stock=5, name="Product A")])
    return order_repo, product_repo


@pytest.fixture
def order_id(repos):
    order_repo, product_repo = repos
    return CreateOrderHandler(order_repo, product_repo).handle(
        [OrderItemSpec(1, 2)]
    ).value.id


class TestCancelOrder:

    def test_cancel_draft(self, repos, order_id):
        order_repo, _ = repos
        result = CancelOrderHandler(order_repo).handle(order_id, "duplicate")

        assert result.value.status == "CANCELLED"
        assert result.value.cancellation_reason == "duplicate"
        assert order_repo.get_by_id(order_id).status == OrderStatus.CANCELLED

    def test_cancel_confirmed(self, repos, order_id):
        order_repo, _ = repos
        ConfirmOrderHandler(order_repo).handle(order_id)

        result = CancelOrderHandler(order_repo).handle(order_id, "customer request")

        assert result.is_success
        assert result.value.confirmed_at is not None
        assert result.value.cancelled_at is not None

    def test_blank_reason_rejected(self, repos, order_id):
        order_repo, _ = repos
        result = CancelOrderHandler(order_repo).handle(order_id, "  ")

        assert result.kind == ErrorKind.INVALID_ARGUMENT
        assert order_repo.get_by_id(order_id).status == OrderStatus.DRAFT

    def test_cancel_twice_rejected(self, repos, order_id):
        order_repo, _ = repos
        handler = CancelOrderHandler(order_repo)
        handler.handle(order_id, "first")

        result = handler.handle(order_id, "second")

        assert result.kind == ErrorKind.INVALID_STATE
        assert order_repo.get_by_id(order_id).cancellation_reason == "first"

    def test_nonexistent_order(self, repos):
        order_repo, _ = repos
        assert CancelOrderHandler(order_repo).handle(5, "x").kind == ErrorKind.NOT_FOUND
