"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories — no file I/O.
"""

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.result import ErrorKind
from tests.builders import product
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            product(1, price="15.00", stock=100, name="Widget"),
            product(2, price="25.00", stock=100, name="Gadget"),
            product(3, price="5.00", stock=1, name="Scarce"),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    handler = CreateOrderHandler(order_repo, product_repo)
    return handler, order_repo, product_repo


class TestCreateOrderHappyPath:

    def test_creates_draft_with_correct_total(self):
        handler, _, _ = _setup()
        result = handler.handle([OrderItemSpec(1, 3), OrderItemSpec(2, 5)])

        assert result.is_success
        dto = result.value
        assert dto.total == "170.00"
        assert dto.status == "DRAFT"
        assert [i.product_name for i in dto.items] == ["Widget", "Gadget"]
        assert dto.confirmed_at is None

    def test_assigns_order_id_and_persists(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle([OrderItemSpec(1, 1)]).value

        assert dto.id == 1
        assert order_repo.get_by_id(dto.id) is not None

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        first = handler.handle([OrderItemSpec(1, 1)]).value
        second = handler.handle([OrderItemSpec(2, 1)]).value
        assert second.id == first.id + 1

    def test_repeated_product_merges(self):
        handler, _, _ = _setup()
        dto = handler.handle([OrderItemSpec(1, 2), OrderItemSpec(1, 3)]).value

        assert len(dto.items) == 1
        assert dto.items[0].quantity == 5
        assert dto.total == "75.00"


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, product_repo = _setup()
        dto = handler.handle([OrderItemSpec(1, 1)]).value

        widget = product_repo.get_by_id(1)
        widget.update_price(Money.of("99.99"))
        product_repo.save(widget)

        saved = order_repo.get_by_id(dto.id)
        assert saved.total == Money.of("15.00")


class TestCreateOrderFailures:

    def test_empty_item_list_rejected(self):
        handler, order_repo, _ = _setup()
        result = handler.handle([])
        assert result.kind == ErrorKind.INVALID_ARGUMENT
        assert order_repo.save_count == 0

    def test_unknown_product_short_circuits(self):
        handler, order_repo, _ = _setup()
        result = handler.handle([OrderItemSpec(1, 1), OrderItemSpec(404, 1)])

        assert result.kind == ErrorKind.NOT_FOUND
        assert "404" in result.error
        assert order_repo.save_count == 0

    def test_insufficient_stock_not_persisted(self):
        handler, order_repo, _ = _setup()
        result = handler.handle([OrderItemSpec(1, 1), OrderItemSpec(3, 5)])

        assert result.kind == ErrorKind.INSUFFICIENT_STOCK
        assert "Scarce" in result.error
        assert order_repo.save_count == 0

    def test_first_failure_wins(self):
        handler, _, _ = _setup()
        result = handler.handle([OrderItemSpec(1, 0), OrderItemSpec(404, 1)])
        assert result.kind == ErrorKind.INVALID_ARGUMENT
