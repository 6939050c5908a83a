"""Application service: Update Product price use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, new_price: str) -> Result[ProductDTO]:
        """Update a product's price.

        This does NOT affect any existing orders; their items captured a
        price snapshot when they were added.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Product {product_id} not found")

        try:
            price = Money.of(new_price, product.price.currency)
        except ValidationError as exc:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, str(exc))

        old_price = product.price
        updated = product.update_price(price)
        if updated.is_failure:
            return Result.fail(updated.kind, updated.error)  # type: ignore[arg-type]

        self._product_repo.save(product)
        logger.info(
            "product_price_updated",
            product_id=product_id,
            old_price=str(old_price.amount),
            new_price=str(product.price.amount),
        )
        return Result.ok(product_to_dto(product))
