"""Application service: Set Stock use case.

Overwrites a product's stock level (e.g. after a physical count).
Unlike ``restock`` this may lower the level, down to zero.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.model.product import MAX_STOCK
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class SetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int) -> Result[ProductDTO]:
        if quantity < 0 or quantity > MAX_STOCK:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                f"Stock must be between 0 and {MAX_STOCK}",
            )

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Product {product_id} not found")

        product.adjust_stock(quantity)
        self._product_repo.save(product)
        logger.info("product_stock_set", product_id=product_id, stock=quantity)
        return Result.ok(product_to_dto(product))
