"""Application service: Restock Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class RestockProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int) -> Result[ProductDTO]:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Result.fail(ErrorKind.NOT_FOUND, f"Product {product_id} not found")

        restocked = product.restock(quantity)
        if restocked.is_failure:
            return Result.fail(restocked.kind, restocked.error)  # type: ignore[arg-type]

        self._product_repo.save(product)
        logger.info("product_restocked", product_id=product_id, added=quantity, stock=product.stock)
        return Result.ok(product_to_dto(product))
