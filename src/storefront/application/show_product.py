"""Application service: Show Product use case (query).

Deactivated products are reported as not found unless asked for.
"""

from __future__ import annotations

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, include_inactive: bool = False) -> Result[ProductDTO]:
        product = self._product_repo.get_by_id(product_id)
        if product is None or not (product.active or include_inactive):
            return Result.fail(ErrorKind.NOT_FOUND, f"Product {product_id} not found")
        return Result.ok(product_to_dto(product))
