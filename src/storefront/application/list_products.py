"""Application service: List Products use case (query).

Only active products are listed unless ``include_inactive`` is set.
Newest products come first.  A page size outside ``1..100`` falls back
to the default rather than being clamped.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductPageDTO, product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.repository.order_repository import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import Result

logger = structlog.get_logger(__name__)


def _matches(product: Product, category: str | None, search: str | None) -> bool:
    if category and product.category.lower() != category.strip().lower():
        return False
    if search:
        needle = search.strip().lower()
        if needle not in product.name.lower() and needle not in product.description.lower():
            return False
    return True


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        category: str | None = None,
        search: str | None = None,
        include_inactive: bool = False,
    ) -> Result[ProductPageDTO]:
        page = max(page, 1)
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            page_size = DEFAULT_PAGE_SIZE

        products = [
            p for p in self._product_repo.list_all()
            if (include_inactive or p.active) and _matches(p, category, search)
        ]
        products.sort(key=lambda p: (p.created_at, p.id or 0), reverse=True)
        logger.debug(
            "products_listed",
            category=category,
            search=search,
            matched=len(products),
        )

        start = (page - 1) * page_size
        return Result.ok(
            ProductPageDTO(
                data=[product_to_dto(p) for p in products[start:start + page_size]],
                total=len(products),
                page=page,
                page_size=page_size,
            )
        )
