"""Application service: Edit Product details use case.

Partial update of the descriptive fields (name, description, category,
contact email).  Fields passed as ``None`` are left unchanged.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class UpdateProductDetailsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        contact_email: str | None = None,
    ) -> Result[ProductDTO]:
        product = self._product_repo.get_by_id(product_id)
        if product is None or not product.active:
            return Result.fail(ErrorKind.NOT_FOUND, f"Product {product_id} not found")

        if name is not None:
            clash = self._product_repo.get_by_name(name.strip())
            if clash is not None and clash.id != product.id:
                return Result.fail(
                    ErrorKind.INVALID_ARGUMENT, f"Product '{name.strip()}' already exists"
                )

        updated = product.update_details(
            name=name,
            description=description,
            category=category,
            contact_email=contact_email,
        )
        if updated.is_failure:
            return Result.fail(updated.kind, updated.error)  # type: ignore[arg-type]

        self._product_repo.save(product)
        logger.info(
            "product_details_updated",
            product_id=product_id,
            fields=[
                f for f, v in (
                    ("name", name),
                    ("description", description),
                    ("category", category),
                    ("contact_email", contact_email),
                )
                if v is not None
            ],
        )
        return Result.ok(product_to_dto(product))
