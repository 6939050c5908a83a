"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductDTO, product_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.result import ErrorKind, Result

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        stock: int,
        contact_email: str,
        description: str = "",
        category: str = "",
    ) -> Result[ProductDTO]:
        """Add a new product to the catalog."""
        if name and self._product_repo.get_by_name(name.strip()) is not None:
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT, f"Product '{name.strip()}' already exists"
            )

        try:
            parsed_price = Money.of(price)
        except ValidationError as exc:
            return Result.fail(ErrorKind.INVALID_ARGUMENT, str(exc))

        created = Product.create(
            name=name,
            price=parsed_price,
            stock=stock,
            contact_email=contact_email,
            description=description,
            category=category,
        )
        if created.is_failure:
            return Result.fail(created.kind, created.error)  # type: ignore[arg-type]

        product: Product = created.value  # type: ignore[assignment]
        self._product_repo.save(product)
        logger.info("product_added", product_id=product.id, name=product.name)
        return Result.ok(product_to_dto(product))
