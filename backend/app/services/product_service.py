"""Product resource rules: defaults, merge-patch updates, soft delete, paging."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.api.schemas.product import ProductCreate, ProductPage, ProductRead, ProductUpdate
from app.core.errors import ServiceError
from app.db.models.product import Product
from app.repositories.product_repository import ProductRepository, resolve_sort_column
from app.services.product_mapper import ProductMapper
from app.utils.clock import utcnow

logger = logging.getLogger(__name__)

DESC = "DESC"
ASC = "ASC"


def normalize_direction(sort_direction: str | None) -> str:
    """``DESC`` in any case means descending; anything else is ascending."""
    if sort_direction and sort_direction.strip().upper() == DESC:
        return DESC
    return ASC


class ProductService:
    """Operations on the Product resource.

    Store and mapper are passed in; nothing is looked up globally.
    ``include_inactive`` is the read visibility policy for listings:
    soft-deleted products are listed unless it is turned off.
    """

    def __init__(
        self,
        repository: ProductRepository,
        mapper: ProductMapper,
        *,
        include_inactive: bool = True,
    ) -> None:
        self.repository = repository
        self.mapper = mapper
        self.include_inactive = include_inactive

    @contextmanager
    def _store_errors(self, failure_message: str) -> Iterator[None]:
        """Turn store/mapping failures into INTERNAL errors; domain errors pass through."""
        try:
            yield
        except (SQLAlchemyError, ValidationError) as e:
            self.repository.rollback()
            logger.error(f"{failure_message}: {e}", exc_info=True)
            raise ServiceError.internal(failure_message, e) from e

    def _load(self, product_code: int) -> Product:
        product = self.repository.get(product_code)
        if product is None:
            logger.warning(f"Product with code {product_code} not found")
            raise ServiceError.not_found(product_code)
        return product

    def create_product(self, payload: ProductCreate) -> ProductRead:
        logger.info(f"Creating product with name {payload.name!r}")
        with self._store_errors("Failed to create product"):
            product = self.mapper.to_entity(payload)
            now = utcnow()
            product.created_at = now
            product.updated_at = now
            if product.active is None:
                product.active = True
            product = self.repository.save(product)
            logger.info(f"Created product {product.product_code}")
            return self.mapper.to_read(product)

    def get_product(self, product_code: int) -> ProductRead:
        logger.info(f"Fetching product {product_code}")
        with self._store_errors("Failed to retrieve product"):
            product = self._load(product_code)
            return self.mapper.to_read(product)

    def update_product(self, product_code: int, payload: ProductUpdate) -> ProductRead:
        logger.info(f"Updating product {product_code}")
        with self._store_errors("Failed to update product"):
            product = self._load(product_code)
            for field, value in self.mapper.updates(payload).items():
                setattr(product, field, value)
            product.updated_at = utcnow()
            product = self.repository.save(product)
            logger.info(f"Updated product {product_code}")
            return self.mapper.to_read(product)

    def delete_product(self, product_code: int) -> None:
        """Soft delete: the row stays, flagged inactive.

        Deleting an inactive product succeeds again and re-stamps updated_at.
        """
        logger.info(f"Deleting product {product_code}")
        with self._store_errors("Failed to delete product"):
            product = self._load(product_code)
            product.active = False
            product.updated_at = utcnow()
            self.repository.save(product)
            logger.info(f"Product {product_code} marked as inactive")

    def list_products(
        self,
        page: int = 0,
        size: int = 10,
        sort_by: str = "productCode",
        sort_direction: str | None = ASC,
    ) -> ProductPage:
        details = []
        if page < 0:
            details.append("page: must be greater than or equal to 0")
        if size < 1:
            details.append("size: must be greater than or equal to 1")
        if resolve_sort_column(sort_by) is None:
            details.append(f"sortBy: unknown sort field '{sort_by}'")
        if details:
            raise ServiceError.validation(details)

        direction = normalize_direction(sort_direction)
        logger.info(
            f"Listing products page={page} size={size} sort={sort_by} {direction}"
        )
        with self._store_errors("Failed to list products"):
            products, total = self.repository.find_page(
                offset=page * size,
                limit=size,
                sort_field=sort_by,
                descending=direction == DESC,
                only_active=not self.include_inactive,
            )
            logger.info(f"Found {total} products")
            return self.mapper.to_page(
                products,
                total,
                page=page,
                size=size,
                sort_field=sort_by,
                direction=direction,
            )
