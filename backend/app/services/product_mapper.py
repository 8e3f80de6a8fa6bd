"""Translate between Product wire schemas and the ORM entity."""

from __future__ import annotations

from typing import Any, Sequence

from app.api.schemas.product import (
    ProductCreate,
    ProductPage,
    ProductRead,
    ProductUpdate,
    SortInfo,
)
from app.db.models.product import Product

CREATE_FIELDS = ("name", "description", "price", "active")
UPDATABLE_FIELDS = ("name", "description", "price", "active")


class ProductMapper:
    """Explicit field-by-field copies; no reflection."""

    def to_entity(self, payload: ProductCreate) -> Product:
        return Product(**{field: getattr(payload, field) for field in CREATE_FIELDS})

    def updates(self, payload: ProductUpdate) -> dict[str, Any]:
        """Fields present in ``payload`` with a non-null value."""
        return {
            field: getattr(payload, field)
            for field in UPDATABLE_FIELDS
            if getattr(payload, field) is not None
        }

    def to_read(self, product: Product) -> ProductRead:
        return ProductRead(
            product_code=product.product_code,
            name=product.name,
            description=product.description,
            price=product.price,
            active=product.active,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def to_page(
        self,
        products: Sequence[Product],
        total: int,
        *,
        page: int,
        size: int,
        sort_field: str,
        direction: str,
    ) -> ProductPage:
        total_pages = (total + size - 1) // size if size else 0
        content = [self.to_read(p) for p in products]
        return ProductPage(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            size=size,
            number=page,
            number_of_elements=len(content),
            first=page == 0,
            last=page + 1 >= total_pages,
            empty=not content,
            sort=SortInfo(property=sort_field, direction=direction),
        )
