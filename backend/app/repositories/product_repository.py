"""Persistence operations for the products table."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.db.models.product import Product

# Wire names and column names both resolve to the same column.
SORTABLE_COLUMNS: dict[str, Any] = {
    "productCode": Product.product_code,
    "product_code": Product.product_code,
    "name": Product.name,
    "description": Product.description,
    "price": Product.price,
    "active": Product.active,
    "createdAt": Product.created_at,
    "created_at": Product.created_at,
    "updatedAt": Product.updated_at,
    "updated_at": Product.updated_at,
}


def resolve_sort_column(field: str) -> Any | None:
    """Return the column for a sortable field name, or None if unknown."""
    return SORTABLE_COLUMNS.get(field)


class ProductRepository:
    """Thin store over a SQLAlchemy session.

    ``save`` commits, so every service operation is its own unit of work.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, product_code: int) -> Product | None:
        return self.db.get(Product, product_code)

    def save(self, product: Product) -> Product:
        """Insert or update ``product`` and return it with generated values loaded."""
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def rollback(self) -> None:
        self.db.rollback()

    def find_page(
        self,
        *,
        offset: int,
        limit: int,
        sort_field: str = "productCode",
        descending: bool = False,
        only_active: bool = False,
    ) -> tuple[list[Product], int]:
        """Return one sorted slice of products and the total matching count."""
        column = resolve_sort_column(sort_field)
        if column is None:
            raise ValueError(f"Unknown sort field: {sort_field}")

        query = select(Product)
        count_query = select(func.count(Product.product_code))
        if only_active:
            query = query.where(Product.active.is_(True))
            count_query = count_query.where(Product.active.is_(True))

        total = self.db.scalar(count_query) or 0

        order = column.desc() if descending else column.asc()
        query = query.order_by(order)
        if column is not Product.product_code:
            query = query.order_by(Product.product_code.asc())
        query = query.offset(offset).limit(limit)

        products = self.db.scalars(query).all()
        return list(products), total
