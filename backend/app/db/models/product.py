"""SQLAlchemy model for product records."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.types import DateTime

from app.db.base import Base


class Product(Base):
    __tablename__ = "products"

    product_code = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500))
    price = Column(Integer, nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    # Both stamps are written by the service; created_at is never touched again.
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Product code={self.product_code} name={self.name!r} active={self.active}>"
