"""Service construction for request handlers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.api.dependencies.db import get_session
from app.core.config import Settings, get_settings
from app.repositories.product_repository import ProductRepository
from app.services.product_mapper import ProductMapper
from app.services.product_service import ProductService


def get_product_service(
    db: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> ProductService:
    """Build a ProductService bound to the request's session."""
    return ProductService(
        ProductRepository(db),
        ProductMapper(),
        include_inactive=settings.list_include_inactive,
    )
