"""CRUD + paginated listing endpoints for the product catalogue."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.api.dependencies.services import get_product_service
from app.api.schemas.error import ErrorResponse
from app.api.schemas.product import (
    MAX_INT32,
    ProductCreate,
    ProductPage,
    ProductRead,
    ProductUpdate,
)
from app.services.product_service import ProductService

router = APIRouter()

MAX_PAGE_SIZE = 1000

ProductCode = Annotated[int, Path(ge=1, le=MAX_INT32, description="Product code")]

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
    responses={**BAD_REQUEST_RESPONSE},
)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Persist a new product; the store assigns its code.

    ``active`` defaults to true when omitted.
    """
    return service.create_product(payload)


@router.get(
    "/{product_code}",
    summary="Get a product by code",
    response_model=ProductRead,
    responses={**NOT_FOUND_RESPONSE},
)
def get_product(
    product_code: ProductCode,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Return the product whether it is active or not."""
    return service.get_product(product_code)


@router.put(
    "/{product_code}",
    summary="Update a product (partial)",
    response_model=ProductRead,
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
def update_product(
    product_code: ProductCode,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Overwrite only the fields present in the body; the rest stay as they are."""
    return service.update_product(product_code, payload)


@router.delete(
    "/{product_code}",
    summary="Delete a product (soft delete)",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND_RESPONSE},
)
def delete_product(
    product_code: ProductCode,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Mark the product inactive. The row is kept and still readable."""
    service.delete_product(product_code)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    summary="List products with pagination and sorting",
    response_model=ProductPage,
    responses={**BAD_REQUEST_RESPONSE},
)
def list_products(
    response: Response,
    page: int = Query(0, ge=0, description="Page number (0-indexed)"),
    size: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    sort_by: str = Query("productCode", alias="sortBy", description="Field to sort by"),
    sort_direction: str = Query(
        "ASC", alias="sortDirection", description="ASC or DESC (case-insensitive)"
    ),
    service: ProductService = Depends(get_product_service),
) -> ProductPage:
    """Return one page of all products, inactive ones included."""
    result = service.list_products(
        page=page, size=size, sort_by=sort_by, sort_direction=sort_direction
    )
    response.headers["X-Total-Count"] = str(result.total_elements)
    return result
