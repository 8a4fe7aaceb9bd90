from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from products_api.api.deps import get_product_service
from products_api.services.product_service import ProductService
from products_api.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductView,
)

router = APIRouter(prefix="/products", tags=["Products"])


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product with ID {product_id} not found"
    )


@router.get(
    "",
    response_model=List[ProductView],
    summary="List all products",
    description="Get every product. An empty store returns an empty list."
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    return service.list_all()


@router.get(
    "/{product_id}",
    response_model=ProductView,
    summary="Get product by ID",
    description="Get a specific product, or 404 if it does not exist."
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    product = service.get_one(product_id)

    if product is None:
        raise _not_found(product_id)

    return product


@router.post(
    "",
    response_model=ProductView,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a product. The id and creation date are assigned by the server."
)
def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name
    - **description**: Product description
    - **price**: Unit price
    - **stock**: Initial stock quantity

    The Location header points at the new product.
    """
    product = service.create(product_data)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.id)
    )
    return product


@router.put(
    "/{product_id}",
    response_model=ProductView,
    summary="Replace a product",
    description="Overwrite name, description, price and stock of a product."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Replace a product.

    All four fields are required and all are overwritten.
    The id and creation date are never changed.
    """
    product = service.replace(product_id, product_data)

    if product is None:
        raise _not_found(product_id)

    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a product",
    description="Permanently delete a product by ID."
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    if not service.remove(product_id):
        raise _not_found(product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
