from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from wms.config import get_settings
from wms.store import InventoryStore, get_store
from wms.services.catalog import InvalidQuantityError, parse_quantity
from wms.services.product_service import ProductService
from wms.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse
)

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_service(store: InventoryStore = Depends(get_store)) -> ProductService:
    return ProductService(store, default_image=get_settings().DEFAULT_IMAGE)


def to_response(product: dict) -> ProductResponse:
    """
    Build the response for a stored product.

    Raises:
        HTTPException: 422 if the stored qty is not a non-negative integer
    """
    try:
        qty = parse_quantity(product.get("qty"))
    except InvalidQuantityError as e:
        raise HTTPException(
            status_code=422,
            detail=f"Product with ID {product.get('id')} has an invalid stored quantity: {e}"
        )
    return ProductResponse.model_validate({**product, "qty": qty})


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new product. Its id is one more than the highest existing id."
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **sku**: Stock keeping unit (required, uniqueness is not enforced)
    - **name**: Product name (required)
    - **category**: Product category (optional)
    - **qty**: Quantity on hand, must be a non-negative integer (required)
    - **image**: Image URL (optional, blank uses the configured default image)
    """
    return to_response(service.create(product_data))


@router.get(
    "/",
    response_model=ProductListResponse,
    summary="List products",
    description="Get a paginated list of products, filtered by search text and category."
)
def list_products(
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(50, ge=1, le=100, description="Items per page"),
    search: Optional[str] = Query(None, description="Case-insensitive match on name or SKU"),
    category: Optional[str] = Query(None, description="Exact category"),
    service: ProductService = Depends(get_product_service)
):
    """Get paginated list of products."""
    products, total, total_pages = service.get_all(page, page_size, search, category)

    return ProductListResponse(
        items=[to_response(p) for p in products],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages
    )


@router.get(
    "/categories",
    response_model=list[str],
    summary="List categories",
    description="Distinct product categories in catalog order."
)
def list_categories(service: ProductService = Depends(get_product_service)):
    return service.categories()


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Get product by ID"
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    product = service.get_by_id(product_id)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found"
        )

    return to_response(product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Update a product",
    description="Update product details. Only provided fields will be updated."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    Partial updates are supported - only include fields you want to change.
    The id never changes.
    """
    product = service.update(product_id, product_data)

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found"
        )

    return to_response(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    description="Delete a product by ID. Ledger entries for its SKU are kept."
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    deleted = service.delete(product_id)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with ID {product_id} not found"
        )

    return None
