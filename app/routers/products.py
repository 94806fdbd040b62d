# app/routers/products.py
from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_catalog_service
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductFilter, ProductUpdate
from app.services import search_service
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["Products"])


async def _ensure_vendor_exists(catalog: CatalogService, vendor_id: str) -> None:
    if await catalog.get_vendor(vendor_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Vendor does not exist",
        )


# -------- Storefront endpoints --------


@router.get("", response_model=list[Product])
async def list_products(
    q: str | None = None,
    category: str | None = None,
    vendor_id: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Browse products.

    - With `q`: products matching the search text.
    - Without `q`: the whole catalog.
    - `category`, `vendor_id`, `min_price`, `max_price` narrow the result
      ("all" is accepted for category/vendor_id and means no filter).
    """
    filters = ProductFilter(
        category=category,
        vendor_id=vendor_id,
        min_price=min_price,
        max_price=max_price,
    )
    products = await catalog.list_products()
    return search_service.browse(products, q, filters)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    product = await catalog.get_product(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return product


# -------- Authoring endpoints --------


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    payload: ProductCreate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Create a new product. The vendor must exist.
    """
    await _ensure_vendor_exists(catalog, payload.vendor_id)
    return await catalog.create_product(payload)


@router.patch("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Update an existing product. Moving it to another vendor requires
    that vendor to exist.
    """
    if payload.vendor_id is not None:
        await _ensure_vendor_exists(catalog, payload.vendor_id)

    product = await catalog.update_product(product_id, payload)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    if not await catalog.delete_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    return None
