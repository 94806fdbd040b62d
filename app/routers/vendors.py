# app/routers/vendors.py
from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_catalog_service
from app.models.product import Product
from app.models.vendor import Vendor
from app.schemas.vendor import VendorCreate, VendorUpdate
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Vendor not found",
    )


@router.get("", response_model=list[Vendor])
async def list_vendors(catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.list_vendors()


@router.get("/{vendor_id}", response_model=Vendor)
async def get_vendor(
    vendor_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    vendor = await catalog.get_vendor(vendor_id)
    if vendor is None:
        raise _not_found()
    return vendor


@router.get("/{vendor_id}/products", response_model=list[Product])
async def list_vendor_products(
    vendor_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Products sold by one vendor (vendor storefront page).
    """
    if await catalog.get_vendor(vendor_id) is None:
        raise _not_found()
    return await catalog.products_by_vendor(vendor_id)


@router.post(
    "",
    response_model=Vendor,
    status_code=status.HTTP_201_CREATED,
)
async def create_vendor(
    payload: VendorCreate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.create_vendor(payload)


@router.patch("/{vendor_id}", response_model=Vendor)
async def update_vendor(
    vendor_id: str,
    payload: VendorUpdate,
    catalog: CatalogService = Depends(get_catalog_service),
):
    vendor = await catalog.update_vendor(vendor_id, payload)
    if vendor is None:
        raise _not_found()
    return vendor


@router.delete("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vendor(
    vendor_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Delete a vendor and all of its products.
    """
    if not await catalog.delete_vendor(vendor_id):
        raise _not_found()
    return None
