# app/routers/search.py
from fastapi import APIRouter, Depends

from app.dependencies import get_catalog_service
from app.models.product import Product
from app.services.catalog_service import CatalogService

router = APIRouter(tags=["Search"])


@router.get("/search", response_model=list[Product])
async def search_products(
    q: str = "",
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Substring search over name, description and category.

    A blank `q` returns an empty list, not the catalog.
    """
    return await catalog.search_products(q)


@router.get("/categories", response_model=list[str])
async def list_categories(catalog: CatalogService = Depends(get_catalog_service)):
    """
    Distinct product categories, sorted.
    """
    return await catalog.list_categories()
