# app/routers/admin.py
from fastapi import APIRouter, Depends, Query

from app.dependencies import get_catalog_service, get_stats_service
from app.models.product import Product
from app.models.vendor import Vendor
from app.schemas.stats import AdminDashboardStats
from app.services import search_service
from app.services.catalog_service import CatalogService
from app.services.stats_service import StatsService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/stats", response_model=AdminDashboardStats)
async def get_admin_dashboard_stats(
    latest: int = Query(5, ge=0),
    service: StatsService = Depends(get_stats_service),
):
    """
    Aggregated statistics for the admin dashboard.

    Query params (optional):
      - latest: how many of the most recent orders to include
    """
    return await service.get_admin_dashboard_stats(latest_n_orders=latest)


@router.get("/products", response_model=list[Product])
async def list_products_admin(
    search: str | None = None,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Product management table, filtered by name or category.
    """
    return search_service.filter_products_by_text(await catalog.list_products(), search)


@router.get("/vendors", response_model=list[Vendor])
async def list_vendors_admin(
    search: str | None = None,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Vendor management table, filtered by name.
    """
    return search_service.filter_vendors_by_name(await catalog.list_vendors(), search)
