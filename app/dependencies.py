# app/dependencies.py
"""
FastAPI dependencies that hand out the marketplace services.

Catalog and order services are process-wide singletons: their write
locks only serialize writers that share the same instance. Carts are
opened per request from the `X-Cart-Session` header, under a per-cart
lock (see CartSession).

Tests swap these out through app.dependency_overrides.
"""
from functools import lru_cache

from fastapi import Depends, Header

from app.core.config import get_settings
from app.core.storage import KeyValueStorage
from app.database import get_storage
from app.repositories.cart_repo import cart_key_for
from app.services.cart_service import CartSession
from app.services.catalog_service import CatalogService
from app.services.checkout_service import CheckoutService
from app.services.order_service import OrderService
from app.services.stats_service import StatsService


def _latency_seconds() -> float:
    return get_settings().SIMULATED_LATENCY_MS / 1000


@lru_cache
def get_catalog_service() -> CatalogService:
    return CatalogService(get_storage(), latency=_latency_seconds())


@lru_cache
def get_order_service() -> OrderService:
    return OrderService(get_storage(), latency=_latency_seconds())


def get_cart_session(
    storage: KeyValueStorage = Depends(get_storage),
    x_cart_session: str | None = Header(default=None),
) -> CartSession:
    return CartSession(storage, cart_key_for(x_cart_session))


def get_checkout_service(
    order_service: OrderService = Depends(get_order_service),
) -> CheckoutService:
    return CheckoutService(order_service, shipping_fee=get_settings().SHIPPING_FEE)


def get_stats_service(
    catalog: CatalogService = Depends(get_catalog_service),
    order_service: OrderService = Depends(get_order_service),
) -> StatsService:
    return StatsService(catalog, order_service)
