# app/services/search_service.py
"""
Stateless search and filter functions over a product snapshot.

Nothing here touches storage: callers pass in the products (usually a
fresh `CatalogService.list_products()` result) and get a new list back.
Input order is preserved in every result.
"""
from collections.abc import Iterable, Sequence

from app.models.product import Product
from app.models.vendor import Vendor
from app.schemas.product import ProductFilter


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.lower()


def search_products(products: Iterable[Product], query: str) -> list[Product]:
    """
    Case-insensitive substring match on name, description or category.

    An empty or whitespace-only query matches nothing (it is not the
    same as "no filter"). Leading and trailing spaces are stripped
    before matching, so " wid " searches for "wid".
    """
    needle = query.strip().lower()
    if not needle:
        return []
    return [
        p
        for p in products
        if _contains(p.name, needle)
        or _contains(p.description, needle)
        or _contains(p.category, needle)
    ]


def filter_by_category(products: Iterable[Product], category: str | None) -> list[Product]:
    if category is None:
        return list(products)
    return [p for p in products if p.category == category]


def filter_by_vendor(products: Iterable[Product], vendor_id: str | None) -> list[Product]:
    if vendor_id is None:
        return list(products)
    return [p for p in products if p.vendor_id == vendor_id]


def filter_by_price_range(
    products: Iterable[Product],
    min_price: float | None = None,
    max_price: float | None = None,
) -> list[Product]:
    """Inclusive on both ends; a missing bound is not checked."""
    return [
        p
        for p in products
        if (min_price is None or p.price >= min_price)
        and (max_price is None or p.price <= max_price)
    ]


def apply_filters(products: Iterable[Product], filters: ProductFilter) -> list[Product]:
    """
    Intersect all filters, in category -> vendor -> price order.
    """
    results = filter_by_category(products, filters.category)
    results = filter_by_vendor(results, filters.vendor_id)
    return filter_by_price_range(results, filters.min_price, filters.max_price)


def products_by_vendor(products: Iterable[Product], vendor_id: str) -> list[Product]:
    return [p for p in products if p.vendor_id == vendor_id]


def list_categories(products: Iterable[Product]) -> list[str]:
    return sorted({p.category for p in products})


def browse(
    products: Sequence[Product],
    query: str | None = None,
    filters: ProductFilter | None = None,
) -> list[Product]:
    """
    Storefront listing: search results when a query is given, the whole
    catalog otherwise, then narrowed by the filters.
    """
    if query and query.strip():
        results = search_products(products, query)
    else:
        results = list(products)
    if filters is not None:
        results = apply_filters(results, filters)
    return results


# ---- Admin list filters ----


def filter_products_by_text(products: Iterable[Product], text: str | None) -> list[Product]:
    """Name or category substring; blank text returns everything."""
    needle = (text or "").strip().lower()
    if not needle:
        return list(products)
    return [p for p in products if _contains(p.name, needle) or _contains(p.category, needle)]


def filter_vendors_by_name(vendors: Iterable[Vendor], text: str | None) -> list[Vendor]:
    needle = (text or "").strip().lower()
    if not needle:
        return list(vendors)
    return [v for v in vendors if _contains(v.name, needle)]
