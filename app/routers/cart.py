# app/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_cart_session, get_catalog_service
from app.schemas.cart import CartItemCreate, CartItemUpdate, CartSummary
from app.services.cart_service import CartSession
from app.services.catalog_service import CatalogService

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=CartSummary)
async def get_my_cart(carts: CartSession = Depends(get_cart_session)):
    """
    Get the cart summary for the session in `X-Cart-Session`
    (the default cart when the header is missing).
    """
    async with carts.open() as cart:
        return cart.get_cart_summary()


@router.post("", response_model=CartSummary)
async def add_to_cart(
    payload: CartItemCreate,
    carts: CartSession = Depends(get_cart_session),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Add a product to the cart, snapshotting its current catalog data.

    Returns the updated cart summary.
    """
    # Look the product up before taking the cart lock
    product = await catalog.get_product(payload.product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    async with carts.open() as cart:
        cart.add_to_cart(product, payload.quantity)
        return cart.get_cart_summary()


@router.patch("/{product_id}", response_model=CartSummary)
async def update_cart_item(
    product_id: str,
    payload: CartItemUpdate,
    carts: CartSession = Depends(get_cart_session),
):
    """
    Set the quantity of a product in the cart. 0 or less removes it.
    """
    async with carts.open() as cart:
        if cart.get_item(product_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Item not in cart",
            )
        cart.update_quantity(product_id, payload.quantity)
        return cart.get_cart_summary()


@router.delete("/{product_id}", response_model=CartSummary)
async def remove_cart_item(
    product_id: str,
    carts: CartSession = Depends(get_cart_session),
):
    """
    Remove a product from the cart (no-op if it is not there).
    """
    async with carts.open() as cart:
        cart.remove_from_cart(product_id)
        return cart.get_cart_summary()


@router.delete("", response_model=CartSummary)
async def clear_cart(carts: CartSession = Depends(get_cart_session)):
    """
    Clear the entire cart.
    """
    async with carts.open() as cart:
        cart.clear_cart()
        return cart.get_cart_summary()
