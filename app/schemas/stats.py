# app/schemas/stats.py
from pydantic import ConfigDict
from sqlmodel import SQLModel

from app.models.order import Order


class AdminDashboardStats(SQLModel):
    """
    Full payload for admin dashboard.
    """
    model_config = ConfigDict(extra="forbid")

    total_products: int
    total_vendors: int
    total_orders: int
    total_sales: float
    average_price: float
    latest_orders: list[Order]
