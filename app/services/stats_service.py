# app/services/stats_service.py
from app.schemas.stats import AdminDashboardStats
from app.services.catalog_service import CatalogService
from app.services.order_service import OrderService


class StatsService:
    """
    Orchestrates aggregated admin dashboard statistics.
    """

    def __init__(self, catalog: CatalogService, order_service: OrderService):
        self.catalog = catalog
        self.order_service = order_service

    async def get_admin_dashboard_stats(self, latest_n_orders: int = 5) -> AdminDashboardStats:
        products = await self.catalog.list_products()
        vendors = await self.catalog.list_vendors()
        orders = await self.order_service.list_orders()

        total_sales = sum(o.total for o in orders)
        average_price = (
            sum(p.price for p in products) / len(products) if products else 0.0
        )

        return AdminDashboardStats(
            total_products=len(products),
            total_vendors=len(vendors),
            total_orders=len(orders),
            total_sales=float(total_sales),
            average_price=float(average_price),
            latest_orders=orders[:latest_n_orders],
        )
