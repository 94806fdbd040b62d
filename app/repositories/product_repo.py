# app/repositories/product_repo.py
from app.models.product import Product
from app.repositories.base import CollectionRepository


class ProductRepository(CollectionRepository[Product]):
    """
    Data access layer for the `products` collection.
    """

    key = "products"
    model = Product

    def get_by_id(self, product_id: str) -> Product | None:
        return next((p for p in self.load() if p.id == product_id), None)
