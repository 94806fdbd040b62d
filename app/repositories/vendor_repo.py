# app/repositories/vendor_repo.py
from app.models.vendor import Vendor
from app.repositories.base import CollectionRepository


class VendorRepository(CollectionRepository[Vendor]):
    """
    Data access layer for the `vendors` collection.
    """

    key = "vendors"
    model = Vendor

    def get_by_id(self, vendor_id: str) -> Vendor | None:
        return next((v for v in self.load() if v.id == vendor_id), None)
