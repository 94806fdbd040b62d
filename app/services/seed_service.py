# app/services/seed_service.py
import json
import logging

from app.core.storage import KeyValueStorage
from app.data.seed import PRODUCTS, VENDORS

logger = logging.getLogger(__name__)


def seed_if_empty(storage: KeyValueStorage) -> list[str]:
    """
    First-run initialization of the catalog and order collections.

    Each key is written only if storage does not hold it yet, so data
    created by the app is never overwritten by the bundled dataset.

    Returns:
        The keys that were seeded.
    """
    defaults = {
        "products": PRODUCTS,
        "vendors": VENDORS,
        "orders": [],
    }
    missing = {
        key: json.dumps(value)
        for key, value in defaults.items()
        if storage.get(key) is None
    }
    if missing:
        storage.set_many(missing)
        logger.info("Seeded storage keys: %s", ", ".join(missing))
    return list(missing)
