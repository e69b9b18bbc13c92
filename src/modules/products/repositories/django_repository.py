"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: a missing or malformed id
yields ``None`` / ``False`` instead of an exception, and the Service
Layer decides what absence means.  Database errors are not caught.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        ``price`` is re-read so the entity carries the value the store kept.
        """
        entity.save()
        entity.refresh_from_db(fields=["price"])
        logger.debug("product.saved", product_id=entity.id)
        return entity

    def find_all(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    def find_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-integer IDs.
        """
        try:
            return Product.objects.filter(pk=id).first()
        except (TypeError, ValueError):
            return None

    def exists_by_id(self, id: int) -> bool:
        try:
            return Product.objects.filter(pk=id).exists()
        except (TypeError, ValueError):
            return False

    def delete_by_id(self, id: int) -> None:
        Product.objects.filter(pk=id).delete()
        logger.debug("product.row_deleted", product_id=id)
