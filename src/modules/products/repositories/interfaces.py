"""Product repository interface.

The Product store is a plain keyed collection: no look-ups beyond the
identifier are needed by the business rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product", int]):
    """Repository contract for the Product aggregate."""
