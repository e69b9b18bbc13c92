"""Product service layer (Use Cases).

Sole authority on whether a mutation is legal.  Persistence is delegated
to the injected ``IProductRepository``; the service keeps no state of
its own, so concurrent calls only race at the store (last write wins).

Rules enforced here, before any store access:
- Name must be non-empty and at most 255 characters.  Whitespace is not
  trimmed, so a name made only of spaces is accepted.
- Price is required and cannot be negative.  It has at most 2 decimal
  places and must be below ``PRICE_LIMIT``, so what the store keeps
  equals what the caller sent.  Negative zero is stored as zero.

Update and delete of a missing product raise the same ``InvalidArgument``
as bad input.  Store failures are not caught.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, NoReturn, Optional

import structlog

from modules.products import exceptions as errors
from modules.products.exceptions import InvalidArgument
from modules.products.models import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_LIMIT,
    Product,
)

if TYPE_CHECKING:
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_CENT = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, name: str, price: Decimal) -> Product:
        """Validate and persist a new product.

        Names are not required to be unique.

        Raises:
            InvalidArgument: if the name is empty or too long, or the price
                is missing, negative or not storable exactly.
        """
        price = self._validate(name, price, operation="create")

        product = self._repo.save(Product(name=name, price=price))
        logger.info("product.created", product_id=product.id)
        return product

    def update_product(self, id: int, name: str, price: Decimal) -> Product:
        """Replace name and price of an existing product.

        Input is validated before the existence check.

        Raises:
            InvalidArgument: on invalid input, or ``"Product not found"``.
        """
        price = self._validate(name, price, operation="update", product_id=id)

        product = self._repo.find_by_id(id)
        if product is None:
            self._reject(errors.NOT_FOUND, operation="update", product_id=id)

        product.name = name
        product.price = price
        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    def delete_product(self, id: int) -> None:
        """Hard-delete a product.

        Raises:
            InvalidArgument: ``"Product not found"`` if it does not exist.
        """
        if not self._repo.exists_by_id(id):
            self._reject(errors.NOT_FOUND, operation="delete", product_id=id)

        self._repo.delete_by_id(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_products(self) -> List[Product]:
        return list(self._repo.find_all())

    def get_product_by_id(self, id: int) -> Optional[Product]:
        """Return the product, or ``None`` when absent (not an error)."""
        return self._repo.find_by_id(id)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, name: str, price: Optional[Decimal], **context) -> Decimal:
        """Check name and price; return the price as it will be stored."""
        if not name:
            self._reject(errors.NAME_EMPTY, **context)
        if len(name) > NAME_MAX_LENGTH:
            self._reject(errors.NAME_TOO_LONG, **context)
        if price is None:
            self._reject(errors.PRICE_REQUIRED, **context)
        if price.is_nan():
            self._reject(errors.PRICE_NOT_A_NUMBER, **context)
        if price < 0:
            self._reject(errors.PRICE_NEGATIVE, **context)
        if price >= PRICE_LIMIT:
            self._reject(errors.PRICE_TOO_LARGE, **context)
        if price != price.quantize(_CENT):
            self._reject(errors.PRICE_TOO_PRECISE, **context)
        if price.is_zero():
            price = price.copy_abs()
        return price

    @staticmethod
    def _reject(reason: str, **context) -> NoReturn:
        logger.warning("product.rejected", reason=reason, **context)
        raise InvalidArgument(reason)
