"""Product model.

Business rules (enforced by ``ProductService`` on create/update):
- Name must be non-empty and at most 255 characters.
- Price is an exact decimal and cannot be negative (zero is allowed).
- Price has at most 2 decimal places and stays below ``PRICE_LIMIT`` so
  every backend, SQLite included, stores it without rounding.

The database carries a CHECK constraint on price as a backstop; a row
that violates it is rejected by the store, not by the service.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

NAME_MAX_LENGTH = 255
PRICE_MAX_DIGITS = 19
PRICE_DECIMAL_PLACES = 2
# SQLite keeps NUMERIC values as REAL, exact only up to 15 significant digits.
PRICE_MAX_EXACT_DIGITS = 15
PRICE_LIMIT = Decimal(10) ** (PRICE_MAX_EXACT_DIGITS - PRICE_DECIMAL_PLACES)


class Product(models.Model):
    """The catalog's only aggregate.

    ``id`` is assigned by the database on first save and never changes.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        db_table = "product"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="product_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
