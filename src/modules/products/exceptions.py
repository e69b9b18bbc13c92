"""Product domain exceptions.

Raised by the Service Layer when a mutation is rejected.  A single
error kind covers both bad input and update/delete of a missing product;
the API layer turns it into HTTP 400 with the message as the body.
"""

from __future__ import annotations

from modules.core.exceptions import DomainException

NAME_EMPTY = "Product name cannot be empty"
NAME_TOO_LONG = "Product name cannot exceed 255 characters"
PRICE_REQUIRED = "Product price is required"
PRICE_NEGATIVE = "Product price cannot be negative"
PRICE_NOT_A_NUMBER = "Product price must be a number"
PRICE_TOO_PRECISE = "Product price cannot have more than 2 decimal places"
PRICE_TOO_LARGE = "Product price must be less than 10000000000000"
NOT_FOUND = "Product not found"


class InvalidArgument(DomainException):
    """A create, update or delete was rejected.

    ``str(exc)`` is the client-facing reason, e.g. ``NOT_FOUND``.
    """
