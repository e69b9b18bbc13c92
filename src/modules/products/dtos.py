"""Product request DTO.

Decodes the JSON body of create/update requests into typed values using
Pydantic v2.  Only shape and type are checked here (``name`` is a string,
``price`` an exact decimal of at most 15 digits and 2 decimal places,
the widest value every supported store keeps exactly); the
business rules live in ``ProductService`` so they apply to every caller.

Decoding failures are re-raised as ``InvalidArgument`` carrying the first
error, so the API answers them like any other rejected input.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from modules.products.exceptions import InvalidArgument
from modules.products.models import PRICE_DECIMAL_PLACES, PRICE_MAX_EXACT_DIGITS

_MISSING_FIELD_MESSAGES = {
    "name": "Product name is required",
    "price": "Product price is required",
}


class ProductPayloadDTO(BaseModel):
    """Immutable body of ``POST /api/products`` and ``PUT /api/products/{id}``.

    ``price`` accepts a decimal string (``"29.99"``) or a JSON number that
    the parser already decoded as ``Decimal``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal = Field(
        max_digits=PRICE_MAX_EXACT_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        allow_inf_nan=False,
    )

    @classmethod
    def parse(cls, data: Any) -> ProductPayloadDTO:
        """Validate raw request data.

        Raises:
            InvalidArgument: with a single human-readable message.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidArgument(first_error_message(exc)) from exc


def first_error_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    loc = ".".join(str(part) for part in error["loc"])
    if loc in _MISSING_FIELD_MESSAGES and (
        error["type"] == "missing" or error.get("input") is None
    ):
        return _MISSING_FIELD_MESSAGES[loc]
    if not loc:
        return error["msg"]
    return f"{loc}: {error['msg']}"
