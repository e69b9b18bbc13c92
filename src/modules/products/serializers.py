"""Product DRF serializer for API output.

Requests are decoded by ``ProductPayloadDTO``; this serializer only
renders persisted products.  ``price`` is emitted as a decimal string
(``"29.99"``) so no precision is lost in transit.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "price"]
        read_only_fields = ["id"]
