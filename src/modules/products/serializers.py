"""Product DRF serializer for API output.

Serializes ``ProductDTO`` snapshots (any object exposing the product
attributes).  Request bodies are coerced by ``ProductInputDTO`` instead.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read serializer for the Product resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True, required=False)
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField()
