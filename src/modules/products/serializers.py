"""Product view serializers.

Output-only: the views validate input with the pydantic DTOs in
``dtos.py`` and use these serializers to shape the response.  Each
direction of the product/subscriber relation gets its own flat nested
shape, so the bidirectional graph is never walked recursively.
"""

from __future__ import annotations

from rest_framework import serializers

DATE_FORMAT = "%Y-%m-%d"


class ProductSubscriberSerializer(serializers.Serializer):
    """A subscriber as listed inside a product."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    joinedDate = serializers.DateTimeField(
        source="joined_date", format=DATE_FORMAT, read_only=True
    )


class ProductViewSerializer(serializers.Serializer):
    """Product resource as returned by the API."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    creationDate = serializers.DateTimeField(
        source="creation_date", format=DATE_FORMAT, read_only=True
    )
    underSale = serializers.BooleanField(source="under_sale", read_only=True)
    subscribers = ProductSubscriberSerializer(many=True, read_only=True)
