"""Subscriber view serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.products.serializers import DATE_FORMAT


class SubscriberProductSerializer(serializers.Serializer):
    """A product as listed inside a subscriber."""

    name = serializers.CharField(read_only=True)
    creationDate = serializers.DateTimeField(
        source="creation_date", format=DATE_FORMAT, read_only=True
    )
    underSale = serializers.BooleanField(source="under_sale", read_only=True)


class SubscriberViewSerializer(serializers.Serializer):
    """Subscriber resource as returned by the API."""

    id = serializers.UUIDField(read_only=True)
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    joinedDate = serializers.DateTimeField(
        source="joined_date", format=DATE_FORMAT, read_only=True
    )
    products = SubscriberProductSerializer(many=True, read_only=True)
