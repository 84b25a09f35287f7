"""Unit tests for the Product view serializer.

Covers:
- Field presence and camelCase wire names.
- ``yyyy-MM-dd`` date rendering.
- Nested subscriber summaries (no back-reference to products).
"""

from __future__ import annotations

from datetime import datetime

import pytest
from django.utils import timezone

from modules.products.serializers import ProductViewSerializer

pytestmark = pytest.mark.unit


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductViewSerializer()
        assert set(serializer.fields.keys()) == {
            "id",
            "name",
            "creationDate",
            "underSale",
            "subscribers",
        }

    def test_all_fields_read_only(self):
        serializer = ProductViewSerializer()
        assert all(field.read_only for field in serializer.fields.values())


class TestSerialization:
    def test_serializes_product(self, make_product):
        created = timezone.make_aware(datetime(2024, 3, 9, 15, 30))
        product = make_product(name="Widget", under_sale=True, creation_date=created)

        data = ProductViewSerializer(product).data

        assert data["id"] == str(product.id)
        assert data["name"] == "Widget"
        assert data["creationDate"] == "2024-03-09"
        assert data["underSale"] is True
        assert data["subscribers"] == []

    def test_nested_subscribers(self, make_product, make_subscriber, link):
        product = make_product()
        joined = timezone.make_aware(datetime(2023, 12, 1, 8, 0))
        link(make_subscriber(first_name="Jane", last_name="Roe", joined_date=joined), product)

        data = ProductViewSerializer(product).data

        assert data["subscribers"] == [
            {"firstName": "Jane", "lastName": "Roe", "joinedDate": "2023-12-01"}
        ]
