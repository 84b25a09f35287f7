import pytest

from django.utils import timezone
from rest_framework.test import APIClient

from modules.products.models import Product
from modules.subscribers.models import Subscriber, Subscription


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory persisting a Product (on sale unless told otherwise)."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Widget",
            "under_sale": True,
            "creation_date": timezone.now(),
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make


@pytest.fixture()
def make_subscriber():
    """Factory persisting a Subscriber."""

    def _make(**overrides) -> Subscriber:
        defaults = {
            "first_name": "John",
            "last_name": "Doe",
            "joined_date": timezone.now(),
        }
        defaults.update(overrides)
        subscriber = Subscriber(**defaults)
        subscriber.save()
        return subscriber

    return _make


@pytest.fixture()
def link():
    """Persist a subscription row directly."""

    def _link(subscriber: Subscriber, product: Product) -> Subscription:
        return Subscription.objects.create(subscriber=subscriber, product=product)

    return _link
