"""Django ORM implementation of the Subscriber repository.

Satisfies ``ISubscriberRepository`` using Django's QuerySet API.
Look-ups return ``None`` for unknown or malformed IDs; the Service Layer
decides what a miss means.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.products.models import Product
from modules.subscribers.models import Subscriber, Subscription
from modules.subscribers.repositories.interfaces import ISubscriberRepository

logger = structlog.get_logger(__name__)


class SubscriberDjangoRepository(ISubscriberRepository):
    """Concrete Subscriber repository backed by Django ORM."""

    def _base_queryset(self) -> "models.QuerySet[Subscriber]":
        return Subscriber.objects.prefetch_related("products")

    def get_by_id(self, id: str) -> Optional[Subscriber]:
        """Retrieve a subscriber by primary key, with its products prefetched."""
        try:
            return self._base_queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Subscriber]:
        """Retrieve a subscriber with a row-level lock.

        Must run inside ``transaction.atomic``.  Products are not
        prefetched: the caller is about to change them.
        """
        try:
            return Subscriber.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Subscriber]":
        """List subscribers with optional Django ORM look-ups.

        Example::

            {"last_name__icontains": "doe"}
        """
        queryset = self._base_queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def count(self) -> int:
        return Subscriber.objects.count()

    @transaction.atomic
    def save(self, entity: Subscriber) -> Subscriber:
        """Persist (create or update) a subscriber."""
        entity.save()
        logger.info("subscriber.saved", subscriber_id=str(entity.id))
        return entity

    def has_product(self, subscriber: Subscriber, product: Product) -> bool:
        return Subscription.objects.filter(
            subscriber=subscriber, product=product
        ).exists()

    def add_product(self, subscriber: Subscriber, product: Product) -> Subscription:
        """Insert the join row inside a savepoint.

        A duplicate raises ``IntegrityError`` and only the savepoint is
        rolled back, leaving the caller's transaction usable.
        """
        with transaction.atomic():
            subscription = Subscription.objects.create(
                subscriber=subscriber, product=product
            )
        logger.info(
            "subscription.created",
            subscriber_id=str(subscriber.id),
            product_id=str(product.id),
        )
        return subscription

    @transaction.atomic
    def detach_products(self, subscriber: Subscriber) -> int:
        """Delete the join rows of ``subscriber``.

        Leaves a prefetched ``subscriber.products`` list untouched so the
        caller can still report what was linked.
        """
        removed, _ = subscriber.subscriptions.all().delete()
        logger.info(
            "subscriber.products_detached",
            subscriber_id=str(subscriber.id),
            removed=removed,
        )
        return removed

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a subscriber by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            deleted, _ = Subscriber.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        if not deleted:
            return False
        logger.info("subscriber.deleted", subscriber_id=str(id))
        return True
