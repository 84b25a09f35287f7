"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions — the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import Count

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _base_queryset(self) -> "models.QuerySet[Product]":
        return Product.objects.prefetch_related("subscribers")

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key, with its subscribers prefetched.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._base_queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"under_sale": True}
            {"name__icontains": "widget"}
        """
        queryset = self._base_queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def count(self) -> int:
        return Product.objects.count()

    def list_active(self) -> "models.QuerySet[Product]":
        return self._base_queryset().filter(under_sale=True)

    def list_sold(self) -> "models.QuerySet[Product]":
        return (
            self._base_queryset()
            .annotate(subscriber_count=Count("subscribers"))
            .filter(subscriber_count__gt=0)
        )

    def list_by_popularity(self) -> "models.QuerySet[Product]":
        return (
            self._base_queryset()
            .annotate(subscriber_count=Count("subscribers"))
            .order_by("-subscriber_count", "creation_date")
        )

    def list_created_between(
        self, start: datetime, end: datetime
    ) -> "models.QuerySet[Product]":
        return self._base_queryset().filter(creation_date__range=(start, end))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            name=entity.name,
        )
        return entity

    @transaction.atomic
    def detach_subscribers(self, product: Product) -> int:
        """Delete the join rows pointing at ``product``.

        Goes through the ``subscriptions`` reverse FK rather than
        ``product.subscribers.clear()`` so a prefetched subscriber list on
        ``product`` stays intact for the caller.
        """
        removed, _ = product.subscriptions.all().delete()
        logger.info(
            "product.subscribers_detached",
            product_id=str(product.id),
            removed=removed,
        )
        return removed

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.  Deletes through the queryset so the
        caller's in-memory instance keeps its primary key.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        if not deleted:
            return False
        logger.info("product.deleted", product_id=str(id))
        return True
