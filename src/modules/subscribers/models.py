"""Subscriber model and the subscriber/product join table.

A subscription is one row in ``subscriber_product``.  Both directions of
the relation (``Subscriber.products`` and ``Product.subscribers``) read
that same row, so they can never disagree, and the unique constraint on
the pair rules out duplicate links at the database level.
"""

from __future__ import annotations

import structlog
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.subscribers.constants import NAME_MAX_LENGTH

logger = structlog.get_logger(__name__)


class Subscriber(BaseModel):
    """A person who can subscribe to products under sale."""

    first_name = models.CharField(max_length=NAME_MAX_LENGTH)
    last_name = models.CharField(max_length=NAME_MAX_LENGTH)
    joined_date = models.DateTimeField(default=timezone.now, editable=False)
    products = models.ManyToManyField(
        "products.Product",
        through="Subscription",
        related_name="subscribers",
        blank=True,
    )

    class Meta:
        db_table = "subscribers"
        ordering = ["joined_date"]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("subscriber_created", subscriber_id=str(self.id))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name


class Subscription(BaseModel):
    """Link between a subscriber and a product."""

    subscriber = models.ForeignKey(
        Subscriber,
        on_delete=models.CASCADE,
        related_name="subscriptions",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.CASCADE,
        related_name="subscriptions",
    )

    class Meta:
        db_table = "subscriber_product"
        constraints = [
            models.UniqueConstraint(
                fields=["subscriber", "product"],
                name="subscriber_product_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.subscriber_id} -> {self.product_id}"
