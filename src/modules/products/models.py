"""Product model.

A product is a catalogue item that subscribers can be linked to while it
is flagged ``under_sale``.  The link itself is stored on the subscriber
side (``modules.subscribers.models.Subscription``); ``Product.subscribers``
is the reverse accessor of that many-to-many relation.
"""

from __future__ import annotations

import structlog
from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.products.constants import NAME_MAX_LENGTH

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    """Catalogue item.

    ``creation_date`` is stamped once by the service when the product is
    created and is never touched by updates.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    creation_date = models.DateTimeField(default=timezone.now, editable=False)
    under_sale = models.BooleanField(default=False)

    class Meta:
        db_table = "products"
        ordering = ["creation_date"]
        indexes = [
            models.Index(fields=["under_sale"], name="products_under_sale_idx"),
            models.Index(fields=["creation_date"], name="products_creation_date_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=str(self.id),
                name=self.name,
                under_sale=self.under_sale,
            )

    def __str__(self) -> str:
        return self.name
