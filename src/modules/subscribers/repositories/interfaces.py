"""Subscriber repository interface.

Extends ``IRepository[Subscriber]`` with the subscription (join-table)
operations the linking use-case needs.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.subscribers.models import Subscriber, Subscription


class ISubscriberRepository(IRepository["Subscriber"]):
    """Repository contract for the Subscriber aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Subscriber]":
        """List subscribers with optional filters."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional["Subscriber"]:
        """Retrieve a subscriber with a row-level lock (SELECT FOR UPDATE).

        Serialises concurrent link attempts for the same subscriber.
        Returns ``None`` if the subscriber does not exist.
        """

    @abstractmethod
    def has_product(self, subscriber: "Subscriber", product: "Product") -> bool:
        """Whether ``subscriber`` is already linked to ``product``."""

    @abstractmethod
    def add_product(
        self, subscriber: "Subscriber", product: "Product"
    ) -> "Subscription":
        """Insert the join row; raises ``IntegrityError`` on a duplicate."""

    @abstractmethod
    def detach_products(self, subscriber: "Subscriber") -> int:
        """Remove every link of ``subscriber``; returns how many were removed."""
