"""Product repository interface.

Extends ``IRepository[Product]`` with the catalogue queries the product
service exposes (active, sold, popularity, creation-date window) and the
subscriber-side cleanup needed before a product is deleted.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List products with optional filters."""

    @abstractmethod
    def list_active(self) -> "models.QuerySet[Product]":
        """Products currently flagged ``under_sale``."""

    @abstractmethod
    def list_sold(self) -> "models.QuerySet[Product]":
        """Products linked to at least one subscriber."""

    @abstractmethod
    def list_by_popularity(self) -> "models.QuerySet[Product]":
        """All products ordered by subscriber count, most popular first."""

    @abstractmethod
    def list_created_between(
        self, start: datetime, end: datetime
    ) -> "models.QuerySet[Product]":
        """Products whose ``creation_date`` lies in ``[start, end]``."""

    @abstractmethod
    def detach_subscribers(self, product: "Product") -> int:
        """Remove ``product`` from every subscriber linked to it.

        Returns the number of links removed.
        """
