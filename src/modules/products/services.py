"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- ``creation_date`` is stamped once, at creation; updates only touch
  ``name`` and ``under_sale``.
- A new product starts with no subscribers; links are only created by
  ``SubscriberService.link_product``.
- Deleting a product first removes it from every linked subscriber.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import models, transaction
from django.utils import timezone

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_product(self, dto: ProductInputDTO) -> Product:
        """Create a new product stamped with the current time."""
        product = Product(
            name=dto.name,
            under_sale=dto.under_sale,
            creation_date=timezone.now(),
        )
        product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            under_sale=product.under_sale,
        )
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: ProductInputDTO) -> Product:
        """Replace the product's name and sale flag.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        log = logger.bind(product_id=str(id))

        product.name = dto.name
        product.under_sale = dto.under_sale

        product = self._repo.save(product)
        log.info("product.updated", under_sale=product.under_sale)
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> Product:
        """Delete a product after unlinking it from its subscribers.

        The returned instance still carries the subscribers it had before
        deletion.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        unlinked = self._repo.detach_subscribers(product)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=str(id), unlinked=unlinked)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=str(id))
        return product

    def list_products(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """Return all products, optionally filtered."""
        return self._repo.list(filters)

    def count_products(self) -> int:
        return self._repo.count()

    def list_sold_products(self) -> "models.QuerySet[Product]":
        """Products with at least one subscriber."""
        return self._repo.list_sold()

    def list_active_products(self) -> "models.QuerySet[Product]":
        """Products currently under sale."""
        return self._repo.list_active()

    def list_products_by_popularity(self) -> "models.QuerySet[Product]":
        """Products ordered by subscriber count, descending."""
        return self._repo.list_by_popularity()

    def list_products_created_between(
        self, start: datetime, end: datetime
    ) -> "models.QuerySet[Product]":
        """Products created within ``[start, end]`` (both bounds inclusive)."""
        return self._repo.list_created_between(start, end)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            logger.warning("product.not_found", product_id=str(id))
            raise ProductNotFound(id)
        return product
