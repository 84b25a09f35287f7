"""Subscriber service layer (Use Cases).

Orchestrates business logic for the Subscriber aggregate and owns the
product subscription use-case.

Linking rules:
- the subscriber and the product must both exist;
- the product must be under sale;
- a subscriber can be linked to a given product only once.

The link is a single join-table insert made inside one transaction, with
the subscriber row locked for its duration.  The unique constraint on
``(subscriber, product)`` catches a duplicate that races past the
existence check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, models, transaction
from django.utils import timezone

from modules.products.constants import PRODUCT_NOT_FOUND
from modules.subscribers.constants import (
    PRODUCT_ALREADY_ASSIGNED,
    PRODUCT_NOT_UNDER_SALE,
    SUBSCRIBER_NOT_FOUND,
    LinkStatus,
)
from modules.subscribers.dtos import LinkResult
from modules.subscribers.exceptions import SubscriberNotFound
from modules.subscribers.models import Subscriber

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from modules.subscribers.dtos import SubscriberInputDTO
    from modules.subscribers.repositories.interfaces import ISubscriberRepository

logger = structlog.get_logger(__name__)


class SubscriberService:
    """Application service for Subscriber use-cases.

    Receives an ``ISubscriberRepository`` and an ``IProductRepository``
    via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: ISubscriberRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_subscriber(self, dto: SubscriberInputDTO) -> Subscriber:
        """Create a new subscriber stamped with the current time."""
        subscriber = Subscriber(
            first_name=dto.first_name,
            last_name=dto.last_name,
            joined_date=timezone.now(),
        )
        subscriber = self._repo.save(subscriber)
        logger.info("subscriber.created", subscriber_id=str(subscriber.id))
        return subscriber

    @transaction.atomic
    def update_subscriber(self, id: str, dto: SubscriberInputDTO) -> Subscriber:
        """Replace the subscriber's names.

        Raises:
            SubscriberNotFound: if the subscriber does not exist.
        """
        subscriber = self._get_or_raise(id)

        subscriber.first_name = dto.first_name
        subscriber.last_name = dto.last_name

        subscriber = self._repo.save(subscriber)
        logger.info("subscriber.updated", subscriber_id=str(id))
        return subscriber

    @transaction.atomic
    def delete_subscriber(self, id: str) -> Subscriber:
        """Delete a subscriber together with its links.

        Returns the instance as it was before deletion, products included.

        Raises:
            SubscriberNotFound: if the subscriber does not exist.
        """
        subscriber = self._get_or_raise(id)
        unlinked = self._repo.detach_products(subscriber)
        self._repo.delete(id)
        logger.info("subscriber.deleted", subscriber_id=str(id), unlinked=unlinked)
        return subscriber

    @transaction.atomic
    def link_product(self, subscriber_id: str, product_id: str) -> LinkResult:
        """Subscribe ``subscriber_id`` to ``product_id``.

        Never raises for a business-rule rejection; the returned
        ``LinkResult`` carries the outcome.
        """
        log = logger.bind(subscriber_id=str(subscriber_id), product_id=str(product_id))

        subscriber = self._repo.get_for_update(subscriber_id)
        if subscriber is None:
            return self._reject(
                log,
                LinkStatus.SUBSCRIBER_NOT_FOUND,
                SUBSCRIBER_NOT_FOUND.format(id=subscriber_id),
            )

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return self._reject(
                log,
                LinkStatus.PRODUCT_NOT_FOUND,
                PRODUCT_NOT_FOUND.format(id=product_id),
            )

        if not product.under_sale:
            return self._reject(
                log,
                LinkStatus.PRODUCT_NOT_ON_SALE,
                PRODUCT_NOT_UNDER_SALE.format(product=product.name),
            )

        if self._repo.has_product(subscriber, product):
            return self._reject(
                log, LinkStatus.ALREADY_LINKED, self._already_assigned(subscriber, product)
            )

        try:
            self._repo.add_product(subscriber, product)
        except IntegrityError:
            return self._reject(
                log, LinkStatus.ALREADY_LINKED, self._already_assigned(subscriber, product)
            )

        log.info("subscriber.linked")
        return LinkResult.linked(subscriber)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_subscriber(self, id: str) -> Subscriber:
        """Retrieve a single subscriber by ID.

        Raises:
            SubscriberNotFound: if the subscriber does not exist.
        """
        subscriber = self._get_or_raise(id)
        logger.info("subscriber.retrieved", subscriber_id=str(id))
        return subscriber

    def list_subscribers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Subscriber]":
        return self._repo.list(filters)

    def count_subscribers(self) -> int:
        return self._repo.count()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Subscriber:
        subscriber = self._repo.get_by_id(id)
        if not subscriber:
            logger.warning("subscriber.not_found", subscriber_id=str(id))
            raise SubscriberNotFound(id)
        return subscriber

    @staticmethod
    def _already_assigned(subscriber: Subscriber, product: Product) -> str:
        return PRODUCT_ALREADY_ASSIGNED.format(
            product=product.name,
            first_name=subscriber.first_name,
            last_name=subscriber.last_name,
        )

    @staticmethod
    def _reject(log, status: LinkStatus, message: str) -> LinkResult:
        log.warning("subscriber.link_rejected", reason=status.value)
        return LinkResult.rejected(status, message)
