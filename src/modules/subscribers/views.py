"""Subscriber API views.

Exposes the ``SubscriberService`` via HTTP using DRF ViewSets.

The link endpoint answers 201 for every outcome: a successful link
returns the subscriber, a rejected one returns the rejection message as
a plain JSON string.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import field_errors, request_payload
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.subscribers.constants import TOTAL_SUBSCRIBERS
from modules.subscribers.dtos import SubscriberInputDTO
from modules.subscribers.exceptions import SubscriberNotFound
from modules.subscribers.filters import SubscriberFilter
from modules.subscribers.models import Subscriber
from modules.subscribers.repositories.django_repository import (
    SubscriberDjangoRepository,
)
from modules.subscribers.serializers import SubscriberViewSerializer
from modules.subscribers.services import SubscriberService


class SubscriberViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Subscriber CRUD operations and product subscriptions.

    Uses ``SubscriberService`` with the Django repositories (DIP).
    """

    filterset_class = SubscriberFilter
    ordering_fields = ["first_name", "last_name", "joined_date"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Subscriber.objects.all()
    serializer_class = SubscriberViewSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SubscriberService(
            repository=SubscriberDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_subscribers()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/subscribers/{pk}"""
        try:
            subscriber = self._service.get_subscriber(pk)
        except SubscriberNotFound as exc:
            return Response(str(exc), status=status.HTTP_400_BAD_REQUEST)
        return Response(SubscriberViewSerializer(subscriber).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/subscribers"""
        try:
            dto = SubscriberInputDTO.model_validate(request_payload(request.data))
        except PydanticValidationError as exc:
            errors = field_errors(exc, SubscriberInputDTO)
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        subscriber = self._service.add_subscriber(dto)
        out = SubscriberViewSerializer(subscriber)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/subscribers/{pk}"""
        try:
            dto = SubscriberInputDTO.model_validate(request_payload(request.data))
        except PydanticValidationError as exc:
            errors = field_errors(exc, SubscriberInputDTO)
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            subscriber = self._service.update_subscriber(pk, dto)
        except SubscriberNotFound as exc:
            return Response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        out = SubscriberViewSerializer(subscriber)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/subscribers/{pk}"""
        try:
            subscriber = self._service.delete_subscriber(pk)
        except SubscriberNotFound as exc:
            return Response(str(exc), status=status.HTTP_400_BAD_REQUEST)
        return Response(SubscriberViewSerializer(subscriber).data)

    # ------------------------------------------------------------------
    # Statistics / Subscriptions
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path="total")
    def total(self, request: Request) -> Response:
        """GET /api/subscribers/total"""
        count = self._service.count_subscribers()
        return Response(TOTAL_SUBSCRIBERS.format(count=count))

    @action(
        detail=True,
        methods=["post"],
        url_path=r"products/(?P<product_id>[^/.]+)",
        url_name="link-product",
    )
    def link_product(
        self, request: Request, pk: str | None = None, product_id: str | None = None
    ) -> Response:
        """POST /api/subscribers/{pk}/products/{product_id}"""
        result = self._service.link_product(pk, product_id)
        if not result.ok:
            return Response(result.message, status=status.HTTP_201_CREATED)
        out = SubscriberViewSerializer(result.subscriber)
        return Response(out.data, status=status.HTTP_201_CREATED)
