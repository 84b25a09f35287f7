"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into HTTP responses:
validation failures and unknown ids both answer 400, the former with a
``{field: message}`` map, the latter with the not-found message.
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
from modules.products.constants import (
    TOTAL_ACTIVE_PRODUCTS,
    TOTAL_PRODUCTS,
    TOTAL_SOLD_PRODUCTS,
)
from modules.products.dtos import DateRangeDTO, ProductInputDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductViewSerializer
from modules.products.services import ProductService


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations and catalogue statistics.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet`` — all ORM access goes through
    the service/repository layer.
    """

    filterset_class = ProductFilter
    ordering_fields = ["name", "creation_date"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    queryset = Product.objects.all()
    serializer_class = ProductViewSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_products()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound as exc:
            return Response(str(exc), status=status.HTTP_400_BAD_REQUEST)
        return Response(ProductViewSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = ProductInputDTO.model_validate(request_payload(request.data))
        except PydanticValidationError as exc:
            errors = field_errors(exc, ProductInputDTO)
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        product = self._service.add_product(dto)
        out = ProductViewSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        try:
            dto = ProductInputDTO.model_validate(request_payload(request.data))
        except PydanticValidationError as exc:
            errors = field_errors(exc, ProductInputDTO)
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound as exc:
            return Response(str(exc), status=status.HTTP_400_BAD_REQUEST)

        out = ProductViewSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            product = self._service.delete_product(pk)
        except ProductNotFound as exc:
            return Response(str(exc), status=status.HTTP_400_BAD_REQUEST)
        return Response(ProductViewSerializer(product).data)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    @action(detail=False, methods=["get"], url_path="total")
    def total(self, request: Request) -> Response:
        """GET /api/products/total"""
        count = self._service.count_products()
        return Response(TOTAL_PRODUCTS.format(count=count))

    @action(detail=False, methods=["get"], url_path="total/sold", url_name="total-sold")
    def total_sold(self, request: Request) -> Response:
        """GET /api/products/total/sold"""
        count = self._service.list_sold_products().count()
        return Response(TOTAL_SOLD_PRODUCTS.format(count=count))

    @action(
        detail=False, methods=["get"], url_path="total/active", url_name="total-active"
    )
    def total_active(self, request: Request) -> Response:
        """GET /api/products/total/active"""
        count = self._service.list_active_products().count()
        return Response(TOTAL_ACTIVE_PRODUCTS.format(count=count))

    @action(
        detail=False, methods=["get"], url_path="total/popular", url_name="total-popular"
    )
    def popular(self, request: Request) -> Response:
        """GET /api/products/total/popular"""
        products = self._service.list_products_by_popularity()
        return Response(ProductViewSerializer(products, many=True).data)

    @action(detail=False, methods=["get"], url_path="date-range")
    def date_range(self, request: Request) -> Response:
        """GET /api/products/date-range?startDate=...&endDate=..."""
        try:
            window = DateRangeDTO.model_validate(request_payload(request.query_params))
        except PydanticValidationError as exc:
            errors = field_errors(exc, DateRangeDTO)
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        products = self._service.list_products_created_between(window.start, window.end)
        return Response(ProductViewSerializer(products, many=True).data)
