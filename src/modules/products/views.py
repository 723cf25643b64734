"""Product API views.

Exposes the ``ProductService`` over HTTP with a DRF ViewSet.  Each action
invokes the service once and picks the status code; every
``ProductServiceError`` (and a malformed JSON body) becomes a 400 with the
error message as a plain-text body.  Confirmation messages are plain text,
product data is JSON.
"""

from __future__ import annotations

from typing import Any

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.exceptions import APIException, ParseError, UnsupportedMediaType
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.exceptions import ProductServiceError
from modules.products.repositories import get_product_repository
from modules.products.services import ProductService


def text_response(message: str, status_code: int) -> HttpResponse:
    return HttpResponse(
        message, status=status_code, content_type="text/plain; charset=utf-8"
    )


def error_response(exc: Exception) -> HttpResponse:
    message = exc.detail if isinstance(exc, APIException) else exc
    return text_response(str(message), status.HTTP_400_BAD_REQUEST)


# Body parsing errors surface when request.data is first read.
_FAILURES = (ProductServiceError, ParseError, UnsupportedMediaType)


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations on ``/product``.

    The service is built on first use with the process-wide repository, so
    a misconfigured store fails the request (400) instead of the import.
    """

    lookup_field = "id"
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._service: ProductService | None = None

    @property
    def service(self) -> ProductService:
        if self._service is None:
            self._service = ProductService(repository=get_product_repository())
        return self._service

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses={200: OpenApiTypes.OBJECT, 400: OpenApiTypes.STR})
    def list(self, request: Request) -> HttpResponse:
        """GET /product"""
        try:
            products = self.service.get_all()
        except _FAILURES as exc:
            return error_response(exc)

        if not products:
            return text_response("No Products found", status.HTTP_400_BAD_REQUEST)
        return Response([product.to_representation() for product in products])

    @extend_schema(
        responses={200: OpenApiTypes.OBJECT, 404: OpenApiTypes.STR, 400: OpenApiTypes.STR}
    )
    def retrieve(self, request: Request, id: str | None = None) -> HttpResponse:
        """GET /product/{id}"""
        try:
            data = self.service.get_one(id)
        except _FAILURES as exc:
            return error_response(exc)

        if data is None:
            return text_response("product not found", status.HTTP_404_NOT_FOUND)
        return Response(data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=OpenApiTypes.OBJECT,
        responses={200: OpenApiTypes.STR, 400: OpenApiTypes.STR},
    )
    def create(self, request: Request) -> HttpResponse:
        """POST /product"""
        try:
            self.service.create(request.data)
        except _FAILURES as exc:
            return error_response(exc)

        return text_response("product created successfully", status.HTTP_200_OK)

    @extend_schema(
        request=OpenApiTypes.OBJECT,
        responses={200: OpenApiTypes.STR, 400: OpenApiTypes.STR},
    )
    def update(self, request: Request, id: str | None = None) -> HttpResponse:
        """PUT /product/{id}"""
        try:
            self.service.update_one(id, request.data)
        except _FAILURES as exc:
            return error_response(exc)

        return text_response("product updated successfully", status.HTTP_200_OK)

    @extend_schema(responses={200: OpenApiTypes.STR, 400: OpenApiTypes.STR})
    def destroy(self, request: Request, id: str | None = None) -> HttpResponse:
        """DELETE /product/{id}"""
        try:
            self.service.delete_one(id)
        except _FAILURES as exc:
            return error_response(exc)

        return text_response("product deleted successfully", status.HTTP_200_OK)
