"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
``ProductNotFound`` is translated into a 404 with an empty body and body
coercion errors into a 400.  Anything else, database errors included,
propagates to Django's 500 handling.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import ProductInputDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).  The
    resource is public: no authentication or permission checks apply.
    """

    authentication_classes: list = []
    permission_classes: list = []

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    @staticmethod
    def _parse_body(request: Request) -> ProductInputDTO:
        return ProductInputDTO.model_validate(request.data)

    @staticmethod
    def _bad_request(exc: PydanticValidationError) -> Response:
        return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: None})
    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            data = self._parse_body(request)
        except PydanticValidationError as exc:
            return self._bad_request(exc)

        product = self._service.create_product(data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ProductSerializer,
        responses={200: ProductSerializer, 404: None},
    )
    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/products/{pk}"""
        try:
            data = self._parse_body(request)
        except PydanticValidationError as exc:
            return self._bad_request(exc)

        try:
            product = self._service.update_product(pk, data)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses={204: None, 404: None})
    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
