"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Views only
decode, delegate and encode: ``InvalidArgument`` and unexpected errors
propagate to ``api_exception_handler``, which maps them to 400 / 500.

Every route requires HTTP Basic credentials.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import ProductPayloadDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

PRODUCT_NOT_FOUND = {"detail": "Product not found"}


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``; all ORM access goes through
    the service/repository layer.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = ProductSerializer
    lookup_value_regex = r"\d{1,18}"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(summary="Get all products")
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.get_all_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(
        summary="Get a product by ID",
        responses={200: ProductSerializer, 404: OpenApiResponse(description="Absent")},
    )
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product_by_id(int(pk))
        if product is None:
            return Response(PRODUCT_NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(summary="Create a new product", responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        payload = ProductPayloadDTO.parse(request.data)
        product = self._service.create_product(payload.name, payload.price)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(summary="Update a product by ID")
    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        payload = ProductPayloadDTO.parse(request.data)
        product = self._service.update_product(int(pk), payload.name, payload.price)
        return Response(ProductSerializer(product).data)

    @extend_schema(summary="Delete a product by ID", responses={204: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        self._service.delete_product(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
