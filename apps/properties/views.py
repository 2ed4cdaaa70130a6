"""Property API views.

Thin adapters over the application services: parse the request with an
input serializer, call one use case, render the returned DTO. Domain
errors are turned into responses by ``shared.api.exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .application.services import OwnerService, PropertyService
from .serializers import (
    OwnerCreateSerializer,
    OwnerSerializer,
    OwnerUpdateSerializer,
    PriceChangeSerializer,
    PropertyCreateSerializer,
    PropertyImageCreateSerializer,
    PropertyPageSerializer,
    PropertyQuerySerializer,
    PropertySerializer,
    PropertyUpdateSerializer,
)


class PropertyViewSet(viewsets.ViewSet):
    """Viewset для управления объектами недвижимости."""

    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    def get_service(self) -> PropertyService:
        return PropertyService()

    @extend_schema(parameters=[PropertyQuerySerializer], responses=PropertyPageSerializer)
    def list(self, request):  # type: ignore
        query = PropertyQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        page = self.get_service().list(query.to_filter())
        return Response(PropertyPageSerializer(page).data)

    @extend_schema(request=PropertyCreateSerializer, responses={201: PropertySerializer})
    def create(self, request):  # type: ignore
        serializer = PropertyCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = self.get_service().create(serializer.to_command())
        return Response(PropertySerializer(created).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses=PropertySerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        return self.details(request, pk=pk)

    @extend_schema(request=PropertyUpdateSerializer, responses=PropertySerializer)
    def update(self, request, pk=None, partial=False):  # type: ignore
        serializer = PropertyUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        updated = self.get_service().update(int(pk), serializer.to_patch())
        return Response(PropertySerializer(updated).data)

    @extend_schema(request=PropertyUpdateSerializer, responses=PropertySerializer)
    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    @extend_schema(responses=PropertySerializer)
    @action(detail=True, methods=["get"])
    def details(self, request, pk=None):  # type: ignore
        property_dto = self.get_service().get_details(int(pk))
        return Response(PropertySerializer(property_dto).data)

    @extend_schema(request=PropertyImageCreateSerializer, responses={204: OpenApiResponse()})
    @action(detail=True, methods=["post"])
    def images(self, request, pk=None):  # type: ignore
        serializer = PropertyImageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.get_service().add_image(int(pk), serializer.validated_data["file"])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={204: OpenApiResponse()})
    @action(detail=True, methods=["post"], url_path=r"images/(?P<image_id>\d+)/disable")
    def disable_image(self, request, pk=None, image_id=None):  # type: ignore
        self.get_service().disable_image(int(pk), int(image_id))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=PriceChangeSerializer, responses={204: OpenApiResponse()})
    @action(detail=True, methods=["patch"])
    def price(self, request, pk=None):  # type: ignore
        serializer = PriceChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.get_service().change_price(int(pk), serializer.validated_data["price"])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses=PropertySerializer(many=True))
    @action(detail=False, methods=["get"], url_path=r"owner/(?P<owner_id>\d+)")
    def by_owner(self, request, owner_id=None):  # type: ignore
        properties = self.get_service().get_by_owner(int(owner_id))
        return Response(PropertySerializer(properties, many=True).data)


class OwnerViewSet(viewsets.ViewSet):
    """Регистрация и редактирование владельцев."""

    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    def get_service(self) -> OwnerService:
        return OwnerService()

    @extend_schema(request=OwnerCreateSerializer, responses={201: OwnerSerializer})
    def create(self, request):  # type: ignore
        serializer = OwnerCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        owner = self.get_service().create(serializer.to_command())
        return Response(OwnerSerializer(owner).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses=OwnerSerializer)
    def retrieve(self, request, pk=None):  # type: ignore
        return Response(OwnerSerializer(self.get_service().get(int(pk))).data)

    @extend_schema(request=OwnerUpdateSerializer, responses=OwnerSerializer)
    def partial_update(self, request, pk=None):  # type: ignore
        serializer = OwnerUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        owner = self.get_service().update(int(pk), serializer.to_patch())
        return Response(OwnerSerializer(owner).data)
