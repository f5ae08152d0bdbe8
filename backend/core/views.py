from __future__ import annotations

import logging

from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.permissions import IsManagerOrReadOnly
from market.errors import UnresolvableStationError
from market.rendering import default_market_service

from .directory import OrmStationDirectory
from .models import District, Elevator, Locality, Partner, Region, ServicePrice, Station, TransportationPrice
from .serializers import (
    DistrictSerializer,
    ElevatorSerializer,
    LocalitySerializer,
    PartnerSerializer,
    RegionSerializer,
    ServicePriceSerializer,
    StationSerializer,
    TransportationPriceSerializer,
)

logger = logging.getLogger(__name__)


class ReferenceViewSet(viewsets.ModelViewSet):
    permission_classes = [IsManagerOrReadOnly]
    filter_backends = [filters.SearchFilter]


class RegionViewSet(ReferenceViewSet):
    queryset = Region.objects.all()
    serializer_class = RegionSerializer
    search_fields = ["name"]


class DistrictViewSet(ReferenceViewSet):
    queryset = District.objects.select_related("region")
    serializer_class = DistrictSerializer
    search_fields = ["name", "region__name"]

    def get_queryset(self):
        qs = super().get_queryset()
        region = self.request.query_params.get("region")
        if region:
            qs = qs.filter(region_id=region)
        return qs


class LocalityViewSet(ReferenceViewSet):
    queryset = Locality.objects.select_related("district")
    serializer_class = LocalitySerializer
    search_fields = ["name", "district__name"]

    def get_queryset(self):
        qs = super().get_queryset()
        district = self.request.query_params.get("district")
        if district:
            qs = qs.filter(district_id=district)
        return qs


class StationViewSet(ReferenceViewSet):
    queryset = Station.objects.select_related("region", "district", "locality")
    serializer_class = StationSerializer
    lookup_field = "code"
    search_fields = ["code", "name", "region__name", "district__name", "locality__name"]

    @action(detail=True, methods=["get"])
    def base(self, request, code=None):
        """Base station serving this station's location."""
        station = self.get_object()
        service = default_market_service()
        try:
            base_code = service.calculate_base_station(station.code)
        except UnresolvableStationError as e:
            logger.info(f"Base station lookup failed for {station.code}: {e}")
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        base = OrmStationDirectory().find_station(base_code)
        return Response({"code": base.code, "name": base.name}, status=status.HTTP_200_OK)


class PartnerViewSet(ReferenceViewSet):
    queryset = Partner.objects.all()
    serializer_class = PartnerSerializer
    search_fields = ["name", "short_name", "inn"]


class ElevatorViewSet(ReferenceViewSet):
    queryset = Elevator.objects.select_related("station").prefetch_related("service_prices")
    serializer_class = ElevatorSerializer
    search_fields = ["name", "station__code", "station__name"]


class ServicePriceViewSet(ReferenceViewSet):
    queryset = ServicePrice.objects.select_related("elevator")
    serializer_class = ServicePriceSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        elevator = self.request.query_params.get("elevator")
        if elevator:
            qs = qs.filter(elevator_id=elevator)
        return qs


class TransportationPriceViewSet(ReferenceViewSet):
    queryset = TransportationPrice.objects.select_related("station_from", "station_to").order_by("id")
    serializer_class = TransportationPriceSerializer
    search_fields = ["station_from__code", "station_to__code"]
