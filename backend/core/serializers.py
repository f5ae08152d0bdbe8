from rest_framework import serializers

from .models import District, Elevator, Locality, Partner, Region, ServicePrice, Station, TransportationPrice


class RegionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Region
        fields = "__all__"


class DistrictSerializer(serializers.ModelSerializer):
    region_name = serializers.CharField(source="region.name", read_only=True)

    class Meta:
        model = District
        fields = ["id", "name", "region", "region_name"]


class LocalitySerializer(serializers.ModelSerializer):
    district_name = serializers.CharField(source="district.name", read_only=True)

    class Meta:
        model = Locality
        fields = ["id", "name", "district", "district_name"]


class StationSerializer(serializers.ModelSerializer):
    region_name = serializers.CharField(source="region.name", read_only=True, default=None)
    district_name = serializers.CharField(source="district.name", read_only=True, default=None)
    locality_name = serializers.CharField(source="locality.name", read_only=True, default=None)

    class Meta:
        model = Station
        fields = [
            "id", "code", "name", "is_base",
            "region", "region_name",
            "district", "district_name",
            "locality", "locality_name",
        ]

    def validate(self, attrs):
        region = attrs.get("region", getattr(self.instance, "region", None))
        district = attrs.get("district", getattr(self.instance, "district", None))
        locality = attrs.get("locality", getattr(self.instance, "locality", None))
        if district is not None and region is not None and district.region_id != region.id:
            raise serializers.ValidationError({"district": "District does not belong to the region."})
        if locality is not None and district is not None and locality.district_id != district.id:
            raise serializers.ValidationError({"locality": "Locality does not belong to the district."})
        return attrs


class PartnerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Partner
        fields = "__all__"
        read_only_fields = ("created_at",)


class ServicePriceSerializer(serializers.ModelSerializer):
    class Meta:
        model = ServicePrice
        fields = "__all__"


class ElevatorSerializer(serializers.ModelSerializer):
    station_code = serializers.CharField(source="station.code", read_only=True)
    service_prices = ServicePriceSerializer(many=True, read_only=True)

    class Meta:
        model = Elevator
        fields = ["id", "name", "owner", "station", "station_code", "address", "service_prices"]


class TransportationPriceSerializer(serializers.ModelSerializer):
    station_from_code = serializers.CharField(source="station_from.code", read_only=True)
    station_to_code = serializers.CharField(source="station_to.code", read_only=True)

    class Meta:
        model = TransportationPrice
        fields = [
            "id", "station_from", "station_from_code", "station_to", "station_to_code",
            "price", "price_nds", "distance", "loading_date",
        ]
