from rest_framework import serializers

from .models import Bid


class BidSerializer(serializers.ModelSerializer):
    agent_name = serializers.StringRelatedField(source="agent")
    station_code = serializers.CharField(source="elevator.station.code", read_only=True)
    is_archived = serializers.BooleanField(read_only=True)

    class Meta:
        model = Bid
        fields = [
            "id", "bid_type", "nds", "price", "quality_class", "volume",
            "description", "quality_parameters",
            "agent", "agent_name", "elevator", "station_code",
            "is_active", "creation_date", "archive_date", "valid_until", "is_archived",
        ]
        read_only_fields = ("creation_date", "archive_date")

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Price must not be negative.")
        return value
