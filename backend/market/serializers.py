from rest_framework import serializers

from core.choices import NDS, BidType

from .rendering import MARKET_TEMPLATES, quality_label


class MarketQuerySerializer(serializers.Serializer):
    station = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=16)
    bid_type = serializers.ChoiceField(choices=BidType.choices, default=BidType.SELL)
    tax_mode = serializers.ChoiceField(choices=NDS.choices, required=False, allow_null=True)
    limit = serializers.IntegerField(required=False, allow_null=True)
    template = serializers.ChoiceField(choices=MARKET_TEMPLATES, default="market_table")
    base_url = serializers.CharField(required=False, allow_blank=True, max_length=512)

    def to_internal_value(self, data):
        # bid_type / tax_mode are accepted in any case
        data = data.copy()
        for key in ("bid_type", "tax_mode"):
            if data.get(key):
                data[key] = data[key].upper()
        return super().to_internal_value(data)


class StationInfoSerializer(serializers.Serializer):
    code = serializers.CharField()
    name = serializers.CharField()
    region_name = serializers.CharField(allow_null=True)
    district_name = serializers.CharField(allow_null=True)
    locality_name = serializers.CharField(allow_null=True)


class MarketRowSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2)
    pickup_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    delivered_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    compare_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    nds = serializers.CharField(source="bid.nds")
    volume = serializers.DecimalField(source="bid.volume", max_digits=12, decimal_places=3, allow_null=True)
    elevator = serializers.CharField(source="bid.elevator.name")
    station_code = serializers.CharField(source="bid.elevator.station_code")
    station_name = serializers.CharField(source="bid.elevator.station_name")
    agent = serializers.CharField(source="bid.agent_name", allow_null=True)


class MarketViewSerializer(serializers.Serializer):
    bid_type = serializers.CharField()
    tax_mode = serializers.CharField(allow_null=True)
    station = StationInfoSerializer(allow_null=True)
    base_station_code = serializers.CharField(allow_null=True)
    total_rows = serializers.IntegerField()
    groups = serializers.SerializerMethodField()

    def get_groups(self, view):
        return [
            {
                "quality_class": qc,
                "label": quality_label(qc),
                "rows": MarketRowSerializer(rows, many=True).data,
            }
            for qc, rows in view.groups.items()
        ]
