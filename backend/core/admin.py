from django.contrib import admin

from .models import District, Elevator, Locality, Partner, Region, ServicePrice, Station, TransportationPrice


@admin.register(Region)
class RegionAdmin(admin.ModelAdmin):
    list_display = ("id", "name")
    search_fields = ("name",)


@admin.register(District)
class DistrictAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "region")
    list_filter = ("region",)
    search_fields = ("name",)


@admin.register(Locality)
class LocalityAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "district")
    search_fields = ("name", "district__name")


@admin.register(Station)
class StationAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "region", "district", "locality", "is_base")
    list_filter = ("is_base", "region")
    search_fields = ("code", "name")


@admin.register(Partner)
class PartnerAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "short_name", "inn", "phone", "nds")
    list_filter = ("nds",)
    search_fields = ("name", "short_name", "inn")


class ServicePriceInline(admin.TabularInline):
    model = ServicePrice
    extra = 0


@admin.register(Elevator)
class ElevatorAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "station", "owner")
    search_fields = ("name", "station__code", "station__name")
    inlines = [ServicePriceInline]


@admin.register(TransportationPrice)
class TransportationPriceAdmin(admin.ModelAdmin):
    list_display = ("id", "station_from", "station_to", "price", "price_nds", "distance", "loading_date")
    search_fields = ("station_from__code", "station_to__code")
