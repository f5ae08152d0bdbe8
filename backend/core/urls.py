from rest_framework.routers import DefaultRouter

from .views import (
    DistrictViewSet,
    ElevatorViewSet,
    LocalityViewSet,
    PartnerViewSet,
    RegionViewSet,
    ServicePriceViewSet,
    StationViewSet,
    TransportationPriceViewSet,
)

router = DefaultRouter()
router.register(r'regions', RegionViewSet, basename='regions')
router.register(r'districts', DistrictViewSet, basename='districts')
router.register(r'localities', LocalityViewSet, basename='localities')
router.register(r'stations', StationViewSet, basename='stations')
router.register(r'partners', PartnerViewSet, basename='partners')
router.register(r'elevators', ElevatorViewSet, basename='elevators')
router.register(r'service-prices', ServicePriceViewSet, basename='service-prices')
router.register(r'transportation-prices', TransportationPriceViewSet, basename='transportation-prices')

urlpatterns = router.urls
