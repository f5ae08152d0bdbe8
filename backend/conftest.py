from decimal import Decimal
from types import SimpleNamespace

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import caches
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _clear_market_cache(settings):
    caches[settings.MARKET_CACHE_ALIAS].clear()
    yield
    caches[settings.MARKET_CACHE_ALIAS].clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_client(db):
    User = get_user_model()
    user = User.objects.create_user(username="viewer", password="pass")
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def manager_client(db):
    User = get_user_model()
    user = User.objects.create_user(username="manager", password="pass", is_staff=True)
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def geo(db):
    """
    Two hubs in different districts plus a station without geography:

      525008 base A, 525104 served by A (same locality)
      517305 base B, 517400 served by B
      516000 no region/district
    """
    from core.models import District, Elevator, Locality, Partner, Region, ServicePrice, Station

    kuban = Region.objects.create(name="Краснодарский край")
    rostov = Region.objects.create(name="Ростовская область")
    tikh = District.objects.create(region=kuban, name="Тихорецкий район")
    salsk = District.objects.create(region=rostov, name="Сальский район")
    tikh_town = Locality.objects.create(district=tikh, name="Тихорецк")

    base_a = Station.objects.create(
        code="525008", name="Тихорецкая", region=kuban, district=tikh, locality=tikh_town, is_base=True
    )
    near_a = Station.objects.create(
        code="525104", name="Парковая", region=kuban, district=tikh, locality=tikh_town
    )
    base_b = Station.objects.create(
        code="517305", name="Сальск", region=rostov, district=salsk, is_base=True
    )
    near_b = Station.objects.create(code="517400", name="Трубецкая", region=rostov, district=salsk)
    orphan = Station.objects.create(code="516000", name="Новороссийск-Экспорт")

    partner = Partner.objects.create(name='ООО "Агро-Юг"', short_name="Агро-Юг", phone="+7 900 000-00-00")

    elevator_a = Elevator.objects.create(name="Тихорецкий КХП", owner=partner, station=near_a)
    ServicePrice.objects.create(elevator=elevator_a, price=Decimal("300"))
    ServicePrice.objects.create(elevator=elevator_a, price=Decimal("150"))
    elevator_b = Elevator.objects.create(name="Сальский элеватор", owner=partner, station=near_b)
    elevator_orphan = Elevator.objects.create(name="Портовый", owner=partner, station=orphan)

    return SimpleNamespace(
        kuban=kuban, rostov=rostov, tikh=tikh, salsk=salsk, tikh_town=tikh_town,
        base_a=base_a, near_a=near_a, base_b=base_b, near_b=near_b, orphan=orphan,
        partner=partner,
        elevator_a=elevator_a, elevator_b=elevator_b, elevator_orphan=elevator_orphan,
    )


@pytest.fixture
def bid_factory(geo):
    from bids.models import Bid
    from core.choices import NDS, BidType, QualityClass

    def _make(price, elevator=None, bid_type=BidType.SELL, quality_class=QualityClass.THIRD, nds=NDS.EXCLUDED, **extra):
        return Bid.objects.create(
            bid_type=bid_type,
            quality_class=quality_class,
            price=Decimal(str(price)),
            nds=nds,
            agent=extra.pop("agent", geo.partner),
            elevator=elevator or geo.elevator_b,
            **extra,
        )

    return _make
