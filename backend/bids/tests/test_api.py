import pytest
from django.urls import reverse

from bids.models import Bid
from core.choices import BidType

pytestmark = pytest.mark.django_db


def test_manager_creates_bid(manager_client, geo):
    payload = {
        "bid_type": "SELL",
        "nds": "EXCLUDED",
        "price": "11500.00",
        "quality_class": 3,
        "agent": geo.partner.id,
        "elevator": geo.elevator_b.id,
    }
    resp = manager_client.post(reverse("bids-list"), payload, format="json")
    assert resp.status_code == 201, resp.data
    assert resp.data["station_code"] == "517400"
    assert resp.data["is_archived"] is False


def test_negative_price_rejected(manager_client, geo):
    payload = {
        "bid_type": "BUY",
        "price": "-1",
        "quality_class": 3,
        "agent": geo.partner.id,
        "elevator": geo.elevator_b.id,
    }
    resp = manager_client.post(reverse("bids-list"), payload, format="json")
    assert resp.status_code == 400
    assert "price" in resp.data


def test_viewer_cannot_archive(user_client, bid_factory):
    bid = bid_factory(100)
    resp = user_client.post(reverse("bids-archive", kwargs={"pk": bid.id}))
    assert resp.status_code == 403
    bid.refresh_from_db()
    assert bid.archive_date is None


def test_archive_is_idempotent(manager_client, bid_factory):
    bid = bid_factory(100)
    url = reverse("bids-archive", kwargs={"pk": bid.id})

    resp = manager_client.post(url)
    assert resp.status_code == 200
    assert resp.data["status"] == "archived"

    resp = manager_client.post(url)
    assert resp.data["status"] == "already_archived"

    bid.refresh_from_db()
    assert bid.is_archived
    assert bid.is_active is False
    assert not Bid.objects.current().filter(pk=bid.pk).exists()


def test_filters(user_client, geo, bid_factory):
    from core.models import Partner

    other = Partner.objects.create(name="ИП Зерно")
    mine = bid_factory(100)
    archived = bid_factory(110)
    archived.archive()
    bid_factory(120, bid_type=BidType.BUY, agent=other)

    resp = user_client.get(reverse("bids-list"), {"partner": geo.partner.id, "archived": "false"})
    assert [b["id"] for b in resp.data["results"]] == [mine.id]

    resp = user_client.get(reverse("bids-list"), {"archived": "true"})
    assert [b["id"] for b in resp.data["results"]] == [archived.id]

    resp = user_client.get(reverse("bids-list"), {"bid_type": "buy"})
    assert [b["agent_name"] for b in resp.data["results"]] == ["ИП Зерно"]
