from io import StringIO

import pytest
from django.core.management import call_command

from bids.models import Bid
from core.models import Station, TransportationPrice

pytestmark = pytest.mark.django_db


def test_seed_reference_data_is_idempotent():
    call_command("seed_reference_data", stdout=StringIO())
    stations = Station.objects.count()
    bids = Bid.objects.count()
    tariffs = TransportationPrice.objects.count()

    call_command("seed_reference_data", stdout=StringIO())
    assert Station.objects.count() == stations
    assert Bid.objects.count() == bids
    assert TransportationPrice.objects.count() == tariffs
    assert Station.objects.filter(is_base=True).count() == 3


def test_seed_without_bids():
    call_command("seed_reference_data", "--no-bids", stdout=StringIO())
    assert not Bid.objects.exists()


def test_render_market_to_stdout():
    call_command("seed_reference_data", stdout=StringIO())
    out = StringIO()
    call_command("render_market", "--bid-type", "SELL", stdout=out)
    html = out.getvalue()
    assert "<table>" in html
    assert html.count('class="market-row"') == Bid.objects.filter(bid_type="SELL").count()


def test_render_market_for_destination_to_file(tmp_path):
    call_command("seed_reference_data", stdout=StringIO())
    target = tmp_path / "market.html"
    out = StringIO()
    call_command("render_market", "--station", "526305", "--bid-type", "SELL", "--output", str(target), stdout=out)
    assert "written" in out.getvalue()
    html = target.read_text(encoding="utf-8")
    assert "market-error" not in html
    assert "ст. Кавказская" in html
