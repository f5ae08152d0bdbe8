from datetime import date, timedelta

import pytest
from django.db import transaction

from bids.models import Bid
from market.cache import cache_key, cached_market_table, market_cache

# writes must really commit for the on-commit clear to run
pytestmark = pytest.mark.django_db(transaction=True)


def current_key():
    return cache_key("SELL", None, "market_table", None, None)


def test_cache_key_separates_parameters():
    base = current_key()
    assert base == cache_key("SELL", None, "market_table", None, -5)
    assert base != cache_key("BUY", None, "market_table", None, None)
    assert base != cache_key("SELL", "INCLUDED", "market_table", None, None)
    assert base != cache_key("SELL", None, "market_table_site", None, None)
    assert base != cache_key("SELL", None, "market_table", "https://example.org/", None)
    assert base != cache_key("SELL", None, "market_table", None, 10)


def test_cache_key_changes_with_the_day():
    today = date(2026, 10, 17)
    assert cache_key("SELL", None, "market_table", None, None, day=today) != cache_key(
        "SELL", None, "market_table", None, None, day=today + timedelta(days=1)
    )


def test_table_served_from_cache_until_bids_change(bid_factory):
    bid = bid_factory(100)
    first = cached_market_table(None, "SELL", "market_table")
    assert market_cache().get(current_key()) == first

    # queryset.update sends no signals, so the cached table is still served
    Bid.objects.filter(pk=bid.pk).update(price=55)
    assert cached_market_table(None, "SELL", "market_table") == first

    bid.refresh_from_db()
    bid.description = "обновлено"
    bid.save()
    assert market_cache().get(current_key()) is None
    assert cached_market_table(None, "SELL", "market_table") != first


def test_reference_change_clears_cache(geo, bid_factory):
    bid_factory(100)
    cached_market_table(None, "SELL", "market_table")
    geo.partner.phone = "+7 999"
    geo.partner.save()
    assert market_cache().get(current_key()) is None


def test_cache_cleared_only_after_commit(bid_factory):
    bid_factory(100)
    cached_market_table(None, "SELL", "market_table")

    with transaction.atomic():
        bid_factory(120)
        assert market_cache().get(current_key()) is not None
    assert market_cache().get(current_key()) is None


def test_rolled_back_bid_is_never_cached(bid_factory):
    bid_factory(100)

    class Abort(Exception):
        pass

    with pytest.raises(Abort):
        with transaction.atomic():
            ghost = bid_factory(77)
            inside = cached_market_table(None, "SELL", "market_table")
            assert f'data-bid="{ghost.id}"' in inside
            raise Abort()

    assert market_cache().get(current_key()) is None
    html = cached_market_table(None, "SELL", "market_table")
    assert f'data-bid="{ghost.id}"' not in html
    assert market_cache().get(current_key()) == html


def test_destination_tables_are_not_cached(geo, bid_factory):
    bid_factory(100, elevator=geo.elevator_a)
    cached_market_table("525008", "SELL", "market_table")
    cached_market_table("null", "SELL", "market_table")
    assert market_cache().get(current_key()) is not None
    market_cache().clear()
    cached_market_table("525008", "SELL", "market_table")
    assert market_cache().get(current_key()) is None
