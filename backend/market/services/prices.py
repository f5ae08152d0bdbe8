"""
Price resolver for market rows.

Two views of a bid price are used by the market table:

- pickup price (FCA): price at the bid's own elevator, without delivery;
- delivered price (CPT): price including transportation to a reference station.

Each bid direction has its own `PriceStrategy`. A price that cannot be
defined for a direction/context is returned as None, which callers must
keep apart from zero.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Optional

from core.choices import NDS, BidType

from ..dataclasses import BidPrice, MarketRow
from .utils import ZERO

logger = logging.getLogger(__name__)


def transportation_price(bid: BidPrice) -> Decimal:
    """Tariff figure matching the bid's tax mode, zero when not on record."""
    if bid.nds == NDS.EXCLUDED and bid.transportation_price is not None:
        return bid.transportation_price
    if bid.nds == NDS.INCLUDED and bid.transportation_price_nds is not None:
        return bid.transportation_price_nds
    return ZERO


def loading_price(bid: BidPrice) -> Decimal:
    """First service price of the origin elevator, zero when it has none."""
    service_prices = bid.elevator.service_prices
    if service_prices:
        return service_prices[0]
    return ZERO


class PriceStrategy(ABC):
    bid_type: str
    # rank best offers first: cheapest sell, highest buy
    descending: bool = False
    # enrich rows even when the origin hub is the destination hub
    always_enrich: bool = False

    @abstractmethod
    def pickup_price(self, bid: BidPrice, station_code: Optional[str] = None) -> Optional[Decimal]:
        pass

    @abstractmethod
    def delivered_price(self, bid: BidPrice, station_code: Optional[str] = None) -> Optional[Decimal]:
        pass

    @abstractmethod
    def compare_price(
        self,
        row: MarketRow,
        station_code: Optional[str],
        base_station_code: Optional[str],
    ) -> Optional[Decimal]:
        pass


class SellPrices(PriceStrategy):
    bid_type = BidType.SELL

    def pickup_price(self, bid, station_code=None):
        load = loading_price(bid)
        logger.debug("SELL bid %s: price %s, loading %s", bid.id, bid.price, load)
        return bid.price + load

    def delivered_price(self, bid, station_code=None):
        if station_code is None:
            return None
        return self.pickup_price(bid, station_code) + transportation_price(bid)

    def compare_price(self, row, station_code, base_station_code):
        if station_code is None:
            return self.pickup_price(row.bid)
        # Same hub as the destination: no transport markup
        if base_station_code == row.origin_base_station_code:
            return row.bid.price
        return self.delivered_price(row.bid, station_code)


class BuyPrices(PriceStrategy):
    bid_type = BidType.BUY
    descending = True
    always_enrich = True

    def pickup_price(self, bid, station_code=None):
        if station_code is None:
            return None
        return self.delivered_price(bid, station_code) - transportation_price(bid)

    def delivered_price(self, bid, station_code=None):
        # A buy offer is already quoted at its delivery point
        return bid.price

    def compare_price(self, row, station_code, base_station_code):
        if station_code is None:
            return self.delivered_price(row.bid)
        return self.pickup_price(row.bid, station_code)


STRATEGIES: Dict[str, PriceStrategy] = {
    BidType.SELL: SellPrices(),
    BidType.BUY: BuyPrices(),
}


def strategy_for(bid_type: str) -> PriceStrategy:
    try:
        return STRATEGIES[bid_type]
    except KeyError:
        raise ValueError(f"Unknown bid type: {bid_type}")


def pickup_price(bid: BidPrice, station_code: Optional[str] = None) -> Optional[Decimal]:
    return strategy_for(bid.bid_type).pickup_price(bid, station_code)


def delivered_price(bid: BidPrice, station_code: Optional[str] = None) -> Optional[Decimal]:
    return strategy_for(bid.bid_type).delivered_price(bid, station_code)
