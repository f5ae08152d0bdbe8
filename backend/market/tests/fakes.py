from dataclasses import replace
from typing import Dict, Iterable, Optional, Tuple

from core.choices import NDS, BidType
from market.dataclasses import BidPrice, ElevatorInfo, StationInfo
from market.ports import BidDirectory, StationDirectory
from market.services.utils import d


class InMemoryStationDirectory(StationDirectory):
    def __init__(self, stations: Iterable[StationInfo] = ()):
        self.stations = {s.code: s for s in stations}

    def find_station(self, code):
        return self.stations.get(code)

    def find_base_station(self, region_id, district_id, locality_id):
        for station in self.stations.values():
            if station.is_base and (station.region_id, station.district_id, station.locality_id) == (
                region_id, district_id, locality_id
            ):
                return station
        return None


class InMemoryBidDirectory(BidDirectory):
    """
    `tariffs` maps (elevator station code, destination base code) to
    (price, price_nds).
    """

    def __init__(self, bids: Iterable[BidPrice] = (), tariffs: Optional[Dict[Tuple[str, str], tuple]] = None):
        self.bids = list(bids)
        self.tariffs = tariffs or {}

    def fetch_active_bids(self, bid_type):
        return [
            replace(bid, transportation_price=None, transportation_price_nds=None)
            for bid in self.bids
            if bid.bid_type == bid_type
        ]

    def fetch_bids_priced_for_destination(self, base_station_code, bid_type):
        priced = []
        for bid in self.bids:
            if bid.bid_type != bid_type:
                continue
            tariff = self.tariffs.get((bid.elevator.station_code, base_station_code))
            if tariff is None:
                continue
            price, price_nds = tariff
            priced.append(replace(
                bid,
                transportation_price=None if price is None else d(price),
                transportation_price_nds=None if price_nds is None else d(price_nds),
            ))
        return priced


def make_bid(
    id,
    price,
    bid_type=BidType.SELL,
    quality_class=3,
    nds=NDS.EXCLUDED,
    station_code="A2",
    service_prices=(),
    transportation_price=None,
    transportation_price_nds=None,
    base_station_code=None,
) -> BidPrice:
    return BidPrice(
        id=id,
        bid_type=bid_type,
        nds=nds,
        price=d(price),
        quality_class=quality_class,
        elevator=ElevatorInfo(
            id=id,
            name=f"Elevator {id}",
            station_code=station_code,
            station_name=f"Station {station_code}",
            base_station_code=base_station_code,
            service_prices=[d(p) for p in service_prices],
        ),
        transportation_price=None if transportation_price is None else d(transportation_price),
        transportation_price_nds=None if transportation_price_nds is None else d(transportation_price_nds),
    )


# A and B are hubs of different districts; A2/B2 are served by them.
# X has no geography, Y has geography but no hub.
STATIONS = [
    StationInfo(code="A", name="Hub A", region_id=1, district_id=10, locality_id=100, is_base=True),
    StationInfo(code="A2", name="Near A", region_id=1, district_id=10, locality_id=100),
    StationInfo(code="B", name="Hub B", region_id=1, district_id=20, is_base=True),
    StationInfo(code="B2", name="Near B", region_id=1, district_id=20),
    StationInfo(code="X", name="Nowhere"),
    StationInfo(code="Y", name="Hubless", region_id=2, district_id=30,
                region_name="Region 2", district_name="District 30"),
]
