from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class StationInfo:
    code: str
    name: str
    region_id: Optional[int] = None
    district_id: Optional[int] = None
    locality_id: Optional[int] = None
    region_name: Optional[str] = None
    district_name: Optional[str] = None
    locality_name: Optional[str] = None
    is_base: bool = False


@dataclass
class ElevatorInfo:
    id: int
    name: str
    station_code: str
    station_name: str
    base_station_code: Optional[str] = None
    # loading/service fees in insertion order
    service_prices: List[Decimal] = field(default_factory=list)


@dataclass
class BidPrice:
    """Read-only snapshot of a bid together with the tariff of the route being priced."""
    id: int
    bid_type: str
    nds: str
    price: Decimal
    quality_class: int
    elevator: ElevatorInfo
    transportation_price: Optional[Decimal] = None
    transportation_price_nds: Optional[Decimal] = None
    volume: Optional[Decimal] = None
    description: Optional[str] = None
    quality_parameters: Optional[str] = None
    agent_name: Optional[str] = None
    agent_phone: Optional[str] = None
    creation_date: Optional[datetime] = None


@dataclass
class MarketRow:
    bid: BidPrice
    origin_base_station_code: Optional[str] = None
    pickup_price: Optional[Decimal] = None
    delivered_price: Optional[Decimal] = None
    compare_price: Optional[Decimal] = None

    @classmethod
    def from_bid(cls, bid: BidPrice) -> "MarketRow":
        return cls(bid=bid, origin_base_station_code=bid.elevator.base_station_code)

    @property
    def id(self) -> int:
        return self.bid.id

    @property
    def price(self) -> Decimal:
        return self.bid.price

    @property
    def quality_class(self) -> int:
        return self.bid.quality_class


@dataclass
class MarketView:
    bid_type: str
    station: Optional[StationInfo] = None
    base_station_code: Optional[str] = None
    tax_mode: Optional[str] = None
    # quality class -> ranked rows, keys in ascending order
    groups: Dict[int, List[MarketRow]] = field(default_factory=dict)

    @property
    def total_rows(self) -> int:
        return sum(len(rows) for rows in self.groups.values())

    def rows(self) -> List[MarketRow]:
        return [row for rows in self.groups.values() for row in rows]
