from __future__ import annotations

from typing import List, Optional

from django.db.models import Prefetch

from core.models import ServicePrice, TransportationPrice
from market.dataclasses import BidPrice, ElevatorInfo
from market.ports import BidDirectory

from .models import Bid


def to_bid_price(bid: Bid, tariff: Optional[TransportationPrice] = None) -> BidPrice:
    elevator = bid.elevator
    return BidPrice(
        id=bid.id,
        bid_type=bid.bid_type,
        nds=bid.nds,
        price=bid.price,
        quality_class=bid.quality_class,
        elevator=ElevatorInfo(
            id=elevator.id,
            name=elevator.name,
            station_code=elevator.station.code,
            station_name=elevator.station.name,
            service_prices=[sp.price for sp in elevator.service_prices.all()],
        ),
        transportation_price=tariff.price if tariff else None,
        transportation_price_nds=tariff.price_nds if tariff else None,
        volume=bid.volume,
        description=bid.description,
        quality_parameters=bid.quality_parameters,
        agent_name=str(bid.agent),
        agent_phone=bid.agent.phone,
        creation_date=bid.creation_date,
    )


class OrmBidDirectory(BidDirectory):
    def _current_bids(self, bid_type: str):
        return (
            Bid.objects.current()
            .of_type(bid_type)
            .select_related('agent', 'elevator', 'elevator__station')
            .prefetch_related(
                Prefetch('elevator__service_prices', queryset=ServicePrice.objects.order_by('id'))
            )
            .order_by('id')
        )

    def fetch_active_bids(self, bid_type: str) -> List[BidPrice]:
        return [to_bid_price(bid) for bid in self._current_bids(bid_type)]

    def fetch_bids_priced_for_destination(self, base_station_code: str, bid_type: str) -> List[BidPrice]:
        tariffs = {
            tp.station_from_id: tp
            for tp in TransportationPrice.objects.filter(station_to__code=base_station_code)
        }
        if not tariffs:
            return []
        bids = self._current_bids(bid_type).filter(elevator__station_id__in=list(tariffs))
        return [to_bid_price(bid, tariffs[bid.elevator.station_id]) for bid in bids]
