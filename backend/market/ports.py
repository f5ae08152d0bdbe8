"""Directory interfaces the market engine reads bids and stations through"""
from abc import ABC, abstractmethod
from typing import List, Optional

from .dataclasses import BidPrice, StationInfo


class BidDirectory(ABC):

    @abstractmethod
    def fetch_active_bids(self, bid_type: str) -> List[BidPrice]:
        """
        All current (active, not archived) bids of a direction.

        Transportation prices on the returned snapshots are left empty.
        """
        pass

    @abstractmethod
    def fetch_bids_priced_for_destination(self, base_station_code: str, bid_type: str) -> List[BidPrice]:
        """
        Current bids of a direction that have a tariff from their elevator
        station to the given base station.

        Returned snapshots carry the tariff's transportation prices.
        """
        pass


class StationDirectory(ABC):

    @abstractmethod
    def find_station(self, code: str) -> Optional[StationInfo]:
        pass

    @abstractmethod
    def find_base_station(
        self,
        region_id: int,
        district_id: int,
        locality_id: Optional[int],
    ) -> Optional[StationInfo]:
        """Base station for the exact region/district/locality combination, or None."""
        pass
