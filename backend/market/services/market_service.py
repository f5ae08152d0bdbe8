"""
Market ranking engine.

Builds the market table for a bid direction: all current bids, priced either
at their origin (no destination) or for delivery to a destination station,
grouped by quality class and ranked inside each group.

With a destination every current bid must be priceable: bids without a
tariff to the destination's base station are only kept when they originate
from that same base station. Any other gap fails the whole computation with
the full list of diagnostics.
"""
from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterable, List, Optional, Tuple

from ..dataclasses import BidPrice, MarketRow, MarketView, StationInfo
from ..errors import MarketGenerationError, UnresolvableStationError
from ..ports import BidDirectory, StationDirectory
from .prices import strategy_for

logger = logging.getLogger(__name__)


@contextmanager
def _timed(label: str):
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"Price calc: {label} {elapsed_ms:.0f}ms")


def base_station_error(station_code: str, station_name: Optional[str] = None) -> str:
    message = f"Невозможно вычислить базовую станцию для станции {station_code}"
    if station_name:
        message += f" ({station_name})"
    return message


def no_route_error(base_from: str, base_to: str) -> str:
    return f"Нет цены для перевозки из {base_from} в {base_to}"


def group_by_quality(rows: Iterable[MarketRow]) -> Dict[int, List[MarketRow]]:
    """Partition rows by quality class; keys ascending, rows in input order."""
    groups: Dict[int, List[MarketRow]] = {}
    for row in rows:
        groups.setdefault(row.quality_class, []).append(row)
    return {key: groups[key] for key in sorted(groups)}


def limit_rows(groups: Dict[int, List[MarketRow]], rows_limit: Optional[int]) -> Dict[int, List[MarketRow]]:
    """
    Keep at most `rows_limit` rows walking the groups in key order.

    The group that exhausts the budget is cut to fit it and later groups are
    dropped. A missing or negative limit keeps everything.
    """
    if rows_limit is None or rows_limit < 0:
        return groups

    limited: Dict[int, List[MarketRow]] = {}
    taken = 0
    for key, rows in groups.items():
        if taken >= rows_limit:
            break
        remaining = rows_limit - taken
        if len(rows) > remaining:
            limited[key] = rows[:remaining]
            taken = rows_limit
        else:
            limited[key] = rows
            taken += len(rows)
    return limited


def rank_rows(
    rows: List[MarketRow],
    bid_type: str,
    station_code: Optional[str] = None,
    base_station_code: Optional[str] = None,
    rows_limit: Optional[int] = None,
) -> Dict[int, List[MarketRow]]:
    """Enrich rows with prices, group them by quality class and sort each group."""
    strategy = strategy_for(bid_type)

    for row in rows:
        if (
            base_station_code is None
            or base_station_code != row.origin_base_station_code
            or strategy.always_enrich
        ):
            pickup = strategy.pickup_price(row.bid, station_code)
            if pickup is not None:
                row.pickup_price = pickup
            delivered = strategy.delivered_price(row.bid, station_code)
            if delivered is not None:
                row.delivered_price = delivered

    groups = group_by_quality(rows)
    for group in groups.values():
        for row in group:
            row.compare_price = strategy.compare_price(row, station_code, base_station_code)
        # list.sort is stable, also with reverse=True
        group.sort(key=lambda r: r.compare_price, reverse=strategy.descending)

    return limit_rows(groups, rows_limit)


class MarketService:
    def __init__(self, bid_directory: BidDirectory, station_directory: StationDirectory):
        self.bid_directory = bid_directory
        self.station_directory = station_directory

    def resolve_base_station(self, station_code: str) -> Tuple[StationInfo, StationInfo]:
        """The station itself and the base station serving its location."""
        station = self.station_directory.find_station(station_code)
        if station is None:
            raise UnresolvableStationError(f'Station with code "{station_code}" was not found.')

        if station.region_id is None or station.district_id is None:
            raise UnresolvableStationError(
                f'Station with code "{station_code}" doesn\'t have region and/or district. Please specify it.'
            )

        base = self.station_directory.find_base_station(
            station.region_id, station.district_id, station.locality_id
        )
        if base is None:
            raise UnresolvableStationError(
                f'Base Station for location "{station.region_name}", "{station.district_name}", '
                f'"{station.locality_name}" was not found. Please specify it.'
            )
        return station, base

    def calculate_base_station(self, station_code: str) -> str:
        """Code of the base station serving the given station's location."""
        _, base = self.resolve_base_station(station_code)
        return base.code

    def compute_market_view(
        self,
        station_code: Optional[str],
        bid_type: str,
        tax_mode: Optional[str] = None,
        rows_limit: Optional[int] = None,
    ) -> MarketView:
        """
        Ranked market table for a direction, optionally priced for delivery
        to `station_code`.

        Raises MarketGenerationError when the destination or any bid origin
        cannot be resolved to a priced route.
        """
        if station_code is None:
            bids = self._only_tax_mode(self.bid_directory.fetch_active_bids(bid_type), tax_mode)
            rows = [MarketRow.from_bid(bid) for bid in bids]
            with _timed("sort and enrich"):
                groups = rank_rows(rows, bid_type, rows_limit=rows_limit)
            return MarketView(bid_type=bid_type, tax_mode=tax_mode, groups=groups)

        try:
            station_to, base_to = self.resolve_base_station(station_code)
        except UnresolvableStationError as e:
            logger.error(f"Could not calculate destination station {station_code}: {e}")
            raise MarketGenerationError(
                "Could not calculate destination station",
                [base_station_error(station_code)],
            ) from e
        base_station_to = base_to.code

        logger.info(f"Price calc: station code {station_code}, base station {base_station_to}")

        with _timed("get bids with price"):
            bids = self._only_tax_mode(
                self.bid_directory.fetch_bids_priced_for_destination(base_station_to, bid_type),
                tax_mode,
            )
        with _timed("get all bids"):
            full_bids = self._only_tax_mode(self.bid_directory.fetch_active_bids(bid_type), tax_mode)

        rows = [MarketRow.from_bid(bid) for bid in bids]
        with _timed("resolve origin base stations"):
            self._resolve_origin_bases(rows)
        with _timed("check for errors"):
            rows.extend(self._salvage_unpriced(bids, full_bids, base_station_to))

        with _timed("sort and enrich"):
            groups = rank_rows(rows, bid_type, station_code, base_station_to, rows_limit)

        return MarketView(
            bid_type=bid_type,
            station=station_to,
            base_station_code=base_station_to,
            tax_mode=tax_mode,
            groups=groups,
        )

    def _resolve_origin_bases(self, rows: List[MarketRow]) -> None:
        """
        Fill the origin base station of priced rows that lack one.

        A priced row already has a tariff, so an origin whose hub cannot be
        resolved stays None and is priced through that tariff.
        """
        bases: Dict[str, Optional[str]] = {}
        for row in rows:
            if row.origin_base_station_code is not None:
                continue
            code = row.bid.elevator.station_code
            if code not in bases:
                try:
                    bases[code] = self.calculate_base_station(code)
                except UnresolvableStationError as e:
                    logger.debug(f"Bid {row.id}: origin base station unknown, priced by tariff ({e})")
                    bases[code] = None
            row.origin_base_station_code = bases[code]

    def _salvage_unpriced(
        self,
        bids: List[BidPrice],
        full_bids: List[BidPrice],
        base_station_to: str,
    ) -> List[MarketRow]:
        """
        Rows for current bids missing from the priced set.

        Only bids shipped from the destination's own base station can be
        kept; every other one produces a diagnostic and fails the request.
        """
        priced_ids = {bid.id for bid in bids}
        unpriced = [bid for bid in full_bids if bid.id not in priced_ids]
        if not unpriced:
            return []

        logger.error(f"Some bids could not be calculated for station {base_station_to}")
        errors: List[str] = []
        salvaged: List[MarketRow] = []
        for bid in unpriced:
            station_from = bid.elevator.station_code
            try:
                base_station_from = self.calculate_base_station(station_from)
            except UnresolvableStationError as e:
                logger.warning(f"Bid {bid.id}: {e}")
                errors.append(base_station_error(station_from, bid.elevator.station_name))
                continue

            if base_station_from == base_station_to:
                row = MarketRow.from_bid(bid)
                row.origin_base_station_code = base_station_from
                salvaged.append(row)
            else:
                errors.append(no_route_error(base_station_from, base_station_to))

        if errors:
            raise MarketGenerationError(
                f"Some bids could not be calculated for station {base_station_to}", errors
            )
        return salvaged

    @staticmethod
    def _only_tax_mode(bids: List[BidPrice], tax_mode: Optional[str]) -> List[BidPrice]:
        if tax_mode is None:
            return list(bids)
        return [bid for bid in bids if bid.nds == tax_mode]
