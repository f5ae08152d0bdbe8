from typing import Optional

from market.dataclasses import StationInfo
from market.ports import StationDirectory

from .models import Station


def to_station_info(station: Station) -> StationInfo:
    return StationInfo(
        code=station.code,
        name=station.name,
        region_id=station.region_id,
        district_id=station.district_id,
        locality_id=station.locality_id,
        region_name=station.region.name if station.region_id else None,
        district_name=station.district.name if station.district_id else None,
        locality_name=station.locality.name if station.locality_id else None,
        is_base=station.is_base,
    )


class OrmStationDirectory(StationDirectory):
    def _stations(self):
        return Station.objects.select_related('region', 'district', 'locality')

    def find_station(self, code: str) -> Optional[StationInfo]:
        station = self._stations().filter(code=code).first()
        return to_station_info(station) if station else None

    def find_base_station(self, region_id, district_id, locality_id) -> Optional[StationInfo]:
        qs = self._stations().filter(is_base=True, region_id=region_id, district_id=district_id)
        if locality_id is None:
            qs = qs.filter(locality__isnull=True)
        else:
            qs = qs.filter(locality_id=locality_id)
        station = qs.order_by('id').first()
        return to_station_info(station) if station else None
