from django.core.management.base import BaseCommand
from django.db import transaction

from bids.models import Bid
from core.choices import NDS, BidType, QualityClass
from core.models import District, Elevator, Locality, Partner, Region, ServicePrice, Station, TransportationPrice
from market.services.utils import d


class Command(BaseCommand):
    help = "Seed demo geography, stations, partners, elevators, tariffs and bids for local development"

    def add_arguments(self, parser):
        parser.add_argument("--no-bids", action="store_true", help="Only seed reference data")

    @transaction.atomic
    def handle(self, *args, **options):
        kuban, _ = Region.objects.get_or_create(name="Краснодарский край")
        rostov, _ = Region.objects.get_or_create(name="Ростовская область")
        tikh, _ = District.objects.get_or_create(region=kuban, name="Тихорецкий район")
        kavk, _ = District.objects.get_or_create(region=kuban, name="Кавказский район")
        salsk, _ = District.objects.get_or_create(region=rostov, name="Сальский район")
        tikh_town, _ = Locality.objects.get_or_create(district=tikh, name="Тихорецк")

        demo_stations = [
            {"code": "525008", "name": "Тихорецкая", "region": kuban, "district": tikh, "locality": tikh_town, "is_base": True},
            {"code": "525104", "name": "Парковая", "region": kuban, "district": tikh, "locality": tikh_town, "is_base": False},
            {"code": "526305", "name": "Кавказская", "region": kuban, "district": kavk, "locality": None, "is_base": True},
            {"code": "517305", "name": "Сальск", "region": rostov, "district": salsk, "locality": None, "is_base": True},
            {"code": "516000", "name": "Новороссийск-Экспорт", "region": None, "district": None, "locality": None, "is_base": False},
        ]

        stations = {}
        created = 0
        for data in demo_stations:
            obj, was_created = Station.objects.get_or_create(code=data["code"], defaults=data)
            stations[obj.code] = obj
            if was_created:
                created += 1
                self.stdout.write(self.style.SUCCESS(f"Created station: {obj}"))
            else:
                changed = False
                for k, v in data.items():
                    if getattr(obj, k) != v:
                        setattr(obj, k, v)
                        changed = True
                if changed:
                    obj.save()
                    self.stdout.write(self.style.WARNING(f"Updated station: {obj}"))
                else:
                    self.stdout.write(self.style.NOTICE(f"Exists: {obj}"))

        agro, _ = Partner.objects.get_or_create(
            name='ООО "Агро-Юг"', defaults={"short_name": "Агро-Юг", "inn": "2321000001", "nds": NDS.INCLUDED}
        )
        zerno, _ = Partner.objects.get_or_create(
            name='АО "Сальскзерно"', defaults={"short_name": "Сальскзерно", "inn": "6153000002", "nds": NDS.EXCLUDED}
        )

        tikh_elevator, was_created = Elevator.objects.get_or_create(
            name="Тихорецкий КХП", defaults={"owner": agro, "station": stations["525104"]}
        )
        if was_created:
            ServicePrice.objects.create(elevator=tikh_elevator, price=d("350"))
        kavk_elevator, was_created = Elevator.objects.get_or_create(
            name="Кропоткинский элеватор", defaults={"owner": agro, "station": stations["526305"]}
        )
        if was_created:
            ServicePrice.objects.create(elevator=kavk_elevator, price=d("300"))
        salsk_elevator, _ = Elevator.objects.get_or_create(
            name="Сальский элеватор", defaults={"owner": zerno, "station": stations["517305"]}
        )

        tariffs = [
            ("526305", "525008", "420", "504", 98),
            ("517305", "525008", "760", "912", 210),
            ("525104", "526305", "450", "540", 105),
            ("517305", "526305", "690", "828", 190),
        ]
        for code_from, code_to, price, price_nds, distance in tariffs:
            TransportationPrice.objects.update_or_create(
                station_from=stations[code_from],
                station_to=stations[code_to],
                defaults={"price": d(price), "price_nds": d(price_nds), "distance": distance},
            )

        if not options["no_bids"] and not Bid.objects.exists():
            demo_bids = [
                (BidType.SELL, QualityClass.THIRD, "11800", NDS.INCLUDED, agro, tikh_elevator),
                (BidType.SELL, QualityClass.FOURTH, "11200", NDS.INCLUDED, agro, kavk_elevator),
                (BidType.SELL, QualityClass.FOURTH, "10950", NDS.EXCLUDED, zerno, salsk_elevator),
                (BidType.BUY, QualityClass.THIRD, "12500", NDS.EXCLUDED, zerno, salsk_elevator),
                (BidType.BUY, QualityClass.FIFTH, "10100", NDS.INCLUDED, agro, kavk_elevator),
            ]
            for bid_type, quality_class, price, nds, agent, elevator in demo_bids:
                Bid.objects.create(
                    bid_type=bid_type,
                    quality_class=quality_class,
                    price=d(price),
                    nds=nds,
                    agent=agent,
                    elevator=elevator,
                    volume=d("500"),
                )
            self.stdout.write(self.style.SUCCESS(f"Created {len(demo_bids)} demo bids"))

        self.stdout.write(self.style.SUCCESS(f"Reference data ready (created {created} stations)."))
