from django.db import models

from .choices import NDS


class Region(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.TextField(unique=True)

    class Meta:
        db_table = 'regions'
        ordering = ['name']

    def __str__(self):
        return self.name


class District(models.Model):
    id = models.BigAutoField(primary_key=True)
    region = models.ForeignKey(Region, on_delete=models.PROTECT, related_name='districts')
    name = models.TextField()

    class Meta:
        db_table = 'districts'
        ordering = ['name']
        unique_together = (('region', 'name'),)

    def __str__(self):
        return self.name


class Locality(models.Model):
    id = models.BigAutoField(primary_key=True)
    district = models.ForeignKey(District, on_delete=models.PROTECT, related_name='localities')
    name = models.TextField()

    class Meta:
        db_table = 'localities'
        ordering = ['name']
        unique_together = (('district', 'name'),)

    def __str__(self):
        return self.name


class Station(models.Model):
    id = models.BigAutoField(primary_key=True)
    code = models.CharField(max_length=16, unique=True)
    name = models.TextField()
    region = models.ForeignKey(Region, on_delete=models.SET_NULL, blank=True, null=True, related_name='stations')
    district = models.ForeignKey(District, on_delete=models.SET_NULL, blank=True, null=True, related_name='stations')
    locality = models.ForeignKey(Locality, on_delete=models.SET_NULL, blank=True, null=True, related_name='stations')
    # Hub station used for transportation pricing of its region/district/locality
    is_base = models.BooleanField(default=False)

    class Meta:
        db_table = 'stations'
        ordering = ['code']
        indexes = [
            models.Index(fields=['region', 'district', 'locality', 'is_base'], name='stations_location_idx'),
        ]

    def __str__(self):
        return f"{self.code} ({self.name})"


class Partner(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.TextField()
    short_name = models.TextField(blank=True, null=True)
    inn = models.CharField(max_length=12, blank=True, null=True)
    phone = models.TextField(blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    nds = models.CharField(max_length=8, choices=NDS.choices, default=NDS.EXCLUDED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'partners'
        ordering = ['name']

    def __str__(self):
        return self.short_name or self.name


class Elevator(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.TextField()
    owner = models.ForeignKey(Partner, on_delete=models.SET_NULL, blank=True, null=True, related_name='elevators')
    station = models.ForeignKey(Station, on_delete=models.PROTECT, related_name='elevators')
    address = models.TextField(blank=True, null=True)

    class Meta:
        db_table = 'elevators'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.station.code})"


class ServicePrice(models.Model):
    LOADING = 'LOADING'
    SERVICE_CHOICES = [('LOADING', 'Погрузка'), ('STORAGE', 'Хранение'), ('DRYING', 'Сушка')]

    id = models.BigAutoField(primary_key=True)
    elevator = models.ForeignKey(Elevator, on_delete=models.CASCADE, related_name='service_prices')
    service_type = models.CharField(max_length=16, choices=SERVICE_CHOICES, default=LOADING)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    nds = models.CharField(max_length=8, choices=NDS.choices, default=NDS.EXCLUDED)

    class Meta:
        db_table = 'service_prices'
        # insertion order: the first row is the loading fee used by the market
        ordering = ['id']

    def __str__(self):
        return f"{self.elevator.name}: {self.service_type} {self.price}"


class TransportationPrice(models.Model):
    id = models.BigAutoField(primary_key=True)
    station_from = models.ForeignKey(Station, on_delete=models.CASCADE, related_name='tariffs_from')
    station_to = models.ForeignKey(Station, on_delete=models.CASCADE, related_name='tariffs_to')
    price = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    price_nds = models.DecimalField(max_digits=12, decimal_places=2, blank=True, null=True)
    distance = models.PositiveIntegerField(blank=True, null=True)
    loading_date = models.DateField(blank=True, null=True)

    class Meta:
        db_table = 'transportation_prices'
        unique_together = (('station_from', 'station_to'),)

    def __str__(self):
        return f"{self.station_from.code} -> {self.station_to.code}"
