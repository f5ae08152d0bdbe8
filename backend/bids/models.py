from django.db import models
from django.utils import timezone

from core.choices import NDS, BidType, QualityClass
from core.models import Elevator, Partner


class BidQuerySet(models.QuerySet):
    def current(self):
        """Active bids that are not archived."""
        return self.filter(is_active=True, archive_date__isnull=True)

    def archived(self):
        return self.filter(archive_date__isnull=False)

    def of_type(self, bid_type):
        return self.filter(bid_type=bid_type)


class Bid(models.Model):
    id = models.BigAutoField(primary_key=True)
    bid_type = models.CharField(max_length=4, choices=BidType.choices)
    nds = models.CharField(max_length=8, choices=NDS.choices, default=NDS.EXCLUDED)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quality_class = models.PositiveSmallIntegerField(choices=QualityClass.choices)
    volume = models.DecimalField(max_digits=12, decimal_places=3, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    # Free-form quality notes (protein, gluten, moisture...)
    quality_parameters = models.TextField(blank=True, null=True)
    agent = models.ForeignKey(Partner, on_delete=models.PROTECT, related_name='bids')
    elevator = models.ForeignKey(Elevator, on_delete=models.PROTECT, related_name='bids')
    is_active = models.BooleanField(default=True)
    creation_date = models.DateTimeField(default=timezone.now)
    archive_date = models.DateTimeField(blank=True, null=True)
    valid_until = models.DateField(blank=True, null=True)

    objects = BidQuerySet.as_manager()

    class Meta:
        db_table = 'bids'
        indexes = [
            models.Index(fields=['bid_type', 'is_active', 'archive_date'], name='bids_current_idx'),
            models.Index(fields=['agent', '-creation_date'], name='bids_agent_idx'),
        ]

    @property
    def is_archived(self) -> bool:
        return self.archive_date is not None

    def archive(self, when=None):
        self.archive_date = when or timezone.now()
        self.is_active = False
        self.save(update_fields=['archive_date', 'is_active'])

    def __str__(self):
        return f"{self.get_bid_type_display()} #{self.pk} {self.price}"
