from django.db import transaction
from django.db.models.signals import post_delete, post_save

from .cache import invalidate_market_cache

# Models whose changes alter a cached market table
MARKET_SOURCES = (
    "bids.Bid",
    "core.Station",
    "core.Elevator",
    "core.ServicePrice",
    "core.TransportationPrice",
    "core.Partner",
)


def clear_market_cache(sender, **kwargs):
    # Readers must not repopulate the cache from the writer's uncommitted rows
    transaction.on_commit(invalidate_market_cache, using=kwargs.get("using"))


def connect_signals(apps):
    for label in MARKET_SOURCES:
        model = apps.get_model(label)
        post_save.connect(clear_market_cache, sender=model, dispatch_uid=f"market-cache-save-{label}")
        post_delete.connect(clear_market_cache, sender=model, dispatch_uid=f"market-cache-delete-{label}")
