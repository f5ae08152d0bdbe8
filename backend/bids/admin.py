from django.contrib import admin, messages

from .models import Bid


@admin.register(Bid)
class BidAdmin(admin.ModelAdmin):
    list_display = ("id", "bid_type", "quality_class", "price", "nds", "agent", "elevator", "is_active", "creation_date", "archive_date")
    list_filter = ("bid_type", "quality_class", "nds", "is_active")
    search_fields = ("agent__name", "elevator__name", "elevator__station__code")
    date_hierarchy = "creation_date"
    actions = ["archive_bids"]

    def archive_bids(self, request, queryset):
        archived = 0
        for bid in queryset.filter(archive_date__isnull=True):
            bid.archive()
            archived += 1
        messages.info(request, f"Archived {archived} bid(s).")
    archive_bids.short_description = "Archive selected bids"
