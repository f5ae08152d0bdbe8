from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from django.db import transaction
from django.template.loader import render_to_string
from django.utils import timezone

from bids.directory import OrmBidDirectory
from core.choices import BidType, QualityClass
from core.directory import OrmStationDirectory

from .dataclasses import MarketView
from .errors import MarketGenerationError, UnknownTemplateError
from .services.market_service import MarketService

logger = logging.getLogger(__name__)

MARKET_TEMPLATES = (
    "market_table",
    "market_table_download",
    "market_table_email_inside",
    "market_table_admin",
    "market_table_site",
    "market_table_site_v2",
)
ERROR_TEMPLATE = "market/error.html"


def default_market_service() -> MarketService:
    return MarketService(OrmBidDirectory(), OrmStationDirectory())


def normalize_station_code(station_code: Optional[str]) -> Optional[str]:
    # Clients send the literal "null" for "no destination"
    if station_code is None or station_code in ("", "null"):
        return None
    return station_code


def quality_label(quality_class: int) -> str:
    try:
        return QualityClass(quality_class).label
    except ValueError:
        return str(quality_class)


def compute_market_view(
    station_code: Optional[str],
    bid_type: str,
    tax_mode: Optional[str] = None,
    rows_limit: Optional[int] = None,
    service: Optional[MarketService] = None,
) -> MarketView:
    """Run the market engine on one consistent read of bids and stations."""
    service = service or default_market_service()
    with transaction.atomic():
        return service.compute_market_view(
            normalize_station_code(station_code), bid_type, tax_mode, rows_limit
        )


def market_context(view: MarketView, base_url: str) -> dict:
    return {
        "current_date": timezone.localdate().strftime("%d.%m.%y"),
        "station": view.station,
        "base_url": base_url,
        "admin_base_url": settings.MARKET_ADMIN_BASE_URL,
        "bids": [
            {"quality_class": qc, "label": quality_label(qc), "rows": rows}
            for qc, rows in view.groups.items()
        ],
        "bid_type": view.bid_type,
        "bid_type_label": BidType(view.bid_type).label,
        "total_rows": view.total_rows,
    }


def render_market_table(
    station_code: Optional[str],
    bid_type: str,
    template_name: str,
    base_url: Optional[str] = None,
    rows_limit: Optional[int] = None,
    tax_mode: Optional[str] = None,
    service: Optional[MarketService] = None,
) -> str:
    """
    Market table rendered with one of MARKET_TEMPLATES.

    A failed computation renders the error template listing the diagnostics.
    """
    if template_name not in MARKET_TEMPLATES:
        raise UnknownTemplateError(f"Unknown market template: {template_name}")

    logger.debug(f"Generate market HTML table for station code {station_code}")
    try:
        view = compute_market_view(station_code, bid_type, tax_mode, rows_limit, service)
    except MarketGenerationError as e:
        logger.warning(f"Market table failed: {e} ({len(e.errors)} errors)")
        return render_to_string(ERROR_TEMPLATE, {"errors": e.errors})

    context = market_context(view, base_url or settings.MARKET_BASE_URL)
    return render_to_string(f"market/{template_name}.html", context)
