"""
Response cache for market tables without a destination.

The table for "no destination" only depends on current bids and stations, so
it is cached per (bid type, tax mode, template, base url, rows limit, day) in
the `market` cache alias. Any committed change to bids or reference data
clears the alias (see market.signals). Tables for a destination are always
recomputed.

The default alias is a per-process LocMemCache; deployments running several
workers should point MARKET_CACHE_BACKEND at a shared backend so a clear
reaches every worker.
"""
from __future__ import annotations

import hashlib
import logging
from datetime import date
from typing import Optional

from django.conf import settings
from django.core.cache import caches
from django.db import transaction
from django.utils import timezone

from .rendering import normalize_station_code, render_market_table

logger = logging.getLogger(__name__)


def market_cache():
    return caches[settings.MARKET_CACHE_ALIAS]


def cache_key(
    bid_type: str,
    tax_mode: Optional[str],
    template_name: str,
    base_url: Optional[str],
    rows_limit: Optional[int],
    day: Optional[date] = None,
) -> str:
    # tables print the current date
    day = day or timezone.localdate()
    url_hash = hashlib.md5((base_url or "").encode("utf-8")).hexdigest()
    limit = -1 if rows_limit is None or rows_limit < 0 else rows_limit
    return f"market:{day.isoformat()}:{bid_type}:{tax_mode or 'ANY'}:{template_name}:{limit}:{url_hash}"


def cached_market_table(
    station_code: Optional[str],
    bid_type: str,
    template_name: str,
    base_url: Optional[str] = None,
    rows_limit: Optional[int] = None,
    tax_mode: Optional[str] = None,
) -> str:
    station_code = normalize_station_code(station_code)
    if station_code is not None:
        return render_market_table(station_code, bid_type, template_name, base_url, rows_limit, tax_mode)

    # Inside a caller's transaction the rows may still be rolled back
    if transaction.get_connection().in_atomic_block:
        return render_market_table(None, bid_type, template_name, base_url, rows_limit, tax_mode)

    cache = market_cache()
    key = cache_key(bid_type, tax_mode, template_name, base_url, rows_limit)
    html = cache.get(key)
    if html is None:
        html = render_market_table(None, bid_type, template_name, base_url, rows_limit, tax_mode)
        cache.set(key, html, settings.MARKET_CACHE_TIMEOUT)
    else:
        logger.debug(f"Market table served from cache: {key}")
    return html


def invalidate_market_cache() -> None:
    market_cache().clear()
    logger.debug("Market cache cleared")
