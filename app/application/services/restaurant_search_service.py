"""Restaurant search service — structured filters, open-now and free-text narrowing.

Structured predicates (cuisine, price, reservation, city) are pushed down to
the repository. The open-now check and the multi-field text match run in
memory over that already-narrowed result.
"""

import re
from datetime import datetime, time
from typing import Iterable, List, Mapping, Optional

import pytz

from app.config import get_settings
from app.domain.models.restaurant import Restaurant
from app.domain.repositories.restaurant_repository import RestaurantRepository
from app.domain.schemas.restaurant import RestaurantFilter

settings = get_settings()
tz = pytz.timezone(settings.TIMEZONE)

DAY_KEYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_HHMM = re.compile(r"^\d{2}:\d{2}$")


def get_current_datetime() -> datetime:
    """Now, in the reference timezone."""
    return datetime.now(tz)


def _parse_hhmm(value: str) -> time:
    value = value.strip()
    if not _HHMM.match(value):
        raise ValueError(f"not HH:mm: {value!r}")
    return datetime.strptime(value, "%H:%M").time()


def is_open_at(hours: Optional[Mapping[str, str]], day_key: str, now: time) -> bool:
    """Whether ``hours[day_key]`` covers ``now``.

    ``"09:00-17:00"`` is inclusive on both ends. When the end is not after
    the start (``"22:00-02:00"``) the span runs past midnight. Anything
    missing or malformed counts as closed.
    """
    if not hours:
        return False
    span = hours.get(day_key)
    if not span or not span.strip():
        return False

    parts = span.split("-")
    if len(parts) != 2:
        return False

    try:
        start = _parse_hhmm(parts[0])
        end = _parse_hhmm(parts[1])
    except ValueError:
        return False

    if end > start:
        return start <= now <= end
    return now >= start or now <= end


def filter_open_now(restaurants: Iterable[Restaurant], now: Optional[datetime] = None) -> List[Restaurant]:
    now = now or get_current_datetime()
    day_key = DAY_KEYS[now.weekday()]
    current = now.time()
    return [r for r in restaurants if is_open_at(r.hours, day_key, current)]


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def filter_by_text(restaurants: List[Restaurant], query: Optional[str]) -> List[Restaurant]:
    """Keep restaurants whose name, description or cuisine contains ``query``."""
    if query is None or not query.strip():
        return restaurants

    needle = query.strip().lower()
    return [
        r for r in restaurants
        if _contains(r.name, needle) or _contains(r.description, needle) or _contains(r.cuisine, needle)
    ]


def filter_restaurants(
    repo: RestaurantRepository,
    filters: RestaurantFilter,
    query: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[Restaurant]:
    results = repo.get_with_filters(filters)

    if filters.open_now:
        results = filter_open_now(results, now)

    return filter_by_text(results, query)
