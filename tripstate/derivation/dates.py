"""Date helpers shared by the derivations.

Trip dates arrive as user-entered strings. Anything that does not parse as an
ISO date is treated as missing so every derivation stays total and
deterministic.
"""

import logging
import math
from datetime import date, timedelta

from tripstate.models.common import Season

logger = logging.getLogger(__name__)

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_iso_date(value: str | None) -> date | None:
    """Parse ``YYYY-MM-DD`` (or the date part of an ISO datetime).

    Returns:
        The date, or None when the value is missing or malformed
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        logger.debug("Ignoring malformed date %r", value)
        return None


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like ``Math.round``."""
    return math.floor(value + 0.5)


def percent(part: int, total: int) -> int:
    """Whole percentage of ``part`` over ``total`` (0 when total is 0)."""
    if total <= 0:
        return 0
    return round_half_up(100 * part / total)


def trip_dates(start_date: str | None, end_date: str | None) -> list[str]:
    """Every calendar date from start to end inclusive, as ISO strings."""
    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if start is None or end is None:
        return []

    return [(start + timedelta(days=offset)).isoformat() for offset in range((end - start).days + 1)]


def duration_days(start_date: str | None, end_date: str | None) -> int:
    """Inclusive day span of the trip (0 when dates are missing or reversed)."""
    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if start is None or end is None:
        return 0
    return max(0, (end - start).days + 1)


def season_for(start_date: str | None) -> Season:
    """Season of the start month; unknown without a usable start date."""
    start = parse_iso_date(start_date)
    if start is None:
        return Season.unknown

    month = start.month
    if 3 <= month <= 5:
        return Season.spring
    if 6 <= month <= 8:
        return Season.summer
    if 9 <= month <= 11:
        return Season.fall
    return Season.winter


def calculate_days_until(start_date: str | None, today: date | None = None) -> int:
    """Days from today until departure, never negative."""
    start = parse_iso_date(start_date)
    if start is None:
        return 0
    today = today or date.today()
    return max(0, (start - today).days)


def format_date_range(start_date: str | None, end_date: str | None) -> str:
    """Short label such as ``Jun 1-5`` or ``Jun 28-Jul 3``.

    The year is spelled out only when the trip crosses a year boundary.
    """
    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if start is None or end is None:
        return "Dates TBD"

    start_label = f"{MONTH_ABBR[start.month - 1]} {start.day}"
    if start.year != end.year:
        return f"{start_label}, {start.year}-{MONTH_ABBR[end.month - 1]} {end.day}, {end.year}"
    if start.month != end.month:
        return f"{start_label}-{MONTH_ABBR[end.month - 1]} {end.day}"
    return f"{start_label}-{end.day}"
